"""Terminal top-down shooter built around a pure ``step`` reducer.

The simulation core lives in :mod:`grid_shooter.step` and operates on the
frozen :class:`grid_shooter.state.State` snapshot. Presentation and keyboard
polling are injected collaborators (:mod:`grid_shooter.renderer`,
:mod:`grid_shooter.input`) driven by :func:`grid_shooter.game.run_game`.
"""

__version__ = "0.1.0"
