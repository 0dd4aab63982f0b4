"""Rendering subpackage.

Turns immutable ``State`` snapshots into something a person can look at. The
simulation only ever talks to the :class:`grid_shooter.renderer.presenter.Presenter`
protocol; concrete presenters decide how the grid is drawn:

* :mod:`grid_shooter.renderer.presenter`: protocol, status line and a headless
  text presenter.
* :mod:`grid_shooter.renderer.terminal`: curses presenter with health-based
  player colors.
* :mod:`grid_shooter.renderer.image`: Pillow + NumPy rasterizer used by the
  Gymnasium environment.
"""
