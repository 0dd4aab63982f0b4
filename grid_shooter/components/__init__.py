"""grid_shooter.components
=========================

Aggregate import surface for the entity value objects used by the engine::

    from grid_shooter.components import Position, Player, Projectile

All components are frozen dataclasses; systems produce updated copies rather
than mutating them in place.
"""

from .position import Position
from .player import Player, UP, DOWN, LEFT, RIGHT
from .projectile import Projectile

__all__ = [
    "Position",
    "Player",
    "Projectile",
    "UP",
    "DOWN",
    "LEFT",
    "RIGHT",
]
