"""Common type aliases, enumerations and fixed dimensions.

``Tile`` values double as the display glyph of each cell so the grid can be
printed row by row without a lookup table.
"""

from enum import StrEnum, auto
from typing import Callable, TYPE_CHECKING

from pyrsistent.typing import PVector

if TYPE_CHECKING:
    from grid_shooter.levels.grid import Level


WIDTH = 64
HEIGHT = 32
MAX_HEALTH = 2


class Tile(StrEnum):
    """Content of a single grid cell (value is the glyph)."""

    EMPTY = " "
    WALL_HORIZONTAL = "-"
    WALL_VERTICAL = "|"
    HEALTH_PICKUP = "+"
    HAZARD_PICKUP = "%"
    PLAYER = "@"
    PROJECTILE = "*"


# Tiles the player may step onto
WALKABLE_TILES = frozenset({Tile.EMPTY, Tile.HEALTH_PICKUP, Tile.HAZARD_PICKUP})


class HealthAppearance(StrEnum):
    """Player look derived from current health (used by presenters)."""

    FULL = auto()
    DAMAGED = auto()
    DEAD = auto()


Grid = PVector[PVector[Tile]]

MapLoader = Callable[["Level"], None]
