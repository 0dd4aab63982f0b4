"""Grid access / bounds helpers.

The simulation reads and writes cells only through :func:`tile_at` and
:func:`set_tile`. Neither checks bounds; callers validate with
:func:`is_in_interior` first.
"""

from dataclasses import replace

from grid_shooter.components import Position
from grid_shooter.state import State
from grid_shooter.types import Tile


def is_in_interior(state: State, pos: Position) -> bool:
    """Return True if ``pos`` lies strictly inside the border ring."""
    return 0 < pos.x < state.width - 1 and 0 < pos.y < state.height - 1


def tile_at(state: State, pos: Position) -> Tile:
    return state.grid[pos.y][pos.x]


def set_tile(state: State, pos: Position, tile: Tile) -> State:
    """Return a new state with the cell at ``pos`` overwritten by ``tile``."""
    row = state.grid[pos.y].set(pos.x, tile)
    return replace(state, grid=state.grid.set(pos.y, row))
