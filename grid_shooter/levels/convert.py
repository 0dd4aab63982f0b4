from __future__ import annotations

import logging
import random
from typing import Optional

from pyrsistent import pvector

from grid_shooter.components import Player, Position
from grid_shooter.levels.grid import Coord, Level
from grid_shooter.state import State
from grid_shooter.types import MAX_HEALTH, Tile

logger = logging.getLogger(__name__)


def place_player(level: Level, rng: random.Random) -> Coord:
    """
    Pick a uniformly random empty interior cell for the player and mark it.
    Raises ValueError if the level has no empty interior cell.
    """
    candidates = level.empty_interior_cells()
    if not candidates:
        raise ValueError("Level has no empty interior cell to place the player")
    pos = rng.choice(candidates)
    level.set_tile(pos, Tile.PLAYER)
    return pos


def to_state(
    level: Level,
    player_pos: Coord,
    name: str = "soldier_",
    max_health: int = MAX_HEALTH,
    seed: Optional[int] = None,
) -> State:
    """
    Freeze a Level into an immutable State with the player at player_pos.

    Semantics:
    - The grid is copied into persistent vectors; later edits to the Level do
      not leak into the State.
    - The player cell is stamped with Tile.PLAYER.
    - The player starts at full health facing up, with no projectile in flight.
    """
    level.set_tile(player_pos, Tile.PLAYER)
    grid = pvector(pvector(row) for row in level.grid)
    return State(
        width=level.width,
        height=level.height,
        grid=grid,
        player=Player(
            position=Position(*player_pos),
            health=max_health,
            max_health=max_health,
        ),
        name=name,
        seed=seed,
    )


def new_game(
    level: Level,
    name: str = "soldier_",
    max_health: int = MAX_HEALTH,
    seed: Optional[int] = None,
) -> State:
    """
    Initialize the level, drop the player on a random empty cell and freeze it.
    The same seed always yields the same starting position.
    """
    level.initialize()
    player_pos = place_player(level, random.Random(seed))
    logger.info("New game for %r, player placed at %s (seed=%s)", name, player_pos, seed)
    return to_state(level, player_pos, name=name, max_health=max_health, seed=seed)
