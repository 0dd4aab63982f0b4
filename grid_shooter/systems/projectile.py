"""Projectile systems.

``fire_system`` spawns the single projectile in front of the player;
``projectile_system`` advances it one tile per tick and resolves collisions
against the grid. The projectile itself carries no collision knowledge.

Collision rules:

* Next cell outside the interior: the projectile is removed.
* Next cell empty: the marker moves with the projectile.
* Anything else (wall, pickup, player): the projectile is removed and the
    obstacle is left intact; shots do not consume pickups.
"""

import logging
from dataclasses import replace

from grid_shooter.components import Projectile
from grid_shooter.state import State
from grid_shooter.types import Tile
from grid_shooter.utils.grid import is_in_interior, set_tile, tile_at

logger = logging.getLogger(__name__)


def fire_system(state: State) -> State:
    """Launch the projectile from the cell in front of the player.

    Rejected (state returned unchanged) when a projectile is already in flight
    or the front cell is outside the interior or not empty. The spawn cell is
    not marked until the projectile first advances.
    """
    if state.projectile.active:
        logger.debug("Fire rejected: projectile already active")
        return state

    player = state.player
    front = player.front_position()
    if not is_in_interior(state, front) or tile_at(state, front) != Tile.EMPTY:
        logger.debug("Fire rejected: front cell %s is not free", front)
        return state

    projectile = Projectile(
        position=front,
        direction=front - player.position,
        active=True,
    )
    logger.debug("Projectile spawned at %s heading %s", front, projectile.direction)
    return replace(state, projectile=projectile)


def projectile_system(state: State) -> State:
    """Advance the active projectile by one tile, destroying it on obstruction."""
    projectile = state.projectile
    if not projectile.active:
        return state

    next_pos = projectile.position + projectile.direction
    if is_in_interior(state, next_pos) and tile_at(state, next_pos) == Tile.EMPTY:
        state = set_tile(state, projectile.position, Tile.EMPTY)
        projectile = projectile.advance()
        state = set_tile(state, projectile.position, Tile.PROJECTILE)
        return replace(state, projectile=projectile)

    logger.debug("Projectile destroyed at %s", projectile.position)
    state = _clear_marker(state, projectile)
    return replace(state, projectile=projectile.deactivate())


def _clear_marker(state: State, projectile: Projectile) -> State:
    """Blank the projectile's current cell if it still shows the projectile."""
    if tile_at(state, projectile.position) == Tile.PROJECTILE:
        return set_tile(state, projectile.position, Tile.EMPTY)
    return state
