"""Player movement system.

Attempts to move the player by ``(dx, dy)``:

1. The destination must lie strictly inside the border ring.
2. The destination tile must be empty or a pickup; walls and the projectile
    marker block the move.

An accepted move clears the old cell, moves the player, applies the pickup's
health change (health ``+1``, hazard ``-1``), consumes the pickup and stamps
the player marker on the new cell. A rejected move returns the input state
unchanged; invalid input is never surfaced as an error.
"""

import logging
from dataclasses import replace

from grid_shooter.components import Position
from grid_shooter.state import State
from grid_shooter.types import WALKABLE_TILES, Tile
from grid_shooter.utils.grid import is_in_interior, set_tile, tile_at

logger = logging.getLogger(__name__)

PICKUP_HEALTH_DELTA = {
    Tile.HEALTH_PICKUP: 1,
    Tile.HAZARD_PICKUP: -1,
}


def movement_system(state: State, dx: int, dy: int) -> State:
    """Move the player one step if allowed.

    Args:
        state (State): Current state.
        dx (int): Horizontal step.
        dy (int): Vertical step.

    Returns:
        State: Same state if blocked, otherwise the state after the move and
        any pickup it triggered.
    """
    player = state.player
    next_pos = player.position + Position(dx, dy)

    if not is_in_interior(state, next_pos):
        logger.debug("Move to %s rejected: outside interior", next_pos)
        return state

    destination = tile_at(state, next_pos)
    if destination not in WALKABLE_TILES:
        logger.debug("Move to %s rejected: blocked by %r", next_pos, destination)
        return state

    state = set_tile(state, player.position, Tile.EMPTY)
    player = player.move(dx, dy)

    delta = PICKUP_HEALTH_DELTA.get(destination)
    if delta is not None:
        player = player.adjust_health(delta)
        state = set_tile(state, next_pos, Tile.EMPTY)
        logger.debug(
            "Picked up %s at %s, health now %d", destination.name, next_pos, player.health
        )

    state = replace(state, player=player)
    return set_tile(state, player.position, Tile.PLAYER)
