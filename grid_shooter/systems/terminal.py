"""Terminal condition systems.

``lose_system`` sets ``state.lose`` (and the game-over message) exactly once
when the player's health reaches zero. ``quit_system`` records an explicit
quit request. Both flags are side-channel indicators; the reducer returns
terminal states unchanged.
"""

import logging
from dataclasses import replace

from grid_shooter.state import State

logger = logging.getLogger(__name__)

GAME_OVER_MESSAGE = "Game Over!"


def lose_system(state: State) -> State:
    """Set ``lose`` flag if the player is dead (idempotent)."""
    if state.player.is_dead and not state.lose:
        logger.info("Player %r died on turn %d", state.name, state.turn)
        return replace(state, lose=True, message=GAME_OVER_MESSAGE)
    return state


def quit_system(state: State) -> State:
    if state.quit:
        return state
    logger.info("Player %r quit on turn %d", state.name, state.turn)
    return replace(state, quit=True)
