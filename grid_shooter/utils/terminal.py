"""Terminal condition helper predicates."""

from grid_shooter.state import State


def is_terminal_state(state: State) -> bool:
    """Return True if the game is over or the player quit."""
    return state.lose or state.quit
