"""Action enumerations and key bindings.

Defines the human readable :class:`Action` (string enum) consumed by
:func:`grid_shooter.step.step` and a stable integer :class:`GymAction`
mapping for Gymnasium compatibility.

``MOVE_ACTIONS`` is the canonical ordered list of movement actions; checks like
``if action in MOVE_ACTIONS`` are preferred over enum name comparisons.
"""

from enum import IntEnum, StrEnum, auto
from typing import Dict, Optional, Tuple


class Action(StrEnum):
    """String enum of player actions.

    Members:
        UP, DOWN, LEFT, RIGHT: Movement directions.
        FIRE: Launch the projectile from the cell in front of the player.
        QUIT: End the run.
        WAIT: No input this tick (the projectile still advances).
    """

    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
    FIRE = auto()
    QUIT = auto()
    WAIT = auto()


MOVE_ACTIONS = [Action.UP, Action.DOWN, Action.LEFT, Action.RIGHT]

MOVE_DELTAS: Dict[Action, Tuple[int, int]] = {
    Action.UP: (0, -1),
    Action.DOWN: (0, 1),
    Action.LEFT: (-1, 0),
    Action.RIGHT: (1, 0),
}

KEY_BINDINGS: Dict[str, Action] = {
    "w": Action.UP,
    "s": Action.DOWN,
    "a": Action.LEFT,
    "d": Action.RIGHT,
    "e": Action.FIRE,
    "q": Action.QUIT,
}


def action_for_key(key: Optional[str]) -> Action:
    """Map a key to its action. Missing or unrecognized keys mean ``WAIT``."""
    if key is None:
        return Action.WAIT
    return KEY_BINDINGS.get(key, Action.WAIT)


class GymAction(IntEnum):
    """Stable integer mapping for integration with Gymnasium ``Discrete`` spaces.

    ``QUIT`` is deliberately absent; episodes end on game over only.
    """

    UP = 0  # start at 0 for explicitness
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
    FIRE = auto()
    WAIT = auto()


GYM_TO_ACTION: Dict[GymAction, Action] = {
    GymAction.UP: Action.UP,
    GymAction.DOWN: Action.DOWN,
    GymAction.LEFT: Action.LEFT,
    GymAction.RIGHT: Action.RIGHT,
    GymAction.FIRE: Action.FIRE,
    GymAction.WAIT: Action.WAIT,
}
