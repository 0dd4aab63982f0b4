"""Player component.

The player is a value object: every operation returns a new ``Player`` and
systems store the result back into the :class:`grid_shooter.state.State`.
None of the methods look at the grid; the movement system validates
destinations before calling :meth:`Player.move`.
"""

from dataclasses import dataclass, replace

from grid_shooter.types import MAX_HEALTH
from grid_shooter.utils.health import clamp_health
from .position import Position


UP = Position(0, -1)
DOWN = Position(0, 1)
LEFT = Position(-1, 0)
RIGHT = Position(1, 0)

DIRECTION_SYMBOLS = {
    RIGHT: ">",
    LEFT: "<",
    DOWN: "V",
}
UP_SYMBOL = "^"


@dataclass(frozen=True)
class Player:
    """Controllable actor.

    Attributes:
        position: Current cell (kept inside the interior by the movement system).
        health: Hit points in ``[0, max_health]``.
        last_move: Direction of the most recent move; starts facing up.
        max_health: Upper clamp for ``health``.
    """

    position: Position
    health: int = MAX_HEALTH
    last_move: Position = UP
    max_health: int = MAX_HEALTH

    def move(self, dx: int, dy: int) -> "Player":
        """Translate by ``(dx, dy)`` and face that way. No validation."""
        delta = Position(dx, dy)
        return replace(self, position=self.position + delta, last_move=delta)

    def direction_symbol(self) -> str:
        """Glyph for the facing direction.

        Any vector other than exact right/left/down (the zero vector included)
        renders as facing up.
        """
        return DIRECTION_SYMBOLS.get(self.last_move, UP_SYMBOL)

    def front_position(self) -> Position:
        return self.position + self.last_move

    def adjust_health(self, delta: int) -> "Player":
        """Heal (positive) or damage (negative), clamped to ``[0, max_health]``."""
        return replace(
            self, health=clamp_health(self.health + delta, self.max_health)
        )

    @property
    def is_dead(self) -> bool:
        return self.health <= 0
