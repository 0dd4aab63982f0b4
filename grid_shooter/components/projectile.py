from dataclasses import dataclass, replace

from .position import Position


@dataclass(frozen=True)
class Projectile:
    """The single projectile slot.

    An absent projectile is represented by ``active=False``; the stale
    ``position`` / ``direction`` of a spent shot are kept but ignored.

    Attributes:
        position: Current cell.
        direction: Unit step applied on every advance.
        active: Whether the projectile is in flight.
    """

    position: Position = Position(0, 0)
    direction: Position = Position(0, 0)
    active: bool = False

    def advance(self) -> "Projectile":
        """Step one tile along ``direction``; no-op when inactive."""
        if not self.active:
            return self
        return replace(self, position=self.position + self.direction)

    def deactivate(self) -> "Projectile":
        return replace(self, active=False)
