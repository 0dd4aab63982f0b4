"""Health helpers."""

from grid_shooter.types import HealthAppearance


def clamp_health(value: int, max_health: int) -> int:
    """Clamp ``value`` into ``[0, max_health]``."""
    return max(0, min(value, max_health))


def health_appearance(health: int, max_health: int) -> HealthAppearance:
    """Map health to the player's look: full, damaged or dead."""
    if health <= 0:
        return HealthAppearance.DEAD
    if health >= max_health:
        return HealthAppearance.FULL
    return HealthAppearance.DAMAGED
