"""Game configuration and startup name prompt.

``GameConfig`` collects every tunable of a run. The CLI builds one from its
arguments; tests build small ones directly.
"""

from dataclasses import dataclass
from typing import Callable, Optional

from grid_shooter.levels.grid import Level
from grid_shooter.levels.map_data import MAP_DATA_REGISTRY
from grid_shooter.types import HEIGHT, MAX_HEALTH, WIDTH

NAME_PROMPT = "Enter your name (4-8 characters): "


@dataclass(frozen=True)
class GameConfig:
    width: int = WIDTH
    height: int = HEIGHT
    max_health: int = MAX_HEALTH
    tick_delay: float = 0.008
    game_over_delay: float = 1.5
    default_name: str = "soldier_"
    name_min_length: int = 4
    name_max_length: int = 8
    seed: Optional[int] = None
    map_name: str = "default"

    def __post_init__(self) -> None:
        if self.width < 3 or self.height < 3:
            raise ValueError(
                f"Map must be at least 3x3, got {self.width}x{self.height}"
            )
        if self.max_health < 1:
            raise ValueError(f"max_health must be at least 1, got {self.max_health}")
        if self.tick_delay < 0:
            raise ValueError(f"tick_delay must not be negative, got {self.tick_delay}")
        if self.game_over_delay < 0:
            raise ValueError(
                f"game_over_delay must not be negative, got {self.game_over_delay}"
            )
        if not 0 < self.name_min_length <= self.name_max_length:
            raise ValueError(
                "Name length bounds must satisfy 0 < min <= max, got "
                f"[{self.name_min_length}, {self.name_max_length}]"
            )
        if self.map_name not in MAP_DATA_REGISTRY:
            raise ValueError(
                f"Unknown map {self.map_name!r}; choose from {sorted(MAP_DATA_REGISTRY)}"
            )

    def make_level(self) -> Level:
        return Level(
            width=self.width,
            height=self.height,
            map_loader=MAP_DATA_REGISTRY[self.map_name],
        )

    def validate_name(self, name: Optional[str]) -> str:
        """Return the first word of ``name`` if its length is within bounds.

        Anything else, including blank input, gives the default name.
        """
        words = name.split() if name is not None else []
        if not words:
            return self.default_name
        name = words[0]
        if not self.name_min_length <= len(name) <= self.name_max_length:
            return self.default_name
        return name


def prompt_player_name(
    config: GameConfig, input_fn: Callable[[str], str] = input
) -> str:
    """Ask once for a display name; invalid or missing input gives the default."""
    try:
        raw: Optional[str] = input_fn(NAME_PROMPT)
    except EOFError:
        raw = None
    return config.validate_name(raw)
