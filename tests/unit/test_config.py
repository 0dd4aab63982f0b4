from typing import Optional

import pytest

from grid_shooter.config import NAME_PROMPT, GameConfig, prompt_player_name
from grid_shooter.types import Tile


@pytest.mark.parametrize(
    "name, expected",
    [
        ("abcd", "abcd"),
        ("abcdefgh", "abcdefgh"),
        ("abc", "soldier_"),
        ("abcdefghi", "soldier_"),
        ("", "soldier_"),
        ("  ripley  ", "ripley"),
        ("John Smith", "John"),
        ("Jo Smith", "soldier_"),
        ("   ", "soldier_"),
        (None, "soldier_"),
    ],
)
def test_validate_name(name: Optional[str], expected: str) -> None:
    assert GameConfig().validate_name(name) == expected


def test_prompt_player_name_uses_input() -> None:
    prompts = []

    def fake_input(prompt: str) -> str:
        prompts.append(prompt)
        return "vasquez"

    assert prompt_player_name(GameConfig(), fake_input) == "vasquez"
    assert prompts == [NAME_PROMPT]


def test_prompt_player_name_handles_eof() -> None:
    def no_input(prompt: str) -> str:
        raise EOFError

    assert prompt_player_name(GameConfig(), no_input) == "soldier_"


@pytest.mark.parametrize(
    "kwargs",
    [
        {"width": 2},
        {"height": 1},
        {"max_health": 0},
        {"tick_delay": -0.1},
        {"game_over_delay": -1},
        {"name_min_length": 9},
        {"name_min_length": 0},
        {"map_name": "nowhere"},
    ],
)
def test_invalid_config_raises(kwargs: dict) -> None:
    with pytest.raises(ValueError):
        GameConfig(**kwargs)


def test_make_level_uses_selected_map() -> None:
    level = GameConfig(map_name="empty").make_level()
    level.initialize()
    assert not any(
        tile in (Tile.HEALTH_PICKUP, Tile.HAZARD_PICKUP)
        for row in level.grid
        for tile in row
    )

    level = GameConfig().make_level()
    level.initialize()
    assert any(tile == Tile.HAZARD_PICKUP for row in level.grid for tile in row)


def test_prompt_player_name_keeps_first_word() -> None:
    assert prompt_player_name(GameConfig(), lambda prompt: "John Smith") == "John"
