from dataclasses import replace
from typing import Any, List

import pytest

from grid_shooter import cli
from grid_shooter.state import State


class FakeWrapper:
    """Stands in for ``curses.wrapper``; finishes the game without a terminal."""

    def __init__(self, lose: bool = False) -> None:
        self.lose = lose
        self.states: List[State] = []

    def __call__(self, fn: Any, state: State, config: Any) -> State:
        self.states.append(state)
        if self.lose:
            return replace(state, lose=True, message="Game Over!")
        return replace(state, quit=True)


@pytest.fixture
def wrapper(monkeypatch: pytest.MonkeyPatch) -> FakeWrapper:
    fake = FakeWrapper()
    monkeypatch.setattr(cli.curses, "wrapper", fake)
    return fake


def test_quit_exits_zero(wrapper: FakeWrapper) -> None:
    assert cli.main(["--no-prompt", "--seed", "4"]) == 0
    state = wrapper.states[0]
    assert state.name == "soldier_"
    assert state.seed == 4
    assert (state.width, state.height) == (64, 32)


def test_game_over_exits_one(
    wrapper: FakeWrapper, capsys: pytest.CaptureFixture[str]
) -> None:
    wrapper.lose = True
    assert cli.main(["--name", "apone"]) == 1
    assert "Game Over!" in capsys.readouterr().out
    assert wrapper.states[0].name == "apone"


def test_invalid_name_falls_back(wrapper: FakeWrapper) -> None:
    cli.main(["--name", "ab"])
    assert wrapper.states[0].name == "soldier_"


def test_prompt_is_used_by_default(
    wrapper: FakeWrapper, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setattr("builtins.input", lambda prompt: "drake")
    cli.main([])
    assert wrapper.states[0].name == "drake"


def test_negative_tick_delay_is_rejected(wrapper: FakeWrapper) -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["--no-prompt", "--tick-delay", "-1"])
    assert excinfo.value.code == 2
    assert wrapper.states == []


def test_same_seed_same_start(wrapper: FakeWrapper) -> None:
    cli.main(["--no-prompt", "--seed", "9"])
    cli.main(["--no-prompt", "--seed", "9"])
    first, second = wrapper.states
    assert first.player.position == second.player.position


def test_play_passes_delays_to_loop(monkeypatch: pytest.MonkeyPatch) -> None:
    calls: List[dict] = []

    def fake_run_game(
        state: State, presenter: Any, input_source: Any, **kwargs: Any
    ) -> State:
        calls.append(kwargs)
        return state

    monkeypatch.setattr(cli, "run_game", fake_run_game)
    monkeypatch.setattr(cli, "CursesPresenter", lambda window: None)
    monkeypatch.setattr(cli, "CursesInput", lambda window: None)
    config = cli.GameConfig(tick_delay=0.02, game_over_delay=0.5)
    cli._play(object(), cli.new_game(config.make_level(), seed=1), config)
    assert calls == [{"tick_delay": 0.02, "game_over_delay": 0.5}]
