"""Command line entry point (``grid-shooter`` / ``python -m grid_shooter``)."""

import argparse
import curses
import logging
from dataclasses import replace
from typing import Any, List, Optional

from grid_shooter.config import GameConfig, prompt_player_name
from grid_shooter.game import run_game
from grid_shooter.input import CursesInput
from grid_shooter.levels.convert import new_game
from grid_shooter.levels.map_data import MAP_DATA_REGISTRY
from grid_shooter.renderer.terminal import CursesPresenter
from grid_shooter.state import State

logger = logging.getLogger(__name__)

TITLE = "Shooter - Control Mission Deployment"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="grid-shooter",
        description=f"{TITLE}. Move with WASD, fire with E, quit with Q.",
    )
    parser.add_argument(
        "--name",
        default=None,
        help="Display name (4-8 characters); skips the startup prompt.",
    )
    parser.add_argument(
        "--no-prompt",
        action="store_true",
        help="Do not ask for a name; use the default one.",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for the player's starting position.",
    )
    parser.add_argument(
        "--tick-delay",
        type=float,
        default=GameConfig.tick_delay,
        help="Seconds to sleep between ticks (default: %(default)s).",
    )
    parser.add_argument(
        "--map",
        dest="map_name",
        choices=sorted(MAP_DATA_REGISTRY),
        default="default",
        help="Pickup layout to load.",
    )
    parser.add_argument(
        "--log-file",
        default=None,
        help="Write log records to this file (the terminal belongs to the game).",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level used with --log-file (default: %(default)s).",
    )
    return parser


def _configure_logging(log_file: Optional[str], level: str) -> None:
    if log_file is None:
        return
    logging.basicConfig(
        filename=log_file,
        level=getattr(logging, level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _play(window: Any, state: State, config: GameConfig) -> State:
    presenter = CursesPresenter(window)
    return run_game(
        state,
        presenter,
        CursesInput(window),
        tick_delay=config.tick_delay,
        game_over_delay=config.game_over_delay,
    )


def main(argv: Optional[List[str]] = None) -> int:
    """Run one game. Returns 0 on quit and 1 on game over."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.log_file, args.log_level)

    try:
        config = replace(
            GameConfig(),
            seed=args.seed,
            tick_delay=args.tick_delay,
            map_name=args.map_name,
        )
    except ValueError as exc:
        parser.error(str(exc))

    if args.name is not None:
        name = config.validate_name(args.name)
    elif args.no_prompt:
        name = config.default_name
    else:
        name = prompt_player_name(config, input)

    state = new_game(
        config.make_level(),
        name=name,
        max_health=config.max_health,
        seed=config.seed,
    )
    final = curses.wrapper(_play, state, config)

    if final.lose:
        print(final.message or "Game Over!")
        return 1
    return 0
