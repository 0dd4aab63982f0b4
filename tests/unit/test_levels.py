import random

import pytest

from grid_shooter.levels.convert import new_game, place_player, to_state
from grid_shooter.levels.grid import Level
from grid_shooter.levels.map_data import (
    DEFAULT_MAP_DATA,
    MAP_DATA_REGISTRY,
    default_map_loader,
    map_data_loader,
)
from grid_shooter.types import HEIGHT, WIDTH, Tile
from tests.test_utils import border_is_intact, count_tiles


def test_initialize_lays_border_and_blank_interior() -> None:
    level = Level(width=6, height=4)
    level.initialize()
    assert level.grid[0] == [Tile.WALL_HORIZONTAL] * 6
    assert level.grid[3] == [Tile.WALL_HORIZONTAL] * 6
    assert level.grid[1] == [
        Tile.WALL_VERTICAL,
        Tile.EMPTY,
        Tile.EMPTY,
        Tile.EMPTY,
        Tile.EMPTY,
        Tile.WALL_VERTICAL,
    ]


def test_default_dimensions() -> None:
    level = Level()
    assert (level.width, level.height) == (WIDTH, HEIGHT) == (64, 32)


def test_map_loader_runs_after_border() -> None:
    seen = []

    def loader(level: Level) -> None:
        seen.append(level.tile_at((0, 0)))
        level.set_tile((2, 2), Tile.HEALTH_PICKUP)

    level = Level(width=6, height=5, map_loader=loader)
    level.initialize()
    assert seen == [Tile.WALL_HORIZONTAL]
    assert level.tile_at((2, 2)) == Tile.HEALTH_PICKUP


def test_map_data_loader_skips_cells_outside_interior() -> None:
    loader = map_data_loader(
        [((0, 0), Tile.HAZARD_PICKUP), ((1, 1), Tile.HAZARD_PICKUP), ((40, 1), Tile.HAZARD_PICKUP)]
    )
    level = Level(width=5, height=5, map_loader=loader)
    level.initialize()
    assert level.tile_at((0, 0)) == Tile.WALL_HORIZONTAL
    assert level.tile_at((1, 1)) == Tile.HAZARD_PICKUP


def test_default_map_data_lies_in_interior() -> None:
    level = Level(map_loader=default_map_loader)
    level.initialize()
    for pos, tile in DEFAULT_MAP_DATA:
        assert level.is_interior(pos)
        assert level.tile_at(pos) == tile


def test_registry_contains_builtin_maps() -> None:
    assert set(MAP_DATA_REGISTRY) == {"default", "empty"}


def test_level_rejects_out_of_bounds_access() -> None:
    level = Level(width=4, height=4)
    with pytest.raises(IndexError):
        level.tile_at((4, 0))
    with pytest.raises(IndexError):
        level.set_tile((-1, 2), Tile.EMPTY)


def test_level_rejects_tiny_size() -> None:
    with pytest.raises(ValueError):
        Level(width=2, height=10)


def test_place_player_picks_empty_interior_cell() -> None:
    level = Level(width=8, height=6, map_loader=default_map_loader)
    level.initialize()
    pos = place_player(level, random.Random(7))
    assert level.is_interior(pos)
    assert level.tile_at(pos) == Tile.PLAYER


def test_place_player_is_deterministic_for_seed() -> None:
    def placed(seed: int) -> tuple[int, int]:
        level = Level(map_loader=default_map_loader)
        level.initialize()
        return place_player(level, random.Random(seed))

    assert placed(42) == placed(42)


def test_place_player_fails_on_full_map() -> None:
    level = Level(width=3, height=3)
    level.initialize()
    level.set_tile((1, 1), Tile.HAZARD_PICKUP)
    with pytest.raises(ValueError):
        place_player(level, random.Random(0))


def test_to_state_copies_grid() -> None:
    level = Level(width=6, height=5)
    level.initialize()
    state = to_state(level, (2, 2), name="alpha")
    level.set_tile((3, 3), Tile.HAZARD_PICKUP)
    assert state.grid[3][3] == Tile.EMPTY
    assert state.grid[2][2] == Tile.PLAYER
    assert state.player.position.x == 2 and state.player.position.y == 2
    assert state.name == "alpha"
    assert not state.projectile.active


def test_new_game_builds_bordered_state_with_one_player() -> None:
    state = new_game(Level(map_loader=default_map_loader), seed=3)
    assert (state.width, state.height) == (64, 32)
    assert border_is_intact(state)
    assert count_tiles(state, Tile.PLAYER) == 1
    assert state.grid[state.player.position.y][state.player.position.x] == Tile.PLAYER
    assert state.seed == 3
    assert state.turn == 0
