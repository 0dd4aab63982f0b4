from typing import Tuple

import pytest

from grid_shooter.components import Position, RIGHT
from grid_shooter.systems.movement import movement_system
from grid_shooter.types import Tile
from tests.test_utils import make_state


def test_move_into_empty_cell() -> None:
    state = make_state(player_pos=(5, 5))
    moved = movement_system(state, 1, 0)
    assert moved.player.position == Position(6, 5)
    assert moved.player.last_move == RIGHT
    assert moved.grid[5][5] == Tile.EMPTY
    assert moved.grid[5][6] == Tile.PLAYER


@pytest.mark.parametrize(
    "start, delta",
    [
        ((1, 1), (-1, 0)),
        ((1, 1), (0, -1)),
        ((10, 8), (1, 0)),
        ((10, 8), (0, 1)),
    ],
)
def test_move_onto_border_is_rejected(
    start: Tuple[int, int], delta: Tuple[int, int]
) -> None:
    state = make_state(width=12, height=10, player_pos=start)
    assert movement_system(state, *delta) == state


@pytest.mark.parametrize(
    "blocker", [Tile.WALL_HORIZONTAL, Tile.WALL_VERTICAL, Tile.PROJECTILE]
)
def test_move_onto_blocking_tile_is_rejected(blocker: Tile) -> None:
    state = make_state(player_pos=(5, 5), tiles={(6, 5): blocker})
    moved = movement_system(state, 1, 0)
    assert moved == state
    # Facing is not updated by a rejected move
    assert moved.player.last_move == state.player.last_move


def test_health_pickup_heals_and_is_consumed() -> None:
    state = make_state(player_pos=(5, 5), health=1, tiles={(5, 4): Tile.HEALTH_PICKUP})
    moved = movement_system(state, 0, -1)
    assert moved.player.health == 2
    assert moved.player.position == Position(5, 4)
    assert moved.grid[4][5] == Tile.PLAYER
    assert moved.grid[5][5] == Tile.EMPTY


def test_health_pickup_at_full_health_stays_capped() -> None:
    state = make_state(player_pos=(5, 5), health=2, tiles={(4, 5): Tile.HEALTH_PICKUP})
    moved = movement_system(state, -1, 0)
    assert moved.player.health == 2
    assert moved.grid[5][4] == Tile.PLAYER


def test_hazard_pickup_damages() -> None:
    state = make_state(player_pos=(5, 5), health=2, tiles={(5, 6): Tile.HAZARD_PICKUP})
    moved = movement_system(state, 0, 1)
    assert moved.player.health == 1
    assert moved.grid[6][5] == Tile.PLAYER


def test_pickup_is_gone_after_leaving_the_cell() -> None:
    state = make_state(player_pos=(5, 5), health=1, tiles={(6, 5): Tile.HEALTH_PICKUP})
    state = movement_system(state, 1, 0)
    state = movement_system(state, 1, 0)
    assert state.grid[5][6] == Tile.EMPTY
    assert state.grid[5][7] == Tile.PLAYER
    assert state.player.health == 2
