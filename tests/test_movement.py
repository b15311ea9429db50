import math

import pytest

from cubed.movement import KeyState, handle_movement, move_forward, move_strafe, rotate
from cubed.player import spawn_player
from cubed.worldmap import default_map


@pytest.fixture
def world():
    game_map = default_map()
    return spawn_player(game_map), game_map


def test_forward_then_back_returns(world):
    player, game_map = world
    start = (player.x, player.y)
    move_forward(player, game_map, 1.0)
    assert player.y < start[1]
    move_forward(player, game_map, -1.0)
    assert (player.x, player.y) == pytest.approx(start)


def test_wall_blocks_movement(world):
    player, game_map = world
    player.move_speed = 4.0
    start = (player.x, player.y)
    move_forward(player, game_map, 1.0)
    assert (player.x, player.y) == start


def test_strafe_right_moves_east_when_facing_north(world):
    player, game_map = world
    start_x, start_y = player.x, player.y
    move_strafe(player, game_map, 1.0)
    assert player.x > start_x
    assert player.y == start_y


def test_strafe_left_then_right_returns(world):
    player, game_map = world
    start = (player.x, player.y)
    move_strafe(player, game_map, -1.0)
    move_strafe(player, game_map, 1.0)
    assert (player.x, player.y) == pytest.approx(start)


def test_rotate_quarter_turn_faces_east(world):
    player, _ = world
    rotate(player, math.pi / 2)
    assert (player.dir_x, player.dir_y) == pytest.approx((1, 0), abs=1e-12)
    assert (player.plane_x, player.plane_y) == pytest.approx((0, 0.66), abs=1e-12)


def test_rotate_preserves_lengths(world):
    player, _ = world
    dir_len = math.hypot(player.dir_x, player.dir_y)
    plane_len = math.hypot(player.plane_x, player.plane_y)
    rotate(player, 1.234)
    assert math.hypot(player.dir_x, player.dir_y) == pytest.approx(dir_len)
    assert math.hypot(player.plane_x, player.plane_y) == pytest.approx(plane_len)


def test_no_keys_no_change(world):
    player, game_map = world
    before = (player.x, player.y, player.dir_x, player.dir_y)
    handle_movement(player, game_map, KeyState())
    assert (player.x, player.y, player.dir_x, player.dir_y) == before


def test_turn_right_then_left_restores(world):
    player, game_map = world
    before = (player.dir_x, player.dir_y, player.plane_x, player.plane_y)
    handle_movement(player, game_map, KeyState(turn_right=True))
    assert (player.dir_x, player.dir_y) != pytest.approx(before[:2])
    handle_movement(player, game_map, KeyState(turn_left=True))
    assert (player.dir_x, player.dir_y, player.plane_x, player.plane_y) == pytest.approx(before)


def test_forward_key_moves_north(world):
    player, game_map = world
    start_y = player.y
    handle_movement(player, game_map, KeyState(forward=True))
    assert player.y < start_y


def test_opposite_keys_cancel(world):
    player, game_map = world
    start = (player.x, player.y)
    handle_movement(player, game_map, KeyState(forward=True, backward=True, left=True, right=True))
    assert (player.x, player.y) == pytest.approx(start)