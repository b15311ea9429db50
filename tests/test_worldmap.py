import pytest

from cubed.worldmap import GameMap, default_map


def test_default_map_dimensions():
    game_map = default_map()
    assert (game_map.width, game_map.height) == (9, 9)


def test_default_map_has_north_start():
    game_map = default_map()
    assert game_map.cell(3, 4) == "N"
    assert not game_map.is_wall(3, 4)


def test_default_map_border_is_closed():
    game_map = default_map()
    border = [(x, 0) for x in range(game_map.width)]
    border += [(x, game_map.height - 1) for x in range(game_map.width)]
    border += [(0, y) for y in range(game_map.height)]
    border += [(game_map.width - 1, y) for y in range(game_map.height)]
    assert all(game_map.is_wall(x, y) for x, y in border)


def test_inner_cells():
    game_map = default_map()
    assert not game_map.is_wall(1, 1)
    assert game_map.is_wall(2, 2)


@pytest.mark.parametrize("x, y", [(-1, 0), (0, -1), (9, 0), (0, 9)])
def test_out_of_range_raises(x, y):
    with pytest.raises(IndexError):
        default_map().is_wall(x, y)


def test_width_is_longest_row():
    game_map = GameMap(["11", "1111", "1"])
    assert game_map.width == 4
    assert game_map.height == 3


def test_empty_map_rejected():
    with pytest.raises(ValueError):
        GameMap([])