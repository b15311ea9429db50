"""The player's position, view direction and camera plane."""

from __future__ import annotations

from dataclasses import dataclass

from cubed.worldmap import START_CELLS, GameMap

MOVE_SPEED = 0.05
ROT_SPEED = 0.03

# dir_x, dir_y, plane_x, plane_y for each start letter.
_DIRECTIONS = {
    "N": (0.0, -1.0, 0.66, 0.0),
    "S": (0.0, 1.0, -0.66, 0.0),
    "E": (1.0, 0.0, 0.0, 0.66),
    "W": (-1.0, 0.0, 0.0, -0.66),
}


@dataclass
class Player:
    """Position in map cells, view direction and field-of-view plane."""

    x: float
    y: float
    dir_x: float
    dir_y: float
    plane_x: float
    plane_y: float
    move_speed: float = MOVE_SPEED
    rot_speed: float = ROT_SPEED


def spawn_player(game_map: GameMap) -> Player:
    """Place a player at the centre of the first start cell of the map."""
    for y, row in enumerate(game_map.grid):
        for x, cell in enumerate(row):
            if cell in START_CELLS:
                dir_x, dir_y, plane_x, plane_y = _DIRECTIONS[cell]
                return Player(x + 0.5, y + 0.5, dir_x, dir_y, plane_x, plane_y)
    raise ValueError("the map has no player start cell (N, S, E or W)")