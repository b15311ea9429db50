"""Moving and turning the player while keeping it out of walls."""

from __future__ import annotations

import math
from dataclasses import dataclass

from cubed.player import Player
from cubed.worldmap import GameMap


@dataclass
class KeyState:
    """Which movement keys are currently held."""

    forward: bool = False
    left: bool = False
    backward: bool = False
    right: bool = False
    turn_left: bool = False
    turn_right: bool = False


def _step(player: Player, game_map: GameMap, new_x: float, new_y: float) -> None:
    # Each axis is checked on its own so the player slides along walls.
    if not game_map.is_wall(int(new_x), int(player.y)):
        player.x = new_x
    if not game_map.is_wall(int(player.x), int(new_y)):
        player.y = new_y


def move_forward(player: Player, game_map: GameMap, direction: float) -> None:
    """Move along the view direction; a negative ``direction`` moves back."""
    distance = player.move_speed * direction
    _step(player, game_map, player.x + player.dir_x * distance, player.y + player.dir_y * distance)


def move_strafe(player: Player, game_map: GameMap, direction: float) -> None:
    """Move sideways; positive ``direction`` goes right, negative left."""
    distance = player.move_speed * direction
    _step(player, game_map, player.x - player.dir_y * distance, player.y + player.dir_x * distance)


def rotate(player: Player, angle: float) -> None:
    """Turn the view direction and camera plane by ``angle`` radians."""
    cos_a, sin_a = math.cos(angle), math.sin(angle)
    player.dir_x, player.dir_y = (
        player.dir_x * cos_a - player.dir_y * sin_a,
        player.dir_x * sin_a + player.dir_y * cos_a,
    )
    player.plane_x, player.plane_y = (
        player.plane_x * cos_a - player.plane_y * sin_a,
        player.plane_x * sin_a + player.plane_y * cos_a,
    )


def handle_movement(player: Player, game_map: GameMap, keys: KeyState) -> None:
    """Apply one frame of movement for the keys that are held."""
    if keys.forward:
        move_forward(player, game_map, 1.0)
    if keys.left:
        move_strafe(player, game_map, -1.0)
    if keys.backward:
        move_forward(player, game_map, -1.0)
    if keys.right:
        move_strafe(player, game_map, 1.0)
    if keys.turn_left:
        rotate(player, -player.rot_speed)
    if keys.turn_right:
        rotate(player, player.rot_speed)