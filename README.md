# cubed

Building blocks for a small grid-based first-person maze explorer: a map of
walls, a player with a view direction and camera plane, movement that slides
along walls, 32-bit pixel images, XPM picture loading and a few text helpers.
Everything is pure Python with no third-party dependencies.

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `cubed.worldmap`: `GameMap` (rows of cell characters, with `width`,
  `height`, `cell(x, y)` and `is_wall(x, y)`) and `default_map()`, the
  built-in 9×9 map. `'1'` is a wall, `'0'` floor, and `N`, `S`, `E` or `W`
  marks where the player starts and which way it faces.
- `cubed.player`: `Player` and `spawn_player(game_map)`, which places the
  player at the centre of the first start cell; a map without one raises
  `ValueError`. Default speeds are 0.05 cells per step and 0.03 radians per
  turn.
- `cubed.movement`: `move_forward`, `move_strafe`, `rotate`,
  `handle_movement` and `KeyState`. Walls are checked one axis at a time, so
  the player slides along them instead of stopping.
- `cubed.images`: `Image(width, height, endian=0)`, an in-memory image of
  32-bit pixels with `put_pixel`, `get_pixel` and `to_bytes`. Pixels outside
  the image raise `IndexError`.
- `cubed.colors`: `lookup_color(name)` for X11 colour names (case-insensitive,
  `"none"` gives -1), plus `mask_shifts` and `good_color` for converting
  0xRRGGBB values to shallower visuals.
- `cubed.xpm`: `xpm_to_image(lines)` and `xpm_file_to_image(path)` build an
  `Image` from XPM data; malformed data raises `XpmError`. Helpers
  `split_words`, `find`, `find_outside_quotes`, `strip_comments` and
  `parse_color` are public too.
- `cubed.linereader`: `LineReader(source, buffer_size=42)` reads a file
  descriptor or stream line by line (`read_line()` or iteration), keeping
  each line's newline.
- `cubed.printf`: `format_printf` and `printf` for the
  `%c %s %p %d %i %u %x %X %%` conversions; other conversions or missing
  arguments raise `FormatError`. `printf` returns the character count.
- `cubed.textutil`: `atoi`, `itoa`, `split`, `strchr`, `strrchr`, `strncmp`
  and `strlcpy` with 32-bit, C-style edge cases.

## Example

```python
from cubed.worldmap import default_map
from cubed.player import spawn_player
from cubed.movement import KeyState, handle_movement

game_map = default_map()
player = spawn_player(game_map)

keys = KeyState(forward=True, turn_right=True)
for _ in range(10):
    handle_movement(player, game_map, keys)

print(player.x, player.y, player.dir_x, player.dir_y)
```

Loading a picture:

```python
from cubed.xpm import xpm_to_image

image = xpm_to_image([
    "2 1 2 1",
    ". c red",
    "# c #0000FF",
    ".#",
])
assert image.get_pixel(0, 0) == 0xFF0000
assert image.get_pixel(1, 0) == 0x0000FF
```

## What it does not do

The package has no window, no drawing of the 3D view and no command to play
the game. It provides the map, player, movement, image and file-loading
pieces; showing a view on screen and reading the keyboard are left to the
program that uses them.