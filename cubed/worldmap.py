"""The grid of cells the player walks in."""

from __future__ import annotations

from dataclasses import dataclass

WALL = "1"
EMPTY = "0"
START_CELLS = frozenset("NSEW")

_DEFAULT_GRID = (
    "111111111",
    "100000001",
    "101000101",
    "100000001",
    "111N00111",
    "100000001",
    "101000101",
    "100000001",
    "111111111",
)


@dataclass(frozen=True)
class GameMap:
    """A map given as rows of cell characters; ``"1"`` marks a wall."""

    grid: tuple[str, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "grid", tuple(self.grid))
        if not self.grid:
            raise ValueError("a map needs at least one row")

    @property
    def width(self) -> int:
        """Length of the longest row."""
        return max(len(row) for row in self.grid)

    @property
    def height(self) -> int:
        """Number of rows."""
        return len(self.grid)

    def cell(self, x: int, y: int) -> str:
        """The character at column ``x`` of row ``y``."""
        if not 0 <= y < len(self.grid) or not 0 <= x < len(self.grid[y]):
            raise IndexError(f"cell ({x}, {y}) is outside the map")
        return self.grid[y][x]

    def is_wall(self, x: int, y: int) -> bool:
        """Whether the cell at ``(x, y)`` is a wall."""
        return self.cell(x, y) == WALL


def default_map() -> GameMap:
    """The built-in 9x9 map with the player starting north-facing."""
    return GameMap(_DEFAULT_GRID)