"""Pac-Man style map: loading, querying and moving characters on the grid."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

UP = "w"
DOWN = "s"
LEFT = "a"
RIGHT = "d"
EXPLODE = "b"

HERO = "@"
ENEMY = "#"
EMPTY = "."
WALL_VERTICAL = "|"
WALL_HORIZONTAL = "-"
BOMB = "*"
PILL = "o"

ENEMY_COUNT = 2


@dataclass
class Position:
    """A character's coordinates: x is the row, y the column."""

    x: int = 0
    y: int = 0
    located: bool = False


@dataclass
class GameMap:
    """A rectangular grid of single-character cells."""

    rows: int
    cols: int
    cells: list[list[str]] = field(default_factory=list)

    def _in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.rows and 0 <= y < self.cols

    def __getitem__(self, key: tuple[int, int]) -> str:
        x, y = key
        if not self._in_bounds(x, y):
            raise IndexError(f"cell ({x}, {y}) is outside the map")
        return self.cells[x][y]

    def __setitem__(self, key: tuple[int, int], char: str) -> None:
        x, y = key
        if not self._in_bounds(x, y):
            raise IndexError(f"cell ({x}, {y}) is outside the map")
        self.cells[x][y] = char

    def is_cell(self, char: str, x: int, y: int) -> bool:
        """Tell whether the cell at (x, y) holds ``char``; cells outside the map never do."""
        return self._in_bounds(x, y) and self.cells[x][y] == char

    def move(self, position: Position, x: int, y: int, char: str) -> Position:
        """Move ``char`` from ``position`` to (x, y), leaving the origin empty."""
        self[x, y] = char
        self[position.x, position.y] = EMPTY
        position.x = x
        position.y = y
        return position

    def locate(self, char: str, count: int = 1) -> list[Position]:
        """Find the first ``count`` cells holding ``char`` in row order.

        Missing characters are reported as positions that are not located.
        """
        found = [
            Position(x, y, True)
            for x, row in enumerate(self.cells)
            for y, cell in enumerate(row)
            if cell == char
        ][:count]
        found.extend(Position() for _ in range(count - len(found)))
        return found

    def contains(self, char: str) -> bool:
        """Tell whether any cell holds ``char``."""
        return any(char in row for row in self.cells)

    def render_plain(self) -> str:
        """The map as text, one line per row."""
        return "".join("".join(row) + "\n" for row in self.cells)


def parse_map(text: str) -> GameMap:
    """Build a map from text: a row count, a column count, then one token per row."""
    tokens = text.split()
    if len(tokens) < 2:
        raise ValueError("map is missing its dimensions")
    try:
        rows, cols = int(tokens[0]), int(tokens[1])
    except ValueError as exc:
        raise ValueError("map dimensions must be integers") from exc
    if rows < 0 or cols < 0:
        raise ValueError("map dimensions must not be negative")
    lines = tokens[2 : 2 + rows]
    if len(lines) != rows:
        raise ValueError(f"map declares {rows} rows but holds {len(lines)}")
    for number, line in enumerate(lines, start=1):
        if len(line) != cols:
            raise ValueError(
                f"row {number} has {len(line)} columns, expected {cols}"
            )
    return GameMap(rows, cols, [list(line) for line in lines])


def load_map(path: str | Path) -> GameMap:
    """Read and parse a map file."""
    return parse_map(Path(path).read_text(encoding="utf-8"))