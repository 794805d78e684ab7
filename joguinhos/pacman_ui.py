"""Drawing a Pac-Man map with four-line ASCII tiles."""

from __future__ import annotations

from joguinhos.pacman_map import (
    BOMB,
    EMPTY,
    ENEMY,
    HERO,
    PILL,
    WALL_HORIZONTAL,
    WALL_VERTICAL,
    GameMap,
)

TILE_HEIGHT = 4

_WALL = (
    "______",
    "|    |",
    "|    |",
    "|____|",
)

_HERO = (
    " .--. ",
    "/ _.-'",
    "\\  '-.",
    " '--' ",
)

_PILL = (
    "  .-. ",
    " //// ",
    " '-'  ",
    "      ",
)

_EMPTY = (
    "      ",
    "      ",
    "      ",
    "      ",
)

_GHOST = (
    " .-.  ",
    "| OO| ",
    "|   | ",
    "'^^^' ",
)

_BOMB = (
    " #### ",
    "######",
    "######",
    " #### ",
)

_TILES: dict[str, tuple[str, ...]] = {
    ENEMY: _GHOST,
    HERO: _HERO,
    PILL: _PILL,
    WALL_VERTICAL: _WALL,
    WALL_HORIZONTAL: _WALL,
    EMPTY: _EMPTY,
    BOMB: _BOMB,
}


def tile_rows(char: str) -> tuple[str, ...]:
    """The four text lines that draw a map cell holding ``char``."""
    try:
        return _TILES[char]
    except KeyError:
        raise KeyError(f"no tile for map character {char!r}") from None


def render(game_map: GameMap) -> str:
    """Draw the whole map; cells without a tile are left out."""
    lines = []
    for row in game_map.cells:
        tiles = [_TILES[cell] for cell in row if cell in _TILES]
        for part in range(TILE_HEIGHT):
            lines.append("".join(tile[part] for tile in tiles) + "\n")
    return "".join(lines)