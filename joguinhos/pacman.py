"""A small Pac-Man style game: a hero, roaming ghosts, pills and bombs."""

from __future__ import annotations

import argparse
import os
import random
import sys
from collections.abc import Iterator

from joguinhos.pacman_map import (
    DOWN,
    EMPTY,
    ENEMY,
    ENEMY_COUNT,
    EXPLODE,
    HERO,
    LEFT,
    PILL,
    RIGHT,
    UP,
    WALL_HORIZONTAL,
    WALL_VERTICAL,
    BOMB,
    GameMap,
    Position,
    load_map,
)
from joguinhos.pacman_ui import render

BLAST_RANGE = 3

_COMMANDS = frozenset({UP, DOWN, LEFT, RIGHT, EXPLODE})

_HERO_STEPS = {
    LEFT: (0, -1),
    UP: (-1, 0),
    RIGHT: (0, 1),
    DOWN: (1, 0),
}

# Ghosts draw one of four directions at random each turn.
_ENEMY_STEPS = ((0, -1), (-1, 0), (1, 0), (0, 1))

_BLAST_DIRECTIONS = ((0, 1), (0, -1), (1, 0), (-1, 0))

_CLEAR_SCREEN = "\x1b[2J\x1b[H"


def is_valid_command(key: str) -> bool:
    """Tell whether ``key`` is one of the game's commands."""
    return key in _COMMANDS


class Game:
    """The state of one game on a map."""

    def __init__(self, game_map: GameMap, rng: random.Random | None = None) -> None:
        self.map = game_map
        self.rng = rng if rng is not None else random.Random()
        (self.hero,) = game_map.locate(HERO)
        if not self.hero.located:
            raise ValueError("the map has no hero")
        self.enemies: list[Position] = game_map.locate(ENEMY, ENEMY_COUNT)
        self.has_bomb = False
        self.exploded = False

    def _blast_cells(self) -> Iterator[tuple[int, int]]:
        """Cells reached by a blast from the hero, stopping at walls and edges."""
        for dx, dy in _BLAST_DIRECTIONS:
            x, y = self.hero.x, self.hero.y
            for _ in range(BLAST_RANGE):
                x += dx
                y += dy
                if not (0 <= x < self.map.rows and 0 <= y < self.map.cols):
                    break
                if self.map[x, y] in (WALL_VERTICAL, WALL_HORIZONTAL):
                    break
                yield x, y

    def explode(self) -> None:
        """Blast the cells around the hero, killing any ghost caught in them."""
        for x, y in self._blast_cells():
            self.map[x, y] = BOMB
            self.exploded = True
            for enemy in self.enemies:
                if enemy.x == x and enemy.y == y:
                    enemy.located = False

    def clear_explosion(self) -> None:
        """Empty the cells a blast around the hero covered."""
        for x, y in self._blast_cells():
            self.map[x, y] = EMPTY
            self.exploded = False

    def command(self, key: str) -> bool:
        """Apply one key press; return whether a bomb went off."""
        if not is_valid_command(key):
            return False
        if self.exploded:
            self.clear_explosion()
        detonated = False
        if key == EXPLODE and self.has_bomb:
            self.explode()
            self.has_bomb = False
            detonated = True

        dx, dy = _HERO_STEPS.get(key, (0, 0))
        x, y = self.hero.x + dx, self.hero.y + dy
        if self.map.is_cell(PILL, x, y):
            self.has_bomb = True
        elif not self.map.is_cell(EMPTY, x, y):
            return detonated
        self.map.move(self.hero, x, y, HERO)
        return detonated

    def move_enemies(self) -> None:
        """Step every living ghost in a random direction onto an empty cell or the hero."""
        for enemy in self.enemies:
            dx, dy = self.rng.choice(_ENEMY_STEPS)
            x, y = enemy.x + dx, enemy.y + dy
            if enemy.located and (
                self.map.is_cell(EMPTY, x, y) or self.map.is_cell(HERO, x, y)
            ):
                self.map.move(enemy, x, y, ENEMY)

    def is_over(self) -> bool:
        """The game ends once every ghost is dead or the hero is caught."""
        if any(enemy.located for enemy in self.enemies):
            return not self.map.contains(HERO)
        return True


def _read_key() -> str:
    """Read one key press; an empty string means there is no more input."""
    stream = sys.stdin
    if not stream.isatty():
        return stream.read(1)
    try:
        import msvcrt
    except ImportError:
        import termios
        import tty

        fd = stream.fileno()
        saved = termios.tcgetattr(fd)
        try:
            tty.setraw(fd)
            key = os.read(fd, 1).decode(errors="ignore")
        finally:
            termios.tcsetattr(fd, termios.TCSADRAIN, saved)
    else:
        key = msvcrt.getwch()
    return "" if key == "\x03" else key


def main(argv: list[str] | None = None) -> int:
    """Play the game on a map file."""
    parser = argparse.ArgumentParser(prog="pacman", description="Play Pac-Man on a text map.")
    parser.add_argument("map", nargs="?", default="mapa.txt", help="map file to play on")
    args = parser.parse_args(argv)

    try:
        game = Game(load_map(args.map))
    except OSError:
        print("Erro na leitura do mapa")
        return 1
    except ValueError as exc:
        print(f"Erro na leitura do mapa: {exc}", file=sys.stderr)
        return 1

    out = sys.stdout
    while not game.is_over():
        out.write(render(game.map))
        out.flush()
        key = _read_key()
        if not key:
            return 0
        if game.command(key):
            out.write("\a")
        game.move_enemies()
        out.write(_CLEAR_SCREEN)

    out.write(render(game.map))
    out.flush()
    return 0