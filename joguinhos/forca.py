"""Hangman: guess the letters of a secret word before five misses."""

from __future__ import annotations

import argparse
import random
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import TextIO

MAX_WRONG = 4
WORDS_FILE = "palavras.txt"

_CLEAR_SCREEN = "\x1b[2J\x1b[H"


@dataclass
class Hangman:
    """One round of hangman on a secret word."""

    word: str
    guessed: set[str] = field(default_factory=set)
    wrong: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.word:
            raise ValueError("the secret word must not be empty")

    def guess(self, letter: str) -> bool:
        """Record a guess; return whether the letter is in the word.

        Every miss counts, even a letter already missed before.
        """
        if len(letter) != 1:
            raise ValueError("a guess is a single character")
        self.guessed.add(letter)
        if letter in self.word:
            return True
        self.wrong.append(letter)
        return False

    def won(self) -> bool:
        """Every letter of the word has been guessed."""
        return all(letter in self.guessed for letter in self.word)

    def lost(self) -> bool:
        """More than the allowed number of misses."""
        return len(self.wrong) > MAX_WRONG

    def board(self) -> str:
        """The word with unguessed letters shown as underscores."""
        return "".join(
            f"{letter} " if letter in self.guessed else "_ " for letter in self.word
        )


def load_words(path: str | Path) -> list[str]:
    """Read a word file: a count followed by that many words."""
    tokens = Path(path).read_text(encoding="utf-8").split()
    if not tokens:
        raise ValueError("word file is empty")
    try:
        count = int(tokens[0])
    except ValueError as exc:
        raise ValueError("word file must start with the number of words") from exc
    if count < 0:
        raise ValueError("the number of words must not be negative")
    words = tokens[1 : 1 + count]
    if len(words) != count:
        raise ValueError(f"word file declares {count} words but holds {len(words)}")
    return words


def save_words(path: str | Path, words: list[str]) -> None:
    """Write a word file in the form :func:`load_words` reads."""
    lines = [str(len(words)), *words]
    Path(path).write_text("".join(line + "\n" for line in lines), encoding="utf-8")


def choose_word(words: list[str], rng: random.Random | None = None) -> str:
    """Pick a secret word at random."""
    if not words:
        raise ValueError("there are no words to choose from")
    return (rng if rng is not None else random.Random()).choice(words)


class _Input:
    """Reads single characters and words from a stream, as a console does."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._pending = ""

    def _fill(self) -> None:
        while not self._pending.strip():
            line = self._stream.readline()
            if not line:
                raise EOFError
            self._pending = line
        self._pending = self._pending.lstrip()

    def char(self) -> str:
        self._fill()
        char, self._pending = self._pending[0], self._pending[1:]
        return char

    def word(self) -> str:
        self._fill()
        parts = self._pending.split(maxsplit=1)
        self._pending = parts[1] if len(parts) > 1 else ""
        return parts[0]


def main(argv: list[str] | None = None) -> int:
    """Play hangman with words from a word file."""
    parser = argparse.ArgumentParser(prog="forca", description="Play hangman.")
    parser.add_argument("words", nargs="?", default=WORDS_FILE, help="word file")
    args = parser.parse_args(argv)

    out = sys.stdout
    try:
        words = load_words(args.words)
        game = Hangman(choose_word(words))
    except OSError:
        print("Arquivo de palavras nao encontrado")
        return 1
    except ValueError as exc:
        print(f"Arquivo de palavras invalido: {exc}", file=sys.stderr)
        return 1

    reader = _Input(sys.stdin)
    try:
        out.write("\n")
        while not game.won() and not game.lost():
            out.write("Chutes errados : " + "".join(f"{c} " for c in game.wrong) + "\n")
            out.write(game.board() + "\n")
            out.write("Digite uma letra maiuscula: ")
            out.flush()
            game.guess(reader.char())
            out.write("\n")
            out.write(_CLEAR_SCREEN)

        if game.won():
            out.write("Parabens acertou a Palavra\n")
            out.write("Gostaria de adicionar palavra ao banco de dados?(s/n) : ")
            out.flush()
            answer = reader.char()
            out.write("\n")
            if answer in ("s", "S"):
                out.write("Digita a palavra com letras maiusculas: ")
                out.flush()
                words.append(reader.word())
                try:
                    save_words(args.words, words)
                except OSError:
                    out.write("Arquivo de palavras nao encontrado\n")
                    return 0
                out.write("\n")
                out.write("".join(word + "\n" for word in words))
        else:
            out.write("Voce perdeu!\n")
    except EOFError:
        out.write("\n")
        return 1

    out.write("Pressione Enter para continuar. . .")
    out.flush()
    sys.stdin.readline()
    out.write("\n")
    return 0