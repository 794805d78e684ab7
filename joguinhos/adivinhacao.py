"""Guess the secret number, with a number of attempts set by the level."""

from __future__ import annotations

import argparse
import itertools
import random
import sys
from collections.abc import Iterable, Iterator
from enum import Enum
from typing import TextIO

SECRET_RANGE = 100

_PROMPT = "Qual o numero do chute? : "


class Level(Enum):
    """Difficulty, keyed by the letter used to pick it."""

    EASY = "F"
    MEDIUM = "M"
    HARD = "D"

    @property
    def attempts(self) -> int | None:
        """Attempts allowed; None means unlimited."""
        return _ATTEMPTS[self]


_ATTEMPTS = {Level.EASY: None, Level.MEDIUM: 7, Level.HARD: 5}


class Outcome(Enum):
    """How a guess relates to the secret."""

    CORRECT = "correct"
    TOO_HIGH = "too_high"
    TOO_LOW = "too_low"


_MESSAGES = {
    Outcome.CORRECT: "\nParabens voce acertou!\n\n",
    Outcome.TOO_HIGH: "O seu chute eh maior que numero secreto!\n",
    Outcome.TOO_LOW: "O seu chute eh menor que o numero secreto!\n",
}


def compare(guess: int, secret: int) -> Outcome:
    """Judge one guess against the secret."""
    if guess == secret:
        return Outcome.CORRECT
    if guess > secret:
        return Outcome.TOO_HIGH
    return Outcome.TOO_LOW


def play(
    secret: int,
    level: Level | str,
    guesses: Iterable[int],
    output: TextIO | None = None,
) -> bool:
    """Play one game, taking guesses in order; return whether the secret was found.

    The game also ends, unwon, when the guesses run out.
    """
    out = output if output is not None else sys.stdout
    level = Level(level)
    attempts = level.attempts
    supply = iter(guesses)
    rounds = itertools.count(1) if attempts is None else range(1, attempts + 1)
    for number in rounds:
        if attempts is not None:
            out.write(f"Tentativa {number} de {attempts}\n")
        out.write(_PROMPT)
        guess = next(supply, None)
        if guess is None:
            return False
        outcome = compare(guess, secret)
        out.write(_MESSAGES[outcome])
        if outcome is Outcome.CORRECT:
            return True
    out.write("Voce perdeu!\n")
    return False


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _integers(tokens: Iterator[str]) -> Iterator[int]:
    for token in tokens:
        try:
            yield int(token)
        except ValueError:
            continue


def main(argv: list[str] | None = None) -> int:
    """Play the number guessing game."""
    parser = argparse.ArgumentParser(prog="adivinhacao", description="Guess the number.")
    parser.parse_args(argv)

    out = sys.stdout
    secret = random.Random().randrange(SECRET_RANGE)
    out.write("*************************************\n")
    out.write("* Bem-vindos ao jogo da adivinhacao *\n")
    out.write("*************************************\n")
    out.write("Qual o nivel? \n")

    tokens = _tokens(sys.stdin)
    while True:
        out.write("Facil(F), Medio(M), Dificil(D) ?\n")
        out.flush()
        token = next(tokens, None)
        if token is None:
            return 1
        try:
            level = Level(token[0])
        except ValueError:
            continue
        break

    play(secret, level, _integers(tokens), out)
    out.write("Pressione Enter para continuar. . .\n")
    out.flush()
    return 0