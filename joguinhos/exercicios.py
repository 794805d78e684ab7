"""Short exercises: scaled random matrices, a 3x3 determinant and even/odd numbers."""

from __future__ import annotations

import argparse
import random
import sys
from collections.abc import Sequence

Matrix = list[list[float]]

CELL_RANGE = 50

_EVEN = "O valor digitado eh par!"
_ODD = "O valor digitado eh impar!"


def random_unit(rng: random.Random | None = None) -> float:
    """A random real number between 0 and 1."""
    return (rng if rng is not None else random.Random()).random()


def scale(matrix: Sequence[Sequence[float]], factor: float) -> Matrix:
    """A new matrix holding every cell of ``matrix`` multiplied by ``factor``."""
    return [[factor * cell for cell in row] for row in matrix]


def format_vector(vector: Sequence[float]) -> str:
    """The vector as one line, each value in bars with two decimals."""
    return "Alfa = " + "".join(f"|{value:.2f}|" for value in vector) + "\n"


def format_matrix(matrix: Sequence[Sequence[float]]) -> str:
    """The matrix as text, one line per row, values with two decimals."""
    return "".join(
        "| " + "".join(f"{cell:.2f} |" for cell in row) + "\n" for row in matrix
    )


def sarrus_determinant(matrix: Sequence[Sequence[int]]) -> int:
    """Determinant of a 3x3 matrix from the exercise's diagonal products.

    The secondary diagonals are taken as m01*m10*m22, m00*m12*m20 and m02*m11*m21.
    """
    if len(matrix) != 3 or any(len(row) != 3 for row in matrix):
        raise ValueError("the determinant needs a 3x3 matrix")
    m = matrix
    primary = (
        m[0][0] * m[1][1] * m[2][2]
        + m[0][1] * m[1][2] * m[2][0]
        + m[0][2] * m[1][0] * m[2][1]
    )
    secondary = (
        m[0][1] * m[1][0] * m[2][2]
        + m[0][0] * m[1][2] * m[2][0]
        + m[0][2] * m[1][1] * m[2][1]
    )
    return primary - secondary


def parity_message(number: int) -> str:
    """Say whether ``number`` is even or odd."""
    return _EVEN if number % 2 == 0 else _ODD


def _pause() -> None:
    sys.stdout.write("Pressione Enter para continuar. . .")
    sys.stdout.flush()
    sys.stdin.readline()
    sys.stdout.write("\n")


def _run_alpha(rng: random.Random) -> int:
    alpha = [random_unit(rng) for _ in range(2)]
    matrix = [[random_unit(rng) for _ in range(2)] for _ in range(2)]
    out = sys.stdout
    out.write("\n\n")
    out.write(format_vector(alpha))
    out.write("\n\n")
    out.write("Matriz A:\n")
    out.write(format_matrix(matrix))
    out.write("\n\n")
    for number, factor in enumerate(alpha, start=1):
        out.write(f"Matriz alfa{number}: \n")
        out.write(format_matrix(scale(matrix, factor)))
        out.write("\n\n")
    _pause()
    return 0


def _run_determinant(rng: random.Random) -> int:
    matrix = [[rng.randrange(CELL_RANGE) for _ in range(3)] for _ in range(3)]
    out = sys.stdout
    for i, row in enumerate(matrix):
        out.write("".join(f"Posicao [{i},{j}] = {cell} " for j, cell in enumerate(row)))
        out.write("\n")
    out.write(f"\ndeterminante = {abs(sarrus_determinant(matrix))}")
    _pause()
    return 0


def _run_parity() -> int:
    sys.stdout.write("Digite qualquer numero inteiro:")
    sys.stdout.flush()
    text = sys.stdin.readline().strip()
    try:
        number = int(text)
    except ValueError:
        print(f"\nvalor invalido: {text!r}", file=sys.stderr)
        return 1
    sys.stdout.write(parity_message(number) + "\n")
    return 0


def main(argv: list[str] | None = None) -> int:
    """Run one of the exercises."""
    parser = argparse.ArgumentParser(prog="exercicios", description="Small exercises.")
    parser.add_argument(
        "exercise",
        nargs="?",
        choices=("alfa", "determinante", "paridade"),
        default="paridade",
    )
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    args = parser.parse_args(argv)

    rng = random.Random(args.seed)
    if args.exercise == "alfa":
        return _run_alpha(rng)
    if args.exercise == "determinante":
        return _run_determinant(rng)
    return _run_parity()