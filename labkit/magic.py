"""Read a 5x5 integer matrix and check whether it is a magic square."""

from __future__ import annotations

import re
import sys
from collections.abc import Sequence

N = 5
BUFFER_SIZE = 1024

_DELIMITERS = re.compile(r"[ \t\n]+")
_LEADING_INT = re.compile(r"[ \t\n\v\f\r]*([+-]?\d+)")


class MagicInputError(ValueError):
    """Raised when the input does not describe an N x N integer matrix."""


def parse_matrix(text: str) -> list[list[int]]:
    """Parse exactly N*N whitespace-separated integers into N rows."""
    values: list[int] = []
    for token in filter(None, _DELIMITERS.split(text)):
        match = _LEADING_INT.match(token)
        if match is None:
            raise MagicInputError("Invalid input. Expected integers only.")
        if len(values) >= N * N:
            raise MagicInputError("Too many numbers in input.")
        values.append(int(match.group(1)))
    if len(values) < N * N:
        raise MagicInputError("Not enough numbers in input.")
    return [values[row * N:(row + 1) * N] for row in range(N)]


def format_matrix(matrix: Sequence[Sequence[int]]) -> str:
    """Render the matrix with a heading, four columns per value."""
    rows = ("".join(f"{value:4d}" for value in row) + "\n" for row in matrix)
    return "Matrix:\n" + "".join(rows)


def is_magic_square(matrix: Sequence[Sequence[int]]) -> bool:
    """Tell whether all rows, columns and both diagonals share one sum."""
    size = len(matrix)
    target = sum(matrix[0])
    lines = [
        *matrix,
        *zip(*matrix),
        [row[i] for i, row in enumerate(matrix)],
        [row[size - 1 - i] for i, row in enumerate(matrix)],
    ]
    return all(sum(line) == target for line in lines)


def main(argv: Sequence[str] | None = None) -> int:
    """Prompt for a matrix on standard input and report whether it is magic."""
    print(f"Please enter {N * N} integers separated by spaces (row by row):")
    line = sys.stdin.readline(BUFFER_SIZE - 1)
    if not line:
        print("Error: Failed to read input.")
        return 1
    try:
        matrix = parse_matrix(line)
    except MagicInputError as exc:
        print(f"Error: {exc}")
        return 1
    print(format_matrix(matrix), end="")
    if is_magic_square(matrix):
        print("The matrix is a magic square.")
    else:
        print("The matrix is NOT a magic square.")
    return 0


if __name__ == "__main__":
    sys.exit(main())