"""Fixed-size 4x4 matrices of floats."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from itertools import chain, islice, repeat

SIZE = 4


def _zeros() -> list[list[float]]:
    return [[0.0] * SIZE for _ in range(SIZE)]


@dataclass
class Matrix:
    """A SIZE x SIZE matrix; operations return new matrices."""

    data: list[list[float]] = field(default_factory=_zeros)

    def __post_init__(self) -> None:
        rows = [[float(value) for value in row] for row in self.data]
        if len(rows) != SIZE or any(len(row) != SIZE for row in rows):
            raise ValueError(f"matrix must be {SIZE}x{SIZE}")
        self.data = rows

    def read(self, values: Iterable[float]) -> None:
        """Fill row by row from values, padding with zeros and ignoring extras."""
        flat = [float(v) for v in islice(chain(values, repeat(0.0)), SIZE * SIZE)]
        self.data = [flat[row * SIZE:(row + 1) * SIZE] for row in range(SIZE)]

    def format(self) -> str:
        """Render each row as fixed-width values with two decimals."""
        return "".join(
            "".join(f"{value:7.2f} " for value in row) + "\n" for row in self.data
        )

    def add(self, other: Matrix) -> Matrix:
        return Matrix(
            [[a + b for a, b in zip(mine, theirs)] for mine, theirs in zip(self.data, other.data)]
        )

    def sub(self, other: Matrix) -> Matrix:
        return Matrix(
            [[a - b for a, b in zip(mine, theirs)] for mine, theirs in zip(self.data, other.data)]
        )

    def mul(self, other: Matrix) -> Matrix:
        columns = list(zip(*other.data))
        return Matrix(
            [
                [sum((a * b for a, b in zip(row, column)), 0.0) for column in columns]
                for row in self.data
            ]
        )

    def scaled(self, scalar: float) -> Matrix:
        return Matrix([[value * scalar for value in row] for row in self.data])

    def transposed(self) -> Matrix:
        return Matrix([list(column) for column in zip(*self.data)])