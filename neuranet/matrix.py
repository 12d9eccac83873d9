"""Dense two-dimensional matrices of floats."""

from __future__ import annotations

import random

_RANDOM_LIMIT = 0.0001


class Matrix:
    """A fixed-size matrix of floats, indexed as ``m[row, col]``."""

    def __init__(self, num_rows: int, num_cols: int, randomize: bool = False) -> None:
        if num_rows < 0 or num_cols < 0:
            raise ValueError("matrix dimensions must not be negative")
        self.num_rows = num_rows
        self.num_cols = num_cols
        if randomize:
            self._values = [
                [random.uniform(-_RANDOM_LIMIT, _RANDOM_LIMIT) for _ in range(num_cols)]
                for _ in range(num_rows)
            ]
        else:
            self._values = [[0.0] * num_cols for _ in range(num_rows)]

    def _check(self, key: tuple[int, int]) -> tuple[int, int]:
        try:
            row, col = key
        except (TypeError, ValueError):
            raise TypeError("matrix indices must be a (row, col) pair") from None
        if not 0 <= row < self.num_rows or not 0 <= col < self.num_cols:
            raise IndexError(
                f"index ({row}, {col}) out of range for "
                f"{self.num_rows}x{self.num_cols} matrix"
            )
        return row, col

    def __getitem__(self, key: tuple[int, int]) -> float:
        row, col = self._check(key)
        return self._values[row][col]

    def __setitem__(self, key: tuple[int, int], value: float) -> None:
        row, col = self._check(key)
        self._values[row][col] = float(value)

    def transpose(self) -> Matrix:
        """Return a new matrix with rows and columns swapped."""
        result = Matrix(self.num_cols, self.num_rows)
        result._values = [list(column) for column in zip(*self._values)]
        if not result._values:
            result._values = [[] for _ in range(self.num_cols)]
        return result

    def copy(self) -> Matrix:
        """Return an independent copy of this matrix."""
        result = Matrix(self.num_rows, self.num_cols)
        result._values = [list(row) for row in self._values]
        return result

    def __str__(self) -> str:
        return "".join(
            f"{value:g}\t\t" for row in self._values for value in row
        )


def multiply(a: Matrix, b: Matrix) -> Matrix:
    """Return the matrix product ``a * b``."""
    if a.num_cols != b.num_rows:
        raise ValueError(
            f"cannot multiply {a.num_rows}x{a.num_cols} "
            f"by {b.num_rows}x{b.num_cols} matrix"
        )
    result = Matrix(a.num_rows, b.num_cols)
    columns = list(zip(*b._values)) if b.num_rows else [()] * b.num_cols
    result._values = [
        [sum(x * y for x, y in zip(row, column)) for column in columns]
        for row in a._values
    ]
    return result