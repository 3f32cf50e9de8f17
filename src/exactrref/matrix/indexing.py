from __future__ import annotations

from typing import List, Sequence

from exactrref.arith.rational import Rational, RationalLike
from exactrref.matrix.matrix import Matrix


class IndexedMatrix:
    """
    View of a Matrix whose row/column indices start at `base`.

    IndexedMatrix(M, base=1).get(1, 1) is M.get(0, 0). Only the indices are
    shifted; values and storage belong to the wrapped matrix.
    """

    def __init__(self, matrix: Matrix, base: int = 1):
        self.matrix = matrix
        self.base = base

    @property
    def n_rows(self) -> int:
        return self.matrix.n_rows

    @property
    def n_cols(self) -> int:
        return self.matrix.n_cols

    def get(self, row: int, col: int) -> Rational:
        return self.matrix.get(row - self.base, col - self.base)

    def set(self, row: int, col: int, value: RationalLike) -> "IndexedMatrix":
        self.matrix.set(row - self.base, col - self.base, value)
        return self

    def get_row(self, row: int) -> List[Rational]:
        return self.matrix.get_row(row - self.base)

    def set_row(self, row: int, values: Sequence[RationalLike]) -> "IndexedMatrix":
        self.matrix.set_row(row - self.base, values)
        return self

    def get_column(self, col: int) -> List[Rational]:
        return self.matrix.get_column(col - self.base)

    def set_column(self, col: int, values: Sequence[RationalLike]) -> "IndexedMatrix":
        self.matrix.set_column(col - self.base, values)
        return self

    def swap_rows(self, a: int, b: int) -> "IndexedMatrix":
        self.matrix.swap_rows(a - self.base, b - self.base)
        return self

    def scale_row(self, row: int, scalar: RationalLike) -> "IndexedMatrix":
        self.matrix.scale_row(row - self.base, scalar)
        return self

    def shear_row(self, target: int, source: int, scalar: RationalLike) -> "IndexedMatrix":
        self.matrix.shear_row(target - self.base, source - self.base, scalar)
        return self

    def first_nonzero_in_row(self, row: int) -> int:
        return first_nonzero_index(self.get_row(row), base=self.base)

    def __str__(self):
        return str(self.matrix)

    def __repr__(self):
        return f"IndexedMatrix({self.matrix!r}, base={self.base})"


def first_nonzero_index(values: Sequence[RationalLike], base: int = 0) -> int:
    """Index (shifted by base) of the first nonzero value, or -1 if all are zero."""
    for i, v in enumerate(values):
        if v != 0:
            return i + base
    return -1


def nonzero_values(values: Sequence[RationalLike]) -> list:
    return [v for v in values if v != 0]


def absolute_values(values: Sequence[RationalLike]) -> list:
    return [abs(v) for v in values]
