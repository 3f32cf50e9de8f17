from __future__ import annotations

import re
from typing import Iterator, List, Optional, Sequence, Tuple, Union

from exactrref.arith.rational import Rational, RationalLike, ZERO, ONE
from exactrref.errors import DimensionError, ParseError
from exactrref.matrix.format import array_to_string


_ROW_SPLIT_RE = re.compile(r"[;\n]")
_ENTRY_SPLIT_RE = re.compile(r"[,\s]+")


class Matrix:
    """
    Dense n_rows x n_cols matrix of Rational entries.

    Indices are 0-based; use IndexedMatrix for another index base.
    Entries are immutable Rational values, so rows handed out by get_row and
    snapshots made by clone never alias a cell of this matrix.

    Two construction forms:
      Matrix(2, 3)                  # zero matrix
      Matrix([[3, 1, 4], [2, 5, 6]])  # literal rows, same as Matrix.from_rows
    """

    def __init__(
        self,
        n_rows: Union[int, Sequence[Sequence[RationalLike]]],
        n_cols: Optional[int] = None,
    ):
        if isinstance(n_rows, int) and isinstance(n_cols, int):
            if n_rows < 0 or n_cols < 0:
                raise DimensionError(f"negative dimensions {n_rows}x{n_cols}")
            self._n_rows = n_rows
            self._n_cols = n_cols
            self._values: List[List[Rational]] = [[ZERO] * n_cols for _ in range(n_rows)]
        elif n_cols is None and not isinstance(n_rows, (int, str)):
            data = [list(row) for row in n_rows]
            self._n_rows = len(data)
            self._n_cols = len(data[0]) if data else 0
            self._values = [[ZERO] * self._n_cols for _ in range(self._n_rows)]
            self.set_values(data)
        else:
            raise TypeError("Matrix expects (n_rows, n_cols) or a sequence of rows")

    # ------------------------------------------------------------------
    # Alternate constructors
    # ------------------------------------------------------------------

    @classmethod
    def from_rows(cls, data: Sequence[Sequence[RationalLike]]) -> "Matrix":
        """Build from literal row data; every row must have the same length."""
        return cls(data)

    @classmethod
    def parse(cls, text: str) -> "Matrix":
        """
        Parse rows separated by newlines or ';' with entries separated by
        whitespace or commas, e.g. "1 2/3; -4 5".
        """
        rows: List[List[Rational]] = []
        for chunk in _ROW_SPLIT_RE.split(text):
            chunk = chunk.strip()
            if not chunk:
                continue
            rows.append([Rational.parse(tok) for tok in _ENTRY_SPLIT_RE.split(chunk) if tok])
        if not rows:
            raise ParseError(f"no matrix rows in {text!r}")
        return cls.from_rows(rows)

    @classmethod
    def identity(cls, n: int) -> "Matrix":
        M = cls(n, n)
        for i in range(n):
            M.set(i, i, ONE)
        return M

    # ------------------------------------------------------------------
    # Shape
    # ------------------------------------------------------------------

    @property
    def n_rows(self) -> int:
        return self._n_rows

    @property
    def n_cols(self) -> int:
        return self._n_cols

    @property
    def shape(self) -> Tuple[int, int]:
        return (self._n_rows, self._n_cols)

    def _check_row(self, row: int) -> None:
        if not isinstance(row, int) or not 0 <= row < self._n_rows:
            raise DimensionError(f"row index {row} out of range for {self._n_rows} rows")

    def _check_col(self, col: int) -> None:
        if not isinstance(col, int) or not 0 <= col < self._n_cols:
            raise DimensionError(f"column index {col} out of range for {self._n_cols} columns")

    # ------------------------------------------------------------------
    # Entry / row / column access
    # ------------------------------------------------------------------

    def get(self, row: int, col: int) -> Rational:
        self._check_row(row)
        self._check_col(col)
        return self._values[row][col]

    def set(self, row: int, col: int, value: RationalLike) -> "Matrix":
        self._check_row(row)
        self._check_col(col)
        self._values[row][col] = Rational.coerce(value)
        return self

    def get_row(self, row: int) -> List[Rational]:
        return [self.get(row, c) for c in range(self._n_cols)]

    def set_row(self, row: int, values: Sequence[RationalLike]) -> "Matrix":
        if len(values) != self._n_cols:
            raise DimensionError(f"row needs {self._n_cols} values, got {len(values)}")
        for c, v in enumerate(values):
            self.set(row, c, v)
        return self

    def get_column(self, col: int) -> List[Rational]:
        return [self.get(r, col) for r in range(self._n_rows)]

    def set_column(self, col: int, values: Sequence[RationalLike]) -> "Matrix":
        if len(values) != self._n_rows:
            raise DimensionError(f"column needs {self._n_rows} values, got {len(values)}")
        for r, v in enumerate(values):
            self.set(r, col, v)
        return self

    # ------------------------------------------------------------------
    # Elementary row operations
    # ------------------------------------------------------------------

    def swap_rows(self, a: int, b: int) -> "Matrix":
        row_a = self.get_row(a)
        row_b = self.get_row(b)
        self.set_row(a, row_b)
        self.set_row(b, row_a)
        return self

    def scale_row(self, row: int, scalar: RationalLike) -> "Matrix":
        """row := scalar * row"""
        s = Rational.coerce(scalar)
        self.set_row(row, [x * s for x in self.get_row(row)])
        return self

    def shear_row(self, target: int, source: int, scalar: RationalLike) -> "Matrix":
        """row[target] := row[target] + scalar * row[source]"""
        s = Rational.coerce(scalar)
        sheared = self.get_row(target)
        shearing = self.get_row(source)
        self.set_row(target, [x + s * y for x, y in zip(sheared, shearing)])
        return self

    # ------------------------------------------------------------------
    # Bulk assignment / copying
    # ------------------------------------------------------------------

    def fill(self, value: RationalLike) -> "Matrix":
        v = Rational.coerce(value)
        for r in range(self._n_rows):
            self._values[r] = [v] * self._n_cols
        return self

    def set_values(self, data: Sequence[Sequence[RationalLike]]) -> "Matrix":
        """Overwrite every entry from row data of exactly this matrix's shape."""
        if len(data) != self._n_rows:
            raise DimensionError(f"expected {self._n_rows} rows, got {len(data)}")
        for r, row in enumerate(data):
            if len(row) != self._n_cols:
                raise DimensionError(
                    f"row {r} has {len(row)} entries, expected {self._n_cols}"
                )
        for r, row in enumerate(data):
            self._values[r] = [Rational.coerce(v) for v in row]
        return self

    def copy_from(self, other: "Matrix") -> "Matrix":
        if other.shape != self.shape:
            raise DimensionError(f"cannot copy {other.shape} matrix into {self.shape}")
        for r in range(self._n_rows):
            self._values[r] = other.get_row(r)
        return self

    def clone(self) -> "Matrix":
        return Matrix(self._n_rows, self._n_cols).copy_from(self)

    __copy__ = clone

    def __deepcopy__(self, memo):
        return self.clone()

    def to_lists(self) -> List[List[Rational]]:
        return [self.get_row(r) for r in range(self._n_rows)]

    def __iter__(self) -> Iterator[List[Rational]]:
        return iter(self.to_lists())

    def __eq__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and self._values == other._values

    __hash__ = None  # mutable

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def max_entry_width(self) -> int:
        """Length of the longest rendered entry (0 for an empty matrix)."""
        return max((len(str(v)) for row in self._values for v in row), default=0)

    def to_string(self) -> str:
        width = self.max_entry_width()
        return "\n".join(array_to_string(row, width) for row in self._values)

    def __str__(self):
        return self.to_string()

    def __repr__(self):
        rows = ", ".join("[" + ", ".join(str(v) for v in row) + "]" for row in self._values)
        return f"Matrix([{rows}])"
