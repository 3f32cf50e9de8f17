from __future__ import annotations

from typing import List, Tuple

from exactrref.matrix.indexing import first_nonzero_index
from exactrref.matrix.matrix import Matrix
from exactrref.reduce.rref import reduce_to_rref


def rref(M: Matrix) -> Tuple[Matrix, List[int], int]:
    """Reduced row echelon form over the rationals, leaving M untouched.

    Returns (rref_matrix, pivot_columns, rank).
    """
    R = M.clone()
    trace = reduce_to_rref(R)
    pivot_cols = [col for _row, col in trace.pivots]
    return R, pivot_cols, len(pivot_cols)


def pivot_columns(M: Matrix) -> List[int]:
    _, cols, _ = rref(M)
    return cols


def exact_rank(M: Matrix) -> int:
    """Exact rank of a rational matrix via row reduction."""
    _, _, rank = rref(M)
    return rank


def is_rref(M: Matrix) -> bool:
    """
    True iff M is in reduced row echelon form: zero rows at the bottom,
    every leading entry is 1, leading ones move strictly right, and each
    pivot column is zero outside its pivot row.
    """
    last_col = -1
    seen_zero_row = False
    for r in range(M.n_rows):
        c = first_nonzero_index(M.get_row(r))
        if c == -1:
            seen_zero_row = True
            continue
        if seen_zero_row or c <= last_col or M.get(r, c) != 1:
            return False
        if any(M.get(i, c) != 0 for i in range(M.n_rows) if i != r):
            return False
        last_col = c
    return True
