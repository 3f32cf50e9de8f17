from __future__ import annotations

import logging
from typing import Optional

from exactrref.arith.intmath import gcd_array, lcm, lcm_array
from exactrref.arith.rational import Rational
from exactrref.matrix.indexing import first_nonzero_index
from exactrref.matrix.matrix import Matrix
from exactrref.reduce.trace import INITIAL, REDUCED, SCALED, SHEARED, Trace


logger = logging.getLogger(__name__)


def _clear_denominators(M: Matrix) -> None:
    """Scale every row with fractional entries by the lcm of its denominators."""
    for r in range(M.n_rows):
        dens = [v.denominator for v in M.get_row(r)]
        if dens and any(d != 1 for d in dens):
            factor = lcm_array(dens)
            logger.debug("row %d: clearing denominators, scale by %d", r, factor)
            M.scale_row(r, factor)


def _find_pivot_below(M: Matrix, pivot_row: int, pivot_col: int) -> Optional[int]:
    for r in range(pivot_row + 1, M.n_rows):
        if M.get(r, pivot_col) != 0:
            return r
    return None


def _scale_for_integer_shear(M: Matrix, pivot_row: int, pivot_col: int, leading: Rational) -> None:
    lead = leading.as_integer()
    for r in range(M.n_rows):
        if r == pivot_row:
            continue
        other = M.get(r, pivot_col)
        if other == 0:
            continue
        L = lcm(lead, other.as_integer())
        logger.debug("row %d: lcm(%d, %s) = %d", r, lead, other, L)
        M.scale_row(r, Rational(L) / other)


def _shear(M: Matrix, pivot_row: int, pivot_col: int, leading: Rational) -> None:
    for r in range(M.n_rows):
        if r == pivot_row:
            continue
        other = M.get(r, pivot_col)
        if other == 0:
            continue
        M.shear_row(r, pivot_row, -(other / leading))


def _reduce_rows(M: Matrix) -> None:
    for r in range(M.n_rows):
        row = M.get_row(r)
        if not row:
            continue
        g = gcd_array([v.as_integer() for v in row])
        if g != 0 and g != 1:
            logger.debug("row %d: dividing by gcd %d", r, g)
            M.scale_row(r, Rational(1, g))


def _has_pivot_ahead(M: Matrix, pivot_row: int, pivot_col: int) -> bool:
    """True iff some entry at or below pivot_row, at or right of pivot_col, is nonzero."""
    return any(
        M.get(r, c) != 0
        for r in range(pivot_row, M.n_rows)
        for c in range(pivot_col, M.n_cols)
    )


def _normalize_leading_ones(M: Matrix) -> bool:
    changed = False
    for r in range(M.n_rows):
        row = M.get_row(r)
        c = first_nonzero_index(row)
        if c == -1 or row[c] == 1:
            continue
        M.scale_row(r, row[c].invert())
        changed = True
    return changed


def reduce_to_rref(M: Matrix) -> Trace:
    """
    Bring M to reduced row echelon form in place using exact row operations.

    Elimination works on integer rows: the pivot column of every other row is
    scaled to the lcm with the leading entry before shearing, and each row is
    divided by the gcd of its entries afterwards, so entries stay small
    integers. The last pivot step also divides every row by its leading entry.

    Returns the Trace: one "initial" snapshot, then "scaled", "sheared" and
    "reduced" snapshots for every pivot step, so len(trace) == 1 + 3 * steps
    and the last "reduced" snapshot is the final matrix.
    """
    trace = Trace()
    trace.record(INITIAL, M)

    _clear_denominators(M)

    pivot_row, pivot_col = 0, 0
    while pivot_row < M.n_rows and pivot_col < M.n_cols:
        leading = M.get(pivot_row, pivot_col)

        if leading == 0:
            r = _find_pivot_below(M, pivot_row, pivot_col)
            if r is None:
                logger.debug("column %d: no pivot at or below row %d", pivot_col, pivot_row)
                pivot_col += 1
                continue
            logger.debug("swapping rows %d and %d", r, pivot_row)
            M.swap_rows(r, pivot_row)
            leading = M.get(pivot_row, pivot_col)

        if leading < 0:
            M.scale_row(pivot_row, -1)
            leading = -leading

        logger.debug("pivot (%d, %d) = %s", pivot_row, pivot_col, leading)
        trace.pivots.append((pivot_row, pivot_col))

        _scale_for_integer_shear(M, pivot_row, pivot_col, leading)
        trace.record(SCALED, M)

        _shear(M, pivot_row, pivot_col, leading)
        trace.record(SHEARED, M)

        _reduce_rows(M)
        pivot_row += 1
        pivot_col += 1

        # integer phases are over after the last pivot step
        if not _has_pivot_ahead(M, pivot_row, pivot_col) and _normalize_leading_ones(M):
            logger.debug("normalized leading entries to one")
        trace.record(REDUCED, M)

    return trace

