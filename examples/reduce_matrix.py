#!/usr/bin/env python3
"""
Row-reduce a rational matrix and print every traced step.

Usage:
  python3 examples/reduce_matrix.py "1 2; 3 4"
  python3 examples/reduce_matrix.py --example
  python3 examples/reduce_matrix.py "2 4; 1 2" --one-based --draw trace.png
"""

from __future__ import annotations

import argparse
import logging

from exactrref import IndexedMatrix, Matrix, format_trace, is_rref, reduce_to_rref
from exactrref.utils.log import setup_logging


EXAMPLE = """
-1   0   0  1  0  0  0    0
 1  20   5  0  1  0  0   85
 2 -15  10  0  0  1  0    5
 1  -2  -6  0  0  0  1  -14
"""


def main() -> None:
    ap = argparse.ArgumentParser()
    ap.add_argument("matrix", nargs="?", help="rows separated by ';' or newlines, entries like 3 or -7/2")
    ap.add_argument("--example", action="store_true", help="reduce the 4x8 augmented example system")
    ap.add_argument("--one-based", action="store_true", help="report pivot positions 1-based")
    ap.add_argument("--draw", metavar="PNG", default=None, help="save a drawing of the trace")
    ap.add_argument("--debug", action="store_true", help="log every pivot decision to stderr")
    args = ap.parse_args()

    if args.debug:
        setup_logging(logging.getLogger("exactrref"), level="DEBUG")

    if args.example or not args.matrix:
        M = Matrix.parse(EXAMPLE)
    else:
        M = Matrix.parse(args.matrix)

    trace = reduce_to_rref(M)
    print(format_trace(trace))

    base = 1 if args.one_based else 0
    view = IndexedMatrix(M, base=base)
    pivots = [(r + base, c + base) for r, c in trace.pivots]
    print(f"pivot steps: {trace.steps}  pivots: {pivots}")
    print(f"rank: {trace.steps}  in RREF: {is_rref(M)}")
    for r in range(base, M.n_rows + base):
        lead = view.first_nonzero_in_row(r)
        if lead != -1:
            print(f"row {r}: leading one in column {lead}")

    if args.draw:
        from exactrref.viz.draw import draw_trace

        draw_trace(trace, save_path=args.draw)
        print(f"Saved trace drawing to {args.draw}")


if __name__ == "__main__":
    main()
