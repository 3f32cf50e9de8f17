"""
exactrref: exact rational arithmetic, rational matrices, and a traced
row reducer to reduced row echelon form.
"""

from .errors import DivisionByZero, ParseError, DimensionError

# Arithmetic
from .arith.intmath import gcd, lcm, gcd_array, lcm_array
from .arith.rational import (
    Rational,
    add_fractions,
    subtract_fractions,
    multiply_fractions,
    divide_fractions,
)

# Matrices
from .matrix.matrix import Matrix
from .matrix.indexing import IndexedMatrix, first_nonzero_index, nonzero_values, absolute_values
from .matrix.format import pad_string, array_to_string, object_array_to_string

# Reduction
from .reduce.trace import INITIAL, SCALED, SHEARED, REDUCED, Trace, TraceEntry, format_trace
from .reduce.rref import reduce_to_rref
from .reduce.analysis import rref, pivot_columns, exact_rank, is_rref

# Visualization
from .viz.draw import draw_trace

__all__ = [
    # Errors
    "DivisionByZero",
    "ParseError",
    "DimensionError",
    # Arithmetic
    "gcd",
    "lcm",
    "gcd_array",
    "lcm_array",
    "Rational",
    "add_fractions",
    "subtract_fractions",
    "multiply_fractions",
    "divide_fractions",
    # Matrices
    "Matrix",
    "IndexedMatrix",
    "first_nonzero_index",
    "nonzero_values",
    "absolute_values",
    "pad_string",
    "array_to_string",
    "object_array_to_string",
    # Reduction
    "INITIAL",
    "SCALED",
    "SHEARED",
    "REDUCED",
    "Trace",
    "TraceEntry",
    "format_trace",
    "reduce_to_rref",
    "rref",
    "pivot_columns",
    "exact_rank",
    "is_rref",
    # Viz
    "draw_trace",
]
