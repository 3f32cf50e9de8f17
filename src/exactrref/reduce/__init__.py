from .trace import (
    INITIAL,
    SCALED,
    SHEARED,
    REDUCED,
    LABELS,
    Trace,
    TraceEntry,
    format_trace,
)
from .rref import reduce_to_rref
from .analysis import rref, pivot_columns, exact_rank, is_rref

__all__ = [
    "INITIAL",
    "SCALED",
    "SHEARED",
    "REDUCED",
    "LABELS",
    "Trace",
    "TraceEntry",
    "format_trace",
    "reduce_to_rref",
    "rref",
    "pivot_columns",
    "exact_rank",
    "is_rref",
]
