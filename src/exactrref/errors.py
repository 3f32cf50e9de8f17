from __future__ import annotations


class DivisionByZero(ZeroDivisionError):
    """Zero denominator, division by a zero value, or a degenerate lcm pair."""


class ParseError(ValueError):
    """Malformed fraction or matrix text."""


class DimensionError(ValueError):
    """Ragged row data, mismatched dimensions, or an index out of bounds."""


__all__ = [
    "DivisionByZero",
    "ParseError",
    "DimensionError",
]
