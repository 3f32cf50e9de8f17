from .intmath import gcd, lcm, gcd_array, lcm_array
from .rational import (
    Rational,
    RationalLike,
    ZERO,
    ONE,
    add_fractions,
    subtract_fractions,
    multiply_fractions,
    divide_fractions,
)

__all__ = [
    "gcd",
    "lcm",
    "gcd_array",
    "lcm_array",
    "Rational",
    "RationalLike",
    "ZERO",
    "ONE",
    "add_fractions",
    "subtract_fractions",
    "multiply_fractions",
    "divide_fractions",
]
