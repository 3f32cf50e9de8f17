from __future__ import annotations

import numbers
import re
from dataclasses import dataclass
from fractions import Fraction
from typing import Union

from exactrref.arith.intmath import gcd
from exactrref.errors import DivisionByZero, ParseError


_FRACTION_RE = re.compile(r"^\s*([+-]?\d+)\s*(?:/\s*([+-]?\d+)\s*)?$")


@dataclass(frozen=True, eq=False)
class Rational:
    """
    Exact fraction numerator/denominator.

    Always stored in lowest terms with a positive denominator; zero is 0/1.
    Instances are immutable, so every arithmetic operation returns a new value
    and a Rational can be shared freely between matrices.
    """

    numerator: int
    denominator: int = 1

    def __post_init__(self):
        if not (isinstance(self.numerator, int) and isinstance(self.denominator, int)):
            raise TypeError(
                f"Rational needs integer components, got "
                f"{type(self.numerator).__name__}/{type(self.denominator).__name__}"
            )
        if self.denominator == 0:
            raise DivisionByZero(f"zero denominator in {self.numerator}/0")

        n, d = self.numerator, self.denominator
        g = gcd(n, d)
        n, d = n // g, d // g
        if d < 0:
            n, d = -n, -d
        if n == 0:
            d = 1
        object.__setattr__(self, "numerator", int(n))
        object.__setattr__(self, "denominator", int(d))

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def parse(cls, text: str) -> "Rational":
        """Parse "n" or "n/d". Raises ParseError on anything else."""
        if not isinstance(text, str):
            raise ParseError(f"expected a string, got {type(text).__name__}")
        m = _FRACTION_RE.match(text)
        if m is None:
            raise ParseError(f"not a fraction: {text!r}")
        num, den = m.group(1), m.group(2)
        return cls(int(num), int(den) if den is not None else 1)

    @classmethod
    def coerce(cls, value: "RationalLike") -> "Rational":
        if isinstance(value, Rational):
            return value
        if isinstance(value, int):
            return cls(value)
        if isinstance(value, str):
            return cls.parse(value)
        if isinstance(value, numbers.Rational):
            return cls(int(value.numerator), int(value.denominator))
        raise TypeError(f"cannot convert {type(value).__name__} to Rational")

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------

    def add(self, other: "Rational | int") -> "Rational":
        o = _operand(other)
        return Rational(
            self.numerator * o.denominator + self.denominator * o.numerator,
            self.denominator * o.denominator,
        )

    def subtract(self, other: "Rational | int") -> "Rational":
        o = _operand(other)
        return Rational(
            self.numerator * o.denominator - self.denominator * o.numerator,
            self.denominator * o.denominator,
        )

    def multiply(self, other: "Rational | int") -> "Rational":
        o = _operand(other)
        return Rational(self.numerator * o.numerator, self.denominator * o.denominator)

    def divide(self, other: "Rational | int") -> "Rational":
        o = _operand(other)
        if o.numerator == 0:
            raise DivisionByZero(f"division of {self} by zero")
        return Rational(self.numerator * o.denominator, self.denominator * o.numerator)

    def negate(self) -> "Rational":
        return Rational(-self.numerator, self.denominator)

    def invert(self) -> "Rational":
        if self.numerator == 0:
            raise DivisionByZero("zero has no inverse")
        return Rational(self.denominator, self.numerator)

    def __add__(self, other):
        if not _is_operand(other):
            return NotImplemented
        return self.add(other)

    def __radd__(self, other):
        if not _is_operand(other):
            return NotImplemented
        return _operand(other).add(self)

    def __sub__(self, other):
        if not _is_operand(other):
            return NotImplemented
        return self.subtract(other)

    def __rsub__(self, other):
        if not _is_operand(other):
            return NotImplemented
        return _operand(other).subtract(self)

    def __mul__(self, other):
        if not _is_operand(other):
            return NotImplemented
        return self.multiply(other)

    def __rmul__(self, other):
        if not _is_operand(other):
            return NotImplemented
        return _operand(other).multiply(self)

    def __truediv__(self, other):
        if not _is_operand(other):
            return NotImplemented
        return self.divide(other)

    def __rtruediv__(self, other):
        if not _is_operand(other):
            return NotImplemented
        return _operand(other).divide(self)

    def __neg__(self):
        return self.negate()

    def __pos__(self):
        return self

    def __abs__(self):
        return self if self.numerator >= 0 else self.negate()

    # ------------------------------------------------------------------
    # Comparison
    # ------------------------------------------------------------------

    def _compare(self, other) -> int:
        o = _operand(other)
        lhs = self.numerator * o.denominator
        rhs = o.numerator * self.denominator
        return (lhs > rhs) - (lhs < rhs)

    def __eq__(self, other):
        if not _is_operand(other):
            return NotImplemented
        o = _operand(other)
        return self.numerator == o.numerator and self.denominator == o.denominator

    def __hash__(self):
        # same hash as the equal int or fractions.Fraction
        return hash(Fraction(self.numerator, self.denominator))

    def __lt__(self, other):
        if not _is_operand(other):
            return NotImplemented
        return self._compare(other) < 0

    def __le__(self, other):
        if not _is_operand(other):
            return NotImplemented
        return self._compare(other) <= 0

    def __gt__(self, other):
        if not _is_operand(other):
            return NotImplemented
        return self._compare(other) > 0

    def __ge__(self, other):
        if not _is_operand(other):
            return NotImplemented
        return self._compare(other) >= 0

    def __bool__(self):
        return self.numerator != 0

    # ------------------------------------------------------------------
    # Conversion
    # ------------------------------------------------------------------

    def __float__(self):
        return self.numerator / self.denominator

    def __trunc__(self):
        if self.numerator < 0:
            return -(-self.numerator // self.denominator)
        return self.numerator // self.denominator

    __int__ = __trunc__

    def __floor__(self):
        return self.numerator // self.denominator

    def __ceil__(self):
        return -(-self.numerator // self.denominator)

    def __round__(self, ndigits=None):
        # half-to-even, as fractions.Fraction
        rounded = round(Fraction(self.numerator, self.denominator), ndigits)
        if ndigits is None:
            return rounded
        return Rational.coerce(rounded)

    @property
    def real(self) -> "Rational":
        return self

    @property
    def imag(self) -> int:
        return 0

    def conjugate(self) -> "Rational":
        return self

    def is_integer(self) -> bool:
        return self.denominator == 1

    def as_integer(self) -> int:
        if self.denominator != 1:
            raise ValueError(f"{self} is not integer-valued")
        return self.numerator

    def to_string(self) -> str:
        if self.denominator == 1:
            return str(self.numerator)
        return f"{self.numerator}/{self.denominator}"

    def __str__(self):
        return self.to_string()

    def __repr__(self):
        return f"Rational({self.numerator}, {self.denominator})"


RationalLike = Union[Rational, int, str, numbers.Rational]

ZERO = Rational(0)
ONE = Rational(1)


def _is_operand(value) -> bool:
    return isinstance(value, (Rational, numbers.Rational))


def _operand(value: "Rational | int | numbers.Rational") -> Rational:
    if isinstance(value, Rational):
        return value
    if isinstance(value, int):
        return Rational(value)
    if isinstance(value, numbers.Rational):
        return Rational(int(value.numerator), int(value.denominator))
    raise TypeError(f"unsupported operand type: {type(value).__name__}")


def add_fractions(a: Rational, b: Rational) -> Rational:
    """a + b"""
    return a.add(b)


def subtract_fractions(a: Rational, b: Rational) -> Rational:
    """a - b"""
    return a.subtract(b)


def multiply_fractions(a: Rational, b: Rational) -> Rational:
    """a * b"""
    return a.multiply(b)


def divide_fractions(a: Rational, b: Rational) -> Rational:
    """a / b"""
    return a.divide(b)


numbers.Rational.register(Rational)
