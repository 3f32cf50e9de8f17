"""Tests for exactrref.arith.rational."""
import math
import numbers
from fractions import Fraction

import pytest

from exactrref.arith.rational import (
    Rational,
    add_fractions,
    subtract_fractions,
    multiply_fractions,
    divide_fractions,
)
from exactrref.errors import DivisionByZero, ParseError


# --- construction / normalization ---

def test_normalizes_sign_and_terms():
    r = Rational(6, -4)
    assert (r.numerator, r.denominator) == (-3, 2)
    assert str(r) == "-3/2"


def test_zero_is_zero_over_one():
    assert (Rational(0, -5).numerator, Rational(0, -5).denominator) == (0, 1)
    assert Rational(0, 7) == Rational(0)


def test_default_denominator():
    r = Rational(5)
    assert (r.numerator, r.denominator) == (5, 1)


def test_normalization_idempotent():
    r = Rational(-3, 2)
    again = Rational(r.numerator, r.denominator)
    assert (again.numerator, again.denominator) == (r.numerator, r.denominator)


def test_zero_denominator_raises():
    with pytest.raises(DivisionByZero):
        Rational(1, 0)
    with pytest.raises(ZeroDivisionError):
        Rational(0, 0)


def test_non_integer_components_rejected():
    with pytest.raises(TypeError):
        Rational(1.5, 2)


def test_immutable():
    r = Rational(1, 2)
    with pytest.raises(AttributeError):
        r.numerator = 3


# --- arithmetic ---

def test_add_subtract_multiply_divide():
    a, b = Rational(1, 2), Rational(1, 3)
    assert a.add(b) == Rational(5, 6)
    assert a.subtract(b) == Rational(1, 6)
    assert a.multiply(b) == Rational(1, 6)
    assert a.divide(b) == Rational(3, 2)


def test_operations_return_new_values():
    a = Rational(1, 2)
    b = a.add(Rational(1, 2))
    assert a == Rational(1, 2)
    assert b == 1


def test_static_helpers():
    a, b = Rational(1, 2), Rational(1, 3)
    assert add_fractions(a, b) == Rational(5, 6)
    assert subtract_fractions(a, b) == Rational(1, 6)
    assert multiply_fractions(a, b) == Rational(1, 6)
    assert divide_fractions(a, b) == Rational(3, 2)


def test_negate_and_invert():
    assert Rational(2, 3).negate() == Rational(-2, 3)
    assert Rational(-2, 3).invert() == Rational(-3, 2)
    assert Rational(-2, 3).invert().denominator == 2


def test_divide_by_zero_raises():
    with pytest.raises(DivisionByZero):
        Rational(1, 2).divide(Rational(0))
    with pytest.raises(DivisionByZero):
        Rational(1, 2) / 0


def test_invert_zero_raises():
    with pytest.raises(DivisionByZero):
        Rational(0).invert()


def test_operators_with_int():
    r = Rational(1, 3)
    assert r + 1 == Rational(4, 3)
    assert 1 + r == Rational(4, 3)
    assert 1 - r == Rational(2, 3)
    assert r - 1 == Rational(-2, 3)
    assert 3 * r == 1
    assert 2 / Rational(4) == Rational(1, 2)
    assert -r == Rational(-1, 3)
    assert abs(Rational(-1, 3)) == r


def test_float_operand_unsupported():
    with pytest.raises(TypeError):
        Rational(1, 2) + 0.5


@pytest.mark.parametrize(
    "a,b",
    [
        (Rational(1, 2), Rational(1, 3)),
        (Rational(-7, 4), Rational(5, 6)),
        (Rational(0), Rational(-9, 2)),
        (Rational(12), Rational(1, 12)),
    ],
)
def test_round_trips(a, b):
    assert a.add(b).subtract(b) == a
    assert a.multiply(b).divide(b) == a


def test_results_stay_normalized():
    r = Rational(3, 4).multiply(Rational(-2, 9))
    assert r.denominator > 0
    assert (r.numerator, r.denominator) == (-1, 6)


# --- comparison / hashing ---

def test_ordering_is_exact():
    assert Rational(1, 3) < Rational(1, 2)
    assert Rational(-1, 2) < 0
    assert Rational(7, 2) > 3
    assert Rational(2, 4) <= Rational(1, 2)
    assert Rational(2, 4) >= Rational(1, 2)


def test_equality_with_int():
    assert Rational(4, 2) == 2
    assert Rational(1, 2) != 1
    assert Rational(0) == 0


def test_hash_consistent_with_equality():
    assert hash(Rational(3)) == hash(3)
    assert len({Rational(1, 2), Rational(2, 4), Rational(-3, -6)}) == 1


def test_bool():
    assert not Rational(0)
    assert Rational(-1, 5)


# --- conversion / text ---

def test_to_string():
    assert Rational(5).to_string() == "5"
    assert Rational(-7, 2).to_string() == "-7/2"
    assert repr(Rational(-7, 2)) == "Rational(-7, 2)"


def test_parse():
    assert Rational.parse("7/2").to_string() == "7/2"
    assert Rational.parse("5").to_string() == "5"
    assert Rational.parse(" -3 / 4 ") == Rational(-3, 4)
    assert Rational.parse("1/-2") == Rational(-1, 2)
    assert Rational.parse("+6/4") == Rational(3, 2)


@pytest.mark.parametrize("text", ["", "abc", "1/", "/2", "1.5", "1/2/3", "1 2"])
def test_parse_malformed(text):
    with pytest.raises(ParseError):
        Rational.parse(text)


def test_parse_zero_denominator():
    with pytest.raises(DivisionByZero):
        Rational.parse("3/0")


def test_coerce():
    assert Rational.coerce(3) == Rational(3)
    assert Rational.coerce("2/6") == Rational(1, 3)
    assert Rational.coerce(Fraction(3, 6)) == Rational(1, 2)
    r = Rational(1, 2)
    assert Rational.coerce(r) is r
    with pytest.raises(TypeError):
        Rational.coerce(0.5)


def test_integer_helpers():
    assert Rational(6, 3).is_integer()
    assert Rational(6, 3).as_integer() == 2
    assert not Rational(1, 3).is_integer()
    with pytest.raises(ValueError):
        Rational(1, 3).as_integer()


def test_registered_as_numbers_rational():
    assert isinstance(Rational(1, 2), numbers.Rational)


def test_real_number_conversions():
    assert float(Rational(1, 2)) == 0.5
    assert float(Rational(-7, 4)) == -1.75
    assert int(Rational(-7, 2)) == -3
    assert math.trunc(Rational(7, 2)) == 3
    assert math.floor(Rational(-7, 2)) == -4
    assert math.ceil(Rational(-7, 2)) == -3
    assert math.floor(Rational(7, 2)) == 3
    assert math.ceil(Rational(7, 2)) == 4


def test_round_half_to_even():
    assert round(Rational(5, 2)) == 2
    assert round(Rational(7, 2)) == 4
    assert round(Rational(-5, 3)) == -2
    assert round(Rational(1, 3), 2) == Rational(33, 100)
    assert isinstance(round(Rational(1, 3), 2), Rational)


def test_real_imag_conjugate():
    r = Rational(-2, 3)
    assert r.real == r
    assert r.imag == 0
    assert r.conjugate() == r


def test_mixed_fraction_arithmetic():
    r = Rational(1, 2)
    f = Fraction(1, 3)
    for value in (r + f, f + r):
        assert isinstance(value, Rational)
        assert value == Rational(5, 6)
    assert f - r == Rational(-1, 6)
    assert r - f == Rational(1, 6)
    assert f * r == Rational(1, 6)
    assert f / r == Rational(2, 3)
    assert r / f == Rational(3, 2)
    assert Fraction(1, 2) == r
    assert r == Fraction(1, 2)
    assert f < r and r > f
    assert hash(r) == hash(Fraction(1, 2))
