from __future__ import annotations

from typing import Iterable, List

from exactrref.errors import DivisionByZero


def gcd(a: int, b: int) -> int:
    """Greatest common divisor of |a| and |b| (Euclid).

    gcd(0, 0) == 0; callers dividing by the result must guard that case.
    """
    a, b = abs(a), abs(b)
    while b:
        a, b = b, a % b
    return a


def lcm(a: int, b: int) -> int:
    """a * b / gcd(a, b). The sign follows the product of the inputs."""
    g = gcd(a, b)
    if g == 0:
        raise DivisionByZero(f"lcm({a}, {b}) is undefined: gcd is 0")
    return a * b // g


def _as_list(values: Iterable[int]) -> List[int]:
    vals = list(values)
    if not vals:
        raise ValueError("expected at least one integer")
    return vals


def gcd_array(values: Iterable[int]) -> int:
    """Fold gcd over a non-empty sequence. A single element is returned as is."""
    vals = _as_list(values)
    if len(vals) == 1:
        return vals[0]
    acc = vals[0]
    for v in vals[1:]:
        acc = gcd(acc, v)
    return acc


def lcm_array(values: Iterable[int]) -> int:
    """Fold lcm over a non-empty sequence. A single element is returned as is."""
    vals = _as_list(values)
    acc = vals[0]
    for v in vals[1:]:
        acc = lcm(acc, v)
    return acc
