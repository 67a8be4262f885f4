"""Exact rational arithmetic over Python ints.

A ``Fraction`` is always in lowest terms with a positive denominator;
zero is ``0/1``.  No floats are involved anywhere.
"""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Fraction:
    num: int
    den: int = 1

    @property
    def is_integer(self) -> bool:
        return self.den == 1

    def truncate(self) -> int:
        """Integer quotient rounded toward zero."""
        q = abs(self.num) // self.den
        return q if self.num >= 0 else -q

    def __str__(self) -> str:
        return str(self.num) if self.den == 1 else f"{self.num}/{self.den}"


ZERO = Fraction(0, 1)


def reduce(num: int, den: int) -> Fraction:
    """Return num/den in lowest terms with den > 0."""
    if den == 0:
        raise ZeroDivisionError("Fraction denominator is zero")
    if den < 0:
        num, den = -num, -den
    if num == 0:
        return ZERO
    g = math.gcd(num, den)
    return Fraction(num // g, den // g)


def add(a: Fraction, b: Fraction) -> Fraction:
    """Exact sum a + b."""
    return reduce(a.num * b.den + b.num * a.den, a.den * b.den)


def scale(a: Fraction, c: int) -> Fraction:
    """Exact product a * c for an integer c."""
    return reduce(a.num * c, a.den)
