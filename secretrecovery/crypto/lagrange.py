"""Lagrange interpolation at x = 0 over exact fractions.

    f(0) = sum_i y_i * L_i(0),   L_i(0) = prod_{j!=i} (-x_j) / prod_{j!=i} (x_i - x_j)

The constant term of an integer polynomial sampled at integer nodes is an
integer, so the accumulated denominator is normally 1.
"""

from __future__ import annotations

import warnings
from typing import NamedTuple, Sequence

from secretrecovery.crypto import fraction
from secretrecovery.crypto.fraction import Fraction
from secretrecovery.errors import DegenerateInput, UnexpectedDenominator


class Point(NamedTuple):
    x: int
    y: int


def _check_distinct(points: Sequence[Point]) -> None:
    seen = set()
    for x, _ in points:
        if x in seen:
            raise DegenerateInput(x)
        seen.add(x)


def basis_at_zero(points: Sequence[Point], i: int) -> Fraction:
    """Lagrange basis weight L_i(0) for node *i* of *points*."""
    xi = points[i][0]
    num = 1
    den = 1
    for j, (xj, _) in enumerate(points):
        if j == i:
            continue
        num *= -xj          # (0 - x_j)
        den *= xi - xj      # (x_i - x_j)
    if den == 0:
        raise DegenerateInput(xi)
    return fraction.reduce(num, den)


def interpolate_at_zero(points: Sequence[Point]) -> Fraction:
    """Exact value at x=0 of the polynomial through *points*."""
    if not points:
        raise ValueError("Need at least one point")
    _check_distinct(points)
    total = fraction.ZERO
    for i, (_, yi) in enumerate(points):
        total = fraction.add(total, fraction.scale(basis_at_zero(points, i), yi))
    return total


def evaluate_at_zero(points: Sequence[Point]) -> int:
    """Integer secret f(0) reconstructed from *points*.

    A non-integer result is reported with an ``UnexpectedDenominator``
    warning and truncated toward zero.
    """
    value = interpolate_at_zero(points)
    if not value.is_integer:
        xs = [p.x for p in points]
        warnings.warn(
            f"interpolation over x={xs} gave {value}, denominator {value.den} (expected 1)",
            UnexpectedDenominator,
            stacklevel=2,
        )
    return value.truncate()
