"""Shamir-style K-of-N sharing over the integers.

API
---
share(secret, n, k)  -> list of Point(x_i, y_i)  with x_i = 1..n
eval_poly(coeffs, x) -> f(x)

Coefficients are non-negative random ints, so every share value is a
non-negative int and can be written in any base.
"""

from __future__ import annotations

import secrets
from typing import List

from secretrecovery.config import DEMO_COEFF_BOUND
from secretrecovery.crypto.lagrange import Point


def share(secret: int, n: int, k: int, coeff_bound: int = DEMO_COEFF_BOUND) -> List[Point]:
    """Return the points x = 1..n of an integer polynomial hiding *secret*.

    The polynomial has degree k-1, constant term *secret*, and higher
    coefficients drawn from [0, coeff_bound), so any k points recover it.
    """
    if k < 1 or k > n:
        raise ValueError(f"Invalid threshold: k={k}, n={n}")
    if secret < 0:
        raise ValueError(f"Secret must be non-negative, got {secret}")

    coeffs = [secret] + [secrets.randbelow(coeff_bound) for _ in range(k - 1)]
    return [Point(i, eval_poly(coeffs, i)) for i in range(1, n + 1)]


def eval_poly(coeffs: List[int], x: int) -> int:
    """Evaluate polynomial (Horner's method); coeffs[0] is the constant term."""
    result = 0
    for c in reversed(coeffs):
        result = result * x + c
    return result
