"""Positional-notation codec for bases 2..36.

Digits are ``0-9`` then ``a-z`` (case-insensitive).  Values are Python
ints, so arbitrarily long digit strings decode exactly.
"""

from __future__ import annotations

from secretrecovery.config import DIGITS, MAX_BASE, MIN_BASE
from secretrecovery.errors import InvalidDigit


def _check_base(base: int) -> None:
    if base < MIN_BASE or base > MAX_BASE:
        raise ValueError(f"Invalid base: {base} (must be {MIN_BASE}..{MAX_BASE})")


def decode(digits: str, base: int) -> int:
    """Decode *digits* written in *base* into an int."""
    _check_base(base)
    if not digits:
        raise InvalidDigit("", 0, base)
    result = 0
    for pos, ch in enumerate(digits):
        # non-ASCII letters may case-fold onto the alphabet (Kelvin sign -> k)
        d = DIGITS.find(ch.lower()) if ch.isascii() else -1
        if d < 0 or d >= base:
            raise InvalidDigit(ch, pos, base)
        result = result * base + d
    return result


def encode(value: int, base: int) -> str:
    """Encode a non-negative int in *base* (lower-case digits)."""
    _check_base(base)
    if value < 0:
        raise ValueError(f"Cannot encode negative value {value}")
    if value == 0:
        return "0"
    out = []
    while value:
        value, d = divmod(value, base)
        out.append(DIGITS[d])
    return "".join(reversed(out))
