"""Exception and warning taxonomy.

Every error carries enough context (character, key, source) to diagnose
the failing input without re-running.
"""

from __future__ import annotations

from typing import Optional


class SecretRecoveryError(Exception):
    """Base class for all SecretRecovery errors."""


class SourceNotFound(SecretRecoveryError, FileNotFoundError):
    """The case file does not exist."""

    def __init__(self, source: str) -> None:
        super().__init__(f"case source not found: {source}")
        self.source = source


class SourceUnreadable(SecretRecoveryError):
    """The case file exists but cannot be read."""

    def __init__(self, source: str, reason: str) -> None:
        super().__init__(f"case source unreadable: {source} ({reason})")
        self.source = source


class MalformedSchema(SecretRecoveryError):
    """Required keys or structure are missing or invalid."""

    def __init__(self, source: str, detail: str) -> None:
        super().__init__(f"{source}: malformed case: {detail}")
        self.source = source
        self.detail = detail


class InvalidDigit(SecretRecoveryError, ValueError):
    """A character is outside the alphabet of its declared base."""

    def __init__(
        self,
        char: str,
        position: int,
        base: int,
        source: Optional[str] = None,
        key: Optional[str] = None,
    ) -> None:
        if char:
            msg = f"invalid digit {char!r} at position {position} for base {base}"
        else:
            msg = f"empty digit string for base {base}"
        if key is not None:
            msg = f"share {key!r}: {msg}"
        if source is not None:
            msg = f"{source}: {msg}"
        super().__init__(msg)
        self.char = char
        self.position = position
        self.base = base
        self.source = source
        self.key = key


class DegenerateInput(SecretRecoveryError, ZeroDivisionError):
    """Two interpolation nodes share the same x-coordinate."""

    def __init__(self, x: int) -> None:
        super().__init__(f"duplicate x-coordinate {x}: Lagrange denominator is zero")
        self.x = x


class SubsetLimitExceeded(SecretRecoveryError):
    """Robust mode would enumerate more subsets than allowed."""

    def __init__(self, total: int, limit: int) -> None:
        super().__init__(f"{total} subsets exceeds robust-mode limit of {limit}")
        self.total = total
        self.limit = limit


class UnexpectedDenominator(UserWarning):
    """Interpolation at zero did not resolve to an integer."""
