"""Case file loading.

A case file is a flat JSON object::

    {
      "keys": {"n": 4, "k": 3},
      "1": {"base": "10", "value": "4"},
      "2": {"base": "2",  "value": "111"},
      ...
    }

Every non-``keys`` entry is a share keyed by its decimal x-coordinate.
The structure is validated with pydantic, then each value is decoded into
a ``Point``.  Points keep their order of appearance.
"""

from __future__ import annotations

import json
import logging
import os
from typing import Any, Dict, List, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from secretrecovery.config import MAX_BASE, MIN_BASE
from secretrecovery.crypto.lagrange import Point
from secretrecovery.crypto.radix import decode
from secretrecovery.errors import InvalidDigit, MalformedSchema, SourceNotFound, SourceUnreadable

logger = logging.getLogger(__name__)

KEYS_FIELD = "keys"


# ---------------------------------------------------------------------------
# Schema
# ---------------------------------------------------------------------------


class CaseKeys(BaseModel):
    """Sharing parameters: n shares, threshold k."""

    model_config = ConfigDict(extra="forbid")

    n: int = Field(ge=1)
    k: int = Field(ge=1)

    @model_validator(mode="after")
    def _k_within_n(self) -> "CaseKeys":
        if self.k > self.n:
            raise ValueError(f"threshold k={self.k} exceeds n={self.n}")
        return self


class ShareSpec(BaseModel):
    """One encoded share as it appears in the file."""

    model_config = ConfigDict(extra="forbid")

    base: int
    value: str = Field(min_length=1)

    @field_validator("base", mode="before")
    @classmethod
    def _decimal_base(cls, v: Any) -> int:
        if not isinstance(v, str) or not _is_decimal(v.strip()):
            raise ValueError(f"base must be a decimal string, got {v!r}")
        base = int(v)
        if base < MIN_BASE or base > MAX_BASE:
            raise ValueError(f"base {base} outside {MIN_BASE}..{MAX_BASE}")
        return base


class DecodedShare(BaseModel):
    """A share with its encoding kept for diagnostics."""

    x: int
    base: int
    raw: str
    y: int


class Case(BaseModel):
    """A decoded case, ready for interpolation."""

    source: str
    n: int
    k: int
    points: List[Point]
    shares: List[DecodedShare] = []

    @property
    def degree(self) -> int:
        return self.k - 1


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------


def _is_decimal(text: str) -> bool:
    # str.isdigit() alone also accepts superscripts and non-Latin digits
    return text.isascii() and text.isdigit()


def _x_coordinate(key: str, source: str) -> int:
    if not _is_decimal(key):
        raise MalformedSchema(source, f"share key {key!r} is not a decimal x-coordinate")
    try:
        return int(key)
    except ValueError as exc:  # exceeds the int string-conversion limit
        raise MalformedSchema(source, f"share key {key[:20]!r}... is too long") from exc


def _reject_duplicates(pairs: List[Tuple[str, Any]]) -> Dict[str, Any]:
    obj: Dict[str, Any] = {}
    for key, value in pairs:
        if key in obj:
            raise ValueError(f"duplicate key {key!r}")
        obj[key] = value
    return obj


def _describe(exc: ValidationError) -> str:
    return "; ".join(
        f"{'.'.join(str(p) for p in err['loc']) or '<root>'}: {err['msg']}"
        for err in exc.errors()
    )


def parse_case(text: str, source: str = "<string>") -> Case:
    """Parse and decode case JSON *text*; *source* names it in errors."""
    try:
        raw = json.loads(text, object_pairs_hook=_reject_duplicates)
    except ValueError as exc:
        raise MalformedSchema(source, f"invalid JSON: {exc}") from exc
    if not isinstance(raw, dict):
        raise MalformedSchema(source, "top level must be an object")
    if KEYS_FIELD not in raw:
        raise MalformedSchema(source, f"missing {KEYS_FIELD!r}")

    try:
        keys = CaseKeys.model_validate(raw[KEYS_FIELD])
    except ValidationError as exc:
        raise MalformedSchema(source, f"{KEYS_FIELD}: {_describe(exc)}") from exc

    points: List[Point] = []
    shares: List[DecodedShare] = []
    seen: Dict[int, str] = {}
    for key, entry in raw.items():
        if key == KEYS_FIELD:
            continue
        x = _x_coordinate(key, source)
        if x in seen:
            raise MalformedSchema(source, f"share {key!r} repeats x={x} (already given as {seen[x]!r})")
        seen[x] = key
        try:
            spec = ShareSpec.model_validate(entry)
        except ValidationError as exc:
            raise MalformedSchema(source, f"share {key!r}: {_describe(exc)}") from exc
        try:
            y = decode(spec.value, spec.base)
        except InvalidDigit as exc:
            raise InvalidDigit(exc.char, exc.position, exc.base, source=source, key=key) from exc
        logger.debug("%s: x=%d base=%d raw=%r -> y=%d", source, x, spec.base, spec.value, y)
        points.append(Point(x, y))
        shares.append(DecodedShare(x=x, base=spec.base, raw=spec.value, y=y))

    if len(points) < keys.k:
        raise MalformedSchema(source, f"{len(points)} shares given, threshold k={keys.k} needs more")
    if len(points) != keys.n:
        logger.warning("%s: keys.n=%d but %d shares present; using the shares", source, keys.n, len(points))

    return Case(source=source, n=keys.n, k=keys.k, points=points, shares=shares)


def load_case(path: Union[str, "os.PathLike[str]"]) -> Case:
    """Read and parse the case file at *path*."""
    source = os.fspath(path)
    try:
        with open(source, encoding="utf-8") as fh:
            text = fh.read()
    except FileNotFoundError as exc:
        raise SourceNotFound(source) from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise SourceUnreadable(source, str(exc)) from exc
    return parse_case(text, source)
