#!/usr/bin/env python3
"""Case runner: load case files, reconstruct each secret, print a report.

Usage:
    python -m secretrecovery.runner [case.json ...]

With no arguments the files in ``config.CASE_FILES`` are used.  Mode,
output format and error policy come from ``config`` (env overridable).
A failing case is logged and the run moves on to the next one; the exit
status is 1 if any case failed.
"""

from __future__ import annotations

import logging
import sys
from typing import Iterable, List, Optional

from pydantic import BaseModel

from secretrecovery import config
from secretrecovery.cases.loader import Case, DecodedShare, load_case
from secretrecovery.crypto.lagrange import Point
from secretrecovery.crypto.majority import robust_secret, simple_secret
from secretrecovery.errors import SecretRecoveryError

logger = logging.getLogger(__name__)

MODES = (config.MODE_ROBUST, config.MODE_SIMPLE)
OUTPUTS = (config.OUTPUT_TEXT, config.OUTPUT_JSON)


class CaseResult(BaseModel):
    source: str
    mode: str
    n: int
    k: int
    degree: int
    points: List[Point]
    shares: List[DecodedShare] = []
    secret: int
    votes: int
    total_subsets: int
    skipped_subsets: int = 0


def solve_case(case: Case, mode: str = config.MODE) -> CaseResult:
    """Reconstruct the secret of *case* in *mode* (robust or simple)."""
    if mode == config.MODE_ROBUST:
        vote = robust_secret(case.points, case.k)
    elif mode == config.MODE_SIMPLE:
        vote = simple_secret(case.points, case.k)
    else:
        raise ValueError(f"Unknown mode {mode!r} (expected one of {MODES})")
    return CaseResult(
        source=case.source,
        mode=mode,
        n=case.n,
        k=case.k,
        degree=case.degree,
        points=case.points,
        shares=case.shares,
        secret=vote.secret,
        votes=vote.votes,
        total_subsets=vote.total_subsets,
        skipped_subsets=vote.skipped_subsets,
    )


def render_report(result: CaseResult) -> str:
    """Human-readable report for one case."""
    lines = [
        "=" * 64,
        f"  File : {result.source}",
        f"  n = {result.n}  |  k = {result.k}  |  polynomial degree = {result.degree}",
        "-" * 64,
    ]
    if result.shares:
        for s in result.shares:
            lines.append(f"  x = {s.x:2d}  base = {s.base:2d}  raw = \"{s.raw}\"")
            lines.append(f"                 decoded y = {s.y}")
    else:
        for x, y in result.points:
            lines.append(f"  x = {x:2d}  decoded y = {y}")
    if result.mode == config.MODE_ROBUST:
        lines.append("")
        lines.append(
            f"  Evaluated f(0) over all C({len(result.points)},{result.k}) = {result.total_subsets} subsets"
        )
        if result.skipped_subsets:
            lines.append(f"  Skipped {result.skipped_subsets} degenerate subsets")
        lines.append("-" * 64)
        lines.append(f"  Mode: {result.votes}/{result.total_subsets} subsets agree")
    else:
        lines.append("-" * 64)
        lines.append(f"  Using the first {result.k} shares")
    lines.append(f"  SECRET  (constant term  c = f(0))  :  {result.secret}")
    lines.append("=" * 64)
    return "\n".join(lines)


def run(
    paths: Iterable[str],
    mode: str = config.MODE,
    output: str = config.OUTPUT_FORMAT,
    continue_on_error: bool = config.CONTINUE_ON_ERROR,
) -> int:
    """Solve every case in *paths*; return the process exit status."""
    failures = 0
    for path in paths:
        try:
            result = solve_case(load_case(path), mode)
        except SecretRecoveryError as exc:
            failures += 1
            logger.error("case failed: %s", exc)
            if not continue_on_error:
                break
            continue
        if output == config.OUTPUT_JSON:
            print(result.model_dump_json())
        else:
            print(render_report(result))
    return 1 if failures else 0


def main(argv: Optional[List[str]] = None) -> int:
    logging.basicConfig(level=config.LOG_LEVEL, format="%(levelname)s %(name)s: %(message)s")
    logging.captureWarnings(True)

    if config.MODE not in MODES:
        logger.error("SECRETRECOVERY_MODE must be one of %s, got %r", MODES, config.MODE)
        return 2
    if config.OUTPUT_FORMAT not in OUTPUTS:
        logger.error("SECRETRECOVERY_OUTPUT must be one of %s, got %r", OUTPUTS, config.OUTPUT_FORMAT)
        return 2

    args = sys.argv[1:] if argv is None else argv
    return run(args or config.CASE_FILES)


if __name__ == "__main__":
    sys.exit(main())
