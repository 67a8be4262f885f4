#!/usr/bin/env python3
"""SecretRecovery end-to-end demo.

Usage:
    python -m secretrecovery.demo.run_demo

The script:
1. Splits a known secret into N integer shares with threshold K.
2. Encodes each share value in a different base.
3. Corrupts one share.
4. Writes the case file to a temporary directory.
5. Recovers the secret in simple mode (first K shares).
6. Recovers the secret in robust mode (majority vote over C(N, K)).
"""

from __future__ import annotations

import json
import os
import tempfile
from typing import Any, Dict, List

from secretrecovery import config
from secretrecovery.crypto import shamir
from secretrecovery.crypto.lagrange import Point
from secretrecovery.crypto.radix import encode
from secretrecovery.runner import run

DEMO_BASES = [16, 2, 8, 36, 7, 10, 3, 20]
CORRUPTION = 10**6


def banner(msg: str) -> None:
    print(f"\n{'='*60}")
    print(f"  {msg}")
    print(f"{'='*60}")


def build_case(points: List[Point], n: int, k: int) -> Dict[str, Any]:
    """Case-file dict for *points*, cycling through ``DEMO_BASES``."""
    doc: Dict[str, Any] = {"keys": {"n": n, "k": k}}
    for i, (x, y) in enumerate(points):
        base = DEMO_BASES[i % len(DEMO_BASES)]
        doc[str(x)] = {"base": str(base), "value": encode(y, base)}
    return doc


def main() -> None:
    secret = config.DEMO_SECRET
    n, k = config.DEMO_NUM_SHARES, config.DEMO_THRESHOLD

    # ---- 1. Share ----
    banner(f"1) Split secret into {n} shares (threshold {k})")
    points = shamir.share(secret, n, k)
    for x, y in points:
        print(f"   share x={x}: y={y}")

    # ---- 2. Corrupt ----
    banner("2) Corrupt the last share")
    x_bad, y_bad = points[-1]
    points[-1] = Point(x_bad, y_bad + CORRUPTION)
    print(f"   share x={x_bad}: {y_bad} -> {y_bad + CORRUPTION}")

    # ---- 3. Write ----
    doc = build_case(points, n, k)
    with tempfile.TemporaryDirectory() as tmp:
        path = os.path.join(tmp, "demo_case.json")
        with open(path, "w", encoding="utf-8") as fh:
            json.dump(doc, fh, indent=2)
        banner(f"3) Case file written to {path}")
        print(json.dumps(doc, indent=2))

        # ---- 4. Simple mode ----
        banner("4) Simple mode (first K shares)")
        run([path], mode=config.MODE_SIMPLE, output=config.OUTPUT_TEXT)

        # ---- 5. Robust mode ----
        banner("5) Robust mode (majority vote)")
        run([path], mode=config.MODE_ROBUST, output=config.OUTPUT_TEXT)

    banner(f"DEMO COMPLETE (expected secret {secret})")


if __name__ == "__main__":
    main()
