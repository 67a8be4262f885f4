"""Secret selection over share subsets.

Robust mode evaluates every k-subset and keeps the most frequent secret.
With honest shares every subset agrees; a corrupted share only moves the
subsets that contain it, so the true secret wins the vote.  Ties go to the
value first produced in lexicographic subset order.
"""

from __future__ import annotations

import logging
import math
from collections import Counter
from dataclasses import dataclass
from itertools import combinations
from typing import Optional, Sequence

from secretrecovery.config import ROBUST_SUBSET_LIMIT
from secretrecovery.crypto.lagrange import Point, evaluate_at_zero
from secretrecovery.errors import DegenerateInput, SubsetLimitExceeded

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Vote:
    secret: int
    votes: int
    total_subsets: int
    skipped_subsets: int = 0


def _check_threshold(points: Sequence[Point], k: int) -> None:
    if k < 1 or k > len(points):
        raise ValueError(f"Invalid threshold: k={k}, shares={len(points)}")


def robust_secret(
    points: Sequence[Point],
    k: int,
    limit: Optional[int] = ROBUST_SUBSET_LIMIT,
) -> Vote:
    """Majority vote of f(0) over all C(len(points), k) subsets."""
    _check_threshold(points, k)
    total = math.comb(len(points), k)
    if limit and total > limit:
        raise SubsetLimitExceeded(total, limit)

    tally: Counter = Counter()
    skipped = 0
    for subset in combinations(points, k):
        try:
            tally[evaluate_at_zero(subset)] += 1
        except DegenerateInput as exc:
            skipped += 1
            logger.debug("skipping subset %s: %s", [p.x for p in subset], exc)

    if not tally:
        raise DegenerateInput(points[0].x)

    # most_common() keeps first-encountered order among equal counts
    secret, votes = tally.most_common()[0]
    if len(tally) > 1:
        logger.info("%d distinct candidates; %d/%d subsets agree", len(tally), votes, total)
    return Vote(secret=secret, votes=votes, total_subsets=total, skipped_subsets=skipped)


def simple_secret(points: Sequence[Point], k: int) -> Vote:
    """f(0) from the first *k* points, no voting."""
    _check_threshold(points, k)
    return Vote(secret=evaluate_at_zero(points[:k]), votes=1, total_subsets=1)
