"""Property density scoring.

Measures how many declarations change per breakpoint.  The mean is
taken over every record's declarations (width queries and others
alike) divided by the distinct breakpoint count.
"""

from __future__ import annotations

import math

from mediascope.analysis import breakpoints
from mediascope.models import media

MAX_POINTS = 30


def totals_by_bucket(records: list[media.MediaQueryRecord]) -> dict[str, int]:
    """Declaration totals keyed by breakpoint bucket, in first-seen order.

    Records without a width breakpoint share the ``"other"`` bucket.
    """
    totals: dict[str, int] = {}
    for record in records:
        key = breakpoints.breakpoint_key(record) or breakpoints.OTHER_BUCKET
        totals[key] = totals.get(key, 0) + breakpoints.property_count(record)
    return totals


def mean_per_breakpoint(records: list[media.MediaQueryRecord], breakpoint_count: int) -> float:
    """Total declarations divided by *breakpoint_count* (0 when there are none)."""
    if breakpoint_count <= 0:
        return 0.0
    return sum(breakpoints.property_count(r) for r in records) / breakpoint_count


def round_half_up(value: float) -> int:
    """Round .5 away from zero for non-negative values."""
    return math.floor(value + 0.5)


def calculate(records: list[media.MediaQueryRecord], breakpoint_count: int) -> media.SubScore:
    """Score the mean declarations per breakpoint.

    ≤5 → 5, ≤15 → 12, ≤30 → 20, more → 30.
    """
    mean = mean_per_breakpoint(records, breakpoint_count)
    if mean <= 5:
        points = 5
    elif mean <= 15:
        points = 12
    elif mean <= 30:
        points = 20
    else:
        points = MAX_POINTS
    return media.SubScore(points=points, max_points=MAX_POINTS, metric=mean)
