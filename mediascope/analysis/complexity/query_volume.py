"""Total media query volume scoring."""

from __future__ import annotations

from mediascope.models import media

MAX_POINTS = 10


def calculate(records: list[media.MediaQueryRecord]) -> media.SubScore:
    """Score the raw record count.

    ≤10 → 2, ≤25 → 5, ≤50 → 7, more → 10.
    """
    n = len(records)
    if n <= 10:
        points = 2
    elif n <= 25:
        points = 5
    elif n <= 50:
        points = 7
    else:
        points = MAX_POINTS
    return media.SubScore(points=points, max_points=MAX_POINTS, metric=n)
