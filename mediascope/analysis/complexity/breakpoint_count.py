"""Breakpoint count scoring.

Counts distinct ``(type, breakpoint)`` pairs, so ``max-width: 768px``
and ``min-width: 768px`` are two breakpoints.
"""

from __future__ import annotations

from mediascope.models import media

MAX_POINTS = 25


def count(records: list[media.MediaQueryRecord]) -> int:
    """Number of distinct ``(type, breakpoint)`` pairs in *records*."""
    return len({(r.type, r.breakpoint) for r in records if r.breakpoint is not None})


def calculate(records: list[media.MediaQueryRecord]) -> media.SubScore:
    """Score how many distinct breakpoints the site uses.

    0 → 0, 1-3 → 5, 4-5 → 10, 6-7 → 15, 8-10 → 20, more → 25.
    """
    n = count(records)
    if n == 0:
        points = 0
    elif n <= 3:
        points = 5
    elif n <= 5:
        points = 10
    elif n <= 7:
        points = 15
    elif n <= 10:
        points = 20
    else:
        points = MAX_POINTS
    return media.SubScore(points=points, max_points=MAX_POINTS, metric=n)
