"""Overlap scoring.

A ``min-width`` record and a ``max-width`` record whose pixel values
differ by at most one are likely fighting over the same viewport
width (``max-width: 767px`` next to ``min-width: 768px``).
"""

from __future__ import annotations

from mediascope.models import media

MAX_POINTS = 15


def count(records: list[media.MediaQueryRecord]) -> int:
    """Number of (min-width record, max-width record) pairs within 1px."""
    min_widths = [r.breakpoint for r in records if r.type == "min-width" and r.breakpoint is not None]
    max_widths = [r.breakpoint for r in records if r.type == "max-width" and r.breakpoint is not None]
    return sum(1 for lo in min_widths for hi in max_widths if abs(lo - hi) <= 1)


def calculate(records: list[media.MediaQueryRecord]) -> media.SubScore:
    """Score overlapping min/max pairs.

    0 → 0, 1-2 → 5, 3-5 → 10, more → 15.
    """
    n = count(records)
    if n == 0:
        points = 0
    elif n <= 2:
        points = 5
    elif n <= 5:
        points = 10
    else:
        points = MAX_POINTS
    return media.SubScore(points=points, max_points=MAX_POINTS, metric=n)
