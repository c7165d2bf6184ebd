"""Combined-condition scoring.

A record counts once if its condition joins more than two clauses
with ``and`` or references a non-width media feature.
"""

from __future__ import annotations

import re

from mediascope.models import media

MAX_POINTS = 20

_FEATURE_RE = re.compile(r"orientation|resolution|aspect-ratio|hover|pointer")


def is_combined(condition: str) -> bool:
    """True for ``screen and (a) and (b)`` style or feature-based conditions."""
    return len(condition.split(" and ")) > 2 or _FEATURE_RE.search(condition) is not None


def calculate(records: list[media.MediaQueryRecord]) -> media.SubScore:
    """Score combined and feature-based conditions.

    0 → 0, 1-2 → 5, 3-5 → 12, more → 20.
    """
    n = sum(1 for r in records if is_combined(r.condition))
    if n == 0:
        points = 0
    elif n <= 2:
        points = 5
    elif n <= 5:
        points = 12
    else:
        points = MAX_POINTS
    return media.SubScore(points=points, max_points=MAX_POINTS, metric=n)
