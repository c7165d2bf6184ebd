"""Breakpoint parsing for media condition text.

A condition yields at most one breakpoint: ``min-width`` is checked
first, then ``max-width``.  A closed range such as
``(min-width: 768px) and (max-width: 1024px)`` is therefore recorded
as ``min-width`` 768 only.  Only pixel values are recognised.
"""

from __future__ import annotations

import re

from mediascope.models import media

_MIN_WIDTH_RE = re.compile(r"min-width:\s*(\d+)px")
_MAX_WIDTH_RE = re.compile(r"max-width:\s*(\d+)px")

# Bucket for records without a width breakpoint when totalling properties.
OTHER_BUCKET = "other"


def parse_breakpoint(condition: str) -> tuple[int | None, media.BreakpointType | None]:
    """Return ``(pixels, type)`` for *condition*, or ``(None, None)``."""
    if match := _MIN_WIDTH_RE.search(condition):
        return int(match.group(1)), "min-width"
    if match := _MAX_WIDTH_RE.search(condition):
        return int(match.group(1)), "max-width"
    return None, None


def breakpoint_key(record: media.MediaQueryRecord) -> str | None:
    """``"{type}-{breakpoint}"`` for width queries, else ``None``."""
    if record.breakpoint is None or record.type is None:
        return None
    return f"{record.type}-{record.breakpoint}"


def property_count(record: media.MediaQueryRecord) -> int:
    """Total declarations across all rules of *record*."""
    return sum(len(rule.properties) for rule in record.rules)
