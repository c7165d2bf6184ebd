"""Media query extraction over a stylesheet snapshot.

Walks the top-level rules of every accessible stylesheet, turns each
``@media`` block into a :class:`MediaQueryRecord`, and indexes the
records by ``"{type}-{breakpoint}"``.  Inaccessible stylesheets are
skipped with a warning; the result then only reflects the sheets
that could be read.
"""

from __future__ import annotations

from collections.abc import Iterable

from mediascope.analysis import breakpoints
from mediascope.models import media, stylesheet
from mediascope.utils import logger

log = logger.create_logger("Extractor")


def _to_record(rule: stylesheet.MediaRuleNode) -> media.MediaQueryRecord:
    """Build a record from one media block, keeping only plain style rules."""
    breakpoint, bp_type = breakpoints.parse_breakpoint(rule.condition)
    return media.MediaQueryRecord(
        condition=rule.condition,
        breakpoint=breakpoint,
        type=bp_type,
        rules=[
            media.StyleRule(selector=inner.selector, properties=dict(inner.properties))
            for inner in rule.rules
            if isinstance(inner, stylesheet.StyleRuleNode)
        ],
    )


def extract(sheets: Iterable[stylesheet.StyleSheetSource]) -> media.MediaQueryExtraction:
    """Extract every media query from *sheets*.

    Args:
        sheets: Stylesheet snapshots in document order.

    Returns:
        The flat record list (traversal order preserved), the
        breakpoint index, and summary totals.  An input without any
        media queries yields an empty, well-formed extraction.
    """
    records: list[media.MediaQueryRecord] = []
    grouped: dict[str, list[media.MediaQueryRecord]] = {}
    unique: set[int] = set()
    skipped = 0

    for index, sheet in enumerate(sheets):
        access = sheet.access
        if isinstance(access, stylesheet.Inaccessible):
            skipped += 1
            log.warn(
                "Could not access stylesheet, skipping",
                {"index": index, "href": sheet.href, "reason": access.reason},
            )
            continue

        for rule in access.rules:
            if not isinstance(rule, stylesheet.MediaRuleNode):
                continue

            record = _to_record(rule)
            records.append(record)

            key = breakpoints.breakpoint_key(record)
            if key is not None:
                grouped.setdefault(key, []).append(record)
                unique.add(record.breakpoint)  # type: ignore[arg-type]

    log.info(
        "Media queries extracted",
        {
            "mediaQueries": len(records),
            "uniqueBreakpoints": len(unique),
            "skippedStylesheets": skipped,
        },
    )

    return media.MediaQueryExtraction(
        summary=media.MediaQuerySummary(
            total_media_queries=len(records),
            unique_breakpoints=sorted(unique),
            inaccessible_stylesheets=skipped,
        ),
        media_queries=records,
        breakpoints=grouped,
    )
