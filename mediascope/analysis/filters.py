"""Property and selector filters applied before display.

Filtering narrows rules, never rewrites them: every rule in the
output appears verbatim in the input, and applying the same filters
twice gives the same result as applying them once.
"""

from __future__ import annotations

from mediascope.models import media
from mediascope.utils import logger

log = logger.create_logger("Filters")


def _matches_property(rule: media.StyleRule, property_filter: str) -> bool:
    # Either direction: "margin" matches "margin-left" and "margin-left" matches "margin".
    return any(
        property_filter in name or name in property_filter
        for name in rule.properties
    )


def filter_records(
    records: list[media.MediaQueryRecord],
    property_filter: str | None = None,
    selector_filter: str | None = None,
) -> list[media.MediaQueryRecord]:
    """Keep only rules matching both filters; drop records left empty.

    Args:
        records: Extracted media query records.
        property_filter: Substring matched against declared property
            names in either direction.
        selector_filter: Case-sensitive substring of the selector text.

    Returns:
        New records holding the matching rules.  With no filters the
        input list is returned as-is.
    """
    if not property_filter and not selector_filter:
        return records

    filtered: list[media.MediaQueryRecord] = []
    for record in records:
        rules = [
            rule
            for rule in record.rules
            if (not property_filter or _matches_property(rule, property_filter))
            and (not selector_filter or selector_filter in rule.selector)
        ]
        if rules:
            filtered.append(record.model_copy(update={"rules": rules}))
    return filtered


def apply_filters(
    report: media.MediaQueryReport,
    property_filter: str | None = None,
    selector_filter: str | None = None,
) -> media.MediaQueryReport:
    """Return a copy of *report* with ``media_queries`` narrowed.

    Summary, breakpoint index and complexity keep describing the
    full extraction.
    """
    if not property_filter and not selector_filter:
        return report

    log.info("Applying filters", {"property": property_filter, "selector": selector_filter})
    narrowed = filter_records(report.media_queries, property_filter, selector_filter)
    log.success("Filtered media queries", {"before": len(report.media_queries), "after": len(narrowed)})
    return report.model_copy(update={"media_queries": narrowed})
