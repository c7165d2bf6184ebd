"""Plain-text report printed to stdout after each run."""

from __future__ import annotations

from mediascope.models import media

_RULE = "═" * 63


def _grouped_by_breakpoint(
    records: list[media.MediaQueryRecord],
) -> list[tuple[str, list[media.MediaQueryRecord]]]:
    """Width queries grouped as ``"max-width 768px"``, sorted by pixel value."""
    groups: dict[str, list[media.MediaQueryRecord]] = {}
    pixels: dict[str, int] = {}
    for record in records:
        if record.breakpoint is None:
            continue
        label = f"{record.type} {record.breakpoint}px"
        groups.setdefault(label, []).append(record)
        pixels[label] = record.breakpoint
    return sorted(groups.items(), key=lambda item: pixels[item[0]])


def render_report(report: media.MediaQueryReport) -> str:
    """Render *report* as the human-readable console summary."""
    lines = [_RULE, "                    MEDIA QUERY ANALYSIS", _RULE, ""]

    summary = report.summary
    breakpoints = ", ".join(str(bp) for bp in summary.unique_breakpoints)
    lines += [
        "SUMMARY:",
        f"   Total Media Queries: {summary.total_media_queries}",
        f"   Unique Breakpoints: {breakpoints + 'px' if breakpoints else 'none'}",
    ]
    if summary.inaccessible_stylesheets:
        lines.append(f"   Skipped Stylesheets (inaccessible): {summary.inaccessible_stylesheets}")
    lines.append("")

    complexity = report.complexity
    breakdown = complexity.breakdown
    lines += [
        "COMPLEXITY ANALYSIS:",
        f"   Score: {complexity.score}/100",
        f"   Level: {complexity.level}",
        f"   Recommendation: {complexity.recommendation}",
        "",
        "   Breakdown:",
        f"   - Unique Breakpoints: {breakdown.breakpoint_count}",
        f"   - Avg Properties/Breakpoint: {breakdown.property_changes_per_breakpoint}",
        f"   - Nested/Combined Queries: {breakdown.nested_queries}",
        f"   - Potential Overlaps: {breakdown.overlaps}",
        f"   - Total Queries: {breakdown.total_queries}",
        "",
    ]
    if complexity.problem_breakpoints:
        lines.append("   Problem Breakpoints:")
        lines += [f"   - {p.breakpoint}: {p.property_count} properties ({p.reason})" for p in complexity.problem_breakpoints]
        lines.append("")

    lines.append("BREAKPOINT BREAKDOWN:")
    for label, records in _grouped_by_breakpoint(report.media_queries):
        lines += ["", f"@media ({label}):", f"   {len(records)} rule(s)", ""]
        for record in records:
            for rule in record.rules:
                lines.append(f"   {rule.selector} {{")
                lines += [f"      {prop}: {value};" for prop, value in rule.properties.items()]
                lines += ["   }", ""]

    others = [r for r in report.media_queries if r.breakpoint is None]
    if others:
        lines += ["", "OTHER MEDIA QUERIES:", ""]
        for record in others:
            lines += [f"   @media {record.condition}", f"   {len(record.rules)} rule(s)", ""]

    lines += ["", _RULE]
    return "\n".join(lines) + "\n"
