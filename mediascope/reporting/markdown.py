"""Markdown summary written next to the JSON report."""

from __future__ import annotations

from mediascope.models import media


def _escape(text: str) -> str:
    """Escape pipes so *text* is safe inside a table cell."""
    return text.replace("|", "\\|")


def render_markdown(report: media.MediaQueryReport) -> str:
    """Render *report* as a Markdown document."""
    summary = report.summary
    complexity = report.complexity
    breakpoints = ", ".join(f"{bp}px" for bp in summary.unique_breakpoints) or "none"

    lines = [
        "# Media Query Analysis",
        "",
        f"- **URL:** {report.url or 'unknown'}",
        f"- **Extracted:** {report.extracted_at or 'unknown'}",
        f"- **Total media queries:** {summary.total_media_queries}",
        f"- **Unique breakpoints:** {breakpoints}",
    ]
    if summary.inaccessible_stylesheets:
        lines.append(f"- **Inaccessible stylesheets skipped:** {summary.inaccessible_stylesheets}")

    lines += [
        "",
        "## Complexity",
        "",
        f"**{complexity.score}/100 ({complexity.level})** {complexity.recommendation}",
        "",
        "| Category | Metric | Points |",
        "|---|---|---|",
    ]
    lines += [
        f"| {name} | {score.metric:g} | {score.points}/{score.max_points} |"
        for name, score in complexity.sub_scores.items()
    ]

    if complexity.problem_breakpoints:
        lines += ["", "### Problem breakpoints", ""]
        lines += [
            f"- `{p.breakpoint}`: {p.property_count} properties. {p.reason}"
            for p in complexity.problem_breakpoints
        ]

    lines += ["", "## Media queries", "", "| Condition | Breakpoint | Rules |", "|---|---|---|"]
    for record in report.media_queries:
        bp = f"{record.type} {record.breakpoint}px" if record.breakpoint is not None else "-"
        lines.append(f"| `{_escape(record.condition)}` | {bp} | {len(record.rules)} |")

    return "\n".join(lines) + "\n"
