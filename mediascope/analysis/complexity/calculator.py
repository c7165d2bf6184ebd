"""Responsive complexity calculator: orchestrator.

Calls each category module and sums their points into a 0–100
score.  The category maxima (25 + 30 + 20 + 15 + 10) add up to
exactly 100, so no capping or curve is needed.
"""

from __future__ import annotations

from mediascope.analysis.complexity import breakpoint_count, nesting, overlap, property_density, query_volume
from mediascope.models import media
from mediascope.utils import logger

log = logger.create_logger("Complexity")

# Problem breakpoints must exceed both limits.
_PROBLEM_RATIO = 1.5
_PROBLEM_FLOOR = 20
_PROBLEM_REASON = "High number of property changes - may indicate major layout shift"

# Upper score bound (inclusive) → level, recommendation.
_LEVELS: list[tuple[int, media.ComplexityLevel, str]] = [
    (20, "Simple", "Use basic responsive analyzer. Site has straightforward breakpoint behavior."),
    (40, "Moderate", "Use standard responsive analysis tools. Site has typical mobile-first or desktop-first patterns."),
    (60, "Complex", "Use comprehensive multi-viewport analysis. Site has intricate responsive behavior."),
    (80, "Very Complex", "Use comprehensive analyzer with detailed breakpoint analysis. Consider iterative refinement approach."),
    (
        100,
        "Extremely Complex",
        "Site has highly complex responsive patterns. Recommend component-by-component analysis with positioning calculator.",
    ),
]


def classify(score: int) -> tuple[media.ComplexityLevel, str]:
    """Map a score to its level and recommendation sentence."""
    for upper, level, recommendation in _LEVELS:
        if score <= upper:
            return level, recommendation
    return _LEVELS[-1][1], _LEVELS[-1][2]


def find_problem_breakpoints(
    records: list[media.MediaQueryRecord],
    mean: float,
) -> list[media.ProblemBreakpoint]:
    """Buckets whose declaration total exceeds 1.5× *mean* and 20."""
    return [
        media.ProblemBreakpoint(breakpoint=key, property_count=total, reason=_PROBLEM_REASON)
        for key, total in property_density.totals_by_bucket(records).items()
        if total > mean * _PROBLEM_RATIO and total > _PROBLEM_FLOOR
    ]


def calculate_complexity(records: list[media.MediaQueryRecord]) -> media.ComplexityResult:
    """Score the responsive complexity of an extraction.

    Pure and deterministic: identical records always give an
    identical result.  An empty list scores 0 with an all-zero
    breakdown.

    Args:
        records: Unfiltered media query records.

    Returns:
        A :class:`ComplexityResult` with per-category detail.
    """
    if not records:
        level, recommendation = classify(0)
        return media.ComplexityResult(score=0, level=level, recommendation=recommendation)

    bp_score = breakpoint_count.calculate(records)
    n_breakpoints = int(bp_score.metric)
    density_score = property_density.calculate(records, n_breakpoints)
    nesting_score = nesting.calculate(records)
    overlap_score = overlap.calculate(records)
    volume_score = query_volume.calculate(records)

    sub_scores = {
        "breakpointCount": bp_score,
        "propertyDensity": density_score,
        "nestedQueries": nesting_score,
        "overlaps": overlap_score,
        "queryVolume": volume_score,
    }
    score = sum(s.points for s in sub_scores.values())
    level, recommendation = classify(score)

    mean = density_score.metric
    problems = find_problem_breakpoints(records, mean)

    log.info(
        "Complexity calculated",
        {
            "score": score,
            "level": level,
            "breakpoints": bp_score.points,
            "density": density_score.points,
            "nested": nesting_score.points,
            "overlaps": overlap_score.points,
            "volume": volume_score.points,
        },
    )
    for problem in problems:
        log.debug("Problem breakpoint", {"breakpoint": problem.breakpoint, "properties": problem.property_count})

    return media.ComplexityResult(
        score=score,
        level=level,
        recommendation=recommendation,
        breakdown=media.ComplexityBreakdown(
            breakpoint_count=n_breakpoints,
            property_changes_per_breakpoint=property_density.round_half_up(mean),
            nested_queries=int(nesting_score.metric),
            overlaps=int(overlap_score.metric),
            total_queries=len(records),
        ),
        sub_scores=sub_scores,
        problem_breakpoints=problems,
    )
