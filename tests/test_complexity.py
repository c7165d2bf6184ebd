"""Tests for the responsive complexity calculator and category modules.

Covers each category's ``calculate()`` bands, level classification,
problem breakpoint detection, and the top-level orchestrator.
"""

from __future__ import annotations

import pytest

from mediascope.analysis.complexity import (
    breakpoint_count,
    calculator,
    nesting,
    overlap,
    property_density,
    query_volume,
)
from mediascope.models import media

# ── Helpers ─────────────────────────────────────────────────────


def _record(
    condition: str = "(min-width: 768px)",
    breakpoint: int | None = 768,
    bp_type: str | None = "min-width",
    *,
    props: int = 1,
) -> media.MediaQueryRecord:
    return media.MediaQueryRecord(
        condition=condition,
        breakpoint=breakpoint,
        type=bp_type,
        rules=[media.StyleRule(selector=".x", properties={f"p{i}": "v" for i in range(props)})] if props else [],
    )


def _width(px: int, bp_type: str = "min-width", *, props: int = 1) -> media.MediaQueryRecord:
    return _record(f"({bp_type}: {px}px)", px, bp_type, props=props)


def _print(*, props: int = 1) -> media.MediaQueryRecord:
    return _record("print", None, None, props=props)


# ── Category modules ────────────────────────────────────────────


class TestBreakpointCount:
    """Tests for breakpoint count scoring."""

    @pytest.mark.parametrize(
        ("n", "points"),
        [(0, 0), (1, 5), (3, 5), (4, 10), (5, 10), (6, 15), (7, 15), (8, 20), (10, 20), (11, 25), (40, 25)],
    )
    def test_bands(self, n: int, points: int) -> None:
        records = [_width(100 + i) for i in range(n)]
        assert breakpoint_count.calculate(records).points == points

    def test_counts_type_and_value_pairs(self) -> None:
        records = [_width(768, "min-width"), _width(768, "max-width"), _width(768, "min-width")]
        assert breakpoint_count.count(records) == 2

    def test_ignores_non_width_records(self) -> None:
        assert breakpoint_count.count([_print(), _width(480)]) == 1

    def test_more_breakpoints_never_lower_points(self) -> None:
        records: list[media.MediaQueryRecord] = [_print()]
        prev = breakpoint_count.calculate(records).points
        for px in range(300, 1500, 50):
            records = [*records, _width(px, "max-width")]
            points = breakpoint_count.calculate(records).points
            assert points >= prev
            prev = points


class TestPropertyDensity:
    """Tests for property density scoring."""

    @pytest.mark.parametrize(
        ("props", "points"),
        [(0, 5), (5, 5), (6, 12), (15, 12), (16, 20), (30, 20), (31, 30)],
    )
    def test_bands_for_single_breakpoint(self, props: int, points: int) -> None:
        assert property_density.calculate([_width(768, props=props)], 1).points == points

    def test_mean_includes_non_width_records(self) -> None:
        records = [_width(480, props=4), _width(768, props=4), _print(props=10)]
        assert property_density.mean_per_breakpoint(records, 2) == 9

    def test_mean_zero_without_breakpoints(self) -> None:
        assert property_density.mean_per_breakpoint([_print(props=10)], 0) == 0

    def test_totals_by_bucket_first_seen_order(self) -> None:
        records = [_width(768, props=2), _print(props=3), _width(480, props=1), _width(768, props=4)]
        assert property_density.totals_by_bucket(records) == {"min-width-768": 6, "other": 3, "min-width-480": 1}

    @pytest.mark.parametrize(("value", "expected"), [(2.5, 3), (2.49, 2), (16.67, 17), (0, 0)])
    def test_round_half_up(self, value: float, expected: int) -> None:
        assert property_density.round_half_up(value) == expected


class TestNesting:
    """Tests for combined/feature condition scoring."""

    @pytest.mark.parametrize(
        "condition",
        [
            "screen and (min-width: 768px) and (max-width: 1024px)",
            "(orientation: landscape)",
            "(min-resolution: 2dppx)",
            "(aspect-ratio: 16/9)",
            "(hover: hover)",
            "(pointer: coarse)",
        ],
    )
    def test_combined(self, condition: str) -> None:
        assert nesting.is_combined(condition)

    @pytest.mark.parametrize("condition", ["screen and (max-width: 768px)", "(min-width: 480px)", "print"])
    def test_simple(self, condition: str) -> None:
        assert not nesting.is_combined(condition)

    def test_record_counted_once(self) -> None:
        record = _record("screen and (orientation: landscape) and (min-width: 100px)", 100, "min-width")
        assert nesting.calculate([record]).metric == 1

    @pytest.mark.parametrize(("n", "points"), [(0, 0), (1, 5), (2, 5), (3, 12), (5, 12), (6, 20)])
    def test_bands(self, n: int, points: int) -> None:
        records = [_record("(hover: hover)", None, None) for _ in range(n)] + [_width(480)]
        assert nesting.calculate(records).points == points


class TestOverlap:
    """Tests for min/max overlap scoring."""

    def test_adjacent_pixels_overlap(self) -> None:
        assert overlap.count([_width(768, "min-width"), _width(767, "max-width")]) == 1

    def test_same_pixel_overlaps(self) -> None:
        assert overlap.count([_width(768, "min-width"), _width(768, "max-width")]) == 1

    def test_two_pixels_apart_do_not_overlap(self) -> None:
        assert overlap.count([_width(768, "min-width"), _width(766, "max-width")]) == 0

    def test_same_type_never_overlaps(self) -> None:
        assert overlap.count([_width(768, "min-width"), _width(767, "min-width")]) == 0

    def test_counts_record_pairs(self) -> None:
        records = [_width(768, "min-width"), _width(768, "min-width"), _width(767, "max-width")]
        assert overlap.count(records) == 2

    @pytest.mark.parametrize(("pairs", "points"), [(0, 0), (1, 5), (2, 5), (3, 10), (5, 10), (6, 15)])
    def test_bands(self, pairs: int, points: int) -> None:
        records = [_width(768, "min-width")] + [_width(767, "max-width") for _ in range(pairs)]
        assert overlap.calculate(records).points == points


class TestQueryVolume:
    """Tests for query volume scoring."""

    @pytest.mark.parametrize(
        ("n", "points"),
        [(1, 2), (10, 2), (11, 5), (25, 5), (26, 7), (50, 7), (51, 10)],
    )
    def test_bands(self, n: int, points: int) -> None:
        assert query_volume.calculate([_print() for _ in range(n)]).points == points


# ── Classification ──────────────────────────────────────────────


class TestClassify:
    """Score bands map to fixed levels."""

    @pytest.mark.parametrize(
        ("score", "level"),
        [
            (0, "Simple"),
            (20, "Simple"),
            (21, "Moderate"),
            (40, "Moderate"),
            (41, "Complex"),
            (45, "Complex"),
            (60, "Complex"),
            (61, "Very Complex"),
            (80, "Very Complex"),
            (81, "Extremely Complex"),
            (100, "Extremely Complex"),
        ],
    )
    def test_band(self, score: int, level: str) -> None:
        assert calculator.classify(score)[0] == level

    def test_each_level_has_distinct_recommendation(self) -> None:
        recommendations = {calculator.classify(s)[1] for s in (0, 30, 50, 70, 90)}
        assert len(recommendations) == 5


# ── Problem breakpoints ─────────────────────────────────────────


class TestProblemBreakpoints:
    """Tests for disproportionate breakpoint detection."""

    def test_flags_heavy_breakpoint(self) -> None:
        records = [_width(480, props=5), _width(768, props=5), _width(1024, props=40)]
        result = calculator.calculate_complexity(records)
        assert [p.breakpoint for p in result.problem_breakpoints] == ["min-width-1024"]
        assert result.problem_breakpoints[0].property_count == 40
        assert result.breakdown.property_changes_per_breakpoint == 17

    def test_absolute_floor(self) -> None:
        records = [_width(480, props=1), _width(768, props=1), _width(1024, props=10)]
        assert calculator.calculate_complexity(records).problem_breakpoints == []

    def test_ratio_boundary_is_exclusive(self) -> None:
        records = [_width(768, "min-width", props=25), _width(767, "max-width", props=25)]
        assert calculator.calculate_complexity(records).problem_breakpoints == []

    def test_other_bucket_can_be_flagged(self) -> None:
        records = [_width(480), _width(768), _width(1024), _print(props=30)]
        result = calculator.calculate_complexity(records)
        assert [p.breakpoint for p in result.problem_breakpoints] == ["other"]


# ── Orchestrator ────────────────────────────────────────────────


class TestCalculateComplexity:
    """Tests for the top-level calculate_complexity()."""

    def test_empty_input(self) -> None:
        result = calculator.calculate_complexity([])
        assert result.score == 0
        assert result.level == "Simple"
        assert result.problem_breakpoints == []
        assert result.breakdown == media.ComplexityBreakdown()

    def test_single_simple_query(self) -> None:
        record = media.MediaQueryRecord(
            condition="screen and (max-width: 768px)",
            breakpoint=768,
            type="max-width",
            rules=[media.StyleRule(selector=".navbar", properties={"flex-direction": "column"})],
        )
        result = calculator.calculate_complexity([record])
        assert result.breakdown.breakpoint_count == 1
        assert result.score == 12
        assert result.level == "Simple"

    def test_four_breakpoints_three_properties(self) -> None:
        records = [_width(px, props=3) for px in (480, 768, 1024, 1200)]
        result = calculator.calculate_complexity(records)
        assert result.breakdown.breakpoint_count == 4
        assert result.breakdown.property_changes_per_breakpoint == 3
        assert result.breakdown.total_queries == 4
        assert result.breakdown.nested_queries == 0
        assert result.breakdown.overlaps == 0
        assert result.sub_scores["breakpointCount"].points == 10
        assert result.sub_scores["propertyDensity"].points == 5
        assert result.sub_scores["queryVolume"].points == 2
        assert result.score == 17
        assert result.level == "Simple"

    def test_adjacent_min_max_pair(self) -> None:
        records = [_width(768, "min-width", props=25), _width(767, "max-width", props=25)]
        result = calculator.calculate_complexity(records)
        assert result.breakdown.overlaps == 1
        assert result.sub_scores["overlaps"].points == 5
        assert result.breakdown.property_changes_per_breakpoint == 25
        assert result.sub_scores["propertyDensity"].points == 20
        assert result.score == 32
        assert result.level == "Moderate"

    def test_only_non_width_queries(self) -> None:
        result = calculator.calculate_complexity([_print(), _record("(orientation: portrait)", None, None)])
        assert result.breakdown.breakpoint_count == 0
        assert result.breakdown.property_changes_per_breakpoint == 0
        # density lowest band (5) + nesting (5) + volume (2)
        assert result.score == 12

    def test_maximum_score(self) -> None:
        records = []
        for i in range(30):
            px = 300 + i * 10
            records.append(_record(f"screen and (orientation: landscape) and (min-width: {px}px)", px, "min-width", props=40))
            records.append(_record(f"screen and (hover: hover) and (max-width: {px - 1}px)", px - 1, "max-width", props=40))
        result = calculator.calculate_complexity(records)
        assert result.score == 100
        assert result.level == "Extremely Complex"

    def test_score_bounded_and_level_consistent(self) -> None:
        for n in range(0, 70, 7):
            records = [_width(200 + i * 3, "min-width" if i % 2 else "max-width", props=i) for i in range(n)]
            result = calculator.calculate_complexity(records)
            assert 0 <= result.score <= 100
            assert result.level == calculator.classify(result.score)[0]
            assert result.score == sum(s.points for s in result.sub_scores.values())

    def test_deterministic(self) -> None:
        records = [_width(480, props=5), _print(props=2), _width(767, "max-width", props=9)]
        first = calculator.calculate_complexity(records)
        assert calculator.calculate_complexity(records).model_dump_json() == first.model_dump_json()

    def test_serialises_camel_case(self) -> None:
        data = calculator.calculate_complexity([_width(480)]).model_dump(by_alias=True)
        assert set(data) == {"score", "level", "recommendation", "breakdown", "subScores", "problemBreakpoints"}
        assert set(data["breakdown"]) == {
            "breakpointCount",
            "propertyChangesPerBreakpoint",
            "nestedQueries",
            "overlaps",
            "totalQueries",
        }
