"""Pydantic models for extracted media queries and their complexity score.

All models serialise with camelCase aliases so the persisted JSON
matches the report shape consumed by the rest of the toolkit.
"""

from __future__ import annotations

from typing import Literal

import pydantic

from mediascope.utils.serialization import CAMEL_CONFIG

BreakpointType = Literal["min-width", "max-width"]

ComplexityLevel = Literal[
    "Simple", "Moderate", "Complex", "Very Complex", "Extremely Complex"
]

SCHEMA_VERSION = 1


class StyleRule(pydantic.BaseModel):
    """One selector block guarded by a media condition."""

    selector: str
    properties: dict[str, str] = pydantic.Field(default_factory=dict)


class MediaQueryRecord(pydantic.BaseModel):
    """One ``@media`` block with its normalised breakpoint.

    ``breakpoint`` and ``type`` are either both set or both ``None``
    (print, orientation and other non-width queries).
    """

    condition: str
    breakpoint: int | None = None
    type: BreakpointType | None = None
    rules: list[StyleRule] = pydantic.Field(default_factory=list)

    @pydantic.model_validator(mode="after")
    def _breakpoint_pairs_with_type(self) -> MediaQueryRecord:
        if (self.breakpoint is None) != (self.type is None):
            raise ValueError("breakpoint and type must both be set or both be None")
        return self


class MediaQuerySummary(pydantic.BaseModel):
    """Totals for one extraction run."""

    model_config = CAMEL_CONFIG

    total_media_queries: int = 0
    unique_breakpoints: list[int] = pydantic.Field(default_factory=list)
    inaccessible_stylesheets: int = 0


class MediaQueryExtraction(pydantic.BaseModel):
    """Raw extractor output, before scoring."""

    model_config = CAMEL_CONFIG

    summary: MediaQuerySummary = pydantic.Field(default_factory=MediaQuerySummary)
    media_queries: list[MediaQueryRecord] = pydantic.Field(default_factory=list)
    breakpoints: dict[str, list[MediaQueryRecord]] = pydantic.Field(default_factory=dict)


# ── Complexity ──────────────────────────────────────────────────


class SubScore(pydantic.BaseModel):
    """Points awarded by one complexity category."""

    model_config = CAMEL_CONFIG

    points: int = 0
    max_points: int = 0
    metric: float = 0


class ComplexityBreakdown(pydantic.BaseModel):
    """The five metrics the complexity score is derived from."""

    model_config = CAMEL_CONFIG

    breakpoint_count: int = 0
    property_changes_per_breakpoint: int = 0
    nested_queries: int = 0
    overlaps: int = 0
    total_queries: int = 0


class ProblemBreakpoint(pydantic.BaseModel):
    """A breakpoint bucket with a disproportionate number of property changes."""

    model_config = CAMEL_CONFIG

    breakpoint: str
    property_count: int
    reason: str


class ComplexityResult(pydantic.BaseModel):
    """Composite 0-100 responsive complexity score."""

    model_config = CAMEL_CONFIG

    score: int = 0
    level: ComplexityLevel = "Simple"
    recommendation: str = ""
    breakdown: ComplexityBreakdown = pydantic.Field(default_factory=ComplexityBreakdown)
    sub_scores: dict[str, SubScore] = pydantic.Field(default_factory=dict)
    problem_breakpoints: list[ProblemBreakpoint] = pydantic.Field(default_factory=list)


# ── Persisted report ────────────────────────────────────────────


class MediaQueryReport(MediaQueryExtraction):
    """Extraction plus complexity, as written to disk and cached."""

    schema_version: int = SCHEMA_VERSION
    url: str = ""
    extracted_at: str = ""
    complexity: ComplexityResult = pydantic.Field(default_factory=ComplexityResult)

    def to_json(self) -> str:
        """Serialise with camelCase keys, two-space indented."""
        return self.model_dump_json(by_alias=True, indent=2)
