"""Shared fixtures for the test suite."""

from __future__ import annotations

import pytest

from mediascope import pipeline
from mediascope.models import media, stylesheet

# ── Stylesheet Factories ────────────────────────────────────────


@pytest.fixture()
def responsive_sheet() -> stylesheet.StyleSheetSource:
    """A same-origin sheet with width, print and orientation queries."""
    return stylesheet.StyleSheetSource(
        href="https://example.com/css/site.css",
        access=stylesheet.Accessible(
            rules=[
                stylesheet.StyleRuleNode(selector="body", properties={"margin": "0"}),
                stylesheet.MediaRuleNode(
                    condition="screen and (max-width: 768px)",
                    rules=[
                        stylesheet.StyleRuleNode(selector=".navbar", properties={"flex-direction": "column"}),
                        stylesheet.StyleRuleNode(selector=".footer", properties={"padding": "8px", "font-size": "12px"}),
                    ],
                ),
                stylesheet.MediaRuleNode(
                    condition="(min-width: 1024px)",
                    rules=[
                        stylesheet.StyleRuleNode(selector=".hero-section", properties={"margin-left": "40px"}),
                    ],
                ),
                stylesheet.MediaRuleNode(
                    condition="print",
                    rules=[stylesheet.StyleRuleNode(selector=".navbar", properties={"display": "none"})],
                ),
                stylesheet.OtherRuleNode(rule_type="CSSFontFaceRule"),
            ]
        ),
    )


@pytest.fixture()
def cross_origin_sheet() -> stylesheet.StyleSheetSource:
    """A sheet the browser refused to expose."""
    return stylesheet.StyleSheetSource(
        href="https://cdn.other.net/lib.css",
        access=stylesheet.Inaccessible(reason="Failed to read the 'cssRules' property"),
    )


# ── Report Fixtures ─────────────────────────────────────────────


@pytest.fixture()
def sample_report(responsive_sheet: stylesheet.StyleSheetSource) -> media.MediaQueryReport:
    """A scored report built from ``responsive_sheet``."""
    return pipeline.build_report("https://example.com/", [responsive_sheet])
