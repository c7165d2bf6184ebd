"""Media query analysis pipeline.

Ties the stages together for one URL:

1. Cache lookup (skipped with ``force``).
2. Browser session loads the page and snapshots its stylesheets.
3. Extraction and complexity scoring on the host.
4. Cache write of the unfiltered report.

The cache and the browser session are passed in, so the pipeline
can run against in-memory doubles.
"""

from __future__ import annotations

from collections.abc import Callable
from contextlib import AbstractAsyncContextManager
from datetime import UTC, datetime
from typing import Any, Protocol

import pydantic

from mediascope import cache as cache_mod
from mediascope.analysis import extractor
from mediascope.analysis.complexity import calculate_complexity
from mediascope.models import browser, media, stylesheet
from mediascope.utils import errors, logger

log = logger.create_logger("Pipeline")


class ReportCache(Protocol):
    """The cache contract the pipeline relies on."""

    def get(self, key: str) -> Any | None: ...

    def put(self, key: str, value: Any) -> None: ...


class PageSession(Protocol):
    """The page-automation contract the pipeline relies on."""

    async def navigate_to(self, url: str, *, timeout: int = ...) -> browser.NavigationResult: ...

    async def snapshot_stylesheets(self) -> list[stylesheet.StyleSheetSource]: ...


SessionFactory = Callable[[], AbstractAsyncContextManager[PageSession]]


def build_report(url: str, sheets: list[stylesheet.StyleSheetSource]) -> media.MediaQueryReport:
    """Extract and score *sheets* into a report for *url*."""
    extraction = extractor.extract(sheets)
    return media.MediaQueryReport(
        url=url,
        extracted_at=datetime.now(UTC).isoformat(),
        summary=extraction.summary,
        media_queries=extraction.media_queries,
        breakpoints=extraction.breakpoints,
        complexity=calculate_complexity(extraction.media_queries),
    )


def _load_cached(cache: ReportCache, key: str) -> media.MediaQueryReport | None:
    cached = cache.get(key)
    if cached is None:
        return None
    try:
        return media.MediaQueryReport.model_validate(cached)
    except pydantic.ValidationError as exc:
        log.warn("Cached report is malformed, ignoring", {"key": key, "errors": exc.error_count()})
        return None


async def analyze_media_queries(
    url: str,
    *,
    cache: ReportCache,
    session_factory: SessionFactory,
    force: bool = False,
    navigation_timeout_ms: int = 60000,
) -> media.MediaQueryReport:
    """Produce the unfiltered media query report for *url*.

    Args:
        url: Absolute URL to analyse.
        cache: Result cache; consulted unless *force* and always
            written after a fresh extraction.
        session_factory: Returns an async context manager yielding a
            page session. The session is closed on every exit path.
        force: Skip the cache read.
        navigation_timeout_ms: Page load timeout.

    Raises:
        NavigationError: The page could not be loaded. Nothing is
            cached in that case.
    """
    key = cache_mod.cache_key(url)

    if force:
        log.info("Force refresh enabled - skipping cache")
    else:
        cached = _load_cached(cache, key)
        if cached is not None:
            return cached

    log.start_timer("extraction")
    async with session_factory() as session:
        result = await session.navigate_to(url, timeout=navigation_timeout_ms)
        if not result.success:
            raise errors.NavigationError(f"Failed to load {url}: {result.error_message or 'unknown error'}")

        log.info("Analyzing stylesheets")
        sheets = await session.snapshot_stylesheets()

    report = build_report(url, sheets)
    log.end_timer("extraction", "Extraction complete")
    log.success(
        "Media queries analysed",
        {
            "mediaQueries": report.summary.total_media_queries,
            "uniqueBreakpoints": len(report.summary.unique_breakpoints),
            "score": report.complexity.score,
        },
    )

    cache.put(key, report.model_dump(mode="json", by_alias=True))
    return report
