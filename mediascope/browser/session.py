"""
Browser session management.
Each BrowserSession owns one Playwright Chromium instance for a single
URL and is used as an async context manager, so the browser is closed
on every exit path (normal completion, errors, Ctrl-C).
"""

from __future__ import annotations

from typing import Literal

from playwright import async_api

from mediascope.browser import stylesheet_snapshot
from mediascope.models import browser, stylesheet
from mediascope.utils import logger

log = logger.create_logger("BrowserSession")

LAUNCH_ARGS = [
    "--no-sandbox",
    "--disable-setuid-sandbox",
    "--no-first-run",
    "--no-default-browser-check",
]


class BrowserSession:
    """
    Manages an isolated headless browser session for one analysis.
    """

    def __init__(self, headless: bool = True) -> None:
        """Initialise an unlaunched session."""
        self._headless = headless
        self._playwright: async_api.Playwright | None = None
        self._browser: async_api.Browser | None = None
        self._page: async_api.Page | None = None

    async def __aenter__(self) -> BrowserSession:
        try:
            await self.launch_browser()
        except BaseException:
            await self.close()
            raise
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()

    # ==========================================================================
    # Browser Lifecycle
    # ==========================================================================

    async def launch_browser(self) -> None:
        """Launch Chromium and open a blank page."""
        log.info("Launching browser", {"headless": self._headless})
        self._playwright = await async_api.async_playwright().start()
        self._browser = await self._playwright.chromium.launch(
            headless=self._headless,
            args=LAUNCH_ARGS,
        )
        self._page = await self._browser.new_page()
        log.debug("Browser launched")

    # ==========================================================================
    # Navigation
    # ==========================================================================

    async def navigate_to(
        self,
        url: str,
        wait_until: Literal[
            "commit", "domcontentloaded", "load", "networkidle"
        ] = "networkidle",
        timeout: int = 60000,
    ) -> browser.NavigationResult:
        """Navigate the current page to a URL and wait for it to settle."""
        if not self._page:
            raise RuntimeError("No browser session active")

        log.debug("Navigating", {"url": url, "waitUntil": wait_until, "timeout": timeout})
        try:
            response = await self._page.goto(url, wait_until=wait_until, timeout=timeout)
        except async_api.Error as error:
            log.warn("Navigation error", {"url": url, "error": str(error)})
            return browser.NavigationResult(success=False, error_message=str(error))

        status_code = response.status if response else None
        status_text = response.status_text if response else None
        final_url = self._page.url

        if status_code and status_code >= 400:
            return browser.NavigationResult(
                success=False,
                status_code=status_code,
                status_text=status_text,
                final_url=final_url,
                error_message=f"Server error ({status_code}: {status_text})",
            )

        if final_url != url:
            log.info("Redirected", {"from": url, "to": final_url})
        return browser.NavigationResult(
            success=True,
            status_code=status_code,
            status_text=status_text,
            final_url=final_url,
        )

    # ==========================================================================
    # Extraction
    # ==========================================================================

    async def snapshot_stylesheets(self) -> list[stylesheet.StyleSheetSource]:
        """Serialise the page's stylesheets into the stylesheet model."""
        if not self._page:
            raise RuntimeError("No browser session active")
        raw = await self._page.evaluate(stylesheet_snapshot.SNAPSHOT_SCRIPT)
        return stylesheet_snapshot.to_sources(raw)

    # ==========================================================================
    # Cleanup
    # ==========================================================================

    async def close(self) -> None:
        """Close the browser and clean up all resources."""
        log.debug("Closing browser session")
        self._page = None

        if self._browser:
            try:
                await self._browser.close()
            except Exception as exc:
                log.debug("Browser close error (non-fatal)", {"error": str(exc)})
            self._browser = None

        if self._playwright:
            try:
                await self._playwright.stop()
            except Exception as exc:
                log.debug("Playwright stop error (non-fatal)", {"error": str(exc)})
            self._playwright = None

        log.debug("Browser session closed")
