"""Browser orchestration helpers."""
from __future__ import annotations

import logging
from contextlib import AbstractAsyncContextManager
from dataclasses import dataclass, field
from types import TracebackType
from typing import Optional, Type

from playwright.async_api import Browser, BrowserContext, Page, Playwright

from hotel_scraper.config.settings import Settings
from hotel_scraper.core.stealth import StealthManager

logger = logging.getLogger(__name__)


@dataclass
class BrowserSession:
    """Async context manager that owns one Playwright driver + Chromium process.

    A session is scoped to a single scrape: it is never pooled or shared, and
    everything it opened is closed on exit whether or not the scrape failed.
    """

    settings: Settings
    _playwright_cm: Optional[AbstractAsyncContextManager] = None
    _playwright: Optional[Playwright] = None
    _browser: Optional[Browser] = None
    _stealth: Optional[StealthManager] = None
    _contexts: list[BrowserContext] = field(default_factory=list)

    async def __aenter__(self) -> "BrowserSession":  # noqa: D401
        self._stealth = StealthManager.from_settings(self.settings)
        self._playwright_cm = self._stealth.wrap_playwright()
        self._playwright = await self._playwright_cm.__aenter__()
        launch_args = self.settings.chromium_launch_args()
        logger.info("Launching Chromium with args: %s", launch_args)
        try:
            self._browser = await self._playwright.chromium.launch(**launch_args)
        except Exception:
            await self._playwright_cm.__aexit__(None, None, None)
            self._playwright_cm = None
            raise
        return self

    async def __aexit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        for context in self._contexts:
            await ensure_close_context(context)
        self._contexts.clear()
        if self._browser:
            try:
                await self._browser.close()
            except Exception:  # pragma: no cover - best effort cleanup
                logger.exception("Failed to close browser")
            self._browser = None
        if self._playwright_cm:
            await self._playwright_cm.__aexit__(exc_type, exc, tb)
            self._playwright_cm = None
        logger.info("Browser closed")

    @property
    def browser(self) -> Browser:
        if not self._browser:
            raise RuntimeError("Browser not initialised")
        return self._browser

    async def new_context(self, **overrides: object) -> BrowserContext:
        """Create a new context with stealth and default timeouts applied."""
        options = {**self.settings.context_options(), **overrides}
        logger.debug("Creating context with options: %s", options)
        context = await self.browser.new_context(**options)
        self._contexts.append(context)
        if self._stealth:
            await self._stealth.apply(context)
        context.set_default_timeout(self.settings.default_timeout_ms)
        context.set_default_navigation_timeout(self.settings.navigation_timeout_ms)
        return context

    async def new_page(self, **overrides: object) -> Page:
        context = await self.new_context(**overrides)
        return await context.new_page()


async def ensure_close_context(context: BrowserContext) -> None:
    """Helper to close contexts in finally blocks."""
    try:
        await context.close()
    except Exception:  # pragma: no cover - best effort cleanup
        logger.exception("Failed to close context")
