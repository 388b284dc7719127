"""playwright-stealth integration for scrape sessions.

See: https://github.com/mattwmaster58/playwright_stealth
"""
from __future__ import annotations

import logging
from contextlib import AbstractAsyncContextManager
from typing import Optional

from playwright.async_api import BrowserContext, async_playwright
from playwright_stealth import Stealth

from hotel_scraper.config.settings import Settings

logger = logging.getLogger(__name__)


class StealthManager:
    """Hands out a Playwright driver with evasions patched in, or a plain one."""

    def __init__(self, stealth: Optional[Stealth] = None) -> None:
        self._stealth = stealth

    @classmethod
    def from_settings(cls, settings: Settings) -> "StealthManager":
        if not settings.stealth_enabled:
            logger.info("Stealth evasions disabled")
            return cls()
        return cls(Stealth(**settings.stealth_kwargs()))

    @property
    def enabled(self) -> bool:
        return self._stealth is not None

    def wrap_playwright(self) -> AbstractAsyncContextManager:
        if self._stealth is None:
            return async_playwright()
        return self._stealth.use_async(async_playwright())

    async def apply(self, context: BrowserContext) -> None:
        """Install the evasion init scripts on a freshly created context."""
        if self._stealth is None:
            return
        await self._stealth.apply_stealth_async(context)
