"""Ordered click strategies for stubborn tab markers.

Some tabs render behind overlays or animate into place, so a plain click is
not always enough. Strategies are tried in order and the first one that
reports success wins.
"""
from __future__ import annotations

import logging
from typing import Awaitable, Callable, Sequence

from playwright.async_api import Error as PlaywrightError
from playwright.async_api import Page

logger = logging.getLogger(__name__)

ClickStrategy = Callable[[Page, str], Awaitable[bool]]


class ClickError(RuntimeError):
    """Every click strategy failed for a selector that is on the page."""

    def __init__(self, selector: str) -> None:
        super().__init__(f"Could not click {selector}: all click strategies failed")
        self.selector = selector

_CLICK_TIMEOUT_MS = 5000

_DOM_CLICK_SCRIPT = """
(selector) => {
  const el = document.querySelector(selector);
  if (!el) return false;
  el.click();
  return true;
}
"""


async def locator_click(page: Page, selector: str) -> bool:
    """Regular actionability-checked click."""
    await page.locator(selector).first.click(timeout=_CLICK_TIMEOUT_MS)
    return True


async def forced_click(page: Page, selector: str) -> bool:
    """Click without waiting for the element to be visible/stable/unobscured."""
    await page.locator(selector).first.click(timeout=_CLICK_TIMEOUT_MS, force=True)
    return True


async def dom_click(page: Page, selector: str) -> bool:
    """Dispatch ``element.click()`` inside the page."""
    return bool(await page.evaluate(_DOM_CLICK_SCRIPT, selector))


DEFAULT_CLICK_STRATEGIES: tuple[ClickStrategy, ...] = (locator_click, forced_click, dom_click)


async def click_first(
    page: Page,
    selector: str,
    strategies: Sequence[ClickStrategy] = DEFAULT_CLICK_STRATEGIES,
) -> bool:
    """Try each strategy in turn; return True at the first success."""
    for strategy in strategies:
        try:
            if await strategy(page, selector):
                logger.debug("Clicked %s via %s", selector, strategy.__name__)
                return True
        except PlaywrightError as exc:
            logger.debug("Click strategy %s failed for %s: %s", strategy.__name__, selector, exc)
            continue
        logger.debug("Click strategy %s found nothing to click for %s", strategy.__name__, selector)
    logger.warning("All click strategies failed for %s", selector)
    return False
