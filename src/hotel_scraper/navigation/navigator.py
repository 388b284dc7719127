"""Navigation from a travel search page to a loaded hotel tab.

Every artifact (about, photos, prices, suggestions) walks the same small state
machine; what differs per artifact lives in its :class:`NavigationPlan`:

    SEARCH_LOADED -> DIRECT_TAB_VISIBLE -------------------> TAB_ACTIVE -> CONTENT_LOADED
                  \\-> NEED_ENTITY_CLICK -> (entity page) -/

A selector wait that runs past its timeout ends the walk in NOT_FOUND instead
of raising. An element that is present but defeats every click strategy
raises :class:`ClickError`, and any other Playwright error propagates too.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Sequence

from playwright.async_api import Page, TimeoutError as PlaywrightTimeoutError

from hotel_scraper.navigation.clicks import DEFAULT_CLICK_STRATEGIES, ClickError, ClickStrategy, click_first
from hotel_scraper.selectors.travel_page import (
    AboutSelectors,
    EntitySelectors,
    PhotoSelectors,
    PriceSelectors,
    SuggestionSelectors,
)

logger = logging.getLogger(__name__)


class NavigationState(str, Enum):
    SEARCH_LOADED = "search_loaded"
    DIRECT_TAB_VISIBLE = "direct_tab_visible"
    NEED_ENTITY_CLICK = "need_entity_click"
    TAB_ACTIVE = "tab_active"
    CONTENT_LOADED = "content_loaded"
    NOT_FOUND = "not_found"


@dataclass(frozen=True)
class NavigationPlan:
    """Selectors and timeouts for reaching one artifact's content."""

    name: str
    landmark: str
    tab: Optional[str] = None
    entity_link: str = EntitySelectors.entity_link
    entity_timeout_ms: int = 15000
    tab_timeout_ms: int = 15000
    landmark_timeout_ms: int = 15000
    wait_until: str = "networkidle"
    click_strategies: Sequence[ClickStrategy] = DEFAULT_CLICK_STRATEGIES


ABOUT_PLAN = NavigationPlan(
    name="about",
    tab=AboutSelectors.tab,
    landmark=AboutSelectors.section,
)
PHOTOS_PLAN = NavigationPlan(
    name="photos",
    tab=PhotoSelectors.tab,
    landmark=PhotoSelectors.feature_container,
)
PRICES_PLAN = NavigationPlan(
    name="prices",
    tab=PriceSelectors.tab,
    landmark=PriceSelectors.provider_section,
    landmark_timeout_ms=30000,
)
SUGGESTIONS_PLAN = NavigationPlan(
    name="suggestions",
    landmark=SuggestionSelectors.results_container,
    landmark_timeout_ms=20000,
)


@dataclass
class NavigationResult:
    plan: NavigationPlan
    history: List[NavigationState] = field(default_factory=list)

    @property
    def state(self) -> Optional[NavigationState]:
        return self.history[-1] if self.history else None

    @property
    def reached(self) -> bool:
        return self.state is NavigationState.CONTENT_LOADED


class TabNavigator:
    """Drives a page through a :class:`NavigationPlan`."""

    def __init__(self, plan: NavigationPlan) -> None:
        self.plan = plan

    async def reach(self, page: Page, url: Optional[str] = None) -> NavigationResult:
        result = NavigationResult(plan=self.plan)
        if url:
            logger.info("Navigating to: %s", url)
            await page.goto(url, wait_until=self.plan.wait_until)
        self._enter(result, NavigationState.SEARCH_LOADED)

        if self.plan.tab:
            if not await self._activate_tab(page, result):
                return self._enter(result, NavigationState.NOT_FOUND)
            self._enter(result, NavigationState.TAB_ACTIVE)

        if not await self._wait_for(page, self.plan.landmark, self.plan.landmark_timeout_ms):
            logger.warning("%s landmark %s never appeared", self.plan.name, self.plan.landmark)
            return self._enter(result, NavigationState.NOT_FOUND)
        return self._enter(result, NavigationState.CONTENT_LOADED)

    async def _activate_tab(self, page: Page, result: NavigationResult) -> bool:
        tab = self.plan.tab
        assert tab is not None
        if await page.locator(tab).count():
            self._enter(result, NavigationState.DIRECT_TAB_VISIBLE)
            await self._click(page, tab)
            return True

        self._enter(result, NavigationState.NEED_ENTITY_CLICK)
        if not await self._wait_for(page, self.plan.entity_link, self.plan.entity_timeout_ms):
            logger.warning("Hotel entity link not found for %s", self.plan.name)
            return False
        # click_first absorbs per-strategy Playwright errors, so the only
        # timeout that can leave this block is the navigation wait itself.
        try:
            async with page.expect_navigation(wait_until=self.plan.wait_until):
                await self._click(page, self.plan.entity_link)
        except PlaywrightTimeoutError:
            # Some entity links swap the panel in place instead of loading a page.
            logger.debug("No full navigation after entity click; waiting for tab in place")
        else:
            logger.info("Hotel page loaded")

        if not await self._wait_for(page, tab, self.plan.tab_timeout_ms):
            logger.warning("%s tab %s not found on hotel page", self.plan.name, tab)
            return False
        await self._click(page, tab)
        return True

    async def _click(self, page: Page, selector: str) -> None:
        if not await click_first(page, selector, self.plan.click_strategies):
            raise ClickError(selector)

    @staticmethod
    async def _wait_for(page: Page, selector: str, timeout_ms: int) -> bool:
        try:
            await page.wait_for_selector(selector, timeout=timeout_ms)
        except PlaywrightTimeoutError:
            return False
        return True

    def _enter(self, result: NavigationResult, state: NavigationState) -> NavigationResult:
        logger.debug("%s navigation -> %s", self.plan.name, state.value)
        result.history.append(state)
        return result
