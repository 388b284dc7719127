"""Hotel search suggestions workflow.

Unlike the tab workflows this one starts from the hotels home page and types
the query like a person would before waiting for the results list. The
pre-search steps only lower the chance of an interstitial; none of them is
required for a result, so each is skipped when its element is missing.
"""
from __future__ import annotations

import logging
import re
from typing import List, Optional

from playwright.async_api import Page, TimeoutError as PlaywrightTimeoutError

from hotel_scraper.hotels import HotelSuggestion, extract_suggestions
from hotel_scraper.hotels.extractors import MAX_SUGGESTIONS
from hotel_scraper.navigation.navigator import SUGGESTIONS_PLAN, NavigationPlan, TabNavigator
from hotel_scraper.selectors.travel_page import SuggestionSelectors
from hotel_scraper.utils.throttling import human_delay, human_type, wander_mouse

logger = logging.getLogger(__name__)

_INPUT_TIMEOUT_MS = 10000
_MAX_TRAVELER_CLICKS = 12
_DIGITS = re.compile(r"\d+")


class HotelSuggestionsTask:
    def __init__(
        self,
        destination: str,
        *,
        home_url: str,
        check_in: Optional[str] = None,
        check_out: Optional[str] = None,
        travelers: Optional[int] = None,
        viewport: tuple[int, int] = (1920, 1080),
        typing_delay: tuple[float, float] = (0.06, 0.22),
        limit: int = MAX_SUGGESTIONS,
        plan: NavigationPlan = SUGGESTIONS_PLAN,
    ) -> None:
        self.destination = destination
        self.home_url = home_url
        self.check_in = check_in
        self.check_out = check_out
        self.travelers = travelers
        self.viewport = viewport
        self.typing_delay = typing_delay
        self.limit = limit
        self.plan = plan

    async def run(self, page: Page) -> List[HotelSuggestion]:
        logger.info("Executing hotel search for '%s'", self.destination)
        await page.goto(self.home_url, wait_until="domcontentloaded")
        await wander_mouse(page, *self.viewport)

        search_input = page.locator(SuggestionSelectors.search_input).first
        try:
            await search_input.wait_for(timeout=_INPUT_TIMEOUT_MS)
        except PlaywrightTimeoutError:
            logger.warning("Search input not found at selector %s", SuggestionSelectors.search_input)
            return []
        await search_input.fill("")
        await human_type(search_input, self.destination, min_seconds=self.typing_delay[0], max_seconds=self.typing_delay[1])
        await human_delay(0.3, 0.8)
        await search_input.press("Enter")
        await page.wait_for_load_state("domcontentloaded")

        if self.check_in:
            await self._fill_date(page, SuggestionSelectors.check_in_input, self.check_in)
        if self.check_out:
            await self._fill_date(page, SuggestionSelectors.check_out_input, self.check_out)
        if self.travelers:
            await self._set_travelers(page, self.travelers)

        result = await TabNavigator(self.plan).reach(page)
        if not result.reached:
            return []
        return await extract_suggestions(page, limit=self.limit)

    async def _fill_date(self, page: Page, selector: str, value: str) -> None:
        field = page.locator(selector).first
        if not await field.count():
            logger.info("Date input %s not present; keeping site default", selector)
            return
        await field.fill("")
        await human_type(field, value, min_seconds=self.typing_delay[0], max_seconds=self.typing_delay[1])
        await field.press("Enter")
        await human_delay(0.3, 0.8)

    async def _set_travelers(self, page: Page, travelers: int) -> None:
        button = page.locator(SuggestionSelectors.travelers_button).first
        if not await button.count():
            logger.info("Travelers dropdown not present; keeping site default")
            return
        await button.click()
        await human_delay(0.2, 0.6)
        for _ in range(_MAX_TRAVELER_CLICKS):
            current = await self._current_adults(page)
            if current is None or current == travelers:
                break
            target = (
                SuggestionSelectors.adults_increment
                if current < travelers
                else SuggestionSelectors.adults_decrement
            )
            control = page.locator(target).first
            if not await control.count():
                logger.info("Traveler control %s not present", target)
                break
            await control.click()
            await human_delay(0.1, 0.3)
        done = page.locator(SuggestionSelectors.travelers_done).first
        if await done.count():
            await done.click()

    @staticmethod
    async def _current_adults(page: Page) -> Optional[int]:
        counter = page.locator(SuggestionSelectors.adults_count).first
        if not await counter.count():
            return None
        match = _DIGITS.search(await counter.inner_text())
        return int(match.group()) if match else None
