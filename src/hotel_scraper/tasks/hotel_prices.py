"""Prices-tab workflow."""
from __future__ import annotations

import logging
from typing import List

from playwright.async_api import Page

from hotel_scraper.hotels import PriceListing, extract_price_listings
from hotel_scraper.navigation.navigator import PRICES_PLAN, NavigationPlan, TabNavigator

logger = logging.getLogger(__name__)


class HotelPricesTask:
    def __init__(self, search_url: str, *, plan: NavigationPlan = PRICES_PLAN) -> None:
        self.search_url = search_url
        self.plan = plan

    async def run(self, page: Page) -> List[PriceListing]:
        result = await TabNavigator(self.plan).reach(page, self.search_url)
        if not result.reached:
            return []
        logger.info("Price providers loaded")
        return await extract_price_listings(page)
