"""About-tab workflow."""
from __future__ import annotations

import logging
from typing import Optional

from playwright.async_api import Page

from hotel_scraper.hotels import HotelInfo, extract_hotel_info
from hotel_scraper.navigation.navigator import ABOUT_PLAN, NavigationPlan, TabNavigator

logger = logging.getLogger(__name__)


class HotelInfoTask:
    """Open a hotel's About tab and read its metadata."""

    def __init__(self, search_url: str, *, plan: NavigationPlan = ABOUT_PLAN) -> None:
        self.search_url = search_url
        self.plan = plan

    async def run(self, page: Page) -> Optional[HotelInfo]:
        result = await TabNavigator(self.plan).reach(page, self.search_url)
        if not result.reached:
            return None
        logger.info("About section loaded")
        return await extract_hotel_info(page)
