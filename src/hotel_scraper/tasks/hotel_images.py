"""Photos-tab workflow."""
from __future__ import annotations

import logging
from typing import List

from playwright.async_api import Page

from hotel_scraper.hotels import ImageRecord, extract_image_records
from hotel_scraper.hotels.extractors import MAX_IMAGES
from hotel_scraper.navigation.navigator import PHOTOS_PLAN, NavigationPlan, TabNavigator

logger = logging.getLogger(__name__)


class HotelImagesTask:
    """Open a hotel's Photos tab and collect candidate images (unvalidated)."""

    def __init__(self, search_url: str, *, limit: int = MAX_IMAGES, plan: NavigationPlan = PHOTOS_PLAN) -> None:
        self.search_url = search_url
        self.limit = limit
        self.plan = plan

    async def run(self, page: Page) -> List[ImageRecord]:
        result = await TabNavigator(self.plan).reach(page, self.search_url)
        if not result.reached:
            return []
        logger.info("Photos section loaded")
        return await extract_image_records(page, limit=self.limit)
