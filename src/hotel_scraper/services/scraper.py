"""Entry point for each scrape: one fresh browser session per call."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Protocol, TypeVar

from playwright.async_api import Page

from hotel_scraper.config.settings import Settings
from hotel_scraper.core.browser import BrowserSession
from hotel_scraper.hotels import HotelInfo, HotelSuggestion, ImageRecord, PriceListing
from hotel_scraper.services.image_validator import ImageValidator
from hotel_scraper.tasks.hotel_images import HotelImagesTask
from hotel_scraper.tasks.hotel_info import HotelInfoTask
from hotel_scraper.tasks.hotel_prices import HotelPricesTask
from hotel_scraper.tasks.hotel_suggestions import HotelSuggestionsTask

logger = logging.getLogger(__name__)

T = TypeVar("T")


class PageTask(Protocol[T]):
    async def run(self, page: Page) -> T:  # pragma: no cover - protocol
        ...


@dataclass
class ImageBatch:
    """Photos extracted from the page and the subset that passed validation."""

    candidates: List[ImageRecord] = field(default_factory=list)
    valid: List[ImageRecord] = field(default_factory=list)


class HotelScraper:
    """Runs page tasks inside an isolated :class:`BrowserSession`."""

    def __init__(
        self,
        settings: Settings,
        *,
        validator: Optional[ImageValidator] = None,
        session_factory: Callable[[Settings], BrowserSession] = BrowserSession,
    ) -> None:
        self.settings = settings
        self.validator = validator or ImageValidator(
            timeout=settings.image_validation_timeout_s,
            headers={"User-Agent": settings.user_agent} if settings.user_agent else None,
        )
        self._session_factory = session_factory

    async def run_task(self, task: PageTask[T]) -> T:
        async with self._session_factory(self.settings) as session:
            page = await session.new_page()
            return await task.run(page)

    async def hotel_info(self, destination: str) -> Optional[HotelInfo]:
        logger.info("Scraping hotel info for: %s", destination)
        return await self.run_task(HotelInfoTask(self.settings.search_url(destination)))

    async def hotel_images(self, destination: str) -> ImageBatch:
        logger.info("Scraping hotel images for: %s", destination)
        candidates = await self.run_task(HotelImagesTask(self.settings.search_url(destination)))
        if not candidates:
            return ImageBatch()
        logger.info("Validating image URLs...")
        valid = await self.validator.filter(candidates)
        return ImageBatch(candidates=candidates, valid=valid)

    async def hotel_prices(
        self,
        hotel_name: str,
        location: str,
        check_in_date: str,
        check_out_date: str,
    ) -> List[PriceListing]:
        query = f"{hotel_name} {location}".strip()
        logger.info("Scraping hotel prices for: %s (%s -> %s)", query, check_in_date, check_out_date)
        url = self.settings.search_url(query, checkin=check_in_date, checkout=check_out_date)
        return await self.run_task(HotelPricesTask(url))

    async def hotel_suggestions(
        self,
        destination: str,
        *,
        check_in: Optional[str] = None,
        check_out: Optional[str] = None,
        travelers: Optional[int] = None,
    ) -> List[HotelSuggestion]:
        logger.info("Scraping hotel suggestions for: %s", destination)
        task = HotelSuggestionsTask(
            destination,
            home_url=self.settings.hotels_home_url(),
            check_in=check_in,
            check_out=check_out,
            travelers=travelers,
            viewport=(self.settings.viewport_width, self.settings.viewport_height),
            typing_delay=self.settings.typing_delay_range(),
        )
        return await self.run_task(task)
