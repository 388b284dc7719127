"""Service layer: browser-backed scraping and photo validation."""

from .image_validator import ImageValidator
from .scraper import HotelScraper, ImageBatch

__all__ = [
    "HotelScraper",
    "ImageBatch",
    "ImageValidator",
]
