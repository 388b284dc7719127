"""Hotel artifact models and DOM extraction helpers."""

from .extractors import (
    build_hotel_info,
    build_image_records,
    build_price_listings,
    build_suggestions,
    extract_hotel_info,
    extract_image_records,
    extract_price_listings,
    extract_suggestions,
)
from .models import (
    HotelInfo,
    HotelSuggestion,
    ImageRecord,
    PriceListing,
    RoomRate,
)

__all__ = [
    "HotelInfo",
    "HotelSuggestion",
    "ImageRecord",
    "PriceListing",
    "RoomRate",
    "build_hotel_info",
    "build_image_records",
    "build_price_listings",
    "build_suggestions",
    "extract_hotel_info",
    "extract_image_records",
    "extract_price_listings",
    "extract_suggestions",
]
