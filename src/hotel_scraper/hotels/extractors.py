"""DOM extraction for each hotel artifact.

Each artifact has a small in-page script that returns raw dicts, and a pure
Python builder that turns those dicts into models. Builders never raise on
missing keys: absent values become empty strings.
"""
from __future__ import annotations

import logging
from typing import Any, Iterable, List, Optional

from playwright.async_api import Page

from hotel_scraper.selectors.travel_page import (
    AboutSelectors,
    PhotoSelectors,
    PriceSelectors,
    SuggestionSelectors,
)

from .models import HotelInfo, HotelSuggestion, ImageRecord, PriceListing, RoomRate

logger = logging.getLogger(__name__)

MAX_IMAGES = 10
MAX_SUGGESTIONS = 10


def _selector_map(selectors: type) -> dict[str, str]:
    return {
        name: value
        for name, value in vars(selectors).items()
        if not name.startswith("_") and isinstance(value, str)
    }


def _text(value: Any) -> str:
    if value is None:
        return ""
    return str(value).strip()


def _optional_text(value: Any) -> Optional[str]:
    return _text(value) or None


def _text_list(values: Any) -> List[str]:
    if not values or isinstance(values, str):
        return []
    items = (_text(value) for value in values)
    return [item for item in items if item]


_ABOUT_SCRIPT = """
(sel) => {
  const section = document.querySelector(sel.section);
  if (!section) return null;
  const text = (selector) => {
    const el = section.querySelector(selector);
    return el ? el.textContent : '';
  };
  const website = section.querySelector(sel.website);
  return {
    description: Array.from(section.querySelectorAll(sel.description))
      .map(el => el.textContent)
      .filter(Boolean),
    checkInTime: text(sel.check_in_time),
    checkOutTime: text(sel.check_out_time),
    address: text(sel.address),
    phone: text(sel.phone),
    websiteUrl: website ? website.href : '',
  };
}
"""

_PHOTOS_SCRIPT = """
(args) => {
  const sel = args.selectors;
  return Array.from(document.querySelectorAll(sel.image))
    .slice(0, args.limit)
    .map(img => {
      const feature = img.closest(sel.feature_container);
      return {
        url: img.getAttribute('src') || img.getAttribute('data-src') || '',
        alt: img.getAttribute('alt') || '',
        caption: feature ? feature.textContent : '',
      };
    });
}
"""

_PRICES_SCRIPT = """
(sel) => {
  const section = document.querySelector(sel.provider_section);
  if (!section) return null;
  const textOf = (root, selector) => {
    const el = root.querySelector(selector);
    return el ? el.textContent : '';
  };
  return Array.from(section.querySelectorAll(sel.provider)).map(provider => {
    const logo = provider.querySelector(sel.provider_logo);
    const rooms = Array.from(provider.querySelectorAll(sel.room)).map(room => {
      const link = room.querySelector(sel.room_link) || provider.querySelector(sel.room_link);
      return {
        type: textOf(room, sel.room_type),
        basePrice: textOf(room, sel.base_price),
        totalPrice: textOf(room, sel.total_price),
        url: link ? link.href : '',
        cancellationPolicy: textOf(room, sel.cancellation),
        features: Array.from(room.querySelectorAll(sel.feature)).map(el => el.textContent),
      };
    });
    return {
      provider: textOf(provider, sel.provider_name),
      logo: logo ? (logo.getAttribute('src') || '') : '',
      rooms,
    };
  });
}
"""

_SUGGESTIONS_SCRIPT = """
(args) => {
  const sel = args.selectors;
  const container = document.querySelector(sel.results_container);
  if (!container) return null;
  const textOf = (root, selector) => {
    const el = root.querySelector(selector);
    return el ? el.textContent : '';
  };
  return Array.from(container.querySelectorAll(sel.card))
    .slice(0, args.limit)
    .map(card => {
      const link = card.querySelector(sel.link);
      const image = card.querySelector(sel.image);
      return {
        name: textOf(card, sel.name),
        price: textOf(card, sel.price),
        rating: textOf(card, sel.rating),
        reviewCount: textOf(card, sel.review_count),
        deal: textOf(card, sel.deal),
        url: link ? link.href : '',
        image: image ? (image.getAttribute('src') || image.getAttribute('data-src') || '') : '',
        location: textOf(card, sel.location),
        amenities: Array.from(card.querySelectorAll(sel.amenity)).map(el => el.textContent),
        description: textOf(card, sel.description),
      };
    });
}
"""


def build_hotel_info(raw: Optional[dict[str, Any]]) -> Optional[HotelInfo]:
    """Return ``None`` only when the About section itself was missing."""
    if raw is None:
        return None
    description = raw.get("description")
    if isinstance(description, (list, tuple)):
        description = "\n\n".join(_text_list(description))
    return HotelInfo(
        description=_text(description),
        check_in_time=_text(raw.get("checkInTime")),
        check_out_time=_text(raw.get("checkOutTime")),
        address=_text(raw.get("address")),
        phone=_text(raw.get("phone")),
        website_url=_text(raw.get("websiteUrl")),
    )


def build_image_records(raw: Optional[Iterable[dict[str, Any]]], *, limit: int = MAX_IMAGES) -> List[ImageRecord]:
    records: List[ImageRecord] = []
    for entry in list(raw or [])[:limit]:
        records.append(
            ImageRecord(
                url=_text(entry.get("url")),
                alt=_text(entry.get("alt")),
                caption=_text(entry.get("caption")),
            )
        )
    return records


def build_room_rate(raw: dict[str, Any]) -> RoomRate:
    return RoomRate(
        type=_text(raw.get("type")),
        base_price=_text(raw.get("basePrice")),
        total_price=_text(raw.get("totalPrice")),
        url=_text(raw.get("url")),
        cancellation_policy=_optional_text(raw.get("cancellationPolicy")),
        features=_text_list(raw.get("features")) or None,
    )


def build_price_listings(raw: Optional[Iterable[dict[str, Any]]]) -> List[PriceListing]:
    listings: List[PriceListing] = []
    for entry in raw or []:
        rooms = [build_room_rate(room) for room in entry.get("rooms") or []]
        rooms = [room for room in rooms if room.type or room.base_price or room.total_price]
        provider = _text(entry.get("provider"))
        if not provider and not rooms:
            continue
        listings.append(PriceListing(provider=provider, logo=_text(entry.get("logo")), rooms=rooms))
    return listings


def build_suggestions(
    raw: Optional[Iterable[dict[str, Any]]], *, limit: int = MAX_SUGGESTIONS
) -> List[HotelSuggestion]:
    suggestions: List[HotelSuggestion] = []
    for entry in list(raw or [])[:limit]:
        suggestions.append(
            HotelSuggestion(
                name=_text(entry.get("name")),
                price=_text(entry.get("price")),
                rating=_text(entry.get("rating")),
                review_count=_text(entry.get("reviewCount")),
                deal=_text(entry.get("deal")),
                url=_text(entry.get("url")),
                image=_text(entry.get("image")),
                location=_text(entry.get("location")),
                amenities=_text_list(entry.get("amenities")),
                description=_text(entry.get("description")),
            )
        )
    return suggestions


async def extract_hotel_info(page: Page) -> Optional[HotelInfo]:
    raw = await page.evaluate(_ABOUT_SCRIPT, _selector_map(AboutSelectors))
    if raw is None:
        logger.info("About section not found")
    return build_hotel_info(raw)


async def extract_image_records(page: Page, *, limit: int = MAX_IMAGES) -> List[ImageRecord]:
    raw = await page.evaluate(
        _PHOTOS_SCRIPT, {"selectors": _selector_map(PhotoSelectors), "limit": limit}
    )
    records = build_image_records(raw, limit=limit)
    logger.info("Found %s candidate images", len(records))
    return records


async def extract_price_listings(page: Page) -> List[PriceListing]:
    raw = await page.evaluate(_PRICES_SCRIPT, _selector_map(PriceSelectors))
    if raw is None:
        logger.info("Price provider section not found")
    listings = build_price_listings(raw)
    logger.info("Found %s price providers", len(listings))
    return listings


async def extract_suggestions(page: Page, *, limit: int = MAX_SUGGESTIONS) -> List[HotelSuggestion]:
    raw = await page.evaluate(
        _SUGGESTIONS_SCRIPT, {"selectors": _selector_map(SuggestionSelectors), "limit": limit}
    )
    suggestions = build_suggestions(raw, limit=limit)
    logger.info("Found %s hotel suggestions", len(suggestions))
    return suggestions
