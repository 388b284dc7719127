"""Dataclasses for the hotel artifacts returned by the API.

Every scalar is a string so the JSON payload never carries ``null`` for a field
that simply was not on the page.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass(slots=True)
class HotelInfo:
    """Contents of a hotel's About tab."""

    description: str = ""
    check_in_time: str = ""
    check_out_time: str = ""
    address: str = ""
    phone: str = ""
    website_url: str = ""

    def to_dict(self) -> dict[str, object]:
        return {
            "description": self.description,
            "checkInTime": self.check_in_time,
            "checkOutTime": self.check_out_time,
            "address": self.address,
            "phone": self.phone,
            "websiteUrl": self.website_url,
        }


@dataclass(slots=True)
class ImageRecord:
    url: str
    alt: str = ""
    caption: str = ""

    def to_dict(self) -> dict[str, object]:
        return {"url": self.url, "alt": self.alt, "caption": self.caption}


@dataclass(slots=True)
class RoomRate:
    """One bookable room offered by a provider."""

    type: str = ""
    base_price: str = ""
    total_price: str = ""
    url: str = ""
    cancellation_policy: Optional[str] = None
    features: Optional[List[str]] = None

    def to_dict(self) -> dict[str, object]:
        payload: dict[str, object] = {
            "type": self.type,
            "basePrice": self.base_price,
            "totalPrice": self.total_price,
            "url": self.url,
        }
        if self.cancellation_policy:
            payload["cancellationPolicy"] = self.cancellation_policy
        if self.features:
            payload["features"] = list(self.features)
        return payload


@dataclass(slots=True)
class PriceListing:
    """A booking provider and the rooms it lists."""

    provider: str = ""
    logo: str = ""
    rooms: List[RoomRate] = field(default_factory=list)

    def to_dict(self) -> dict[str, object]:
        return {
            "provider": self.provider,
            "logo": self.logo,
            "rooms": [room.to_dict() for room in self.rooms],
        }


@dataclass(slots=True)
class HotelSuggestion:
    name: str = ""
    price: str = ""
    rating: str = ""
    review_count: str = ""
    deal: str = ""
    url: str = ""
    image: str = ""
    location: str = ""
    amenities: List[str] = field(default_factory=list)
    description: str = ""

    def to_dict(self) -> dict[str, object]:
        return {
            "name": self.name,
            "price": self.price,
            "rating": self.rating,
            "reviewCount": self.review_count,
            "deal": self.deal,
            "url": self.url,
            "image": self.image,
            "location": self.location,
            "amenities": list(self.amenities),
            "description": self.description,
        }
