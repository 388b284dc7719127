"""Request bodies and usage documentation for the API routes."""
from __future__ import annotations

import json
from typing import Any, ClassVar, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from hotel_scraper.api.errors import MissingParameterError


class ScrapeRequest(BaseModel):
    """Base body: every field optional so missing ones can be reported together."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore", str_strip_whitespace=True)

    required_fields: ClassVar[tuple[str, ...]] = ()
    example: ClassVar[dict[str, Any]] = {}
    field_docs: ClassVar[dict[str, str]] = {}

    def missing_fields(self) -> List[str]:
        missing: List[str] = []
        for name in self.required_fields:
            value = getattr(self, name)
            if value is None or (isinstance(value, str) and not value):
                field_info = type(self).model_fields[name]
                missing.append(field_info.alias or name)
        return missing

    def require(self) -> None:
        missing = self.missing_fields()
        if missing:
            raise MissingParameterError(missing, self.example)


class HotelSearchRequest(ScrapeRequest):
    destination: Optional[str] = None

    required_fields: ClassVar[tuple[str, ...]] = ("destination",)
    example: ClassVar[dict[str, Any]] = {"destination": "Hilton New York"}
    field_docs: ClassVar[dict[str, str]] = {
        "destination": 'Hotel name or location (e.g., "Hilton New York")',
    }


class HotelPricesRequest(ScrapeRequest):
    hotel_name: Optional[str] = Field(default=None, alias="hotelName")
    location: Optional[str] = None
    check_in_date: Optional[str] = Field(default=None, alias="checkInDate")
    check_out_date: Optional[str] = Field(default=None, alias="checkOutDate")

    required_fields: ClassVar[tuple[str, ...]] = ("hotel_name", "location", "check_in_date", "check_out_date")
    example: ClassVar[dict[str, Any]] = {
        "hotelName": "Hilton New York",
        "location": "New York",
        "checkInDate": "2025-06-01",
        "checkOutDate": "2025-06-05",
    }
    field_docs: ClassVar[dict[str, str]] = {
        "hotelName": "Hotel name",
        "location": "City or area the hotel is in",
        "checkInDate": "Check-in date (YYYY-MM-DD)",
        "checkOutDate": "Check-out date (YYYY-MM-DD)",
    }


class HotelSuggestionsRequest(ScrapeRequest):
    destination: Optional[str] = None
    check_in: Optional[str] = Field(default=None, alias="checkIn")
    check_out: Optional[str] = Field(default=None, alias="checkOut")
    travelers: Optional[int] = Field(default=None, ge=1, le=20)

    required_fields: ClassVar[tuple[str, ...]] = ("destination",)
    example: ClassVar[dict[str, Any]] = {
        "destination": "Paris",
        "checkIn": "2025-06-01",
        "checkOut": "2025-06-05",
        "travelers": 2,
    }
    field_docs: ClassVar[dict[str, str]] = {
        "destination": "City, area or hotel name to search for",
        "checkIn": "Optional check-in date (YYYY-MM-DD)",
        "checkOut": "Optional check-out date (YYYY-MM-DD)",
        "travelers": "Optional number of adult travelers",
    }


def usage_doc(title: str, endpoint: str, model: type[ScrapeRequest], *, port: int) -> dict[str, Any]:
    """Self-describing payload served on GET for each scrape route."""
    url = f"http://localhost:{port}{endpoint}"
    body = json.dumps(model.example)
    return {
        "message": f"Welcome to the {title} API",
        "usage": {
            "method": "POST",
            "endpoint": endpoint,
            "headers": {"Content-Type": "application/json"},
            "body": dict(model.field_docs),
            "required": [
                model.model_fields[name].alias or name for name in model.required_fields
            ],
        },
        "example": {
            "curl": f"curl -X POST {url} -H \"Content-Type: application/json\" -d '{body}'",
            "body": dict(model.example),
        },
    }
