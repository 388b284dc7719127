from __future__ import annotations

from typing import Any

import pytest

from hotel_scraper.hotels import (
    build_hotel_info,
    build_image_records,
    build_price_listings,
    build_suggestions,
    extract_hotel_info,
    extract_image_records,
    extract_suggestions,
)


class _EvaluatingPage:
    def __init__(self, result: Any) -> None:
        self._result = result
        self.calls: list[Any] = []

    async def evaluate(self, script: str, arg: Any = None) -> Any:
        self.calls.append(arg)
        return self._result


def test_build_hotel_info_joins_paragraphs_and_defaults_missing_fields():
    info = build_hotel_info(
        {
            "description": ["Iconic Midtown hotel. ", "", "Steps from Central Park."],
            "checkInTime": " 4:00 PM ",
            "address": "1335 6th Ave, New York, NY 10019",
            "phone": None,
        }
    )

    assert info is not None
    payload = info.to_dict()
    assert payload == {
        "description": "Iconic Midtown hotel.\n\nSteps from Central Park.",
        "checkInTime": "4:00 PM",
        "checkOutTime": "",
        "address": "1335 6th Ave, New York, NY 10019",
        "phone": "",
        "websiteUrl": "",
    }
    assert all(isinstance(value, str) for value in payload.values())


def test_build_hotel_info_returns_none_without_about_section():
    assert build_hotel_info(None) is None


def test_build_image_records_keeps_first_ten():
    raw = [{"url": f"https://img.example/{index}.jpg", "alt": f"Photo {index}"} for index in range(15)]

    records = build_image_records(raw)

    assert len(records) == 10
    assert records[0].url == "https://img.example/0.jpg"
    assert records[-1].alt == "Photo 9"
    assert records[3].caption == ""


def test_build_price_listings_drops_empty_providers_and_optional_fields():
    raw = [
        {
            "provider": "Hotels.com",
            "logo": "https://logo.example/hotels.png",
            "rooms": [
                {
                    "type": "King Room",
                    "basePrice": "$289",
                    "totalPrice": "$1,340",
                    "url": "https://hotels.example/book",
                    "cancellationPolicy": "",
                    "features": [" Free Wi-Fi ", ""],
                },
                {"type": "", "basePrice": "", "totalPrice": ""},
            ],
        },
        {"provider": "", "logo": "", "rooms": []},
    ]

    listings = build_price_listings(raw)

    assert len(listings) == 1
    payload = listings[0].to_dict()
    assert payload["provider"] == "Hotels.com"
    assert payload["rooms"] == [
        {
            "type": "King Room",
            "basePrice": "$289",
            "totalPrice": "$1,340",
            "url": "https://hotels.example/book",
            "features": ["Free Wi-Fi"],
        }
    ]


def test_build_price_listings_handles_missing_section():
    assert build_price_listings(None) == []


def test_build_suggestions_never_exceeds_limit():
    raw = [{"name": f"Hotel {index}", "amenities": ["Pool", " "]} for index in range(25)]

    suggestions = build_suggestions(raw)

    assert len(suggestions) == 10
    assert suggestions[0].to_dict()["amenities"] == ["Pool"]
    assert suggestions[0].to_dict()["reviewCount"] == ""


@pytest.mark.asyncio
async def test_extract_hotel_info_passes_selectors_to_page():
    page = _EvaluatingPage({"description": ["A quiet hotel."], "websiteUrl": "https://hotel.example"})

    info = await extract_hotel_info(page)  # type: ignore[arg-type]

    assert info is not None
    assert info.website_url == "https://hotel.example"
    assert page.calls[0]["section"] == "section.mEKuwe"


@pytest.mark.asyncio
async def test_extract_image_records_truncates_and_passes_limit():
    page = _EvaluatingPage([{"url": f"https://img.example/{index}.jpg"} for index in range(12)])

    records = await extract_image_records(page, limit=10)  # type: ignore[arg-type]

    assert len(records) == 10
    assert page.calls[0]["limit"] == 10


@pytest.mark.asyncio
async def test_extract_suggestions_returns_empty_list_without_container():
    page = _EvaluatingPage(None)

    assert await extract_suggestions(page) == []  # type: ignore[arg-type]
