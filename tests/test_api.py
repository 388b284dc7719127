from __future__ import annotations

from typing import Any

import pytest
from fastapi.testclient import TestClient
from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from hotel_scraper.api.app import create_app
from hotel_scraper.config.settings import Settings
from hotel_scraper.hotels import HotelInfo, HotelSuggestion, ImageRecord, PriceListing, RoomRate
from hotel_scraper.navigation.clicks import ClickError
from hotel_scraper.selectors.travel_page import EntitySelectors
from hotel_scraper.services.scraper import ImageBatch


class _FakeScraper:
    """Stands in for HotelScraper; records calls and returns canned results."""

    def __init__(self, **results: Any) -> None:
        self.results = results
        self.calls: list[tuple[str, tuple, dict]] = []

    async def _answer(self, name: str, *args: Any, **kwargs: Any) -> Any:
        self.calls.append((name, args, kwargs))
        result = self.results.get(name)
        if isinstance(result, BaseException):
            raise result
        return result

    async def hotel_info(self, destination: str):
        return await self._answer("hotel_info", destination)

    async def hotel_images(self, destination: str):
        return await self._answer("hotel_images", destination)

    async def hotel_prices(self, hotel_name, location, check_in_date, check_out_date):
        return await self._answer("hotel_prices", hotel_name, location, check_in_date, check_out_date)

    async def hotel_suggestions(self, destination, **kwargs):
        return await self._answer("hotel_suggestions", destination, **kwargs)


def _client(scraper: _FakeScraper, **settings: Any) -> TestClient:
    return TestClient(create_app(Settings(**settings), scraper))  # type: ignore[arg-type]


@pytest.mark.parametrize(
    ("path", "body", "missing"),
    [
        ("/api/hotel-info", {}, "destination"),
        ("/api/hotel-images", {"destination": "   "}, "destination"),
        ("/api/hotel-prices", {"hotelName": "Hilton", "location": "New York"}, "checkInDate"),
        ("/api/hotel-suggestions", {"travelers": 2}, "destination"),
    ],
)
def test_missing_fields_return_400_with_example(path: str, body: dict, missing: str) -> None:
    scraper = _FakeScraper()

    response = _client(scraper).post(path, json=body)

    assert response.status_code == 400
    payload = response.json()
    assert missing in payload["error"]
    assert payload["example"]
    assert scraper.calls == []


def test_prices_400_lists_every_missing_field() -> None:
    response = _client(_FakeScraper()).post("/api/hotel-prices", json={"location": "New York"})

    assert response.status_code == 400
    assert response.json()["error"] == (
        "Missing required parameters: hotelName, checkInDate, checkOutDate"
    )


def test_malformed_body_maps_to_400() -> None:
    client = _client(_FakeScraper())

    no_body = client.post("/api/hotel-info")
    bad_type = client.post("/api/hotel-suggestions", json={"destination": "Paris", "travelers": 0})
    truncated = client.post(
        "/api/hotel-info",
        content=b'{"destination": ',
        headers={"Content-Type": "application/json"},
    )

    assert no_body.status_code == 400
    assert no_body.json()["example"] == {"destination": "Hilton New York"}
    assert bad_type.status_code == 400
    assert bad_type.json()["error"] == "Invalid or missing parameter(s): travelers"
    assert truncated.status_code == 400
    assert truncated.json()["error"] == "Invalid or missing parameter(s): body"
    assert truncated.json()["example"] == {"destination": "Hilton New York"}


def test_usage_doc_describes_post_body() -> None:
    response = _client(_FakeScraper(), port=4100).get("/api/hotel-info")

    assert response.status_code == 200
    payload = response.json()
    assert payload["usage"]["method"] == "POST"
    assert "destination" in payload["usage"]["body"]
    assert "http://localhost:4100/api/hotel-info" in payload["example"]["curl"]


def test_hotel_info_success() -> None:
    info = HotelInfo(description="Iconic Midtown hotel.", address="1335 6th Ave, New York")
    scraper = _FakeScraper(hotel_info=info)

    response = _client(scraper).post("/api/hotel-info", json={"destination": "Hilton New York"})

    assert response.status_code == 200
    payload = response.json()["hotelInfo"]
    assert payload["description"] == "Iconic Midtown hotel."
    assert payload["address"] == "1335 6th Ave, New York"
    assert payload["phone"] == ""
    assert scraper.calls == [("hotel_info", ("Hilton New York",), {})]


def test_hotel_info_not_found_is_404_not_null() -> None:
    response = _client(_FakeScraper(hotel_info=None)).post("/api/hotel-info", json={"destination": "Nowhere"})

    assert response.status_code == 404
    payload = response.json()
    assert payload["error"] == "Could not find hotel information"
    assert "try a different" in payload["message"]


def test_hotel_images_returns_validated_images() -> None:
    candidates = [ImageRecord(url=f"https://img.example/{index}.jpg") for index in range(10)]
    batch = ImageBatch(candidates=candidates, valid=candidates[:7])

    response = _client(_FakeScraper(hotel_images=batch)).post(
        "/api/hotel-images", json={"destination": "Hilton New York"}
    )

    assert response.status_code == 200
    images = response.json()["hotelImages"]
    assert len(images) == 7
    assert images[0] == {"url": "https://img.example/0.jpg", "alt": "", "caption": ""}


@pytest.mark.parametrize(
    ("batch", "error"),
    [
        (ImageBatch(), "Could not find hotel images"),
        (ImageBatch(candidates=[ImageRecord(url="https://img.example/x.jpg")]), "Could not find valid hotel images"),
    ],
)
def test_hotel_images_404_variants(batch: ImageBatch, error: str) -> None:
    response = _client(_FakeScraper(hotel_images=batch)).post(
        "/api/hotel-images", json={"destination": "Hilton New York"}
    )

    assert response.status_code == 404
    assert response.json()["error"] == error


def test_hotel_prices_success_and_not_found() -> None:
    body = {
        "hotelName": "Hilton",
        "location": "New York",
        "checkInDate": "2025-06-01",
        "checkOutDate": "2025-06-05",
    }
    listing = PriceListing(
        provider="Expedia",
        logo="https://logo.example/expedia.png",
        rooms=[RoomRate(type="Queen Room", base_price="$250", total_price="$1,100", url="https://expedia.example")],
    )
    scraper = _FakeScraper(hotel_prices=[listing])

    ok = _client(scraper).post("/api/hotel-prices", json=body)
    missing = _client(_FakeScraper(hotel_prices=[])).post("/api/hotel-prices", json=body)

    assert ok.status_code == 200
    assert ok.json()["prices"][0]["rooms"][0]["totalPrice"] == "$1,100"
    assert scraper.calls[0][1] == ("Hilton", "New York", "2025-06-01", "2025-06-05")
    assert missing.status_code == 404
    assert missing.json()["error"] == "Could not find hotel prices"


def test_hotel_suggestions_success() -> None:
    suggestions = [HotelSuggestion(name=f"Hotel {index}", price="$120") for index in range(10)]
    scraper = _FakeScraper(hotel_suggestions=suggestions)

    response = _client(scraper).post(
        "/api/hotel-suggestions",
        json={"destination": "Paris", "checkIn": "2025-06-01", "checkOut": "2025-06-05", "travelers": 2},
    )

    assert response.status_code == 200
    assert len(response.json()["hotelSuggestions"]) == 10
    assert scraper.calls[0][2] == {"check_in": "2025-06-01", "check_out": "2025-06-05", "travelers": 2}


def test_automation_failure_is_500_without_details_in_production() -> None:
    scraper = _FakeScraper(hotel_info=PlaywrightTimeoutError("Timeout 15000ms exceeded"))

    response = _client(scraper, environment="production").post(
        "/api/hotel-info", json={"destination": "Hilton New York"}
    )

    assert response.status_code == 500
    payload = response.json()
    assert payload["error"] == "Failed to scrape hotel information"
    assert "Timeout 15000ms exceeded" in payload["message"]
    assert "details" not in payload


def test_click_failure_is_500_not_404() -> None:
    scraper = _FakeScraper(hotel_images=ClickError(EntitySelectors.entity_link))

    response = _client(scraper).post("/api/hotel-images", json={"destination": "Hilton New York"})

    assert response.status_code == 500
    payload = response.json()
    assert payload["error"] == "Failed to scrape hotel images"
    assert "all click strategies failed" in payload["message"]


def test_automation_failure_includes_details_in_development() -> None:
    scraper = _FakeScraper(hotel_suggestions=RuntimeError("browser crashed"))

    response = _client(scraper, environment="development").post(
        "/api/hotel-suggestions", json={"destination": "Paris"}
    )

    assert response.status_code == 500
    payload = response.json()
    assert payload["message"] == "browser crashed"
    assert "RuntimeError" in payload["details"]


def test_cors_headers_are_present() -> None:
    response = _client(_FakeScraper()).get("/api/hotel-info", headers={"Origin": "https://app.example"})

    assert response.headers["access-control-allow-origin"] == "*"
