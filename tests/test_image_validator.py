from __future__ import annotations

import asyncio

import httpx
import pytest

from hotel_scraper.hotels import ImageRecord
from hotel_scraper.services.image_validator import ImageValidator


def _records(count: int) -> list[ImageRecord]:
    return [ImageRecord(url=f"https://img.example/{index}.jpg", alt=f"Photo {index}") for index in range(count)]


@pytest.mark.asyncio
async def test_filter_drops_images_that_fail_head_requests() -> None:
    broken = {"/2.jpg", "/5.jpg", "/7.jpg"}
    methods: list[str] = []

    def handler(request: httpx.Request) -> httpx.Response:
        methods.append(request.method)
        if request.url.path in broken:
            return httpx.Response(404)
        return httpx.Response(200, headers={"content-type": "image/jpeg"})

    validator = ImageValidator(transport=httpx.MockTransport(handler))

    valid = await validator.filter(_records(10))

    assert len(valid) == 7
    assert [record.url for record in valid] == [
        f"https://img.example/{index}.jpg" for index in range(10) if f"/{index}.jpg" not in broken
    ]
    assert set(methods) == {"HEAD"}


@pytest.mark.asyncio
async def test_filter_rejects_non_image_content_and_network_errors() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path == "/0.jpg":
            return httpx.Response(200, headers={"content-type": "text/html; charset=utf-8"})
        if request.url.path == "/1.jpg":
            raise httpx.ConnectError("connection refused", request=request)
        if request.url.path == "/2.jpg":
            return httpx.Response(200)
        return httpx.Response(200, headers={"content-type": "Image/WebP"})

    validator = ImageValidator(transport=httpx.MockTransport(handler))

    valid = await validator.filter(_records(4))

    assert [record.url for record in valid] == ["https://img.example/3.jpg"]


@pytest.mark.asyncio
async def test_checks_run_concurrently() -> None:
    in_flight = 0
    peak = 0

    async def handler(request: httpx.Request) -> httpx.Response:
        nonlocal in_flight, peak
        in_flight += 1
        peak = max(peak, in_flight)
        await asyncio.sleep(0.01)
        in_flight -= 1
        return httpx.Response(200, headers={"content-type": "image/png"})

    validator = ImageValidator(transport=httpx.MockTransport(handler))

    valid = await validator.filter(_records(6))

    assert len(valid) == 6
    assert peak > 1


@pytest.mark.asyncio
async def test_blank_url_is_never_an_image() -> None:
    def handler(request: httpx.Request) -> httpx.Response:  # pragma: no cover - must not be called
        raise AssertionError("no request expected")

    validator = ImageValidator(transport=httpx.MockTransport(handler))

    assert await validator.is_image("") is False
    assert await validator.filter([]) == []
