"""FastAPI application exposing the hotel scrapers.

- GET  /api/<artifact>  usage documentation
- POST /api/hotel-info, /api/hotel-images, /api/hotel-prices, /api/hotel-suggestions

Each POST validates its body, runs one isolated browser session and maps the
outcome onto 200 / 404 / 500.
"""
from __future__ import annotations

import logging
from typing import Awaitable, Optional, TypeVar

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from hotel_scraper.api.errors import MissingParameterError, NotFoundError, ScraperError, UpstreamError
from hotel_scraper.api.schemas import (
    HotelPricesRequest,
    HotelSearchRequest,
    HotelSuggestionsRequest,
    ScrapeRequest,
    usage_doc,
)
from hotel_scraper.config.settings import Settings
from hotel_scraper.services.scraper import HotelScraper

logger = logging.getLogger(__name__)

T = TypeVar("T")

HOTEL_INFO_PATH = "/api/hotel-info"
HOTEL_IMAGES_PATH = "/api/hotel-images"
HOTEL_PRICES_PATH = "/api/hotel-prices"
HOTEL_SUGGESTIONS_PATH = "/api/hotel-suggestions"

_REQUEST_MODELS: dict[str, type[ScrapeRequest]] = {
    HOTEL_INFO_PATH: HotelSearchRequest,
    HOTEL_IMAGES_PATH: HotelSearchRequest,
    HOTEL_PRICES_PATH: HotelPricesRequest,
    HOTEL_SUGGESTIONS_PATH: HotelSuggestionsRequest,
}

_RETRY_HINT = "Please try a different hotel name or location."


async def _guarded(call: Awaitable[T], error: str) -> T:
    """Await a scrape, turning unexpected failures into :class:`UpstreamError`."""
    try:
        return await call
    except ScraperError:
        raise
    except Exception as exc:
        logger.exception("%s", error)
        raise UpstreamError(error, exc) from exc


def create_app(settings: Optional[Settings] = None, scraper: Optional[HotelScraper] = None) -> FastAPI:
    settings = settings or Settings()
    scraper = scraper or HotelScraper(settings)

    app = FastAPI(title="Hotel Travel Scraper", version="1.0.0")
    app.state.settings = settings
    app.state.scraper = scraper
    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_origins),
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(ScraperError)
    async def _scraper_error(_request: Request, exc: ScraperError) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content=exc.to_dict(include_details=settings.is_development),
        )

    @app.exception_handler(RequestValidationError)
    async def _invalid_body(request: Request, exc: RequestValidationError) -> JSONResponse:
        model = _REQUEST_MODELS.get(request.url.path)
        # Malformed JSON reports ("body", <byte offset>); only string parts name a field.
        fields = sorted(
            {
                error["loc"][1]
                for error in exc.errors()
                if len(error.get("loc", ())) > 1
                and error["loc"][0] == "body"
                and isinstance(error["loc"][1], str)
            }
        ) or ["body"]
        logger.info("Rejected request to %s: invalid %s", request.url.path, ", ".join(fields))
        error = MissingParameterError(
            fields,
            model.example if model else {},
            error=f"Invalid or missing parameter(s): {', '.join(fields)}",
        )
        return JSONResponse(status_code=error.status_code, content=error.to_dict())

    @app.get(HOTEL_INFO_PATH)
    async def hotel_info_usage() -> dict:
        return usage_doc("Hotel Info", HOTEL_INFO_PATH, HotelSearchRequest, port=settings.port)

    @app.get(HOTEL_IMAGES_PATH)
    async def hotel_images_usage() -> dict:
        return usage_doc("Hotel Images", HOTEL_IMAGES_PATH, HotelSearchRequest, port=settings.port)

    @app.get(HOTEL_PRICES_PATH)
    async def hotel_prices_usage() -> dict:
        return usage_doc("Hotel Prices", HOTEL_PRICES_PATH, HotelPricesRequest, port=settings.port)

    @app.get(HOTEL_SUGGESTIONS_PATH)
    async def hotel_suggestions_usage() -> dict:
        return usage_doc("Hotel Suggestions", HOTEL_SUGGESTIONS_PATH, HotelSuggestionsRequest, port=settings.port)

    @app.post(HOTEL_INFO_PATH)
    async def hotel_info(body: HotelSearchRequest) -> dict:
        body.require()
        info = await _guarded(scraper.hotel_info(body.destination), "Failed to scrape hotel information")
        if info is None:
            raise NotFoundError(
                "Could not find hotel information",
                f"The hotel information could not be found. {_RETRY_HINT}",
            )
        return {"hotelInfo": info.to_dict()}

    @app.post(HOTEL_IMAGES_PATH)
    async def hotel_images(body: HotelSearchRequest) -> dict:
        body.require()
        batch = await _guarded(scraper.hotel_images(body.destination), "Failed to scrape hotel images")
        if not batch.candidates:
            raise NotFoundError(
                "Could not find hotel images",
                f"No images were found for the specified hotel. {_RETRY_HINT}",
            )
        if not batch.valid:
            raise NotFoundError(
                "Could not find valid hotel images",
                f"No valid images were found after validation. {_RETRY_HINT}",
            )
        return {"hotelImages": [image.to_dict() for image in batch.valid]}

    @app.post(HOTEL_PRICES_PATH)
    async def hotel_prices(body: HotelPricesRequest) -> dict:
        body.require()
        listings = await _guarded(
            scraper.hotel_prices(body.hotel_name, body.location, body.check_in_date, body.check_out_date),
            "Failed to scrape hotel prices",
        )
        if not listings:
            raise NotFoundError(
                "Could not find hotel prices",
                f"No prices were found for the specified hotel and dates. {_RETRY_HINT}",
            )
        return {"prices": [listing.to_dict() for listing in listings]}

    @app.post(HOTEL_SUGGESTIONS_PATH)
    async def hotel_suggestions(body: HotelSuggestionsRequest) -> dict:
        body.require()
        suggestions = await _guarded(
            scraper.hotel_suggestions(
                body.destination,
                check_in=body.check_in,
                check_out=body.check_out,
                travelers=body.travelers,
            ),
            "Failed to scrape hotel suggestions",
        )
        if not suggestions:
            raise NotFoundError(
                "Could not find hotel suggestions",
                f"No hotels were found for the specified search. {_RETRY_HINT}",
            )
        return {"hotelSuggestions": [suggestion.to_dict() for suggestion in suggestions]}

    return app
