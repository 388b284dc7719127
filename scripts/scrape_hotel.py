"""Run a single scrape from the command line and print the JSON payload."""
from __future__ import annotations

import argparse
import asyncio
import json
import sys

from hotel_scraper.config.settings import Settings
from hotel_scraper.core.logging import configure_logging
from hotel_scraper.services import HotelScraper


async def run(args: argparse.Namespace, settings: Settings) -> object:
    scraper = HotelScraper(settings)
    if args.command == "info":
        info = await scraper.hotel_info(args.destination)
        return {"hotelInfo": info.to_dict() if info else None}
    if args.command == "images":
        batch = await scraper.hotel_images(args.destination)
        return {
            "candidates": len(batch.candidates),
            "hotelImages": [image.to_dict() for image in batch.valid],
        }
    if args.command == "prices":
        listings = await scraper.hotel_prices(args.hotel_name, args.location, args.check_in, args.check_out)
        return {"prices": [listing.to_dict() for listing in listings]}
    suggestions = await scraper.hotel_suggestions(
        args.destination,
        check_in=args.check_in,
        check_out=args.check_out,
        travelers=args.travelers,
    )
    return {"hotelSuggestions": [suggestion.to_dict() for suggestion in suggestions]}


def main() -> None:
    parser = argparse.ArgumentParser(description="Scrape hotel data from the travel search site")
    parser.add_argument("--headed", action="store_true", help="Show the browser window")
    sub = parser.add_subparsers(dest="command", required=True)

    info = sub.add_parser("info", help="About tab metadata")
    info.add_argument("destination")

    images = sub.add_parser("images", help="Validated photo set")
    images.add_argument("destination")

    prices = sub.add_parser("prices", help="Provider price listings")
    prices.add_argument("hotel_name")
    prices.add_argument("location")
    prices.add_argument("check_in", help="YYYY-MM-DD")
    prices.add_argument("check_out", help="YYYY-MM-DD")

    suggestions = sub.add_parser("suggestions", help="Hotel search suggestions")
    suggestions.add_argument("destination")
    suggestions.add_argument("--check-in")
    suggestions.add_argument("--check-out")
    suggestions.add_argument("--travelers", type=int)

    args = parser.parse_args()
    settings = Settings(headless=False) if args.headed else Settings()
    configure_logging(settings.log_level, settings.log_dir)
    payload = asyncio.run(run(args, settings))
    json.dump(payload, sys.stdout, indent=2)
    sys.stdout.write("\n")


if __name__ == "__main__":
    main()
