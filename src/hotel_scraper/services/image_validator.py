"""HEAD-based validation of scraped photo URLs."""
from __future__ import annotations

import asyncio
import logging
from typing import List, Optional, Sequence

import httpx

from hotel_scraper.hotels.models import ImageRecord

logger = logging.getLogger(__name__)


class ImageValidator:
    """Keeps only images whose URL answers a HEAD request with an ``image/*`` type.

    Checks for one batch run concurrently; a failing check drops that image and
    never fails the batch.
    """

    def __init__(
        self,
        *,
        timeout: float = 10.0,
        headers: Optional[dict[str, str]] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._timeout = timeout
        self._headers = headers or {}
        self._transport = transport

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            timeout=self._timeout,
            headers=self._headers,
            follow_redirects=True,
            transport=self._transport,
        )

    async def is_image(self, url: str, *, client: Optional[httpx.AsyncClient] = None) -> bool:
        if not url:
            return False
        if client is None:
            async with self._client() as owned:
                return await self._check(owned, url)
        return await self._check(client, url)

    async def _check(self, client: httpx.AsyncClient, url: str) -> bool:
        try:
            response = await client.head(url)
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            logger.warning("Error validating image URL %s: %s", url, exc)
            return False
        content_type = response.headers.get("content-type", "")
        valid = response.is_success and content_type.lower().startswith("image/")
        if not valid:
            logger.debug(
                "Rejected image %s (status=%s, content-type=%r)", url, response.status_code, content_type
            )
        return valid

    async def filter(self, records: Sequence[ImageRecord]) -> List[ImageRecord]:
        """Return the records that passed validation, in their original order."""
        if not records:
            return []
        async with self._client() as client:
            verdicts = await asyncio.gather(
                *(self.is_image(record.url, client=client) for record in records)
            )
        valid = [record for record, ok in zip(records, verdicts) if ok]
        logger.info("Validated %s/%s images", len(valid), len(records))
        return valid
