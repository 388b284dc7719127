"""Utilities to avoid robotic timing patterns."""
from __future__ import annotations

import asyncio
import random

from playwright.async_api import Locator, Page


async def human_delay(min_seconds: float = 0.2, max_seconds: float = 1.2) -> None:
    """Sleep for a random duration between ``min_seconds`` and ``max_seconds``."""
    if max_seconds < min_seconds:
        min_seconds, max_seconds = max_seconds, min_seconds
    await asyncio.sleep(random.uniform(min_seconds, max_seconds))


async def human_type(
    locator: Locator,
    text: str,
    *,
    min_seconds: float = 0.06,
    max_seconds: float = 0.22,
) -> None:
    """Type ``text`` one key at a time with a random pause after each key."""
    await locator.click()
    for char in text:
        await locator.press_sequentially(char)
        await human_delay(min_seconds, max_seconds)


async def wander_mouse(page: Page, width: int, height: int, *, moves: int = 3) -> None:
    """Move the pointer through a few random points inside the viewport."""
    for _ in range(moves):
        x = random.randint(0, max(width - 1, 0))
        y = random.randint(0, max(height - 1, 0))
        await page.mouse.move(x, y, steps=random.randint(5, 15))
        await human_delay(0.1, 0.4)
