"""Prepare a machine to run the scraper API.

1. ``pip install -e .[dev]`` (skip with ``--skip-pip``).
2. ``playwright install chromium``, optionally with OS packages.
3. Launch Chromium through :class:`BrowserSession` with the configured
   launch args and stealth, load ``about:blank`` and report versions. A
   broken sandbox or missing shared library shows up here instead of on
   the first API request.
"""
from __future__ import annotations

import argparse
import asyncio
import subprocess
import sys
from importlib.metadata import PackageNotFoundError, version


def run(cmd: list[str]) -> None:
    print(f"$ {' '.join(cmd)}")
    subprocess.run(cmd, check=True)


def playwright_version() -> str:
    try:
        return version("playwright")
    except PackageNotFoundError:
        sys.exit("playwright is not installed; drop --skip-pip or run pip install -e .[dev]")


async def smoke_launch() -> str:
    # Imported late: the package only exists after the pip step.
    from hotel_scraper.config.settings import Settings
    from hotel_scraper.core.browser import BrowserSession

    async with BrowserSession(Settings()) as session:
        page = await session.new_page()
        await page.goto("about:blank")
        return session.browser.version


def main() -> None:
    parser = argparse.ArgumentParser(description="Install and verify the headless browser stack")
    parser.add_argument(
        "--with-deps",
        action="store_true",
        help="Also install Chromium's system libraries (needs root on Linux servers)",
    )
    parser.add_argument("--skip-pip", action="store_true", help="Dependencies are already installed")
    parser.add_argument("--skip-launch", action="store_true", help="Do not start Chromium after installing")
    args = parser.parse_args()

    if not args.skip_pip:
        run([sys.executable, "-m", "pip", "install", "-e", ".[dev]"])

    install = [sys.executable, "-m", "playwright", "install", "chromium"]
    if args.with_deps:
        install.append("--with-deps")
    run(install)
    print(f"playwright {playwright_version()}")

    if args.skip_launch:
        return
    try:
        chromium = asyncio.run(smoke_launch())
    except Exception as exc:
        sys.exit(f"Chromium failed to start: {exc}\nTry again with --with-deps.")
    print(f"Chromium {chromium} launched and closed cleanly")


if __name__ == "__main__":
    main()
