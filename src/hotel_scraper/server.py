"""Run the API server with uvicorn."""
from __future__ import annotations

import argparse
import errno
import logging
import socket
import sys
from typing import Optional, Sequence

import uvicorn

from hotel_scraper.api.app import create_app
from hotel_scraper.config.settings import Settings
from hotel_scraper.core.logging import configure_logging

logger = logging.getLogger(__name__)


def _bind_socket(host: str, port: int) -> socket.socket:
    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
    try:
        sock.bind((host, port))
    except OSError:
        sock.close()
        raise
    return sock


def serve(settings: Settings) -> int:
    """Serve until interrupted; return a process exit code."""
    try:
        sock = _bind_socket(settings.host, settings.port)
    except OSError as exc:
        if exc.errno == errno.EADDRINUSE:
            logger.error(
                "Port %s is already in use. Please try a different port by setting the PORT environment variable.",
                settings.port,
            )
        else:
            logger.error("Error starting server: %s", exc)
        return 1

    app = create_app(settings)
    config = uvicorn.Config(app, log_level=settings.log_level.lower(), log_config=None)
    server = uvicorn.Server(config)
    logger.info("Server is running on port %s", settings.port)
    logger.info("API Documentation: http://localhost:%s/api/hotel-info", settings.port)
    try:
        server.run(sockets=[sock])
    except Exception:
        logger.exception("Server stopped unexpectedly")
        return 1
    finally:
        sock.close()
    return 0


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Hotel travel scraper API")
    parser.add_argument("--host", help="Interface to bind (overrides SCRAPER_HOST)")
    parser.add_argument("--port", type=int, help="Port to listen on (overrides PORT)")
    args = parser.parse_args(argv)

    overrides = {key: value for key, value in (("host", args.host), ("port", args.port)) if value is not None}
    settings = Settings(**overrides)
    configure_logging(settings.log_level, settings.log_dir)
    sys.exit(serve(settings))


if __name__ == "__main__":
    main()
