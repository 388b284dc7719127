"""Logging setup shared by the API server and the CLI scripts."""
from __future__ import annotations

import logging
from pathlib import Path

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
LOG_FILENAME = "scraper.log"

# Chatty at INFO: httpx logs every photo HEAD request.
_QUIET_LOGGERS = ("httpx", "httpcore")


def configure_logging(level: str, log_dir: Path) -> Path:
    """Send records to stderr and ``<log_dir>/scraper.log``; return the file path."""
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / LOG_FILENAME

    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(), logging.FileHandler(log_file)],
        force=True,
    )
    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
    # uvicorn is started with log_config=None, so route its loggers through ours.
    for name in ("uvicorn", "uvicorn.error", "uvicorn.access"):
        logging.getLogger(name).propagate = True
    return log_file
