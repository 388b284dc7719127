"""Error taxonomy surfaced by the HTTP API."""
from __future__ import annotations

import traceback
from typing import Any, Iterable, Optional


class ScraperError(Exception):
    """Base error rendered as a JSON body with at least ``error`` and ``message``."""

    status_code = 500

    def __init__(self, error: str, message: str = "") -> None:
        super().__init__(message or error)
        self.error = error
        self.message = message

    def to_dict(self, *, include_details: bool = False) -> dict[str, Any]:
        return {"error": self.error, "message": self.message}


class MissingParameterError(ScraperError):
    """Raised before any browser work when the request body is incomplete."""

    status_code = 400

    def __init__(
        self,
        fields: Iterable[str],
        example: dict[str, Any],
        *,
        error: Optional[str] = None,
    ) -> None:
        self.fields = tuple(fields)
        label = "parameter" if len(self.fields) == 1 else "parameters"
        super().__init__(
            error or f"Missing required {label}: {', '.join(self.fields)}",
            "Provide the missing fields in the JSON body; see `example`.",
        )
        self.example = example

    def to_dict(self, *, include_details: bool = False) -> dict[str, Any]:
        payload = super().to_dict()
        payload["example"] = self.example
        return payload


class NotFoundError(ScraperError):
    """The page never produced the requested content."""

    status_code = 404


class UpstreamError(ScraperError):
    """Anything that went wrong while driving the browser."""

    status_code = 500

    def __init__(self, error: str, cause: BaseException) -> None:
        super().__init__(error, str(cause) or cause.__class__.__name__)
        self.cause = cause

    def details(self) -> Optional[str]:
        return "".join(traceback.format_exception(type(self.cause), self.cause, self.cause.__traceback__))

    def to_dict(self, *, include_details: bool = False) -> dict[str, Any]:
        payload = super().to_dict()
        if include_details:
            payload["details"] = self.details()
        return payload
