"""Runtime configuration for the hotel scraper service.

Relies on pydantic-settings so that environment variables (prefixed with ``SCRAPER_``)
can override defaults. ``PORT`` and ``NODE_ENV`` are honoured as well so the service
drops into the same deployment scripts as before.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated, Optional, Tuple
from urllib.parse import urlencode

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """Captures runtime configuration for the API server and the browser sessions."""

    host: str = Field(default="0.0.0.0", description="Interface the HTTP server binds to")
    port: int = Field(
        default=3001,
        validation_alias=AliasChoices("SCRAPER_PORT", "PORT"),
        description="Port the HTTP server listens on",
    )
    environment: str = Field(
        default="production",
        validation_alias=AliasChoices("SCRAPER_ENVIRONMENT", "NODE_ENV"),
        description="Deployment environment; 'development' exposes stack traces in error payloads",
    )
    log_level: str = Field(default="INFO")
    log_dir: Path = Field(default=Path("data/logs"))
    cors_origins: Annotated[Tuple[str, ...], NoDecode] = Field(default=("*",))

    base_url: str = Field(
        default="https://www.google.com",
        description="Origin of the travel search site",
    )
    headless: bool = True
    slow_mo_ms: int = Field(default=0, description="Slow-mo delay in milliseconds")
    viewport_width: int = 1920
    viewport_height: int = 1080
    user_agent: Optional[str] = Field(
        default=(
            "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
            "(KHTML, like Gecko) Chrome/124.0.0.0 Safari/537.36"
        ),
        description="User agent string to present to pages",
    )
    locale: Optional[str] = Field(default="en-US")
    chromium_channel: Optional[str] = Field(
        default=None,
        description="Browser channel passed to Playwright (e.g. 'chrome'); use None for bundled Chromium",
    )
    chromium_args: Annotated[Tuple[str, ...], NoDecode] = Field(
        default=(
            "--no-sandbox",
            "--disable-setuid-sandbox",
            "--window-size=1920,1080",
        ),
        description="Extra Chromium args passed during launch",
    )
    default_timeout_ms: int = Field(default=15000)
    navigation_timeout_ms: int = Field(default=30000)

    stealth_enabled: bool = Field(default=True, description="Apply playwright-stealth evasions")
    stealth_init_scripts_only: bool = False
    stealth_languages: Optional[Tuple[str, str]] = None
    stealth_platform: Optional[str] = None

    image_validation_timeout_s: float = Field(
        default=10.0, description="Timeout for each HEAD request issued while validating photos"
    )
    typing_delay_min_ms: int = Field(default=60)
    typing_delay_max_ms: int = Field(default=220)

    model_config = SettingsConfigDict(
        env_prefix="SCRAPER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
        populate_by_name=True,
    )

    @field_validator("log_dir", mode="before")
    def _expand_log_dir(cls, value: str | Path) -> Path:  # noqa: D401
        if isinstance(value, Path):
            return value
        return Path(value).expanduser()

    @field_validator("port")
    def _validate_port(cls, value: int) -> int:
        if not 0 < value < 65536:
            raise ValueError("port must be between 1 and 65535")
        return value

    @field_validator("environment", mode="before")
    def _normalise_environment(cls, value: object) -> str:
        if value is None or value == "":
            return "production"
        return str(value).strip().lower()

    @field_validator("chromium_args", "cors_origins", mode="before")
    def _parse_string_tuple(cls, value: object) -> Tuple[str, ...]:
        if value is None or value == "":
            return ()
        if isinstance(value, tuple):
            return value
        if isinstance(value, list):
            return tuple(str(item) for item in value if str(item))
        if isinstance(value, str):
            parts = [part.strip() for part in value.split(",")]
            return tuple(part for part in parts if part)
        raise TypeError("Expected a comma-separated string or list")

    @property
    def is_development(self) -> bool:
        return self.environment == "development"

    def ensure_directories(self) -> None:
        """Create directories that must exist at runtime."""
        self.log_dir.mkdir(parents=True, exist_ok=True)

    def viewport(self) -> dict[str, int]:
        return {"width": self.viewport_width, "height": self.viewport_height}

    def typing_delay_range(self) -> tuple[float, float]:
        """Per-keystroke delay bounds in seconds."""
        low = self.typing_delay_min_ms / 1000
        high = self.typing_delay_max_ms / 1000
        return (low, high) if low <= high else (high, low)

    def chromium_launch_args(self) -> dict[str, object]:
        launch_args: dict[str, object] = {
            "headless": self.headless,
        }
        if self.slow_mo_ms:
            launch_args["slow_mo"] = self.slow_mo_ms
        if self.chromium_channel:
            launch_args["channel"] = self.chromium_channel
        if self.chromium_args:
            launch_args["args"] = list(self.chromium_args)
        return launch_args

    def context_options(self) -> dict[str, object]:
        options: dict[str, object] = {
            "base_url": self.base_url,
            "viewport": self.viewport(),
            "is_mobile": False,
            "has_touch": False,
        }
        if self.user_agent:
            options["user_agent"] = self.user_agent
        if self.locale:
            options["locale"] = self.locale
        return options

    def stealth_kwargs(self) -> dict[str, object]:
        if not self.stealth_enabled:
            return {}
        kwargs: dict[str, object] = {
            "init_scripts_only": self.stealth_init_scripts_only,
        }
        if self.stealth_languages:
            kwargs["navigator_languages_override"] = self.stealth_languages
        if self.stealth_platform:
            kwargs["navigator_platform_override"] = self.stealth_platform
        if self.user_agent:
            kwargs["navigator_user_agent_override"] = self.user_agent
        return kwargs

    def search_url(self, query: str, **params: str) -> str:
        """Build the travel search URL for free-text ``query``."""
        payload = {"q": query, **{key: value for key, value in params.items() if value}}
        return f"{self.base_url.rstrip('/')}/travel/search?{urlencode(payload)}"

    def hotels_home_url(self) -> str:
        return f"{self.base_url.rstrip('/')}/travel/hotels"
