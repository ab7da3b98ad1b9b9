"""Application configuration.

Configuration is loaded from environment variables using pydantic-settings.
Nothing here is required; every setting has a working default.

## Optional Environment Variables

- LOG_LEVEL: Root logging level (default: INFO)
- DEBUG: Enable debug mode and the interactive API docs (default: false)
- DEFAULT_EVENT: Event used when none is given (sunrise, civil, nautical,
  astronomical; default: sunrise)
- HOST / PORT: Bind address for `solar-events serve`

## Example .env file

```
LOG_LEVEL=DEBUG
DEBUG=true
DEFAULT_EVENT=civil
PORT=8080
```
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from solar_events import __version__
from solar_events.astronomy.events import EVENTS


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "Solar Events"
    app_version: str = __version__
    debug: bool = False
    environment: Literal["development", "staging", "production"] = "development"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    # Server
    host: str = "127.0.0.1"
    port: int = Field(default=8000, ge=1, le=65535)
    allowed_origins: list[str] = Field(
        default=["http://localhost:3000", "http://localhost:8000"],
        description="CORS allowed origins",
    )

    # Calculations
    default_event: str = Field(
        default="sunrise",
        description="Event used when a request does not name one",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        return v.upper() if isinstance(v, str) else v

    @field_validator("default_event")
    @classmethod
    def validate_default_event(cls, v: str) -> str:
        """Ensure the default event is one of the catalog names."""
        name = v.strip().lower()
        if name not in EVENTS:
            raise ValueError(f"default_event must be one of: {', '.join(EVENTS)}")
        return name

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings.

    Settings are loaded once and cached. To reload, clear the cache:
    ```python
    get_settings.cache_clear()
    ```
    """
    return Settings()


def get_settings_uncached() -> Settings:
    """Get fresh settings without caching.

    Useful for testing when environment variables change.
    """
    return Settings()


def configure_logging(settings: Settings | None = None) -> None:
    """Configure root logging from settings."""
    settings = settings or get_settings()
    logging.basicConfig(
        level=getattr(logging, settings.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
