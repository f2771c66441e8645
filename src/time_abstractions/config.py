"""Configuration settings for time_abstractions using Pydantic."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class TimeSettings(BaseSettings):
    """Process-wide settings, read from ``TIME_ABSTRACTIONS_*`` env vars.

    Attributes:
        local_timezone: IANA zone name used as "local" wall-clock time
                        (e.g. ``"Europe/Berlin"``).  When unset, the host's
                        local zone is used.
        log_level:      Level applied by :func:`configure_logging`.
    """

    model_config = SettingsConfigDict(
        env_prefix="TIME_ABSTRACTIONS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    local_timezone: str | None = Field(default=None, description="IANA zone used for local time")
    log_level: str = Field(default="INFO", description="Logging level")


@lru_cache(maxsize=1)
def get_settings() -> TimeSettings:
    """Return the cached settings.  Call ``get_settings.cache_clear()`` to reload."""
    return TimeSettings()
