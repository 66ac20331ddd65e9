from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="GEOCELL_",
        case_sensitive=False,
    )

    # None => shortest hash that reads back as the input (auto-precision).
    default_precision: int | None = Field(default=None, ge=1, le=12)

    # Only the CLI installs handlers; the library just emits records.
    log_level: str = "WARNING"


@lru_cache
def get_settings() -> Settings:
    return Settings()
