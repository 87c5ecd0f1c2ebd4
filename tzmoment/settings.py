"""Library defaults loaded from environment variables and YAML files."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_PATTERN = "YYYY-MM-DD HH:mm:ss"


class Settings(BaseSettings):
    """Pydantic settings for tzmoment defaults."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    locale: str = Field(default="en-US", alias="TZMOMENT_LOCALE")
    timezone: str = Field(default="UTC", alias="TZMOMENT_TZ")
    pattern: str = Field(default=DEFAULT_PATTERN, alias="TZMOMENT_PATTERN")
    log_level: str = Field(default="WARNING", alias="TZMOMENT_LOG_LEVEL")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return cached settings."""

    return Settings()


class FormatDefaults(BaseModel):
    """Formatting defaults read from a YAML file."""

    locale: Optional[str] = None
    timezone: Optional[str] = None
    pattern: Optional[str] = None
    hour12: Optional[bool] = None


def load_defaults(path: Path) -> FormatDefaults:
    """Load formatting defaults, filling missing keys from :func:`get_settings`."""

    if not path.exists():
        raise FileNotFoundError(f"Defaults file missing at {path}")
    data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    loaded = FormatDefaults.model_validate(data)
    settings = get_settings()
    return loaded.model_copy(
        update={
            "locale": loaded.locale or settings.locale,
            "timezone": loaded.timezone or settings.timezone,
            "pattern": loaded.pattern if loaded.pattern is not None else settings.pattern,
        }
    )


__all__ = ["DEFAULT_PATTERN", "FormatDefaults", "Settings", "get_settings", "load_defaults"]
