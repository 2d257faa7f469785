"""Library settings via Pydantic BaseSettings."""

from __future__ import annotations

from functools import lru_cache

from pydantic_settings import BaseSettings

DEFAULT_HIGHLIGHT_COLOR = "#ff00ff"


class Settings(BaseSettings):
    model_config = {
        "env_prefix": "LOOKS_ALIKE_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    log_level: str = "INFO"
    json_logs: bool = False

    # Used by create_diff when the caller passes no highlight color
    highlight_color: str = DEFAULT_HIGHLIGHT_COLOR


@lru_cache
def get_settings() -> Settings:
    """Return cached settings instance."""
    return Settings()
