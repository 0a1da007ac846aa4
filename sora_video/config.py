"""Configuration helpers for the video generation client."""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional


@dataclass
class Settings:
    """Centralized environment-driven configuration.

    Values are read once at import time; explicit constructor arguments on the
    client always win over these defaults.
    """

    sora_base_url: str = os.getenv("SORA_BASE_URL", "https://api.openai.com/v1")
    sora_api_key: Optional[str] = os.getenv("SORA_API_KEY") or os.getenv("OPENAI_API_KEY")
    sora_model: str = os.getenv("SORA_MODEL", "sora-2")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached settings instance to avoid repeated environment reads."""

    return Settings()


settings = get_settings()


def configure_logging(level: Optional[str] = None) -> None:
    """Apply a basic logging setup for scripts that embed the client."""

    logging.basicConfig(level=(level or settings.log_level).upper())
