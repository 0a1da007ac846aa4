"""Client adapter for Sora-style video generation APIs."""
from __future__ import annotations

from pathlib import Path

from dotenv import load_dotenv


_ROOT_DIR = Path(__file__).resolve().parent.parent

# Load base env first, then allow .env.local to override for developer-specific tweaks.
load_dotenv(_ROOT_DIR / ".env")
load_dotenv(_ROOT_DIR / ".env.local", override=True)

from .errors import (  # noqa: E402
    SoraClientError,
    SoraConfigError,
    SoraHTTPStatusError,
    SoraProviderError,
    SoraResponseParseError,
    SoraTransportError,
)
from .models.schemas import GenerationOptions, ProviderResponse, VideoResult  # noqa: E402
from .services.sora_videos import ClientConfig, SoraVideoClient  # noqa: E402

__all__ = [
    "ClientConfig",
    "GenerationOptions",
    "ProviderResponse",
    "SoraClientError",
    "SoraConfigError",
    "SoraHTTPStatusError",
    "SoraProviderError",
    "SoraResponseParseError",
    "SoraTransportError",
    "SoraVideoClient",
    "VideoResult",
]
