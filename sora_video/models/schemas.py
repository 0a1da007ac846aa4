"""Pydantic models and value types for video generation requests and responses."""
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


@dataclass(frozen=True)
class GenerationOptions:
    """Per-call knobs for a submission.

    ``duration`` is only sent when positive, so ``0`` leaves the length to the
    provider. ``model`` overrides the client default when set.
    """

    duration: int = 4
    resolution: Optional[str] = None
    model: Optional[str] = None

    def merge(self, **overrides: Any) -> GenerationOptions:
        """Return a copy with the given fields replaced; ``None`` values are ignored."""

        return replace(self, **{key: value for key, value in overrides.items() if value is not None})

    def resolve_model(self, default_model: str) -> str:
        return self.model or default_model


class _WireModel(BaseModel):
    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)

    @field_validator("*", mode="before")
    @classmethod
    def _null_to_default(cls, value: Any, info: Any) -> Any:
        if value is None:
            field = cls.model_fields[info.field_name]
            return field.get_default(call_default_factory=True)
        return value


class ProviderVideo(_WireModel):
    url: str = ""


class ProviderErrorBody(_WireModel):
    message: str = ""
    type: str = ""


class ProviderResponse(_WireModel):
    """Raw reply from the provider for both ``POST /videos`` and ``GET /videos/{id}``."""

    id: str = ""
    object: str = ""
    model: str = ""
    status: str = ""
    progress: int = 0
    created_at: int = 0
    completed_at: int = 0
    size: str = ""
    seconds: str = ""
    quality: str = ""
    video_url: str = Field(default="", description="Flat video location")
    video: ProviderVideo = Field(default_factory=ProviderVideo, description="Nested video location")
    error: ProviderErrorBody = Field(default_factory=ProviderErrorBody)


@dataclass(frozen=True)
class VideoResult:
    """Snapshot of a generation task at one point in time."""

    task_id: str
    status: str
    completed: bool
    video_url: str = ""
    progress: int = 0
    error: Optional[str] = None
