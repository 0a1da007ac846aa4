from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

import httpx
from pydantic import ValidationError

from ..config import settings
from ..errors import (
    SoraConfigError,
    SoraHTTPStatusError,
    SoraProviderError,
    SoraResponseParseError,
    SoraTransportError,
)
from ..models.schemas import GenerationOptions, ProviderResponse, VideoResult

logger = logging.getLogger(__name__)

REQUEST_TIMEOUT_SECONDS = 300.0
ACCEPTED_SUBMIT_STATUSES = frozenset({200, 201})
COMPLETED_STATUS = "completed"


@dataclass(frozen=True)
class ClientConfig:
    base_url: str
    api_key: str = field(repr=False)
    model: str
    timeout: float = REQUEST_TIMEOUT_SECONDS


def build_submission_form(
    image_url: str,
    prompt: str,
    options: GenerationOptions,
    *,
    default_model: str,
) -> dict[str, str]:
    """Assemble the form fields for ``POST /videos``.

    Optional fields are left out entirely rather than sent empty: no
    ``input_reference`` means text-to-video, no ``seconds`` lets the provider
    pick a length.
    """

    fields = {
        "model": options.resolve_model(default_model),
        "prompt": prompt,
    }
    if image_url:
        fields["input_reference"] = image_url
    if options.duration > 0:
        fields["seconds"] = str(int(options.duration))
    if options.resolution:
        fields["size"] = options.resolution
    return fields


def _multipart_fields(fields: dict[str, str]) -> dict[str, tuple[None, str]]:
    # A ``None`` filename makes httpx emit a plain form field while still
    # forcing multipart encoding with a matching boundary header.
    return {name: (None, value) for name, value in fields.items()}


def resolve_video_url(flat: str, nested: str) -> str:
    """Pick the video location from the two places the provider may put it.

    ``video_url`` (flat) wins whenever it is non-empty; ``video.url`` (nested)
    is the fallback; otherwise the result is empty.
    """

    if flat:
        return flat
    if nested:
        return nested
    return ""


def parse_provider_response(body: bytes) -> ProviderResponse:
    try:
        return ProviderResponse.model_validate_json(body)
    except ValidationError as exc:
        raise SoraResponseParseError(str(exc), body.decode("utf-8", errors="replace")) from exc


def _to_result(data: ProviderResponse, *, error: Optional[str] = None) -> VideoResult:
    return VideoResult(
        task_id=data.id,
        status=data.status,
        completed=data.status == COMPLETED_STATUS,
        video_url=resolve_video_url(data.video_url, data.video.url),
        progress=data.progress,
        error=error,
    )


def normalize_submission(status_code: int, body: bytes) -> VideoResult:
    """Strict normalization used for submissions.

    Any non-accepted status fails before JSON parsing and a provider error
    record aborts the call.
    """

    if status_code not in ACCEPTED_SUBMIT_STATUSES:
        raise SoraHTTPStatusError(status_code, body.decode("utf-8", errors="replace"))

    data = parse_provider_response(body)
    if data.error.message:
        raise SoraProviderError(data.error.message, data.error.type)
    return _to_result(data)


def normalize_status(body: bytes) -> VideoResult:
    """Permissive normalization used for status lookups.

    The HTTP status is deliberately not checked and a provider error record is
    returned as ``VideoResult.error`` so a caller's poll loop keeps control over
    when to stop. Unparseable bodies still raise.
    """

    data = parse_provider_response(body)
    return _to_result(data, error=data.error.message or None)


class SoraVideoClient:
    """Blocking client for ``/videos`` style generation endpoints.

    Each call is a single round trip; polling cadence and retries belong to
    the caller.
    """

    def __init__(
        self,
        *,
        base_url: Optional[str] = None,
        api_key: Optional[str] = None,
        model: Optional[str] = None,
        http_client: Optional[httpx.Client] = None,
    ):
        raw_base = (base_url or settings.sora_base_url or "").strip()
        if not raw_base:
            raise SoraConfigError("SORA_BASE_URL missing; set the video API base URL")
        if not raw_base.startswith(("http://", "https://")):
            raise SoraConfigError("SORA_BASE_URL must include http/https scheme")
        key = api_key or settings.sora_api_key
        if not key:
            raise SoraConfigError("SORA_API_KEY missing; set an API key for the video provider")

        self.config = ClientConfig(
            base_url=raw_base.rstrip("/"),
            api_key=key,
            model=model or settings.sora_model,
        )
        self._owns_client = http_client is None
        self._http = http_client or httpx.Client(timeout=self.config.timeout)

    def close(self) -> None:
        if self._owns_client:
            self._http.close()

    def __enter__(self) -> SoraVideoClient:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def _auth_headers(self) -> dict[str, str]:
        return {"Authorization": f"Bearer {self.config.api_key}"}

    def _send(self, operation: str, method: str, url: str, **kwargs) -> httpx.Response:
        try:
            resp = self._http.request(
                method, url, headers=self._auth_headers(), timeout=self.config.timeout, **kwargs
            )
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise SoraTransportError(operation, f"{type(exc).__name__}: {exc}") from exc
        return resp

    def generate_video(
        self,
        image_url: str,
        prompt: str,
        options: Optional[GenerationOptions] = None,
    ) -> VideoResult:
        """Submit a generation job and return its initial snapshot.

        Pass an empty ``image_url`` for text-to-video.
        """

        fields = build_submission_form(
            image_url,
            prompt,
            options or GenerationOptions(),
            default_model=self.config.model,
        )
        endpoint = f"{self.config.base_url}/videos"
        logger.info("Submitting video generation to %s with fields %s", endpoint, sorted(fields))
        resp = self._send("submit video", "POST", endpoint, files=_multipart_fields(fields))
        result = normalize_submission(resp.status_code, resp.content)
        logger.info("Video task %s accepted with status %s", result.task_id, result.status)
        return result

    def get_task_status(self, task_id: str) -> VideoResult:
        """Fetch the current snapshot for ``task_id`` without failing on provider errors."""

        endpoint = f"{self.config.base_url}/videos/{task_id}"
        resp = self._send("get task status", "GET", endpoint)
        if not resp.is_success:
            logger.warning("Status lookup for %s returned HTTP %s; parsing body anyway", task_id, resp.status_code)
        result = normalize_status(resp.content)
        if result.error:
            logger.warning("Video task %s reported error: %s", task_id, result.error)
        else:
            logger.info("Video task %s status=%s progress=%s", task_id, result.status, result.progress)
        return result
