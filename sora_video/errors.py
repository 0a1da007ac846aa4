from __future__ import annotations

from typing import Optional


class SoraClientError(Exception):
    """Base class for every failure raised by the video client."""


class SoraConfigError(SoraClientError):
    pass


class SoraTransportError(SoraClientError):
    """Connection, timeout or DNS failure while talking to the provider."""

    def __init__(self, operation: str, detail: str):
        self.operation = operation
        super().__init__(f"{operation}: {detail}")


class SoraHTTPStatusError(SoraClientError):
    def __init__(self, status_code: int, body: str):
        self.status_code = status_code
        self.body = body
        super().__init__(f"API error (status {status_code}): {body}")


class SoraResponseParseError(SoraClientError):
    """The provider returned a body that does not match the response schema."""

    def __init__(self, detail: str, body: str = ""):
        self.body = body
        super().__init__(f"parse response: {detail}")


class SoraProviderError(SoraClientError):
    def __init__(self, message: str, error_type: Optional[str] = None):
        self.message = message
        self.error_type = error_type or None
        super().__init__(f"provider error: {message}")
