"""Error types raised by the headless client."""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import httpx

logger = logging.getLogger(__name__)


class HeadlessError(Exception):
    """Base class for every error raised by this package."""


class HeadlessConfigurationError(HeadlessError, ValueError):
    """The client is missing something it needs to build a request."""


class HeadlessAPIError(HeadlessError):
    """The remote service answered with a non-2xx status."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int,
        payload: Optional[Dict[str, Any]] = None,
        method: Optional[str] = None,
        url: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.payload = payload or {}
        self.method = method
        self.url = url

    @classmethod
    def from_response(cls, response: httpx.Response) -> "HeadlessAPIError":
        try:
            body = response.json() if response.content else {}
        except ValueError:
            body = {}
        payload = body if isinstance(body, dict) else {"errors": body}

        message = ""
        for key in ("detail", "message", "title"):
            if payload.get(key):
                message = str(payload[key])
                break
        if not message:
            message = response.reason_phrase or "Request failed"

        request = response.request
        return cls(
            f"{response.status_code} {message}",
            status_code=response.status_code,
            payload=payload,
            method=request.method,
            url=str(request.url),
        )


class HeadlessResponseError(HeadlessError, ValueError):
    """The response body did not have the expected shape."""

    def __init__(self, message: str, *, payload: Any = None) -> None:
        super().__init__(message)
        self.payload = payload


def describe_error(exc: Exception) -> Dict[str, Any]:
    """Flatten an exception into a JSON-safe dict for display."""
    out: Dict[str, Any] = {"error": type(exc).__name__, "message": str(exc)}
    if isinstance(exc, HeadlessAPIError):
        out["status_code"] = exc.status_code
        out["payload"] = exc.payload
        out["url"] = exc.url
    elif isinstance(exc, HeadlessResponseError):
        out["payload"] = exc.payload
    elif isinstance(exc, httpx.RequestError):
        logger.debug("Transport error", exc_info=exc)
        out["transport"] = True
    return out
