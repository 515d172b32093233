"""Typed failures raised by the weather adapters.

WeatherAPI.com reports failures as ``{"error": {"code": 1006, "message": "..."}}``;
proxies and gateways in front of it may answer with plain text instead.
"""

from __future__ import annotations

from typing import Any, Optional

_SNIPPET_LIMIT = 200


class ApiError(RuntimeError):
    """Base class for weather provider failures."""

    def __init__(
        self,
        message: str,
        *,
        status: Optional[int] = None,
        code: Optional[str] = None,
        hint: Optional[str] = None,
        payload: Any = None,
        context: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.status = status
        self.code = code
        self.hint = hint
        self.payload = payload
        self.context = context


class ApiClientError(ApiError):
    """HTTP 4xx from the weather provider (unknown location, bad key, quota)."""


class ApiServerError(ApiError):
    """HTTP 5xx from the weather provider."""


class ApiTimeoutError(ApiError):
    """Timeout or connection failure before any response arrived."""


def parse_error_payload(resp: Any) -> Any:
    """Return the decoded error body, the leading text of a non-JSON body, or None."""
    try:
        return resp.json()
    except ValueError:
        text = (getattr(resp, "text", "") or "").strip()
        return text[:_SNIPPET_LIMIT] or None


def _error_body(payload: Any) -> Optional[dict]:
    if isinstance(payload, dict) and isinstance(payload.get("error"), dict):
        return payload["error"]
    return None


def extract_error_code(payload: Any) -> Optional[str]:
    """Return ``error.code`` as text (WeatherAPI sends an int such as 1006)."""
    body = _error_body(payload)
    if body is None or body.get("code") is None:
        return None
    return str(body["code"])


def extract_error_hint(payload: Any) -> Optional[str]:
    """Return ``error.message``, or the text of a plain-text body."""
    body = _error_body(payload)
    if body is not None:
        message = body.get("message")
        if isinstance(message, str) and message.strip():
            return message.strip()
        return None
    if isinstance(payload, str):
        return payload.strip() or None
    return None


def build_error_message(ctx: str, status: int, payload: Any) -> str:
    hint = extract_error_hint(payload)
    if hint:
        return f"{ctx}: {hint} (HTTP {status})"
    return f"{ctx}: HTTP {status}"


__all__ = [
    "ApiClientError",
    "ApiError",
    "ApiServerError",
    "ApiTimeoutError",
    "build_error_message",
    "extract_error_code",
    "extract_error_hint",
    "parse_error_payload",
]
