"""Translate adapter errors into user-facing UseCaseError instances."""

from __future__ import annotations

from typing import Optional

from weatherapp.adapters.api_errors import (
    ApiClientError,
    ApiError,
    ApiServerError,
    ApiTimeoutError,
    extract_error_hint,
)
from weatherapp.domain.ports import UseCaseError

FALLBACK_MESSAGE = "Failed to load data"


def map_api_error(
    exc: Exception,
    *,
    default_code: str,
    default_message: Optional[str] = None,
) -> UseCaseError:
    """Map adapter exceptions to stable UseCaseError codes.

    Args:
        exc: Exception raised by the weather port.
        default_code: Code used when ``exc`` is not an adapter error.
        default_message: Message used when ``exc`` is not an adapter error.

    Returns:
        UseCaseError whose ``message`` is shown to the user verbatim.
    """
    if isinstance(exc, UseCaseError):
        return exc
    if isinstance(exc, ApiTimeoutError):
        return UseCaseError("REQUEST_TIMEOUT", "Request timed out. Check your connection.")
    if isinstance(exc, ApiClientError):
        status = exc.status or 0
        hint = exc.hint or extract_error_hint(getattr(exc, "payload", None))
        if status in (401, 403):
            return UseCaseError("AUTH_FAILED", "API key invalid or missing.")
        if status in (400, 404):
            return UseCaseError("LOCATION_NOT_FOUND", (hint or "").strip() or "Location not found.")
        label = f"Request failed (HTTP {status})" if status else "Request failed"
        return UseCaseError("REQUEST_FAILED", _compose_error_message(label, hint))
    if isinstance(exc, ApiServerError):
        return UseCaseError("SERVER_ERROR", "Weather service unavailable, try again.")
    if isinstance(exc, ApiError):
        return UseCaseError("API_ERROR", str(exc))

    return UseCaseError(default_code, default_message or FALLBACK_MESSAGE)


def _compose_error_message(base: str, hint: Optional[str]) -> str:
    """Append the provider hint to ``base`` when there is one."""
    hint_text = (hint or "").strip()
    if hint_text:
        return f"{base}: {hint_text}"
    if base.endswith("."):
        return base
    return f"{base}."


__all__ = ["FALLBACK_MESSAGE", "map_api_error"]
