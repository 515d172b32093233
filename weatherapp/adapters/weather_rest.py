from __future__ import annotations

import logging
from typing import Any, Optional

import requests

from weatherapp.domain.entities import WeatherSnapshot
from weatherapp.domain.ports import WeatherPort
from weatherapp.domain.snapshot_normalizer import MalformedPayload, normalize_current

from .api_errors import (
    ApiClientError,
    ApiError,
    ApiServerError,
    build_error_message,
    extract_error_code,
    extract_error_hint,
    parse_error_payload,
)
from .http_client import HttpConfig, RetryingSession

DEFAULT_BASE_URL = "https://api.weatherapi.com/v1"

log = logging.getLogger(__name__)


class WeatherApiRestAdapter(WeatherPort):
    """REST adapter for the WeatherAPI.com ``current.json`` endpoint."""

    def __init__(
        self,
        api_key: str,
        *,
        base_url: str = DEFAULT_BASE_URL,
        request_timeout_s: int = 10,
        retries: int = 2,
    ) -> None:
        if not api_key:
            raise ValueError("WeatherApiRestAdapter requires an API key")
        self.base_url = (base_url or DEFAULT_BASE_URL).rstrip("/")
        self.cfg = HttpConfig(request_timeout_s=request_timeout_s, retries=retries)
        self.session = RetryingSession(api_key, self.cfg)
        # Icons are fetched from the UI worker while a lookup may be running.
        self.icon_session = RetryingSession(None, self.cfg)

    def current(self, query: str) -> WeatherSnapshot:
        url = f"{self.base_url}/current.json"
        log.debug("Fetching current weather for %r", query)
        resp = self.session.get(url, params={"q": query})
        self._ensure_ok(resp, "current")
        data = self._json_any(resp, "current")
        try:
            return normalize_current(data)
        except MalformedPayload as exc:
            raise ApiError(str(exc), payload=data, context="current") from exc

    def fetch_icon(self, url: str) -> bytes:
        resp = self.icon_session.get(url, accept="image/*", with_key=False)
        self._ensure_ok(resp, "icon")
        return resp.content

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    @staticmethod
    def _json_any(resp: requests.Response, ctx: str) -> Any:
        try:
            return resp.json()
        except ValueError as exc:
            raise ApiError(f"{ctx}: invalid JSON response", context=ctx) from exc

    @staticmethod
    def _ensure_ok(resp: requests.Response, ctx: str) -> None:
        if 200 <= resp.status_code < 300:
            return
        status = resp.status_code
        payload = parse_error_payload(resp)
        message = build_error_message(ctx, status, payload)
        code: Optional[str] = extract_error_code(payload)
        hint = extract_error_hint(payload)
        if 400 <= status < 500:
            raise ApiClientError(
                message,
                status=status,
                code=code,
                hint=hint,
                payload=payload,
                context=ctx,
            )
        if 500 <= status < 600:
            raise ApiServerError(message, status=status, payload=payload, context=ctx)
        raise ApiError(message, status=status, code=code, hint=hint, payload=payload, context=ctx)


__all__ = ["DEFAULT_BASE_URL", "WeatherApiRestAdapter"]
