"""Shared HTTP transport utilities for the weather REST adapter.

This module provides a thin wrapper around ``requests.Session`` so the adapter
shares one timeout policy, one retry loop and API-key query parameter handling.

Dependencies:
    - ``requests`` for network I/O.
    - ``weatherapp.adapters.api_errors.ApiTimeoutError`` for typed transport failures.

Call context:
    - Constructed by ``weatherapp/adapters/weather_rest.py``.
    - Used only inside adapter methods; use cases interact through ports.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

import requests
from requests import exceptions as req_exc

from weatherapp.adapters.api_errors import ApiError, ApiTimeoutError


@dataclass
class HttpConfig:
    """Timeout and retry configuration for adapter HTTP calls.

    Attributes:
        request_timeout_s: Default timeout in seconds for JSON API calls.
        retries: Number of retry attempts after the initial request; values
            below zero still make one attempt.
    """
    request_timeout_s: int = 10
    retries: int = 2


class RetryingSession:
    """Shared requests wrapper with API-key query parameters and retry loops.

    This class is transport-only. Callers provide endpoint URLs and decide how
    to map non-2xx responses into use-case errors.
    """

    def __init__(self, api_key: Optional[str], cfg: HttpConfig) -> None:
        """Create a retry-enabled session.

        Args:
            api_key: Provider key sent as the ``key`` query parameter, or ``None``.
            cfg: Shared timeout and retry settings.
        """
        self.session = requests.Session()
        self.api_key = api_key
        self.cfg = cfg

    @staticmethod
    def _headers(accept: str = "application/json") -> Dict[str, str]:
        return {"Accept": accept}

    def _params(self, params: Optional[Dict[str, Any]], with_key: bool) -> Dict[str, Any]:
        merged: Dict[str, Any] = {}
        if with_key and self.api_key:
            merged["key"] = self.api_key
        merged.update(params or {})
        return merged

    def get(
        self,
        url: str,
        *,
        params: Optional[Dict[str, Any]] = None,
        accept: str = "application/json",
        timeout: Optional[int] = None,
        with_key: bool = True,
    ) -> requests.Response:
        """Send a GET request with retries on timeout/connectivity failures.

        Args:
            url: Absolute endpoint URL.
            params: Optional query parameter mapping.
            accept: ``Accept`` header value.
            timeout: Optional timeout override in seconds.
            with_key: Whether to attach the API key as ``key`` query parameter.

        Returns:
            ``requests.Response`` from the first successful attempt.

        Raises:
            ApiTimeoutError: If all attempts fail with timeout/connection errors.
            ApiError: For other transport failures (invalid URL, TLS, ...).
        """
        context = f"GET {url}"
        last_err: ApiTimeoutError | None = None
        attempts = max(1, self.cfg.retries + 1)
        for _ in range(attempts):
            try:
                return self.session.get(
                    url,
                    params=self._params(params, with_key),
                    headers=self._headers(accept=accept),
                    timeout=timeout or self.cfg.request_timeout_s,
                )
            except (req_exc.Timeout, req_exc.ConnectionError):
                last_err = ApiTimeoutError(f"Timeout contacting {url}", context=context)
            except req_exc.RequestException as exc:
                raise ApiError(str(exc), context=context) from exc
        raise last_err


__all__ = ["HttpConfig", "RetryingSession"]
