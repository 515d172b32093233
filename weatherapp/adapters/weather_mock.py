from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Any, Dict, List

from weatherapp.domain.entities import WeatherSnapshot
from weatherapp.domain.ports import WeatherPort
from weatherapp.domain.snapshot_normalizer import normalize_current

from .api_errors import ApiClientError

_NOT_FOUND = {"error": {"code": 1006, "message": "No matching location found."}}


def _payload(
    name: str,
    country: str,
    localtime: str,
    temp_c: float,
    text: str,
    icon: str,
    humidity: int,
    precip_mm: float,
    heatindex_c: float,
    wind_kph: float,
) -> Dict[str, Any]:
    return {
        "location": {"name": name, "region": "", "country": country, "localtime": localtime},
        "current": {
            "temp_c": temp_c,
            "condition": {"text": text, "icon": icon},
            "humidity": humidity,
            "precip_mm": precip_mm,
            "heatindex_c": heatindex_c,
            "wind_kph": wind_kph,
        },
    }


_CANNED: Dict[str, Dict[str, Any]] = {
    "london": _payload(
        "London", "United Kingdom", "2024-05-01 14:30", 14.0, "Partly cloudy",
        "//cdn.weatherapi.com/weather/64x64/day/116.png", 72, 0.1, 14.2, 17.3,
    ),
    "paris": _payload(
        "Paris", "France", "2024-05-01 15:30", 18.5, "Sunny",
        "//cdn.weatherapi.com/weather/64x64/day/113.png", 48, 0.0, 18.1, 9.4,
    ),
    "tokyo": _payload(
        "Tokyo", "Japan", "2024-05-01 22:30", 21.5, "Light rain",
        "//cdn.weatherapi.com/weather/64x64/night/296.png", 88, 1.2, 22.0, 11.2,
    ),
}


@dataclass
class WeatherMockAdapter(WeatherPort):
    """Offline substitute for ``WeatherApiRestAdapter`` with canned responses.

    Lookups are case-insensitive on the stripped query. Unknown or empty
    queries fail the way the provider does (HTTP 400, code 1006).
    """

    latency_s: float = 0.0
    payloads: Dict[str, Dict[str, Any]] = field(default_factory=lambda: dict(_CANNED))
    calls: List[str] = field(default_factory=list)

    def current(self, query: str) -> WeatherSnapshot:
        self.calls.append(query)
        if self.latency_s > 0:
            time.sleep(self.latency_s)
        payload = self.payloads.get((query or "").strip().lower())
        if payload is None:
            raise ApiClientError(
                "current: No matching location found. (HTTP 400)",
                status=400,
                code="1006",
                hint="No matching location found.",
                payload=_NOT_FOUND,
                context="current",
            )
        return normalize_current(payload)

    def fetch_icon(self, url: str) -> bytes:
        # No network here; views fall back to the condition text alone.
        return b""


__all__ = ["WeatherMockAdapter"]
