"""Display formatting for weather values.

Call context:
    ``presenter.render`` uses these helpers to turn a ``WeatherSnapshot`` into
    the strings shown on the detail layout.
"""

from __future__ import annotations

from typing import Any

DEGREE_SUFFIX = "° C"
ICON_SMALL = "64x64"
ICON_LARGE = "128x128"


def fmt_number(value: Any) -> str:
    """Render a provider number as sent (``21.5`` -> ``"21.5"``, ``65`` -> ``"65"``)."""
    return str(value)


def fmt_temperature(value: Any) -> str:
    return f"{fmt_number(value)}{DEGREE_SUFFIX}"


def fmt_precipitation(value: Any) -> str:
    return f"{fmt_number(value)} mm"


def fmt_wind(value: Any) -> str:
    return f"{fmt_number(value)} km/h"


def fmt_location(name: str, country: str) -> str:
    return f"{name},{country}"


def icon_url(icon: str) -> str:
    """Resolve a protocol-relative icon path to the larger HTTPS variant."""
    if not icon:
        return ""
    url = icon if icon.startswith(("http://", "https://")) else f"https:{icon}"
    return url.replace(ICON_SMALL, ICON_LARGE)


__all__ = [
    "DEGREE_SUFFIX",
    "fmt_location",
    "fmt_number",
    "fmt_precipitation",
    "fmt_temperature",
    "fmt_wind",
    "icon_url",
]
