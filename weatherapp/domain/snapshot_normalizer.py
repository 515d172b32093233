from __future__ import annotations

"""Normalize provider ``current.json`` payloads into ``WeatherSnapshot``."""

import math
from typing import Any, Mapping

from .entities import Condition, CurrentConditions, LocationInfo, Number, WeatherSnapshot


class MalformedPayload(ValueError):
    """Raised when a provider payload lacks a required field."""


def _section(payload: Mapping[str, Any], key: str) -> Mapping[str, Any]:
    value = payload.get(key)
    if not isinstance(value, Mapping):
        raise MalformedPayload(f"Missing '{key}' object in weather payload.")
    return value


def _text(section: Mapping[str, Any], key: str, *, required: bool = True) -> str:
    value = section.get(key)
    if value is None:
        if required:
            raise MalformedPayload(f"Missing '{key}' in weather payload.")
        return ""
    return str(value)


def _number(section: Mapping[str, Any], key: str) -> Number:
    """Return a numeric field unchanged; numeric strings keep their text (``"21.50"``)."""
    value = section.get(key)
    if isinstance(value, bool) or value is None:
        raise MalformedPayload(f"Missing numeric '{key}' in weather payload.")
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        numeric: Number = value
        checked = value
    else:
        numeric = str(value).strip()
        try:
            checked = float(numeric)
        except ValueError as exc:
            raise MalformedPayload(f"Field '{key}' is not a number: {value!r}") from exc
    if not math.isfinite(checked):
        raise MalformedPayload(f"Field '{key}' is not finite: {value!r}")
    return numeric


def normalize_current(payload: Any) -> WeatherSnapshot:
    """Build a ``WeatherSnapshot`` from a decoded ``current.json`` body.

    Raises:
        MalformedPayload: If the body is not an object or a required field is
            missing or non-numeric.
    """
    if not isinstance(payload, Mapping):
        raise MalformedPayload("Weather payload must be a JSON object.")

    location = _section(payload, "location")
    current = _section(payload, "current")
    condition = _section(current, "condition")

    return WeatherSnapshot(
        location=LocationInfo(
            name=_text(location, "name"),
            country=_text(location, "country"),
            localtime=_text(location, "localtime"),
            region=_text(location, "region", required=False),
        ),
        current=CurrentConditions(
            temp_c=_number(current, "temp_c"),
            condition=Condition(
                text=_text(condition, "text"),
                icon=_text(condition, "icon", required=False),
            ),
            humidity=_number(current, "humidity"),
            precip_mm=_number(current, "precip_mm"),
            heatindex_c=_number(current, "heatindex_c"),
            wind_kph=_number(current, "wind_kph"),
        ),
    )


__all__ = ["MalformedPayload", "normalize_current"]
