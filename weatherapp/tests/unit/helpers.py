from __future__ import annotations

from typing import Any, Dict

from weatherapp.domain.entities import Condition, CurrentConditions, LocationInfo, WeatherSnapshot


def make_payload(**overrides: Any) -> Dict[str, Any]:
    """Return a ``current.json`` style body; top-level current fields can be overridden."""
    current: Dict[str, Any] = {
        "temp_c": 21.5,
        "condition": {"text": "Partly cloudy", "icon": "//cdn.weatherapi.com/weather/64x64/day/116.png"},
        "humidity": 65,
        "precip_mm": 0.3,
        "heatindex_c": 22.4,
        "wind_kph": 13.0,
    }
    current.update(overrides)
    return {
        "location": {
            "name": "Berlin",
            "region": "Berlin",
            "country": "Germany",
            "localtime": "2024-05-01 14:30",
        },
        "current": current,
    }


def make_snapshot(
    *,
    name: str = "Berlin",
    country: str = "Germany",
    localtime: str = "2024-05-01 14:30",
    temp_c: float = 21.5,
) -> WeatherSnapshot:
    return WeatherSnapshot(
        location=LocationInfo(name=name, country=country, localtime=localtime, region=name),
        current=CurrentConditions(
            temp_c=temp_c,
            condition=Condition(text="Partly cloudy", icon="//cdn.weatherapi.com/weather/64x64/day/116.png"),
            humidity=65,
            precip_mm=0.3,
            heatindex_c=22.4,
            wind_kph=13.0,
        ),
    )


__all__ = ["make_payload", "make_snapshot"]
