from __future__ import annotations

"""Domain value objects for a current-conditions weather lookup."""

from dataclasses import dataclass
from typing import Union

Number = Union[int, float, str]


@dataclass(frozen=True)
class Query:
    """Location text submitted by the user.

    The text is kept verbatim; empty or whitespace-only queries are legal and
    are forwarded to the weather provider unchanged.
    """

    text: str

    def __post_init__(self) -> None:
        if not isinstance(self.text, str):
            raise TypeError("Query text must be a string.")

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True)
class LocationInfo:
    """Resolved location as reported by the provider."""

    name: str
    country: str
    localtime: str
    """Provider local time in ``"<date> <time>"`` form, e.g. ``"2024-05-01 14:30"``."""
    region: str = ""


@dataclass(frozen=True)
class Condition:
    """Short condition label plus a protocol-relative icon reference."""

    text: str
    icon: str = ""


@dataclass(frozen=True)
class CurrentConditions:
    """Current observation values, kept exactly as the provider sent them."""

    temp_c: Number
    condition: Condition
    humidity: Number
    precip_mm: Number
    heatindex_c: Number
    wind_kph: Number


@dataclass(frozen=True)
class WeatherSnapshot:
    """Immutable result of a successful current-weather lookup."""

    location: LocationInfo
    current: CurrentConditions


__all__ = [
    "Condition",
    "CurrentConditions",
    "LocationInfo",
    "Number",
    "Query",
    "WeatherSnapshot",
]
