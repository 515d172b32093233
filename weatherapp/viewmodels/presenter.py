"""Pure mapping from ``QueryResult`` to the branch the page should show.

``render`` is re-evaluated on every change of the view-model's result slot.
It never mutates the result and has no memory of earlier values: the same
input always selects the same branch.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, List, Tuple, Union

from ..domain.entities import WeatherSnapshot
from ..domain.query_result import Error, Idle, Loading, QueryResult, Success
from ..domain.time_utils import split_localtime
from .weather_format import (
    fmt_location,
    fmt_number,
    fmt_precipitation,
    fmt_temperature,
    fmt_wind,
    icon_url,
)

WELCOME_TITLE = "Welcome to WeatherApp!"
WELCOME_SUBTITLE = "Enter a location to get the latest weather updates."

KeyVal = Tuple[str, str]


@dataclass(frozen=True)
class WeatherDetails:
    """View-facing strings for the current-conditions layout."""

    location: str
    temperature: str
    condition_text: str
    icon_url: str
    humidity: str
    precipitation: str
    heat_index: str
    wind_speed: str
    local_date: str
    local_time: str

    def rows(self) -> List[Tuple[KeyVal, KeyVal]]:
        """Key/value pairs laid out two per row, top to bottom."""
        return [
            (("Humidity", self.humidity), ("Precipitation", self.precipitation)),
            (("Heat Index", self.heat_index), ("Wind Speed", self.wind_speed)),
            (("Local Time", self.local_time), ("Local Date", self.local_date)),
        ]


@dataclass(frozen=True)
class WelcomeBranch:
    kind: ClassVar[str] = "welcome"
    title: str = WELCOME_TITLE
    subtitle: str = WELCOME_SUBTITLE


@dataclass(frozen=True)
class SpinnerBranch:
    kind: ClassVar[str] = "spinner"


@dataclass(frozen=True)
class DetailBranch:
    kind: ClassVar[str] = "detail"
    details: WeatherDetails


@dataclass(frozen=True)
class ErrorBranch:
    kind: ClassVar[str] = "error"
    message: str


Branch = Union[WelcomeBranch, SpinnerBranch, DetailBranch, ErrorBranch]


def build_details(data: WeatherSnapshot) -> WeatherDetails:
    location = data.location
    current = data.current
    local_date, local_time = split_localtime(location.localtime)
    return WeatherDetails(
        location=fmt_location(location.name, location.country),
        temperature=fmt_temperature(current.temp_c),
        condition_text=current.condition.text,
        icon_url=icon_url(current.condition.icon),
        humidity=fmt_number(current.humidity),
        precipitation=fmt_precipitation(current.precip_mm),
        heat_index=fmt_temperature(current.heatindex_c),
        wind_speed=fmt_wind(current.wind_kph),
        local_date=local_date,
        local_time=local_time,
    )


def render(result: QueryResult) -> Branch:
    """Select exactly one branch for ``result``.

    Raises:
        TypeError: If ``result`` is not one of the four ``QueryResult`` variants.
    """
    if isinstance(result, Idle):
        return WelcomeBranch()
    if isinstance(result, Loading):
        return SpinnerBranch()
    if isinstance(result, Success):
        return DetailBranch(build_details(result.data))
    if isinstance(result, Error):
        return ErrorBranch(result.message)
    raise TypeError(f"render() got an unknown query result: {result!r}")


__all__ = [
    "Branch",
    "DetailBranch",
    "ErrorBranch",
    "SpinnerBranch",
    "WELCOME_SUBTITLE",
    "WELCOME_TITLE",
    "WeatherDetails",
    "WelcomeBranch",
    "build_details",
    "render",
]
