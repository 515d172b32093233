"""Use case for looking up current conditions for one query.

Call chain:
    ``WeatherViewModel.get_data`` (worker thread) ->
    ``FetchCurrentWeather.__call__`` -> ``WeatherPort.current``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from weatherapp.domain.entities import Query, WeatherSnapshot
from weatherapp.domain.ports import UseCaseError, WeatherPort

from .error_mapping import map_api_error

log = logging.getLogger(__name__)


@dataclass
class FetchCurrentWeather:
    """Fetch a ``WeatherSnapshot`` for the query text, verbatim.

    No validation happens here: an empty query is sent to the provider, which
    reports it as an error like any other unknown location.
    """

    weather_port: WeatherPort

    def __call__(self, query: Query | str) -> WeatherSnapshot:
        text = str(query)
        try:
            return self.weather_port.current(text)
        except Exception as exc:
            err = map_api_error(exc, default_code="FETCH_FAILED")
            log.warning("Weather lookup for %r failed (%s): %s", text, err.code, exc)
            raise err from exc


@dataclass
class FetchConditionIcon:
    """Download the condition icon bytes; failures are reported as UseCaseError."""

    weather_port: WeatherPort

    def __call__(self, url: str) -> bytes:
        try:
            return self.weather_port.fetch_icon(url)
        except Exception as exc:
            raise UseCaseError("ICON_FAILED", str(exc)) from exc


__all__ = ["FetchConditionIcon", "FetchCurrentWeather"]
