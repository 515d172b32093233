from typing import List

import pytest

from weatherapp.adapters.api_errors import ApiClientError
from weatherapp.adapters.weather_mock import WeatherMockAdapter
from weatherapp.domain.entities import Query
from weatherapp.domain.ports import UseCaseError
from weatherapp.tests.unit.helpers import make_snapshot
from weatherapp.usecases.fetch_current_weather import FetchConditionIcon, FetchCurrentWeather


class _PortStub:
    def __init__(self) -> None:
        self.queries: List[str] = []

    def current(self, query: str):
        self.queries.append(query)
        return make_snapshot(name=query or "?")

    def fetch_icon(self, url: str) -> bytes:
        raise ApiClientError("icon: HTTP 404", status=404)


def test_query_text_is_forwarded_verbatim():
    port = _PortStub()
    uc = FetchCurrentWeather(port)

    uc(" Berlin ")
    uc(Query(""))

    assert port.queries == [" Berlin ", ""]


def test_adapter_errors_become_use_case_errors():
    uc = FetchCurrentWeather(WeatherMockAdapter())

    with pytest.raises(UseCaseError) as info:
        uc("Atlantis")

    assert info.value.code == "LOCATION_NOT_FOUND"
    assert info.value.message == "No matching location found."


def test_icon_errors_are_wrapped():
    uc = FetchConditionIcon(_PortStub())

    with pytest.raises(UseCaseError) as info:
        uc("https://example.test/icon.png")

    assert info.value.code == "ICON_FAILED"
