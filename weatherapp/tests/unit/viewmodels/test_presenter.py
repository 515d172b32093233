import pytest

from weatherapp.domain.query_result import IDLE, LOADING, Error, Idle, Loading, Success
from weatherapp.domain.snapshot_normalizer import normalize_current
from weatherapp.tests.unit.helpers import make_payload, make_snapshot
from weatherapp.viewmodels.presenter import (
    WELCOME_TITLE,
    DetailBranch,
    ErrorBranch,
    SpinnerBranch,
    WelcomeBranch,
    render,
)

BRANCH_TYPES = (WelcomeBranch, SpinnerBranch, DetailBranch, ErrorBranch)


@pytest.mark.parametrize(
    "result, expected",
    [
        (IDLE, WelcomeBranch),
        (Idle(), WelcomeBranch),
        (LOADING, SpinnerBranch),
        (Loading(), SpinnerBranch),
        (Success(make_snapshot()), DetailBranch),
        (Error("boom"), ErrorBranch),
        (Error(""), ErrorBranch),
    ],
)
def test_render_selects_exactly_one_branch(result, expected):
    branch = render(result)

    matches = [kind for kind in BRANCH_TYPES if isinstance(branch, kind)]
    assert matches == [expected]


def test_render_idle_is_welcome_after_any_prior_state():
    for prior in (LOADING, Success(make_snapshot()), Error("x")):
        render(prior)
        branch = render(IDLE)
        assert isinstance(branch, WelcomeBranch)
        assert branch.title == WELCOME_TITLE


def test_render_error_message_is_verbatim():
    assert render(Error("City not found")) == ErrorBranch("City not found")
    raw = "  <b>No matching location found.</b>\n"
    assert render(Error(raw)).message == raw


def test_render_success_builds_detail_strings():
    branch = render(Success(make_snapshot(temp_c=21.5)))

    assert isinstance(branch, DetailBranch)
    details = branch.details
    assert details.location == "Berlin,Germany"
    assert details.temperature == "21.5° C"
    assert details.condition_text == "Partly cloudy"
    assert details.icon_url == "https://cdn.weatherapi.com/weather/128x128/day/116.png"
    assert details.humidity == "65"
    assert details.precipitation == "0.3 mm"
    assert details.heat_index == "22.4° C"
    assert details.wind_speed == "13.0 km/h"
    assert details.local_date == "2024-05-01"
    assert details.local_time == "14:30"


def test_render_shows_provider_number_text_unchanged():
    snapshot = normalize_current(make_payload(temp_c="21.50", wind_kph="13", precip_mm=0.0))

    details = render(Success(snapshot)).details

    assert details.temperature == "21.50° C"
    assert details.wind_speed == "13 km/h"
    assert details.precipitation == "0.0 mm"


def test_render_success_with_malformed_localtime_keeps_time():
    branch = render(Success(make_snapshot(localtime="14:30")))

    assert branch.details.local_date == ""
    assert branch.details.local_time == "14:30"


def test_detail_rows_follow_layout_order():
    details = render(Success(make_snapshot())).details

    keys = [key for pair in details.rows() for key, _ in pair]
    assert keys == ["Humidity", "Precipitation", "Heat Index", "Wind Speed", "Local Time", "Local Date"]


def test_render_rejects_unknown_values():
    with pytest.raises(TypeError):
        render(None)  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        render("Loading")  # type: ignore[arg-type]
