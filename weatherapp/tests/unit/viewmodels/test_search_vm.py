from typing import List

from weatherapp.domain.query_result import LOADING, Success
from weatherapp.tests.unit.helpers import make_snapshot
from weatherapp.viewmodels.search_vm import QueryTrigger
from weatherapp.viewmodels.weather_vm import WeatherViewModel


def test_submit_invokes_fetch_exactly_once():
    calls: List[str] = []
    trigger = QueryTrigger(fetch=calls.append)

    trigger.submit("London")

    assert calls == ["London"]


def test_editing_text_does_not_fetch():
    calls: List[str] = []
    trigger = QueryTrigger(fetch=calls.append)

    for partial in ("L", "Lo", "Lon"):
        trigger.set_text(partial)

    assert calls == []
    trigger.submit()
    assert calls == ["Lon"]


def test_empty_and_whitespace_queries_are_forwarded():
    calls: List[str] = []
    trigger = QueryTrigger(fetch=calls.append)

    trigger.submit("")
    trigger.submit("  ")
    trigger.submit()

    assert calls == ["", "  ", ""]


def test_on_submitted_runs_after_fetch():
    order: List[str] = []
    trigger = QueryTrigger(fetch=lambda q: order.append(f"fetch:{q}"), on_submitted=lambda: order.append("done"))

    trigger.submit("Paris")

    assert order == ["fetch:Paris", "done"]


def test_trigger_drives_view_model_to_loading_then_result():
    snapshot = make_snapshot()
    vm = WeatherViewModel(lambda city: snapshot)
    seen: List[object] = []
    vm.weather_result.subscribe(seen.append, emit_current=False)
    trigger = QueryTrigger(fetch=vm.get_data)

    trigger.submit("Berlin")

    assert seen == [LOADING, Success(snapshot)]
