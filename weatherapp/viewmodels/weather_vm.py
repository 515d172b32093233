from __future__ import annotations

import logging
from typing import Callable, Optional

from ..domain.entities import WeatherSnapshot
from ..domain.ports import UseCaseError
from ..domain.query_result import IDLE, LOADING, Error, QueryResult, Success
from ..usecases.error_mapping import FALLBACK_MESSAGE
from .observable import ObservableValue

FetchFn = Callable[[str], WeatherSnapshot]
Task = Callable[[], None]
RunFn = Callable[[Task], None]

log = logging.getLogger(__name__)


def _run_inline(task: Task) -> None:
    task()


class WeatherViewModel:
    """Owns the ``weather_result`` slot and is its only writer.

    ``get_data`` flips the slot to ``Loading`` and hands the lookup to
    ``run_async``. The worker hands its outcome to ``post``, which must run the
    callback on the UI thread. Both default to running inline, which makes the
    whole round trip synchronous (tests, scripted use).

    Overlapping queries are sequence-gated: each call takes a ticket and only
    the outcome carrying the newest ticket is written. A slower, older lookup
    that resolves after a newer one is dropped instead of overwriting it.
    """

    def __init__(
        self,
        fetch_weather: Optional[FetchFn] = None,
        *,
        run_async: Optional[RunFn] = None,
        post: Optional[RunFn] = None,
    ) -> None:
        self.fetch_weather = fetch_weather
        self.weather_result: ObservableValue[QueryResult] = ObservableValue(IDLE)
        self._run_async = run_async or _run_inline
        self._post = post or _run_inline
        self._ticket = 0

    @property
    def current(self) -> QueryResult:
        return self.weather_result.value

    def get_data(self, city: str) -> None:
        """Start a lookup for ``city``; the text is passed through unchanged."""
        self._ticket += 1
        ticket = self._ticket
        log.info("Weather lookup #%d for %r", ticket, city)
        self.weather_result.set(LOADING)

        fetch = self.fetch_weather

        def _work() -> None:
            outcome = self._resolve(fetch, city)
            self._post(lambda: self._deliver(ticket, outcome))

        self._run_async(_work)

    def reset(self) -> None:
        """Return to the welcome state and invalidate any request in flight."""
        self._ticket += 1
        self.weather_result.set(IDLE)

    # ------------------------------------------------------------------
    @staticmethod
    def _resolve(fetch: Optional[FetchFn], city: str) -> QueryResult:
        if fetch is None:
            return Error("Weather service is not configured.")
        try:
            return Success(fetch(city))
        except UseCaseError as err:
            return Error(err.message)
        except Exception:
            log.exception("Unexpected failure while fetching weather for %r", city)
            return Error(FALLBACK_MESSAGE)

    def _deliver(self, ticket: int, outcome: QueryResult) -> None:
        if ticket != self._ticket:
            log.debug("Dropping stale result for lookup #%d (newest is #%d)", ticket, self._ticket)
            return
        self.weather_result.set(outcome)


__all__ = ["WeatherViewModel"]
