"""Tagged outcome of the most recent weather query.

``QueryResult`` is a closed union of four frozen dataclasses. Exactly one of
them lives in the view-model's observable slot at any time:

``Idle`` (nothing asked yet) -> ``Loading`` -> ``Success`` | ``Error``.

Every state is re-enterable; a new query always moves the slot back to
``Loading``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from .entities import WeatherSnapshot


@dataclass(frozen=True)
class Idle:
    """No query has been issued yet."""


@dataclass(frozen=True)
class Loading:
    """A query is in flight."""


@dataclass(frozen=True)
class Success:
    """The last query resolved with weather data."""

    data: WeatherSnapshot


@dataclass(frozen=True)
class Error:
    """The last query failed; ``message`` is user-facing text."""

    message: str


QueryResult = Union[Idle, Loading, Success, Error]

IDLE = Idle()
LOADING = Loading()


__all__ = ["Error", "IDLE", "Idle", "LOADING", "Loading", "QueryResult", "Success"]
