"""Domain package exports for value objects and the query outcome union."""

from .entities import Condition, CurrentConditions, LocationInfo, Query, WeatherSnapshot
from .query_result import IDLE, LOADING, Error, Idle, Loading, QueryResult, Success
from .snapshot_normalizer import MalformedPayload, normalize_current
from .time_utils import split_localtime

__all__ = [
    "Condition",
    "CurrentConditions",
    "Error",
    "IDLE",
    "Idle",
    "LOADING",
    "Loading",
    "LocationInfo",
    "MalformedPayload",
    "Query",
    "QueryResult",
    "Success",
    "WeatherSnapshot",
    "normalize_current",
    "split_localtime",
]
