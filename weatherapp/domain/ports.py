from __future__ import annotations

from typing import Protocol

from .entities import WeatherSnapshot


# ---- Error model ----
class UseCaseError(Exception):
    """Base class for use case level errors (user-presentable)."""

    def __init__(self, code: str, message: str):
        super().__init__(message)
        self.code = code
        self.message = message


# ---- Ports (Hexagonal boundaries) ----
class WeatherPort(Protocol):
    """Current-conditions lookup against a weather provider."""

    def current(self, query: str) -> WeatherSnapshot: ...

    def fetch_icon(self, url: str) -> bytes: ...  # raw image bytes (PNG)


class StoragePort(Protocol):
    """Persistence for user preferences."""

    def save_user_prefs(self, prefs: dict) -> None: ...
    def load_user_prefs(self) -> dict: ...
