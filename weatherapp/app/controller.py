"""Adapter and use-case wiring for the desktop app runtime.

This module owns lazy construction of the weather adapter and the use cases
that depend on values in :class:`weatherapp.viewmodels.settings_vm.SettingsVM`.
"""

from __future__ import annotations

import logging
from typing import Optional

from ..adapters.weather_mock import WeatherMockAdapter
from ..adapters.weather_rest import WeatherApiRestAdapter
from ..domain.ports import WeatherPort
from ..usecases.fetch_current_weather import FetchConditionIcon, FetchCurrentWeather
from ..viewmodels.settings_vm import SettingsVM


class AppController:
    """Create and cache the runtime adapter/use-cases from settings state.

    Call chain:
        ``weatherapp.app.main.App`` creates one instance and asks it for the
        fetch use case whenever the weather view-model needs one.
    """

    def __init__(self, settings_vm: SettingsVM, *, force_mock: bool = False) -> None:
        """Initialize controller with settings-backed lazy dependencies.

        Args:
            settings_vm: Settings state with API key, base URL and timeouts.
            force_mock: Use the offline adapter even when an API key is set.
        """
        self._log = logging.getLogger(__name__)
        self.settings_vm = settings_vm
        self.force_mock = force_mock
        self._weather_adapter: Optional[WeatherPort] = None
        self.uc_fetch: Optional[FetchCurrentWeather] = None
        self.uc_icon: Optional[FetchConditionIcon] = None

    @property
    def weather_adapter(self) -> Optional[WeatherPort]:
        return self._weather_adapter

    @property
    def uses_mock(self) -> bool:
        return isinstance(self._weather_adapter, WeatherMockAdapter)

    def reset(self) -> None:
        """Drop the cached adapter and use-cases so the next call rebuilds them."""
        self._weather_adapter = None
        self.uc_fetch = None
        self.uc_icon = None

    def ensure_ready(self) -> bool:
        """Ensure the adapter and use-cases exist; always succeeds (mock fallback)."""
        if self._weather_adapter is not None:
            return True

        settings = self.settings_vm
        if self.force_mock or settings.use_mock:
            self._log.info("No API key configured; using offline weather data")
            adapter: WeatherPort = WeatherMockAdapter(latency_s=0.4)
        else:
            adapter = WeatherApiRestAdapter(
                settings.api_key,
                base_url=settings.api_base_url,
                request_timeout_s=settings.request_timeout_s,
                retries=settings.retries,
            )
            self._log.info("Using weather API at %s", settings.api_base_url)

        self._weather_adapter = adapter
        self.uc_fetch = FetchCurrentWeather(adapter)
        self.uc_icon = FetchConditionIcon(adapter)
        return True

    def fetch_weather(self, query: str):
        """Entry point handed to ``WeatherViewModel`` (runs on the worker thread)."""
        self.ensure_ready()
        assert self.uc_fetch is not None
        return self.uc_fetch(query)

    def fetch_icon(self, url: str) -> bytes:
        self.ensure_ready()
        assert self.uc_icon is not None
        return self.uc_icon(url)


__all__ = ["AppController"]
