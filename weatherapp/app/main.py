# weatherapp/app/main.py
from __future__ import annotations

import argparse
import logging
import os
import tkinter as tk
from typing import Callable, List, Optional, Sequence

# ---- Views (UI-only) ----
from .views.theme import apply_weather_theme, palette_for
from .views.weather_page_view import WeatherPageView

# ---- ViewModels ----
from ..viewmodels.presenter import DetailBranch, render
from ..viewmodels.search_vm import QueryTrigger
from ..viewmodels.settings_vm import SettingsVM
from ..viewmodels.weather_vm import WeatherViewModel

# ---- UseCases & Adapter ----
from ..adapters.storage_local import StorageLocal
from ..domain.ports import UseCaseError
from ..domain.query_result import QueryResult
from ..utils import logging as logging_utils
from .controller import AppController
from .ui_dispatcher import UiDispatcher, run_in_thread

DEFAULT_PREFS_DIR = os.path.join(os.path.expanduser("~"), ".weatherapp")


class App:
    """Bootstrap: wire the page view <-> view-models, adapter, and dispatcher."""

    def __init__(self, settings_vm: SettingsVM, *, force_mock: bool = False) -> None:
        self._log = logging.getLogger(__name__)
        self.settings_vm = settings_vm
        self.controller = AppController(settings_vm, force_mock=force_mock)
        self.controller.ensure_ready()

        self.root = tk.Tk()
        self.root.title("WeatherApp")
        self.root.geometry("440x720")
        self.root.minsize(360, 560)
        apply_weather_theme(self.root, palette_for(settings_vm.dark_theme))

        self.dispatcher = UiDispatcher(self.root.after, self.root.after_cancel)

        # ---- ViewModels ----
        self.weather_vm = WeatherViewModel(
            self.controller.fetch_weather,
            run_async=run_in_thread,
            post=self.dispatcher.post,
        )

        # ---- View ----
        self.page = WeatherPageView(
            self.root,
            on_query_changed=lambda text: self.trigger.set_text(text),
            on_submit=lambda: self.trigger.submit(),
        )
        self.page.pack(fill="both", expand=True)

        self.trigger = QueryTrigger(fetch=self.weather_vm.get_data, on_submitted=self.page.clear_focus)

        self._unsubscribe: Callable[[], None] = self.weather_vm.weather_result.subscribe(self._on_result)
        self.root.protocol("WM_DELETE_WINDOW", self.close)

    # ------------------------------------------------------------------
    def _on_result(self, result: QueryResult) -> None:
        """Re-render the page for the latest query outcome."""
        branch = render(result)
        self._log.debug("Rendering %s branch", branch.kind)
        self.page.show_branch(branch)
        if isinstance(branch, DetailBranch) and branch.details.icon_url:
            self._request_icon(branch.details.icon_url)

    def _request_icon(self, url: str) -> None:
        def _work() -> None:
            try:
                data = self.controller.fetch_icon(url)
            except UseCaseError as err:
                self._log.debug("Icon %s unavailable: %s", url, err.message)
                return
            if data:
                self.dispatcher.post(lambda: self.page.set_icon(url, data))

        run_in_thread(_work)

    # ------------------------------------------------------------------
    def run(self) -> None:
        self.dispatcher.start()
        self.page.focus_search()
        self.root.mainloop()

    def close(self) -> None:
        self.dispatcher.stop()
        self._unsubscribe()
        self.root.destroy()


def build_settings(storage: StorageLocal, environ: Optional[dict] = None) -> SettingsVM:
    """Load persisted prefs, write defaults on first run, then apply env overrides."""
    log = logging.getLogger(__name__)
    settings = SettingsVM(on_save=storage.save_user_prefs)
    prefs = {}
    try:
        prefs = storage.load_user_prefs()
    except (OSError, ValueError) as exc:
        log.warning("Ignoring unreadable preferences at %s: %s", storage.prefs_path, exc)
    if prefs:
        try:
            settings.apply_dict(prefs)
        except ValueError as exc:
            log.warning("Ignoring invalid preferences: %s", exc)
    elif not os.path.exists(storage.prefs_path):
        try:
            settings.cmd_save()
        except OSError as exc:
            log.warning("Could not write default preferences: %s", exc)
    settings.apply_env(os.environ if environ is None else environ)
    return settings


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="weatherapp", description="Current weather lookup.")
    parser.add_argument("--mock", action="store_true", help="use built-in offline weather data")
    parser.add_argument("--dark", action="store_true", help="use the dark colour scheme")
    parser.add_argument(
        "--prefs-dir",
        default=os.getenv("WEATHERAPP_PREFS_DIR", DEFAULT_PREFS_DIR),
        help="directory holding user_prefs.json (default: %(default)s)",
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logging_utils.configure_root()

    settings = build_settings(StorageLocal(root_dir=args.prefs_dir))
    if args.dark:
        settings.dark_theme = True
    level = logging_utils.apply_gui_preferences(settings.debug_logging)
    logging.getLogger(__name__).debug("Log level %s", logging_utils.level_name(level))

    App(settings, force_mock=args.mock).run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
