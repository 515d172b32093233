"""
WeatherPageView
---------------
The single weather lookup page: a search row (entry + search button) above a
content area that shows exactly one branch at a time (welcome, spinner,
details or error).

This file contains only View code: no HTTP, no state machine. Keystrokes are
reported through ``on_query_changed``; a lookup is requested only through
``on_submit`` (search button or the Return key).
"""
from __future__ import annotations

import tkinter as tk
from tkinter import ttk
from typing import Callable, Optional

from ...viewmodels.presenter import (
    Branch,
    DetailBranch,
    ErrorBranch,
    SpinnerBranch,
    WelcomeBranch,
)
from .view_utils import safe_call
from .weather_details_view import WeatherDetailsView


class WeatherPageView(ttk.Frame):
    """Search row plus a swappable content area."""

    OnVoid = Optional[Callable[[], None]]

    def __init__(
        self,
        parent: tk.Widget,
        *,
        on_query_changed: Optional[Callable[[str], None]] = None,
        on_submit: OnVoid = None,
    ) -> None:
        super().__init__(parent, padding=8)
        self._on_query_changed = on_query_changed
        self._on_submit = on_submit
        self._content: Optional[ttk.Frame] = None
        self._spinner: Optional[ttk.Progressbar] = None
        self.current_branch: Optional[Branch] = None

        self.columnconfigure(0, weight=1)
        self.rowconfigure(1, weight=1)

        self._build_search_row()

        self._host = ttk.Frame(self)
        self._host.grid(row=1, column=0, sticky="nsew")
        self._host.columnconfigure(0, weight=1)
        self._host.rowconfigure(0, weight=1)

    # ------------------------------------------------------------------
    # Search row
    # ------------------------------------------------------------------
    def _build_search_row(self) -> None:
        row = ttk.Frame(self)
        row.grid(row=0, column=0, sticky="ew", pady=(0, 8))
        row.columnconfigure(0, weight=1)

        ttk.Label(row, text="Search Location").grid(row=0, column=0, sticky="w")
        self._query_var = tk.StringVar(value="")
        self._query_var.trace_add("write", lambda *_: safe_call(self._on_query_changed, self._query_var.get()))
        self._entry = ttk.Entry(row, textvariable=self._query_var)
        self._entry.grid(row=1, column=0, sticky="ew")
        self._entry.bind("<Return>", lambda _e: self._submit())
        self._entry.bind("<KP_Enter>", lambda _e: self._submit())

        ttk.Button(row, text="Search", style="Search.TButton", command=self._submit).grid(
            row=1, column=1, padx=(8, 0)
        )

    def _submit(self) -> None:
        safe_call(self._on_submit)

    def clear_focus(self) -> None:
        """Move focus off the entry after a submit."""
        self.winfo_toplevel().focus_set()

    def focus_search(self) -> None:
        self._entry.focus_set()

    # ------------------------------------------------------------------
    # Branch rendering
    # ------------------------------------------------------------------
    def show_branch(self, branch: Branch) -> None:
        """Replace the content area with the widgets for ``branch``."""
        if branch == self.current_branch and self._content is not None:
            return
        self._clear_content()
        if isinstance(branch, WelcomeBranch):
            content = self._build_welcome(branch)
        elif isinstance(branch, SpinnerBranch):
            content = self._build_spinner()
        elif isinstance(branch, DetailBranch):
            content = WeatherDetailsView(self._host, branch.details)
        elif isinstance(branch, ErrorBranch):
            content = self._build_error(branch)
        else:
            raise TypeError(f"Unsupported branch: {branch!r}")
        content.grid(row=0, column=0, sticky="nsew")
        self._content = content
        self.current_branch = branch

    def set_icon(self, url: str, data: bytes) -> bool:
        """Forward icon bytes to the detail view, if it is the one showing."""
        if isinstance(self._content, WeatherDetailsView):
            return self._content.set_icon(url, data)
        return False

    def _clear_content(self) -> None:
        if self._spinner is not None:
            self._spinner.stop()
            self._spinner = None
        if self._content is not None:
            self._content.destroy()
            self._content = None

    def _build_welcome(self, branch: WelcomeBranch) -> ttk.Frame:
        frame = ttk.Frame(self._host, padding=16)
        inner = ttk.Frame(frame)
        inner.place(relx=0.5, rely=0.5, anchor="center")
        ttk.Label(inner, text=branch.title, style="Title.TLabel").pack(pady=(0, 8))
        ttk.Label(inner, text=branch.subtitle, style="Subtle.TLabel", justify="center").pack(pady=(0, 16))
        ttk.Label(inner, text="\U0001F4CD", style="Icon.TLabel").pack()
        return frame

    def _build_spinner(self) -> ttk.Frame:
        frame = ttk.Frame(self._host, padding=16)
        bar = ttk.Progressbar(frame, mode="indeterminate", length=160, style="Weather.Horizontal.TProgressbar")
        bar.pack(pady=24)
        bar.start(12)
        self._spinner = bar
        return frame

    def _build_error(self, branch: ErrorBranch) -> ttk.Frame:
        frame = ttk.Frame(self._host, padding=16)
        ttk.Label(frame, text=branch.message, style="Error.TLabel", wraplength=360, justify="center").pack()
        return frame


__all__ = ["WeatherPageView"]
