"""
WeatherDetailsView
------------------
Current-conditions layout for a successful lookup: location line, large
temperature, condition icon and text, then a 2x3 grid of key/value cells
(humidity, precipitation, heat index, wind speed, local time, local date).

Pure View: it receives a ready ``WeatherDetails`` DTO and never formats
values itself.
"""
from __future__ import annotations

import base64
import tkinter as tk
from tkinter import ttk
from typing import Optional

from ...viewmodels.presenter import WeatherDetails


class WeatherDetailsView(ttk.Frame):
    """Read-only detail layout bound to one ``WeatherDetails`` value."""

    def __init__(self, parent: tk.Widget, details: WeatherDetails) -> None:
        super().__init__(parent)
        self.details = details
        self._icon_image: Optional[tk.PhotoImage] = None

        self.columnconfigure(0, weight=1)

        header = ttk.Frame(self)
        header.grid(row=0, column=0, sticky="ew", pady=(8, 0))
        ttk.Label(header, text="\U0001F4CD", style="Icon.TLabel").pack(side="left")
        ttk.Label(header, text=details.location, style="Location.TLabel").pack(side="left", anchor="s")

        ttk.Label(self, text=details.temperature, style="Temperature.TLabel").grid(
            row=1, column=0, pady=(16, 0)
        )
        self._icon_label = ttk.Label(self)
        self._icon_label.grid(row=2, column=0)
        ttk.Label(self, text=details.condition_text, style="Condition.TLabel").grid(row=3, column=0)

        grid = ttk.Frame(self)
        grid.grid(row=4, column=0, sticky="ew", pady=(16, 0))
        grid.columnconfigure((0, 1), weight=1)
        for row_idx, pair in enumerate(details.rows()):
            for col_idx, (key, value) in enumerate(pair):
                self._key_val(grid, key, value).grid(row=row_idx, column=col_idx, padx=16, pady=12)

    @staticmethod
    def _key_val(parent: tk.Widget, key: str, value: str) -> ttk.Frame:
        cell = ttk.Frame(parent)
        ttk.Label(cell, text=value, style="Value.TLabel").pack()
        ttk.Label(cell, text=key, style="Key.TLabel").pack()
        return cell

    # ------------------------------------------------------------------
    def set_icon(self, url: str, data: bytes) -> bool:
        """Show the condition icon if ``url`` still matches these details."""
        if not data or url != self.details.icon_url:
            return False
        try:
            image = tk.PhotoImage(master=self, data=base64.b64encode(data))
        except tk.TclError:
            return False
        self._icon_image = image  # keep a reference; Tk does not
        self._icon_label.configure(image=image)
        return True


__all__ = ["WeatherDetailsView"]
