"""Shared visual theme for the weather page.

Light and dark palettes mirror each other; the page picks one at start-up
from the persisted ``dark_theme`` setting (or ``--dark``).
"""

from __future__ import annotations

import tkinter as tk
from dataclasses import dataclass
from tkinter import ttk


@dataclass(frozen=True)
class Palette:
    primary: str
    secondary: str
    background: str
    text: str
    error: str = "#d32f2f"


LIGHT = Palette(primary="#29b6f6", secondary="#ffd700", background="#87cefa", text="#000000")
DARK = Palette(primary="#80d8ff", secondary="#fff59d", background="#333366", text="#ffffff")


def palette_for(dark: bool) -> Palette:
    return DARK if dark else LIGHT


def apply_weather_theme(root: tk.Misc, palette: Palette) -> None:
    """Apply the ttk styles used by the weather views.

    Args:
        root: Root Tk object or any widget tied to the app Tcl interpreter.
        palette: Colours for the current light/dark mode.
    """
    style = ttk.Style(root)
    if "clam" in style.theme_names():
        style.theme_use("clam")

    bg = palette.background
    text = palette.text

    root.option_add("*Font", "TkDefaultFont 11")
    root.configure(bg=bg)

    style.configure(".", background=bg, foreground=text)
    style.configure("TFrame", background=bg)
    style.configure("TLabel", background=bg, foreground=text)
    style.configure("Title.TLabel", background=bg, foreground=text, font=("TkDefaultFont", 20, "bold"))
    style.configure("Subtle.TLabel", background=bg, foreground=text, font=("TkDefaultFont", 12))
    style.configure("Error.TLabel", background=bg, foreground=palette.error, font=("TkDefaultFont", 12))
    style.configure("Location.TLabel", background=bg, foreground=text, font=("TkDefaultFont", 22))
    style.configure("Temperature.TLabel", background=bg, foreground=text, font=("TkDefaultFont", 44, "bold"))
    style.configure("Condition.TLabel", background=bg, foreground=text, font=("TkDefaultFont", 20))
    style.configure("Value.TLabel", background=bg, foreground=text, font=("TkDefaultFont", 16, "bold"))
    style.configure("Key.TLabel", background=bg, foreground=text, font=("TkDefaultFont", 10, "bold"))
    style.configure("Icon.TLabel", background=bg, foreground=palette.secondary, font=("TkDefaultFont", 40))

    style.configure("TEntry", fieldbackground="#ffffff", bordercolor=text)
    style.configure("Search.TButton", padding=(10, 4), background=bg, foreground=text, bordercolor=text)
    style.map("Search.TButton", background=[("active", palette.primary)])
    style.configure(
        "Weather.Horizontal.TProgressbar",
        background=palette.primary,
        troughcolor=bg,
        bordercolor=bg,
    )


__all__ = ["DARK", "LIGHT", "Palette", "apply_weather_theme", "palette_for"]
