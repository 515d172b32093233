from __future__ import annotations

"""Helpers for the provider's ``localtime`` strings."""

from typing import Tuple


def split_localtime(localtime: str) -> Tuple[str, str]:
    """Split ``"<date> <time>"`` into ``(date, time)`` on the first space.

    A value without any space is treated as a bare time: the date part is
    returned empty and the whole string becomes the time part. Surrounding
    whitespace is preserved as given.
    """
    text = "" if localtime is None else str(localtime)
    date_part, sep, time_part = text.partition(" ")
    if not sep:
        return "", text
    return date_part, time_part


__all__ = ["split_localtime"]
