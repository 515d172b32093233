from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional


@dataclass
class QueryTrigger:
    """Search field state plus the explicit submit command.

    Editing only updates ``text``; nothing is fetched until ``submit`` runs.
    ``submit`` forwards the text untouched (no trimming, no empty check) and
    calls ``fetch`` exactly once per invocation.
    """

    fetch: Callable[[str], None]
    on_submitted: Optional[Callable[[], None]] = None
    text: str = ""

    def set_text(self, value: str) -> None:
        self.text = "" if value is None else str(value)

    def submit(self, location_text: Optional[str] = None) -> None:
        query = self.text if location_text is None else location_text
        self.fetch(query)
        if self.on_submitted:
            self.on_submitted()


__all__ = ["QueryTrigger"]
