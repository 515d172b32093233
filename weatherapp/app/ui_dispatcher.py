"""Hand results from worker threads back to the Tk main loop.

Tk widgets may only be touched from the thread running ``mainloop``. Workers
call :meth:`UiDispatcher.post` (thread-safe); the dispatcher drains its queue
from a periodic ``after`` tick on the UI thread.

The app passes Tk ``after`` and ``after_cancel`` in, so the class itself has
no Tk import and can be driven by hand in tests.
"""

from __future__ import annotations

import logging
import queue
import threading
from typing import Callable, Optional

ScheduleFn = Callable[[int, Callable[[], None]], str]
CancelFn = Callable[[str], None]
Task = Callable[[], None]

log = logging.getLogger(__name__)


class UiDispatcher:
    """Queue of callbacks drained on the UI thread every ``interval_ms``."""

    def __init__(self, schedule: ScheduleFn, cancel: CancelFn, *, interval_ms: int = 50) -> None:
        """Store schedule/cancel functions.

        Args:
            schedule: Function compatible with ``after(delay_ms, callback)``.
            cancel: Function compatible with ``after_cancel(token)``.
            interval_ms: Delay between queue drains.
        """
        self._schedule = schedule
        self._cancel = cancel
        self._interval_ms = max(1, int(interval_ms))
        self._queue: "queue.SimpleQueue[Task]" = queue.SimpleQueue()
        self._token: Optional[str] = None

    @property
    def running(self) -> bool:
        return self._token is not None

    def post(self, task: Task) -> None:
        """Enqueue ``task`` for execution on the UI thread. Safe from any thread."""
        self._queue.put(task)

    def start(self) -> None:
        if self._token is None:
            self._token = self._schedule(self._interval_ms, self._tick)

    def stop(self) -> None:
        token, self._token = self._token, None
        if token is not None:
            self._cancel(token)

    def drain(self) -> int:
        """Run every queued task now; returns how many ran."""
        ran = 0
        while True:
            try:
                task = self._queue.get_nowait()
            except queue.Empty:
                return ran
            try:
                task()
            except Exception:
                log.exception("UI task failed")
            ran += 1

    def _tick(self) -> None:
        self.drain()
        if self._token is not None:
            self._token = self._schedule(self._interval_ms, self._tick)


def run_in_thread(task: Task) -> None:
    """Run ``task`` on a daemon worker thread."""
    threading.Thread(target=task, name="weather-fetch", daemon=True).start()


__all__ = ["UiDispatcher", "run_in_thread"]
