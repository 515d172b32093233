"""Single-slot observable value used as the view-model -> view channel.

The slot has one writer (the owning view-model) and any number of readers.
Subscribers are invoked synchronously, in registration order, on the thread
that calls ``set``; view-models only call it from the UI thread.
"""

from __future__ import annotations

from typing import Callable, Generic, List, TypeVar

T = TypeVar("T")

Listener = Callable[[T], None]


class ObservableValue(Generic[T]):
    """Holds the latest value and notifies listeners on every ``set``."""

    def __init__(self, initial: T) -> None:
        self._value = initial
        self._listeners: List[Listener] = []

    @property
    def value(self) -> T:
        return self._value

    def set(self, value: T) -> None:
        self._value = value
        for listener in list(self._listeners):
            listener(value)

    def subscribe(self, listener: Listener, *, emit_current: bool = True) -> Callable[[], None]:
        """Register ``listener``; returns a callable that removes it again.

        With ``emit_current`` the listener is called once immediately with the
        present value, so a freshly bound view renders without waiting for the
        next change.
        """
        self._listeners.append(listener)
        if emit_current:
            listener(self._value)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    def listener_count(self) -> int:
        return len(self._listeners)


__all__ = ["ObservableValue"]
