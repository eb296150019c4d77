"""Typed broadcast channel for "tree data changed" notifications.

Listeners run synchronously in subscription order when ``fire`` is called.
A listener exception propagates to the caller of ``fire``.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Generic, TypeVar

T = TypeVar("T")

Listener = Callable[[T], None]


class EventEmitter(Generic[T]):
    """Fan one payload out to every subscribed listener."""

    def __init__(self) -> None:
        self._listeners: list[Listener[T]] = []
        self._disposed = False

    @property
    def listener_count(self) -> int:
        return len(self._listeners)

    def subscribe(self, listener: Listener[T]) -> Callable[[], None]:
        """Add ``listener`` and return a callable that removes it again."""
        if self._disposed:
            raise RuntimeError("cannot subscribe to a disposed emitter")
        self._listeners.append(listener)

        def unsubscribe() -> None:
            try:
                self._listeners.remove(listener)
            except ValueError:
                pass

        return unsubscribe

    def fire(self, payload: T) -> None:
        for listener in list(self._listeners):
            listener(payload)

    def dispose(self) -> None:
        """Drop all listeners; later ``fire`` calls become no-ops."""
        self._listeners.clear()
        self._disposed = True


__all__ = [
    "EventEmitter",
    "Listener",
]
