"""A single observable slot with an ordered subscriber registry."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Generic, TypeVar

_logger = logging.getLogger(__name__)

T = TypeVar("T")

Subscriber = Callable[[T | None], None]


class SelectionChannel(Generic[T]):
    """Holds the current value of one interaction slot and its observers.

    ``set`` replaces the slot first and only then calls subscribers, in
    registration order, so a subscriber reading :attr:`current` during its
    callback sees the new value.
    """

    def __init__(self, name: str) -> None:
        self._name = name
        self._current: T | None = None
        # dict keeps insertion order and gives set semantics on callbacks.
        self._subscribers: dict[Subscriber[T], None] = {}

    @property
    def name(self) -> str:
        return self._name

    @property
    def current(self) -> T | None:
        """The live slot value. May be edited in place by the drag path."""
        return self._current

    @property
    def subscriber_count(self) -> int:
        return len(self._subscribers)

    def subscribe(self, callback: Subscriber[T]) -> Callable[[], None]:
        """Register *callback*; returns a function that unregisters it."""
        self._subscribers[callback] = None

        def _unsubscribe() -> None:
            self.unsubscribe(callback)

        return _unsubscribe

    def unsubscribe(self, callback: Subscriber[T]) -> None:
        self._subscribers.pop(callback, None)

    def set(self, value: T | None) -> None:
        self._current = value
        self._notify(value)

    def notify_current(self) -> None:
        """Re-broadcast the slot without replacing it."""
        self._notify(self._current)

    def reset(self) -> None:
        """Drop the slot value and all subscribers without notifying."""
        self._current = None
        self._subscribers.clear()

    def _notify(self, value: T | None) -> None:
        # Copy: a subscriber may unsubscribe itself while being notified.
        for callback in list(self._subscribers):
            try:
                callback(value)
            except Exception:
                _logger.warning("%s subscriber %r failed", self._name, callback, exc_info=True)
