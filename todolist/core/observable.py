"""
FILE: todolist/core/observable.py
PURPOSE: Synchronous observable values for store -> presentation updates
EXPORTS:
  - MutableState (holds a value, notifies subscribers on every assignment)
  - DerivedState (read-only projection of one or more states)
DEPENDENCIES:
  - logging (stdlib)
  - typing (type hints)
NOTES:
  - Subscribers are called synchronously, in subscription order, before set() returns
  - Every assignment notifies, even if the new value equals the old one
  - subscribe() returns an unsubscribe callable
  - Values are expected to be immutable snapshots (tuples, frozen dataclasses)
"""

import logging
from typing import Callable, Generic, List, Sequence, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")

Subscriber = Callable[[T], None]
Unsubscribe = Callable[[], None]


class _Subscribers(Generic[T]):
    """Ordered subscriber list shared by both state kinds."""

    def __init__(self):
        self._entries: List[List[Subscriber]] = []

    def add(self, callback: Subscriber) -> Unsubscribe:
        # Each subscription gets its own entry, so the same callable may be added twice
        entry = [callback]
        self._entries.append(entry)

        def unsubscribe() -> None:
            # Safe to call twice
            for i, existing in enumerate(self._entries):
                if existing is entry:
                    del self._entries[i]
                    return

        return unsubscribe

    def notify(self, value: T) -> None:
        # Iterate over a copy so callbacks may unsubscribe mid-delivery
        for entry in list(self._entries):
            entry[0](value)

    def __len__(self) -> int:
        return len(self._entries)


class MutableState(Generic[T]):
    """
    A value holder that pushes every new snapshot to its subscribers.

    Example:
        >>> state = MutableState(0)
        >>> seen = []
        >>> unsubscribe = state.subscribe(seen.append)
        >>> state.value = 1
        >>> seen
        [1]
    """

    def __init__(self, initial: T, name: str = "state"):
        self._value = initial
        self._name = name
        self._subscribers: _Subscribers[T] = _Subscribers()

    @property
    def value(self) -> T:
        """Current snapshot."""
        return self._value

    @value.setter
    def value(self, new_value: T) -> None:
        self.set(new_value)

    def set(self, new_value: T) -> None:
        """Replace the snapshot and notify all current subscribers."""
        self._value = new_value
        logger.debug("%s updated, notifying %d subscriber(s)", self._name, len(self._subscribers))
        self._subscribers.notify(new_value)

    def subscribe(self, callback: Subscriber, emit_current: bool = False) -> Unsubscribe:
        """
        Register a callback for new snapshots.

        Args:
            callback: Called with each new value
            emit_current: Also call it once right away with the current value

        Returns:
            Callable that removes the subscription
        """
        unsubscribe = self._subscribers.add(callback)
        if emit_current:
            callback(self._value)
        return unsubscribe

    @property
    def subscriber_count(self) -> int:
        return len(self._subscribers)


class DerivedState(Generic[T]):
    """
    Read-only projection computed from other states.

    Holds no value of its own: `value` is recomputed from the sources on
    every read, and subscribers get the recomputed value whenever any
    source changes.
    """

    def __init__(self, sources: Sequence[MutableState], compute: Callable[[], T]):
        self._sources = list(sources)
        self._compute = compute
        self._subscribers: _Subscribers[T] = _Subscribers()
        for source in self._sources:
            source.subscribe(self._on_source_changed)

    @property
    def value(self) -> T:
        return self._compute()

    def _on_source_changed(self, _value) -> None:
        if len(self._subscribers):
            self._subscribers.notify(self._compute())

    def subscribe(self, callback: Subscriber, emit_current: bool = False) -> Unsubscribe:
        """Register a callback for recomputed values. See MutableState.subscribe()."""
        unsubscribe = self._subscribers.add(callback)
        if emit_current:
            callback(self.value)
        return unsubscribe

    @property
    def subscriber_count(self) -> int:
        return len(self._subscribers)
