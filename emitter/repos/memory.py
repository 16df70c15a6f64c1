"""In-memory storage for listener sequences."""

from __future__ import annotations

from emitter.domain.types import EventKey, Listener


class ListenerRepository:
    """Dict-backed store of listener lists, keyed by event.

    Keys keep the order in which they were first introduced, regardless of
    whether they are strings or tokens.
    """

    def __init__(self) -> None:
        self._store: dict[EventKey, list[Listener]] = {}

    def append(self, event: EventKey, listener: Listener) -> int:
        """Append *listener* to the list for *event* and return the new length."""
        entries = self._store.setdefault(event, [])
        entries.append(listener)
        return len(entries)

    def get(self, event: EventKey) -> list[Listener]:
        return list(self._store.get(event, ()))

    def count(self, event: EventKey) -> int:
        return len(self._store.get(event, ()))

    def discard(self, event: EventKey, listener: Listener, prune: bool = False) -> int:
        """Drop every entry equal to *listener* and return how many were dropped."""
        entries = self._store.get(event)
        if entries is None:
            return 0
        kept = [entry for entry in entries if entry != listener]
        removed = len(entries) - len(kept)
        if prune and not kept:
            del self._store[event]
        else:
            self._store[event] = kept
        return removed

    def delete(self, event: EventKey) -> None:
        self._store.pop(event, None)

    def clear(self) -> None:
        self._store.clear()

    def keys(self) -> list[EventKey]:
        return list(self._store)
