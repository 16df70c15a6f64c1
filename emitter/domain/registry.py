"""Synchronous in-process event emitter."""

from __future__ import annotations

import logging
from typing import Any

from emitter.domain.models import EmitterConfig
from emitter.domain.types import EventKey, Listener, TypedEventEmitter
from emitter.repos.memory import ListenerRepository
from emitter.services.once import make_once_wrapper

LOGGER = logging.getLogger(__name__)


class Emitter(TypedEventEmitter):
    """Publish/subscribe registry for named events.

    Listeners are called synchronously in registration order. Event keys are
    strings or :class:`~emitter.domain.types.Token` instances.

    Usage::

        events = Emitter()
        events.on("message", print)
        events.emit("message", "hello")  # prints "hello", returns True

    An emitter is not thread-safe. Callers that share one across threads must
    serialize access themselves.
    """

    def __init__(self, config: EmitterConfig | None = None) -> None:
        self.config = config or EmitterConfig()
        self._listeners = ListenerRepository()
        self._warned: set[EventKey] = set()

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    def add(self, event: EventKey, listener: Listener) -> Emitter:
        """Append *listener* to *event*. The same callable may be added twice."""
        count = self._listeners.append(event, listener)
        LOGGER.debug("Added listener for event %r (%d total)", event, count)

        limit = self.config.max_listeners
        if limit is not None and count > limit and event not in self._warned:
            self._warned.add(event)
            LOGGER.warning(
                "Event %r has %d listeners, more than the configured maximum of %d; "
                "this may indicate a listener leak",
                event,
                count,
                limit,
            )
        return self

    on = add
    add_listener = add

    def add_once(self, event: EventKey, listener: Listener) -> Listener:
        """Register *listener* to run on the next emission of *event* only.

        Returns the wrapper that was actually registered. Pass it to
        :meth:`remove` to cancel the registration before it fires; the
        original *listener* is reachable as ``wrapper.listener``.
        """
        wrapper = make_once_wrapper(event, listener, self.remove)
        self.add(event, wrapper)
        return wrapper

    once = add_once

    # ------------------------------------------------------------------
    # Emission
    # ------------------------------------------------------------------

    def emit(self, event: EventKey, *args: Any, **kwargs: Any) -> bool:
        """Call every listener of *event* with the given arguments.

        The listener list is copied before the first call: listeners added
        while the emission runs wait for the next one, and listeners removed
        while it runs are still called. An exception from a listener stops the
        emission and propagates to the caller.

        Returns ``True`` if *event* had listeners.
        """
        snapshot = self._listeners.get(event)
        if not snapshot:
            LOGGER.debug("No listeners for event %r", event)
            return False

        for listener in snapshot:
            try:
                listener(*args, **kwargs)
            except Exception:
                LOGGER.debug("Listener for event %r raised", event)
                raise
        return True

    # ------------------------------------------------------------------
    # Removal
    # ------------------------------------------------------------------

    def remove(self, event: EventKey, listener: Listener) -> Emitter:
        """Remove every registration of *listener* from *event*."""
        removed = self._listeners.discard(
            event, listener, prune=self.config.prune_empty
        )
        if removed:
            LOGGER.debug("Removed %d listener(s) from event %r", removed, event)
        return self

    off = remove
    remove_listener = remove

    def remove_all(self, event: EventKey | None = None) -> Emitter:
        """Remove the listeners of *event*, or of every event when omitted."""
        if event is None:
            self._listeners.clear()
            self._warned.clear()
            LOGGER.debug("Removed all listeners")
        else:
            self._listeners.delete(event)
            self._warned.discard(event)
            LOGGER.debug("Removed all listeners for event %r", event)
        return self

    remove_all_listeners = remove_all

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    def event_names(self) -> list[EventKey]:
        """Return registered event keys in the order they were first added."""
        return self._listeners.keys()

    def listeners(self, event: EventKey) -> list[Listener]:
        """Return a copy of the listeners of *event*.

        One-shot registrations appear as their wrapper, not the original.
        """
        return self._listeners.get(event)

    def listener_count(self, event: EventKey) -> int:
        """Return how many listeners *event* has; 0 if unknown."""
        return self._listeners.count(event)
