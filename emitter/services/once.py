"""Service for building one-shot listener wrappers."""

from __future__ import annotations

import functools
from collections.abc import Callable
from typing import Any

from emitter.domain.types import EventKey, Listener


def make_once_wrapper(
    event: EventKey,
    listener: Listener,
    remove: Callable[[EventKey, Listener], Any],
) -> Listener:
    """Return a wrapper that unregisters itself and then calls *listener*.

    *remove* is called with ``(event, wrapper)`` before *listener* runs, so an
    emission triggered from inside *listener* no longer sees the wrapper. The
    wrapper does nothing after its first call, even when an older snapshot of
    the listener list still holds it.
    """
    fired = False

    @functools.wraps(listener)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        nonlocal fired
        if fired:
            return None
        fired = True
        remove(event, wrapper)
        return listener(*args, **kwargs)

    wrapper.listener = listener  # type: ignore[attr-defined]
    return wrapper
