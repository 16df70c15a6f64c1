"""Event keys, listener aliases and the static event-shape contract."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Protocol, Union, runtime_checkable


class Token:
    """Opaque, globally unique event key.

    Two tokens are equal only if they are the same object, so a token never
    collides with a string key or with another token sharing its description.
    """

    __slots__ = ("description",)

    def __init__(self, description: str | None = None) -> None:
        self.description = description

    def __repr__(self) -> str:
        if self.description is None:
            return "Token()"
        return f"Token({self.description!r})"


EventKey = Union[str, Token]
Listener = Callable[..., Any]


@runtime_checkable
class TypedEventEmitter(Protocol):
    """Operation surface every emitter implements."""

    def on(self, event: EventKey, listener: Listener) -> TypedEventEmitter: ...

    def once(self, event: EventKey, listener: Listener) -> Listener: ...

    def off(self, event: EventKey, listener: Listener) -> TypedEventEmitter: ...

    def remove_all_listeners(
        self, event: EventKey | None = None
    ) -> TypedEventEmitter: ...

    def emit(self, event: EventKey, *args: Any, **kwargs: Any) -> bool: ...

    def event_names(self) -> list[EventKey]: ...

    def listeners(self, event: EventKey) -> list[Listener]: ...

    def listener_count(self, event: EventKey) -> int: ...
