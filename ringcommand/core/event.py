"""Observer event used by the controller and the input hub."""

from __future__ import annotations

from typing import Callable, Generic, TypeVar

T = TypeVar("T")


class Event(Generic[T]):
    """
    Ordered list of handlers called with one value.

    Usage:
        changed: Event[int] = Event()
        changed += on_selected     # subscribe (duplicates are ignored)
        changed -= on_selected     # unsubscribe (unknown handlers are ignored)
        changed.emit(2)

    Handlers added or removed while emitting take effect on the next emit.
    """

    def __init__(self):
        self._handlers: list[Callable[[T], None]] = []

    def __iadd__(self, handler: Callable[[T], None]) -> "Event[T]":
        """Subscribe: event += handler"""
        if handler not in self._handlers:
            self._handlers.append(handler)
        return self

    def __isub__(self, handler: Callable[[T], None]) -> "Event[T]":
        """Unsubscribe: event -= handler"""
        if handler in self._handlers:
            self._handlers.remove(handler)
        return self

    def __contains__(self, handler: Callable[[T], None]) -> bool:
        """True if handler is subscribed."""
        return handler in self._handlers

    def emit(self, value: T) -> None:
        """Notify all subscribers with value."""
        for handler in list(self._handlers):
            handler(value)

    def clear(self) -> None:
        """Remove all subscribers."""
        self._handlers.clear()

    def __len__(self) -> int:
        """Number of subscribers."""
        return len(self._handlers)

    def __bool__(self) -> bool:
        """True if has any subscribers."""
        return bool(self._handlers)
