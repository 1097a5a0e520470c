"""Core base classes for ringcommand."""

from ringcommand.core.event import Event

__all__ = ["Event"]
