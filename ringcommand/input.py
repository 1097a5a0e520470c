"""Interaction source events delivered by the host's hand tracking."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from ringcommand.core.event import Event


@dataclass
class SourceEvent:
    """
    One notification from an interaction source (a tracked hand).

    Attributes:
        position: Hand position (3,), None when the source has no pose
        right_axis: Viewer right direction used to project hand movement
    """

    position: np.ndarray | None = None
    right_axis: np.ndarray | None = None

    def __post_init__(self):
        if self.position is not None:
            self.position = np.asarray(self.position, dtype=np.float64).reshape(3)
        if self.right_axis is not None:
            self.right_axis = np.asarray(self.right_axis, dtype=np.float64).reshape(3)


class InteractionEvents:
    """
    Hub of interaction source events owned by the host.

    The host emits, listeners subscribe explicitly:

        events = InteractionEvents()
        controller.connect(events)
        events.source_detected.emit(SourceEvent())
        controller.disconnect(events)
    """

    def __init__(self):
        self.source_detected: Event[SourceEvent] = Event()
        self.source_lost: Event[SourceEvent] = Event()
        self.source_pressed: Event[SourceEvent] = Event()
        self.source_released: Event[SourceEvent] = Event()
        self.source_updated: Event[SourceEvent] = Event()

    def clear(self) -> None:
        self.source_detected.clear()
        self.source_lost.clear()
        self.source_pressed.clear()
        self.source_released.clear()
        self.source_updated.clear()
