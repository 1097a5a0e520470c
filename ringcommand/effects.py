"""RingEffects - collaborator interface the controller drives."""

from __future__ import annotations

from enum import Enum

import numpy as np


class SoundKind(Enum):
    FADE_IN = "fade_in"
    FADE_OUT = "fade_out"
    ROTATE = "rotate"
    SELECT = "select"


class RingEffects:
    """
    Base class for whatever renders, plays and spawns on behalf of the ring.

    Every method is a no-op; subclasses override only what their host
    supports. Calls are fire-and-forget: return values are not used.
    Icons are addressed by index in [0, item_count).
    """

    def show_icon(self, index: int) -> None:
        """Make icon visible."""
        pass

    def hide_icon(self, index: int) -> None:
        """Make icon invisible."""
        pass

    def set_icon_visual(self, index: int, selected: bool) -> None:
        """Apply selected or unselected appearance (material) to icon."""
        pass

    def place_icon(self, index: int, radius: float, angle: float) -> None:
        """Place icon at polar coordinates in the ring's local frame (angle in degrees)."""
        pass

    def place_ring(self, position: np.ndarray, facing: np.ndarray) -> None:
        """Move the ring itself; called on activation with a reference frame."""
        pass

    def play_sound(self, kind: SoundKind, clip, position: np.ndarray) -> None:
        """Play clip at world position. Never called with a missing clip."""
        pass

    def spawn_selected_item(self, index: int, position: np.ndarray) -> None:
        """Create a copy of the selected item at world position."""
        pass
