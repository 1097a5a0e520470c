"""SelectionState - per-activation values of the ring."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np


@dataclass
class SelectionState:
    """
    Mutable selection and animation values shared by the ring components.

    Attributes:
        selected: Index of the selected icon
        next_selected: Index selected once the current rotation completes
        direction: +1 / -1 while rotating, 0 otherwise
        fade_progress: 0 - fully shown, 1 - fully hidden
        rotate_progress: 0 - rotation start, 1 - rotation complete
        accumulated_move: Signed sideways hand movement since the last rotation
        last_hand_position: Reference hand position, None until the first sample
    """

    selected: int = 0
    next_selected: int = 0
    direction: int = 0
    fade_progress: float = 1.0
    rotate_progress: float = 0.0
    accumulated_move: float = 0.0
    last_hand_position: np.ndarray | None = None

    def reset_transient(self) -> None:
        """Reset everything except the selected index (ring fully hidden)."""
        self.next_selected = self.selected
        self.direction = 0
        self.fade_progress = 1.0
        self.rotate_progress = 0.0
        self.accumulated_move = 0.0
        self.last_hand_position = None
