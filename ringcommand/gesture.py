"""GestureAccumulator - turns sideways hand movement into rotation intents."""

from __future__ import annotations

import math

import numpy as np

from ringcommand import log
from ringcommand.selection import SelectionState


class GestureAccumulator:
    """
    Integrates one-dimensional hand movement.

    When the running total goes strictly above +threshold a rotation
    intent of +1 is returned, strictly below -threshold an intent of -1;
    in both cases the total restarts from zero. The total and the
    reference hand position live in the shared SelectionState.

    Usage:
        gestures = GestureAccumulator(0.05, selection)
        gestures.accumulate(0.03)   # -> None
        gestures.accumulate(0.03)   # -> +1
    """

    def __init__(self, threshold: float, selection: SelectionState):
        if not threshold > 0:
            raise ValueError(f"threshold must be > 0, got {threshold!r}")
        self.threshold = threshold
        self._selection = selection

    @property
    def total(self) -> float:
        return self._selection.accumulated_move

    @property
    def has_baseline(self) -> bool:
        return self._selection.last_hand_position is not None

    def reset(self) -> None:
        """Zero the total and forget the reference hand position."""
        self._selection.accumulated_move = 0.0
        self._selection.last_hand_position = None

    def accumulate(self, delta: float) -> int | None:
        """
        Add a sideways movement (right > 0 > left).

        Returns:
            +1 or -1 when a threshold is crossed, None otherwise.
        """
        if not math.isfinite(delta):
            log.warn(f"[GestureAccumulator] Ignored non-finite delta {delta!r}")
            return None

        selection = self._selection
        selection.accumulated_move += delta
        log.debug(f"[GestureAccumulator] MoveHand {selection.accumulated_move:.4f}")

        if selection.accumulated_move > self.threshold:
            selection.accumulated_move = 0.0
            return 1
        if selection.accumulated_move < -self.threshold:
            selection.accumulated_move = 0.0
            return -1
        return None

    def track(self, position, right_axis) -> int | None:
        """
        Feed an absolute hand position sample.

        The first sample after reset() only records the baseline. Later
        samples contribute their displacement projected onto right_axis
        (the viewer's right direction).
        """
        position = np.asarray(position, dtype=np.float64).reshape(3)
        selection = self._selection

        previous = selection.last_hand_position
        selection.last_hand_position = position.copy()
        if previous is None:
            return None

        move = position - previous
        right = float(np.dot(move, np.asarray(right_axis, dtype=np.float64).reshape(3)))
        return self.accumulate(right)
