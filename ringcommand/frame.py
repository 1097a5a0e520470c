"""ReferenceFrame - viewer pose the ring is anchored to on activation."""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np


def _normalized(v: np.ndarray, name: str) -> np.ndarray:
    norm = float(np.linalg.norm(v))
    if norm == 0.0 or not np.isfinite(norm):
        raise ValueError(f"{name} must be a non-zero finite vector, got {v.tolist()}")
    return v / norm


@dataclass
class ReferenceFrame:
    """
    Position and orientation of the viewer (usually the head or camera).

    Attributes:
        position: Viewer position (3,)
        forward: Viewing direction (3,), normalized on construction
        up: World up direction (3,), normalized on construction
    """

    position: np.ndarray = field(default_factory=lambda: np.zeros(3))
    forward: np.ndarray = field(default_factory=lambda: np.array([0.0, 0.0, 1.0]))
    up: np.ndarray = field(default_factory=lambda: np.array([0.0, 1.0, 0.0]))

    def __post_init__(self):
        self.position = np.asarray(self.position, dtype=np.float64).reshape(3)
        self.forward = _normalized(np.asarray(self.forward, dtype=np.float64).reshape(3), "forward")
        self.up = _normalized(np.asarray(self.up, dtype=np.float64).reshape(3), "up")

    @property
    def right(self) -> np.ndarray:
        """Viewer right direction (up x forward, left-handed convention)."""
        right = np.cross(self.up, self.forward)
        norm = float(np.linalg.norm(right))
        if norm < 1e-9:
            # Looking straight up or down: any horizontal axis will do
            return np.array([1.0, 0.0, 0.0])
        return right / norm

    def point_ahead(self, distance: float) -> np.ndarray:
        return self.position + self.forward * distance

    def ring_anchor(self, placement_distance: float, look_distance: float) -> tuple[np.ndarray, np.ndarray]:
        """
        World-locked placement of the ring in front of the viewer.

        Returns:
            (position, facing) — ring center and the unit direction it faces.
        """
        position = self.point_ahead(placement_distance)
        target = self.point_ahead(look_distance)
        offset = target - position
        if float(np.linalg.norm(offset)) < 1e-9:
            return position, self.forward.copy()
        return position, _normalized(offset, "facing")
