"""RingConfig - immutable parameters of a ring command."""

from __future__ import annotations

import json
import math
from dataclasses import dataclass, fields, asdict
from pathlib import Path


class RingConfigError(ValueError):
    """Raised when a ring configuration cannot produce a valid layout."""


@dataclass(frozen=True)
class RingConfig:
    """
    Parameters of the ring, fixed for the controller's lifetime.

    Attributes:
        item_count: Number of icons on the ring (>= 1)
        normal_radius: Ring radius when fully shown
        fade_radius_delta: Extra radius per second of fade (added while hidden)
        fade_angle_delta: Extra angle in degrees per second of fade
        fade_duration: Seconds for a full fade in or fade out
        rotation_duration: Seconds for one rotation step
        rotation_threshold: Accumulated sideways hand movement that starts a rotation
        placement_distance: Distance in front of the viewer where the ring is anchored
        look_distance: Distance in front of the viewer of the point the ring faces
    """

    item_count: int
    normal_radius: float = 0.3
    fade_radius_delta: float = 2.0
    fade_angle_delta: float = 180.0
    fade_duration: float = 1.0
    rotation_duration: float = 0.2
    rotation_threshold: float = 0.05
    placement_distance: float = 1.5
    look_distance: float = 2.0

    def __post_init__(self):
        if isinstance(self.item_count, bool) or not isinstance(self.item_count, int):
            raise RingConfigError(f"item_count must be an integer, got {self.item_count!r}")
        if self.item_count < 1:
            raise RingConfigError(f"item_count must be >= 1, got {self.item_count}")

        for name in (
            "normal_radius",
            "fade_duration",
            "rotation_duration",
            "rotation_threshold",
        ):
            value = getattr(self, name)
            if not _is_finite_number(value) or value <= 0:
                raise RingConfigError(f"{name} must be a positive number, got {value!r}")

        for name in ("fade_radius_delta", "fade_angle_delta", "placement_distance", "look_distance"):
            value = getattr(self, name)
            if not _is_finite_number(value):
                raise RingConfigError(f"{name} must be a finite number, got {value!r}")

    @property
    def step_angle(self) -> float:
        """Angle between neighbouring icons in degrees."""
        return 360.0 / self.item_count

    def serialize(self) -> dict:
        """Serialize config to dict for JSON storage."""
        return asdict(self)

    @classmethod
    def deserialize(cls, data: dict) -> "RingConfig":
        """
        Build config from dict.

        Missing keys take their defaults, except item_count which is required.
        Unknown keys are rejected so that typos do not pass silently.
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise RingConfigError(f"Unknown ring config keys: {', '.join(unknown)}")
        if "item_count" not in data:
            raise RingConfigError("Ring config requires 'item_count'")
        return cls(**data)

    @classmethod
    def from_file(cls, path: str | Path) -> "RingConfig":
        """Load config from a JSON file."""
        path = Path(path)
        try:
            with open(path, "r", encoding="utf8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise RingConfigError(f"Cannot read ring config '{path}': {e}") from e

        if not isinstance(data, dict):
            raise RingConfigError(f"Ring config '{path}' must contain a JSON object")
        return cls.deserialize(data)


def _is_finite_number(value) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value)
