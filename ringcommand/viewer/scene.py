"""ViewerScene - RingEffects implementation that keeps what the viewer draws."""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np

from ringcommand import log
from ringcommand.effects import RingEffects, SoundKind
from ringcommand.layout import local_position

ICON_COLOR = (0.5, 0.8, 1.0)
ICON_COLOR_SELECTED = (0.0, 1.0, 1.0)


@dataclass
class IconView:
    visible: bool = False
    selected: bool = False
    radius: float = 0.0
    angle: float = 0.0

    @property
    def local_position(self) -> np.ndarray:
        return local_position(self.radius, self.angle)


@dataclass
class SpawnedItem:
    """Copy of a ring item dropped at the ring position."""

    index: int
    position: np.ndarray
    velocity: np.ndarray = field(default_factory=lambda: np.zeros(3))


@dataclass
class Quad:
    x: float
    y: float
    half_size: float
    color: tuple[float, float, float]
    alpha: float


class ViewerScene(RingEffects):
    """
    Collects ring effects for drawing.

    Spawned items fall under gravity and are removed once they drop below
    floor_y; the actual physics of the host is out of scope.
    """

    def __init__(self, item_count: int, icon_size: float = 0.06, gravity: float = -9.81, floor_y: float = -3.0):
        self.icons = [IconView() for _ in range(item_count)]
        self.icon_size = icon_size
        self.gravity = gravity
        self.floor_y = floor_y
        self.ring_position = np.zeros(3)
        self.ring_facing = np.array([0.0, 0.0, 1.0])
        self.spawned: list[SpawnedItem] = []
        self.sounds: list[SoundKind] = []

    # --- RingEffects ---

    def show_icon(self, index: int) -> None:
        self.icons[index].visible = True

    def hide_icon(self, index: int) -> None:
        self.icons[index].visible = False

    def set_icon_visual(self, index: int, selected: bool) -> None:
        self.icons[index].selected = selected

    def place_icon(self, index: int, radius: float, angle: float) -> None:
        icon = self.icons[index]
        icon.radius = radius
        icon.angle = angle

    def place_ring(self, position: np.ndarray, facing: np.ndarray) -> None:
        self.ring_position = np.asarray(position, dtype=np.float64)
        self.ring_facing = np.asarray(facing, dtype=np.float64)

    def play_sound(self, kind: SoundKind, clip, position: np.ndarray) -> None:
        log.info(f"[ViewerScene] Sound {kind.value}: {clip}")
        self.sounds.append(kind)

    def spawn_selected_item(self, index: int, position: np.ndarray) -> None:
        self.spawned.append(SpawnedItem(index, np.asarray(position, dtype=np.float64).copy()))

    # --- Drawing ---

    def step(self, dt: float) -> None:
        """Integrate spawned items and drop those below the floor."""
        alive = []
        for item in self.spawned:
            item.velocity[1] += self.gravity * dt
            item.position = item.position + item.velocity * dt
            if item.position[1] >= self.floor_y:
                alive.append(item)
        self.spawned = alive

    def quads(self, normal_radius: float) -> list[Quad]:
        """
        Screen quads of visible icons in ring-local units.

        Icons far outside the ring while fading are drawn transparent.
        """
        result = []
        for icon in self.icons:
            if not icon.visible:
                continue
            x, y, _ = icon.local_position
            spread = max(icon.radius - normal_radius, 0.0)
            alpha = 1.0 / (1.0 + 4.0 * spread)
            color = ICON_COLOR_SELECTED if icon.selected else ICON_COLOR
            size = self.icon_size * (1.3 if icon.selected else 1.0)
            result.append(Quad(float(x), float(y), size, color, alpha))

        for item in self.spawned:
            offset = item.position - self.ring_position
            result.append(Quad(float(offset[0]), float(offset[1]), self.icon_size, ICON_COLOR_SELECTED, 1.0))
        return result
