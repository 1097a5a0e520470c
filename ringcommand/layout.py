"""Раскладка иконок по окружности кольца.

Угол отсчитывается в градусах от оси X против часовой стрелки; выбранная
иконка всегда стоит на -90° (нижняя точка локальной системы кольца),
остальные идут с шагом 360/N. Во время затухания иконки отлетают наружу
и проворачиваются:

    blend  = (i - lerp(selected, next_selected, rotate_progress) + N) mod N
    angle  = -90 + blend * 360 / N + fade_progress * fade_angle_delta / fade_duration
    radius = normal_radius + fade_progress * fade_radius_delta / fade_duration

Все функции чистые: одинаковые аргументы дают одинаковый результат.
"""

from __future__ import annotations

import math

import numpy as np

from ringcommand.config import RingConfig

BASE_ANGLE = -90.0


class LayoutProjector:
    """
    Вычисляет полярные координаты (radius, angle) иконок.

    Хранит только неизменяемый RingConfig, поэтому не имеет состояния.
    """

    def __init__(self, config: RingConfig):
        self.config = config

    @property
    def count(self) -> int:
        return self.config.item_count

    def blend_index(self, i: int, selected: int, next_selected: int, rotate_progress: float) -> float:
        """Дробная позиция иконки i относительно выбранной (0 — выбранная)."""
        n = self.count
        current = (1.0 - rotate_progress) * selected + rotate_progress * next_selected
        return (i - current + n) % n

    def radius(self, fade_progress: float) -> float:
        cfg = self.config
        return cfg.normal_radius + fade_progress * cfg.fade_radius_delta / cfg.fade_duration

    def position_of(
        self,
        i: int,
        selected: int,
        next_selected: int,
        rotate_progress: float,
        fade_progress: float,
    ) -> tuple[float, float]:
        """
        Полярная позиция иконки i.

        Returns:
            (radius, angle) — радиус и угол в градусах.
        """
        cfg = self.config
        blend = self.blend_index(i, selected, next_selected, rotate_progress)
        angle = (
            BASE_ANGLE
            + blend * cfg.step_angle
            + fade_progress * cfg.fade_angle_delta / cfg.fade_duration
        )
        return self.radius(fade_progress), angle

    def project_all(
        self,
        selected: int,
        next_selected: int,
        rotate_progress: float,
        fade_progress: float,
    ) -> tuple[np.ndarray, np.ndarray]:
        """
        Позиции всех иконок сразу.

        Returns:
            (radii, angles) — массивы длины N, совпадающие с position_of.
        """
        cfg = self.config
        n = cfg.item_count
        current = (1.0 - rotate_progress) * selected + rotate_progress * next_selected
        blend = np.mod(np.arange(n, dtype=np.float64) - current + n, n)
        angles = (
            BASE_ANGLE
            + blend * cfg.step_angle
            + fade_progress * cfg.fade_angle_delta / cfg.fade_duration
        )
        radii = np.full(n, self.radius(fade_progress), dtype=np.float64)
        return radii, angles

    def local_positions(
        self,
        selected: int,
        next_selected: int,
        rotate_progress: float,
        fade_progress: float,
    ) -> np.ndarray:
        """Декартовы позиции всех иконок в системе кольца, массив (N, 3)."""
        radii, angles = self.project_all(selected, next_selected, rotate_progress, fade_progress)
        rad = np.radians(angles)
        return np.stack(
            [radii * np.cos(rad), radii * np.sin(rad), np.zeros_like(radii)],
            axis=1,
        )


def local_position(radius: float, angle: float) -> np.ndarray:
    """Декартова позиция (x, y, 0) для радиуса и угла в градусах."""
    rad = angle * math.pi / 180.0
    return np.array([radius * math.cos(rad), radius * math.sin(rad), 0.0], dtype=np.float64)
