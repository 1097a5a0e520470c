"""Часы анимации кольца: продвигают доли затухания и поворота.

Доли хранятся в SelectionState:
- fade_progress: 0 — кольцо полностью показано, 1 — полностью скрыто
- rotate_progress: 0 — начало поворота, 1 — поворот завершён

Дойдя до границы, значение прижимается к ней, поэтому большой шаг
времени даёт ровно один сигнал завершения. Повторно сигнал не приходит,
потому что по нему машина состояний уходит из анимирующего состояния.
"""

from __future__ import annotations

import math

from ringcommand import log
from ringcommand.config import RingConfig
from ringcommand.selection import SelectionState
from ringcommand.state import RingState

# Накопленная сумма долей dt не попадает точно в границу (10 * 0.1 != 1.0)
BOUND_EPSILON = 1e-9


def sanitize_dt(dt: float) -> float:
    """Отрицательный или нечисловой шаг времени считается нулевым."""
    try:
        value = float(dt)
    except (TypeError, ValueError):
        log.warn(f"[AnimationClock] Non-numeric dt {dt!r} treated as 0")
        return 0.0
    if not math.isfinite(value) or value < 0.0:
        log.warn(f"[AnimationClock] Invalid dt {value!r} treated as 0")
        return 0.0
    return value


class AnimationClock:
    """
    Продвигает анимацию кольца в зависимости от состояния.

    FADING_IN  — fade_progress уменьшается на dt / fade_duration
    FADING_OUT — fade_progress увеличивается на dt / fade_duration
    ROTATING   — rotate_progress увеличивается на dt / rotation_duration
    В остальных состояниях ничего не происходит.
    """

    def __init__(self, config: RingConfig):
        self.fade_duration = config.fade_duration
        self.rotation_duration = config.rotation_duration

    def advance(self, state: RingState, selection: SelectionState, dt: float) -> bool:
        """
        Продвинуть анимацию на dt секунд.

        Returns:
            True, если анимация текущего состояния дошла до конечной границы.
        """
        dt = sanitize_dt(dt)

        if state == RingState.FADING_IN:
            selection.fade_progress -= dt / self.fade_duration
            if selection.fade_progress <= BOUND_EPSILON:
                selection.fade_progress = 0.0
                return True
            return False

        if state == RingState.FADING_OUT:
            selection.fade_progress += dt / self.fade_duration
            if selection.fade_progress >= 1.0 - BOUND_EPSILON:
                selection.fade_progress = 1.0
                return True
            return False

        if state == RingState.ROTATING:
            selection.rotate_progress += dt / self.rotation_duration
            if selection.rotate_progress >= 1.0 - BOUND_EPSILON:
                selection.rotate_progress = 1.0
                return True
            return False

        return False
