"""Тесты часов анимации: затухание, поворот, защита от некорректного dt."""

import math

import pytest

from ringcommand.clock import AnimationClock, sanitize_dt
from ringcommand.config import RingConfig
from ringcommand.selection import SelectionState
from ringcommand.state import RingState


@pytest.fixture
def clock():
    return AnimationClock(RingConfig(item_count=4, fade_duration=1.0, rotation_duration=0.2))


def test_fade_in_completes(clock):
    """Полное появление за fade_duration, значение прижато к нулю."""
    s = SelectionState(fade_progress=1.0)

    assert not clock.advance(RingState.FADING_IN, s, 0.5)
    assert s.fade_progress == pytest.approx(0.5)
    assert clock.advance(RingState.FADING_IN, s, 0.6)
    assert s.fade_progress == 0.0


def test_fade_in_exact_duration(clock):
    s = SelectionState(fade_progress=1.0)
    assert clock.advance(RingState.FADING_IN, s, 1.0)
    assert s.fade_progress == 0.0


def test_fade_in_big_step_clamps(clock):
    """Несколько пересечений в одном тике — один сигнал, значение прижато."""
    s = SelectionState(fade_progress=1.0)
    assert clock.advance(RingState.FADING_IN, s, 10.0)
    assert s.fade_progress == 0.0


def test_fade_out_from_partial(clock):
    s = SelectionState(fade_progress=0.5)
    assert not clock.advance(RingState.FADING_OUT, s, 0.25)
    assert s.fade_progress == pytest.approx(0.75)
    assert clock.advance(RingState.FADING_OUT, s, 0.5)
    assert s.fade_progress == 1.0


def test_rotation(clock):
    s = SelectionState(rotate_progress=0.0)
    assert not clock.advance(RingState.ROTATING, s, 0.1)
    assert s.rotate_progress == pytest.approx(0.5)
    assert clock.advance(RingState.ROTATING, s, 0.1)
    assert s.rotate_progress == 1.0


def test_fade_out_right_after_activation(clock):
    """Скрытие сразу после начала появления завершается без зависания."""
    s = SelectionState(fade_progress=1.0)
    assert clock.advance(RingState.FADING_OUT, s, 0.016)
    assert s.fade_progress == 1.0


def test_rotation_does_not_touch_fade(clock):
    s = SelectionState(fade_progress=0.0, rotate_progress=0.0)
    clock.advance(RingState.ROTATING, s, 0.05)
    assert s.fade_progress == 0.0


@pytest.mark.parametrize("state", [RingState.INACTIVE, RingState.ACTIVE])
def test_idle_states(clock, state):
    s = SelectionState(fade_progress=0.3, rotate_progress=0.2)
    assert not clock.advance(state, s, 5.0)
    assert s.fade_progress == 0.3
    assert s.rotate_progress == 0.2


@pytest.mark.parametrize("dt", [-0.5, math.nan, math.inf, -math.inf, "abc", None])
def test_invalid_dt_is_zero(clock, dt):
    s = SelectionState(fade_progress=1.0)
    assert not clock.advance(RingState.FADING_IN, s, dt)
    assert s.fade_progress == 1.0


def test_sanitize_dt():
    assert sanitize_dt(0.016) == 0.016
    assert sanitize_dt(0) == 0.0
    assert sanitize_dt(-1) == 0.0
    assert sanitize_dt(math.nan) == 0.0


@pytest.mark.parametrize("dt,steps", [(0.1, 10), (1.0 / 60.0, 60), (1.0 / 30.0, 30)])
def test_fade_completes_with_inexact_steps(clock, dt, steps):
    """Сумма шагов, равная fade_duration, завершает затухание ровно на последнем шаге."""
    s = SelectionState(fade_progress=1.0)
    signals = [clock.advance(RingState.FADING_IN, s, dt) for _ in range(steps)]
    assert signals == [False] * (steps - 1) + [True]
    assert s.fade_progress == 0.0

    signals = [clock.advance(RingState.FADING_OUT, s, dt) for _ in range(steps)]
    assert signals == [False] * (steps - 1) + [True]
    assert s.fade_progress == 1.0


def test_rotation_completes_with_inexact_steps(clock):
    s = SelectionState(rotate_progress=0.0)
    signals = [clock.advance(RingState.ROTATING, s, 0.02) for _ in range(10)]
    assert signals == [False] * 9 + [True]
    assert s.rotate_progress == 1.0
