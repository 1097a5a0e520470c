"""
ringcommand - ring of selectable icons driven by hand gestures.

Основные модули:
- state - состояния кольца и таблица переходов
- clock - продвижение анимаций затухания и поворота
- gesture - накопление движения руки
- layout - раскладка иконок по окружности
- controller - RingCommandController, связывающий всё вместе
"""

from ringcommand.config import RingConfig, RingConfigError
from ringcommand.state import RingState, RingEvent, Transition, StateMachine
from ringcommand.selection import SelectionState
from ringcommand.clock import AnimationClock
from ringcommand.gesture import GestureAccumulator
from ringcommand.layout import LayoutProjector, local_position
from ringcommand.effects import RingEffects, SoundKind
from ringcommand.frame import ReferenceFrame
from ringcommand.input import InteractionEvents, SourceEvent
from ringcommand.controller import RingCommandController

__version__ = '0.1.0'

__all__ = [
    "RingConfig",
    "RingConfigError",
    "RingState",
    "RingEvent",
    "Transition",
    "StateMachine",
    "SelectionState",
    "AnimationClock",
    "GestureAccumulator",
    "LayoutProjector",
    "local_position",
    "RingEffects",
    "SoundKind",
    "ReferenceFrame",
    "InteractionEvents",
    "SourceEvent",
    "RingCommandController",
]
