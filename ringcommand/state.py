"""Ring command states and the transition table that drives them."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

from ringcommand import log
from ringcommand.core.event import Event


class RingState(Enum):
    """Animation state of the ring. Exactly one is current."""

    INACTIVE = auto()
    ACTIVE = auto()
    FADING_IN = auto()
    FADING_OUT = auto()
    ROTATING = auto()


class RingEvent(Enum):
    """Inputs of the state machine."""

    ACTIVATE = auto()
    DEACTIVATE = auto()
    FADE_IN_COMPLETE = auto()
    FADE_OUT_COMPLETE = auto()
    ROTATE = auto()
    ROTATION_COMPLETE = auto()
    PRESS = auto()
    RELEASE = auto()


@dataclass(frozen=True)
class Transition:
    """One applied edge of the transition table."""

    source: RingState
    event: RingEvent
    target: RingState

    @property
    def is_self(self) -> bool:
        return self.source == self.target


TRANSITIONS: dict[tuple[RingState, RingEvent], RingState] = {
    (RingState.INACTIVE, RingEvent.ACTIVATE): RingState.FADING_IN,
    (RingState.ACTIVE, RingEvent.DEACTIVATE): RingState.FADING_OUT,
    (RingState.FADING_IN, RingEvent.DEACTIVATE): RingState.FADING_OUT,
    (RingState.ROTATING, RingEvent.DEACTIVATE): RingState.FADING_OUT,
    (RingState.FADING_IN, RingEvent.FADE_IN_COMPLETE): RingState.ACTIVE,
    (RingState.FADING_OUT, RingEvent.FADE_OUT_COMPLETE): RingState.INACTIVE,
    (RingState.ACTIVE, RingEvent.ROTATE): RingState.ROTATING,
    (RingState.ROTATING, RingEvent.ROTATION_COMPLETE): RingState.ACTIVE,
    (RingState.ACTIVE, RingEvent.PRESS): RingState.ACTIVE,
    (RingState.ACTIVE, RingEvent.RELEASE): RingState.FADING_OUT,
}


class StateMachine:
    """
    Holds the current RingState and applies TRANSITIONS.

    Events without an entry for the current state are ignored: hand
    tracking can legitimately race with animation completion, so a late
    press or a repeated activate is not an error.

    Usage:
        machine = StateMachine()
        machine.on_transition += handle_transition
        machine.fire(RingEvent.ACTIVATE)   # -> Transition(INACTIVE, ACTIVATE, FADING_IN)
        machine.fire(RingEvent.ACTIVATE)   # -> None
    """

    def __init__(self, initial: RingState = RingState.INACTIVE):
        self._state = initial
        self.on_transition: Event[Transition] = Event()

    @property
    def state(self) -> RingState:
        return self._state

    def can_fire(self, event: RingEvent) -> bool:
        return (self._state, event) in TRANSITIONS

    def fire(self, event: RingEvent) -> Transition | None:
        """
        Apply event to the current state.

        Returns:
            The applied Transition, or None if the event is ignored.
        """
        target = TRANSITIONS.get((self._state, event))
        if target is None:
            log.debug(f"[StateMachine] Ignored {event.name} in {self._state.name}")
            return None

        transition = Transition(self._state, event, target)
        self._state = target
        if not transition.is_self:
            log.debug(f"[StateMachine] {transition.source.name} -> {target.name} ({event.name})")
        self.on_transition.emit(transition)
        return transition
