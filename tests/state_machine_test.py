"""Tests for StateMachine transition table."""

import pytest

from ringcommand.state import RingEvent, RingState, StateMachine, Transition, TRANSITIONS


def machine_in(state: RingState) -> StateMachine:
    return StateMachine(initial=state)


class TestStateMachine:
    def test_initial_state(self):
        assert StateMachine().state == RingState.INACTIVE

    def test_activate(self):
        machine = StateMachine()
        transition = machine.fire(RingEvent.ACTIVATE)
        assert transition == Transition(RingState.INACTIVE, RingEvent.ACTIVATE, RingState.FADING_IN)
        assert machine.state == RingState.FADING_IN

    def test_activate_twice_is_ignored(self):
        machine = StateMachine()
        machine.fire(RingEvent.ACTIVATE)
        assert machine.fire(RingEvent.ACTIVATE) is None
        assert machine.state == RingState.FADING_IN

    @pytest.mark.parametrize("state", [RingState.ACTIVE, RingState.FADING_IN, RingState.ROTATING])
    def test_deactivate_fades_out(self, state):
        machine = machine_in(state)
        machine.fire(RingEvent.DEACTIVATE)
        assert machine.state == RingState.FADING_OUT

    @pytest.mark.parametrize("state", [RingState.INACTIVE, RingState.FADING_OUT])
    def test_deactivate_is_idempotent(self, state):
        machine = machine_in(state)
        assert machine.fire(RingEvent.DEACTIVATE) is None
        assert machine.state == state

    def test_full_cycle(self):
        machine = StateMachine()
        events = [
            (RingEvent.ACTIVATE, RingState.FADING_IN),
            (RingEvent.FADE_IN_COMPLETE, RingState.ACTIVE),
            (RingEvent.ROTATE, RingState.ROTATING),
            (RingEvent.ROTATION_COMPLETE, RingState.ACTIVE),
            (RingEvent.PRESS, RingState.ACTIVE),
            (RingEvent.RELEASE, RingState.FADING_OUT),
            (RingEvent.FADE_OUT_COMPLETE, RingState.INACTIVE),
        ]
        for event, expected in events:
            assert machine.fire(event) is not None
            assert machine.state == expected

    def test_press_is_self_transition(self):
        machine = machine_in(RingState.ACTIVE)
        transition = machine.fire(RingEvent.PRESS)
        assert transition.is_self

    @pytest.mark.parametrize("state", [RingState.INACTIVE, RingState.FADING_IN, RingState.FADING_OUT, RingState.ROTATING])
    def test_press_and_release_ignored_outside_active(self, state):
        machine = machine_in(state)
        assert machine.fire(RingEvent.PRESS) is None
        assert machine.fire(RingEvent.RELEASE) is None
        assert machine.state == state

    def test_rotate_only_from_active(self):
        for state in RingState:
            machine = machine_in(state)
            assert machine.can_fire(RingEvent.ROTATE) == (state == RingState.ACTIVE)

    def test_fading_in_never_skips_to_inactive(self):
        targets = {target for (source, _), target in TRANSITIONS.items() if source == RingState.FADING_IN}
        assert targets == {RingState.ACTIVE, RingState.FADING_OUT}

    def test_on_transition_event(self):
        machine = StateMachine()
        seen = []
        machine.on_transition += seen.append

        machine.fire(RingEvent.ACTIVATE)
        machine.fire(RingEvent.ACTIVATE)
        machine.fire(RingEvent.DEACTIVATE)

        assert [t.target for t in seen] == [RingState.FADING_IN, RingState.FADING_OUT]

    def test_state_is_updated_before_handlers_run(self):
        machine = StateMachine()
        states = []
        machine.on_transition += lambda t: states.append(machine.state)
        machine.fire(RingEvent.ACTIVATE)
        assert states == [RingState.FADING_IN]

    def test_inactive_only_after_fade_out(self):
        entries = [key for key, target in TRANSITIONS.items() if target == RingState.INACTIVE]
        assert entries == [(RingState.FADING_OUT, RingEvent.FADE_OUT_COMPLETE)]
