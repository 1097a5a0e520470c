"""RingCommandController - composition root of the ring command."""

from __future__ import annotations

from typing import Callable, Mapping

import numpy as np

from ringcommand import log
from ringcommand.clock import AnimationClock
from ringcommand.config import RingConfig
from ringcommand.core.event import Event
from ringcommand.effects import RingEffects, SoundKind
from ringcommand.frame import ReferenceFrame
from ringcommand.gesture import GestureAccumulator
from ringcommand.input import InteractionEvents, SourceEvent
from ringcommand.layout import LayoutProjector
from ringcommand.selection import SelectionState
from ringcommand.state import RingEvent, RingState, StateMachine, Transition

# Keyboard nudge is slightly above the threshold so one key press always rotates
NUDGE_FACTOR = 1.1

_COMPLETION_EVENTS = {
    RingState.FADING_IN: RingEvent.FADE_IN_COMPLETE,
    RingState.FADING_OUT: RingEvent.FADE_OUT_COMPLETE,
    RingState.ROTATING: RingEvent.ROTATION_COMPLETE,
}


class RingCommandController:
    """
    Ring of selectable icons driven by hand gestures.

    The host delivers input (activate/deactivate, hand movement, press,
    release) and calls tick(dt) once per frame. The controller answers with
    calls on its RingEffects collaborator: show/hide icons, selected
    visuals, per-tick icon placement, sounds and spawning.

    Usage:
        controller = RingCommandController(RingConfig(item_count=4), effects)
        controller.activate(ReferenceFrame(head_pos, head_forward))
        controller.tick(1.0)          # fade in complete -> ACTIVE
        controller.hand_moved(0.06)   # -> ROTATING towards icon 1
        controller.tick(0.2)          # -> ACTIVE, selected == 1

    Events:
        on_state_changed: Transition applied by the state machine
        on_selection_changed: new selected index
    """

    def __init__(
        self,
        config: RingConfig,
        effects: RingEffects | None = None,
        sounds: Mapping[SoundKind | str, object] | None = None,
    ):
        if not isinstance(config, RingConfig):
            raise TypeError(f"config must be RingConfig, got {type(config).__name__}")

        self.config = config
        self.effects = effects if effects is not None else RingEffects()
        self._sounds: dict[SoundKind, object] = {
            SoundKind(kind): clip for kind, clip in (sounds or {}).items()
        }

        self.on_state_changed: Event[Transition] = Event()
        self.on_selection_changed: Event[int] = Event()

        self._selection = SelectionState()
        self._machine = StateMachine()
        self._machine.on_transition += self._apply_transition
        self._clock = AnimationClock(config)
        self._gestures = GestureAccumulator(config.rotation_threshold, self._selection)
        self._projector = LayoutProjector(config)

        # Viewer pose used when activation comes from the source/keyboard handlers
        self.viewer: ReferenceFrame | None = None
        self._activation_frame: ReferenceFrame | None = None
        self._ring_position = np.zeros(3)
        self._ring_facing = np.array([0.0, 0.0, 1.0])
        self._right_axis = np.array([1.0, 0.0, 0.0])

        self._handlers: dict[RingEvent, Callable[[], None]] = {
            RingEvent.ACTIVATE: self._begin_fade_in,
            RingEvent.DEACTIVATE: self._begin_fade_out,
            RingEvent.RELEASE: self._begin_fade_out,
            RingEvent.FADE_IN_COMPLETE: self._finish_fade_in,
            RingEvent.FADE_OUT_COMPLETE: self._finish_fade_out,
            RingEvent.ROTATE: self._begin_rotation,
            RingEvent.ROTATION_COMPLETE: self._finish_rotation,
            RingEvent.PRESS: self._spawn_selected,
        }

        for i in range(config.item_count):
            self.effects.set_icon_visual(i, False)
            self.effects.hide_icon(i)
        self.effects.set_icon_visual(self._selection.selected, True)

    # ------------------------------------------------------------------
    # Observable state
    # ------------------------------------------------------------------

    @property
    def state(self) -> RingState:
        return self._machine.state

    @property
    def item_count(self) -> int:
        return self.config.item_count

    @property
    def selected(self) -> int:
        return self._selection.selected

    @property
    def next_selected(self) -> int:
        return self._selection.next_selected

    @property
    def direction(self) -> int:
        return self._selection.direction

    @property
    def fade_progress(self) -> float:
        return self._selection.fade_progress

    @property
    def rotate_progress(self) -> float:
        return self._selection.rotate_progress

    @property
    def accumulated_move(self) -> float:
        return self._selection.accumulated_move

    @property
    def last_hand_position(self) -> np.ndarray | None:
        return self._selection.last_hand_position

    @property
    def ring_position(self) -> np.ndarray:
        return self._ring_position.copy()

    @property
    def ring_facing(self) -> np.ndarray:
        return self._ring_facing.copy()

    @property
    def projector(self) -> LayoutProjector:
        return self._projector

    def positions(self) -> np.ndarray:
        """Current local icon positions, array (N, 3)."""
        s = self._selection
        return self._projector.local_positions(
            s.selected, s.next_selected, s.rotate_progress, s.fade_progress
        )

    # ------------------------------------------------------------------
    # Collaborator-to-core operations
    # ------------------------------------------------------------------

    def activate(self, frame: ReferenceFrame | None = None) -> bool:
        """
        Start fading in. Ignored unless INACTIVE.

        Args:
            frame: Viewer pose; when given the ring is anchored in front of it.

        Returns:
            True if the fade-in started.
        """
        self._activation_frame = frame
        try:
            return self._machine.fire(RingEvent.ACTIVATE) is not None
        finally:
            self._activation_frame = None

    def deactivate(self) -> bool:
        """Start fading out from the current fade progress."""
        return self._machine.fire(RingEvent.DEACTIVATE) is not None

    def press(self) -> bool:
        """Spawn the selected item. Only while ACTIVE."""
        return self._machine.fire(RingEvent.PRESS) is not None

    def release(self) -> bool:
        """Close the ring after a press. Only while ACTIVE."""
        return self._machine.fire(RingEvent.RELEASE) is not None

    def hand_moved(self, delta: float) -> int | None:
        """
        Feed sideways hand movement (right > 0 > left).

        Returns:
            Direction of the started rotation, or None.
        """
        if self.state != RingState.ACTIVE:
            log.debug(f"[RingCommandController] Ignored hand move in {self.state.name}")
            return None
        direction = self._gestures.accumulate(delta)
        if direction is not None:
            self._rotate(direction)
        return direction

    def select(self, index: int) -> None:
        """Select icon directly; index is normalized modulo item count."""
        if self.state == RingState.ROTATING:
            log.debug("[RingCommandController] Ignored select during rotation")
            return
        self._select(index)
        self._selection.next_selected = self._selection.selected

    def tick(self, dt: float) -> None:
        """Advance animations by dt seconds and place every icon."""
        state = self.state
        if self._clock.advance(state, self._selection, dt):
            self._machine.fire(_COMPLETION_EVENTS[state])

        s = self._selection
        radii, angles = self._projector.project_all(
            s.selected, s.next_selected, s.rotate_progress, s.fade_progress
        )
        for i in range(self.item_count):
            self.effects.place_icon(i, float(radii[i]), float(angles[i]))

    # ------------------------------------------------------------------
    # Interaction source handlers
    # ------------------------------------------------------------------

    def connect(self, events: InteractionEvents) -> None:
        """Subscribe handlers to the host's interaction events."""
        events.source_detected += self.on_source_detected
        events.source_lost += self.on_source_lost
        events.source_pressed += self.on_source_pressed
        events.source_released += self.on_source_released
        events.source_updated += self.on_source_updated

    def disconnect(self, events: InteractionEvents) -> None:
        """Unsubscribe handlers added by connect()."""
        events.source_detected -= self.on_source_detected
        events.source_lost -= self.on_source_lost
        events.source_pressed -= self.on_source_pressed
        events.source_released -= self.on_source_released
        events.source_updated -= self.on_source_updated

    def on_source_detected(self, event: SourceEvent | None = None) -> None:
        self.activate(self.viewer)

    def on_source_lost(self, event: SourceEvent | None = None) -> None:
        self.deactivate()

    def on_source_pressed(self, event: SourceEvent | None = None) -> None:
        self.press()

    def on_source_released(self, event: SourceEvent | None = None) -> None:
        self.release()

    def on_source_updated(self, event: SourceEvent) -> None:
        """Hand pose update: movement along the viewer's right axis rotates the ring."""
        if self.state != RingState.ACTIVE or event.position is None:
            return
        right = event.right_axis if event.right_axis is not None else self._right_axis
        direction = self._gestures.track(event.position, right)
        if direction is not None:
            self._rotate(direction)

    # ------------------------------------------------------------------
    # Keyboard debug controls
    # ------------------------------------------------------------------

    def toggle(self) -> None:
        """Fade out when shown or fading in, fade in when hidden."""
        if self.state in (RingState.ACTIVE, RingState.FADING_IN):
            self.deactivate()
        elif self.state == RingState.INACTIVE:
            self.activate(self.viewer)

    def nudge(self, direction: int) -> int | None:
        """Simulate a hand move just past the rotation threshold. Zero direction is ignored."""
        if direction == 0:
            return None
        sign = 1 if direction > 0 else -1
        return self.hand_moved(sign * self.config.rotation_threshold * NUDGE_FACTOR)

    # ------------------------------------------------------------------
    # Transition side effects
    # ------------------------------------------------------------------

    def _apply_transition(self, transition: Transition) -> None:
        handler = self._handlers.get(transition.event)
        if handler is not None:
            handler()
        self.on_state_changed.emit(transition)

    def _rotate(self, direction: int) -> None:
        if not self._machine.can_fire(RingEvent.ROTATE):
            return
        self._selection.direction = direction
        self._machine.fire(RingEvent.ROTATE)

    def _begin_fade_in(self) -> None:
        self._selection.reset_transient()

        frame = self._activation_frame
        if frame is not None:
            self._ring_position, self._ring_facing = frame.ring_anchor(
                self.config.placement_distance, self.config.look_distance
            )
            self._right_axis = frame.right
            self.effects.place_ring(self._ring_position.copy(), self._ring_facing.copy())

        for i in range(self.item_count):
            self.effects.show_icon(i)
        self._play(SoundKind.FADE_IN)

    def _begin_fade_out(self) -> None:
        self._play(SoundKind.FADE_OUT)

    def _finish_fade_in(self) -> None:
        self._selection.fade_progress = 0.0
        self._gestures.reset()

    def _finish_fade_out(self) -> None:
        for i in range(self.item_count):
            self.effects.hide_icon(i)
        self._selection.reset_transient()

    def _begin_rotation(self) -> None:
        s = self._selection
        n = self.item_count
        s.next_selected = (s.selected + s.direction + n) % n
        s.rotate_progress = 0.0
        self._play(SoundKind.ROTATE)

    def _finish_rotation(self) -> None:
        s = self._selection
        self._select(s.next_selected)
        s.rotate_progress = 0.0
        s.direction = 0
        # Hand movement made during the animation must not leak into the next step
        self._gestures.reset()

    def _spawn_selected(self) -> None:
        self._play(SoundKind.SELECT)
        self.effects.spawn_selected_item(self._selection.selected, self._ring_position.copy())

    def _select(self, index: int) -> None:
        n = self.item_count
        previous = self._selection.selected
        self.effects.set_icon_visual(previous, False)

        current = (index % n + n) % n
        self._selection.selected = current
        self.effects.set_icon_visual(current, True)

        if current != previous:
            log.info(f"[RingCommandController] SelectIcon {current}")
            self.on_selection_changed.emit(current)

    def _play(self, kind: SoundKind) -> None:
        clip = self._sounds.get(kind)
        if clip is None:
            return
        self.effects.play_sound(kind, clip, self._ring_position.copy())
