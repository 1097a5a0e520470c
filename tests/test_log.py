"""Tests for the logging facade and what the ring logs."""

import pytest

from ringcommand import log, RingCommandController, RingConfig


@pytest.fixture
def captured():
    messages = []
    log.set_level(log.Level.DEBUG)
    log.set_callback(lambda level, msg: messages.append((level, msg)))
    yield messages
    log.set_callback(None)
    log.set_level(log.Level.WARN)


def test_levels(captured):
    log.debug("d")
    log.info("i")
    log.warn("w")
    log.warning("w2")
    log.error("e")
    assert captured == [
        (log.Level.DEBUG, "d"),
        (log.Level.INFO, "i"),
        (log.Level.WARN, "w"),
        (log.Level.WARN, "w2"),
        (log.Level.ERROR, "e"),
    ]


def test_exception_with_context(captured):
    try:
        raise RuntimeError("boom")
    except RuntimeError as e:
        log.error(e, "Failed to play sound")

    level, msg = captured[0]
    assert level == log.Level.ERROR
    assert msg.startswith("Failed to play sound: RuntimeError: boom")
    assert "Traceback" in msg


def test_level_filter(captured):
    log.set_level(log.Level.ERROR)
    log.info("hidden")
    log.error("shown")
    assert [m for _, m in captured] == ["shown"]


def test_callback_removed():
    messages = []
    log.set_callback(lambda level, msg: messages.append(msg))
    log.set_callback(None)
    log.error("nobody listens")
    assert messages == []


def test_ring_logs_selection_and_bad_dt(captured):
    controller = RingCommandController(RingConfig(item_count=3))
    controller.activate()
    controller.tick(-1.0)
    controller.tick(1.0)
    controller.hand_moved(0.06)
    controller.tick(0.2)

    texts = [m for _, m in captured]
    assert any("[AnimationClock] Invalid dt" in m for m in texts)
    assert "[RingCommandController] SelectIcon 1" in texts
    assert any("[StateMachine] INACTIVE -> FADING_IN" in m for m in texts)
