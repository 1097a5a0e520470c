"""
ringcommand.log - Logging facade with proper Python exception handling.

Usage:
    from ringcommand import log

    log.info("[RingCommandController] SelectIcon 2")
    log.warn("Tick with negative dt")

    try:
        effects.play_sound(kind, clip, position)
    except Exception as e:
        log.error(e, "Failed to play sound")  # includes traceback
"""

from __future__ import annotations

import enum
import logging
import traceback
from typing import Callable

_logger = logging.getLogger("ringcommand")
_logger.addHandler(logging.NullHandler())


class Level(enum.IntEnum):
    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARN = logging.WARNING
    ERROR = logging.ERROR


def debug(msg_or_exc, context: str = ""):
    """Log debug message or exception with context."""
    _dispatch(logging.DEBUG, msg_or_exc, context)


def info(msg_or_exc, context: str = ""):
    """Log info message or exception with context."""
    _dispatch(logging.INFO, msg_or_exc, context)


def warn(msg_or_exc, context: str = ""):
    """Log warning message or exception with context."""
    _dispatch(logging.WARNING, msg_or_exc, context)


def warning(msg_or_exc, context: str = ""):
    """Alias for warn()."""
    warn(msg_or_exc, context)


def error(msg_or_exc, context: str = ""):
    """Log error message or exception with context."""
    _dispatch(logging.ERROR, msg_or_exc, context)


def exception(msg: str = ""):
    """Log error with current exception traceback."""
    _logger.exception(msg)


def set_level(level: Level | int) -> None:
    """Set minimal level of messages passed to handlers."""
    _logger.setLevel(int(level))


class _CallbackHandler(logging.Handler):
    def __init__(self, callback: Callable[[Level, str], None]):
        super().__init__()
        self.callback = callback

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level = Level(record.levelno)
        except ValueError:
            # CRITICAL and custom levels
            level = Level.ERROR if record.levelno > logging.ERROR else Level.INFO
        self.callback(level, record.getMessage())


_callback_handler: _CallbackHandler | None = None


def set_callback(callback: Callable[[Level, str], None] | None) -> None:
    """
    Route every message to callback(level, message).

    Passing None removes the previously installed callback.
    """
    global _callback_handler
    if _callback_handler is not None:
        _logger.removeHandler(_callback_handler)
        _callback_handler = None
    if callback is not None:
        _callback_handler = _CallbackHandler(callback)
        _logger.addHandler(_callback_handler)


def _dispatch(levelno: int, msg_or_exc, context: str) -> None:
    if isinstance(msg_or_exc, BaseException):
        _log_exception(levelno, msg_or_exc, context)
    else:
        _logger.log(levelno, str(msg_or_exc))


def _log_exception(levelno: int, exc: BaseException, context: str):
    """Format and log exception with traceback."""
    exc_type = type(exc).__name__
    exc_msg = str(exc)

    tb = "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))

    if context:
        full_msg = f"{context}: {exc_type}: {exc_msg}\n{tb}"
    else:
        full_msg = f"{exc_type}: {exc_msg}\n{tb}"

    _logger.log(levelno, full_msg)
