"""Observability – terminal loggers.

These adapt the :class:`~kvlog.observability.logging.protocol.Logger`
capability to real output: structlog, the stdlib :mod:`logging` module, a
plain callable, or nothing at all. None of them lock; wrap a shared sink in
:class:`~kvlog.observability.logging.serialized.SerializedLogger`.
"""
from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

import structlog

from kvlog.observability.logging.levels import LEVEL_KEY, Level, stdlib_level
from kvlog.observability.logging.protocol import LogEvent

MESSAGE_KEY = "msg"

# positional parameter names of structlog logging methods
_RESERVED_ARGS = ("self",)

_STRUCTLOG_METHODS: dict[Level, str] = {
    Level.DEBUG: "debug",
    Level.INFO: "info",
    Level.WARN: "warning",
    Level.ERROR: "error",
}


class NopLogger:
    """Accepts and discards every event."""

    def log(self, event: LogEvent) -> None:  # noqa: ARG002
        return None


class LoggerFunc:
    """Adapt a plain ``fn(event)`` callable to the Logger protocol."""

    __slots__ = ("_fn",)

    def __init__(self, fn: Callable[[LogEvent], Any]) -> None:
        self._fn = fn

    def log(self, event: LogEvent) -> None:
        self._fn(event)


class StructlogSink:
    """Forward events to a structlog logger.

    The level annotation picks the method (``info`` when there is none or it
    is not a :class:`Level`), the ``msg`` pair becomes structlog's event
    string and every other pair becomes a keyword argument, later duplicates
    winning.

    Usage::

        import structlog
        from kvlog.observability.logging import SerializedLogger, StructlogSink

        sink = SerializedLogger(StructlogSink(structlog.get_logger("billing")))
    """

    def __init__(self, logger: Any | None = None) -> None:
        self._logger = logger if logger is not None else structlog.get_logger()

    def log(self, event: LogEvent) -> None:
        fields = event.to_dict()
        level = fields.pop(LEVEL_KEY, None)
        method_name = _STRUCTLOG_METHODS[level] if isinstance(level, Level) else "info"
        message = fields.pop(MESSAGE_KEY, None)
        if "event" in fields:
            if message is None:
                message = fields.pop("event")
            else:
                fields["event_field"] = fields.pop("event")
        for name in _RESERVED_ARGS:
            if name in fields:
                fields[f"{name}_field"] = fields.pop(name)
        getattr(self._logger, method_name)(message, **fields)


def render_pairs(event: LogEvent) -> str:
    """``key=value`` rendering used for stdlib log messages."""
    return " ".join(f"{key}={value!s}" for key, value in event)


class StdlibSink:
    """Forward events to a :class:`logging.Logger`.

    The record's level comes from the level annotation (``INFO`` when absent),
    its message is the ``key=value`` rendering of the event and the pairs are
    attached as ``record.kv`` (a dict, later duplicates winning).
    """

    def __init__(self, logger: logging.Logger | str | None = None) -> None:
        if logger is None or isinstance(logger, str):
            logger = logging.getLogger(logger)
        self._logger = logger

    @property
    def logger(self) -> logging.Logger:
        return self._logger

    def log(self, event: LogEvent) -> None:
        level = event.last(LEVEL_KEY)
        levelno = stdlib_level(level) if isinstance(level, Level) else logging.INFO
        self._logger.log(levelno, render_pairs(event), extra={"kv": event.to_dict()})


__all__ = ["MESSAGE_KEY", "LoggerFunc", "NopLogger", "StdlibSink", "StructlogSink", "render_pairs"]
