"""Logging errors — raised by the logger chain itself, never by a sink.

Sink failures are not wrapped: whatever the terminal logger raises reaches
the caller unchanged. Only the errors below originate inside kvlog.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from kvlog.kernel.errors.base import BaseError

if TYPE_CHECKING:
    from kvlog.observability.logging.protocol import LogEvent


class LoggingError(BaseError):
    """Base class for errors produced by the logger chain."""

    default_code = "logging_error"


class InvalidLogEventError(LoggingError, ValueError):
    """A log event could not be built from the supplied key/value input."""

    default_code = "invalid_log_event"


class InvalidLevelError(LoggingError, ValueError):
    """A level name does not match any known :class:`Level`."""

    default_code = "invalid_level"

    def __init__(self, value: object, **kwargs: Any) -> None:
        super().__init__(f"Unknown log level {value!r}", detail={"value": repr(value)}, **kwargs)
        self.value = value


class MissingLevelError(LoggingError):
    """An event without a level annotation reached a filter that forbids it."""

    default_code = "missing_level"

    def __init__(self, event: LogEvent, message: str | None = None, **kwargs: Any) -> None:
        super().__init__(message or "Log event carries no level annotation", **kwargs)
        self.event = event


class LevelNotAllowedError(LoggingError):
    """An event's level is below the filter threshold and rejection was requested."""

    default_code = "level_not_allowed"

    def __init__(self, event: LogEvent, level: object, **kwargs: Any) -> None:
        super().__init__(
            f"Log level {str(level)!r} is not allowed",
            detail={"level": str(level)},
            **kwargs,
        )
        self.event = event
        self.level = level


__all__ = [
    "InvalidLevelError",
    "InvalidLogEventError",
    "LevelNotAllowedError",
    "LoggingError",
    "MissingLevelError",
]
