"""Observability – structured logging."""

from kvlog.observability.logging import (
    Level,
    LevelFilter,
    LogEvent,
    Logger,
    SerializedLogger,
    build_logger,
)

__all__ = [
    "Level",
    "LevelFilter",
    "LogEvent",
    "Logger",
    "SerializedLogger",
    "build_logger",
]
