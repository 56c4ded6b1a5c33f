"""Observability – levelled, serialized structured logging."""
from kvlog.observability.logging.context import ContextLogger, Valuer, caller, timestamp, timestamp_utc
from kvlog.observability.logging.factory import LoggerFactory, build_logger, configure_structlog
from kvlog.observability.logging.filters import (
    FilterConfig,
    LevelFilter,
    MissingLevelPolicy,
    allow_all,
    allow_debug_and_above,
    allow_error_only,
    allow_info_and_above,
    allow_none,
    allow_warn_and_above,
)
from kvlog.observability.logging.levels import LEVEL_KEY, Level, Ordering, compare, rank
from kvlog.observability.logging.protocol import LogEvent, Logger
from kvlog.observability.logging.serialized import SerializedLogger
from kvlog.observability.logging.sinks import LoggerFunc, NopLogger, StdlibSink, StructlogSink
from kvlog.observability.logging.tagger import LevelTagger, debug, error, info, tag, warn

__all__ = [
    "LEVEL_KEY",
    "ContextLogger",
    "FilterConfig",
    "Level",
    "LevelFilter",
    "LevelTagger",
    "LogEvent",
    "Logger",
    "LoggerFactory",
    "LoggerFunc",
    "MissingLevelPolicy",
    "NopLogger",
    "Ordering",
    "SerializedLogger",
    "StdlibSink",
    "StructlogSink",
    "Valuer",
    "allow_all",
    "allow_debug_and_above",
    "allow_error_only",
    "allow_info_and_above",
    "allow_none",
    "allow_warn_and_above",
    "build_logger",
    "caller",
    "compare",
    "configure_structlog",
    "debug",
    "error",
    "info",
    "rank",
    "tag",
    "timestamp",
    "timestamp_utc",
    "warn",
]
