"""Observability – LevelTagger and the per-level helpers.

At the call site, pick a level and log as usual::

    info(logger).log(LogEvent.of("msg", "listening", "addr", addr))
    error(logger).kv("msg", "request failed", "err", exc)
"""
from __future__ import annotations

from typing import Any

from kvlog.observability.logging.levels import LEVEL_KEY, Level
from kvlog.observability.logging.protocol import LogEvent, Logger


class LevelTagger:
    """Appends ``(LEVEL_KEY, level)`` to every event, then forwards it.

    Any level pairs already in the event are removed first, so the result
    carries exactly one annotation and it is the last pair.
    """

    __slots__ = ("_level", "_logger")

    def __init__(self, level: Level, logger: Logger) -> None:
        self._level = level
        self._logger = logger

    @property
    def level(self) -> Level:
        return self._level

    def log(self, event: LogEvent) -> None:
        self._logger.log(event.without(LEVEL_KEY).append(LEVEL_KEY, self._level))

    def kv(self, *keyvals: Any) -> None:
        """Log a flat ``key, value, ...`` sequence."""
        self.log(LogEvent.of(*keyvals))

    def __repr__(self) -> str:
        return f"LevelTagger(level={self._level.value!r}, logger={self._logger!r})"


def tag(level: Level, logger: Logger) -> LevelTagger:
    return LevelTagger(level, logger)


def debug(logger: Logger) -> LevelTagger:
    return LevelTagger(Level.DEBUG, logger)


def info(logger: Logger) -> LevelTagger:
    return LevelTagger(Level.INFO, logger)


def warn(logger: Logger) -> LevelTagger:
    return LevelTagger(Level.WARN, logger)


def error(logger: Logger) -> LevelTagger:
    return LevelTagger(Level.ERROR, logger)


__all__ = ["LevelTagger", "debug", "error", "info", "tag", "warn"]
