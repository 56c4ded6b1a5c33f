"""Observability – log levels and their ordering.

``debug < info < warn < error``. The level of an event travels inside the
event itself, as the value of the reserved :data:`LEVEL_KEY` pair.
"""
from __future__ import annotations

import enum
import logging
from typing import Any

from kvlog.kernel.errors import InvalidLevelError

LEVEL_KEY = "level"


class Ordering(enum.IntEnum):
    LESS = -1
    EQUAL = 0
    GREATER = 1


class Level(str, enum.Enum):
    """Closed, totally ordered set of severities."""

    DEBUG = "debug"
    INFO = "info"
    WARN = "warn"
    ERROR = "error"

    @property
    def rank(self) -> int:
        return _RANKS[self]

    @classmethod
    def parse(cls, value: str | Level) -> Level:
        """Parse a level name case-insensitively (``warning`` is accepted for WARN)."""
        if isinstance(value, Level):
            return value
        if not isinstance(value, str):
            raise InvalidLevelError(value)
        name = value.strip().lower()
        if name == "warning":
            return cls.WARN
        try:
            return cls(name)
        except ValueError as exc:
            raise InvalidLevelError(value, cause=exc) from exc

    def __str__(self) -> str:
        return self.value

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, Level):
            return NotImplemented
        return self.rank < other.rank

    def __le__(self, other: Any) -> bool:
        if not isinstance(other, Level):
            return NotImplemented
        return self.rank <= other.rank

    def __gt__(self, other: Any) -> bool:
        if not isinstance(other, Level):
            return NotImplemented
        return self.rank > other.rank

    def __ge__(self, other: Any) -> bool:
        if not isinstance(other, Level):
            return NotImplemented
        return self.rank >= other.rank


_RANKS: dict[Level, int] = {
    Level.DEBUG: 0,
    Level.INFO: 1,
    Level.WARN: 2,
    Level.ERROR: 3,
}

_STDLIB_LEVELS: dict[Level, int] = {
    Level.DEBUG: logging.DEBUG,
    Level.INFO: logging.INFO,
    Level.WARN: logging.WARNING,
    Level.ERROR: logging.ERROR,
}


def rank(level: Level) -> int:
    return _RANKS[level]


def compare(a: Level, b: Level) -> Ordering:
    """Three-way comparison of two levels by rank."""
    diff = _RANKS[a] - _RANKS[b]
    if diff < 0:
        return Ordering.LESS
    if diff > 0:
        return Ordering.GREATER
    return Ordering.EQUAL


def stdlib_level(level: Level) -> int:
    """Map to the matching :mod:`logging` numeric level."""
    return _STDLIB_LEVELS[level]


__all__ = ["LEVEL_KEY", "Level", "Ordering", "compare", "rank", "stdlib_level"]
