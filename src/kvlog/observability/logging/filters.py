"""Observability – LevelFilter.

Wrap the root logger once, in ``main``::

    logger = SerializedLogger(StructlogSink())
    logger = LevelFilter(logger, config=allow_info_and_above())

then tag at the call sites with :func:`~kvlog.observability.logging.tagger.info`
and friends. The filter decides per event from the *last* ``level`` pair;
:class:`FilterConfig` controls what happens to events without one.
"""
from __future__ import annotations

import dataclasses
import enum

from kvlog.kernel.errors import LevelNotAllowedError, MissingLevelError
from kvlog.observability.logging.levels import LEVEL_KEY, Level
from kvlog.observability.logging.protocol import LogEvent, Logger

_MISSING = object()


class MissingLevelPolicy(str, enum.Enum):
    """What a :class:`LevelFilter` does with an event that has no level."""

    SQUELCH = "squelch"
    """Drop the event; ``log`` returns normally."""

    PASS_THROUGH = "pass"
    """Forward the event unmodified, whatever the threshold."""

    ERROR = "error"
    """Drop the event and raise :class:`MissingLevelError`."""


@dataclasses.dataclass(frozen=True)
class FilterConfig:
    """Immutable filter settings, fixed at construction.

    Parameters
    ----------
    min_level:
        Lowest level forwarded. ``None`` forwards no levelled event at all.
    missing:
        Policy for events without a (well-formed) level annotation.
    reject_disallowed:
        Raise :class:`LevelNotAllowedError` instead of silently dropping
        events below *min_level*.
    """

    min_level: Level | None = Level.DEBUG
    missing: MissingLevelPolicy = MissingLevelPolicy.SQUELCH
    reject_disallowed: bool = False

    def allows(self, level: Level) -> bool:
        return self.min_level is not None and level.rank >= self.min_level.rank


def _allow(
    min_level: Level | None,
    missing: MissingLevelPolicy,
    reject_disallowed: bool,
) -> FilterConfig:
    return FilterConfig(min_level=min_level, missing=missing, reject_disallowed=reject_disallowed)


def allow_all(
    *, missing: MissingLevelPolicy = MissingLevelPolicy.SQUELCH, reject_disallowed: bool = False
) -> FilterConfig:
    """Forward every levelled event."""
    return _allow(Level.DEBUG, missing, reject_disallowed)


def allow_debug_and_above(
    *, missing: MissingLevelPolicy = MissingLevelPolicy.SQUELCH, reject_disallowed: bool = False
) -> FilterConfig:
    return _allow(Level.DEBUG, missing, reject_disallowed)


def allow_info_and_above(
    *, missing: MissingLevelPolicy = MissingLevelPolicy.SQUELCH, reject_disallowed: bool = False
) -> FilterConfig:
    return _allow(Level.INFO, missing, reject_disallowed)


def allow_warn_and_above(
    *, missing: MissingLevelPolicy = MissingLevelPolicy.SQUELCH, reject_disallowed: bool = False
) -> FilterConfig:
    return _allow(Level.WARN, missing, reject_disallowed)


def allow_error_only(
    *, missing: MissingLevelPolicy = MissingLevelPolicy.SQUELCH, reject_disallowed: bool = False
) -> FilterConfig:
    return _allow(Level.ERROR, missing, reject_disallowed)


def allow_none(
    *, missing: MissingLevelPolicy = MissingLevelPolicy.SQUELCH, reject_disallowed: bool = False
) -> FilterConfig:
    """Forward no levelled event; *missing* still governs unlevelled ones."""
    return _allow(None, missing, reject_disallowed)


class LevelFilter:
    """Forwards an event only when its level meets the threshold.

    The wrapped logger is called exactly once for an accepted event and never
    for a rejected one. Events are forwarded as-is; the filter never edits
    them. A level value that is not a :class:`Level` counts as missing.

    Example
    -------
    ::

        sink = RecordingLogger()
        log = LevelFilter(sink, Level.WARN)
        info(log).kv("msg", "x")     # dropped, returns None
        error(log).kv("msg", "y")    # delivered
    """

    __slots__ = ("_config", "_logger")

    def __init__(
        self,
        logger: Logger,
        min_level: Level | None = Level.DEBUG,
        missing: MissingLevelPolicy = MissingLevelPolicy.SQUELCH,
        *,
        reject_disallowed: bool = False,
        config: FilterConfig | None = None,
    ) -> None:
        self._logger = logger
        self._config = config or FilterConfig(
            min_level=min_level,
            missing=missing,
            reject_disallowed=reject_disallowed,
        )

    @property
    def config(self) -> FilterConfig:
        return self._config

    def allows(self, level: Level) -> bool:
        return self._config.allows(level)

    def log(self, event: LogEvent) -> None:
        level = event.last(LEVEL_KEY, _MISSING)

        if isinstance(level, Level):
            if self._config.allows(level):
                self._logger.log(event)
            elif self._config.reject_disallowed:
                raise LevelNotAllowedError(event, level)
            return

        policy = self._config.missing
        if policy is MissingLevelPolicy.PASS_THROUGH:
            self._logger.log(event)
        elif policy is MissingLevelPolicy.ERROR:
            if level is _MISSING:
                raise MissingLevelError(event)
            raise MissingLevelError(
                event,
                f"Log event level {level!r} is not a recognised level",
                detail={"value": repr(level)},
            )

    def __repr__(self) -> str:
        return f"LevelFilter(config={self._config!r}, logger={self._logger!r})"


__all__ = [
    "FilterConfig",
    "LevelFilter",
    "MissingLevelPolicy",
    "allow_all",
    "allow_debug_and_above",
    "allow_error_only",
    "allow_info_and_above",
    "allow_none",
    "allow_warn_and_above",
]
