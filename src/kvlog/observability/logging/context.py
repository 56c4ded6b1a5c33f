"""Observability – ContextLogger and lazy values.

Bind key/value pairs once and have them prepended to every event::

    logger = ContextLogger(base, "ts", timestamp_utc(), "caller", caller())
    http_logger = logger.with_("component", "http")
    http_logger.log(LogEvent.of("msg", "listening", "addr", ":8080"))
    # -> ts=<now> caller=main.py:42 component=http msg=listening addr=:8080

Bound values wrapped in :class:`Valuer` are evaluated at every ``log`` call.
"""
from __future__ import annotations

import os
import sys
from collections.abc import Callable
from datetime import UTC, datetime
from typing import Any

from kvlog.observability.logging.protocol import LogEvent, Logger, Pair, pairs_from_keyvals

_PACKAGE = "kvlog.observability.logging"


class Valuer:
    """A bound value computed afresh for each event."""

    __slots__ = ("_fn",)

    def __init__(self, fn: Callable[[], Any]) -> None:
        self._fn = fn

    def __call__(self) -> Any:
        return self._fn()

    def __repr__(self) -> str:
        return f"Valuer({self._fn!r})"


def timestamp(clock: Callable[[], datetime]) -> Valuer:
    return Valuer(clock)


def timestamp_utc() -> Valuer:
    """Aware UTC :class:`datetime` of the moment the event is logged."""
    return Valuer(lambda: datetime.now(UTC))


def caller(depth: int = 0) -> Valuer:
    """``file.py:lineno`` of the code that logged the event.

    Frames inside this package (taggers, filters, context loggers) are
    skipped. *depth* then skips that many extra frames, for callers that
    log through their own helper function.
    """

    def _resolve() -> str:
        frame = sys._getframe(1)  # noqa: SLF001
        while frame.f_back is not None and frame.f_globals.get("__name__", "").startswith(_PACKAGE):
            frame = frame.f_back
        for _ in range(depth):
            if frame.f_back is None:
                break
            frame = frame.f_back
        return f"{os.path.basename(frame.f_code.co_filename)}:{frame.f_lineno}"

    return Valuer(_resolve)


def _bind_values(pairs: tuple[Pair, ...]) -> tuple[Pair, ...]:
    bound: list[Pair] = []
    for key, value in pairs:
        bound.append((key, value() if isinstance(value, Valuer) else value))
    return tuple(bound)


class ContextLogger:
    """Logger that carries bound pairs and prepends them to each event.

    ``with_`` and ``with_prefix`` return new loggers; the receiver is never
    modified, so a ContextLogger can be shared between threads.
    """

    __slots__ = ("_context", "_has_valuer", "_logger")

    def __init__(self, logger: Logger, *keyvals: Any) -> None:
        if isinstance(logger, ContextLogger):
            context = logger._context + pairs_from_keyvals(keyvals)
            logger = logger._logger
        else:
            context = pairs_from_keyvals(keyvals)
        self._logger = logger
        self._context = context
        self._has_valuer = any(isinstance(v, Valuer) for _, v in context)

    @classmethod
    def _from(cls, logger: Logger, context: tuple[Pair, ...]) -> ContextLogger:
        new = cls(logger)
        new._context = context
        new._has_valuer = any(isinstance(v, Valuer) for _, v in context)
        return new

    @property
    def context(self) -> tuple[Pair, ...]:
        return self._context

    def with_(self, *keyvals: Any) -> ContextLogger:
        """Return a logger whose bound pairs are these pairs appended to ours."""
        return self._from(self._logger, self._context + pairs_from_keyvals(keyvals))

    def with_prefix(self, *keyvals: Any) -> ContextLogger:
        """Return a logger whose bound pairs are these pairs followed by ours."""
        return self._from(self._logger, pairs_from_keyvals(keyvals) + self._context)

    def log(self, event: LogEvent) -> None:
        context = _bind_values(self._context) if self._has_valuer else self._context
        self._logger.log(event.prepend(context))

    def __repr__(self) -> str:
        return f"ContextLogger(context={self._context!r}, logger={self._logger!r})"


__all__ = ["ContextLogger", "Valuer", "caller", "timestamp", "timestamp_utc"]
