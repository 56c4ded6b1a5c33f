"""Observability – SerializedLogger.

Most sinks (a shared stream, a stdlib handler without its own lock, a
third-party client) do not expect concurrent writers. Wrap such a sink once
and share the wrapper between threads.
"""
from __future__ import annotations

import threading

from kvlog.observability.logging.protocol import LogEvent, Logger


class SerializedLogger:
    """Delegates to *logger* under a lock, one event at a time.

    The lock is bound to the wrapped logger for the lifetime of this object
    and held only for the duration of one ``log`` call. Exceptions raised by
    the wrapped logger propagate unchanged; nothing is retried.

    Ordering seen by the sink is lock-acquisition order, which under
    contention need not match the order in which callers entered ``log``.
    """

    __slots__ = ("_lock", "_logger")

    def __init__(self, logger: Logger) -> None:
        self._logger = logger
        self._lock = threading.Lock()

    @property
    def wrapped(self) -> Logger:
        return self._logger

    def log(self, event: LogEvent) -> None:
        with self._lock:
            self._logger.log(event)

    def __repr__(self) -> str:
        return f"SerializedLogger(logger={self._logger!r})"


__all__ = ["SerializedLogger"]
