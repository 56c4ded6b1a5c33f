"""Testing fakes – RecordingLogger and RacyBuffer."""
from __future__ import annotations

import threading
import time

from kvlog.observability.logging.levels import LEVEL_KEY
from kvlog.observability.logging.protocol import LogEvent


class RecordingLogger:
    """In-memory sink that records every event it receives.

    Optionally raises *fail_with* on every call (after recording the
    attempt), and tracks how many calls were in flight at once so tests can
    assert on serialization.

    Usage::

        sink = RecordingLogger()
        info(sink).kv("msg", "hello")
        sink.assert_logged(msg="hello")
    """

    def __init__(self, fail_with: BaseException | None = None, delay: float = 0.0) -> None:
        self.events: list[LogEvent] = []
        self.fail_with = fail_with
        self._delay = delay
        self._guard = threading.Lock()
        self._in_flight = 0
        self.max_concurrency = 0

    def log(self, event: LogEvent) -> None:
        with self._guard:
            self._in_flight += 1
            self.max_concurrency = max(self.max_concurrency, self._in_flight)
        try:
            if self._delay:
                time.sleep(self._delay)
            self.events.append(event)
            if self.fail_with is not None:
                raise self.fail_with
        finally:
            with self._guard:
                self._in_flight -= 1

    @property
    def call_count(self) -> int:
        return len(self.events)

    @property
    def last(self) -> LogEvent:
        assert self.events, "No event was logged"
        return self.events[-1]

    def levels(self) -> list[object]:
        return [e.last(LEVEL_KEY) for e in self.events]

    def assert_logged(self, **fields: object) -> LogEvent:
        """Assert that some event contains all *fields* (last value per key)."""
        for event in self.events:
            data = event.to_dict()
            if all(data.get(k) == v for k, v in fields.items()):
                return event
        raise AssertionError(f"No event matching {fields!r} among {len(self.events)} event(s)")

    def assert_nothing_logged(self) -> None:
        assert not self.events, f"Expected no events, got {len(self.events)}"

    def reset(self) -> None:
        self.events.clear()
        self.max_concurrency = 0


class RacyBuffer:
    """Deliberately non-thread-safe sink.

    Each event is written as several separate list appends with a thread
    switch opportunity between them, the way a stream writer emits an event
    in chunks. Without outside locking, concurrent writers interleave.
    """

    START = "<"
    END = ">"

    def __init__(self, pause: float = 0.0) -> None:
        self.chunks: list[str] = []
        self._pause = pause

    def log(self, event: LogEvent) -> None:
        self.chunks.append(self.START)
        for key, value in event:
            time.sleep(self._pause)
            self.chunks.append(f"{key}={value}")
        self.chunks.append(self.END)

    def entries(self) -> list[list[str]]:
        """Split the buffer into entries; raise if any two were interleaved."""
        result: list[list[str]] = []
        current: list[str] | None = None
        for chunk in self.chunks:
            if chunk == self.START:
                if current is not None:
                    raise AssertionError("Interleaved entries: start inside an open entry")
                current = []
            elif chunk == self.END:
                if current is None:
                    raise AssertionError("Interleaved entries: end without a start")
                result.append(current)
                current = None
            else:
                if current is None:
                    raise AssertionError("Interleaved entries: field outside an entry")
                current.append(chunk)
        if current is not None:
            raise AssertionError("Unterminated entry at end of buffer")
        return result


__all__ = ["RacyBuffer", "RecordingLogger"]
