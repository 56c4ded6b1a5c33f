"""Unit tests for SerializedLogger."""

from __future__ import annotations

import threading
from concurrent.futures import ThreadPoolExecutor

import pytest

from kvlog.observability.logging import (
    Level,
    LevelFilter,
    LogEvent,
    SerializedLogger,
    error,
    info,
)
from kvlog.testing.fakes import RacyBuffer, RecordingLogger


class TestDelegation:
    def test_forwards_event_unchanged(self) -> None:
        sink = RecordingLogger()
        event = LogEvent.of("msg", "x")
        SerializedLogger(sink).log(event)
        assert sink.events == [event]
        assert sink.last is event

    def test_wrapped_is_fixed(self) -> None:
        sink = RecordingLogger()
        assert SerializedLogger(sink).wrapped is sink

    def test_error_propagates_by_identity(self) -> None:
        boom = ValueError("encode failed")
        logger = SerializedLogger(RecordingLogger(fail_with=boom))
        with pytest.raises(ValueError) as exc_info:
            logger.log(LogEvent.of("msg", "x"))
        assert exc_info.value is boom

    def test_lock_released_after_error(self) -> None:
        sink = RecordingLogger(fail_with=RuntimeError("boom"))
        logger = SerializedLogger(sink)
        with pytest.raises(RuntimeError):
            logger.log(LogEvent.of("n", 1))
        sink.fail_with = None
        done = threading.Event()

        def _second() -> None:
            logger.log(LogEvent.of("n", 2))
            done.set()

        worker = threading.Thread(target=_second)
        worker.start()
        worker.join(timeout=5)
        assert done.is_set()
        assert sink.call_count == 2

    def test_no_retry(self) -> None:
        sink = RecordingLogger(fail_with=RuntimeError("boom"))
        with pytest.raises(RuntimeError):
            SerializedLogger(sink).log(LogEvent.of("n", 1))
        assert sink.call_count == 1


class TestConcurrency:
    def test_two_threads_thousand_events_each(self) -> None:
        buffer = RacyBuffer()
        logger = SerializedLogger(buffer)
        start = threading.Barrier(2)

        def _emit(worker: str) -> None:
            start.wait()
            for i in range(1000):
                logger.log(LogEvent.of("worker", worker, "seq", i, "msg", "tick"))

        threads = [threading.Thread(target=_emit, args=(name,)) for name in ("a", "b")]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        entries = buffer.entries()
        assert len(entries) == 2000
        assert all(len(entry) == 3 for entry in entries)
        for worker in ("a", "b"):
            seqs = [int(e[1].split("=")[1]) for e in entries if e[0] == f"worker={worker}"]
            assert seqs == list(range(1000))

    def test_unwrapped_racy_buffer_interleaves(self) -> None:
        buffer = RacyBuffer(pause=0.001)
        start = threading.Barrier(2)

        def _emit(worker: str) -> None:
            start.wait()
            for i in range(20):
                buffer.log(LogEvent.of("worker", worker, "seq", i, "msg", "tick"))

        threads = [threading.Thread(target=_emit, args=(name,)) for name in ("a", "b")]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        with pytest.raises(AssertionError, match="Interleaved"):
            buffer.entries()

    def test_serialized_racy_buffer_with_pause_stays_whole(self) -> None:
        buffer = RacyBuffer(pause=0.001)
        logger = SerializedLogger(buffer)
        start = threading.Barrier(2)

        def _emit(worker: str) -> None:
            start.wait()
            for i in range(20):
                logger.log(LogEvent.of("worker", worker, "seq", i, "msg", "tick"))

        threads = [threading.Thread(target=_emit, args=(name,)) for name in ("a", "b")]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(buffer.entries()) == 40

    def test_calls_never_overlap(self) -> None:
        sink = RecordingLogger(delay=0.001)
        logger = SerializedLogger(sink)
        n = 32
        with ThreadPoolExecutor(max_workers=8) as pool:
            list(pool.map(lambda i: logger.log(LogEvent.of("n", i)), range(n)))
        assert sink.call_count == n
        assert sink.max_concurrency == 1
        assert sorted(e.last("n") for e in sink.events) == list(range(n))

    def test_unserialized_sink_does_overlap(self) -> None:
        sink = RecordingLogger(delay=0.01)
        start = threading.Barrier(4)

        def _emit() -> None:
            start.wait()
            sink.log(LogEvent.of("msg", "x"))

        threads = [threading.Thread(target=_emit) for _ in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        assert sink.max_concurrency > 1


class TestComposition:
    def test_full_chain(self) -> None:
        sink = RecordingLogger()
        logger = LevelFilter(SerializedLogger(sink), Level.INFO)
        info(logger).kv("msg", "kept")
        sink.assert_logged(msg="kept", level=Level.INFO)
        assert sink.call_count == 1

    def test_chain_propagates_sink_error(self) -> None:
        boom = OSError("broken pipe")
        logger = LevelFilter(SerializedLogger(RecordingLogger(fail_with=boom)), Level.DEBUG)
        with pytest.raises(OSError) as exc_info:
            error(logger).kv("msg", "x")
        assert exc_info.value is boom
