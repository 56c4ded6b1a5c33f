"""Testing fakes – in-memory sinks."""
from kvlog.testing.fakes.logger import RacyBuffer, RecordingLogger

__all__ = ["RacyBuffer", "RecordingLogger"]
