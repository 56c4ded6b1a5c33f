"""Testing generators – Hypothesis strategies (requires ``hypothesis``)."""
from kvlog.testing.generators.strategies import level_strategy, log_event_strategy

__all__ = ["level_strategy", "log_event_strategy"]
