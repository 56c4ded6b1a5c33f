"""Observability – Logger protocol and LogEvent.

A :class:`Logger` is anything with a ``log(event)`` method. Success is a
normal return, failure is a raised exception. Every wrapper in this package
(tagger, filter, serializer, context) both consumes and implements this one
method, so they stack in any order without a shared base class.
"""
from __future__ import annotations

import dataclasses
from collections.abc import Iterable, Iterator, Mapping
from typing import Any, Protocol, runtime_checkable

from kvlog.kernel.errors import InvalidLogEventError

Pair = tuple[str, Any]

_MISSING: Any = object()


def pairs_from_keyvals(keyvals: tuple[Any, ...] | list[Any]) -> tuple[Pair, ...]:
    """Group a flat ``key, value, key, value`` sequence into pairs.

    Raises :class:`InvalidLogEventError` for odd-length input or non-``str`` keys.
    """
    if len(keyvals) % 2:
        raise InvalidLogEventError(
            f"Expected an even number of key/value items, got {len(keyvals)}",
            detail={"dangling_key": repr(keyvals[-1])},
        )
    pairs: list[Pair] = []
    for i in range(0, len(keyvals), 2):
        key = keyvals[i]
        if not isinstance(key, str):
            raise InvalidLogEventError(
                f"Log keys must be str, got {type(key).__name__} at position {i}",
                detail={"position": i, "key": repr(key)},
            )
        pairs.append((key, keyvals[i + 1]))
    return tuple(pairs)


@dataclasses.dataclass(frozen=True)
class LogEvent:
    """One structured log record: an ordered sequence of ``(key, value)`` pairs.

    Keys may repeat and order is significant. Consumers that need a single
    value per key use the *last* occurrence (see :meth:`last`, :meth:`to_dict`).
    """

    pairs: tuple[Pair, ...] = ()

    def __post_init__(self) -> None:
        pairs = tuple(self.pairs)
        for i, pair in enumerate(pairs):
            if not isinstance(pair, tuple) or len(pair) != 2:
                raise InvalidLogEventError(f"Pair at position {i} is not a (key, value) tuple")
            if not isinstance(pair[0], str):
                raise InvalidLogEventError(
                    f"Log keys must be str, got {type(pair[0]).__name__} at position {i}",
                    detail={"position": i, "key": repr(pair[0])},
                )
        object.__setattr__(self, "pairs", pairs)

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def of(cls, *keyvals: Any) -> LogEvent:
        """Build from alternating keys and values: ``LogEvent.of("msg", "hi")``."""
        return cls(pairs_from_keyvals(keyvals))

    @classmethod
    def from_pairs(cls, pairs: Iterable[Pair]) -> LogEvent:
        return cls(tuple(pairs))

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any] | None = None, **kwargs: Any) -> LogEvent:
        """Build from a mapping (insertion order kept), then keyword arguments."""
        items = list((mapping or {}).items()) + list(kwargs.items())
        return cls(tuple(items))

    # ------------------------------------------------------------------
    # Derivation (events are immutable; these return new instances)
    # ------------------------------------------------------------------

    def append(self, key: str, value: Any) -> LogEvent:
        return LogEvent(self.pairs + ((key, value),))

    def extend(self, pairs: Iterable[Pair]) -> LogEvent:
        return LogEvent(self.pairs + tuple(pairs))

    def prepend(self, pairs: Iterable[Pair]) -> LogEvent:
        return LogEvent(tuple(pairs) + self.pairs)

    def without(self, key: str) -> LogEvent:
        """Drop every pair whose key is *key*."""
        if not self.has(key):
            return self
        return LogEvent(tuple(p for p in self.pairs if p[0] != key))

    # ------------------------------------------------------------------
    # Inspection
    # ------------------------------------------------------------------

    def last(self, key: str, default: Any = None) -> Any:
        """Return the value of the last pair whose key is *key*."""
        for k, v in reversed(self.pairs):
            if k == key:
                return v
        return default

    def has(self, key: str) -> bool:
        return self.last(key, _MISSING) is not _MISSING

    def keys(self) -> list[str]:
        return [k for k, _ in self.pairs]

    def flatten(self) -> tuple[Any, ...]:
        """Return the flat ``key, value, key, value`` form."""
        return tuple(item for pair in self.pairs for item in pair)

    def to_dict(self) -> dict[str, Any]:
        """Collapse duplicates, later pairs shadowing earlier ones."""
        return dict(self.pairs)

    def __iter__(self) -> Iterator[Pair]:
        return iter(self.pairs)

    def __len__(self) -> int:
        return len(self.pairs)


@runtime_checkable
class Logger(Protocol):
    """Capability implemented by every sink and every wrapper.

    ``log`` either returns (event accepted, delivered or intentionally
    dropped) or raises.
    """

    def log(self, event: LogEvent) -> None: ...


__all__ = ["LogEvent", "Logger", "Pair", "pairs_from_keyvals"]
