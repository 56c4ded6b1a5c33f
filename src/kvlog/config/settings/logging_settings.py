"""Config settings – LoggingSettings.

Environment variables (prefix ``KVLOG``)::

    KVLOG_LEVEL=warn
    KVLOG_MISSING_LEVEL=error        # squelch | pass | error
    KVLOG_SERIALIZE=true
    KVLOG_REJECT_DISALLOWED=false
    KVLOG_JSON=true
    KVLOG_CONTEXT=service=billing,env=prod
"""
from __future__ import annotations

import dataclasses
from typing import ClassVar

from kvlog.config.settings.base import Settings
from kvlog.config.validation import InvalidSettingValueError
from kvlog.kernel.errors import InvalidLevelError
from kvlog.observability.logging.filters import FilterConfig, MissingLevelPolicy
from kvlog.observability.logging.levels import Level

_NO_LEVEL = "none"


@dataclasses.dataclass
class LoggingSettings(Settings):
    """Construction-time parameters of a logger chain."""

    _prefix: ClassVar[str] = "KVLOG"

    level: str = "info"
    missing_level: str = "squelch"
    serialize: bool = True
    reject_disallowed: bool = False
    json: bool = True
    context: list[str] = dataclasses.field(default_factory=list)

    def _validate(self) -> None:
        if self.level.strip().lower() != _NO_LEVEL:
            try:
                Level.parse(self.level)
            except InvalidLevelError as exc:
                raise InvalidSettingValueError(
                    "level", self.level, "expected debug, info, warn, error or none"
                ) from exc
        try:
            MissingLevelPolicy(self.missing_level.strip().lower())
        except ValueError as exc:
            raise InvalidSettingValueError(
                "missing_level", self.missing_level, "expected squelch, pass or error"
            ) from exc
        for item in self.context:
            if "=" not in item or not item.split("=", 1)[0].strip():
                raise InvalidSettingValueError("context", item, "expected key=value")

    @property
    def min_level(self) -> Level | None:
        if self.level.strip().lower() == _NO_LEVEL:
            return None
        return Level.parse(self.level)

    @property
    def missing_policy(self) -> MissingLevelPolicy:
        return MissingLevelPolicy(self.missing_level.strip().lower())

    @property
    def context_pairs(self) -> tuple[tuple[str, str], ...]:
        pairs = []
        for item in self.context:
            key, value = item.split("=", 1)
            pairs.append((key.strip(), value.strip()))
        return tuple(pairs)

    def filter_config(self) -> FilterConfig:
        return FilterConfig(
            min_level=self.min_level,
            missing=self.missing_policy,
            reject_disallowed=self.reject_disallowed,
        )


__all__ = ["LoggingSettings"]
