"""Observability – logger chain composition and structlog setup.

The usual wiring in ``main``::

    configure_structlog(settings)
    logger = build_logger(StructlogSink(), settings)
    info(logger).kv("msg", "listening", "addr", addr)

which produces ``ContextLogger -> LevelFilter -> SerializedLogger -> sink``.
"""
from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, Any

import structlog

from kvlog.observability.logging.context import ContextLogger
from kvlog.observability.logging.filters import LevelFilter
from kvlog.observability.logging.protocol import Logger
from kvlog.observability.logging.serialized import SerializedLogger
from kvlog.observability.logging.sinks import StructlogSink

if TYPE_CHECKING:
    from kvlog.config.settings import LoggingSettings

logger = logging.getLogger(__name__)


def _default_settings() -> LoggingSettings:
    from kvlog.config.settings import LoggingSettings

    return LoggingSettings()


def build_logger(sink: Logger, settings: LoggingSettings | None = None) -> Logger:
    """Wrap *sink* according to *settings* (defaults when omitted)."""
    settings = settings or _default_settings()

    chain: Logger = sink
    if settings.serialize:
        chain = SerializedLogger(chain)
    chain = LevelFilter(chain, config=settings.filter_config())
    context = settings.context_pairs
    if context:
        chain = ContextLogger(chain, *(item for pair in context for item in pair))

    logger.debug(
        "logger chain built: level=%s missing=%s serialize=%s context_keys=%s",
        settings.level,
        settings.missing_level,
        settings.serialize,
        [key for key, _ in context],
    )
    return chain


def configure_structlog(settings: LoggingSettings | None = None, stream: Any = None) -> None:
    """Configure structlog to render events as JSON (or console) lines.

    Level filtering is left to :class:`LevelFilter`; structlog itself is set
    up to let everything through.
    """
    settings = settings or _default_settings()
    renderer: Any = (
        structlog.processors.JSONRenderer()
        if settings.json
        else structlog.dev.ConsoleRenderer(colors=False)
    )
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(logging.NOTSET),
        logger_factory=structlog.WriteLoggerFactory(file=stream or sys.stderr),
        cache_logger_on_first_use=False,
    )


class LoggerFactory:
    """One-call setup from the environment."""

    @staticmethod
    def from_env(overrides: dict[str, Any] | None = None, name: str | None = None) -> Logger:
        """Load :class:`LoggingSettings` from ``KVLOG_*`` variables and build a chain
        over a :class:`StructlogSink`.

        Raises
        ------
        InvalidSettingValueError
            When an environment value is present but invalid.
        """
        from kvlog.config.settings import EnvSettingsLoader, LoggingSettings, SettingsFactory

        settings = SettingsFactory.create(LoggingSettings, [EnvSettingsLoader()], overrides)
        configure_structlog(settings)
        target = structlog.get_logger(name) if name else structlog.get_logger()
        return build_logger(StructlogSink(target), settings)


__all__ = ["LoggerFactory", "build_logger", "configure_structlog"]
