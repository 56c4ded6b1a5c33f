"""
kvlog – Levelled, serialized structured logging.

Import path convention::

    from kvlog.observability.logging import LevelFilter, SerializedLogger, info
    from kvlog.observability.logging.levels import Level
    from kvlog.config.settings import LoggingSettings
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
