"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    BaseError
    ├── ApplicationError          (application.py)
    │   └── ConfigError           (kvlog.config.validation)
    └── LoggingError              (logging.py)
        ├── InvalidLogEventError
        ├── InvalidLevelError
        ├── MissingLevelError
        └── LevelNotAllowedError
"""

from kvlog.kernel.errors.application import ApplicationError
from kvlog.kernel.errors.base import BaseError
from kvlog.kernel.errors.logging import (
    InvalidLevelError,
    InvalidLogEventError,
    LevelNotAllowedError,
    LoggingError,
    MissingLevelError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "InvalidLevelError",
    "InvalidLogEventError",
    "LevelNotAllowedError",
    "LoggingError",
    "MissingLevelError",
]
