"""Config settings – Settings base class for logger-chain configuration."""
from __future__ import annotations

import dataclasses


@dataclasses.dataclass
class Settings:
    """Dataclass read once, before a logger chain is built.

    Subclasses set ``_prefix`` (``KVLOG`` for :class:`LoggingSettings`) and
    override :meth:`_validate` to reject values a chain could not be built
    from. Nothing re-reads settings after construction.
    """

    _prefix: dataclasses.ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Raise :class:`InvalidSettingValueError` for unusable field values."""


__all__ = ["Settings"]
