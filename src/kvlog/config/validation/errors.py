"""Config validation errors raised while reading ``KVLOG_*`` settings."""
from kvlog.kernel.errors import ApplicationError


class ConfigError(ApplicationError):
    """Logging settings could not be loaded or a chain could not be built from them."""
    default_code = "config_error"


class MissingRequiredSettingError(ConfigError):
    """No loader supplied a value for a settings field without a default."""
    default_code = "missing_required_setting"

    def __init__(self, setting_name: str) -> None:
        super().__init__(
            f"Required setting '{setting_name}' is missing",
            detail={"setting": setting_name},
        )
        self.setting_name = setting_name


class InvalidSettingValueError(ConfigError):
    """A value such as ``KVLOG_LEVEL=loud`` is present but unusable."""
    default_code = "invalid_setting_value"

    def __init__(self, setting_name: str, value: object, reason: str) -> None:
        super().__init__(
            f"Setting '{setting_name}' has invalid value {value!r}: {reason}",
            detail={"setting": setting_name, "value": repr(value), "reason": reason},
        )
        self.setting_name = setting_name
        self.value = value
        self.reason = reason


__all__ = ["ConfigError", "InvalidSettingValueError", "MissingRequiredSettingError"]
