"""Config validation errors raised while loading ``FTSEARCH_*`` settings."""
from mp_ftsearch.kernel.errors import ApplicationError


class ConfigError(ApplicationError):
    """Settings could not be loaded or constructed."""
    default_code = "config_error"
    context_fields = ("setting_name",)


class MissingRequiredSettingError(ConfigError):
    """A settings field without default has no environment variable."""
    default_code = "missing_required_setting"

    def __init__(self, setting_name: str) -> None:
        super().__init__(f"Required setting '{setting_name}' is missing")
        self.setting_name = setting_name


class InvalidSettingValueError(ConfigError):
    """A value was supplied but cannot be coerced or fails validation."""
    default_code = "invalid_setting_value"

    def __init__(self, setting_name: str, value: object, reason: str) -> None:
        super().__init__(f"Setting '{setting_name}' has invalid value {value!r}: {reason}")
        self.setting_name = setting_name
        self.value = value
        self.reason = reason


__all__ = ["ConfigError", "InvalidSettingValueError", "MissingRequiredSettingError"]
