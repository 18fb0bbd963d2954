"""Config – env-driven settings and their validation errors."""

from mp_ftsearch.config.settings import EnvSettingsLoader, SearchSettings, Settings, SettingsLoader
from mp_ftsearch.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigError",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "SearchSettings",
    "Settings",
    "SettingsLoader",
]
