"""Config settings – env-based configuration."""
from mp_ftsearch.config.settings.base import Settings
from mp_ftsearch.config.settings.loaders import EnvSettingsLoader, SettingsLoader
from mp_ftsearch.config.settings.search import SearchSettings

__all__ = ["EnvSettingsLoader", "SearchSettings", "Settings", "SettingsLoader"]
