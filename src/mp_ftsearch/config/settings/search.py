"""Config settings – SearchSettings."""
from __future__ import annotations

import dataclasses
import logging

from mp_ftsearch.config.settings.base import Settings
from mp_ftsearch.config.validation import InvalidSettingValueError

_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})


@dataclasses.dataclass
class SearchSettings(Settings):
    """Connection and late-bound command defaults.

    Environment variables: ``FTSEARCH_URL``, ``FTSEARCH_DEFAULT_DIALECT``,
    ``FTSEARCH_MAX_IN_FLIGHT``, ``FTSEARCH_LOG_LEVEL``, ``FTSEARCH_JSON_LOGS``.
    A ``default_dialect`` of ``0`` leaves commands untouched.
    """

    _prefix: dataclasses.ClassVar[str] = "FTSEARCH"

    url: str = "redis://localhost:6379/0"
    default_dialect: int = 0
    max_in_flight: int = 64
    log_level: str = "INFO"
    json_logs: bool = True

    def _validate(self) -> None:
        if self.default_dialect < 0:
            raise InvalidSettingValueError(self.env_key("default_dialect"), self.default_dialect, "must be >= 0")
        if self.max_in_flight <= 0:
            raise InvalidSettingValueError(self.env_key("max_in_flight"), self.max_in_flight, "must be > 0")
        if self.log_level.upper() not in _LOG_LEVELS:
            raise InvalidSettingValueError(self.env_key("log_level"), self.log_level, "unknown log level")

    @property
    def dialect(self) -> int | None:
        return self.default_dialect or None

    @property
    def level(self) -> int:
        return logging.getLevelName(self.log_level.upper())


__all__ = ["SearchSettings"]
