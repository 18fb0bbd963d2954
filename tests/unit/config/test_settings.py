"""Unit tests for config settings & validation."""

from dataclasses import dataclass
from typing import ClassVar

import pytest

from mp_ftsearch.config import (
    ConfigError,
    EnvSettingsLoader,
    InvalidSettingValueError,
    MissingRequiredSettingError,
    SearchSettings,
    Settings,
)


@dataclass
class _RequiredSettings(Settings):
    _prefix: ClassVar[str] = "REQ"

    token: str


class TestSearchSettingsDefaults:
    def test_defaults(self) -> None:
        settings = EnvSettingsLoader({}).load(SearchSettings)
        assert settings.url == "redis://localhost:6379/0"
        assert settings.default_dialect == 0
        assert settings.dialect is None
        assert settings.max_in_flight == 64
        assert settings.json_logs is True

    def test_level_property(self) -> None:
        assert SearchSettings(log_level="debug").level == 10


class TestEnvSettingsLoader:
    def test_loads_prefixed_values(self) -> None:
        env = {
            "FTSEARCH_URL": "redis://search:6379/2",
            "FTSEARCH_DEFAULT_DIALECT": "2",
            "FTSEARCH_MAX_IN_FLIGHT": "8",
            "FTSEARCH_JSON_LOGS": "false",
        }
        settings = EnvSettingsLoader(env).load(SearchSettings)
        assert settings.url == "redis://search:6379/2"
        assert settings.dialect == 2
        assert settings.max_in_flight == 8
        assert settings.json_logs is False

    def test_reads_os_environ_by_default(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("FTSEARCH_LOG_LEVEL", "WARNING")
        assert EnvSettingsLoader().load(SearchSettings).log_level == "WARNING"

    def test_bool_truthy_values(self) -> None:
        for truthy in ("true", "1", "yes", "on"):
            settings = EnvSettingsLoader({"FTSEARCH_JSON_LOGS": truthy}).load(SearchSettings)
            assert settings.json_logs is True

    def test_non_integer_is_invalid(self) -> None:
        with pytest.raises(InvalidSettingValueError) as exc_info:
            EnvSettingsLoader({"FTSEARCH_MAX_IN_FLIGHT": "lots"}).load(SearchSettings)
        assert exc_info.value.setting_name == "FTSEARCH_MAX_IN_FLIGHT"

    def test_missing_required(self) -> None:
        with pytest.raises(MissingRequiredSettingError) as exc_info:
            EnvSettingsLoader({}).load(_RequiredSettings)
        assert exc_info.value.setting_name == "REQ_TOKEN"

    def test_required_present(self) -> None:
        assert EnvSettingsLoader({"REQ_TOKEN": "t"}).load(_RequiredSettings).token == "t"


class TestSearchSettingsValidation:
    def test_negative_dialect(self) -> None:
        with pytest.raises(InvalidSettingValueError):
            SearchSettings(default_dialect=-1)

    def test_zero_in_flight(self) -> None:
        with pytest.raises(InvalidSettingValueError):
            SearchSettings(max_in_flight=0)

    def test_unknown_log_level(self) -> None:
        with pytest.raises(ConfigError):
            SearchSettings(log_level="LOUD")

    def test_validation_surfaces_through_loader(self) -> None:
        with pytest.raises(InvalidSettingValueError):
            EnvSettingsLoader({"FTSEARCH_DEFAULT_DIALECT": "-3"}).load(SearchSettings)


class TestEnvKey:
    def test_prefixed_upper_case(self) -> None:
        assert SearchSettings.env_key("max_in_flight") == "FTSEARCH_MAX_IN_FLIGHT"

    def test_validation_error_names_variable(self) -> None:
        with pytest.raises(InvalidSettingValueError) as exc_info:
            SearchSettings(max_in_flight=0)
        assert exc_info.value.setting_name == "FTSEARCH_MAX_IN_FLIGHT"
        assert exc_info.value.to_dict()["setting_name"] == "FTSEARCH_MAX_IN_FLIGHT"
