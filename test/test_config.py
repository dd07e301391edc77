"""Tests for environment-driven settings."""

import pytest
from pydantic import ValidationError as PydanticValidationError

from symcalc.config import LogSettings, Settings, get_settings, reset_settings
from symcalc.exceptions import ConfigurationError


class TestSettingsFromEnv:
    def test_defaults(self):
        settings = Settings.from_env({})
        assert settings.log.level == "INFO"
        assert settings.log.file is None
        assert settings.log.json_format is False
        assert settings.registry.validate_rules is True

    def test_reads_prefixed_variables(self):
        settings = Settings.from_env(
            {
                "SYMCALC_LOG_LEVEL": "debug",
                "SYMCALC_LOG_FILE": "/tmp/symcalc.log",
                "SYMCALC_LOG_JSON": "true",
                "SYMCALC_VALIDATE_REGISTRY": "0",
            }
        )
        assert settings.log.level == "DEBUG"
        assert settings.log.file == "/tmp/symcalc.log"
        assert settings.log.json_format is True
        assert settings.registry.validate_rules is False

    def test_blank_values_use_defaults(self):
        settings = Settings.from_env({"SYMCALC_LOG_LEVEL": "  "})
        assert settings.log.level == "INFO"

    def test_invalid_level(self):
        with pytest.raises(ConfigurationError) as exc_info:
            Settings.from_env({"SYMCALC_LOG_LEVEL": "LOUD"})
        assert exc_info.value.code == "CONFIGURATION_ERROR"
        assert exc_info.value.details["errors"]

    def test_invalid_bool(self):
        with pytest.raises(ConfigurationError):
            Settings.from_env({"SYMCALC_VALIDATE_REGISTRY": "sometimes"})

    def test_settings_are_frozen(self):
        with pytest.raises(PydanticValidationError):
            LogSettings().level = "DEBUG"  # type: ignore[misc]


class TestCachedSettings:
    def test_cached_until_reset(self, monkeypatch):
        monkeypatch.setenv("SYMCALC_LOG_LEVEL", "WARNING")
        first = get_settings()
        monkeypatch.setenv("SYMCALC_LOG_LEVEL", "ERROR")
        assert get_settings() is first
        assert get_settings(reload=True).log.level == "ERROR"
        reset_settings()
        assert get_settings().log.level == "ERROR"
