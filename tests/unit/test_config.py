# tests/unit/test_config.py
"""
Unit tests for settings loading and validation.
"""

import pytest
from pydantic import ValidationError

from ntrl_reader.config import Settings, get_settings
from ntrl_reader.constants import ReaderLimits


class TestDefaults:
    def test_reader_defaults(self):
        settings = Settings()
        assert settings.READER_FETCH_TIMEOUT_SECONDS == 12.0
        assert settings.READER_CACHE_TTL_SECONDS == 6 * 60 * 60
        assert settings.READER_CACHE_MAX_ENTRIES == 200
        assert settings.READER_USER_AGENT == ReaderLimits.USER_AGENT

    def test_logging_defaults(self):
        settings = Settings()
        assert settings.LOG_LEVEL == "INFO"
        assert settings.LOG_JSON is True

    def test_get_settings_cached(self):
        assert get_settings() is get_settings()


class TestEnvironment:
    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("READER_CACHE_TTL_SECONDS", "60")
        monkeypatch.setenv("READER_FETCH_TIMEOUT_SECONDS", "2.5")
        settings = Settings()
        assert settings.READER_CACHE_TTL_SECONDS == 60
        assert settings.READER_FETCH_TIMEOUT_SECONDS == 2.5

    def test_log_json_flag(self, monkeypatch):
        monkeypatch.setenv("LOG_JSON", "false")
        assert Settings().LOG_JSON is False


class TestValidation:
    @pytest.mark.parametrize(
        "field",
        ["READER_FETCH_TIMEOUT_SECONDS", "READER_CACHE_TTL_SECONDS", "READER_CACHE_MAX_ENTRIES"],
    )
    def test_must_be_positive(self, field):
        with pytest.raises(ValidationError):
            Settings(**{field: 0})

    def test_log_level_normalized(self):
        assert Settings(LOG_LEVEL="debug").LOG_LEVEL == "DEBUG"

    def test_unknown_log_level(self):
        with pytest.raises(ValidationError):
            Settings(LOG_LEVEL="verbose")
