"""
Tests for the environment-driven settings.
"""

import logging

import pytest

from file_explorer.config.settings import DEFAULT_PROMPT, Settings, parse_log_level
from file_explorer.exceptions import ConfigurationError


class TestParseLogLevel:
    @pytest.mark.parametrize(
        "value, expected",
        [("debug", logging.DEBUG), ("INFO", logging.INFO), (" warning ", logging.WARNING)],
    )
    def test_known_levels(self, value, expected):
        assert parse_log_level(value) == expected

    def test_unknown_level(self):
        with pytest.raises(ConfigurationError, match="Invalid log level: loud"):
            parse_log_level("loud")


class TestSettings:
    """Test cases for Settings."""

    def test_defaults(self, monkeypatch):
        for key in (
            "FILE_EXPLORER_PROMPT",
            "FILE_EXPLORER_LOG_LEVEL",
            "FILE_EXPLORER_LOG_FILE",
            "NO_COLOR",
        ):
            monkeypatch.delenv(key, raising=False)

        settings = Settings()

        assert settings.prompt == DEFAULT_PROMPT
        assert settings.log_level == logging.WARNING
        assert settings.log_file is None
        assert settings.color is True

    def test_environment_overrides(self, monkeypatch, tmp_path):
        monkeypatch.setenv("FILE_EXPLORER_PROMPT", "> ")
        monkeypatch.setenv("FILE_EXPLORER_LOG_LEVEL", "debug")
        monkeypatch.setenv("FILE_EXPLORER_LOG_FILE", str(tmp_path / "explorer.log"))
        monkeypatch.setenv("NO_COLOR", "1")

        settings = Settings()

        assert settings.prompt == "> "
        assert settings.log_level == logging.DEBUG
        assert settings.log_file == str(tmp_path / "explorer.log")
        assert settings.color is False

    def test_invalid_level_in_environment(self, monkeypatch):
        monkeypatch.setenv("FILE_EXPLORER_LOG_LEVEL", "nonsense")
        with pytest.raises(ConfigurationError):
            Settings()
