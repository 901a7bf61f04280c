"""
Unit tests for analyzer configuration (VoltcraftSettings).

Tests verify:
- Config loads from environment variables with correct defaults.
- Config validation rejects a missing or blank data file path.
- LOG_LEVEL is normalized and validated.
- Values are read from a .env file in the working directory.

CHANGELOG:
- 2026-10-18: Initial creation

TODO:
- None
"""

import logging
from pathlib import Path

import pytest
from pydantic import ValidationError
from voltcraft.src.config import VoltcraftSettings


class TestVoltcraftSettingsLoadsFromEnv:
    """Config loads all values from environment variables."""

    def test_loads_all_env_vars(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("VOLTCRAFT_DATA_FILE", "/data/A0000001.BIN")
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("JSON_LOGS", "false")

        settings = VoltcraftSettings()

        assert settings.voltcraft_data_file == "/data/A0000001.BIN"
        assert settings.log_level == "DEBUG"
        assert settings.json_logs is False

    def test_defaults_applied_when_optional_vars_missing(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("VOLTCRAFT_DATA_FILE", "log.bin")

        settings = VoltcraftSettings()

        assert settings.log_level == "INFO"
        assert settings.log_level_value == logging.INFO
        assert settings.json_logs is True

    def test_reads_dotenv_file(self, tmp_path: Path) -> None:
        """The autouse fixture chdirs into tmp_path, so .env is picked up."""
        (tmp_path / ".env").write_text("VOLTCRAFT_DATA_FILE=from-dotenv.bin\n")

        settings = VoltcraftSettings()

        assert settings.voltcraft_data_file == "from-dotenv.bin"


class TestVoltcraftSettingsValidation:
    """Config validation rejects bad values."""

    def test_missing_data_file_raises(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            VoltcraftSettings()
        assert "voltcraft_data_file" in str(exc_info.value).lower()

    def test_blank_data_file_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("VOLTCRAFT_DATA_FILE", "   ")
        with pytest.raises(ValidationError):
            VoltcraftSettings()

    def test_log_level_is_case_insensitive(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("VOLTCRAFT_DATA_FILE", "log.bin")
        monkeypatch.setenv("LOG_LEVEL", "warning")

        settings = VoltcraftSettings()

        assert settings.log_level == "WARNING"
        assert settings.log_level_value == logging.WARNING

    def test_unknown_log_level_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("VOLTCRAFT_DATA_FILE", "log.bin")
        monkeypatch.setenv("LOG_LEVEL", "chatty")

        with pytest.raises(ValidationError) as exc_info:
            VoltcraftSettings()
        assert "LOG_LEVEL" in str(exc_info.value)
