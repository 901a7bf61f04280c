"""
Analyzer configuration loaded from environment variables.

Uses Pydantic BaseSettings for automatic env var loading and validation.
All configuration values come from environment variables or .env files.

CHANGELOG:
- 2026-10-18: Initial creation

TODO:
- None
"""

import logging

from pydantic import field_validator
from pydantic_settings import BaseSettings

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class VoltcraftSettings(BaseSettings):
    """Configuration for analysing a Voltcraft logger file.

    Attributes:
        voltcraft_data_file: Path of the logger file to analyze.
        log_level: Root log level name (case-insensitive).
        json_logs: Emit structured JSON log lines instead of plain text.
    """

    voltcraft_data_file: str
    log_level: str = "INFO"
    json_logs: bool = True

    @field_validator("voltcraft_data_file")
    @classmethod
    def data_file_must_not_be_blank(cls, v: str) -> str:
        """Reject an empty or whitespace-only path."""
        if not v.strip():
            raise ValueError("VOLTCRAFT_DATA_FILE must not be empty")
        return v

    @field_validator("log_level")
    @classmethod
    def log_level_must_be_known(cls, v: str) -> str:
        """Normalize to upper case and reject unknown level names."""
        level = v.strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(
                f"LOG_LEVEL must be one of {', '.join(_LOG_LEVELS)} (got: '{v}')"
            )
        return level

    @property
    def log_level_value(self) -> int:
        """Numeric logging level for ``logging.Logger.setLevel``."""
        return logging.getLevelName(self.log_level)

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}
