"""
Shared test fixtures for the Voltcraft test suite.

Provides the reference logger buffer, environment isolation for
VoltcraftSettings, and restoration of root logging handlers for tests that
reconfigure logging.

CHANGELOG:
- 2026-10-18: Initial creation

TODO:
- None
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest

# All VoltcraftSettings environment variable names, used for cleanup.
_ALL_VOLTCRAFT_ENV_VARS = (
    "VOLTCRAFT_DATA_FILE",
    "LOG_LEVEL",
    "JSON_LOGS",
)

SAMPLE_BUFFER = bytes(
    [
        # Magic number
        0xE0, 0xC5, 0xEA,
        # Base timestamp: 2014-09-11 18:43
        0x09, 0x0B, 0x0E, 0x12, 0x2B,
        # One power record: 224.6 V, 0.446 A, pf 0.87
        0x08, 0xC6, 0x01, 0xBE, 0x57,
        # End of data
        0xFF, 0xFF, 0xFF, 0xFF,
    ]
)  # fmt: skip
"""Single-record logger file used throughout the suite."""


@pytest.fixture(autouse=True)
def _clean_voltcraft_env(monkeypatch: pytest.MonkeyPatch, tmp_path: str) -> None:
    """Remove all Voltcraft env vars and isolate from .env files before each test."""
    for var in _ALL_VOLTCRAFT_ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture()
def sample_buffer() -> bytes:
    """Return the single-record reference buffer."""
    return SAMPLE_BUFFER


@pytest.fixture()
def restore_root_logging() -> Iterator[logging.Logger]:
    """Snapshot root logger handlers/level and restore them after the test."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)
