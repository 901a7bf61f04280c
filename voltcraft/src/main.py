"""
Entrypoint wiring the decoder and statistics for one logger file.

Loads VoltcraftSettings from the environment, configures structured JSON
logging, reads the configured logger file, decodes it and computes overall,
daily and blackout statistics. The resulting AnalysisReport is logged as a
single JSON document; presenting it to humans is left to the caller.

CHANGELOG:
- 2026-10-18: Initial creation

TODO:
- None
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import UTC, datetime
from typing import TYPE_CHECKING

from voltcraft.src.decoder import VoltcraftData
from voltcraft.src.errors import VoltcraftError
from voltcraft.src.models import AnalysisReport
from voltcraft.src.statistics import blackout_stats, daily_stats, overall_stats

if TYPE_CHECKING:
    from voltcraft.src.config import VoltcraftSettings

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Structured JSON logging setup
# ---------------------------------------------------------------------------


class _JsonFormatter(logging.Formatter):
    """Minimal JSON log formatter."""

    def format(self, record: logging.LogRecord) -> str:
        log_entry = {
            "ts": datetime.fromtimestamp(record.created, tz=UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        if record.exc_info and record.exc_info[1] is not None:
            log_entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_entry)


def configure_logging(level: int = logging.INFO, *, json_logs: bool = True) -> None:
    """Configure root logging with a single stderr handler.

    Any handlers already on the root logger are replaced.

    Args:
        level: Root log level.
        json_logs: Use the JSON formatter; plain text otherwise.
    """
    handler = logging.StreamHandler(sys.stderr)
    if json_logs:
        handler.setFormatter(_JsonFormatter())
    else:
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
        )
    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)


def log_config_summary(settings: VoltcraftSettings) -> None:
    """Log the effective configuration at startup."""
    logger.info(
        "Voltcraft analyzer starting with config: "
        "voltcraft_data_file=%s, log_level=%s, json_logs=%s",
        settings.voltcraft_data_file,
        settings.log_level,
        settings.json_logs,
    )


# ---------------------------------------------------------------------------
# Analysis
# ---------------------------------------------------------------------------


def analyze(data: VoltcraftData) -> AnalysisReport:
    """Decode *data* and compute every statistic over its readings.

    Raises:
        InvalidFormat: If the buffer is not a Voltcraft file.
        Truncated: If the buffer ends before the end-of-data marker.
    """
    events = data.parse()
    overall = overall_stats(events) if events else None
    report = AnalysisReport(
        event_count=len(events),
        overall=overall,
        daily=daily_stats(events),
        blackouts=blackout_stats(events),
    )
    logger.info(
        "Analyzed %d reading(s) over %d day(s), %d blackout(s)",
        report.event_count,
        len(report.daily),
        len(report.blackouts),
    )
    return report


# ---------------------------------------------------------------------------
# Entrypoint
# ---------------------------------------------------------------------------


def main() -> int:
    """Analyze the configured logger file; return a process exit code."""
    from voltcraft.src.config import VoltcraftSettings

    settings = VoltcraftSettings()
    configure_logging(settings.log_level_value, json_logs=settings.json_logs)
    log_config_summary(settings)

    try:
        data = VoltcraftData.from_file(settings.voltcraft_data_file)
        report = analyze(data)
    except VoltcraftError:
        logger.exception("Failed to analyze '%s'", settings.voltcraft_data_file)
        return 1

    logger.info("Report: %s", report.model_dump_json())
    return 0


if __name__ == "__main__":
    sys.exit(main())
