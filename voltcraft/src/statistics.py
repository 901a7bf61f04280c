"""
Statistics over decoded Voltcraft readings.

Pure functions: each takes the reading sequence as a read-only argument,
performs no I/O and never mutates its input. Aggregates are recomputed on
every call.

Energy totals assume every reading stands for exactly one minute of
constant power, so ``total = sum(power) / 60``.

Blackouts are inferred from timestamp gaps between readings taken in
non-overlapping pairs ``(e0, e1), (e2, e3), ...``. A gap between the second
reading of one pair and the first of the next is not reported.

CHANGELOG:
- 2026-10-18: Initial creation

TODO:
- None
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from datetime import date, timedelta
from operator import attrgetter

from voltcraft.src.errors import EmptyInput
from voltcraft.src.models import PowerBlackout, PowerEvent, PowerInterval, PowerStats

logger = logging.getLogger(__name__)

MINUTES_PER_HOUR = 60.0
_SAMPLE_INTERVAL = timedelta(minutes=1)


# ---------------------------------------------------------------------------
# Core aggregate
# ---------------------------------------------------------------------------


def compute_stats(events: Sequence[PowerEvent]) -> PowerStats:
    """Aggregate a sequence of readings.

    Extrema are chosen by the numeric field; on ties the first reading
    encountered wins.

    Args:
        events: Readings to aggregate, in any order.

    Returns:
        PowerStats over *events*.

    Raises:
        EmptyInput: If *events* is empty.
    """
    if not events:
        raise EmptyInput("cannot compute statistics over zero readings")

    count = len(events)
    power_sum = sum(e.power for e in events)
    apparent_power_sum = sum(e.apparent_power for e in events)
    voltage_sum = sum(e.voltage for e in events)

    return PowerStats(
        total_active_power=power_sum / MINUTES_PER_HOUR,
        avg_active_power=power_sum / count,
        max_active_power=max(events, key=attrgetter("power")),
        total_apparent_power=apparent_power_sum / MINUTES_PER_HOUR,
        avg_apparent_power=apparent_power_sum / count,
        max_apparent_power=max(events, key=attrgetter("apparent_power")),
        min_voltage=min(events, key=attrgetter("voltage")),
        max_voltage=max(events, key=attrgetter("voltage")),
        avg_voltage=voltage_sum / count,
    )


# ---------------------------------------------------------------------------
# Calendar bucketing helpers
# ---------------------------------------------------------------------------


def distinct_days(events: Sequence[PowerEvent]) -> list[date]:
    """Return the calendar dates present in *events*, ascending."""
    return sorted({e.timestamp.date() for e in events})


def filter_by_day(events: Sequence[PowerEvent], day: date) -> list[PowerEvent]:
    """Return the readings taken on *day*, in their original order."""
    return [e for e in events if e.timestamp.date() == day]


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def overall_stats(events: Sequence[PowerEvent]) -> PowerStats:
    """Aggregate over the full reading sequence.

    Raises:
        EmptyInput: If *events* is empty.
    """
    return compute_stats(events)


def daily_stats(events: Sequence[PowerEvent]) -> list[PowerInterval]:
    """Aggregate per calendar day.

    Returns:
        One PowerInterval per distinct date in *events*, ordered by date.
        Empty when *events* is empty.
    """
    intervals = [
        PowerInterval(date=day, stats=compute_stats(filter_by_day(events, day)))
        for day in distinct_days(events)
    ]
    logger.debug("Computed daily statistics for %d day(s)", len(intervals))
    return intervals


def blackout_stats(events: Sequence[PowerEvent]) -> list[PowerBlackout]:
    """Infer outages from gaps longer than one minute.

    Readings are compared in non-overlapping pairs; a trailing unpaired
    reading is ignored.

    Returns:
        Blackouts in reading order. Empty when *events* has fewer than two
        readings.
    """
    blackouts: list[PowerBlackout] = []
    for first, second in zip(events[0::2], events[1::2]):
        gap = second.timestamp - first.timestamp
        if gap > _SAMPLE_INTERVAL:
            blackouts.append(
                PowerBlackout(timestamp=first.timestamp + _SAMPLE_INTERVAL, duration=gap)
            )
    if blackouts:
        logger.info("Detected %d blackout(s)", len(blackouts))
    return blackouts
