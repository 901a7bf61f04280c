"""
Pydantic models for decoded Voltcraft readings and derived statistics.

PowerEvent is one decoded sample. PowerStats, PowerInterval and
PowerBlackout are computed by the statistics functions and are never
mutated after creation; all models are frozen value types.

CHANGELOG:
- 2026-10-18: Initial creation

TODO:
- None
"""

from __future__ import annotations

import datetime as dt

from pydantic import BaseModel


class PowerEvent(BaseModel):
    """A single decoded reading from a Voltcraft logger.

    The timestamp is a naive local-calendar date-time; the meter records no
    timezone. The two power fields are derived from the measured ones, see
    :meth:`from_measurements`.

    Attributes:
        timestamp: Sample time, minute resolution.
        voltage: RMS voltage in volts.
        current: RMS current in amperes.
        power_factor: cos(phi), nominally 0-1.
        power: Active power in kW.
        apparent_power: Apparent power in kVA.
    """

    model_config = {"frozen": True}

    timestamp: dt.datetime
    voltage: float
    current: float
    power_factor: float
    power: float
    apparent_power: float

    @classmethod
    def from_measurements(
        cls,
        timestamp: dt.datetime,
        voltage: float,
        current: float,
        power_factor: float,
    ) -> PowerEvent:
        """Build an event, deriving active and apparent power."""
        return cls(
            timestamp=timestamp,
            voltage=voltage,
            current=current,
            power_factor=power_factor,
            power=voltage * current * power_factor / 1000.0,
            apparent_power=voltage * current / 1000.0,
        )


class PowerStats(BaseModel):
    """Aggregate report over a sequence of readings.

    Totals assume each reading stands for one minute of constant power.

    Attributes:
        total_active_power: Active energy in kWh.
        avg_active_power: Mean active power in kW.
        max_active_power: Reading with the highest active power.
        total_apparent_power: Apparent energy in kVAh.
        avg_apparent_power: Mean apparent power in kVA.
        max_apparent_power: Reading with the highest apparent power.
        min_voltage: Reading with the lowest voltage.
        max_voltage: Reading with the highest voltage.
        avg_voltage: Mean voltage in volts.
    """

    model_config = {"frozen": True}

    total_active_power: float
    avg_active_power: float
    max_active_power: PowerEvent

    total_apparent_power: float
    avg_apparent_power: float
    max_apparent_power: PowerEvent

    min_voltage: PowerEvent
    max_voltage: PowerEvent
    avg_voltage: float


class PowerInterval(BaseModel):
    """Statistics for the readings of a single calendar day."""

    model_config = {"frozen": True}

    date: dt.date
    stats: PowerStats


class PowerBlackout(BaseModel):
    """An inferred outage.

    Attributes:
        timestamp: First missing minute (one minute after the last reading
            before the gap).
        duration: Time between the readings on either side of the gap.
    """

    model_config = {"frozen": True}

    timestamp: dt.datetime
    duration: dt.timedelta


class AnalysisReport(BaseModel):
    """Everything derived from one logger file.

    ``overall`` is ``None`` when the file holds no readings.
    """

    model_config = {"frozen": True}

    event_count: int
    overall: PowerStats | None
    daily: list[PowerInterval]
    blackouts: list[PowerBlackout]
