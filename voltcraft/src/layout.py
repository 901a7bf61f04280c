"""
Voltcraft logger file layout -- single source of truth.

Defines the markers, record sizes and per-field definitions (offset, width,
divisor, unit) of the binary log written by the meter. The file is a
3-byte magic marker, one 5-byte base timestamp record, a run of 5-byte
power records sampled once a minute, and a 4-byte end marker::

    offset 0..3   magic marker: E0 C5 EA
    offset 3..8   base record: month day year-2000 hour minute
    offset 8..N   power records: voltage(2B BE) current(2B BE) pf(1B)
    offset N..N+4 end marker: FF FF FF FF

All multi-byte integers are unsigned big-endian. Scaled fields are divided
by their divisor after the integer decode.

CHANGELOG:
- 2026-10-18: Initial creation

TODO:
- None
"""

from __future__ import annotations

from dataclasses import dataclass

# ---------------------------------------------------------------------------
# Markers and record sizes
# ---------------------------------------------------------------------------

MAGIC_NUMBER: bytes = bytes((0xE0, 0xC5, 0xEA))
"""Header every valid logger file starts with."""

END_OF_DATA: bytes = bytes((0xFF, 0xFF, 0xFF, 0xFF))
"""Sentinel following the last power record."""

TIMESTAMP_RECORD_SIZE = 5
POWER_RECORD_SIZE = 5

YEAR_BASE = 2000
"""The year byte is an offset from this year."""

# ---------------------------------------------------------------------------
# Field definitions
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class FieldDef:
    """Definition of a single fixed-width field inside a record.

    Attributes:
        name: Unique identifier, also the attribute name on the decoded value.
        offset: Byte offset relative to the start of the record.
        width: Field width in bytes (1 or 2).
        divisor: The raw unsigned integer is divided by this to obtain the
            engineering value. ``1`` for unscaled fields.
        unit: Engineering unit string (e.g. ``"V"``, ``"A"``).
        description: Free-text description of the field.
    """

    name: str
    offset: int
    width: int
    divisor: float = 1
    unit: str = ""
    description: str = ""

    def __post_init__(self) -> None:  # noqa: D105
        if self.width not in (1, 2):
            msg = f"Field '{self.name}': unsupported width {self.width}"
            raise ValueError(msg)
        if self.divisor <= 0:
            msg = f"Field '{self.name}': divisor must be > 0"
            raise ValueError(msg)


TIMESTAMP_FIELDS: list[FieldDef] = [
    FieldDef(name="month", offset=0, width=1, description="Month (1-12)"),
    FieldDef(name="day", offset=1, width=1, description="Day of month (1-31)"),
    FieldDef(name="year", offset=2, width=1, description="Years since 2000"),
    FieldDef(name="hour", offset=3, width=1, description="Hour (0-23)"),
    FieldDef(name="minute", offset=4, width=1, description="Minute (0-59)"),
]
"""Base timestamp record, one unsigned byte per calendar field."""

POWER_FIELDS: list[FieldDef] = [
    FieldDef(
        name="voltage",
        offset=0,
        width=2,
        divisor=10.0,
        unit="V",
        description="RMS voltage in tenths of a volt",
    ),
    FieldDef(
        name="current",
        offset=2,
        width=2,
        divisor=1000.0,
        unit="A",
        description="RMS current in milliamperes",
    ),
    FieldDef(
        name="power_factor",
        offset=4,
        width=1,
        divisor=100.0,
        unit="",
        description="cos(phi) in hundredths",
    ),
]
"""One power record, sampled once per minute."""

POWER_FIELDS_BY_NAME: dict[str, FieldDef] = {f.name: f for f in POWER_FIELDS}
"""Flat lookup of every power record field by name."""
