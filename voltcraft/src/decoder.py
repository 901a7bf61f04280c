"""
Decoder for the binary log files written by Voltcraft energy loggers.

Validates the magic marker, decodes the base timestamp and walks the fixed
5-byte power records until the end-of-data sentinel. Each record becomes a
PowerEvent timestamped one minute after the previous one; the records carry
no timestamp of their own.

Decoding is pure: it works over an in-memory buffer and never touches the
filesystem. ``VoltcraftData.from_file`` is the only I/O and just reads the
whole file into memory.

Every fixed-width read is bounds-checked. A read past the end of the buffer
raises ``Truncated`` and no partial list of readings is returned.

CHANGELOG:
- 2026-10-18: Initial creation

TODO:
- None
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta
from pathlib import Path

from voltcraft.src.errors import InvalidFormat, ReadFailure, Truncated
from voltcraft.src.layout import (
    END_OF_DATA,
    MAGIC_NUMBER,
    POWER_FIELDS,
    POWER_RECORD_SIZE,
    TIMESTAMP_FIELDS,
    TIMESTAMP_RECORD_SIZE,
    YEAR_BASE,
    FieldDef,
)
from voltcraft.src.models import PowerEvent

logger = logging.getLogger(__name__)

_SAMPLE_INTERVAL = timedelta(minutes=1)


class VoltcraftData:
    """A raw Voltcraft logger buffer.

    Construction never inspects the content; validation happens in
    :meth:`parse`.

    Args:
        raw_data: Full content of a logger file.

    Usage::

        data = VoltcraftData.from_file("/data/A0000001.BIN")
        events = data.parse()
    """

    def __init__(self, raw_data: bytes) -> None:
        self._raw = bytes(raw_data)

    @classmethod
    def from_bytes(cls, buffer: bytes | bytearray | memoryview) -> VoltcraftData:
        """Wrap an in-memory buffer."""
        return cls(bytes(buffer))

    @classmethod
    def from_file(cls, path: str | Path) -> VoltcraftData:
        """Read a logger file fully into memory.

        Raises:
            ReadFailure: If the file cannot be read.
        """
        try:
            raw = Path(path).read_bytes()
        except OSError as exc:
            raise ReadFailure(f"cannot read logger file '{path}': {exc}") from exc
        logger.debug("Read %d bytes from '%s'", len(raw), path)
        return cls(raw)

    @property
    def raw_data(self) -> bytes:
        return self._raw

    def __len__(self) -> int:
        return len(self._raw)

    # -----------------------------------------------------------------------
    # Validation
    # -----------------------------------------------------------------------

    def is_valid(self) -> bool:
        """Return True when the buffer starts with the magic marker.

        Buffers shorter than the marker are simply invalid.
        """
        return self._raw[: len(MAGIC_NUMBER)] == MAGIC_NUMBER

    def is_end_of_data(self, offset: int) -> bool:
        """Return True when the end-of-data sentinel sits at *offset*.

        Raises:
            Truncated: If fewer than four bytes remain at *offset*.
        """
        return self._read(offset, len(END_OF_DATA)) == END_OF_DATA

    # -----------------------------------------------------------------------
    # Parsing
    # -----------------------------------------------------------------------

    def parse(self) -> list[PowerEvent]:
        """Decode every power record in the buffer.

        Returns:
            Readings in emission order, one minute apart, starting at the
            base timestamp. Empty when the sentinel directly follows the
            base timestamp.

        Raises:
            InvalidFormat: If the magic marker is missing or the base
                timestamp is not a real date-time.
            Truncated: If the buffer ends before the end-of-data sentinel.
        """
        if not self.is_valid():
            logger.warning(
                "Invalid header %s (expected %s); not a Voltcraft file",
                self._raw[: len(MAGIC_NUMBER)].hex(),
                MAGIC_NUMBER.hex(),
            )
            raise InvalidFormat("Invalid data (not a Voltcraft file)")

        offset = len(MAGIC_NUMBER)
        start_time = self.decode_timestamp(offset)
        offset += TIMESTAMP_RECORD_SIZE
        logger.debug("Base timestamp %s", start_time.isoformat())

        events: list[PowerEvent] = []
        try:
            while not self.is_end_of_data(offset):
                voltage, current, power_factor = self.decode_power(offset)
                events.append(
                    PowerEvent.from_measurements(
                        timestamp=start_time + len(events) * _SAMPLE_INTERVAL,
                        voltage=voltage,
                        current=current,
                        power_factor=power_factor,
                    )
                )
                offset += POWER_RECORD_SIZE
        except Truncated:
            logger.warning(
                "Buffer truncated after %d record(s) (%d bytes); "
                "end-of-data marker not found",
                len(events),
                len(self._raw),
            )
            raise

        logger.info("Decoded %d power record(s)", len(events))
        return events

    def decode_timestamp(self, offset: int) -> datetime:
        """Decode the 5-byte base timestamp record at *offset*.

        Raises:
            InvalidFormat: If the fields do not form a real date-time.
            Truncated: If the record runs past the end of the buffer.
        """
        values = {f.name: self._read_field(offset, f) for f in TIMESTAMP_FIELDS}
        try:
            return datetime(
                year=YEAR_BASE + values["year"],
                month=values["month"],
                day=values["day"],
                hour=values["hour"],
                minute=values["minute"],
            )
        except ValueError as exc:
            raise InvalidFormat(
                f"Invalid base timestamp {values} at offset {offset}: {exc}"
            ) from exc

    def decode_power(self, offset: int) -> tuple[float, float, float]:
        """Decode the 5-byte power record at *offset*.

        Returns:
            ``(voltage, current, power_factor)`` in V, A and cos(phi).

        Raises:
            Truncated: If the record runs past the end of the buffer.
        """
        voltage, current, power_factor = (
            self._read_field(offset, f) / f.divisor for f in POWER_FIELDS
        )
        return voltage, current, power_factor

    # -----------------------------------------------------------------------
    # Bounds-checked reads
    # -----------------------------------------------------------------------

    def _read(self, offset: int, width: int) -> bytes:
        if offset < 0 or offset + width > len(self._raw):
            raise Truncated(offset, width, len(self._raw))
        return self._raw[offset : offset + width]

    def _read_field(self, record_offset: int, field: FieldDef) -> int:
        """Read *field* of the record at *record_offset* as unsigned big-endian."""
        chunk = self._read(record_offset + field.offset, field.width)
        return int.from_bytes(chunk, "big")
