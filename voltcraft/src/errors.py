"""
Exception hierarchy for decoding and analysing Voltcraft logger data.

Every error is terminal for the operation that raises it: the decoder never
returns a partial list of readings and the statistics functions never
return a best-effort aggregate.

CHANGELOG:
- 2026-10-18: Initial creation

TODO:
- None
"""

from __future__ import annotations


class VoltcraftError(Exception):
    """Base class for all Voltcraft decoding and statistics errors."""


class ReadFailure(VoltcraftError):
    """The byte source (e.g. a logger file on disk) could not be read."""


class InvalidFormat(VoltcraftError, ValueError):
    """The buffer is not a Voltcraft logger file or its header is corrupt."""


class Truncated(VoltcraftError, ValueError):
    """A fixed-width read would run past the end of the buffer.

    Attributes:
        offset: Start offset of the attempted read.
        width: Number of bytes requested.
        length: Total length of the buffer.
    """

    def __init__(self, offset: int, width: int, length: int) -> None:
        self.offset = offset
        self.width = width
        self.length = length
        super().__init__(
            f"read of {width} byte(s) at offset {offset} exceeds "
            f"buffer length {length}"
        )


OutOfBounds = Truncated


class EmptyInput(VoltcraftError, ValueError):
    """Statistics were requested over an empty reading sequence."""
