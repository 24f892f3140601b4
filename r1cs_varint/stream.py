# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
Cursor helpers for buffers holding many consecutive varints.

The whole buffer must be available up front; a value cut off at the end
of the buffer is a ParseError, not a request for more data.
"""

import logging
from typing import Callable, Iterable, List, Tuple

from .errors import ParseError
from .signed import decode_signed, encode_signed
from .varint import decode_unsigned, encode_unsigned

logger = logging.getLogger(__name__)


class VarIntReader:
    """
    Read consecutive varints from an in-memory buffer.

    Example:
        reader = VarIntReader(data)
        num_vars = reader.read_unsigned()
        coeffs = reader.read_signed_array(num_vars)
    """

    def __init__(self, data: bytes, offset: int = 0):
        """
        Args:
            data: Buffer to read from (bytes, bytearray or memoryview)
            offset: Initial cursor position
        """
        if offset < 0 or offset > len(data):
            raise ValueError(f"Offset {offset} outside buffer of {len(data)} bytes")
        self._data = data
        self._pos = offset

    @property
    def position(self) -> int:
        """Return the current cursor position."""
        return self._pos

    @property
    def remaining(self) -> int:
        """Return the number of unread bytes."""
        return len(self._data) - self._pos

    @property
    def at_end(self) -> bool:
        return self._pos >= len(self._data)

    def _read(self, decode: Callable[[bytes, int], Tuple[int, int]]) -> int:
        try:
            value, consumed = decode(self._data, self._pos)
        except ParseError as e:
            logger.debug("varint read failed at offset %d: %s", self._pos, e)
            raise
        self._pos += consumed
        return value

    def read_unsigned(self) -> int:
        """
        Read one unsigned varint and advance the cursor.

        Raises:
            ParseError: If the value is truncated; the cursor is not moved
        """
        return self._read(decode_unsigned)

    def read_signed(self) -> int:
        """
        Read one signed varint and advance the cursor.

        Raises:
            ParseError: If the value is truncated; the cursor is not moved
        """
        return self._read(decode_signed)

    def _read_array(self, read: Callable[[], int], count: int) -> List[int]:
        start = self._pos
        try:
            return [read() for _ in range(count)]
        except ParseError:
            self._pos = start
            raise

    def read_unsigned_array(self, count: int) -> List[int]:
        """
        Read count unsigned varints.

        Raises:
            ParseError: If any value is truncated; the cursor is not moved
        """
        return self._read_array(self.read_unsigned, count)

    def read_signed_array(self, count: int) -> List[int]:
        """
        Read count signed varints.

        Raises:
            ParseError: If any value is truncated; the cursor is not moved
        """
        return self._read_array(self.read_signed, count)


class VarIntWriter:
    """Accumulate varints into a byte buffer."""

    def __init__(self):
        self._buf = bytearray()

    def __len__(self) -> int:
        return len(self._buf)

    def write_unsigned(self, value: int) -> int:
        """Append an unsigned varint. Returns the number of bytes written."""
        encoded = encode_unsigned(value)
        self._buf += encoded
        return len(encoded)

    def write_signed(self, value: int) -> int:
        """Append a signed varint. Returns the number of bytes written."""
        encoded = encode_signed(value)
        self._buf += encoded
        return len(encoded)

    def write_unsigned_array(self, values: Iterable[int]) -> int:
        return sum(self.write_unsigned(v) for v in values)

    def write_signed_array(self, values: Iterable[int]) -> int:
        return sum(self.write_signed(v) for v in values)

    def getvalue(self) -> bytes:
        """Return everything written so far."""
        return bytes(self._buf)


def encode_unsigned_seq(values: Iterable[int]) -> bytes:
    """Encode values as concatenated unsigned varints."""
    writer = VarIntWriter()
    writer.write_unsigned_array(values)
    return writer.getvalue()


def decode_unsigned_seq(data: bytes) -> List[int]:
    """Decode concatenated unsigned varints until the end of data."""
    reader = VarIntReader(data)
    out: List[int] = []
    while not reader.at_end:
        out.append(reader.read_unsigned())
    return out


def encode_signed_seq(values: Iterable[int]) -> bytes:
    """Encode values as concatenated signed varints."""
    writer = VarIntWriter()
    writer.write_signed_array(values)
    return writer.getvalue()


def decode_signed_seq(data: bytes) -> List[int]:
    """Decode concatenated signed varints until the end of data."""
    reader = VarIntReader(data)
    out: List[int] = []
    while not reader.at_end:
        out.append(reader.read_signed())
    return out
