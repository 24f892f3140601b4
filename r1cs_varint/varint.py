# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
Unsigned varint encoding/decoding (LEB128-style, R1CS compatible).

Values are limited to the unsigned 64-bit range.
"""

from typing import Tuple

from .errors import ValueRangeError
from .groups import U64_MAX, decode_groups, encode_groups, encoded_len


def encode_unsigned(value: int) -> bytes:
    """
    Encode an unsigned integer as a varint.

    Args:
        value: Integer in [0, 2**64 - 1]

    Returns:
        Varint-encoded bytes (never empty)

    Raises:
        ValueRangeError: If value is negative or wider than 64 bits
    """
    if value < 0:
        raise ValueRangeError("Cannot encode negative value as varint")
    if value > U64_MAX:
        raise ValueRangeError(f"Cannot encode {value} as varint: exceeds 64 bits")

    return encode_groups(value)


def decode_unsigned(data: bytes, offset: int = 0) -> Tuple[int, int]:
    """
    Decode an unsigned varint from bytes.

    Args:
        data: Bytes containing the varint
        offset: Starting offset in data

    Returns:
        Tuple of (decoded value, number of bytes consumed)

    Raises:
        ParseError: If varint is malformed or truncated
    """
    return decode_groups(data, offset)


def unsigned_encoded_len(value: int) -> int:
    """Length in bytes of encode_unsigned(value)."""
    if value < 0 or value > U64_MAX:
        raise ValueRangeError(f"Cannot encode {value} as varint")
    return encoded_len(value)
