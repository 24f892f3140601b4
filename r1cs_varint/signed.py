# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
Signed varint encoding/decoding.

The sign is folded into bit 0 with a zig-zag transform before the value
is split into groups, so small negative numbers stay short:

     0 -> 0,  -1 -> 1,  1 -> 2,  -2 -> 3,  2 -> 4, ...
"""

from typing import Tuple

from .errors import ValueRangeError
from .groups import U64_MAX, decode_groups, encode_groups, encoded_len

I64_MIN = -(1 << 63)
I64_MAX = (1 << 63) - 1


def _check_range(value: int) -> None:
    if value < I64_MIN or value > I64_MAX:
        raise ValueRangeError(
            f"Cannot encode {value} as signed varint: outside 64-bit range"
        )


def zigzag_encode(value: int) -> int:
    """
    Map a signed 64-bit integer to its unsigned zig-zag magnitude.

    Raises:
        ValueRangeError: If value does not fit in a signed 64-bit integer
    """
    _check_range(value)
    # >> on Python ints is arithmetic, so value >> 63 is 0 or -1.
    return (value << 1) ^ (value >> 63)


def zigzag_decode(magnitude: int) -> int:
    """
    Inverse of zigzag_encode().

    Raises:
        ValueRangeError: If magnitude is negative or wider than 64 bits
    """
    if magnitude < 0 or magnitude > U64_MAX:
        raise ValueRangeError(f"Cannot decode {magnitude} as zig-zag: outside 64-bit range")
    if magnitude & 1 == 0:
        return magnitude >> 1
    return -((magnitude >> 1) + 1)


def encode_signed(value: int) -> bytes:
    """
    Encode a signed integer as a zig-zag varint.

    Args:
        value: Integer in [-2**63, 2**63 - 1]

    Returns:
        Varint-encoded bytes (never empty)

    Raises:
        ValueRangeError: If value does not fit in a signed 64-bit integer
    """
    return encode_groups(zigzag_encode(value))


def decode_signed(data: bytes, offset: int = 0) -> Tuple[int, int]:
    """
    Decode a zig-zag varint from bytes.

    Args:
        data: Bytes containing the varint
        offset: Starting offset in data

    Returns:
        Tuple of (decoded value, number of bytes consumed)

    Raises:
        ParseError: If varint is malformed or truncated
    """
    magnitude, consumed = decode_groups(data, offset)
    return zigzag_decode(magnitude), consumed


def signed_encoded_len(value: int) -> int:
    """Length in bytes of encode_signed(value)."""
    return encoded_len(zigzag_encode(value))
