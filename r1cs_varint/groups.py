# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
7-bit group encoding shared by the unsigned and signed codecs.

Each octet carries one 7-bit group of the magnitude in bits 0-6, least
significant group first. Bit 7 is set when another octet follows.
"""

from typing import Tuple

from .errors import ParseError

CONTINUATION_BIT = 0x80
GROUP_MASK = 0x7F
GROUP_BITS = 7

U64_MAX = (1 << 64) - 1

# ceil(64 / 7)
MAX_ENCODED_LEN = 10


def encode_groups(magnitude: int) -> bytes:
    """
    Split a non-negative magnitude into continuation-tagged 7-bit groups.

    Args:
        magnitude: Non-negative integer

    Returns:
        At least one byte; the last one has the continuation bit clear
    """
    result = bytearray()
    while magnitude > GROUP_MASK:
        result.append((magnitude & GROUP_MASK) | CONTINUATION_BIT)
        magnitude >>= GROUP_BITS
    result.append(magnitude)
    return bytes(result)


def decode_groups(data: bytes, offset: int = 0) -> Tuple[int, int]:
    """
    Reassemble a magnitude from continuation-tagged 7-bit groups.

    Args:
        data: Bytes containing the encoded value
        offset: Starting offset in data

    Returns:
        Tuple of (magnitude, number of bytes consumed)

    Raises:
        ParseError: If the data ends before the terminating byte, or the
            magnitude does not fit in 64 bits, or offset is negative
    """
    if offset < 0:
        raise ParseError(f"Varint decode: negative offset {offset}", offset)

    start = offset
    value = 0
    shift = 0

    while True:
        if offset >= len(data):
            raise ParseError("Varint decode: unexpected end of data", start)

        byte = data[offset]
        offset += 1
        value |= (byte & GROUP_MASK) << shift

        # Zero padding groups are tolerated, only set bits count.
        if value > U64_MAX:
            raise ParseError("Varint decode: value too large", start)

        if not (byte & CONTINUATION_BIT):
            break

        shift += GROUP_BITS

    return value, offset - start


def encoded_len(magnitude: int) -> int:
    """Number of bytes encode_groups() produces for a magnitude."""
    return max(1, -(-magnitude.bit_length() // GROUP_BITS))
