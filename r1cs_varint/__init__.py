# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
Variable-length integer codecs for R1CS serialization.

Two codecs share one wire shape (7-bit groups, least significant first,
MSB set while more bytes follow):

- VarInt: unsigned 64-bit values
- SignedVarInt: signed 64-bit values, zig-zag mapped before grouping

Example usage:
    from r1cs_varint import encode_signed, decode_signed, VarIntReader

    data = encode_signed(-8193)          # b"\\x81\\x80\\x01"
    value, consumed = decode_signed(data)

    reader = VarIntReader(buffer)
    count = reader.read_unsigned()
    terms = reader.read_signed_array(count)
"""

from .errors import VarIntError, ParseError, ValueRangeError
from .groups import MAX_ENCODED_LEN, U64_MAX
from .signed import (
    I64_MIN,
    I64_MAX,
    zigzag_encode,
    zigzag_decode,
    encode_signed,
    decode_signed,
    signed_encoded_len,
)
from .stream import (
    VarIntReader,
    VarIntWriter,
    encode_unsigned_seq,
    decode_unsigned_seq,
    encode_signed_seq,
    decode_signed_seq,
)
from .varint import encode_unsigned, decode_unsigned, unsigned_encoded_len

__version__ = "0.1.0"

__all__ = [
    # Errors
    "VarIntError",
    "ParseError",
    "ValueRangeError",
    # Limits
    "U64_MAX",
    "I64_MIN",
    "I64_MAX",
    "MAX_ENCODED_LEN",
    # Unsigned
    "encode_unsigned",
    "decode_unsigned",
    "unsigned_encoded_len",
    # Signed
    "zigzag_encode",
    "zigzag_decode",
    "encode_signed",
    "decode_signed",
    "signed_encoded_len",
    # Buffers
    "VarIntReader",
    "VarIntWriter",
    "encode_unsigned_seq",
    "decode_unsigned_seq",
    "encode_signed_seq",
    "decode_signed_seq",
]
