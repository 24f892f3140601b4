# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
Exceptions raised by the varint codecs.

All of them derive from ValueError so callers that only catch
ValueError keep working.
"""

from typing import Optional


class VarIntError(ValueError):
    """Base exception for varint errors."""
    pass


class ParseError(VarIntError):
    """
    Malformed or truncated varint input.

    Attributes:
        offset: Position in the input where the value started, if known
    """

    def __init__(self, message: str, offset: Optional[int] = None):
        super().__init__(message)
        self.offset = offset


class ValueRangeError(VarIntError):
    """Value outside the range a codec can encode."""
    pass
