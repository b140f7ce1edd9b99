#!/usr/bin/env python3
"""
Error taxonomy for netstring decoding and encoding.

Every decode failure maps to exactly one DecodeErrorCode. The codes are
checked in a fixed order by the decoder, so a given malformed input always
produces the same code:

- NO_LENGTH: no decimal digits at the start of input
- LEADING_ZERO: multi-digit length prefix starting with "0"
- NO_COLON: digit run ends at end of buffer or at a byte other than ":"
- TOO_LONG: declared length exceeds the ceiling
- TOO_SHORT: buffer ends before the payload and comma
- NO_COMMA: byte following the payload is not ","
"""
from __future__ import annotations

import enum


class DecodeErrorCode(enum.Enum):
    """Reason a buffer could not be decoded as a netstring."""

    NO_LENGTH = "no length prefix"
    LEADING_ZERO = "leading zero in length prefix"
    NO_COLON = "missing colon after length prefix"
    TOO_LONG = "declared length exceeds maximum"
    TOO_SHORT = "buffer shorter than declared length"
    NO_COMMA = "missing comma after payload"

    @property
    def description(self) -> str:
        """Human-readable description of the error."""
        return self.value


class NetstringError(Exception):
    """
    Base exception for all netstring errors.

    Raised (through a subclass) when a buffer is not a valid netstring or
    when a payload cannot be framed.
    """

    pass


class NetstringDecodeError(NetstringError):
    """
    Exception raised when a buffer does not start with a valid netstring.

    Attributes:
        code: Which validation step rejected the input.
        offset: Absolute position in the buffer where the problem was found.
    """

    def __init__(self, code: DecodeErrorCode, offset: int) -> None:
        self.code = code
        self.offset = offset
        super().__init__(f"{code.description} at offset {offset}")


class NetstringLengthError(NetstringError, ValueError):
    """
    Exception raised when a payload length cannot be framed or parsed.

    Attributes:
        length: The offending length.
        code: DecodeErrorCode.TOO_LONG when the ceiling is exceeded, else None.
    """

    def __init__(
        self, message: str, length: int, code: DecodeErrorCode | None = None
    ) -> None:
        self.length = length
        self.code = code
        super().__init__(message)
