#!/usr/bin/env python3
"""Size arithmetic for framed netstrings."""
from __future__ import annotations

import logging

from pnetstring.constants import MAX_LENGTH
from pnetstring.errors import DecodeErrorCode, NetstringLengthError

logger = logging.getLogger(__name__)


def digit_count(value: int) -> int:
    """
    Count the decimal digits needed to write a non-negative integer.

    Args:
        value: Non-negative integer.

    Returns:
        Number of digits, 1 for zero.
    """
    digits = 1
    while value >= 10:
        value //= 10
        digits += 1
    return digits


def check_max_length(max_length: int) -> None:
    """Reject a per-call ceiling that is negative or above MAX_LENGTH."""
    if not 0 <= max_length <= MAX_LENGTH:
        raise ValueError(f"max_length must be between 0 and {MAX_LENGTH}, got {max_length}")


def validate_length(length: int, max_length: int = MAX_LENGTH) -> None:
    """
    Check that a payload length can be framed.

    Args:
        length: Payload length in bytes.
        max_length: Ceiling to enforce, at most MAX_LENGTH.

    Raises:
        NetstringLengthError: If length is negative or above max_length.
        ValueError: If max_length itself is out of range.
    """
    check_max_length(max_length)
    if length < 0:
        raise NetstringLengthError(f"Negative length {length}", length)
    if length > max_length:
        logger.debug("Rejecting length %d above limit %d", length, max_length)
        raise NetstringLengthError(
            f"Length {length} exceeds limit {max_length}",
            length,
            DecodeErrorCode.TOO_LONG,
        )


def framed_size(length: int) -> int:
    """
    Compute the exact size of a netstring holding length payload bytes.

    The size is the length prefix digits, the colon, the payload and the
    comma. framed_size(0) is 3 (b"0:,") and framed_size(10) is 14.

    Args:
        length: Payload length in bytes, at most MAX_LENGTH.

    Returns:
        Total number of bytes in the framed netstring.

    Raises:
        NetstringLengthError: If length is negative or above MAX_LENGTH.
    """
    validate_length(length)
    return digit_count(length) + 1 + length + 1
