#!/usr/bin/env python3
"""
Strict netstring decoding.

A netstring is ``<length>:<payload>,`` where length is ASCII decimal digits
with no leading zero (except the single digit "0"). Decoding never copies
the payload: the result holds memoryview slices of the caller's buffer, so
the payload is valid for as long as that buffer is.

The checks run in a fixed order so that each malformed input maps to one
DecodeErrorCode:

1. no digits at the start -> NO_LENGTH
2. two or more digits starting with "0" -> LEADING_ZERO
3. digits run to the end, or are followed by something other than ":"
   -> NO_COLON
4. declared length above the ceiling -> TOO_LONG
5. fewer than length + 1 bytes after the colon -> TOO_SHORT
6. byte after the payload is not "," -> NO_COMMA

Note: while a memoryview returned from here is alive, a bytearray it was
taken from cannot be resized. Release the views (or copy the payload with
bytes()) before appending to the source buffer.
"""
from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import NamedTuple, NoReturn

from pnetstring.constants import COLON, COMMA, MAX_LENGTH, MAX_LENGTH_DIGITS
from pnetstring.errors import DecodeErrorCode, NetstringDecodeError
from pnetstring.size import check_max_length
from pnetstring.views import Buffer, byte_view

logger = logging.getLogger(__name__)

_DIGIT_ZERO: int = ord("0")
_DIGIT_NINE: int = ord("9")


class DecodedNetstring(NamedTuple):
    """
    One decoded netstring.

    Attributes:
        payload: View of the payload bytes inside the original buffer.
        remaining: View of the bytes following the terminating comma.
        end: Offset just past the comma, relative to the decoded buffer.
    """

    payload: memoryview
    remaining: memoryview
    end: int


def _fail(code: DecodeErrorCode, offset: int) -> NoReturn:
    logger.debug("Netstring rejected: %s at offset %d", code.name, offset)
    raise NetstringDecodeError(code, offset)


def decode(
    buffer: Buffer, offset: int = 0, *, max_length: int = MAX_LENGTH
) -> DecodedNetstring:
    """
    Decode the netstring starting at offset in buffer.

    Args:
        buffer: Bytes-like object holding one or more netstrings.
        offset: Position of the first byte of the length prefix.
        max_length: Largest payload length to accept, at most MAX_LENGTH.

    Returns:
        DecodedNetstring with the payload view, the remaining view and the
        offset just past the comma. Pass remaining (or buffer with the new
        offset) back to decode() to read the next packed netstring.

    Raises:
        NetstringDecodeError: If the bytes at offset are not a valid
            netstring. No partial result is produced.
        ValueError: If offset or max_length is out of range.

    >>> bytes(decode(b"5:hello,more").payload)
    b'hello'
    """
    check_max_length(max_length)
    view = byte_view(buffer)
    size = len(view)
    if not 0 <= offset <= size:
        raise ValueError(f"offset {offset} outside buffer of {size} bytes")

    pos = offset
    length = 0
    while pos < size and _DIGIT_ZERO <= view[pos] <= _DIGIT_NINE:
        # Digits past MAX_LENGTH_DIGITS are counted but not accumulated.
        if pos - offset < MAX_LENGTH_DIGITS:
            length = length * 10 + (view[pos] - _DIGIT_ZERO)
        pos += 1
    digits = pos - offset

    if digits == 0:
        _fail(DecodeErrorCode.NO_LENGTH, offset)
    if digits > 1 and view[offset] == _DIGIT_ZERO:
        _fail(DecodeErrorCode.LEADING_ZERO, offset)
    if pos == size or view[pos] != COLON:
        _fail(DecodeErrorCode.NO_COLON, pos)
    if digits > MAX_LENGTH_DIGITS or length > max_length:
        _fail(DecodeErrorCode.TOO_LONG, offset)

    start = pos + 1
    comma = start + length
    if size - start < length + 1:
        _fail(DecodeErrorCode.TOO_SHORT, size)
    if view[comma] != COMMA:
        _fail(DecodeErrorCode.NO_COMMA, comma)

    return DecodedNetstring(view[start:comma], view[comma + 1 :], comma + 1)


def iter_netstrings(
    buffer: Buffer, *, max_length: int = MAX_LENGTH
) -> Iterator[memoryview]:
    """
    Yield the payload of every netstring packed back to back in buffer.

    Args:
        buffer: Bytes-like object holding zero or more netstrings.
        max_length: Largest payload length to accept, at most MAX_LENGTH.

    Yields:
        Payload views, in order.

    Raises:
        NetstringDecodeError: At the first malformed netstring. Payloads
            before it have already been yielded.
    """
    view = byte_view(buffer)
    pos = 0
    while pos < len(view):
        decoded = decode(view, pos, max_length=max_length)
        yield decoded.payload
        pos = decoded.end


def decode_all(buffer: Buffer, *, max_length: int = MAX_LENGTH) -> list[bytes]:
    """
    Decode every netstring in buffer and copy out the payloads.

    Args:
        buffer: Bytes-like object holding zero or more netstrings.
        max_length: Largest payload length to accept, at most MAX_LENGTH.

    Returns:
        List of payloads as bytes.

    Raises:
        NetstringDecodeError: If any netstring is malformed.
    """
    return [bytes(payload) for payload in iter_netstrings(buffer, max_length=max_length)]
