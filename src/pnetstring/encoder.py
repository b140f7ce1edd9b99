#!/usr/bin/env python3
"""
Netstring encoding.

Format: <length>:<payload>, where length is the payload size in ASCII
decimal digits with no leading zeros. Example: b"12:hello world!," frames
the 12-byte payload b"hello world!", and an empty payload frames as b"0:,".
"""
from __future__ import annotations

import logging

from pnetstring.constants import EMPTY_NETSTRING, MAX_LENGTH
from pnetstring.errors import NetstringLengthError
from pnetstring.size import validate_length
from pnetstring.views import Buffer, byte_view

logger = logging.getLogger(__name__)


def frame_parts(
    payload: Buffer | None, length: int | None = None, max_length: int = MAX_LENGTH
) -> tuple[bytes, memoryview]:
    """
    Split a payload into the length prefix and the bytes to frame.

    Args:
        payload: Raw bytes to frame, or None for an empty payload.
        length: Number of leading payload bytes to frame, default all.
        max_length: Ceiling on the framed length, at most MAX_LENGTH.

    Returns:
        Tuple of the prefix (digits and colon) and a view of the body.

    Raises:
        NetstringLengthError: If length is negative, larger than the
            payload, or above max_length.
    """
    view = byte_view(b"" if payload is None else payload)
    if length is None:
        length = len(view)
    elif length > len(view):
        logger.debug("Length %d exceeds payload of %d bytes", length, len(view))
        raise NetstringLengthError(
            f"Length {length} exceeds payload of {len(view)} bytes", length
        )
    validate_length(length, max_length)
    return f"{length}:".encode("ascii"), view[:length]


def encode_new(
    payload: Buffer | None, length: int | None = None, *, max_length: int = MAX_LENGTH
) -> bytes:
    """
    Encode raw bytes as a newly allocated netstring.

    Args:
        payload: Raw bytes to frame. May be None when length is 0 or omitted.
        length: Number of leading payload bytes to frame, default all.
        max_length: Ceiling on the framed length, at most MAX_LENGTH.

    Returns:
        Netstring-encoded bytes in format "<length>:<payload>,".

    Raises:
        NetstringLengthError: If the length cannot be framed.

    >>> encode_new(b"hello world!", 5)
    b'5:hello,'
    """
    prefix, body = frame_parts(payload, length, max_length)
    if not body:
        return EMPTY_NETSTRING
    return b"".join((prefix, body, b","))


def encode_str(text: str, encoding: str = "utf-8", *, max_length: int = MAX_LENGTH) -> bytes:
    """
    Encode text and frame the result as a netstring.

    Args:
        text: String to frame.
        encoding: Codec used to turn text into bytes.
        max_length: Ceiling on the encoded length, at most MAX_LENGTH.

    Returns:
        Netstring-encoded bytes.
    """
    return encode_new(text.encode(encoding), max_length=max_length)
