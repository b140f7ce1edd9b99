#!/usr/bin/env python3
"""
Growable accumulator of concatenated netstrings.

NetstringBuffer owns a bytearray and appends framed payloads to it in
place, so a list of payloads can be serialized without building every
netstring separately and joining them afterwards.
"""
from __future__ import annotations

from pnetstring.constants import COMMA, MAX_LENGTH
from pnetstring.encoder import frame_parts
from pnetstring.size import check_max_length, framed_size
from pnetstring.views import Buffer


class NetstringBuffer:
    """
    Accumulate netstrings back to back in an owned bytearray.

    Attributes:
        max_length: Ceiling on each appended payload, at most MAX_LENGTH.
    """

    def __init__(self, initial: Buffer = b"", *, max_length: int = MAX_LENGTH) -> None:
        """
        Create a buffer, optionally seeded with already framed bytes.

        Args:
            initial: Bytes to start with. They are copied, not validated.
            max_length: Ceiling on each appended payload.
        """
        check_max_length(max_length)
        self.max_length = max_length
        self._data = bytearray(initial)

    def append(self, payload: Buffer | None, length: int | None = None) -> int:
        """
        Append one framed payload after the existing content.

        Args:
            payload: Raw bytes to frame, or None for an empty payload.
            length: Number of leading payload bytes to frame, default all.

        Returns:
            New total size of the buffer in bytes.

        Raises:
            NetstringLengthError: If the length cannot be framed. The buffer
                is left unchanged.
        """
        prefix, body = frame_parts(payload, length, self.max_length)
        total = len(self._data) + framed_size(len(body))
        self._data += prefix
        self._data += body
        self._data.append(COMMA)
        return total

    def append_str(self, text: str, encoding: str = "utf-8") -> int:
        """Encode text and append it as one netstring; return the new size."""
        return self.append(text.encode(encoding))

    def getvalue(self) -> bytes:
        """Return a copy of the accumulated bytes."""
        return bytes(self._data)

    def clear(self) -> None:
        """Discard all accumulated content."""
        self._data.clear()

    def __bytes__(self) -> bytes:
        return self.getvalue()

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"NetstringBuffer({bytes(self._data)!r})"


def append(
    buffer: NetstringBuffer | None, payload: Buffer | None, length: int | None = None
) -> NetstringBuffer:
    """
    Append a framed payload, creating the buffer on first use.

    Args:
        buffer: Existing accumulator, or None to start a new one.
        payload: Raw bytes to frame, or None for an empty payload.
        length: Number of leading payload bytes to frame, default all.

    Returns:
        The accumulator that now holds the appended netstring.

    Raises:
        NetstringLengthError: If the length cannot be framed.
    """
    if buffer is None:
        buffer = NetstringBuffer()
    buffer.append(payload, length)
    return buffer
