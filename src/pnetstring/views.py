#!/usr/bin/env python3
"""Bytes-like buffer handling shared by the encoder and decoder."""
from __future__ import annotations

from typing import Union

Buffer = Union[bytes, bytearray, memoryview]


def byte_view(buffer: Buffer) -> memoryview:
    """
    Return a one-dimensional unsigned-byte memoryview over buffer.

    Args:
        buffer: Any object supporting the buffer protocol.

    Returns:
        memoryview with format "B", sharing memory with buffer.

    Raises:
        TypeError: If buffer does not support the buffer protocol.
    """
    view = memoryview(buffer)
    if view.format != "B" or view.ndim != 1:
        view = view.cast("B")
    return view
