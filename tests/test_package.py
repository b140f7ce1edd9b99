#!/usr/bin/env python3
"""Unit tests for the public package interface."""
import pnetstring
from pnetstring.errors import DecodeErrorCode


def test_public_names_exported() -> None:
    """Test every name in __all__ is importable from the package."""
    for name in pnetstring.__all__:
        assert hasattr(pnetstring, name)


def test_error_codes_have_descriptions() -> None:
    """Test each error code carries a human-readable description."""
    assert len(DecodeErrorCode) == 6
    for code in DecodeErrorCode:
        assert code.description == code.value


def test_end_to_end() -> None:
    """Test encoding with the accumulator and decoding with chained views."""
    buf = pnetstring.NetstringBuffer()
    buf.append(b"3:foo,")
    buf.append(b"")
    result = pnetstring.decode(buf.getvalue())
    assert bytes(result.payload) == b"3:foo,"
    assert bytes(pnetstring.decode(result.remaining).payload) == b""
    assert pnetstring.EMPTY_NETSTRING == pnetstring.encode_new(b"")
