#!/usr/bin/env python3
"""
Unit tests for netstring encoding.

Tests encode_new and encode_str.
"""
import pytest

from pnetstring.decoder import decode
from pnetstring.encoder import encode_new, encode_str
from pnetstring.errors import DecodeErrorCode, NetstringLengthError


def test_encode_new_produces_correct_format() -> None:
    """Test that encode_new produces correct netstring format."""
    assert encode_new(b"foo") == b"3:foo,"
    assert encode_new(b"hello world!") == b"12:hello world!,"


def test_encode_new_empty_content() -> None:
    """Test encoding empty content produces valid netstring."""
    assert encode_new(b"") == b"0:,"


def test_encode_new_none_payload() -> None:
    """Test a missing payload with zero length frames as empty."""
    assert encode_new(None) == b"0:,"
    assert encode_new(None, 0) == b"0:,"


def test_encode_new_none_payload_with_length() -> None:
    """Test a missing payload cannot be framed with a nonzero length."""
    with pytest.raises(NetstringLengthError, match="exceeds payload"):
        encode_new(None, 3)


def test_encode_new_explicit_length() -> None:
    """Test an explicit length frames only the leading bytes."""
    assert encode_new(b"hello world!", 5) == b"5:hello,"
    assert encode_new(b"hello world!", 12) == b"12:hello world!,"


def test_encode_new_length_exceeds_payload() -> None:
    """Test an explicit length longer than the payload is rejected."""
    with pytest.raises(NetstringLengthError):
        encode_new(b"foo", 4)


def test_encode_new_negative_length() -> None:
    """Test a negative explicit length is rejected."""
    with pytest.raises(NetstringLengthError, match="Negative"):
        encode_new(b"foo", -1)


def test_encode_new_binary_content() -> None:
    """Test encoding binary data with null bytes."""
    assert encode_new(b"\x00\x01\x02\xff") == b"4:\x00\x01\x02\xff,"


def test_encode_new_accepts_bytearray_and_memoryview() -> None:
    """Test any bytes-like payload can be framed."""
    assert encode_new(bytearray(b"abc")) == b"3:abc,"
    assert encode_new(memoryview(b"xabcx")[1:4]) == b"3:abc,"


def test_encode_new_max_length() -> None:
    """Test a tightened ceiling rejects longer payloads."""
    with pytest.raises(NetstringLengthError) as excinfo:
        encode_new(b"hello", max_length=4)
    assert excinfo.value.code is DecodeErrorCode.TOO_LONG


def test_encode_str_utf8() -> None:
    """Test text is framed by its encoded byte length."""
    assert encode_str("café") == b"5:caf\xc3\xa9,"


def test_encode_str_other_encoding() -> None:
    """Test text can be framed using a different codec."""
    assert encode_str("café", "latin-1") == b"4:caf\xe9,"


@pytest.mark.parametrize(
    "payload",
    [b"", b"a", b"0:,", b"x" * 9, b"y" * 10, bytes(range(256))],
)
def test_round_trip(payload: bytes) -> None:
    """Test decoding an encoded payload returns it with the cursor at the end."""
    encoded = encode_new(payload)
    result = decode(encoded)
    assert bytes(result.payload) == payload
    assert result.end == len(encoded)
    assert len(result.remaining) == 0
