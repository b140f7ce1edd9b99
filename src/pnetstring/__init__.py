"""Netstring encoding and strict decoding.

A netstring frames a byte string as ``<length>:<payload>,``. See
https://cr.yp.to/proto/netstrings.txt for the original description.
"""
from pnetstring.buffer import NetstringBuffer, append
from pnetstring.constants import EMPTY_NETSTRING, MAX_LENGTH, MAX_LENGTH_DIGITS
from pnetstring.decoder import DecodedNetstring, decode, decode_all, iter_netstrings
from pnetstring.encoder import encode_new, encode_str
from pnetstring.errors import (
    DecodeErrorCode,
    NetstringDecodeError,
    NetstringError,
    NetstringLengthError,
)
from pnetstring.size import digit_count, framed_size, validate_length

__all__ = [
    "DecodeErrorCode",
    "DecodedNetstring",
    "EMPTY_NETSTRING",
    "MAX_LENGTH",
    "MAX_LENGTH_DIGITS",
    "NetstringBuffer",
    "NetstringDecodeError",
    "NetstringError",
    "NetstringLengthError",
    "append",
    "decode",
    "decode_all",
    "digit_count",
    "encode_new",
    "encode_str",
    "framed_size",
    "iter_netstrings",
    "validate_length",
]
