#!/usr/bin/env python3
"""Wire-format constants and size limits for netstrings.

The length ceiling is shared by the encoder and the decoder so that
anything one side produces the other side accepts.
"""

# Maximum digits in the length prefix (9 digits allows up to 999999999 bytes).
# Prefixes with more digits are rejected before being converted to an int.
MAX_LENGTH_DIGITS: int = 9

# Maximum payload length in bytes (just under 1 GB).
# Bounds memory use when the length prefix comes from an untrusted peer.
MAX_LENGTH: int = 10**MAX_LENGTH_DIGITS - 1

# Separator between the length prefix and the payload.
COLON: int = ord(":")

# Terminator following the payload.
COMMA: int = ord(",")

# The empty netstring, produced when framing a zero-length payload.
EMPTY_NETSTRING: bytes = b"0:,"
