#!/usr/bin/env python3
"""Pytest fixtures for pnetstring tests.

Provides the literal inputs used across the decoder tests and a fresh
accumulator for encoder tests.
"""

import pytest

from pnetstring.buffer import NetstringBuffer


@pytest.fixture
def netstring_buffer() -> NetstringBuffer:
    """Create an empty NetstringBuffer for testing."""
    return NetstringBuffer()


@pytest.fixture
def packed_netstrings() -> bytes:
    """Three netstrings concatenated, the middle one empty."""
    return b"3:foo,0:,3:bar,"
