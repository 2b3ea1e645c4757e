"""Pytest configuration and fixtures."""

import pytest
from formwire.multipart import MultipartBuilder


@pytest.fixture
def builder():
    """Create a builder with a known boundary."""
    return MultipartBuilder(boundary="AaBbCcDdEeFfGgHhIiJj01")


@pytest.fixture
def png_header():
    """First 16 bytes of a PNG file."""
    return bytes.fromhex("89504e470d0a1a0a0000000d49484452")
