"""Hex accumulator helpers.

Parts are concatenated as hex text and only turned back into bytes once
the body is complete, so binary payloads never mix with raw text.
"""

from __future__ import annotations

CRLF = "\r\n"


def hex_text(text: str) -> str:
    """UTF-8 encode ``text`` and return its hex form."""
    return text.encode("utf-8").hex()


def hex_bytes(data: bytes | bytearray | memoryview) -> str:
    """Hex form of raw bytes, no text decoding involved."""
    return bytes(data).hex()


def decode_hex(hex_body: str) -> bytes:
    return bytes.fromhex(hex_body)


def boundary_segment(boundary: str, closing: bool = False) -> str:
    """
    Encode a boundary delimiter as hex text.

    Opening delimiters end with CRLF, the closing delimiter ends with
    ``--`` and nothing after it.
    """
    tail = "--" if closing else CRLF
    return hex_text(f"--{boundary}{tail}")
