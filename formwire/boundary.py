from __future__ import annotations

import re
import secrets
import string

from formwire.errors import InvalidArgumentError

BOUNDARY_LENGTH = 22
_ALPHABET = string.ascii_letters + string.digits

# RFC 2046 bchars, 1-70 characters, last one not a space.
_BOUNDARY_RE = re.compile(r"[0-9A-Za-z'()+_,\-./:=? ]{0,69}[0-9A-Za-z'()+_,\-./:=?]")

# bchars that are also RFC 2045 token characters and need no quoting.
_TOKEN_RE = re.compile(r"[0-9A-Za-z'+_.\-]+")


def choose_boundary(length: int = BOUNDARY_LENGTH) -> str:
    """Random alphanumeric boundary token."""
    return "".join(secrets.choice(_ALPHABET) for _ in range(length))


def validate_boundary(boundary: str) -> str:
    if not isinstance(boundary, str) or not _BOUNDARY_RE.fullmatch(boundary):
        raise InvalidArgumentError(f"Invalid multipart boundary: {boundary!r}")
    return boundary


def boundary_param(boundary: str) -> str:
    """
    Render the ``boundary=`` parameter for a Content-Type header.

    Tokens holding spaces or tspecials such as ``:`` or ``=`` are quoted,
    otherwise header parsers cut the boundary short.
    """
    if _TOKEN_RE.fullmatch(boundary):
        return f"boundary={boundary}"
    return f'boundary="{boundary}"'
