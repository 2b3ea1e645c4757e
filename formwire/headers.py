from __future__ import annotations

_UNSAFE = str.maketrans("", "", "\r\n\x00")


def sanitize_header(name: str, value: str) -> tuple[str, str]:
    """Drop CR, LF and NUL so one header can never turn into several."""
    return name.translate(_UNSAFE), value.translate(_UNSAFE)
