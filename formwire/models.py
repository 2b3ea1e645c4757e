from __future__ import annotations

from collections.abc import Iterable

from formwire.headers import sanitize_header


class Request:
    """
    Finished request descriptor handed to the transport.

    Headers keep their insertion order; lookups are case-insensitive.
    """

    def __init__(
        self,
        method: str | None = None,
        headers: Iterable[tuple[str, str]] | None = None,
        body: bytes = b"",
    ) -> None:
        self.method = method
        self.raw_headers: list[tuple[str, str]] = []
        for name, value in headers or ():
            self.set_header(name, value)
        self._body = body

    def set_method(self, method: str) -> None:
        self.method = method

    def set_header(self, name: str, value: str) -> None:
        name, value = sanitize_header(name, value)
        key = name.lower()
        for i, (existing, _) in enumerate(self.raw_headers):
            if existing.lower() == key:
                self.raw_headers[i] = (name, value)
                return
        self.raw_headers.append((name, value))

    def get_header(self, name: str, default: str | None = None) -> str | None:
        return self.headers.get(name.lower(), default)

    @property
    def headers(self) -> dict[str, str]:
        return {name.lower(): value for name, value in self.raw_headers}

    def set_body(self, body: bytes) -> None:
        self._body = bytes(body)

    @property
    def body(self) -> bytes:
        return self._body

    content = body

    @property
    def body_size(self) -> int:
        return len(self._body)

    @property
    def text(self) -> str:
        return self._body.decode("utf-8", errors="replace")

    def __repr__(self) -> str:
        return f"<Request [{self.method}] {len(self._body)} bytes>"
