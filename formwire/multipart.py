from __future__ import annotations

import enum
import logging
from typing import NamedTuple

from formwire.boundary import boundary_param, choose_boundary, validate_boundary
from formwire.encoding import CRLF, boundary_segment, decode_hex, hex_bytes, hex_text
from formwire.errors import InvalidArgumentError, InvalidStateError
from formwire.models import Request

log = logging.getLogger(__name__)

TEXT_PART_MESSAGE = "Name, value and contentType cannot be null or empty"
FILE_PART_MESSAGE = "Name, file, mimeType, and fileName cannot be null or empty"

DEFAULT_MEDIA_TYPE = "multipart/mixed"
DEFAULT_METHOD = "POST"

_BINARY_TYPES = (bytes, bytearray, memoryview)
_FALLBACK_FILE_TYPE = "application/octet-stream"


class BuilderState(enum.Enum):
    BUILDING = "building"
    FINALIZED = "finalized"


class Part(NamedTuple):
    """One field or file contributed to the body."""

    name: str
    value: str | bytes
    content_type: str
    file_name: str | None = None

    @property
    def is_file(self) -> bool:
        return self.file_name is not None


def _is_blank(value: str | None) -> bool:
    if value is None:
        return True
    if not isinstance(value, str):
        raise TypeError(f"Expected str, got {type(value).__name__}")
    return not value.strip()


class MultipartBuilder:
    """
    Accumulates parts in call order and produces a finished :class:`Request`.

    Every fragment is appended to the body as hex text; the hex is decoded
    to bytes once, in :meth:`finalize`. A builder is single use: after
    ``finalize`` any further call raises :class:`InvalidStateError`.

    Args:
        boundary: Explicit boundary token. A random 22 character token is
            generated when omitted.
        media_type: Media type declared in the ``Content-Type`` header.
        strict_empty_files: Reject empty file bodies the same way blank
            text values are rejected. By default only ``None`` is refused.
    """

    def __init__(
        self,
        boundary: str | None = None,
        media_type: str = DEFAULT_MEDIA_TYPE,
        strict_empty_files: bool = False,
    ) -> None:
        self._boundary = validate_boundary(boundary) if boundary is not None else choose_boundary()
        self._media_type = media_type
        self.strict_empty_files = strict_empty_files
        self._method: str | None = None
        self._parts: list[Part] = []
        self._chunks: list[str] = []
        self._state = BuilderState.BUILDING
        self._request = Request(headers=[("Content-Type", self.content_type)])

    @property
    def boundary(self) -> str:
        return self._boundary

    @property
    def media_type(self) -> str:
        return self._media_type

    @property
    def content_type(self) -> str:
        return f"{self._media_type}; {boundary_param(self._boundary)}"

    @property
    def method(self) -> str | None:
        return self._method

    @property
    def state(self) -> BuilderState:
        return self._state

    @property
    def parts(self) -> tuple[Part, ...]:
        return tuple(self._parts)

    @property
    def hex_body(self) -> str:
        return "".join(self._chunks)

    @property
    def request(self) -> Request:
        return self._request

    def _ensure_building(self) -> None:
        if self._state is not BuilderState.BUILDING:
            raise InvalidStateError("Builder has already been finalized")

    def set_method(self, method: str) -> MultipartBuilder:
        self._ensure_building()
        self._method = method
        return self

    def add_part(
        self,
        name: str,
        value: str | bytes | bytearray | memoryview,
        content_type: str,
        file_name: str | None = None,
    ) -> MultipartBuilder:
        """
        Add a text field, or a file when ``value`` is bytes-like or a
        ``file_name`` is given.
        """
        if isinstance(value, _BINARY_TYPES) or file_name is not None:
            return self.add_file(name, value, content_type, file_name)

        self._ensure_building()
        if value is not None and not isinstance(value, str):
            raise TypeError(f"Unsupported value type for text part: {type(value).__name__}")
        if _is_blank(name) or _is_blank(value) or _is_blank(content_type):
            raise InvalidArgumentError(TEXT_PART_MESSAGE)

        self._chunks.append(boundary_segment(self._boundary))
        self._chunks.append(hex_text(f'Content-Disposition: form-data; name="{name}"; {CRLF}'))
        self._chunks.append(hex_text(f"Content-Type: {content_type}; {CRLF}{CRLF}"))
        self._chunks.append(hex_text(f"{value}{CRLF}"))
        self._parts.append(Part(name, value, content_type))
        log.debug("Added text part %r (%s, %d chars)", name, content_type, len(value))
        return self

    def add_file(
        self,
        name: str,
        file: bytes | bytearray | memoryview,
        mime_type: str,
        file_name: str,
    ) -> MultipartBuilder:
        self._ensure_building()
        if _is_blank(name) or file is None or _is_blank(mime_type) or _is_blank(file_name):
            raise InvalidArgumentError(FILE_PART_MESSAGE)
        if not isinstance(file, _BINARY_TYPES):
            raise TypeError(f"Unsupported file type for file part: {type(file).__name__}")
        content = bytes(file)
        if self.strict_empty_files and not content:
            raise InvalidArgumentError(FILE_PART_MESSAGE)

        self._chunks.append(boundary_segment(self._boundary))
        self._chunks.append(
            hex_text(f'Content-Disposition: form-data; name="{name}"; filename="{file_name}" {CRLF}')
        )
        self._chunks.append(hex_text(f"Content-Type: {mime_type}; {CRLF}{CRLF}"))
        self._chunks.append(hex_bytes(content))
        self._chunks.append(hex_text(CRLF))
        self._parts.append(Part(name, content, mime_type, file_name))
        log.debug("Added file part %r (%s, %s, %d bytes)", name, file_name, mime_type, len(content))
        return self

    def finalize(self) -> Request:
        """Close the body and return the finished request."""
        self._ensure_building()
        self._chunks.append(boundary_segment(self._boundary, closing=True))
        body = decode_hex(self.hex_body)

        request = self._request
        request.set_body(body)
        request.set_header("Connection", "keep-alive")
        request.set_header("Content-Length", str(len(body)))
        request.set_method(self._method if self._method is not None else DEFAULT_METHOD)
        self._state = BuilderState.FINALIZED
        log.debug(
            "Finalized %s request with %d part(s), %d bytes",
            request.method,
            len(self._parts),
            len(body),
        )
        return request


def build_multipart(
    data: dict[str, str] | None,
    files: dict[str, bytes | tuple[str, bytes, str | None]],
    boundary: str | None = None,
) -> Request:
    """
    One-shot helper around :class:`MultipartBuilder`.

    Text fields from ``data`` go first, typed ``text/plain``. Each ``files``
    entry is either raw bytes, sent under its field name as
    ``application/octet-stream``, or a ``(file_name, content, mime_type)``
    triple whose mime type may be ``None`` for the same fallback.
    """
    builder = MultipartBuilder(boundary=boundary)
    for name, value in (data or {}).items():
        builder.add_part(name, value, "text/plain")
    for name, spec in files.items():
        if isinstance(spec, _BINARY_TYPES):
            file_name, content, mime_type = name, spec, None
        else:
            file_name, content, mime_type = spec
        builder.add_file(name, content, mime_type or _FALLBACK_FILE_TYPE, file_name)
    return builder.finalize()
