"""Tests for formwire.models module."""

from formwire.models import Request


class TestRequest:
    """Tests for the Request descriptor."""

    def test_defaults(self):
        req = Request()
        assert req.method is None
        assert req.raw_headers == []
        assert req.body == b""
        assert req.body_size == 0

    def test_set_method(self):
        req = Request()
        req.set_method("PUT")
        assert req.method == "PUT"

    def test_headers_case_insensitive(self):
        req = Request(headers=[("Content-Type", "text/html")])
        assert req.get_header("content-type") == "text/html"
        assert req.get_header("CONTENT-TYPE") == "text/html"
        assert req.headers["content-type"] == "text/html"

    def test_get_header_default(self):
        assert Request().get_header("X-Missing", "none") == "none"
        assert Request().get_header("X-Missing") is None

    def test_set_header_replaces_existing(self):
        """Test setting an existing header keeps its position."""
        req = Request(headers=[("A", "1"), ("B", "2")])
        req.set_header("a", "3")
        assert req.raw_headers == [("a", "3"), ("B", "2")]

    def test_set_header_appends_new(self):
        req = Request(headers=[("A", "1")])
        req.set_header("B", "2")
        assert req.raw_headers == [("A", "1"), ("B", "2")]

    def test_set_header_sanitizes(self):
        req = Request()
        req.set_header("X-Test", "a\r\nb")
        assert req.get_header("X-Test") == "ab"

    def test_body(self):
        req = Request()
        req.set_body(bytearray(b"\x00\x01hello"))
        assert req.body == b"\x00\x01hello"
        assert req.content == req.body
        assert isinstance(req.body, bytes)
        assert req.body_size == 7

    def test_text(self):
        req = Request(body="Hëllo".encode("utf-8"))
        assert req.text == "Hëllo"

    def test_repr(self):
        req = Request(method="POST", body=b"abc")
        assert repr(req) == "<Request [POST] 3 bytes>"
