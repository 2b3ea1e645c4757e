"""Tests for package logging helpers."""

import logging

import formwire
from formwire.multipart import MultipartBuilder


class TestLogging:
    """Tests for library logging."""

    def test_package_logger_has_null_handler(self):
        handlers = logging.getLogger("formwire").handlers
        assert any(isinstance(h, logging.NullHandler) for h in handlers)

    def test_add_stderr_logger(self):
        logger = logging.getLogger("formwire")
        old_level = logger.level
        handler = formwire.add_stderr_logger()
        try:
            assert isinstance(handler, logging.StreamHandler)
            assert handler in logger.handlers
            assert logger.level == logging.DEBUG
        finally:
            logger.removeHandler(handler)
            logger.setLevel(old_level)

    def test_builder_logs_parts_without_payload(self, caplog):
        """Test debug records name the part but not its content."""
        with caplog.at_level(logging.DEBUG, logger="formwire"):
            MultipartBuilder().add_part("secret", "hunter2", "text/plain").finalize()
        messages = [r.getMessage() for r in caplog.records]
        assert any("'secret'" in m for m in messages)
        assert any("Finalized POST request with 1 part(s)" in m for m in messages)
        assert not any("hunter2" in m for m in messages)
