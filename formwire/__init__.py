import logging

from formwire.boundary import choose_boundary, validate_boundary
from formwire.errors import FormwireError, InvalidArgumentError, InvalidStateError
from formwire.models import Request
from formwire.multipart import (
    FILE_PART_MESSAGE,
    TEXT_PART_MESSAGE,
    BuilderState,
    MultipartBuilder,
    Part,
    build_multipart,
)

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())


def add_stderr_logger(level: int = logging.DEBUG) -> logging.StreamHandler:
    """
    Helper for quickly adding a StreamHandler to the logger. Useful for
    debugging.

    Returns the handler after adding it.
    """
    logger = logging.getLogger(__name__)
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(message)s"))
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.debug("Added a stderr logging handler to logger: %s", __name__)
    return handler


__all__ = [
    "MultipartBuilder",
    "BuilderState",
    "Part",
    "Request",
    "build_multipart",
    "choose_boundary",
    "validate_boundary",
    "FormwireError",
    "InvalidArgumentError",
    "InvalidStateError",
    "TEXT_PART_MESSAGE",
    "FILE_PART_MESSAGE",
    "add_stderr_logger",
]
