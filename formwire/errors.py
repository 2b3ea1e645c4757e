class FormwireError(Exception):
    """Base error for formwire."""


class InvalidArgumentError(FormwireError, ValueError):
    """Raised when a required part field is blank or a boundary is malformed."""


class InvalidStateError(FormwireError, RuntimeError):
    """Raised when a finalized builder is used again."""
