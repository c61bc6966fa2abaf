"""Domain error types."""


class InvalidRequestError(Exception):
    """Raised when a request document cannot be parsed into a ChatRequest."""
