class AuthenticationError(Exception):
    """Raised when no API key is configured for a provider's default endpoint."""


class TransportError(Exception):
    """Raised when the provider call fails on the wire or returns a non-2xx status."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class EnvelopeError(Exception):
    """Raised when a 2xx provider response lacks the expected text field."""
