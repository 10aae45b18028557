# File: vuze_client/errors.py
"""Custom exceptions for the Vuze XML/HTTP client."""


class VuzeError(Exception):
    """Base class for client-specific exceptions."""

    def __init__(self, message: str) -> None:
        """Initialize the exception.

        Args:
            message: The error message.
        """
        super().__init__(message)
        self.message = message


class VuzeConnectionError(VuzeError, ConnectionError):
    """Raised when the daemon cannot be reached or the exchange breaks off.

    The ``phase`` attribute names where the round trip failed:
    ``"connect"``, ``"timeout"`` or ``"read"``.
    """

    def __init__(self, message: str, phase: str) -> None:
        """Initialize the exception with the failing transport phase."""
        super().__init__(f"{phase} failed: {message}")
        self.phase = phase


class TransportHTTPError(VuzeError):
    """Raised when the plugin answers with an HTTP error status (e.g. 401)."""

    def __init__(self, message: str, status_code: int) -> None:
        """Initialize the exception with the HTTP status code."""
        super().__init__(message)
        self.status_code = status_code


class ResponseError(VuzeError):
    """Base class for responses that cannot be turned into a mapping."""

    pass


class ProtocolFramingError(ResponseError):
    """Raised when the response does not carry exactly one XML payload."""

    pass


class DecodeError(ResponseError):
    """Raised when the extracted payload is not well-formed XML."""

    pass


class RemoteError(VuzeError):
    """Raised when the daemon reports a fault or omits required fields."""

    pass


class SessionNotInitializedError(VuzeError):
    """Raised when a call is attempted before the handshake has run."""

    pass
