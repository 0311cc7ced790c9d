# stockfighter/errors.py
from typing import Any, Optional


class StockfighterError(Exception):
    """
    Base exception for every failure raised by this library.

    Callers that only care about success/failure can catch this; callers that
    need a specific case match on the subclasses below.
    """


class TransportError(StockfighterError):
    """
    The HTTP exchange itself failed (DNS, refused connection, timeout,
    dropped connection while reading the body).

    The underlying requests exception is kept on ``cause``.
    """

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.cause = cause


class SerializationError(StockfighterError):
    """
    The response body did not match any shape known for the endpoint.

    This points at a protocol/version mismatch, not a domain condition.
    ``payload`` holds the raw bytes for debugging.
    """

    def __init__(self, message: str, payload: bytes = b""):
        super().__init__(message)
        self.payload = payload


class DomainError(StockfighterError):
    """
    The server answered with a well-formed failure shape.

    ``payload`` is the decoded failure model the message came from.
    """

    def __init__(self, message: str, payload: Any = None):
        super().__init__(message)
        self.message = message
        self.payload = payload


class VenueNotFound(DomainError):
    """Venue heartbeat answered with the error shape (unknown venue code)."""
