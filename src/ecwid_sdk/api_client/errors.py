from __future__ import annotations

from typing import Optional


class APIClientError(RuntimeError):
    """Base error for API client failures."""


class EcwidConfigError(APIClientError):
    """Raised when required environment configuration is missing or invalid."""


class TransportError(APIClientError):
    """Raised when the request could not be sent or no response was received."""


class APIError(APIClientError):
    """Raised for non-200 HTTP responses."""

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class DecodeError(APIClientError):
    """Raised when a 200 response body does not match the expected shape."""


class NoRowsAffected(APIClientError):
    """
    Raised when a mutation returned 200 but its counter reports
    that nothing was updated or deleted.
    """

    def __init__(self, message: str, count: int = 0) -> None:
        super().__init__(message)
        self.count = count


class StalledPaginationError(APIClientError):
    """Raised when a non-terminal page reports zero items."""


class IterationCancelled(Exception):
    """
    Raised inside an iteration when the consumer asked to stop.
    Not an APIClientError.
    """
