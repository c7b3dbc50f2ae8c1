"""Custom exceptions for the league backend client."""

from __future__ import annotations


class BackendError(Exception):
    """Base exception for all league backend client errors."""


class BackendConnectionError(BackendError):
    """Raised when the client cannot connect to the hosted backend."""


class BackendTimeoutError(BackendError):
    """Raised when a request to the hosted backend times out."""


class BackendAPIError(BackendError):
    """Raised when the backend returns an error response (4xx/5xx)."""

    def __init__(self, status_code: int, message: str) -> None:
        self.status_code = status_code
        self.message = message
        super().__init__(f"HTTP {status_code}: {message}")


class BackendValidationError(BackendError):
    """Raised when backend rows fail model validation."""


class AuthenticationError(BackendError):
    """Raised when the backend rejects a sign-in attempt."""
