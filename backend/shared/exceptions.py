"""
Base exception classes for the user directory backend.

Each module should define its own exceptions that inherit from these bases.
This enables consistent error handling across the application.
"""

from typing import Optional, Any


class DirectoryError(Exception):
    """
    Base exception for all directory errors.

    All custom exceptions should inherit from this class.
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to a dictionary for API responses."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


class NotFoundError(DirectoryError):
    """Resource not found."""

    pass


class ValidationError(DirectoryError):
    """Input validation failed."""

    pass


class ConflictError(DirectoryError):
    """Request conflicts with the current state (e.g., uniqueness)."""

    pass


class AuthenticationError(DirectoryError):
    """Authentication failed (invalid or missing credentials)."""

    pass


class InternalError(DirectoryError):
    """
    Unexpected internal fault.

    Signals a defect rather than a domain condition. Callers should not
    try to recover from it.
    """

    pass
