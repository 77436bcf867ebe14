"""
User directory module exceptions.

These exceptions are raised by the users module and can be caught
by API error handlers to return appropriate HTTP responses.
"""

from typing import Any

from shared.exceptions import ConflictError, NotFoundError, ValidationError


class DuplicateEmailError(ConflictError):
    """Raised when registering an email that is already in the directory."""

    def __init__(self, email: str):
        super().__init__(
            f"User with email {email} already registered",
            code="DUPLICATE_EMAIL",
            details={"email": email},
        )


class UserNotFoundError(NotFoundError):
    """Raised when no user record matches the requested ID."""

    def __init__(self, user_id: str):
        super().__init__(
            f"User with ID {user_id} not found",
            code="USER_NOT_FOUND",
            details={"user_id": user_id},
        )


class InvalidPageRequestError(ValidationError):
    """Raised when a page query has an out-of-domain page or limit."""

    def __init__(self, reason: str, page: Any = None, limit: Any = None):
        super().__init__(
            reason,
            code="INVALID_PAGE_REQUEST",
            details={"page": page, "limit": limit},
        )
