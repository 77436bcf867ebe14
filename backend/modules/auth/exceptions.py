"""
Authentication module exceptions.

These exceptions are raised by the auth module and can be caught
by API error handlers to return appropriate HTTP responses.
"""

from shared.exceptions import AuthenticationError, InternalError


class InvalidTokenError(AuthenticationError):
    """Raised when a JWT token is invalid, tampered with, or malformed."""

    def __init__(self, message: str = "Invalid authentication token", code: str = "INVALID_TOKEN"):
        super().__init__(message, code=code)


class ExpiredTokenError(InvalidTokenError):
    """Raised when a JWT token has expired."""

    def __init__(self, message: str = "Authentication token has expired"):
        super().__init__(message, code="TOKEN_EXPIRED")


class MissingTokenError(InvalidTokenError):
    """Raised when no authentication token is provided."""

    def __init__(self, message: str = "Authentication required"):
        super().__init__(message, code="MISSING_TOKEN")


class AuthenticationFailedError(AuthenticationError):
    """
    Raised when a login attempt fails.

    Deliberately identical for unknown emails and wrong passwords.
    """

    def __init__(self):
        super().__init__("Invalid email or password", code="AUTHENTICATION_FAILED")


class CredentialHashingError(InternalError):
    """Raised when the password hasher fails unexpectedly."""

    def __init__(self, reason: str):
        super().__init__(
            "Failed to hash credentials",
            code="CREDENTIAL_HASHING_FAILED",
            details={"reason": reason},
        )
