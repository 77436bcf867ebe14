"""
User directory module interface.

The transport layer and the seed loader depend on IDirectoryService, not
the concrete implementation.
"""

from typing import Protocol, runtime_checkable

from modules.auth.models import TokenClaims

from .models import (
    PageResult,
    RegisterUserRequest,
    UserDetail,
    UserListResponse,
)


@runtime_checkable
class IDirectoryService(Protocol):
    """
    Interface for the public directory operations.

    Every failure is one of the typed module exceptions; none of them are
    retried internally.
    """

    async def register(self, candidate: RegisterUserRequest) -> str:
        """
        Register a new user.

        Args:
            candidate: Registration data including the plaintext password

        Returns:
            The new user's ID

        Raises:
            DuplicateEmailError: If the email is already registered
        """
        ...

    async def login(self, email: str, password: str) -> str:
        """
        Authenticate a user and issue a bearer token.

        Raises:
            AuthenticationFailedError: For an unknown email or a wrong
                password alike
        """
        ...

    async def verify(self, token: str) -> TokenClaims:
        """
        Verify a bearer token.

        Raises:
            InvalidTokenError: If the token is malformed, tampered or expired
        """
        ...

    async def get_one(self, user_id: str) -> UserDetail:
        """
        Get a single user (without credentials).

        Raises:
            UserNotFoundError: If no user has this ID
        """
        ...

    async def list_all(self) -> UserListResponse:
        """List every user, sorted by email."""
        ...

    async def query_page(self, page: int, limit: int) -> PageResult:
        """
        Get one page of users through the pagination channel.

        Raises:
            InvalidPageRequestError: If page < 0 or limit is not 5, 10 or 25
        """
        ...
