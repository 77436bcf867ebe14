"""
Directory service implementation.

Composes the credential hasher, token authority, user directory and
pagination channel into the public operations.
"""

import asyncio
import logging
import secrets

from modules.auth.exceptions import AuthenticationFailedError
from modules.auth.interfaces import IPasswordHasher, ITokenAuthority
from modules.auth.models import TokenClaims

from .directory import UserDirectory
from .interfaces import IDirectoryService
from .models import (
    PageResult,
    RegisterUserRequest,
    UserDetail,
    UserListResponse,
)
from .pagination import PageQueryChannel

logger = logging.getLogger(__name__)


class DirectoryService(IDirectoryService):
    """
    Orchestrates registration, login and directory queries.

    All collaborators are passed in; nothing is looked up globally.
    """

    def __init__(
        self,
        directory: UserDirectory,
        hasher: IPasswordHasher,
        tokens: ITokenAuthority,
        pagination: PageQueryChannel,
    ):
        self._directory = directory
        self._hasher = hasher
        self._tokens = tokens
        self._pagination = pagination
        # Stands in for the stored hash when the email is unknown
        self._dummy_digest = hasher.hash(secrets.token_urlsafe(16))

    @property
    def directory(self) -> UserDirectory:
        return self._directory

    @property
    def pagination(self) -> PageQueryChannel:
        return self._pagination

    async def register(self, candidate: RegisterUserRequest) -> str:
        """Register a new user, surfacing DuplicateEmailError."""
        return await self._directory.register(candidate)

    async def login(self, email: str, password: str) -> str:
        """
        Check credentials and issue a token.

        Unknown email and wrong password raise the same error, and both
        run one bcrypt verification.
        """
        record = self._directory.find_by_email(email)
        digest = record.password_hash if record is not None else self._dummy_digest
        matches = await asyncio.to_thread(self._hasher.verify, password, digest)
        if record is None or not matches:
            logger.info("Login rejected")
            raise AuthenticationFailedError()

        logger.info(f"User {record.id} logged in")
        return self._tokens.issue(record.id, record.email)

    async def verify(self, token: str) -> TokenClaims:
        """Verify a token without consulting the directory."""
        return self._tokens.verify(token)

    async def get_one(self, user_id: str) -> UserDetail:
        """Get a user's details; raises UserNotFoundError if absent."""
        return self._directory.find_by_id(user_id).to_detail()

    async def list_all(self) -> UserListResponse:
        """All users sorted by email."""
        users = self._directory.list_all()
        return UserListResponse(users=users, total=len(users))

    async def query_page(self, page: int, limit: int) -> PageResult:
        """One page of users, routed through the pagination channel."""
        return await self._pagination.query(page, limit)

    def count(self) -> int:
        return self._directory.count()


def build_directory_service(
    hasher: IPasswordHasher,
    tokens: ITokenAuthority,
) -> DirectoryService:
    """Wire a fresh directory and pagination channel into a service."""
    directory = UserDirectory(hasher)
    pagination = PageQueryChannel(directory)
    return DirectoryService(
        directory=directory,
        hasher=hasher,
        tokens=tokens,
        pagination=pagination,
    )
