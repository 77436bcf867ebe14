"""
Dependency injection setup for FastAPI.

This module provides the "container" that wires together all module
implementations. Each component is built once, explicitly, and handed to
the components that need it.
"""

from datetime import timedelta
from typing import TYPE_CHECKING, Optional

from shared.config import Settings, get_settings

# Type checking imports for interfaces (avoids circular imports)
if TYPE_CHECKING:
    from modules.auth.interfaces import IPasswordHasher, ITokenAuthority
    from modules.users.service import DirectoryService


class ServiceContainer:
    """
    Container for all service instances.

    Services are created lazily on first access and cached for the
    lifetime of the container. Use reset() to drop them for testing.
    """

    def __init__(self, settings: Optional[Settings] = None) -> None:
        self._settings = settings
        self._hasher: "IPasswordHasher | None" = None
        self._tokens: "ITokenAuthority | None" = None
        self._directory_service: "DirectoryService | None" = None

    @property
    def settings(self) -> Settings:
        if self._settings is None:
            self._settings = get_settings()
        return self._settings

    @property
    def hasher(self) -> "IPasswordHasher":
        """Get the password hasher instance."""
        if self._hasher is None:
            from modules.auth.hashing import BcryptPasswordHasher
            self._hasher = BcryptPasswordHasher(rounds=self.settings.bcrypt_rounds)
        return self._hasher

    @property
    def tokens(self) -> "ITokenAuthority":
        """Get the token authority instance."""
        if self._tokens is None:
            from modules.auth.tokens import TokenAuthority
            self._tokens = TokenAuthority(
                secret=self.settings.jwt_secret,
                lifetime=timedelta(seconds=self.settings.token_lifetime_seconds),
                algorithm=self.settings.jwt_algorithm,
            )
        return self._tokens

    @property
    def directory(self) -> "DirectoryService":
        """Get the directory service instance."""
        if self._directory_service is None:
            from modules.users.service import build_directory_service
            self._directory_service = build_directory_service(
                hasher=self.hasher,
                tokens=self.tokens,
            )
        return self._directory_service

    async def aclose(self) -> None:
        """Stop background work owned by the services."""
        if self._directory_service is not None:
            await self._directory_service.pagination.aclose()

    def reset(self) -> None:
        """
        Reset all cached services.

        This is primarily for testing - allows tests to get fresh
        service instances with different settings.
        """
        self._hasher = None
        self._tokens = None
        self._directory_service = None


# Module-level container singleton
_container: ServiceContainer | None = None


def get_container() -> ServiceContainer:
    """Get the singleton service container."""
    global _container
    if _container is None:
        _container = ServiceContainer()
    return _container


def set_container(container: ServiceContainer) -> None:
    """Install a specific container (used by create_app and tests)."""
    global _container
    _container = container


def reset_container() -> None:
    """
    Reset the service container.

    The next call to get_container() creates a fresh container with new
    service instances. Primarily used for testing.
    """
    global _container
    _container = None


# FastAPI dependency functions
# These are the functions that should be used in route Depends() calls


def get_directory_service() -> "DirectoryService":
    """FastAPI dependency for the directory service."""
    return get_container().directory
