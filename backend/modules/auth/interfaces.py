"""
Authentication module interfaces.

Other modules should depend on these protocols, not the concrete
implementations. This enables testing with fakes and swapping the
hashing scheme or token format without touching the directory.
"""

from typing import Protocol, runtime_checkable

from .models import TokenClaims


@runtime_checkable
class IPasswordHasher(Protocol):
    """
    Interface for one-way password hashing.

    Implementations must salt every hash, so two hashes of the same
    plaintext differ while both verify against it.
    """

    def hash(self, plaintext: str) -> str:
        """
        Hash a plaintext password.

        Args:
            plaintext: The password as supplied by the user

        Returns:
            Opaque digest safe to store

        Raises:
            CredentialHashingError: If hashing fails unexpectedly
        """
        ...

    def verify(self, plaintext: str, digest: str) -> bool:
        """
        Check a plaintext password against a stored digest.

        Returns False for a malformed digest instead of raising.
        """
        ...


@runtime_checkable
class ITokenAuthority(Protocol):
    """Interface for issuing and verifying signed identity tokens."""

    def issue(self, user_id: str, email: str) -> str:
        """
        Issue a signed token for the given identity.

        Args:
            user_id: Subject of the token
            email: Email embedded in the claims

        Returns:
            Encoded token string
        """
        ...

    def verify(self, token: str) -> TokenClaims:
        """
        Verify a token and return its claims.

        Raises:
            InvalidTokenError: If the token is malformed, tampered with,
                or expired (ExpiredTokenError)
        """
        ...
