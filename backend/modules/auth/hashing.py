"""
Password hashing with bcrypt.

bcrypt embeds the salt and cost in the digest, so verification needs
nothing but the stored hash.
"""

import logging

import bcrypt

from .exceptions import CredentialHashingError
from .interfaces import IPasswordHasher

logger = logging.getLogger(__name__)

DEFAULT_ROUNDS = 10

# bcrypt only looks at the first 72 bytes of its input
MAX_PASSWORD_BYTES = 72


class BcryptPasswordHasher(IPasswordHasher):
    """Salted, adaptive password hashing backed by bcrypt."""

    def __init__(self, rounds: int = DEFAULT_ROUNDS):
        if not 4 <= rounds <= 31:
            raise ValueError(f"bcrypt rounds must be between 4 and 31, got {rounds}")
        self._rounds = rounds

    @property
    def rounds(self) -> int:
        return self._rounds

    def hash(self, plaintext: str) -> str:
        """Hash a password with a fresh salt."""
        try:
            salt = bcrypt.gensalt(rounds=self._rounds)
            return bcrypt.hashpw(plaintext.encode("utf-8"), salt).decode("utf-8")
        except (ValueError, TypeError) as e:
            logger.error(f"bcrypt failed to hash a password: {type(e).__name__}")
            raise CredentialHashingError(str(e)) from e

    def verify(self, plaintext: str, digest: str) -> bool:
        """Verify a password against a bcrypt digest."""
        try:
            return bcrypt.checkpw(plaintext.encode("utf-8"), digest.encode("utf-8"))
        except (ValueError, TypeError, AttributeError):
            # Corrupt record and wrong password look the same to callers
            logger.debug("Rejected malformed password digest")
            return False
