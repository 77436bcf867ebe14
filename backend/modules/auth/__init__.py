"""
Authentication module.

Handles password hashing and the issuing and verification of bearer tokens.

Public API:
- IPasswordHasher / BcryptPasswordHasher: Credential hashing
- ITokenAuthority / TokenAuthority: Token lifecycle
- TokenClaims: Identity asserted by a verified token
- Auth exceptions: InvalidTokenError, ExpiredTokenError, etc.
"""

from .interfaces import IPasswordHasher, ITokenAuthority
from .hashing import BcryptPasswordHasher
from .tokens import TokenAuthority
from .models import TokenClaims, JWTPayload
from .exceptions import (
    InvalidTokenError,
    ExpiredTokenError,
    MissingTokenError,
    AuthenticationFailedError,
    CredentialHashingError,
)

__all__ = [
    # Interfaces
    "IPasswordHasher",
    "ITokenAuthority",
    # Implementations
    "BcryptPasswordHasher",
    "TokenAuthority",
    # Models
    "TokenClaims",
    "JWTPayload",
    # Exceptions
    "InvalidTokenError",
    "ExpiredTokenError",
    "MissingTokenError",
    "AuthenticationFailedError",
    "CredentialHashingError",
]
