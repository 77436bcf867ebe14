"""
Token authority: issues and verifies signed identity tokens.

Tokens are HS256 JWTs carrying the subject (user ID) and email, with an
expiry a fixed lifetime after issuance. There is no revocation; expiry
is the only way a token stops being valid.
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Callable, Optional

import jwt
from pydantic import ValidationError as PydanticValidationError

from .exceptions import ExpiredTokenError, InvalidTokenError, MissingTokenError
from .interfaces import ITokenAuthority
from .models import JWTPayload, TokenClaims

logger = logging.getLogger(__name__)

DEFAULT_LIFETIME = timedelta(hours=1)
REQUIRED_CLAIMS = ["sub", "email", "exp", "iat"]


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class TokenAuthority(ITokenAuthority):
    """
    JWT-backed implementation of ITokenAuthority.

    The signing secret and lifetime are fixed for the lifetime of the
    instance. The clock is injectable so tests can mint tokens that are
    already expired.
    """

    def __init__(
        self,
        secret: str,
        lifetime: timedelta = DEFAULT_LIFETIME,
        algorithm: str = "HS256",
        clock: Optional[Callable[[], datetime]] = None,
    ):
        if not secret:
            raise ValueError("Token signing secret must not be empty")
        self._secret = secret
        self._lifetime = lifetime
        self._algorithm = algorithm
        self._clock = clock or _utcnow

    @property
    def lifetime(self) -> timedelta:
        return self._lifetime

    def issue(self, user_id: str, email: str) -> str:
        """Issue a token for the given identity, valid for one lifetime."""
        now = self._clock()
        payload = {
            "sub": user_id,
            "email": email,
            "iat": int(now.timestamp()),
            "exp": int((now + self._lifetime).timestamp()),
        }
        return jwt.encode(payload, self._secret, algorithm=self._algorithm)

    def issue_claims(self, claims: TokenClaims) -> str:
        """Re-issue a token for previously verified claims."""
        return self.issue(claims.subject, claims.email)

    def verify(self, token: str) -> TokenClaims:
        """
        Verify the signature and expiry of a token.

        Raises:
            MissingTokenError: If the token is empty
            ExpiredTokenError: If the token has expired
            InvalidTokenError: For any other malformed or tampered token
        """
        if not token:
            raise MissingTokenError()

        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                options={"require": REQUIRED_CLAIMS},
            )
            jwt_payload = JWTPayload(**payload)
        except jwt.ExpiredSignatureError:
            raise ExpiredTokenError()
        except jwt.InvalidTokenError as e:
            logger.debug(f"Token rejected: {type(e).__name__}")
            raise InvalidTokenError(f"Invalid authentication token: {e}")
        except PydanticValidationError:
            raise InvalidTokenError("Invalid authentication token: malformed claims")

        return TokenClaims(
            subject=jwt_payload.sub,
            email=jwt_payload.email,
            issued_at=datetime.fromtimestamp(jwt_payload.iat, tz=timezone.utc),
            expires_at=datetime.fromtimestamp(jwt_payload.exp, tz=timezone.utc),
        )
