"""
Bearer token authentication dependency.

Verifies tokens issued by the directory's token authority.
"""

from typing import Optional
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from modules.auth.exceptions import InvalidTokenError
from modules.auth.models import TokenClaims

from ..dependencies import get_container

# Bearer token extractor
bearer_scheme = HTTPBearer(auto_error=False)


class AuthError(HTTPException):
    """Authentication error with consistent format."""
    def __init__(self, detail: str):
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=detail,
            headers={"WWW-Authenticate": "Bearer"},
        )


def decode_token(token: str) -> TokenClaims:
    """
    Verify a bearer token.

    Raises:
        AuthError: If token is invalid or expired
    """
    try:
        return get_container().tokens.verify(token)
    except InvalidTokenError as e:
        raise AuthError(e.message)


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> TokenClaims:
    """
    Dependency that requires authentication.

    Usage:
        @router.get("/protected")
        async def protected_route(claims: TokenClaims = Depends(get_current_user)):
            return {"user_id": claims.subject}
    """
    if credentials is None:
        raise AuthError("Missing authorization header")

    return decode_token(credentials.credentials)
