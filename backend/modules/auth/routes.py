"""
Authentication API endpoints.

Login, token verification and the current-user lookup.
"""

from fastapi import APIRouter, Depends

from api.dependencies import get_directory_service
from api.middleware.auth import get_current_user
from modules.users.interfaces import IDirectoryService

from .models import LoginRequest, LoginResponse, TokenClaims, TokenValidationRequest

router = APIRouter()


@router.post("/login", response_model=LoginResponse)
async def login(
    request: LoginRequest,
    service: IDirectoryService = Depends(get_directory_service),
) -> LoginResponse:
    """
    Exchange email and password for a bearer token.

    Returns 401 without saying whether the email or the password was wrong.
    """
    token = await service.login(request.email, request.password)
    return LoginResponse(token=token)


@router.post("/verify", response_model=TokenClaims)
async def verify_token(
    request: TokenValidationRequest,
    service: IDirectoryService = Depends(get_directory_service),
) -> TokenClaims:
    """Verify a token and return its claims."""
    return await service.verify(request.token)


@router.get("/me", response_model=TokenClaims)
async def get_me(claims: TokenClaims = Depends(get_current_user)) -> TokenClaims:
    """
    Get the identity behind the bearer token.

    Requires authentication.
    """
    return claims
