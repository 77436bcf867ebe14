"""
User directory API endpoints.

Thin mapping of the directory operations onto REST routes. Domain errors
propagate to the application's exception handler.
"""

from fastapi import APIRouter, Depends, Query

from api.dependencies import get_directory_service

from .interfaces import IDirectoryService
from .models import (
    PageResult,
    RegisterUserRequest,
    RegisterUserResponse,
    UserDetail,
    UserListResponse,
)

router = APIRouter()


@router.post("", response_model=RegisterUserResponse, status_code=201)
async def register_user(
    request: RegisterUserRequest,
    service: IDirectoryService = Depends(get_directory_service),
) -> RegisterUserResponse:
    """
    Register a new user.

    Returns 409 if the email is already registered.
    """
    user_id = await service.register(request)
    return RegisterUserResponse(id=user_id)


@router.get("", response_model=UserListResponse)
async def list_users(
    service: IDirectoryService = Depends(get_directory_service),
) -> UserListResponse:
    """List every user, sorted by email."""
    return await service.list_all()


@router.get("/query", response_model=PageResult)
async def query_users(
    page: int = Query(default=0, description="Page number (0-indexed)"),
    limit: int = Query(default=10, description="Page size: 5, 10 or 25"),
    service: IDirectoryService = Depends(get_directory_service),
) -> PageResult:
    """
    Get one page of users.

    Pages are cut from the email-sorted listing. Returns 422 for a
    negative page or an unsupported limit.
    """
    return await service.query_page(page, limit)


@router.get("/{user_id}", response_model=UserDetail)
async def get_user(
    user_id: str,
    service: IDirectoryService = Depends(get_directory_service),
) -> UserDetail:
    """Get a single user's details."""
    return await service.get_one(user_id)
