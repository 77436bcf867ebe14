"""
Health check endpoints.

Provides endpoints for monitoring application health.
"""

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from ..dependencies import get_container, get_directory_service
from modules.users.service import DirectoryService

router = APIRouter()


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    version: str


class ReadinessResponse(BaseModel):
    """Readiness check response model."""

    status: str
    users: int
    pagination: str


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """
    Basic health check endpoint.

    Returns 200 if the API is running.
    """
    return HealthResponse(status="healthy", version=get_container().settings.app_version)


@router.get("/ready", response_model=ReadinessResponse)
async def readiness_check(
    service: DirectoryService = Depends(get_directory_service),
) -> ReadinessResponse:
    """
    Readiness check endpoint.

    Reports the directory size and whether the pagination worker is up.
    The worker starts on the first page query, so "idle" is still ready.
    """
    return ReadinessResponse(
        status="ready",
        users=service.count(),
        pagination="running" if service.pagination.running else "idle",
    )
