"""
FastAPI application factory.

Creates and configures the FastAPI application instance.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from shared.exceptions import (
    AuthenticationError,
    ConflictError,
    DirectoryError,
    NotFoundError,
    ValidationError,
)
from .dependencies import ServiceContainer, get_container, set_container
from .models.errors import ErrorResponse
from .routes import health
from modules.auth.routes import router as auth_router
from modules.users.routes import router as users_router
from modules.users.seed import load_seed_file, seed_directory

logger = logging.getLogger(__name__)

# Most specific first; anything else is an internal fault
ERROR_STATUS_CODES: list[tuple[type[DirectoryError], int]] = [
    (NotFoundError, 404),
    (ValidationError, 422),
    (ConflictError, 409),
    (AuthenticationError, 401),
]


def status_code_for(exc: DirectoryError) -> int:
    """Map a domain error onto an HTTP status code."""
    for error_type, code in ERROR_STATUS_CODES:
        if isinstance(exc, error_type):
            return code
    return 500


async def directory_error_handler(request: Request, exc: DirectoryError) -> JSONResponse:
    """Render any DirectoryError as an ErrorResponse."""
    code = status_code_for(exc)
    if code >= 500:
        logger.error(f"Internal error on {request.method} {request.url.path}: {exc.code}")
    headers = {"WWW-Authenticate": "Bearer"} if code == 401 else None
    body = ErrorResponse(**exc.to_dict())
    return JSONResponse(status_code=code, content=body.model_dump(), headers=headers)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Seeds the directory on startup and stops the pagination worker on
    shutdown.
    """
    # Startup
    container = get_container()
    settings = container.settings
    logger.info(f"Starting {settings.app_name} on {settings.host}:{settings.port}")

    service = container.directory
    service.pagination.start()
    if settings.seed_file:
        await seed_directory(service, load_seed_file(settings.seed_file))

    yield

    # Shutdown
    await container.aclose()
    logger.info(f"Shutting down {settings.app_name}")


def create_app(container: Optional[ServiceContainer] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        container: Services to serve. Defaults to the process-wide container.

    Returns:
        Configured FastAPI instance
    """
    if container is not None:
        set_container(container)
    settings = get_container().settings

    app = FastAPI(
        title=settings.app_name,
        description="User directory and authentication API",
        version=settings.app_version,
        lifespan=lifespan,
        docs_url="/api/docs" if settings.debug else None,
        redoc_url="/api/redoc" if settings.debug else None,
    )

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )

    app.add_exception_handler(DirectoryError, directory_error_handler)

    # Register routes
    app.include_router(health.router, prefix="/api", tags=["health"])
    app.include_router(auth_router, prefix="/api/auth", tags=["auth"])
    app.include_router(users_router, prefix="/api/users", tags=["users"])

    return app


# Application instance for uvicorn
app = create_app()
