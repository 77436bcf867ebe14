"""
Shared infrastructure for the user directory backend.

This package contains cross-cutting concerns that are used by multiple modules:
- config: Centralized settings management
- exceptions: Base exception classes
- logging: Logging setup for entry points

Note: Business logic should NOT go here. This is for infrastructure only.
"""

from .config import Settings, get_settings
from .exceptions import (
    DirectoryError,
    NotFoundError,
    ValidationError,
    ConflictError,
    AuthenticationError,
    InternalError,
)
from .logging import configure_logging

__all__ = [
    "Settings",
    "get_settings",
    "configure_logging",
    "DirectoryError",
    "NotFoundError",
    "ValidationError",
    "ConflictError",
    "AuthenticationError",
    "InternalError",
]
