"""
User directory module.

Owns the in-memory user records and the operations on them.

Public API:
- IDirectoryService / DirectoryService: Register, login, verify, lookups
- UserDirectory: The record store itself
- PageQueryChannel: Serialized page queries
- Models: RegisterUserRequest, UserPreview, UserDetail, PageResult, ...
- Exceptions: DuplicateEmailError, UserNotFoundError, InvalidPageRequestError
"""

from .interfaces import IDirectoryService
from .directory import UserDirectory
from .pagination import PageQueryChannel
from .service import DirectoryService, build_directory_service
from .models import (
    ALLOWED_PAGE_LIMITS,
    RegisterUserRequest,
    UserRecord,
    UserPreview,
    UserDetail,
    UserListResponse,
    PageRequest,
    PageResult,
)
from .exceptions import (
    DuplicateEmailError,
    UserNotFoundError,
    InvalidPageRequestError,
)

__all__ = [
    # Interface
    "IDirectoryService",
    # Implementations
    "UserDirectory",
    "PageQueryChannel",
    "DirectoryService",
    "build_directory_service",
    # Models
    "ALLOWED_PAGE_LIMITS",
    "RegisterUserRequest",
    "UserRecord",
    "UserPreview",
    "UserDetail",
    "UserListResponse",
    "PageRequest",
    "PageResult",
    # Exceptions
    "DuplicateEmailError",
    "UserNotFoundError",
    "InvalidPageRequestError",
]
