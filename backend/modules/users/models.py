"""
User directory module data models.

UserRecord is the stored form and never leaves the directory with its
password hash; everything handed to callers is a projection of it
(UserPreview, UserDetail).
"""

import uuid
from pydantic import BaseModel, Field, field_validator

from modules.auth.hashing import MAX_PASSWORD_BYTES


ALLOWED_PAGE_LIMITS: tuple[int, ...] = (5, 10, 25)


class RegisterUserRequest(BaseModel):
    """
    Candidate submitted for registration.

    Email is kept exactly as supplied: comparisons are case-sensitive.
    Accepts camelCase keys so seed files in the wire format load as-is.
    """

    email: str = Field(..., min_length=1, description="Unique email address")
    first_name: str = Field(default="", alias="firstName")
    last_name: str = Field(default="", alias="lastName")
    company: str = Field(default="")
    password: str = Field(..., min_length=1, description="Plaintext password")

    model_config = {"populate_by_name": True}

    @field_validator("password")
    @classmethod
    def password_fits_bcrypt(cls, value: str) -> str:
        if len(value.encode("utf-8")) > MAX_PASSWORD_BYTES:
            raise ValueError(f"Password must be at most {MAX_PASSWORD_BYTES} bytes")
        return value


class UserRecord(BaseModel):
    """
    A stored user. Owned by the directory, never mutated after creation.

    password_hash is excluded from dumps and repr.
    """

    id: str
    email: str
    first_name: str = ""
    last_name: str = ""
    company: str = ""
    password_hash: str = Field(..., exclude=True, repr=False)

    model_config = {"frozen": True}

    def to_preview(self) -> "UserPreview":
        return UserPreview(id=self.id, email=self.email)

    def to_detail(self) -> "UserDetail":
        return UserDetail(
            id=self.id,
            email=self.email,
            first_name=self.first_name,
            last_name=self.last_name,
            company=self.company,
        )


class UserPreview(BaseModel):
    """Minimal {id, email} projection of a user record."""

    id: str
    email: str

    model_config = {"frozen": True}


class UserDetail(BaseModel):
    """Outward view of a single user record (no credentials)."""

    id: str
    email: str
    first_name: str
    last_name: str
    company: str


class RegisterUserResponse(BaseModel):
    """Response from a successful registration."""

    id: str = Field(..., description="ID of the new user")


class UserListResponse(BaseModel):
    """Full listing of the directory, sorted by email."""

    users: list[UserPreview]
    total: int = Field(..., ge=0, description="Number of records in the directory")


class PageRequest(BaseModel):
    """
    A page query travelling through the pagination channel.

    request_id correlates the submission with its eventual result when
    several callers ask for the same page and limit.
    """

    page: int = Field(..., ge=0, description="Page number (0-indexed)")
    limit: int = Field(..., description="Page size")
    request_id: str = Field(default_factory=lambda: str(uuid.uuid4()))

    model_config = {"frozen": True}

    @property
    def offset(self) -> int:
        return self.page * self.limit


class PageResult(BaseModel):
    """One page of the directory."""

    users: list[UserPreview]
    total: int = Field(..., ge=0, description="Number of records in the directory")
    page: int
    limit: int
