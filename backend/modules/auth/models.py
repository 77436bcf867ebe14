"""
Authentication module data models.

These models define the data structures used by the auth module
and exposed to other modules through the interface.
"""

from datetime import datetime
from pydantic import BaseModel, Field


class JWTPayload(BaseModel):
    """
    Decoded JWT token payload as issued by the token authority.
    """

    sub: str = Field(..., min_length=1, description="Subject (user ID)")
    email: str = Field(..., description="User's email")
    exp: int = Field(..., description="Expiration timestamp")
    iat: int = Field(..., description="Issued at timestamp")


class TokenClaims(BaseModel):
    """
    Identity assertions carried by a verified token.

    Stateless: holds no reference back to the user record.
    """

    subject: str = Field(..., description="User ID the token was issued for")
    email: str = Field(..., description="Email at issuance time")
    issued_at: datetime = Field(..., description="Issuance time (UTC)")
    expires_at: datetime = Field(..., description="Expiry time (UTC)")

    model_config = {"frozen": True}


class LoginRequest(BaseModel):
    """Credentials submitted to the login endpoint."""

    email: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class LoginResponse(BaseModel):
    """Response from a successful login."""

    token: str = Field(..., description="Signed bearer token")


class TokenValidationRequest(BaseModel):
    """Request to validate a token."""

    token: str = Field(..., description="JWT token to validate")
