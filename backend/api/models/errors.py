"""
Error response models.

Standardized error responses for the API. Bodies are produced by
DirectoryError.to_dict().
"""

from typing import Any
from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Standard error response format."""

    error: str
    message: str
    details: dict[str, Any] = Field(default_factory=dict)
