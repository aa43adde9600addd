"""
Common response models.

Response envelope shared by every endpoint.

Dependencies: pydantic
System role: Common API response structures
"""

from typing import Generic, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")


class ApiResponse(BaseModel, Generic[T]):
    """Response envelope: success flag, payload, message, and error name."""

    success: bool = True
    data: T | None = None
    message: str = ""
    error: str | None = Field(default=None, description="Error name or message")
