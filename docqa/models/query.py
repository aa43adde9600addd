"""
Query request and response models.

Dependencies: pydantic
System role: Query HTTP API schemas
"""

from pydantic import BaseModel, Field

from docqa.models.common import ApiResponse


class QueryRequest(BaseModel):
    """Question about the active document."""

    query: str = Field(default="", description="Natural-language question")


class QueryResponse(ApiResponse[str]):
    """Answer text in the data field."""
