"""
Document upload response models.

Dependencies: pydantic
System role: Document HTTP API schemas
"""

from pydantic import BaseModel, Field

from docqa.models.common import ApiResponse


class UploadResult(BaseModel):
    """Summary of an ingested document."""

    document_id: str = Field(description="Identifier generated for the document")
    filename: str = Field(description="Original filename")
    chunk_count: int = Field(description="Chunks written to the namespace")
    processing_time_ms: float = Field(description="Ingestion time in milliseconds")


class UploadResponse(ApiResponse[UploadResult]):
    """Upload outcome in the data field."""
