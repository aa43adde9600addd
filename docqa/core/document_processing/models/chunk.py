"""
Chunk domain model for document processing pipeline.

Represents a document chunk with deterministic ID, content, and metadata.

Dependencies: pydantic
System role: Data structure for document chunks in ingestion pipeline
"""

from pydantic import BaseModel, Field


class Chunk(BaseModel):
    """Bounded-size text segment derived from exactly one source document."""

    id: str = Field(description="Deterministic chunk identifier (content hash)")
    content: str = Field(description="Chunk text content")
    metadata: dict = Field(default_factory=dict, description="Chunk metadata (page, source, start_index)")
