"""
Vector database schemas.

Pydantic models for vector index operations (descriptors, records, results).
Used for type-safe index service interactions.

Dependencies: pydantic
System role: Type definitions for vector operations
"""

from typing import Any

from pydantic import BaseModel, Field


class IndexDescriptor(BaseModel):
    """Description of an existing vector index as reported by the service."""

    name: str = Field(description="Index name")
    dimension: int = Field(description="Vector dimension fixed at creation")
    metric: str = Field(default="cosine", description="Similarity metric")
    region: str | None = Field(default=None, description="Hosting region")
    cloud: str | None = Field(default=None, description="Hosting cloud provider")


class IndexHandle(BaseModel):
    """Validated reference to an index whose dimension matches the pipeline."""

    name: str = Field(description="Index name")
    dimension: int = Field(description="Vector dimension")
    metric: str = Field(default="cosine", description="Similarity metric")


class VectorRecord(BaseModel):
    """Single vector to upsert, keyed by chunk id."""

    id: str = Field(description="Chunk identifier")
    values: list[float] = Field(description="Embedding vector")
    content: str = Field(description="Original chunk text")
    metadata: dict[str, Any] = Field(default_factory=dict, description="Chunk metadata")


class RetrievedChunk(BaseModel):
    """Single result from similarity search."""

    chunk_id: str = Field(description="Chunk identifier")
    content: str = Field(description="Chunk text content")
    score: float = Field(description="Similarity score (higher is closer)")
    metadata: dict[str, Any] = Field(default_factory=dict, description="Chunk metadata")
