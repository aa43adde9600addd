"""
Pipeline result model for document ingestion.

Represents the outcome of ingesting a document into the active namespace.

Dependencies: pydantic
System role: Return type for RAGPipeline.ingest()
"""

from pydantic import BaseModel, Field


class PipelineResult(BaseModel):
    """Result of document ingestion."""

    document_id: str = Field(description="Identifier generated for the ingested document")
    chunk_count: int = Field(description="Number of chunks written to the namespace")
    index_name: str = Field(description="Vector index that received the chunks")
    namespace: str = Field(description="Namespace replaced by this document")
    processing_time_ms: float = Field(description="Total processing time in milliseconds")
