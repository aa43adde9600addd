"""
Vector store configuration settings.

Manages the vector index descriptor (name, dimension, metric, region/cloud),
the active namespace, retrieval depth, and the post-delete polling limits.

Dependencies: pydantic, pydantic_settings
System role: Vector database configuration for RAG retrieval
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class VectorStoreSettings(BaseSettings):
    """Vector store configuration (in-memory for dev, S3 Vectors for prod)."""

    model_config = SettingsConfigDict(
        env_prefix="VECTOR_STORE_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    store_type: str = Field(
        default="s3",
        description="Vector store type: 'memory' for local dev, 's3' for production",
    )
    index_name: str = Field(default="docqa", description="Vector index name")
    namespace: str = Field(
        default="default",
        description="Namespace holding the currently active document",
    )
    dimension: int = Field(
        default=768,
        description="Index dimension shared by every chunk and query vector",
        gt=0,
    )
    metric: str = Field(default="cosine", description="Similarity metric for new indexes")

    aws_region: str = Field(default="us-east-1", description="AWS region for S3 Vectors")
    cloud: str = Field(default="aws", description="Cloud provider hosting the index")
    vectors_bucket: str = Field(
        default="docqa-dev-vectors",
        description="S3 Vectors bucket name",
    )

    top_k: int = Field(default=3, description="Number of chunks retrieved per query", ge=1)

    # Index recreation polling
    delete_poll_attempts: int = Field(
        default=8,
        description="Maximum describe attempts while waiting for index deletion",
        ge=1,
    )
    delete_poll_initial_wait: float = Field(
        default=0.5,
        description="Initial backoff in seconds between deletion checks",
        ge=0.0,
    )
    delete_poll_max_wait: float = Field(
        default=8.0,
        description="Maximum backoff in seconds between deletion checks",
        ge=0.0,
    )
