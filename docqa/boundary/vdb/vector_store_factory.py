"""
Vector index factory for selecting between in-memory (dev) and S3 Vectors (prod).

Depends on VECTOR_STORE_STORE_TYPE environment variable.
Provides consistent interface regardless of underlying implementation.

Dependencies: docqa.boundary.vdb, docqa.configs
System role: Vector index service instantiation and selection
"""

import logging

from docqa.boundary.vdb.index_manager import VectorIndexManager
from docqa.boundary.vdb.index_service import IndexService
from docqa.configs import Settings

logger = logging.getLogger(__name__)


def get_index_service(settings: Settings) -> IndexService:
    """
    Build the index service selected by configuration.

    Args:
        settings: Application settings

    Returns:
        InMemoryIndexService or S3VectorsIndexService

    Raises:
        ValueError: If VECTOR_STORE_STORE_TYPE is invalid
    """
    store_type = settings.vector_store.store_type.lower()

    if store_type == "memory":
        from docqa.boundary.vdb.memory_index_service import InMemoryIndexService

        logger.info(f"{__name__}:get_index_service - Creating in-memory index (local dev mode)")
        return InMemoryIndexService(
            region=settings.vector_store.aws_region,
            cloud=settings.vector_store.cloud,
        )

    if store_type == "s3":
        from docqa.boundary.vdb.s3_vectors_service import S3VectorsIndexService

        logger.info(f"{__name__}:get_index_service - Creating S3 Vectors index service (production mode)")
        return S3VectorsIndexService(
            vectors_bucket=settings.vector_store.vectors_bucket,
            region=settings.vector_store.aws_region,
        )

    raise ValueError(
        f"Invalid VECTOR_STORE_STORE_TYPE: {store_type}. "
        f"Must be 'memory' (dev) or 's3' (production)."
    )


def get_index_manager(settings: Settings, index_service: IndexService | None = None) -> VectorIndexManager:
    """Build a VectorIndexManager around the configured index service."""
    vs = settings.vector_store
    return VectorIndexManager(
        index_service=index_service or get_index_service(settings),
        metric=vs.metric,
        region=vs.aws_region,
        cloud=vs.cloud,
        delete_poll_attempts=vs.delete_poll_attempts,
        delete_poll_initial_wait=vs.delete_poll_initial_wait,
        delete_poll_max_wait=vs.delete_poll_max_wait,
    )
