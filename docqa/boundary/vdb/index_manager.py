"""
Vector index lifecycle manager.

Owns the named index and its namespaces on top of an IndexService:
creates the index on first use, recreates it when its dimension no longer
matches the embedding model, clears a namespace, and writes chunk vectors.

Index dimension is immutable once vectors exist, so a mismatched index is
deleted and created fresh. All vectors in it are lost.

Dependencies: tenacity, docqa.boundary.vdb, docqa.core.exceptions
System role: Vector index lifecycle and namespace replace semantics
"""

import logging

from tenacity import RetryError, Retrying, retry_if_result, stop_after_attempt, wait_exponential

from docqa.boundary.vdb.index_service import IndexService
from docqa.boundary.vdb.vector_schemas import (
    IndexDescriptor,
    IndexHandle,
    RetrievedChunk,
    VectorRecord,
)
from docqa.core.document_processing.models import Chunk
from docqa.core.exceptions import (
    DimensionMismatchError,
    DocQAException,
    EmbeddingProviderError,
    IndexLifecycleError,
)

logger = logging.getLogger(__name__)


class VectorIndexManager:
    """Index lifecycle, namespace clearing, and vector writes."""

    def __init__(
        self,
        index_service: IndexService,
        metric: str = "cosine",
        region: str | None = None,
        cloud: str | None = None,
        delete_poll_attempts: int = 8,
        delete_poll_initial_wait: float = 0.5,
        delete_poll_max_wait: float = 8.0,
    ) -> None:
        """
        Initialize manager around an index service.

        Args:
            index_service: Backend implementing IndexService
            metric: Similarity metric for newly created indexes
            region: Region passed to create_index
            cloud: Cloud passed to create_index
            delete_poll_attempts: Maximum describe calls while waiting for deletion
            delete_poll_initial_wait: First backoff interval in seconds
            delete_poll_max_wait: Backoff ceiling in seconds
        """
        self._service = index_service
        self.metric = metric
        self.region = region
        self.cloud = cloud
        self._delete_poll_attempts = delete_poll_attempts
        self._delete_poll_initial_wait = delete_poll_initial_wait
        self._delete_poll_max_wait = delete_poll_max_wait

    def describe_index(self, name: str) -> IndexDescriptor | None:
        """
        Describe an index.

        Returns:
            IndexDescriptor | None: Descriptor, or None when the index does not exist

        Raises:
            IndexLifecycleError: When the service call fails
        """
        try:
            return self._service.describe_index(name)
        except DocQAException:
            raise
        except Exception as e:
            raise IndexLifecycleError(
                f"Failed to describe index {name}: {e}",
                operation="describe",
                details={"index": name},
            ) from e

    def ensure_index(self, name: str, required_dimension: int) -> IndexHandle:
        """
        Return a handle to an index with the required dimension.

        Absent index is created; an index with another dimension is deleted
        and recreated; a matching index is reused unchanged.

        Args:
            name: Index name
            required_dimension: Dimension every vector must have

        Returns:
            IndexHandle: Handle to a dimension-compatible index

        Raises:
            IndexLifecycleError: When describe/create/delete fails or deletion never propagates
        """
        descriptor = self.describe_index(name)

        if descriptor is None:
            logger.info(f"{__name__}:ensure_index - Index {name} does not exist. Creating...")
            return self._create(name, required_dimension)

        if descriptor.dimension != required_dimension:
            logger.warning(
                f"{__name__}:ensure_index - Dimension mismatch: index {name} has "
                f"{descriptor.dimension}, but model requires {required_dimension}. Recreating index...",
                extra={"index": name, "actual": descriptor.dimension, "required": required_dimension},
            )
            self._delete(name)
            self._wait_for_deletion(name)
            return self._create(name, required_dimension)

        logger.info(f"{__name__}:ensure_index - Index {name} exists with correct dimension")
        return IndexHandle(name=name, dimension=descriptor.dimension, metric=descriptor.metric)

    def _create(self, name: str, dimension: int) -> IndexHandle:
        try:
            self._service.create_index(
                name,
                dimension=dimension,
                metric=self.metric,
                region=self.region,
                cloud=self.cloud,
            )
        except DocQAException:
            raise
        except Exception as e:
            raise IndexLifecycleError(
                f"Failed to create index {name}: {e}",
                operation="create",
                details={"index": name, "dimension": dimension},
            ) from e
        logger.info(f"{__name__}:_create - Index {name} created successfully")
        return IndexHandle(name=name, dimension=dimension, metric=self.metric)

    def _delete(self, name: str) -> None:
        try:
            self._service.delete_index(name)
        except DocQAException:
            raise
        except Exception as e:
            raise IndexLifecycleError(
                f"Failed to delete index {name}: {e}",
                operation="delete",
                details={"index": name},
            ) from e

    def _wait_for_deletion(self, name: str) -> None:
        """Poll describe_index with exponential backoff until the index is gone."""
        retrying = Retrying(
            retry=retry_if_result(lambda descriptor: descriptor is not None),
            stop=stop_after_attempt(self._delete_poll_attempts),
            wait=wait_exponential(
                multiplier=self._delete_poll_initial_wait,
                max=self._delete_poll_max_wait,
            ),
            before_sleep=lambda retry_state: logger.warning(
                f"{__name__}:_wait_for_deletion - Index {name} still present "
                f"(attempt {retry_state.attempt_number}/{self._delete_poll_attempts})"
            ),
        )
        try:
            retrying(self.describe_index, name)
        except RetryError as e:
            raise IndexLifecycleError(
                f"Index {name} deletion did not propagate",
                operation="delete",
                details={"index": name, "attempts": self._delete_poll_attempts},
            ) from e

    def clear_namespace(self, handle: IndexHandle, namespace: str) -> None:
        """
        Delete every vector in a namespace.

        A namespace that does not exist yet is already empty.

        Raises:
            IndexLifecycleError: When the delete fails
        """
        logger.info(f"{__name__}:clear_namespace - Clearing namespace: {namespace}")
        try:
            self._service.delete_namespace(handle.name, namespace)
        except DocQAException:
            raise
        except Exception as e:
            raise IndexLifecycleError(
                f"Failed to clear namespace {namespace}: {e}",
                operation="delete_namespace",
                details={"index": handle.name, "namespace": namespace},
            ) from e

    def upsert(
        self,
        handle: IndexHandle,
        namespace: str,
        chunks: list[Chunk],
        vectors: list[list[float]],
    ) -> list[str]:
        """
        Write chunk vectors keyed by chunk id.

        Args:
            handle: Target index
            namespace: Target namespace
            chunks: Chunks whose text and metadata are stored with the vectors
            vectors: Embeddings positionally aligned with chunks

        Returns:
            list[str]: Written chunk ids

        Raises:
            EmbeddingProviderError: When chunk and vector counts differ
            DimensionMismatchError: When a vector length differs from the index dimension
            IndexLifecycleError: When the write fails
        """
        if len(chunks) != len(vectors):
            raise EmbeddingProviderError(
                "Chunks and embeddings length mismatch",
                {"chunks": len(chunks), "embeddings": len(vectors)},
            )
        for vector in vectors:
            if len(vector) != handle.dimension:
                raise DimensionMismatchError(expected=handle.dimension, actual=len(vector))

        records = [
            VectorRecord(id=chunk.id, values=vector, content=chunk.content, metadata=chunk.metadata)
            for chunk, vector in zip(chunks, vectors)
        ]
        try:
            self._service.upsert(handle.name, namespace, records)
        except DocQAException:
            raise
        except Exception as e:
            raise IndexLifecycleError(
                f"Failed to upsert vectors: {e}",
                operation="upsert",
                details={"index": handle.name, "namespace": namespace, "vector_count": len(records)},
            ) from e

        logger.info(
            f"{__name__}:upsert - Stored {len(records)} vectors",
            extra={"index": handle.name, "namespace": namespace},
        )
        return [record.id for record in records]

    def query(
        self,
        handle: IndexHandle,
        namespace: str,
        vector: list[float],
        top_k: int,
    ) -> list[RetrievedChunk]:
        """
        Similarity search within a namespace.

        Raises:
            IndexLifecycleError: When the query fails
        """
        try:
            return self._service.query(handle.name, namespace, vector, top_k)
        except DocQAException:
            raise
        except Exception as e:
            raise IndexLifecycleError(
                f"Failed to query index {handle.name}: {e}",
                operation="query",
                details={"index": handle.name, "namespace": namespace, "top_k": top_k},
            ) from e
