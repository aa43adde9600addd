"""
Vector index service protocol.

Narrow contract the index manager needs from a vector database:
index lifecycle plus namespace-scoped writes, deletes and queries.

Dependencies: docqa.boundary.vdb.vector_schemas
System role: Seam between the pipeline and concrete vector stores
"""

from typing import Protocol

from docqa.boundary.vdb.vector_schemas import IndexDescriptor, RetrievedChunk, VectorRecord


class IndexService(Protocol):
    """Operations supported by a vector index backend."""

    def describe_index(self, name: str) -> IndexDescriptor | None:
        """Return the index descriptor, or None when the index does not exist."""
        ...

    def create_index(
        self,
        name: str,
        dimension: int,
        metric: str,
        region: str | None = None,
        cloud: str | None = None,
    ) -> None:
        """Create a new index."""
        ...

    def delete_index(self, name: str) -> None:
        """Delete an index and all of its vectors."""
        ...

    def delete_namespace(self, name: str, namespace: str) -> None:
        """Delete every vector in a namespace; a missing namespace is a no-op."""
        ...

    def upsert(self, name: str, namespace: str, records: list[VectorRecord]) -> None:
        """Write vectors into a namespace."""
        ...

    def query(
        self,
        name: str,
        namespace: str,
        vector: list[float],
        top_k: int,
    ) -> list[RetrievedChunk]:
        """Return up to top_k nearest vectors in the namespace, best first."""
        ...
