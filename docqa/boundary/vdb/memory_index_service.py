"""
In-memory vector index for local development.

Process-local cosine-similarity index with namespaces, for running the
pipeline and its tests without a hosted vector database.
Contents are lost when the process exits.

Dependencies: numpy
System role: Development vector store (local testing only)
"""

import logging
import threading
from dataclasses import dataclass, field

import numpy as np

from docqa.boundary.vdb.vector_schemas import IndexDescriptor, RetrievedChunk, VectorRecord
from docqa.core.exceptions import IndexLifecycleError

logger = logging.getLogger(__name__)


@dataclass
class _MemoryIndex:
    descriptor: IndexDescriptor
    namespaces: dict[str, dict[str, VectorRecord]] = field(default_factory=dict)


class InMemoryIndexService:
    """Local index service compatible with S3VectorsIndexService."""

    def __init__(self, region: str | None = None, cloud: str | None = None) -> None:
        self._region = region
        self._cloud = cloud
        self._indexes: dict[str, _MemoryIndex] = {}
        self._lock = threading.Lock()

    def _get(self, name: str) -> _MemoryIndex:
        index = self._indexes.get(name)
        if index is None:
            raise IndexLifecycleError(f"Index not found: {name}", operation="lookup")
        return index

    def describe_index(self, name: str) -> IndexDescriptor | None:
        with self._lock:
            index = self._indexes.get(name)
            return index.descriptor.model_copy() if index else None

    def create_index(
        self,
        name: str,
        dimension: int,
        metric: str,
        region: str | None = None,
        cloud: str | None = None,
    ) -> None:
        if metric != "cosine":
            raise IndexLifecycleError(
                f"Unsupported metric for in-memory index: {metric}",
                operation="create",
            )
        with self._lock:
            if name in self._indexes:
                raise IndexLifecycleError(f"Index already exists: {name}", operation="create")
            self._indexes[name] = _MemoryIndex(
                descriptor=IndexDescriptor(
                    name=name,
                    dimension=dimension,
                    metric=metric,
                    region=region or self._region,
                    cloud=cloud or self._cloud,
                )
            )
        logger.info(f"{__name__}:create_index - Created {name} (dimension={dimension})")

    def delete_index(self, name: str) -> None:
        with self._lock:
            self._indexes.pop(name, None)

    def delete_namespace(self, name: str, namespace: str) -> None:
        with self._lock:
            self._get(name).namespaces.pop(namespace, None)

    def upsert(self, name: str, namespace: str, records: list[VectorRecord]) -> None:
        with self._lock:
            index = self._get(name)
            for record in records:
                if len(record.values) != index.descriptor.dimension:
                    raise IndexLifecycleError(
                        "Vector dimension does not match index",
                        operation="upsert",
                        details={
                            "expected": index.descriptor.dimension,
                            "actual": len(record.values),
                        },
                    )
            target = index.namespaces.setdefault(namespace, {})
            for record in records:
                target[record.id] = record

    def query(
        self,
        name: str,
        namespace: str,
        vector: list[float],
        top_k: int,
    ) -> list[RetrievedChunk]:
        with self._lock:
            records = list(self._get(name).namespaces.get(namespace, {}).values())

        if not records:
            return []

        matrix = np.asarray([record.values for record in records], dtype=np.float64)
        query = np.asarray(vector, dtype=np.float64)
        norms = np.linalg.norm(matrix, axis=1) * np.linalg.norm(query)
        dots = matrix @ query
        scores = np.divide(dots, norms, out=np.zeros_like(dots), where=norms > 0)

        order = np.argsort(-scores, kind="stable")[:top_k]
        return [
            RetrievedChunk(
                chunk_id=records[i].id,
                content=records[i].content,
                score=float(scores[i]),
                metadata=dict(records[i].metadata),
            )
            for i in order
        ]
