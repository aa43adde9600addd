"""
Vector database boundary layer.

Provides the index service contract, its implementations, and the index manager.
- S3VectorsIndexService: Production S3 Vectors client
- InMemoryIndexService: Local development index

Dependencies: boto3, numpy
System role: Vector store adapter for RAG retrieval
"""

from docqa.boundary.vdb.index_manager import VectorIndexManager
from docqa.boundary.vdb.vector_schemas import (
    IndexDescriptor,
    IndexHandle,
    RetrievedChunk,
    VectorRecord,
)

__all__ = [
    "IndexDescriptor",
    "IndexHandle",
    "RetrievedChunk",
    "VectorRecord",
    "VectorIndexManager",
]
