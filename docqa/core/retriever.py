"""
Retrieval logic scoped to an index namespace.

Embeds the query and runs a top-k cosine similarity search.

Dependencies: langchain_core.embeddings, docqa.boundary.vdb, docqa.core.exceptions
System role: RAG retrieval business logic
"""

import logging

from langchain_core.embeddings import Embeddings

from docqa.boundary.vdb import IndexHandle, RetrievedChunk, VectorIndexManager
from docqa.core.exceptions import DimensionMismatchError, EmbeddingProviderError

logger = logging.getLogger(__name__)

CONTEXT_SEPARATOR = "\n\n"


class Retriever:
    """Query embedding plus namespace-scoped similarity search."""

    def __init__(self, index_manager: VectorIndexManager, embeddings: Embeddings) -> None:
        """Initialize retriever with index manager and embedding provider."""
        self._index_manager = index_manager
        self._embeddings = embeddings

    def retrieve(
        self,
        handle: IndexHandle,
        namespace: str,
        query: str,
        k: int = 3,
    ) -> list[RetrievedChunk]:
        """
        Retrieve the k chunks most similar to the query.

        Args:
            handle: Dimension-validated index handle
            namespace: Namespace to search
            query: Question text
            k: Maximum number of chunks

        Returns:
            list[RetrievedChunk]: At most k chunks, highest score first

        Raises:
            EmbeddingProviderError: When the query embedding fails or is empty
            DimensionMismatchError: When the query vector does not fit the index
            IndexLifecycleError: When the search fails
        """
        logger.info(f"{__name__}:retrieve - Retrieving context for: \"{query}\"")

        vector = self._embeddings.embed_query(query)
        if not vector:
            raise EmbeddingProviderError("Query embedding returned an empty vector")
        if len(vector) != handle.dimension:
            raise DimensionMismatchError(expected=handle.dimension, actual=len(vector))

        results = self._index_manager.query(handle, namespace, vector, k)
        ranked = sorted(results, key=lambda result: result.score, reverse=True)[:k]

        logger.info(
            f"{__name__}:retrieve - Found {len(ranked)} results",
            extra={"namespace": namespace, "k": k},
        )
        return ranked


def build_context(results: list[RetrievedChunk]) -> str:
    """Join retrieved chunk texts in rank order, separated by blank lines."""
    return CONTEXT_SEPARATOR.join(result.content for result in results)
