"""
Google Generative AI embeddings with fixed output dimensionality.

Wraps GoogleGenerativeAIEmbeddings so every document and query vector is
requested at the index dimension, one network call per text.
Provider failures (timeout, auth, quota) surface as EmbeddingProviderError.

Dependencies: langchain_google_genai
System role: Remote embedding provider
"""

import logging
from typing import Any, List

from langchain_core.embeddings import Embeddings

from docqa.core.exceptions import EmbeddingProviderError

logger = logging.getLogger(__name__)


class RemoteEmbeddings(Embeddings):
    """Gemini embeddings requested at a fixed dimension."""

    def __init__(
        self,
        model: str = "models/text-embedding-004",
        output_dimensionality: int = 768,
        google_api_key: str | None = None,
        client: Any = None,
    ) -> None:
        """
        Initialize the remote embedding client.

        Args:
            model: Google embedding model ID
            output_dimensionality: Dimension requested for every vector
            google_api_key: API key (GOOGLE_API_KEY env var when None)
            client: Preconfigured embeddings client (tests)
        """
        self.model = model
        self.output_dimensionality = output_dimensionality

        if client is None:
            from langchain_google_genai import GoogleGenerativeAIEmbeddings

            kwargs: dict[str, Any] = {"model": model}
            if google_api_key:
                kwargs["google_api_key"] = google_api_key
            client = GoogleGenerativeAIEmbeddings(**kwargs)
        self._client = client

        logger.info(
            f"{__name__}:__init__ - Initialized with model={model}, "
            f"output_dimensionality={output_dimensionality}"
        )

    def _embed(self, text: str, task_type: str) -> List[float]:
        try:
            return list(
                self._client.embed_query(
                    text,
                    task_type=task_type,
                    output_dimensionality=self.output_dimensionality,
                )
            )
        except Exception as e:
            logger.error(f"{__name__}:_embed - {type(e).__name__}: {e}")
            raise EmbeddingProviderError(
                f"Remote embedding request failed: {e}",
                {"model": self.model, "error_type": type(e).__name__},
            ) from e

    def embed_documents(self, texts: List[str]) -> List[List[float]]:
        """Embed each text with its own request, preserving input order."""
        return [self._embed(text, "RETRIEVAL_DOCUMENT") for text in texts]

    def embed_query(self, text: str) -> List[float]:
        """Embed a search query."""
        return self._embed(text, "RETRIEVAL_QUERY")
