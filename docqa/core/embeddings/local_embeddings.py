"""
Local sentence-transformers embeddings.

Runs the embedding model on the host CPU/GPU, no API key required.
The model handle is created on first use and reused for the lifetime
of the instance.

Dependencies: sentence_transformers, langchain_core
System role: Local embedding provider
"""

import logging
import threading
from typing import Any, List

from langchain_core.embeddings import Embeddings

from docqa.core.exceptions import EmbeddingProviderError

logger = logging.getLogger(__name__)


class LocalEmbeddings(Embeddings):
    """sentence-transformers embeddings with lazy model loading."""

    def __init__(
        self,
        model_name: str = "sentence-transformers/all-mpnet-base-v2",
        device: str = "cpu",
        normalize: bool = True,
    ) -> None:
        """
        Configure the local embedding model without loading it.

        Args:
            model_name: sentence-transformers model ID
            device: Torch device ("cpu", "cuda")
            normalize: L2-normalize output vectors (mean pooling is model default)
        """
        self.model_name = model_name
        self.device = device
        self.normalize = normalize
        self._model: Any = None
        self._lock = threading.Lock()

    def _get_model(self) -> Any:
        if self._model is None:
            with self._lock:
                if self._model is None:
                    from sentence_transformers import SentenceTransformer

                    logger.info(f"{__name__}:_get_model - Loading local embedding model {self.model_name}")
                    try:
                        self._model = SentenceTransformer(self.model_name, device=self.device)
                    except Exception as e:
                        raise EmbeddingProviderError(
                            f"Failed to load local embedding model: {e}",
                            {"model": self.model_name},
                        ) from e
                    logger.info(f"{__name__}:_get_model - Local embedding model loaded")
        return self._model

    def _encode(self, text: str) -> List[float]:
        model = self._get_model()
        try:
            vector = model.encode(text, normalize_embeddings=self.normalize)
        except Exception as e:
            raise EmbeddingProviderError(
                f"Local embedding failed: {e}",
                {"model": self.model_name},
            ) from e
        return [float(value) for value in vector]

    def embed_documents(self, texts: List[str]) -> List[List[float]]:
        """Embed texts one at a time, preserving input order."""
        return [self._encode(text) for text in texts]

    def embed_query(self, text: str) -> List[float]:
        """Embed a single query."""
        return self._encode(text)
