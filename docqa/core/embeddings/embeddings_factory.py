"""
Embedding provider factory.

Selects the local or remote provider from EMBEDDINGS_PROVIDER.

Dependencies: docqa.configs
System role: Embedding strategy selection
"""

import logging

from langchain_core.embeddings import Embeddings

from docqa.configs import Settings

logger = logging.getLogger(__name__)


def get_embeddings(settings: Settings) -> Embeddings:
    """
    Build the configured embedding provider.

    Args:
        settings: Application settings

    Returns:
        Embeddings: LocalEmbeddings or RemoteEmbeddings

    Raises:
        ValueError: If EMBEDDINGS_PROVIDER is invalid
    """
    provider = settings.embeddings.provider.lower()

    if provider == "local":
        from docqa.core.embeddings.local_embeddings import LocalEmbeddings

        logger.info(f"{__name__}:get_embeddings - Using local embeddings ({settings.embeddings.local_model})")
        return LocalEmbeddings(
            model_name=settings.embeddings.local_model,
            device=settings.embeddings.device,
        )

    if provider == "remote":
        from docqa.core.embeddings.remote_embeddings import RemoteEmbeddings

        logger.info(f"{__name__}:get_embeddings - Using remote embeddings ({settings.embeddings.remote_model})")
        return RemoteEmbeddings(
            model=settings.embeddings.remote_model,
            output_dimensionality=settings.vector_store.dimension,
            google_api_key=settings.embeddings.google_api_key or None,
        )

    raise ValueError(
        f"Invalid EMBEDDINGS_PROVIDER: {provider}. Must be 'local' or 'remote'."
    )
