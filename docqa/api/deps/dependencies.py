"""
Dependency injection container.

Factory functions for FastAPI dependencies. Every heavy collaborator
(index client, embedding model, QA model) is built once per process
inside ServiceCache and passed explicitly to the components that use it.

Dependencies: docqa.configs, docqa.application, docqa.core
System role: DI container for service injection
"""

import logging

from docqa.application.services import DocumentService, QueryService
from docqa.configs import Settings, get_settings
from docqa.core.rag_pipeline import RAGPipeline

logger = logging.getLogger(__name__)


class ServiceCache:
    """Container for cached service instances."""

    def __init__(self, settings: Settings | None = None) -> None:
        self._settings = settings
        self._pipeline: RAGPipeline | None = None

    @property
    def settings(self) -> Settings:
        """Get settings used to build services."""
        if self._settings is None:
            self._settings = get_settings()
        return self._settings

    @property
    def pipeline(self) -> RAGPipeline:
        """Get cached RAG pipeline."""
        if self._pipeline is None:
            logger.info(f"{__name__}:pipeline - Building RAG pipeline")
            self._pipeline = RAGPipeline.from_settings(self.settings)
        return self._pipeline

    def clear(self) -> None:
        """Clear all cached instances."""
        self._pipeline = None


# Global service cache
_service_cache = ServiceCache()


def get_service_cache() -> ServiceCache:
    """Get service cache singleton."""
    return _service_cache


def _cached_pipeline() -> RAGPipeline:
    """Return the cached pipeline, translating build failures into an error envelope."""
    try:
        return get_service_cache().pipeline
    except Exception as e:
        # Deferred: the routers package imports this module
        from docqa.api.routers.router_utils.error_utils import to_http_exception

        logger.error(
            f"{__name__}:_cached_pipeline - Pipeline setup failed: {e}",
            extra={"error_type": type(e).__name__},
        )
        raise to_http_exception(e, "Service initialization failed") from e


def get_document_service() -> DocumentService:
    """
    Get document service instance.

    Returns:
        DocumentService: Document service bound to the cached pipeline
    """
    return DocumentService(pipeline=_cached_pipeline())


def get_query_service() -> QueryService:
    """
    Get query service instance.

    Returns:
        QueryService: Query service bound to the cached pipeline
    """
    return QueryService(pipeline=_cached_pipeline())
