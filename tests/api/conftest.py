"""
API test fixtures.

Provides a TestClient whose services run the real pipeline over the
in-memory index. The lifespan hook is not triggered (no context manager).
"""

import pytest
from fastapi.testclient import TestClient

from docqa.api.deps import ServiceCache, get_document_service, get_query_service, get_service_cache
from docqa.api.main import create_app
from docqa.application.services import DocumentService, QueryService
from docqa.core.rag_pipeline import RAGPipeline


@pytest.fixture
def service_cache(pipeline: RAGPipeline) -> ServiceCache:
    """Provide ServiceCache preloaded with the test pipeline."""
    cache = ServiceCache()
    cache._pipeline = pipeline
    return cache


@pytest.fixture
def client(pipeline: RAGPipeline, service_cache: ServiceCache) -> TestClient:
    """Provide TestClient with service dependencies overridden."""
    app = create_app()
    app.dependency_overrides[get_service_cache] = lambda: service_cache
    app.dependency_overrides[get_document_service] = lambda: DocumentService(pipeline=pipeline)
    app.dependency_overrides[get_query_service] = lambda: QueryService(pipeline=pipeline)
    return TestClient(app)
