"""
Health check API endpoints.

Routes: GET /health, GET /health/vector-store

Dependencies: docqa.api.deps
System role: Health check HTTP API
"""

import logging

from fastapi import APIRouter, Depends
from fastapi.concurrency import run_in_threadpool
from pydantic import BaseModel

from docqa.api.deps import ServiceCache, get_service_cache
from docqa.core.exceptions import DocQAException

logger = logging.getLogger(__name__)


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    message: str


router = APIRouter(prefix="/health", tags=["health"])


@router.get("", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Basic health check."""
    return HealthResponse(status="healthy", message="RAG Backend is running")


@router.get("/vector-store", response_model=HealthResponse)
async def health_check_vector_store(
    cache: ServiceCache = Depends(get_service_cache),
) -> HealthResponse:
    """Vector index health check: the index exists with the required dimension."""
    pipeline = cache.pipeline
    try:
        descriptor = await run_in_threadpool(pipeline.describe_index)
    except DocQAException as e:
        logger.error(f"{__name__}:health_check_vector_store - {e}")
        return HealthResponse(status="unhealthy", message=e.message)

    if descriptor is None:
        return HealthResponse(status="unhealthy", message=f"Index {pipeline.index_name} not found")
    if descriptor.dimension != pipeline.dimension:
        return HealthResponse(
            status="unhealthy",
            message=f"Index dimension {descriptor.dimension} != required {pipeline.dimension}",
        )
    return HealthResponse(status="healthy", message="Vector store accessible")
