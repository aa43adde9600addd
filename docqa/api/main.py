"""
FastAPI application with assembled routers.

Initializes FastAPI app with all API routers and middleware.

Dependencies: fastapi, docqa.api.routers, docqa.observability
System role: API entry point with router assembly
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.concurrency import run_in_threadpool
from fastapi.middleware.cors import CORSMiddleware

from docqa.api.deps.dependencies import get_service_cache
from docqa.api.routers.health import HealthResponse
from docqa.configs import Settings, get_settings
from docqa.core.exceptions import DocQAException
from docqa.observability import configure_logging
from docqa.observability.middleware import CorrelationMiddleware, RequestLoggingMiddleware

from .routers import documents_router, health_router, query_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Builds the pipeline and makes sure the vector index exists before the
    first request. A failure here is logged; the server still starts and
    requests report the error.
    """
    cache = get_service_cache()
    configure_logging(cache.settings.log_level)
    logger = logging.getLogger(__name__)

    # Startup
    logger.info(
        f"{__name__}:lifespan - Initializing vector index...",
        extra={"environment": cache.settings.environment},
    )
    try:
        handle = await run_in_threadpool(cache.pipeline.ensure_index)
        logger.info(
            f"{__name__}:lifespan - Vector index ready",
            extra={"index": handle.name, "dimension": handle.dimension},
        )
    except (DocQAException, ValueError) as e:
        logger.error(f"{__name__}:lifespan - Failed to initialize vector index: {e}")

    yield

    # Shutdown
    cache.clear()
    logger.info(f"{__name__}:lifespan - Service cache cleared")


def create_app(settings: Settings | None = None) -> FastAPI:
    """
    Create and configure FastAPI application with routers.

    Args:
        settings: Settings override (loaded from the environment when None)

    Returns:
        FastAPI: Configured application instance with all routers registered
    """
    settings = settings or get_settings()
    app = FastAPI(
        title=settings.app_name,
        description="Single-document question answering over an uploaded PDF, TXT, or CSV file",
        version="0.1.0",
        lifespan=lifespan,
    )

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Add observability middleware
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(CorrelationMiddleware)

    # Register all routers with /api/v1 prefix for versioning
    app.include_router(health_router, prefix="/api/v1")
    app.include_router(documents_router, prefix="/api/v1")
    app.include_router(query_router, prefix="/api/v1")

    @app.get("/", response_model=HealthResponse, tags=["health"])
    async def root() -> HealthResponse:
        """Liveness probe."""
        return HealthResponse(status="healthy", message="RAG Backend is running")

    return app


app = create_app()
