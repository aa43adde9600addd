"""
FastAPI middleware for observability.

CorrelationMiddleware binds a correlation ID to the request context and
echoes it in the response; RequestLoggingMiddleware logs one line per
request with status and latency.

Dependencies: starlette, docqa.observability
System role: Request/response observability injection
"""

import logging
import time

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

from docqa.observability.correlation import clear_correlation_id, set_correlation_id

logger = logging.getLogger(__name__)

CORRELATION_HEADER = "X-Correlation-ID"


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log each request's method, path, status code and latency."""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        started = time.perf_counter()
        context = {"method": request.method, "path": request.url.path}

        try:
            response = await call_next(request)
        except Exception as e:
            context["elapsed_ms"] = round((time.perf_counter() - started) * 1000, 2)
            logger.exception(
                f"{__name__}:dispatch - {request.method} {request.url.path} raised {type(e).__name__}",
                extra=context,
            )
            raise

        context.update(
            status_code=response.status_code,
            elapsed_ms=round((time.perf_counter() - started) * 1000, 2),
        )
        level = logging.WARNING if response.status_code >= 400 else logging.INFO
        logger.log(
            level,
            f"{__name__}:dispatch - {request.method} {request.url.path} -> {response.status_code}",
            extra=context,
        )
        return response


class CorrelationMiddleware(BaseHTTPMiddleware):
    """Bind the X-Correlation-ID header (or a new UUID) to the request."""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        """
        Inject correlation ID into request context and response headers.

        Args:
            request: Incoming request
            call_next: Next middleware in chain

        Returns:
            Response: Response carrying the correlation ID header
        """
        correlation_id = set_correlation_id(request.headers.get(CORRELATION_HEADER))
        try:
            response = await call_next(request)
        finally:
            clear_correlation_id()
        response.headers[CORRELATION_HEADER] = correlation_id
        return response
