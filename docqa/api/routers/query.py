"""
Query API endpoints.

Routes: POST /query

Dependencies: docqa.application.services.query_service, docqa.models
System role: Question answering HTTP API
"""

import logging

from fastapi import APIRouter, Depends

from docqa.api.deps import get_query_service
from docqa.api.routers.router_utils import to_http_exception
from docqa.application.services.query_service import QueryService
from docqa.models.query import QueryRequest, QueryResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/query", tags=["query"])


@router.post("", response_model=QueryResponse)
async def query(
    request: QueryRequest,
    query_service: QueryService = Depends(get_query_service),
) -> QueryResponse:
    """
    Answer a question about the active document.

    Raises:
        HTTPException(400): Query is empty
        HTTPException(500): Embedding failure
        HTTPException(503): Vector index unavailable
    """
    try:
        answer = await query_service.ask(request.query)
    except Exception as e:
        logger.error(
            f"{__name__}:query - Query failed: {e}",
            extra={"error_type": type(e).__name__},
        )
        raise to_http_exception(e, "Error processing query") from e

    return QueryResponse(data=answer, message="Query processed successfully")
