"""
Document API endpoints.

Routes: POST /documents

Uploading a document replaces the active document in the namespace.

Dependencies: docqa.application.services.document_service, docqa.models
System role: Document HTTP API
"""

import logging

from fastapi import APIRouter, Depends, File, UploadFile, status

from docqa.api.deps import get_document_service
from docqa.api.routers.router_utils import to_http_exception
from docqa.application.services.document_service import DocumentService
from docqa.core.exceptions import ValidationError
from docqa.models.document import UploadResponse, UploadResult

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/documents", tags=["documents"])


@router.post("", response_model=UploadResponse, status_code=status.HTTP_201_CREATED)
async def upload_document(
    file: UploadFile | None = File(default=None),
    document_service: DocumentService = Depends(get_document_service),
) -> UploadResponse:
    """
    Upload a PDF, TXT, or CSV file and index it.

    Args:
        file: Multipart file upload
        document_service: Injected DocumentService

    Returns:
        UploadResponse: Document id, chunk count, and timing

    Raises:
        HTTPException(400): No file provided
        HTTPException(415): Unsupported file type
        HTTPException(422): No text content in the file
        HTTPException(500): Embedding failure
        HTTPException(503): Vector index unavailable
    """
    try:
        if file is None or not file.filename:
            raise ValidationError("No file uploaded", field="file")

        content = await file.read()
        result = await document_service.upload_document(filename=file.filename, content=content)
    except Exception as e:
        logger.error(
            f"{__name__}:upload_document - Upload failed: {e}",
            extra={"error_type": type(e).__name__},
        )
        raise to_http_exception(e, "Error processing file") from e

    return UploadResponse(
        data=UploadResult(
            document_id=result.document_id,
            filename=file.filename,
            chunk_count=result.chunk_count,
            processing_time_ms=result.processing_time_ms,
        ),
        message="File uploaded and processed successfully",
    )
