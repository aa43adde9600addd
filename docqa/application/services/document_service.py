"""
Document service orchestrator.

Coordinates upload handling: extension validation, temporary file
storage, and ingestion through the RAG pipeline.

Dependencies: fastapi.concurrency, docqa.core
System role: Document upload orchestration
"""

import logging
import os
import tempfile
from pathlib import Path

from fastapi.concurrency import run_in_threadpool

from docqa.core.document_processing.models import PipelineResult
from docqa.core.document_processing.tasks import validate_extension
from docqa.core.exceptions import UnsupportedFileTypeError, ValidationError
from docqa.core.rag_pipeline import RAGPipeline

logger = logging.getLogger(__name__)


class DocumentService:
    """
    Document service orchestrator.

    Writes uploads to a temporary file so LangChain loaders can read them
    from disk, ingests them, and always removes the file afterwards.
    """

    def __init__(self, pipeline: RAGPipeline) -> None:
        """
        Initialize document service.

        Args:
            pipeline: RAG pipeline used for ingestion
        """
        self._pipeline = pipeline

    async def upload_document(self, filename: str, content: bytes) -> PipelineResult:
        """
        Ingest an uploaded document, replacing the active document.

        Args:
            filename: Original filename (its suffix selects the loader)
            content: Raw file bytes

        Returns:
            PipelineResult: Ingestion result with chunk count and timing

        Raises:
            ValidationError: If the filename is empty
            UnsupportedFileTypeError: If the extension has no loader
        """
        if not filename:
            raise ValidationError("No file provided", field="file")

        extension = Path(filename).suffix
        check = validate_extension(extension)
        if not check.ok:
            raise UnsupportedFileTypeError(check.extension)

        logger.info(
            f"{__name__}:upload_document - Received {filename}",
            extra={"extension": check.extension, "size_bytes": len(content)},
        )

        fd, temp_path = tempfile.mkstemp(prefix="upload_", suffix=f".{check.extension}")
        try:
            with os.fdopen(fd, "wb") as f:
                f.write(content)
            return await run_in_threadpool(self._pipeline.ingest, temp_path, check.extension)
        finally:
            try:
                os.unlink(temp_path)
            except OSError:
                logger.warning(f"{__name__}:upload_document - Could not clean up temp file {temp_path}")
