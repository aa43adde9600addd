"""
Test suite for DocumentService.

Tests temp file handling around pipeline ingestion.
Uses a mocked RAGPipeline.

System role: Verification of document service orchestration layer
"""

import os
from unittest.mock import MagicMock

import pytest

from docqa.application.services.document_service import DocumentService
from docqa.core.document_processing.models import PipelineResult
from docqa.core.exceptions import EmptyContentError, UnsupportedFileTypeError, ValidationError


@pytest.fixture
def sample_result() -> PipelineResult:
    """Provide sample PipelineResult."""
    return PipelineResult(
        document_id="doc-1",
        chunk_count=3,
        index_name="docqa",
        namespace="default",
        processing_time_ms=12.5,
    )


@pytest.fixture
def mock_pipeline(sample_result: PipelineResult) -> MagicMock:
    """Provide mock RAGPipeline recording the temp file it was given."""
    pipeline = MagicMock()
    pipeline.seen = {}

    def _ingest(file_path: str, extension: str) -> PipelineResult:
        with open(file_path, "rb") as f:
            pipeline.seen = {"path": file_path, "extension": extension, "content": f.read()}
        return sample_result

    pipeline.ingest.side_effect = _ingest
    return pipeline


class TestUploadDocument:
    """Test suite for DocumentService.upload_document."""

    @pytest.mark.asyncio
    async def test_upload_should_ingest_temp_copy(
        self, mock_pipeline: MagicMock, sample_result: PipelineResult
    ) -> None:
        # Arrange
        service = DocumentService(pipeline=mock_pipeline)

        # Act
        result = await service.upload_document("Notes.TXT", b"The sky is blue.")

        # Assert
        assert result is sample_result
        assert mock_pipeline.seen["extension"] == "txt"
        assert mock_pipeline.seen["content"] == b"The sky is blue."
        assert mock_pipeline.seen["path"].endswith(".txt")

    @pytest.mark.asyncio
    async def test_temp_file_should_be_removed_after_success(self, mock_pipeline: MagicMock) -> None:
        # Arrange
        service = DocumentService(pipeline=mock_pipeline)

        # Act
        await service.upload_document("a.csv", b"x,y\n1,2\n")

        # Assert
        assert not os.path.exists(mock_pipeline.seen["path"])

    @pytest.mark.asyncio
    async def test_temp_file_should_be_removed_after_failure(self) -> None:
        # Arrange
        pipeline = MagicMock()
        seen = {}

        def _ingest(file_path: str, extension: str) -> None:
            seen["path"] = file_path
            raise EmptyContentError("No valid text content")

        pipeline.ingest.side_effect = _ingest
        service = DocumentService(pipeline=pipeline)

        # Act & Assert
        with pytest.raises(EmptyContentError):
            await service.upload_document("blank.txt", b"   ")
        assert not os.path.exists(seen["path"])

    @pytest.mark.asyncio
    async def test_unsupported_extension_should_raise_before_ingest(self, mock_pipeline: MagicMock) -> None:
        # Arrange
        service = DocumentService(pipeline=mock_pipeline)

        # Act & Assert
        with pytest.raises(UnsupportedFileTypeError):
            await service.upload_document("report.docx", b"data")
        mock_pipeline.ingest.assert_not_called()

    @pytest.mark.asyncio
    async def test_empty_filename_should_raise_validation_error(self, mock_pipeline: MagicMock) -> None:
        # Arrange
        service = DocumentService(pipeline=mock_pipeline)

        # Act & Assert
        with pytest.raises(ValidationError, match="No file provided"):
            await service.upload_document("", b"data")
