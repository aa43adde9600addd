"""
Test suite for the document upload endpoint.

System role: Verification of POST /api/v1/documents
"""

from unittest.mock import AsyncMock

from fastapi.testclient import TestClient

from docqa.api.deps import get_document_service
from docqa.core.exceptions import EmbeddingProviderError, IndexLifecycleError


class TestUploadDocument:
    """Test suite for POST /api/v1/documents."""

    def test_upload_txt_should_return_created(self, client: TestClient) -> None:
        # Act
        response = client.post(
            "/api/v1/documents",
            files={"file": ("facts.txt", b"The sky is blue. Grass is green.", "text/plain")},
        )

        # Assert
        assert response.status_code == 201
        body = response.json()
        assert body["success"] is True
        assert body["message"] == "File uploaded and processed successfully"
        assert body["data"]["filename"] == "facts.txt"
        assert body["data"]["chunk_count"] == 1
        assert body["error"] is None

    def test_upload_csv_should_index_rows(self, client: TestClient) -> None:
        # Act
        response = client.post(
            "/api/v1/documents",
            files={"file": ("cities.csv", b"city,country\nParis,France\nBerlin,Germany\n", "text/csv")},
        )

        # Assert
        assert response.status_code == 201
        assert response.json()["data"]["chunk_count"] == 2

    def test_upload_unsupported_type_should_return_415(self, client: TestClient) -> None:
        # Act
        response = client.post(
            "/api/v1/documents",
            files={"file": ("report.docx", b"binary", "application/octet-stream")},
        )

        # Assert
        assert response.status_code == 415
        detail = response.json()["detail"]
        assert detail["success"] is False
        assert "Only PDF, TXT, or CSV" in detail["error"]

    def test_upload_without_file_should_return_400(self, client: TestClient) -> None:
        # Act
        response = client.post("/api/v1/documents")

        # Assert
        assert response.status_code == 400
        assert response.json()["detail"]["error"] == "No file uploaded"

    def test_upload_blank_file_should_return_422(self, client: TestClient) -> None:
        # Act
        response = client.post(
            "/api/v1/documents",
            files={"file": ("blank.txt", b"   \n\n  ", "text/plain")},
        )

        # Assert
        assert response.status_code == 422
        assert "No valid text content" in response.json()["detail"]["error"]

    def test_embedding_failure_should_return_500(self, client: TestClient) -> None:
        # Arrange
        service = AsyncMock()
        service.upload_document.side_effect = EmbeddingProviderError("quota exceeded")
        client.app.dependency_overrides[get_document_service] = lambda: service

        # Act
        response = client.post(
            "/api/v1/documents",
            files={"file": ("facts.txt", b"text", "text/plain")},
        )

        # Assert
        assert response.status_code == 500
        assert response.json()["detail"]["message"] == "Error processing file"

    def test_index_failure_should_return_503(self, client: TestClient) -> None:
        # Arrange
        service = AsyncMock()
        service.upload_document.side_effect = IndexLifecycleError("unreachable", operation="upsert")
        client.app.dependency_overrides[get_document_service] = lambda: service

        # Act
        response = client.post(
            "/api/v1/documents",
            files={"file": ("facts.txt", b"text", "text/plain")},
        )

        # Assert
        assert response.status_code == 503
