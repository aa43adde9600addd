"""
Test suite for InMemoryIndexService.

System role: Verification of the development vector store
"""

import pytest

from docqa.boundary.vdb import VectorRecord
from docqa.boundary.vdb.memory_index_service import InMemoryIndexService
from docqa.core.exceptions import IndexLifecycleError


@pytest.fixture
def service() -> InMemoryIndexService:
    """Provide service with a 2-dimension index named idx."""
    service = InMemoryIndexService(region="us-east-1", cloud="aws")
    service.create_index("idx", dimension=2, metric="cosine")
    return service


def record(record_id: str, values: list[float]) -> VectorRecord:
    return VectorRecord(id=record_id, values=values, content=f"text {record_id}", metadata={"k": record_id})


class TestLifecycle:
    """Test suite for index create/describe/delete."""

    def test_describe_should_report_dimension_and_location(self, service: InMemoryIndexService) -> None:
        # Act
        descriptor = service.describe_index("idx")

        # Assert
        assert descriptor.dimension == 2
        assert descriptor.metric == "cosine"
        assert descriptor.region == "us-east-1"
        assert descriptor.cloud == "aws"

    def test_describe_unknown_index_should_return_none(self, service: InMemoryIndexService) -> None:
        assert service.describe_index("missing") is None

    def test_create_existing_index_should_raise(self, service: InMemoryIndexService) -> None:
        with pytest.raises(IndexLifecycleError, match="already exists"):
            service.create_index("idx", dimension=2, metric="cosine")

    def test_create_non_cosine_index_should_raise(self, service: InMemoryIndexService) -> None:
        with pytest.raises(IndexLifecycleError, match="Unsupported metric"):
            service.create_index("other", dimension=2, metric="euclidean")

    def test_delete_should_remove_index(self, service: InMemoryIndexService) -> None:
        # Act
        service.delete_index("idx")

        # Assert
        assert service.describe_index("idx") is None


class TestVectors:
    """Test suite for namespace writes and queries."""

    def test_query_should_rank_by_cosine_similarity(self, service: InMemoryIndexService) -> None:
        # Arrange
        service.upsert("idx", "ns", [
            record("x", [1.0, 0.0]),
            record("y", [0.0, 1.0]),
            record("xy", [1.0, 1.0]),
            record("zero", [0.0, 0.0]),
        ])

        # Act
        results = service.query("idx", "ns", [1.0, 0.1], top_k=3)

        # Assert
        assert [r.chunk_id for r in results] == ["x", "xy", "y"]
        assert results[0].score == pytest.approx(1.0 / (1.01 ** 0.5))
        assert results[0].content == "text x"
        assert results[0].metadata == {"k": "x"}

    def test_namespaces_should_be_isolated(self, service: InMemoryIndexService) -> None:
        # Arrange
        service.upsert("idx", "a", [record("1", [1.0, 0.0])])
        service.upsert("idx", "b", [record("2", [1.0, 0.0])])

        # Act
        service.delete_namespace("idx", "a")

        # Assert
        assert service.query("idx", "a", [1.0, 0.0], top_k=3) == []
        assert [r.chunk_id for r in service.query("idx", "b", [1.0, 0.0], top_k=3)] == ["2"]

    def test_delete_missing_namespace_should_be_noop(self, service: InMemoryIndexService) -> None:
        service.delete_namespace("idx", "never-written")

    def test_upsert_same_id_should_overwrite(self, service: InMemoryIndexService) -> None:
        # Arrange
        service.upsert("idx", "ns", [record("1", [1.0, 0.0])])

        # Act
        service.upsert("idx", "ns", [record("1", [0.0, 1.0])])

        # Assert
        results = service.query("idx", "ns", [0.0, 1.0], top_k=3)
        assert len(results) == 1
        assert results[0].score == pytest.approx(1.0)

    def test_upsert_wrong_dimension_should_raise(self, service: InMemoryIndexService) -> None:
        with pytest.raises(IndexLifecycleError, match="dimension"):
            service.upsert("idx", "ns", [record("1", [1.0, 0.0, 0.0])])

    def test_operations_on_missing_index_should_raise(self, service: InMemoryIndexService) -> None:
        with pytest.raises(IndexLifecycleError, match="Index not found"):
            service.query("missing", "ns", [1.0, 0.0], top_k=3)
