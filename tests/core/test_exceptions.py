"""
Test suite for the exception hierarchy.

System role: Verification of error context and classification
"""

import pytest

from docqa.core.exceptions import (
    DimensionMismatchError,
    DocQAException,
    EmbeddingProviderError,
    EmptyContentError,
    IndexLifecycleError,
    SynthesisError,
    UnsupportedFileTypeError,
    ValidationError,
)


@pytest.mark.parametrize(
    "error",
    [
        ValidationError("bad"),
        UnsupportedFileTypeError("docx"),
        EmptyContentError("empty"),
        EmbeddingProviderError("down"),
        DimensionMismatchError(expected=768, actual=384),
        IndexLifecycleError("gone"),
        SynthesisError("failed"),
    ],
)
def test_all_errors_should_share_base(error: DocQAException) -> None:
    assert isinstance(error, DocQAException)


def test_str_should_include_details() -> None:
    error = IndexLifecycleError("Failed to create index", operation="create", details={"index": "docqa"})

    assert str(error) == "Failed to create index | Details: {'index': 'docqa', 'operation': 'create'}"


def test_str_without_details_should_be_message() -> None:
    assert str(EmptyContentError("empty")) == "empty"


def test_unsupported_file_type_is_validation_error() -> None:
    error = UnsupportedFileTypeError("docx")

    assert isinstance(error, ValidationError)
    assert error.details == {"extension": "docx", "field": "extension"}


def test_dimension_mismatch_should_expose_dimensions() -> None:
    error = DimensionMismatchError(expected=768, actual=384)

    assert (error.expected, error.actual) == (768, 384)
    assert "returned 384" in error.message
