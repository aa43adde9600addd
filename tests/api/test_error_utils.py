"""
Test suite for domain error to HTTP status mapping.

System role: Verification of router error translation
"""

import pytest

from docqa.api.routers.router_utils import status_code_for, to_http_exception
from docqa.core.exceptions import (
    DimensionMismatchError,
    EmbeddingProviderError,
    EmptyContentError,
    IndexLifecycleError,
    SynthesisError,
    UnsupportedFileTypeError,
    ValidationError,
)


@pytest.mark.parametrize(
    "error, expected",
    [
        (ValidationError("bad"), 400),
        (UnsupportedFileTypeError("docx"), 415),
        (EmptyContentError("empty"), 422),
        (DimensionMismatchError(expected=768, actual=3), 500),
        (EmbeddingProviderError("down"), 500),
        (IndexLifecycleError("gone"), 503),
        (SynthesisError("failed"), 500),
        (RuntimeError("unexpected"), 500),
    ],
)
def test_status_code_for(error: Exception, expected: int) -> None:
    assert status_code_for(error) == expected


def test_http_exception_detail_should_be_failed_envelope() -> None:
    # Act
    exc = to_http_exception(EmptyContentError("No valid text content", {"extension": "txt"}), "Error processing file")

    # Assert
    assert exc.status_code == 422
    assert exc.detail == {
        "success": False,
        "data": None,
        "message": "Error processing file",
        "error": "No valid text content",
    }
