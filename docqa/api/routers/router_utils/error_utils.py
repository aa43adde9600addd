"""
Error translation helpers.

Maps domain exceptions to HTTP status codes and response envelopes.

Dependencies: fastapi, docqa.core.exceptions, docqa.models
System role: Domain error to HTTP error mapping
"""

from fastapi import HTTPException, status

from docqa.core.exceptions import (
    DimensionMismatchError,
    DocQAException,
    EmbeddingProviderError,
    EmptyContentError,
    IndexLifecycleError,
    UnsupportedFileTypeError,
    ValidationError,
)
from docqa.models.common import ApiResponse

# Most specific first: UnsupportedFileTypeError is a ValidationError
_STATUS_CODES: list[tuple[type[Exception], int]] = [
    (UnsupportedFileTypeError, status.HTTP_415_UNSUPPORTED_MEDIA_TYPE),
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (EmptyContentError, 422),
    (DimensionMismatchError, status.HTTP_500_INTERNAL_SERVER_ERROR),
    (EmbeddingProviderError, status.HTTP_500_INTERNAL_SERVER_ERROR),
    (IndexLifecycleError, status.HTTP_503_SERVICE_UNAVAILABLE),
]


def status_code_for(error: Exception) -> int:
    """Return the HTTP status code for an exception."""
    for error_type, code in _STATUS_CODES:
        if isinstance(error, error_type):
            return code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def to_http_exception(error: Exception, message: str) -> HTTPException:
    """
    Build an HTTPException whose detail is a failed response envelope.

    Args:
        error: Exception raised by the service layer
        message: Operation-level summary shown to the client

    Returns:
        HTTPException: Exception with mapped status code
    """
    error_text = error.message if isinstance(error, DocQAException) else str(error)
    envelope = ApiResponse(success=False, message=message, error=error_text)
    return HTTPException(status_code=status_code_for(error), detail=envelope.model_dump())
