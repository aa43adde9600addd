"""
Exception hierarchy for the document Q&A pipeline.

Provides layered exception structure for domain-specific errors.
All exceptions include context for observability and debugging.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from typing import Any


class DocQAException(Exception):
    """Base exception for all document Q&A errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging
        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class ValidationError(DocQAException):
    """Raised when input validation fails (empty query, bad upload)."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize validation error.

        Args:
            message: Error message
            field: Field name that failed validation
            details: Additional context
        """
        details = details or {}
        if field:
            details["field"] = field
        super().__init__(message, details)


class UnsupportedFileTypeError(ValidationError):
    """Raised when a document extension has no loader."""

    def __init__(self, extension: str, details: dict[str, Any] | None = None) -> None:
        details = details or {}
        details["extension"] = extension
        super().__init__(
            f"Unsupported file type: '{extension}'. Only PDF, TXT, or CSV files are allowed.",
            field="extension",
            details=details,
        )


class EmptyContentError(DocQAException):
    """Raised when a document yields no extractable text after chunking."""

    pass


class EmbeddingProviderError(DocQAException):
    """Raised when embedding generation fails or returns empty vectors."""

    pass


class DimensionMismatchError(DocQAException):
    """Raised when a vector length differs from the index dimension."""

    def __init__(
        self,
        expected: int,
        actual: int,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize dimension mismatch error.

        Args:
            expected: Dimension required by the index
            actual: Dimension produced by the embedding model
            details: Additional context
        """
        details = details or {}
        details.update({"expected": expected, "actual": actual})
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Embedding dimension mismatch: model returned {actual} but index expects {expected}",
            details,
        )


class IndexLifecycleError(DocQAException):
    """Raised when vector index operations (describe, create, delete, write) fail."""

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize index lifecycle error.

        Args:
            message: Error message
            operation: Operation that failed (describe, create, delete, upsert, query)
            details: Additional context
        """
        details = details or {}
        if operation:
            details["operation"] = operation
        super().__init__(message, details)


class SynthesisError(DocQAException):
    """Raised when a completion or extraction provider fails."""

    pass
