"""
Core business logic module.

Contains the RAG pipeline, its components, and the exception hierarchy.
"""

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

__all__ = [
    "DocQAException",
    "ValidationError",
    "UnsupportedFileTypeError",
    "EmptyContentError",
    "EmbeddingProviderError",
    "DimensionMismatchError",
    "IndexLifecycleError",
    "SynthesisError",
]
