"""
Task modules for document processing pipeline.

Exports: ParsingTask, ChunkingTask, validate_extension
"""

from .chunking_task import ChunkingTask
from .parsing_task import (
    SUPPORTED_EXTENSIONS,
    ExtensionCheck,
    ParsingError,
    ParsingTask,
    normalize_extension,
    validate_extension,
)

__all__ = [
    "SUPPORTED_EXTENSIONS",
    "ExtensionCheck",
    "ParsingTask",
    "ParsingError",
    "ChunkingTask",
    "normalize_extension",
    "validate_extension",
]
