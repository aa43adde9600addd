"""
Document processing for ingestion.

Loading and chunking stages that feed the embedding and index stages.

Dependencies: langchain_community, langchain_text_splitters, pydantic
System role: Document ingestion building blocks
"""

from .configs import DocumentPipelineSettings
from .models import Chunk, PipelineResult
from .tasks import ChunkingTask, ParsingTask, validate_extension

__all__ = [
    "DocumentPipelineSettings",
    "Chunk",
    "PipelineResult",
    "ChunkingTask",
    "ParsingTask",
    "validate_extension",
]
