"""
Text chunking task using RecursiveCharacterTextSplitter.

Splits documents into overlapping, bounded-size chunks while preserving context.
Separators are tried coarsest first: paragraph, line, sentence, word, character.

Dependencies: langchain_text_splitters
System role: Second stage of document ingestion pipeline
"""

import hashlib
import logging

from langchain_core.documents import Document
from langchain_text_splitters import RecursiveCharacterTextSplitter

from ..models import Chunk

logger = logging.getLogger(__name__)

SEPARATORS: list[str] = ["\n\n", "\n", ". ", "? ", "! ", " ", ""]


class ChunkingTask:
    """Split documents into chunks using RecursiveCharacterTextSplitter."""

    def __init__(
        self,
        chunk_size: int = 500,
        chunk_overlap: int = 100,
    ) -> None:
        """
        Initialize chunking task with splitter configuration.

        Args:
            chunk_size: Maximum chunk size in characters
            chunk_overlap: Overlap between consecutive chunks

        Raises:
            ValueError: When overlap is negative or not smaller than chunk_size
        """
        if chunk_size <= 0:
            raise ValueError("chunk_size must be positive")
        if not 0 <= chunk_overlap < chunk_size:
            raise ValueError(
                f"chunk_overlap must satisfy 0 <= overlap < chunk_size, got {chunk_overlap}"
            )

        self.chunk_size = chunk_size
        self.chunk_overlap = chunk_overlap
        self._splitter = RecursiveCharacterTextSplitter(
            separators=SEPARATORS,
            chunk_size=chunk_size,
            chunk_overlap=chunk_overlap,
            keep_separator="end",
            add_start_index=True,
            length_function=len,
        )

    def chunk(self, documents: list[Document]) -> list[Chunk]:
        """
        Split documents into chunks, dropping whitespace-only pieces.

        An empty result is returned as-is; the caller decides whether that
        is an error.

        Args:
            documents: LangChain Documents to split

        Returns:
            list[Chunk]: Chunks with source metadata, start_index and chunk_index
        """
        if not documents:
            return []

        pieces = self._splitter.split_documents(documents)
        kept = [piece for piece in pieces if piece.page_content and piece.page_content.strip()]

        logger.info(
            f"{__name__}:chunk - Split into {len(pieces)} chunks, "
            f"{len(kept)} remaining after filtering"
        )

        chunks = []
        for index, piece in enumerate(kept):
            metadata = dict(piece.metadata)
            metadata["chunk_index"] = index
            chunks.append(
                Chunk(
                    id=self._generate_chunk_id(piece.page_content, metadata),
                    content=piece.page_content,
                    metadata=metadata,
                )
            )
        return chunks

    def _generate_chunk_id(self, content: str, metadata: dict) -> str:
        """
        Generate deterministic chunk ID from content and metadata.

        Args:
            content: Chunk text content
            metadata: Chunk metadata

        Returns:
            str: SHA-256 hash prefix of content + source + start_index + chunk_index
        """
        source = metadata.get("source", "")
        start_index = metadata.get("start_index", 0)
        chunk_index = metadata.get("chunk_index", 0)
        hash_input = f"{content}:{source}:{start_index}:{chunk_index}"
        return hashlib.sha256(hash_input.encode()).hexdigest()[:16]
