"""
Shared test fixtures and configuration for entire test suite.

Provides: deterministic embeddings, in-memory index service, stub QA model,
pipeline factory, temp files
Dependencies: pytest, langchain_core
System role: Test infrastructure and fixture management
"""

import re
import zlib
from pathlib import Path
from typing import Callable

import pytest
from langchain_core.embeddings import Embeddings

from docqa.boundary.vdb.index_manager import VectorIndexManager
from docqa.boundary.vdb.memory_index_service import InMemoryIndexService
from docqa.core.answering.extractive import ExtractiveSynthesizer
from docqa.core.document_processing.tasks import ChunkingTask, ParsingTask
from docqa.core.rag_pipeline import RAGPipeline

DIMENSION = 768
INDEX_NAME = "test-index"
NAMESPACE = "default"


class KeywordEmbeddings(Embeddings):
    """Bag-of-words embeddings: each token increments one hashed bucket."""

    def __init__(self, dimension: int = DIMENSION) -> None:
        self.dimension = dimension
        self.calls = 0

    def _vector(self, text: str) -> list[float]:
        self.calls += 1
        vector = [0.0] * self.dimension
        for token in re.findall(r"[a-z0-9]+", text.lower()):
            vector[zlib.crc32(token.encode()) % self.dimension] += 1.0
        return vector

    def embed_documents(self, texts: list[str]) -> list[list[float]]:
        return [self._vector(text) for text in texts]

    def embed_query(self, text: str) -> list[float]:
        return self._vector(text)


def keyword_qa_pipeline(answers: list[str], score: float = 0.9) -> Callable[..., dict]:
    """Stub QA model returning the first known answer present in the context."""

    def _pipeline(question: str, context: str) -> dict:
        for answer in answers:
            position = context.find(answer)
            if position >= 0:
                return {"answer": answer, "score": score, "start": position, "end": position + len(answer)}
        return {"answer": "", "score": 0.0, "start": 0, "end": 0}

    return _pipeline


@pytest.fixture
def embeddings() -> KeywordEmbeddings:
    """Provide deterministic 768-dimension embeddings."""
    return KeywordEmbeddings()


@pytest.fixture
def index_service() -> InMemoryIndexService:
    """Provide an empty in-memory index service."""
    return InMemoryIndexService(region="us-east-1", cloud="aws")


@pytest.fixture
def index_manager(index_service: InMemoryIndexService) -> VectorIndexManager:
    """Provide index manager with instant deletion polling."""
    return VectorIndexManager(
        index_service=index_service,
        region="us-east-1",
        cloud="aws",
        delete_poll_attempts=3,
        delete_poll_initial_wait=0,
        delete_poll_max_wait=0,
    )


@pytest.fixture
def synthesizer() -> ExtractiveSynthesizer:
    """Provide extractive synthesizer backed by a stub QA model."""
    return ExtractiveSynthesizer(qa_pipeline=keyword_qa_pipeline(["blue", "green", "Paris"]))


@pytest.fixture
def pipeline(
    embeddings: KeywordEmbeddings,
    index_manager: VectorIndexManager,
    synthesizer: ExtractiveSynthesizer,
) -> RAGPipeline:
    """Provide RAG pipeline wired to in-memory collaborators."""
    return RAGPipeline(
        parser=ParsingTask(),
        chunker=ChunkingTask(chunk_size=500, chunk_overlap=100),
        embeddings=embeddings,
        index_manager=index_manager,
        synthesizer=synthesizer,
        index_name=INDEX_NAME,
        namespace=NAMESPACE,
        dimension=DIMENSION,
        top_k=3,
    )


@pytest.fixture
def write_file(tmp_path: Path) -> Callable[[str, str], Path]:
    """
    Provide a factory writing text files under a temp directory.

    Returns:
        Callable: (filename, content) -> Path
    """

    def _write(filename: str, content: str) -> Path:
        path = tmp_path / filename
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def embeddings_cls() -> type[KeywordEmbeddings]:
    """Provide the deterministic embeddings class for other dimensions."""
    return KeywordEmbeddings
