"""
RAG pipeline orchestrator.

Ingestion: load -> chunk -> embed -> validate -> ensure index -> clear namespace -> upsert.
Query: validate -> ensure index -> retrieve top-k -> build context -> synthesize.

Stages run strictly in sequence; each stage's output is the next stage's
only input. The namespace holds exactly one document and a new ingest
replaces it wholesale.

Dependencies: docqa.core, docqa.boundary.vdb
System role: Pipeline orchestration (coordinates only)
"""

import logging
import time
import uuid

from langchain_core.embeddings import Embeddings

from docqa.boundary.vdb import IndexDescriptor, IndexHandle, VectorIndexManager
from docqa.configs import Settings
from docqa.core.answering import AnswerSynthesizer
from docqa.core.document_processing.models import Chunk, PipelineResult
from docqa.core.document_processing.tasks import ChunkingTask, ParsingTask, validate_extension
from docqa.core.exceptions import (
    DimensionMismatchError,
    EmbeddingProviderError,
    EmptyContentError,
    UnsupportedFileTypeError,
    ValidationError,
)
from docqa.core.retriever import Retriever, build_context

logger = logging.getLogger(__name__)


class RAGPipeline:
    """Sequences ingestion and query over injected components."""

    def __init__(
        self,
        parser: ParsingTask,
        chunker: ChunkingTask,
        embeddings: Embeddings,
        index_manager: VectorIndexManager,
        synthesizer: AnswerSynthesizer,
        index_name: str,
        namespace: str = "default",
        dimension: int = 768,
        top_k: int = 3,
        retriever: Retriever | None = None,
    ) -> None:
        """
        Initialize pipeline with its collaborators.

        Args:
            parser: Loader dispatching on file extension
            chunker: Text splitter
            embeddings: Embedding provider (local or remote)
            index_manager: Index lifecycle manager
            synthesizer: Answer synthesizer (extractive or generative)
            index_name: Vector index name
            namespace: Namespace holding the active document
            dimension: Required dimension of every vector
            top_k: Chunks retrieved per question
            retriever: Retriever override (built from embeddings and index_manager when None)
        """
        self._parser = parser
        self._chunker = chunker
        self._embeddings = embeddings
        self._index_manager = index_manager
        self._synthesizer = synthesizer
        self._retriever = retriever or Retriever(index_manager, embeddings)
        self.index_name = index_name
        self.namespace = namespace
        self.dimension = dimension
        self.top_k = top_k

    @classmethod
    def from_settings(cls, settings: Settings) -> "RAGPipeline":
        """Build a pipeline with the strategies selected in settings."""
        from docqa.boundary.vdb.vector_store_factory import get_index_manager
        from docqa.core.answering import get_synthesizer
        from docqa.core.embeddings import get_embeddings

        return cls(
            parser=ParsingTask(),
            chunker=ChunkingTask(
                chunk_size=settings.pipeline.chunk_size,
                chunk_overlap=settings.pipeline.chunk_overlap,
            ),
            embeddings=get_embeddings(settings),
            index_manager=get_index_manager(settings),
            synthesizer=get_synthesizer(settings),
            index_name=settings.vector_store.index_name,
            namespace=settings.vector_store.namespace,
            dimension=settings.vector_store.dimension,
            top_k=settings.vector_store.top_k,
        )

    def describe_index(self) -> IndexDescriptor | None:
        """Describe the configured index without creating it."""
        return self._index_manager.describe_index(self.index_name)

    def ensure_index(self) -> IndexHandle:
        """Create or validate the index; the dimension is re-derived on every call."""
        return self._index_manager.ensure_index(self.index_name, self.dimension)

    def _embed_chunks(self, chunks: list[Chunk]) -> list[list[float]]:
        logger.info(f"{__name__}:_embed_chunks - Generating embeddings for {len(chunks)} chunks...")
        vectors = self._embeddings.embed_documents([chunk.content for chunk in chunks])
        logger.info(f"{__name__}:_embed_chunks - Generated {len(vectors)} embeddings")

        if not vectors or any(len(vector) == 0 for vector in vectors):
            raise EmbeddingProviderError(
                "Embedding generation returned empty vectors (dimension 0). "
                "This usually indicates an API issue or invalid model name.",
                {"vector_count": len(vectors)},
            )
        if len(vectors) != len(chunks):
            raise EmbeddingProviderError(
                "Chunks and embeddings length mismatch",
                {"chunks": len(chunks), "embeddings": len(vectors)},
            )
        for vector in vectors:
            if len(vector) != self.dimension:
                raise DimensionMismatchError(expected=self.dimension, actual=len(vector))
        return vectors

    def ingest(self, file_path: str, extension: str) -> PipelineResult:
        """
        Replace the namespace contents with one document.

        The namespace is cleared only after chunking and embedding succeed.
        Clear-then-upsert is not atomic: a concurrent query may observe an
        empty or partially written namespace.

        Args:
            file_path: Local path of the uploaded document
            extension: File extension selecting the loader

        Returns:
            PipelineResult: Chunk count and timing

        Raises:
            UnsupportedFileTypeError: Extension has no loader (before any other call)
            EmptyContentError: No text survives chunking
            EmbeddingProviderError: Embedding failed or returned empty vectors
            DimensionMismatchError: Vector length differs from the index dimension
            IndexLifecycleError: Index create/clear/write failed
        """
        check = validate_extension(extension)
        if not check.ok:
            raise UnsupportedFileTypeError(check.extension)

        start_time = time.perf_counter()
        document_id = str(uuid.uuid4())
        logger.info(f"{__name__}:ingest - Starting vector storage for {check.extension} file...")

        documents = self._parser.parse(file_path, check.extension)
        logger.info(f"{__name__}:ingest - Data loaded: {len(documents)} documents")

        chunks = self._chunker.chunk(documents)
        if not chunks:
            raise EmptyContentError(
                "No valid text content could be extracted from the file. Please check if "
                "the file is empty or contains only images/scanned text.",
                {"extension": check.extension},
            )
        for chunk in chunks:
            chunk.metadata["document_id"] = document_id

        vectors = self._embed_chunks(chunks)

        handle = self.ensure_index()
        self._index_manager.clear_namespace(handle, self.namespace)
        chunk_ids = self._index_manager.upsert(handle, self.namespace, chunks, vectors)

        elapsed_ms = (time.perf_counter() - start_time) * 1000
        logger.info(
            f"{__name__}:ingest - Vectors stored successfully",
            extra={"document_id": document_id, "chunk_count": len(chunk_ids), "elapsed_ms": elapsed_ms},
        )
        return PipelineResult(
            document_id=document_id,
            chunk_count=len(chunk_ids),
            index_name=handle.name,
            namespace=self.namespace,
            processing_time_ms=elapsed_ms,
        )

    def answer(self, query: str) -> str:
        """
        Answer a question about the active document.

        Args:
            query: Question text

        Returns:
            str: Answer content

        Raises:
            ValidationError: Query is empty after trimming (no provider is contacted)
            EmbeddingProviderError, DimensionMismatchError, IndexLifecycleError: Retrieval failed
        """
        question = (query or "").strip()
        if not question:
            raise ValidationError("Bad request. Query is required.", field="query")

        handle = self.ensure_index()
        results = self._retriever.retrieve(handle, self.namespace, question, self.top_k)
        context = build_context(results)

        logger.info(f"{__name__}:answer - Generating response from {len(results)} chunks")
        return self._synthesizer.synthesize(context, question).content
