"""
Query service for document Q&A.

Runs the blocking RAG query path in a worker thread.

Dependencies: fastapi.concurrency, docqa.core
System role: Query orchestration layer
"""

import logging

from fastapi.concurrency import run_in_threadpool

from docqa.core.rag_pipeline import RAGPipeline

logger = logging.getLogger(__name__)


class QueryService:
    """Answers questions about the active document."""

    def __init__(self, pipeline: RAGPipeline) -> None:
        self._pipeline = pipeline

    async def ask(self, query: str) -> str:
        """
        Answer a question.

        Args:
            query: Question text

        Returns:
            str: Answer content

        Raises:
            ValidationError: If the query is empty
        """
        return await run_in_threadpool(self._pipeline.answer, query)
