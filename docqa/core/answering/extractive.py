"""
Extractive answer synthesizer.

Runs a transformers question-answering model over the retrieved context and
returns the located span with surrounding text, so the user sees the sentence
around the fact rather than the bare fact.

Dependencies: transformers
System role: Local answer synthesis (no API key required)
"""

import logging
import threading
from typing import Any, Callable

from docqa.core.answering.base import Answer, AnswerSynthesizer
from docqa.core.exceptions import SynthesisError

logger = logging.getLogger(__name__)

NO_CONTEXT_ANSWER = "I couldn't find relevant information."
EXTRACTION_FAILED_ANSWER = "I found the document but couldn't extract the exact answer."
ELLIPSIS = "..."


class ExtractiveSynthesizer(AnswerSynthesizer):
    """Span extraction with enriched-window and prefix fallbacks."""

    strategy = "extractive"

    def __init__(
        self,
        model_name: str = "distilbert/distilbert-base-cased-distilled-squad",
        confidence_threshold: float = 0.1,
        max_context_chars: int = 1500,
        fallback_chars: int = 1200,
        window_before: int = 100,
        window_after: int = 300,
        qa_pipeline: Callable[..., Any] | None = None,
    ) -> None:
        """
        Configure the synthesizer; the QA model loads on first use.

        Args:
            model_name: transformers question-answering model
            confidence_threshold: Score a span must exceed to be returned
            max_context_chars: Context prefix passed to the model
            fallback_chars: Context prefix returned without a confident span
            window_before: Characters kept before the span
            window_after: Characters kept after the end of the span
            qa_pipeline: Preloaded pipeline callable (tests)
        """
        self.model_name = model_name
        self.confidence_threshold = confidence_threshold
        self.max_context_chars = max_context_chars
        self.fallback_chars = fallback_chars
        self.window_before = window_before
        self.window_after = window_after
        self._qa_pipeline = qa_pipeline
        self._lock = threading.Lock()

    def _get_pipeline(self) -> Callable[..., Any]:
        if self._qa_pipeline is None:
            with self._lock:
                if self._qa_pipeline is None:
                    from transformers import pipeline

                    logger.info(f"{__name__}:_get_pipeline - Loading QA model {self.model_name}")
                    self._qa_pipeline = pipeline("question-answering", model=self.model_name)
                    logger.info(f"{__name__}:_get_pipeline - QA model ready")
        return self._qa_pipeline

    def _extract(self, context: str, question: str) -> tuple[str, float]:
        try:
            result = self._get_pipeline()(question=question, context=context)
        except Exception as e:
            raise SynthesisError(
                f"Question answering model failed: {e}",
                {"model": self.model_name},
            ) from e
        if isinstance(result, list):
            result = result[0] if result else {}
        return str(result.get("answer") or "").strip(), float(result.get("score") or 0.0)

    def _enrich(self, context: str, span: str) -> str | None:
        position = context.find(span)
        if position < 0:
            return None
        start = max(0, position - self.window_before)
        end = min(len(context), position + len(span) + self.window_after)
        return context[start:end].strip() + ELLIPSIS

    def _prefix(self, context: str) -> str:
        return context[: self.fallback_chars].strip() + ELLIPSIS

    def synthesize(self, context: str, question: str) -> Answer:
        """
        Extract an answer span and return it with surrounding context.

        Args:
            context: Retrieved chunk texts joined in rank order
            question: User question

        Returns:
            Answer: Enriched span, context prefix, or a fixed fallback message
        """
        if not context or not question:
            return Answer(content=NO_CONTEXT_ANSWER, strategy=self.strategy)

        limited_context = context[: self.max_context_chars]
        try:
            span, score = self._extract(limited_context, question)
        except SynthesisError as e:
            logger.error(f"{__name__}:synthesize - {e}")
            return Answer(content=EXTRACTION_FAILED_ANSWER, strategy=self.strategy)

        if span and score > self.confidence_threshold:
            enriched = self._enrich(context, span)
            if enriched is not None:
                return Answer(content=enriched, strategy=self.strategy, confidence=score)

        logger.info(
            f"{__name__}:synthesize - No confident span (score={score:.4f}), returning context prefix"
        )
        return Answer(content=self._prefix(context), strategy=self.strategy, confidence=score)
