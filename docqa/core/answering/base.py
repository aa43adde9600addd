"""
Answer synthesizer contract.

Dependencies: pydantic
System role: Strategy interface for turning retrieved context into an answer
"""

from abc import ABC, abstractmethod

from pydantic import BaseModel, Field


class Answer(BaseModel):
    """Synthesized answer returned to the caller; never persisted."""

    content: str = Field(description="Answer text")
    strategy: str = Field(description="Synthesizer that produced the answer")
    confidence: float | None = Field(
        default=None,
        description="Extraction confidence when available",
    )


class AnswerSynthesizer(ABC):
    """Turns a context string and a question into an Answer."""

    strategy: str = "base"

    @abstractmethod
    def synthesize(self, context: str, question: str) -> Answer:
        """
        Produce an answer from context.

        Implementations return a fallback answer instead of raising when the
        underlying model fails.
        """
