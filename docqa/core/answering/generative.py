"""
Generative answer synthesizer.

Sends the retrieved context and the question to a Gemini chat model with an
instruction to answer only from the context. Provider failures become a
descriptive answer instead of an exception.

Dependencies: langchain_google_genai, langchain_core
System role: Hosted answer synthesis
"""

import logging
from typing import Any

from langchain_core.language_models import BaseChatModel

from docqa.core.answering.base import Answer, AnswerSynthesizer
from docqa.core.answering.prompt import ANSWER_PROMPT
from docqa.core.exceptions import SynthesisError

logger = logging.getLogger(__name__)

NEED_MORE_INFORMATION_ANSWER = "I need more information to answer that question."
NO_RESPONSE_ANSWER = "No response generated."


def _message_text(message: Any) -> str:
    """Flatten chat message content, which may be a string or a list of parts."""
    content = getattr(message, "content", message)
    if isinstance(content, str):
        return content
    if isinstance(content, list):
        parts = []
        for part in content:
            if isinstance(part, str):
                parts.append(part)
            elif isinstance(part, dict) and part.get("type") == "text":
                parts.append(part.get("text", ""))
        return "".join(parts)
    return ""


class GenerativeSynthesizer(AnswerSynthesizer):
    """Single-turn grounded completion."""

    strategy = "generative"

    def __init__(
        self,
        model_id: str = "gemini-2.0-flash",
        temperature: float = 0.0,
        google_api_key: str | None = None,
        llm: BaseChatModel | None = None,
    ) -> None:
        """
        Initialize chat model.

        Args:
            model_id: Gemini model identifier
            temperature: Model temperature (0.0 for deterministic)
            google_api_key: API key (GOOGLE_API_KEY env var when None)
            llm: Preconfigured chat model (tests)
        """
        self._model_id = model_id
        if llm is None:
            from langchain_google_genai import ChatGoogleGenerativeAI

            kwargs: dict[str, Any] = {"model": model_id, "temperature": temperature}
            if google_api_key:
                kwargs["google_api_key"] = google_api_key
            llm = ChatGoogleGenerativeAI(**kwargs)
        self._llm = llm

    def _complete(self, context: str, question: str) -> str:
        messages = ANSWER_PROMPT.invoke({"context": context, "question": question}).to_messages()
        try:
            response = self._llm.invoke(messages)
        except Exception as e:
            raise SynthesisError(
                f"{type(e).__name__}: {e}",
                {"model": self._model_id},
            ) from e
        return _message_text(response).strip()

    def synthesize(self, context: str, question: str) -> Answer:
        """
        Generate an answer grounded in the context.

        Args:
            context: Retrieved chunk texts joined in rank order
            question: User question

        Returns:
            Answer: Completion text or a fixed fallback message
        """
        if not context or not question:
            return Answer(content=NEED_MORE_INFORMATION_ANSWER, strategy=self.strategy)

        try:
            text = self._complete(context, question)
        except SynthesisError as e:
            logger.error(f"{__name__}:synthesize - Completion failed: {e}")
            return Answer(
                content=f"Sorry, I couldn't generate an answer: {e.message}",
                strategy=self.strategy,
            )

        return Answer(content=text or NO_RESPONSE_ANSWER, strategy=self.strategy)
