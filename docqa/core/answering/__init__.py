"""
Answer synthesizers.

- ExtractiveSynthesizer: transformers span extraction with enriched context
- GenerativeSynthesizer: Gemini completion grounded in the context
"""

from docqa.core.answering.answering_factory import get_synthesizer
from docqa.core.answering.base import Answer, AnswerSynthesizer
from docqa.core.answering.extractive import ExtractiveSynthesizer
from docqa.core.answering.generative import GenerativeSynthesizer

__all__ = [
    "Answer",
    "AnswerSynthesizer",
    "ExtractiveSynthesizer",
    "GenerativeSynthesizer",
    "get_synthesizer",
]
