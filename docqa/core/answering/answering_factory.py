"""
Answer synthesizer factory.

Selects the extractive or generative strategy from SYNTHESIS_STRATEGY.

Dependencies: docqa.configs
System role: Synthesis strategy selection
"""

import logging

from docqa.configs import Settings
from docqa.core.answering.base import AnswerSynthesizer

logger = logging.getLogger(__name__)


def get_synthesizer(settings: Settings) -> AnswerSynthesizer:
    """
    Build the configured answer synthesizer.

    Args:
        settings: Application settings

    Returns:
        AnswerSynthesizer: ExtractiveSynthesizer or GenerativeSynthesizer

    Raises:
        ValueError: If SYNTHESIS_STRATEGY is invalid
    """
    cfg = settings.synthesis
    strategy = cfg.strategy.lower()

    if strategy == "extractive":
        from docqa.core.answering.extractive import ExtractiveSynthesizer

        logger.info(f"{__name__}:get_synthesizer - Using extractive QA ({cfg.qa_model})")
        return ExtractiveSynthesizer(
            model_name=cfg.qa_model,
            confidence_threshold=cfg.confidence_threshold,
            max_context_chars=cfg.max_context_chars,
            fallback_chars=cfg.fallback_chars,
            window_before=cfg.window_before,
            window_after=cfg.window_after,
        )

    if strategy == "generative":
        from docqa.core.answering.generative import GenerativeSynthesizer

        logger.info(f"{__name__}:get_synthesizer - Using generative answers ({cfg.chat_model})")
        return GenerativeSynthesizer(
            model_id=cfg.chat_model,
            temperature=cfg.temperature,
            google_api_key=settings.embeddings.google_api_key or None,
        )

    raise ValueError(
        f"Invalid SYNTHESIS_STRATEGY: {strategy}. Must be 'extractive' or 'generative'."
    )
