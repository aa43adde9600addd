"""
Answer synthesis configuration settings.

Selects the extractive (transformers QA) or generative (Gemini chat) strategy
and holds the extractive windowing constants.

Dependencies: pydantic, pydantic_settings
System role: Answer synthesizer configuration
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class SynthesisSettings(BaseSettings):
    """Answer synthesizer configuration."""

    model_config = SettingsConfigDict(
        env_prefix="SYNTHESIS_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    strategy: str = Field(
        default="extractive",
        description="Synthesis strategy: 'extractive' or 'generative'",
    )

    # Extractive QA
    qa_model: str = Field(
        default="distilbert/distilbert-base-cased-distilled-squad",
        description="transformers question-answering model",
    )
    confidence_threshold: float = Field(
        default=0.1,
        description="Minimum span score for returning an enriched span",
        ge=0.0,
        le=1.0,
    )
    max_context_chars: int = Field(
        default=1500,
        description="Context prefix passed to the QA model",
        gt=0,
    )
    fallback_chars: int = Field(
        default=1200,
        description="Context prefix returned when no confident span is found",
        gt=0,
    )
    window_before: int = Field(default=100, description="Characters kept before the span", ge=0)
    window_after: int = Field(default=300, description="Characters kept after the span", ge=0)

    # Generative
    chat_model: str = Field(default="gemini-2.0-flash", description="Gemini chat model ID")
    temperature: float = Field(default=0.0, description="Sampling temperature", ge=0.0)
