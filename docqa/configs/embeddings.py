"""
Embedding provider configuration settings.

Selects the local (sentence-transformers) or remote (Google Generative AI)
embedding strategy and its model parameters.

Dependencies: pydantic, pydantic_settings
System role: Embedding strategy configuration
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class EmbeddingSettings(BaseSettings):
    """Embedding provider configuration."""

    model_config = SettingsConfigDict(
        env_prefix="EMBEDDINGS_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    provider: str = Field(
        default="local",
        description="Embedding provider: 'local' (sentence-transformers) or 'remote' (Google)",
    )
    local_model: str = Field(
        default="sentence-transformers/all-mpnet-base-v2",
        description="sentence-transformers model (768-dim)",
    )
    device: str = Field(default="cpu", description="Torch device for the local model")
    remote_model: str = Field(
        default="models/text-embedding-004",
        description="Google embedding model ID",
    )
    google_api_key: str = Field(
        default="",
        description="Google API key (falls back to GOOGLE_API_KEY when empty)",
    )
