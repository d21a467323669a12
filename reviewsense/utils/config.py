"""
Configuration module using pydantic-settings.
Loads environment variables from .env file.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # OpenAI Configuration
    openai_api_key: str | None = Field(
        default=None,
        description="OpenAI API Key (rule-based analysis is used when unset)",
    )
    openai_model: str = Field(
        default="gpt-4-turbo-preview",
        description="OpenAI model for review summaries",
    )

    # Summarizer Configuration
    use_ai_summarizer: bool = Field(
        default=True,
        description="Use the AI summarizer with rule-based fallback",
    )
    ai_temperature: float = Field(
        default=0.3,
        ge=0.0,
        le=2.0,
        description="Sampling temperature for the summary completion",
    )
    ai_max_tokens: int = Field(
        default=1200,
        gt=0,
        description="Output token budget for the summary completion",
    )
    ai_timeout: float = Field(
        default=30.0,
        gt=0,
        description="Completion request timeout in seconds",
    )

    # Result caps
    max_pros: int = Field(default=6, ge=1, description="Maximum number of pros")
    max_cons: int = Field(default=6, ge=1, description="Maximum number of cons")
    max_themes: int = Field(default=5, ge=1, description="Maximum number of themes")
    max_suggestions: int = Field(
        default=3,
        ge=0,
        description="Maximum number of suggestions",
    )

    # Input validation
    min_text_length: int = Field(
        default=50,
        description="Minimum length of pasted review text",
    )
    max_file_size: int = Field(
        default=10 * 1024 * 1024,
        description="Maximum uploaded file size in bytes",
    )

    # Review sources
    live_fetch_enabled: bool = Field(
        default=False,
        description="Fetch marketplace reviews live instead of generating them",
    )

    # Logging Configuration
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Logging level",
    )

    @property
    def has_openai_key(self) -> bool:
        """Whether a usable OpenAI credential is configured."""
        return bool(self.openai_api_key and self.openai_api_key.strip())


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.
    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()
