"""Environment configuration and validation.

This module defines strongly-typed application settings loaded from environment variables
(optionally via a local `.env` file).
"""

from __future__ import annotations

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    Only the bot entry point needs `TELEGRAM_BOT_TOKEN`; the CLI and tests run without it.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    telegram_bot_token: str | None = Field(default=None, alias="TELEGRAM_BOT_TOKEN")

    ollama_host: str = Field(default="http://localhost:11434", alias="OLLAMA_HOST")
    ollama_model: str = Field(default="phi3", alias="OLLAMA_MODEL")
    llm_timeout_s: float = Field(default=60.0, alias="LLM_TIMEOUT_S", gt=0)

    graphql_url: str = Field(default="http://localhost:4000/graphql", alias="GRAPHQL_URL")
    graphql_timeout_s: float = Field(default=30.0, alias="GRAPHQL_TIMEOUT_S", gt=0)

    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    @field_validator("ollama_host", "graphql_url")
    @classmethod
    def validate_http_url(cls, value: str) -> str:
        """Outbound endpoints must be plain HTTP(S) URLs."""

        value = value.strip()
        if not value.startswith(("http://", "https://")):
            raise ValueError("must be an http:// or https:// URL")
        return value.rstrip("/")

    @field_validator("ollama_model")
    @classmethod
    def validate_model_name(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("OLLAMA_MODEL must not be empty")
        return value

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, value: str) -> str:
        return value.strip().upper() or "INFO"


def load_settings() -> Settings:
    """Load and validate settings from environment variables.

    Raises:
        RuntimeError: If the environment configuration is missing or invalid.
    """

    try:
        return Settings()
    except ValidationError as exc:
        # Raising here is fine: caller can decide how to handle startup errors.
        raise RuntimeError(f"Invalid environment configuration: {exc}") from exc
