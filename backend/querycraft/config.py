"""
QueryCraft - Configuration

Centralized configuration management using Pydantic Settings.
All configuration is loaded from environment variables.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from querycraft.llm.gateway import ProviderConfig, ProviderName


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    # ==========================================================================
    # Application Settings
    # ==========================================================================
    app_name: str = "QueryCraft"
    app_version: str = "0.1.0"
    debug: bool = Field(default=False, alias="BACKEND_DEBUG")
    environment: Literal["development", "staging", "production"] = "development"
    host: str = Field(default="0.0.0.0", alias="HOST")
    port: int = Field(default=3000, alias="PORT")
    api_prefix: str = Field(default="/api", alias="API_PREFIX")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    # ==========================================================================
    # Database Settings
    # ==========================================================================
    database_url: str = Field(
        default="sqlite+aiosqlite:///./querycraft.db",
        alias="DATABASE_URL",
    )
    secret_key: str = Field(
        default="querycraft-secret-key-change-in-production",
        alias="SECRET_KEY",
    )

    # ==========================================================================
    # LLM Provider Settings (first configured provider wins)
    # ==========================================================================
    gemini_api_key: str | None = Field(default=None, alias="GEMINI_API_KEY")
    gemini_model: str = Field(default="gemini-2.0-flash", alias="GEMINI_MODEL")

    openai_api_key: str | None = Field(default=None, alias="OPENAI_API_KEY")
    openai_model: str = Field(default="gpt-4o-mini", alias="OPENAI_MODEL")

    anthropic_api_key: str | None = Field(default=None, alias="ANTHROPIC_API_KEY")
    anthropic_model: str = Field(default="claude-3-haiku-20240307", alias="ANTHROPIC_MODEL")

    groq_api_key: str | None = Field(default=None, alias="GROQ_API_KEY")
    groq_model: str = Field(default="llama-3.1-70b-versatile", alias="GROQ_MODEL")

    # Keyless local fallback, only used when a base URL is set
    ollama_base_url: str | None = Field(default=None, alias="OLLAMA_BASE_URL")
    ollama_model: str = Field(default="qwen2.5:3b", alias="OLLAMA_MODEL")

    llm_timeout_seconds: float | None = Field(
        default=None,
        alias="LLM_TIMEOUT_SECONDS",
        description="Provider request timeout; None keeps the client default",
    )

    # ==========================================================================
    # Upload Settings
    # ==========================================================================
    max_image_bytes: int = Field(
        default=10 * 1024 * 1024,
        alias="MAX_IMAGE_BYTES",
        description="Largest ERD image accepted by image-to-schema",
    )

    # ==========================================================================
    # CORS Settings
    # ==========================================================================
    cors_origins: list[str] = Field(default=["*"], alias="CORS_ORIGINS")

    def resolve_provider(self) -> ProviderConfig | None:
        """Return the first provider with a configured API key, if any."""
        keyed = [
            (ProviderName.GEMINI, self.gemini_api_key, self.gemini_model),
            (ProviderName.OPENAI, self.openai_api_key, self.openai_model),
            (ProviderName.ANTHROPIC, self.anthropic_api_key, self.anthropic_model),
            (ProviderName.GROQ, self.groq_api_key, self.groq_model),
        ]
        for provider, api_key, model in keyed:
            if api_key:
                return ProviderConfig(
                    provider=provider,
                    api_key=api_key,
                    model=model,
                    timeout=self.llm_timeout_seconds,
                )

        if self.ollama_base_url:
            return ProviderConfig(
                provider=ProviderName.OLLAMA,
                api_key=None,
                model=self.ollama_model,
                base_url=self.ollama_base_url,
                timeout=self.llm_timeout_seconds,
            )

        return None


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
