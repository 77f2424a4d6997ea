"""
Configuration and settings for the relay service.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Environment-backed settings for the FastAPI service."""

    # Real environment variables take precedence over the .env file.
    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    api_prefix: str = Field(default="/api")

    # Server
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=5000)
    log_level: str = Field(default="INFO")

    # Provider credentials
    gemini_api_key: Optional[str] = Field(default=None)
    claude_api_key: Optional[str] = Field(default=None)
    openai_api_key: Optional[str] = Field(default=None)

    def provider_credentials(self) -> dict[str, Optional[str]]:
        """Credentials keyed by the env var name each provider reports."""
        return {
            "GEMINI_API_KEY": self.gemini_api_key,
            "CLAUDE_API_KEY": self.claude_api_key,
            "OPENAI_API_KEY": self.openai_api_key,
        }


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return cached settings instance."""
    return Settings()
