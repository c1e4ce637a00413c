"""
Deployment settings using Pydantic.

Settings are loaded from ``MILHAO_``-prefixed environment variables with
.env file support. Game rules live in ``milhao_app.constants`` instead.
"""

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from milhao_app.constants.network_constants import (
    DEFAULT_HOST,
    DEFAULT_PORT,
    QUESTION_LOAD_TIMEOUT_SECONDS,
)


class SupabaseSettings(BaseSettings):
    """Question table and match results in a Supabase project."""

    model_config = SettingsConfigDict(env_prefix="MILHAO_SUPABASE_", extra="ignore")

    url: str = ""
    key: str = ""

    @property
    def is_configured(self) -> bool:
        return bool(self.url and self.key)


class AISettings(BaseSettings):
    """Question generation settings."""

    model_config = SettingsConfigDict(env_prefix="MILHAO_", extra="ignore")

    gemini_api_key: str = ""
    generation_model: str = "gemini-2.5-flash"
    generation_timeout: float = 60.0


class Settings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_prefix="MILHAO_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    debug: bool = False
    log_file: Path | None = None
    player_id: str = "anonymous"

    # Server
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    headless: bool = False  # Serve the browser player only, no Qt window

    # Question pool
    questions_file: Path | None = None
    question_load_timeout: float = Field(default=QUESTION_LOAD_TIMEOUT_SECONDS, gt=0)

    # Match results written locally when Supabase is not configured
    results_file: Path | None = None

    supabase: SupabaseSettings = Field(default_factory=SupabaseSettings)
    ai: AISettings = Field(default_factory=AISettings)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
