"""
Configuration management using pydantic-settings.

Loads settings from environment variables and .env file.
Provides type-safe access with validation.
"""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


# ─────────────────────────────────────────────────────────────
# NESTED SETTINGS
# ─────────────────────────────────────────────────────────────


class AISettings(BaseSettings):
    """AI player configuration."""

    model_config = SettingsConfigDict(env_prefix="AI_")

    difficulty: Literal["easy", "medium", "hard"] = "medium"
    medium_depth: int = Field(default=3, ge=1, le=10, description="Minimax plies for medium")
    hard_depth: int = Field(default=5, ge=1, le=10, description="Minimax plies for hard")


class LogSettings(BaseSettings):
    """Logging configuration."""

    model_config = SettingsConfigDict(env_prefix="LOG_")

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"


# ─────────────────────────────────────────────────────────────
# MAIN SETTINGS
# ─────────────────────────────────────────────────────────────


class Settings(BaseSettings):
    """
    Main application settings.

    Loads from .env file and environment variables.
    Environment variables take precedence over .env file.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",  # Ignore unknown env vars
    )

    ai: AISettings = Field(default_factory=AISettings)
    log: LogSettings = Field(default_factory=LogSettings)


# ─────────────────────────────────────────────────────────────
# CACHED ACCESS
# ─────────────────────────────────────────────────────────────

_settings: Settings | None = None


def get_settings() -> Settings:
    """Get application settings (loaded once)."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Drop cached settings (for testing)."""
    global _settings
    _settings = None
