"""
Configuration settings for LearnSphere.

Uses Pydantic Settings for environment variable management with .env file support.
Transition coefficients are fixed in code and deliberately not exposed here.
"""
from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from learnsphere.core.models import LearnerMode


class Settings(BaseSettings):
    """Application settings loaded from environment variables (LEARNSPHERE_*)."""

    model_config = SettingsConfigDict(
        env_prefix="LEARNSPHERE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ========================================
    # Logging
    # ========================================
    log_level: str = Field(
        default="INFO",
        description="Loguru level: DEBUG, INFO, WARNING, ERROR",
    )
    log_json: bool = Field(
        default=False,
        description="Emit serialized JSON log records instead of the console format",
    )

    # ========================================
    # Engine
    # ========================================
    default_mode: LearnerMode = Field(
        default=LearnerMode.ASSESSMENT,
        description="Mode given to learners created without an explicit mode",
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
