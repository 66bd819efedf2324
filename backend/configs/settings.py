"""
Unified application settings.

Aggregates all configuration modules into a single Settings class.
Provides dependency injection factory for FastAPI.

Dependencies: All config modules
System role: Central configuration aggregator for the application
"""

from functools import lru_cache

from pydantic import Field

from backend.configs.base import BaseSettings
from backend.configs.gemini import GeminiSettings
from backend.configs.renderer import RendererSettings
from backend.configs.study import StudySettings


class Settings(BaseSettings):
    """Unified application settings aggregating all config modules."""

    gemini: GeminiSettings = Field(default_factory=GeminiSettings)
    study: StudySettings = Field(default_factory=StudySettings)
    renderer: RendererSettings = Field(default_factory=RendererSettings)


@lru_cache
def get_settings() -> Settings:
    """
    Get application settings singleton.

    Returns Settings instance, cached for dependency injection.
    Environment variables loaded once at startup.

    Returns:
        Settings: Application settings instance

    Usage:
        from backend.configs import get_settings
        settings = get_settings()
    """
    return Settings()
