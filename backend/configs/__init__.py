"""
Configuration management module.

Provides centralized, type-safe configuration using Pydantic Settings.
All config modules support environment variable mapping with validation.
"""

from backend.configs.gemini import GeminiSettings
from backend.configs.renderer import RendererSettings
from backend.configs.settings import Settings, get_settings
from backend.configs.study import StudySettings

__all__ = [
    "GeminiSettings",
    "RendererSettings",
    "Settings",
    "StudySettings",
    "get_settings",
]
