"""
Gemini configuration settings.

Credential and model selection for the hosted generation service.

Dependencies: pydantic, pydantic_settings
System role: Generation service configuration
"""

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class GeminiSettings(BaseSettings):
    """Google Gemini client configuration."""

    model_config = SettingsConfigDict(
        env_prefix="GEMINI_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    api_key: str | None = Field(
        default=None,
        validation_alias=AliasChoices("GOOGLE_API_KEY", "GEMINI_API_KEY"),
        description="Google API key; generation fails fast when unset",
    )
    model_id: str = Field(
        default="gemini-2.5-flash",
        description="Gemini model used for generation and follow-up questions",
    )
    thinking_budget: int | None = Field(
        default=0,
        description="Thinking token budget for generation calls (None = model default)",
    )
