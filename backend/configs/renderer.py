"""
Diagram renderer configuration settings.

Kroki endpoint and Mermaid theme used to turn diagram markup into SVG.

Dependencies: pydantic, pydantic_settings
System role: Diagram rendering configuration
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class RendererSettings(BaseSettings):
    """Kroki rendering backend configuration."""

    model_config = SettingsConfigDict(
        env_prefix="RENDERER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    kroki_url: str = Field(
        default="http://kroki:8000",
        description="Base URL of the Kroki server (yuzutech/kroki container)",
    )
    timeout_seconds: float = Field(default=30.0, gt=0, description="HTTP timeout per render")
    theme: str = Field(default="base", description="Mermaid theme name")
