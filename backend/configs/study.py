"""
Study content generation settings.

Bounds requested from the model for summaries and flashcards.

Dependencies: pydantic, pydantic_settings
System role: Prompt building configuration
"""

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class StudySettings(BaseSettings):
    """Summary and flashcard generation bounds."""

    model_config = SettingsConfigDict(
        env_prefix="STUDY_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    summary_max_words: int = Field(default=300, gt=0, description="Summary word limit")
    flashcard_min: int = Field(default=5, ge=1, description="Minimum flashcards requested")
    flashcard_max: int = Field(default=10, ge=1, description="Maximum flashcards requested")
    include_flashcards: bool = Field(
        default=True,
        description="Request flashcards alongside the summary and diagram",
    )

    @model_validator(mode="after")
    def _check_flashcard_range(self) -> "StudySettings":
        if self.flashcard_min > self.flashcard_max:
            raise ValueError("flashcard_min must not exceed flashcard_max")
        return self
