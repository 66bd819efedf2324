"""
Generation domain models and schemas.

Request schema for generating diagram, summary and flashcards.

Dependencies: pydantic
System role: Generation API contracts
"""

from pydantic import BaseModel, Field

from backend.models.study import DiagramCategory, SourceMaterial, UploadedFile


class GenerateRequest(BaseModel):
    """Request schema for study content generation."""

    text: str | None = Field(default=None, description="Pasted study notes")
    file: UploadedFile | None = Field(default=None, description="Uploaded document")
    category: DiagramCategory = Field(
        default=DiagramCategory.HIERARCHY_MAP,
        description="Diagram category selecting the markup grammar",
    )

    def source(self) -> SourceMaterial:
        return SourceMaterial(text=self.text, file=self.file)
