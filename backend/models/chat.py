"""
Chat domain models and schemas.

Request/response schemas for follow-up questions. The client sends the whole
transcript and source material with every question.

Dependencies: pydantic
System role: Follow-up Q&A API contracts
"""

from pydantic import BaseModel, Field

from backend.models.study import ConversationTurn, SourceMaterial, UploadedFile


class AskRequest(BaseModel):
    """Request schema for a follow-up question."""

    question: str = Field(description="New question about the material")
    transcript: list[ConversationTurn] = Field(
        default_factory=list,
        description="Prior turns in chronological order",
    )
    text: str | None = Field(default=None, description="Source text the content was generated from")
    file: UploadedFile | None = Field(default=None, description="Source document, re-sent every time")

    def source(self) -> SourceMaterial:
        return SourceMaterial(text=self.text, file=self.file)


class AskResponse(BaseModel):
    """Response schema for a follow-up question."""

    turn: ConversationTurn = Field(description="Assistant turn to append to the transcript")
