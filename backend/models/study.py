"""
Study content domain models.

Source material, generated content, flashcards, conversation turns and the
segment list sent to the generation service.

Dependencies: pydantic
System role: Shared contracts between prompt building, parsing and Q&A
"""

import uuid
from datetime import datetime, timezone
from enum import Enum
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class DiagramCategory(str, Enum):
    """Diagram categories the user can choose from."""

    HIERARCHY_MAP = "hierarchy-map"
    FLOWCHART = "flowchart"
    SEQUENCE = "sequence"
    TIMELINE = "timeline"
    ORG_HIERARCHY = "org-hierarchy"
    SCHEDULE = "schedule"


class UploadedFile(BaseModel):
    """Document handed over by the file intake collaborator."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(description="Original file name")
    mime_type: str = Field(description="MIME type, e.g. application/pdf or text/markdown")
    base64_payload: str = Field(description="Base64-encoded file content")


class SourceMaterial(BaseModel):
    """Pasted text and/or an uploaded document."""

    model_config = ConfigDict(frozen=True)

    text: str | None = Field(default=None, description="Free text pasted by the user")
    file: UploadedFile | None = Field(default=None, description="Uploaded document")

    @property
    def has_text(self) -> bool:
        return bool(self.text and self.text.strip())

    @property
    def has_content(self) -> bool:
        return self.has_text or self.file is not None


class Flashcard(BaseModel):
    """Single question/answer card."""

    model_config = ConfigDict(frozen=True)

    id: str
    front: str
    back: str


class GeneratedContent(BaseModel):
    """Everything produced by one generation call."""

    model_config = ConfigDict(frozen=True)

    diagram_markup: str = Field(description="Mermaid markup, empty when none was returned")
    summary_markdown: str = Field(description="Markdown summary")
    category: DiagramCategory
    flashcards: tuple[Flashcard, ...] = ()

    def to_service_payload(self) -> dict[str, Any]:
        """Serialize back into the reply shape requested from the service."""
        return {
            "summary": self.summary_markdown,
            "diagramMarkup": self.diagram_markup,
            "flashcards": [
                {"front": card.front, "back": card.back} for card in self.flashcards
            ],
        }


class ConversationRole(str, Enum):
    """Author of a conversation turn."""

    USER = "user"
    ASSISTANT = "assistant"


class ConversationTurn(BaseModel):
    """One message of the follow-up Q&A transcript."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=lambda: uuid.uuid4().hex)
    role: ConversationRole
    content: str
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def user(cls, content: str) -> "ConversationTurn":
        return cls(role=ConversationRole.USER, content=content)

    @classmethod
    def assistant(cls, content: str) -> "ConversationTurn":
        return cls(role=ConversationRole.ASSISTANT, content=content)


class InlineFileSegment(BaseModel):
    """Request segment carrying a document inline."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["inline_file"] = "inline_file"
    mime_type: str
    base64_payload: str


class TextSegment(BaseModel):
    """Request segment carrying plain text."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["text"] = "text"
    text: str


RequestSegment = Annotated[
    Union[InlineFileSegment, TextSegment],
    Field(discriminator="kind"),
]


class ServiceRequest(BaseModel):
    """Ordered segments for one generation service call.

    The last segment is always the instruction text.
    """

    model_config = ConfigDict(frozen=True)

    segments: tuple[RequestSegment, ...]
    expects_json: bool = False

    @property
    def instruction(self) -> str:
        last = self.segments[-1]
        return last.text if isinstance(last, TextSegment) else ""


class ProcessingStatus(str, Enum):
    """Lifecycle of a generation request as seen by the user."""

    IDLE = "idle"
    PROCESSING = "processing"
    COMPLETED = "completed"
    ERROR = "error"


class ProcessingState(BaseModel):
    """Generation status with an optional user-facing message."""

    model_config = ConfigDict(frozen=True)

    status: ProcessingStatus = ProcessingStatus.IDLE
    message: str | None = None
