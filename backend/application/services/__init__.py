"""Service orchestrators."""

from .diagram_service import DiagramService
from .study_service import StudyService
from .study_session import ContentState, StudySession, TranscriptState

__all__ = [
    "ContentState",
    "DiagramService",
    "StudyService",
    "StudySession",
    "TranscriptState",
]
