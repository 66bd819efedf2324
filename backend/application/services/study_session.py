"""
Study session workspace.

Client-side workspace for one learner: the current generated content, the
Q&A transcript and the diagram renderer. Each piece of state lives in its own
container, and each operation states which containers it reads and writes.
Nothing here is persisted; the service calls stay stateless.

Dependencies: backend.application.services.study_service, backend.core.diagram_rendering
System role: Workspace state containers and UI-facing flow
"""

import asyncio
import logging
from dataclasses import dataclass, field

from backend.application.services.study_service import StudyService
from backend.core.diagram_rendering import DiagramRenderer, RenderState
from backend.core.exceptions import GenerationInProgressError, InvalidInputError
from backend.models.study import (
    ConversationTurn,
    DiagramCategory,
    GeneratedContent,
    ProcessingState,
    ProcessingStatus,
    SourceMaterial,
)
from backend.observability.log_utils import log_exception_with_context

logger = logging.getLogger(__name__)

PROCESSING_MESSAGE = "Analyzing content & generating visualization..."
GENERATION_FAILED_MESSAGE = "Failed to generate content. Please try again."
ANSWER_FAILED_MESSAGE = "Sorry, I encountered an error while processing your request."


@dataclass
class ContentState:
    """Current generated content, the material it came from and generation status."""

    content: GeneratedContent | None = None
    source: SourceMaterial | None = None
    processing: ProcessingState = field(default_factory=ProcessingState)

    @property
    def is_generating(self) -> bool:
        return self.processing.status == ProcessingStatus.PROCESSING


@dataclass
class TranscriptState:
    """Append-only Q&A transcript, reset for every new generation.

    The epoch increments on every reset; answers computed against an older
    epoch are dropped instead of leaking into the new conversation.
    """

    turns: list[ConversationTurn] = field(default_factory=list)
    epoch: int = 0

    def snapshot(self) -> tuple[ConversationTurn, ...]:
        return tuple(self.turns)

    def append(self, turn: ConversationTurn) -> None:
        self.turns.append(turn)

    def reset(self) -> None:
        self.turns = []
        self.epoch += 1


class StudySession:
    """Workspace tying the pipeline stages to their state containers."""

    def __init__(
        self,
        study_service: StudyService,
        renderer: DiagramRenderer,
        content_state: ContentState | None = None,
        transcript: TranscriptState | None = None,
    ) -> None:
        """
        Initialize study session.

        Args:
            study_service: Stateless generation and Q&A service
            renderer: Renderer owning the RenderState
            content_state: Content container (new one if omitted)
            transcript: Transcript container (new one if omitted)
        """
        self.study_service = study_service
        self.renderer = renderer
        self.content_state = content_state or ContentState()
        self.transcript = transcript or TranscriptState()

    @property
    def render_state(self) -> RenderState:
        return self.renderer.state

    async def generate(
        self,
        source: SourceMaterial,
        category: DiagramCategory,
    ) -> GeneratedContent:
        """
        Generate new content, replacing the previous content wholesale.

        Reads/writes: content_state; writes: transcript (reset), render state.

        Raises:
            GenerationInProgressError: Another generation is still running
            InvalidInputError: No material supplied (status stays unchanged)
            StudySketchException: Any pipeline failure (status becomes error)
        """
        if self.content_state.is_generating:
            raise GenerationInProgressError()
        if not source.has_content:
            raise InvalidInputError("Please provide text or upload a file.")

        self.content_state.processing = ProcessingState(
            status=ProcessingStatus.PROCESSING, message=PROCESSING_MESSAGE
        )
        try:
            content = await self.study_service.generate_content(source, category)
        except asyncio.CancelledError:
            logger.warning(f"{__name__}:generate - Cancelled, releasing generation gate")
            self.content_state.processing = ProcessingState(
                status=ProcessingStatus.ERROR, message=GENERATION_FAILED_MESSAGE
            )
            raise
        except Exception as e:
            log_exception_with_context(
                logger, f"{__name__}:generate - FAILED", e, category=category.value
            )
            self.content_state.processing = ProcessingState(
                status=ProcessingStatus.ERROR, message=GENERATION_FAILED_MESSAGE
            )
            raise

        self.content_state.content = content
        self.content_state.source = source
        self.content_state.processing = ProcessingState(status=ProcessingStatus.COMPLETED)
        self.transcript.reset()

        await self.renderer.render(content.diagram_markup)
        return content

    async def ask(self, question: str) -> ConversationTurn | None:
        """
        Ask a follow-up question about the current content.

        Reads: content_state, transcript snapshot; writes: transcript.
        A failed answer becomes a fixed apology turn so the transcript never
        ends on an unanswered question.

        Returns:
            ConversationTurn | None: The assistant turn, or None if new content
                replaced the conversation before the answer arrived

        Raises:
            InvalidInputError: Blank question or nothing generated yet
        """
        if not question or not question.strip():
            raise InvalidInputError("Question must not be empty", field="question")
        source = self.content_state.source
        if source is None:
            raise InvalidInputError("Generate study content before asking questions")

        epoch = self.transcript.epoch
        prior_turns = self.transcript.snapshot()
        self.transcript.append(ConversationTurn.user(question))

        try:
            answer = await self.study_service.answer_question(prior_turns, question, source)
        except asyncio.CancelledError:
            logger.warning(f"{__name__}:ask - Cancelled, closing exchange with apology")
            if epoch == self.transcript.epoch:
                self.transcript.append(ConversationTurn.assistant(ANSWER_FAILED_MESSAGE))
            raise
        except Exception as e:
            log_exception_with_context(
                logger, f"{__name__}:ask - FAILED", e, prior_turns=len(prior_turns)
            )
            answer = ConversationTurn.assistant(ANSWER_FAILED_MESSAGE)

        if epoch != self.transcript.epoch:
            logger.info(f"{__name__}:ask - Dropping answer from superseded conversation")
            return None

        self.transcript.append(answer)
        return answer
