"""
Study service orchestrator.

Runs the generation pipeline (prompt builder -> Gemini -> response parser) and
answers follow-up questions from a fully re-assembled context. Holds no
conversation state: every call carries everything it needs.

Dependencies: backend.core.study_pipeline, backend.boundary.gemini
System role: Study content and Q&A orchestration
"""

import logging
from collections.abc import Sequence
from datetime import datetime, timezone

from backend.boundary.gemini.gemini_client import GeminiContentClient
from backend.core.study_pipeline.context_assembler import assemble_question_request
from backend.core.study_pipeline.generation_prompt import (
    GenerationOptions,
    build_generation_request,
)
from backend.core.study_pipeline.response_parser import parse_generated_content
from backend.models.study import (
    ConversationTurn,
    DiagramCategory,
    GeneratedContent,
    SourceMaterial,
)

logger = logging.getLogger(__name__)

NO_ANSWER_TEXT = "I couldn't generate an answer."


class StudyService:
    """Stateless generation and Q&A service."""

    def __init__(
        self,
        content_client: GeminiContentClient,
        options: GenerationOptions | None = None,
    ) -> None:
        """
        Initialize study service.

        Args:
            content_client: Gemini client used for both generation and Q&A
            options: Summary and flashcard bounds
        """
        self.content_client = content_client
        self.options = options or GenerationOptions()

    async def generate_content(
        self,
        source: SourceMaterial,
        category: DiagramCategory,
    ) -> GeneratedContent:
        """
        Generate diagram markup, summary and flashcards in one call.

        Args:
            source: Text and/or uploaded document
            category: Diagram category

        Returns:
            GeneratedContent: Parsed and normalized content

        Raises:
            InvalidInputError: No material supplied
            MissingCredentialError: No API key configured
            ServiceCallError: Gemini call failed
            MalformedResponseError: Reply could not be decoded
        """
        logger.info(f"{__name__}:generate_content - START category={category.value}")

        request = build_generation_request(source, category, self.options)
        generated_at = datetime.now(timezone.utc)
        raw = await self.content_client.generate(request)
        content = parse_generated_content(raw, category, generated_at=generated_at)

        logger.info(
            f"{__name__}:generate_content - END flashcards={len(content.flashcards)}"
        )
        return content

    async def answer_question(
        self,
        prior_turns: Sequence[ConversationTurn],
        question: str,
        source: SourceMaterial,
    ) -> ConversationTurn:
        """
        Answer a follow-up question grounded in the source material.

        Args:
            prior_turns: Transcript before the question
            question: New question
            source: Material the content was generated from

        Returns:
            ConversationTurn: Assistant turn with the answer

        Raises:
            InvalidInputError: Blank question
            MissingCredentialError: No API key configured
            ServiceCallError: Gemini call failed
        """
        logger.info(
            f"{__name__}:answer_question - START prior_turns={len(prior_turns)}"
        )
        request = assemble_question_request(prior_turns, question, source)
        answer = await self.content_client.generate(request)

        logger.info(f"{__name__}:answer_question - END answer_len={len(answer)}")
        return ConversationTurn.assistant(answer.strip() or NO_ANSWER_TEXT)
