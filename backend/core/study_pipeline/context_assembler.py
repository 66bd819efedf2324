"""Follow-up question context assembler.

The generation service keeps no memory between calls, so every follow-up
question carries the source material, the full prior transcript and the new
question.

Dependencies: langchain_core.prompts, backend.models.study
System role: Grounding context builder for follow-up Q&A
"""

import logging
from collections.abc import Sequence

from langchain_core.prompts import PromptTemplate

from backend.core.exceptions import InvalidInputError
from backend.models.study import (
    ConversationTurn,
    InlineFileSegment,
    ServiceRequest,
    SourceMaterial,
    TextSegment,
)

logger = logging.getLogger(__name__)

QUESTION_PROMPT = PromptTemplate.from_template(
    """Context from uploaded document/notes:
{context_text}

Chat History:
{chat_history}

USER QUESTION: {question}
Answer the user's question based strictly on the provided context. Be helpful and concise."""
)

EMPTY_HISTORY = "(no previous messages)"


def format_transcript(turns: Sequence[ConversationTurn]) -> str:
    """Serialize turns as 'ROLE: content' lines, oldest first."""
    if not turns:
        return EMPTY_HISTORY
    return "\n".join(f"{turn.role.value.upper()}: {turn.content}" for turn in turns)


def assemble_question_request(
    prior_turns: Sequence[ConversationTurn],
    question: str,
    source: SourceMaterial,
) -> ServiceRequest:
    """Build a self-contained request for one follow-up question.

    Args:
        prior_turns: Transcript snapshot taken when the question was submitted
        question: The new question
        source: Material the conversation is grounded in

    Returns:
        ServiceRequest: Optional inline file followed by the instruction text

    Raises:
        InvalidInputError: If the question is blank
    """
    if not question or not question.strip():
        raise InvalidInputError("Question must not be empty", field="question")

    segments: list[InlineFileSegment | TextSegment] = []
    if source.file is not None:
        segments.append(
            InlineFileSegment(
                mime_type=source.file.mime_type,
                base64_payload=source.file.base64_payload,
            )
        )

    instruction = QUESTION_PROMPT.format(
        context_text=source.text if source.has_text else "",
        chat_history=format_transcript(prior_turns),
        question=question.strip(),
    )
    segments.append(TextSegment(text=instruction))

    logger.debug(
        f"{__name__}:assemble_question_request - prior_turns={len(prior_turns)}, "
        f"has_file={source.file is not None}"
    )
    return ServiceRequest(segments=tuple(segments), expects_json=False)
