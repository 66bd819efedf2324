"""Generation response parser.

Decodes the model's JSON reply into GeneratedContent. A reply that is not
valid JSON gets exactly one repair pass (stripping an enclosing Markdown code
fence) before the parse is given up.

Dependencies: json, re, backend.models.study, backend.observability.log_utils
System role: Structured output decoding for the study content pipeline
"""

import json
import logging
import re
from datetime import datetime, timezone
from typing import Any

from backend.core.exceptions import MalformedResponseError
from backend.models.study import DiagramCategory, Flashcard, GeneratedContent
from backend.observability.log_utils import safe_log_value

logger = logging.getLogger(__name__)

SUMMARY_PLACEHOLDER = "Could not generate summary."
FRONT_PLACEHOLDER = "Question"
BACK_PLACEHOLDER = "Answer"

_CODE_FENCE = re.compile(r"^\s*```[\w+-]*[ \t]*\n?(.*?)\n?[ \t]*```\s*$", re.DOTALL)


def strip_code_fence(raw: str) -> str:
    """Remove an enclosing ```json ... ``` block, if there is one."""
    match = _CODE_FENCE.match(raw)
    return match.group(1).strip() if match else raw.strip()


def decode_response_json(raw: str) -> dict[str, Any]:
    """Decode the reply, repairing a fenced block once.

    Raises:
        MalformedResponseError: If neither the raw nor the repaired text decodes
            to a JSON object
    """
    try:
        decoded = json.loads(raw)
    except json.JSONDecodeError as first_error:
        logger.warning(
            f"{__name__}:decode_response_json - direct decode failed "
            f"({first_error.msg}), stripping code fence"
        )
        try:
            decoded = json.loads(strip_code_fence(raw))
        except json.JSONDecodeError as second_error:
            logger.error(
                f"{__name__}:decode_response_json - repaired decode failed: "
                f"{second_error.msg}, raw={safe_log_value(raw, max_length=200)}"
            )
            raise MalformedResponseError(
                "Service reply is not valid JSON",
                raw_excerpt=raw[:200],
            ) from second_error

    if not isinstance(decoded, dict):
        raise MalformedResponseError(
            f"Service reply must be a JSON object, got {type(decoded).__name__}",
            raw_excerpt=raw[:200],
        )
    return decoded


def _text_or(value: Any, placeholder: str) -> str:
    if isinstance(value, str) and value.strip():
        return value
    return placeholder


def flashcard_id(generated_at: datetime, ordinal: int) -> str:
    """Deterministic card id from generation time and position."""
    return f"card-{int(generated_at.timestamp() * 1000)}-{ordinal}"


def _parse_flashcards(value: Any, generated_at: datetime) -> tuple[Flashcard, ...]:
    if not isinstance(value, list):
        return ()

    cards = []
    for ordinal, entry in enumerate(value):
        entry = entry if isinstance(entry, dict) else {}
        cards.append(
            Flashcard(
                id=flashcard_id(generated_at, ordinal),
                front=_text_or(entry.get("front"), FRONT_PLACEHOLDER),
                back=_text_or(entry.get("back"), BACK_PLACEHOLDER),
            )
        )
    return tuple(cards)


def parse_generated_content(
    raw: str,
    category: DiagramCategory,
    generated_at: datetime | None = None,
) -> GeneratedContent:
    """Turn the raw service reply into GeneratedContent.

    Sub-fields are normalized independently, so a bad diagram does not cost the
    summary or the flashcards. Only an undecodable reply fails the whole batch.

    Args:
        raw: Reply text from the generation service
        category: Category the request was built for
        generated_at: Generation timestamp used for flashcard ids (default: now)

    Returns:
        GeneratedContent: Normalized content

    Raises:
        MalformedResponseError: If the reply cannot be decoded
    """
    generated_at = generated_at or datetime.now(timezone.utc)
    payload = decode_response_json(raw)

    markup = payload.get("diagramMarkup")
    content = GeneratedContent(
        summary_markdown=_text_or(payload.get("summary"), SUMMARY_PLACEHOLDER),
        diagram_markup=markup if isinstance(markup, str) else "",
        category=category,
        flashcards=_parse_flashcards(payload.get("flashcards"), generated_at),
    )

    logger.info(
        f"{__name__}:parse_generated_content - END "
        f"category={category.value}, markup_len={len(content.diagram_markup)}, "
        f"flashcards={len(content.flashcards)}"
    )
    return content
