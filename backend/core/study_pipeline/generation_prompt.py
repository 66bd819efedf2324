"""Generation request builder.

Assembles the multimodal request for one generation call: inline file first,
free text second, task instructions last. Instructions are filled from the
diagram grammar table.

Dependencies: langchain_core.prompts, backend.core.study_pipeline.diagram_grammar
System role: Prompt builder for the study content pipeline
"""

import logging
from dataclasses import dataclass

from langchain_core.prompts import PromptTemplate

from backend.core.exceptions import InvalidInputError
from backend.core.study_pipeline.diagram_grammar import get_grammar
from backend.models.study import (
    DiagramCategory,
    InlineFileSegment,
    ServiceRequest,
    SourceMaterial,
    TextSegment,
)

logger = logging.getLogger(__name__)

GENERATION_INSTRUCTIONS = PromptTemplate.from_template(
    """Analyze the provided content (text or document) and perform the following tasks:
1. Write a concise Markdown summary of the key concepts (max {summary_max_words} words).
2. Produce {dialect} markup that visually represents the information. Focus on {focus}.
{flashcard_task}
The diagram category is: {category}.
Diagram rules:
{rules}

The diagram markup must be syntactically valid. Escape special characters properly and wrap labels that contain punctuation in double quotes.

Output format: respond with a single JSON object and nothing else, shaped exactly like this:
{response_shape}

IMPORTANT: Return ONLY the JSON object. Do not wrap it in markdown code fences and do not add any text before or after it."""
)

FLASHCARD_TASK = (
    "3. Write between {minimum} and {maximum} flashcards that test understanding of the "
    "key concepts. Each card has a question on the front and its answer on the back.\n"
)

RESPONSE_SHAPE = """{
  "summary": "The markdown summary here...",
  "diagramMarkup": "The diagram markup here...",
  "flashcards": [
    {"front": "Question text", "back": "Answer text"}
  ]
}"""

RESPONSE_SHAPE_WITHOUT_FLASHCARDS = """{
  "summary": "The markdown summary here...",
  "diagramMarkup": "The diagram markup here..."
}"""


@dataclass(frozen=True)
class GenerationOptions:
    """Bounds requested from the model."""

    summary_max_words: int = 300
    flashcard_min: int = 5
    flashcard_max: int = 10
    include_flashcards: bool = True


def build_instructions(
    category: DiagramCategory | str,
    options: GenerationOptions | None = None,
) -> str:
    """Fill the instruction template for a category."""
    options = options or GenerationOptions()
    grammar = get_grammar(category)

    if options.include_flashcards:
        flashcard_task = FLASHCARD_TASK.format(
            minimum=options.flashcard_min, maximum=options.flashcard_max
        )
        response_shape = RESPONSE_SHAPE
    else:
        flashcard_task = ""
        response_shape = RESPONSE_SHAPE_WITHOUT_FLASHCARDS

    return GENERATION_INSTRUCTIONS.format(
        summary_max_words=options.summary_max_words,
        dialect=grammar.dialect,
        focus=grammar.focus,
        flashcard_task=flashcard_task,
        category=grammar.category.value,
        rules=grammar.describe_rules(),
        response_shape=response_shape,
    )


def build_generation_request(
    source: SourceMaterial,
    category: DiagramCategory | str,
    options: GenerationOptions | None = None,
) -> ServiceRequest:
    """Build the ordered segment list for a generation call.

    Args:
        source: Pasted text and/or uploaded document
        category: Diagram category selecting the markup grammar
        options: Summary and flashcard bounds

    Returns:
        ServiceRequest: File segment, text segment, instruction segment

    Raises:
        InvalidInputError: If neither text nor a file was supplied
    """
    if not source.has_content:
        raise InvalidInputError("No input provided: supply text or upload a file")

    segments: list[InlineFileSegment | TextSegment] = []
    if source.file is not None:
        segments.append(
            InlineFileSegment(
                mime_type=source.file.mime_type,
                base64_payload=source.file.base64_payload,
            )
        )
    if source.has_text:
        segments.append(TextSegment(text=source.text))
    segments.append(TextSegment(text=build_instructions(category, options)))

    logger.debug(
        f"{__name__}:build_generation_request - category={category}, "
        f"has_file={source.file is not None}, has_text={source.has_text}"
    )
    return ServiceRequest(segments=tuple(segments), expects_json=True)
