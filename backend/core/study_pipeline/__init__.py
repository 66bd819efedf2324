"""Study content pipeline: grammar table, prompt builder, parser, Q&A context."""

from backend.core.study_pipeline.context_assembler import assemble_question_request
from backend.core.study_pipeline.diagram_grammar import (
    DIAGRAM_GRAMMARS,
    DiagramGrammar,
    get_grammar,
)
from backend.core.study_pipeline.generation_prompt import (
    GenerationOptions,
    build_generation_request,
)
from backend.core.study_pipeline.response_parser import parse_generated_content

__all__ = [
    "DIAGRAM_GRAMMARS",
    "DiagramGrammar",
    "GenerationOptions",
    "assemble_question_request",
    "build_generation_request",
    "get_grammar",
    "parse_generated_content",
]
