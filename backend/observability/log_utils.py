"""
Logging utilities for safe structured logging.

Model replies, uploaded payloads and request segments can be large or carry
user content, so they are summarized before reaching a handler: an inline
document is logged as its mime type and size, a reply as a truncated single
line.

Dependencies: logging (stdlib), pydantic, backend.models.study
System role: Log value summarization
"""

import logging
from typing import Any

from pydantic import BaseModel

from backend.models.study import (
    GeneratedContent,
    InlineFileSegment,
    ServiceRequest,
    SourceMaterial,
    UploadedFile,
)

DEFAULT_MAX_LENGTH = 500


def _summarize_model(value: BaseModel) -> str:
    if isinstance(value, (UploadedFile, InlineFileSegment)):
        return f"{value.mime_type} file (~{len(value.base64_payload) * 3 // 4} bytes)"
    if isinstance(value, SourceMaterial):
        text_len = len(value.text or "")
        return f"source(text_len={text_len}, file={value.file is not None})"
    if isinstance(value, ServiceRequest):
        kinds = ",".join(segment.kind for segment in value.segments)
        return f"request([{kinds}], json={value.expects_json})"
    if isinstance(value, GeneratedContent):
        return (
            f"content({value.category.value}, markup_len={len(value.diagram_markup)}, "
            f"flashcards={len(value.flashcards)})"
        )
    return f"{type(value).__name__}({len(value.model_fields_set)} fields set)"


def safe_log_value(value: Any, max_length: int = DEFAULT_MAX_LENGTH) -> str:
    """
    Render a value as one bounded log line.

    Args:
        value: Anything; payload-bearing models are summarized, never dumped
        max_length: Cut-off for the rendered line

    Returns:
        str: Single-line representation, truncated with the original length noted
    """
    try:
        if value is None:
            return "None"
        if isinstance(value, (bytes, bytearray)):
            return f"<{len(value)} bytes>"
        if isinstance(value, BaseModel):
            rendered = _summarize_model(value)
        elif isinstance(value, str):
            rendered = " ".join(value.split())
        elif isinstance(value, (list, tuple, set)):
            rendered = f"{type(value).__name__}({len(value)} items)"
        elif isinstance(value, dict):
            rendered = f"dict({len(value)} keys)"
        else:
            rendered = str(value)
    except Exception as e:
        return f"<unable to log: {type(e).__name__}>"

    if len(rendered) <= max_length:
        return rendered
    return f"{rendered[:max_length]}... (truncated, {len(rendered)} total)"


def log_with_context(logger: logging.Logger, level: int, message: str, **context) -> None:
    """Log a message, attaching summarized context values as record attributes."""
    logger.log(level, message, extra={key: safe_log_value(val) for key, val in context.items()})


def log_exception_with_context(
    logger: logging.Logger,
    message: str,
    exc: Exception,
    **context,
) -> None:
    """
    Log an exception with its type, message and summarized context.

    Call from inside the except block so the traceback is attached.
    """
    extra = {key: safe_log_value(val) for key, val in context.items()}
    extra["error_type"] = type(exc).__name__
    extra["error_msg"] = safe_log_value(str(exc))
    logger.exception(message, extra=extra)
