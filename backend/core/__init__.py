"""
Core business logic module.

Contains the exception hierarchy, the study content pipeline and the diagram
rendering engine.
"""

from backend.core.exceptions import (
    GenerationInProgressError,
    InvalidInputError,
    MalformedResponseError,
    MissingCredentialError,
    RenderError,
    ServiceCallError,
    StudySketchException,
)

__all__ = [
    "GenerationInProgressError",
    "InvalidInputError",
    "MalformedResponseError",
    "MissingCredentialError",
    "RenderError",
    "ServiceCallError",
    "StudySketchException",
]
