"""
Exception hierarchy for the StudySketch application.

Provides layered exception structure for domain-specific errors.
All exceptions include context for observability and debugging.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from typing import Any


class StudySketchException(Exception):
    """Base exception for all StudySketch application errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging

        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class InvalidInputError(StudySketchException):
    """Raised when the caller supplied no usable material or question."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize invalid input error.

        Args:
            message: Error message
            field: Field name that failed validation
            details: Additional context
        """
        details = details or {}
        if field:
            details["field"] = field
        super().__init__(message, details)


class MissingCredentialError(StudySketchException):
    """Raised before any service request when no API key is configured."""

    def __init__(self, setting: str = "GOOGLE_API_KEY") -> None:
        super().__init__(f"{setting} is not configured", {"setting": setting})


class ServiceCallError(StudySketchException):
    """Raised when the generation service call fails (network or service side)."""

    def __init__(
        self,
        message: str,
        model_id: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize service call error.

        Args:
            message: Error message
            model_id: Model that was being called
            details: Additional context
        """
        details = details or {}
        if model_id:
            details["model_id"] = model_id
        super().__init__(message, details)


class MalformedResponseError(StudySketchException):
    """Raised when the service reply cannot be decoded, even after repair."""

    def __init__(
        self,
        message: str,
        raw_excerpt: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize malformed response error.

        Args:
            message: Error message
            raw_excerpt: Leading part of the undecodable reply
            details: Additional context
        """
        details = details or {}
        if raw_excerpt is not None:
            details["raw_excerpt"] = raw_excerpt
        super().__init__(message, details)


class RenderError(StudySketchException):
    """Raised by a render backend when diagram markup cannot be rendered."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize render error.

        Args:
            message: Renderer error detail (usually the syntax error text)
            status_code: HTTP status returned by the renderer, if any
            details: Additional context
        """
        details = details or {}
        if status_code is not None:
            details["status_code"] = status_code
        super().__init__(message, details)


class GenerationInProgressError(StudySketchException):
    """Raised when a generation is requested while another is still running."""

    def __init__(self) -> None:
        super().__init__("A generation request is already in progress")
