"""
Study error handling utilities.

Provides a decorator that maps the StudySketch exception taxonomy to
HTTPExceptions with a uniform error body across study and diagram endpoints.
"""

import functools
import logging
from typing import Any, Callable, TypeVar

from fastapi import HTTPException, status

from backend.core.exceptions import (
    GenerationInProgressError,
    InvalidInputError,
    MalformedResponseError,
    MissingCredentialError,
    ServiceCallError,
    StudySketchException,
)
from backend.models.common import ErrorResponse

logger = logging.getLogger(__name__)

# Type for the decorated function
F = TypeVar("F", bound=Callable[..., Any])

RETRY_MESSAGE = "Failed to generate content. Please try again."
SERVICE_MESSAGE = "The generation service is unavailable. Please try again."


def _http_error(status_code: int, code: str, message: str) -> HTTPException:
    body = ErrorResponse(error=message, details={"code": code})
    return HTTPException(status_code=status_code, detail=body.model_dump())


def handle_study_errors(func: F) -> F:
    """
    Decorator to handle study pipeline errors and transform them into HTTPExceptions.

    This centralizes:
    - Logging of errors with context
    - Mapping the exception taxonomy to HTTP status codes
    - Generic, retryable messages for service-side failures
    """
    @functools.wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return await func(*args, **kwargs)

        except InvalidInputError as e:
            logger.warning("Invalid study request", extra={"error": str(e)})
            raise _http_error(status.HTTP_400_BAD_REQUEST, "INVALID_INPUT", e.message)

        except GenerationInProgressError as e:
            logger.warning("Generation already in progress", extra={"error": str(e)})
            raise _http_error(status.HTTP_409_CONFLICT, "GENERATION_IN_PROGRESS", e.message)

        except MissingCredentialError as e:
            logger.error("Generation service credential missing", extra={"error": str(e)})
            raise _http_error(
                status.HTTP_503_SERVICE_UNAVAILABLE, "MISSING_CREDENTIAL", e.message
            )

        except MalformedResponseError as e:
            logger.error("Malformed generation reply", extra={"error": str(e)})
            raise _http_error(status.HTTP_502_BAD_GATEWAY, "MALFORMED_RESPONSE", RETRY_MESSAGE)

        except ServiceCallError as e:
            logger.error("Generation service call failed", extra={"error": str(e)})
            raise _http_error(status.HTTP_502_BAD_GATEWAY, "SERVICE_ERROR", SERVICE_MESSAGE)

        except StudySketchException as e:
            logger.exception("Unhandled study error", extra={"error": str(e)})
            raise _http_error(
                status.HTTP_500_INTERNAL_SERVER_ERROR, "PROCESSING_ERROR", e.message
            )

    return wrapper  # type: ignore
