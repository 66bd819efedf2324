"""
FastAPI middleware for request tracing.

Assigns every request a correlation ID and logs method, path, status and
latency around the route handler.

Dependencies: starlette, backend.observability
System role: Request/response observability injection
"""

import logging
import time

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from backend.observability.correlation import clear_correlation_id, set_correlation_id
from backend.observability.log_utils import log_exception_with_context, log_with_context

logger = logging.getLogger(__name__)

CORRELATION_HEADER = "X-Correlation-ID"


def _elapsed_ms(started: float) -> float:
    return round((time.perf_counter() - started) * 1000, 2)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Logs one line when a request arrives and one when it completes."""

    async def dispatch(self, request: Request, call_next):
        started = time.perf_counter()
        route = f"{request.method} {request.url.path}"
        log_with_context(
            logger,
            logging.INFO,
            route,
            client_host=request.client.host if request.client else None,
        )

        try:
            response: Response = await call_next(request)
        except Exception as e:
            log_exception_with_context(
                logger, f"{route} - unhandled", e, elapsed_ms=_elapsed_ms(started)
            )
            raise

        log_with_context(
            logger,
            logging.WARNING if response.status_code >= 500 else logging.INFO,
            f"{route} - {response.status_code}",
            status_code=response.status_code,
            elapsed_ms=_elapsed_ms(started),
        )
        return response


class CorrelationMiddleware(BaseHTTPMiddleware):
    """Reuses the caller's correlation ID or issues one, and echoes it back."""

    async def dispatch(self, request: Request, call_next):
        correlation_id = set_correlation_id(request.headers.get(CORRELATION_HEADER))
        try:
            response: Response = await call_next(request)
        finally:
            clear_correlation_id()
        response.headers[CORRELATION_HEADER] = correlation_id
        return response
