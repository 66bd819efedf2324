"""API-specific dependencies."""

# Re-export common dependencies
from .dependencies import (
    get_diagram_service,
    get_service_cache,
    get_study_service,
)

__all__ = [
    "get_diagram_service",
    "get_service_cache",
    "get_study_service",
]
