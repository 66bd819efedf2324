"""
Dependency injection container.

Factory functions for FastAPI dependencies.

Dependencies: backend.configs, backend.application, backend.boundary
System role: DI container for service injection
"""

from backend.configs import get_settings
from backend.application.services import DiagramService, StudyService
from backend.boundary.gemini.gemini_client import GeminiContentClient
from backend.core.diagram_rendering.kroki_backend import KrokiRenderBackend
from backend.core.study_pipeline.generation_prompt import GenerationOptions


class ServiceCache:
    """Container for cached service instances."""

    def __init__(self):
        self._content_client = None
        self._render_backend = None

    @property
    def content_client(self) -> GeminiContentClient:
        """Get cached Gemini content client."""
        if self._content_client is None:
            settings = get_settings()
            self._content_client = GeminiContentClient(
                api_key=settings.gemini.api_key,
                model_id=settings.gemini.model_id,
                thinking_budget=settings.gemini.thinking_budget,
            )
        return self._content_client

    @property
    def render_backend(self) -> KrokiRenderBackend:
        """Get cached Kroki render backend."""
        if self._render_backend is None:
            settings = get_settings()
            self._render_backend = KrokiRenderBackend(
                base_url=settings.renderer.kroki_url,
                timeout_seconds=settings.renderer.timeout_seconds,
                theme=settings.renderer.theme,
            )
        return self._render_backend

    async def aclose(self) -> None:
        """Release network resources and clear all cached instances."""
        if self._render_backend is not None:
            await self._render_backend.aclose()
        self._content_client = None
        self._render_backend = None


# Global service cache
_service_cache = ServiceCache()


def get_service_cache() -> ServiceCache:
    """Get service cache singleton."""
    return _service_cache


def get_study_service() -> StudyService:
    """
    Get study service instance.

    Returns:
        StudyService: Study service bound to the cached Gemini client
    """
    study = get_settings().study
    options = GenerationOptions(
        summary_max_words=study.summary_max_words,
        flashcard_min=study.flashcard_min,
        flashcard_max=study.flashcard_max,
        include_flashcards=study.include_flashcards,
    )
    return StudyService(
        content_client=get_service_cache().content_client,
        options=options,
    )


def get_diagram_service() -> DiagramService:
    """
    Get diagram service instance.

    Returns:
        DiagramService: Diagram service bound to the cached Kroki backend
    """
    return DiagramService(backend=get_service_cache().render_backend)
