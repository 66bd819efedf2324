"""
Diagram service orchestrator.

Renders diagram markup for API callers. Each call uses its own renderer, so
concurrent requests never share render state; the Kroki backend (and its HTTP
connection pool) is shared.

Dependencies: backend.core.diagram_rendering, backend.core.study_pipeline
System role: Diagram rendering orchestration
"""

import logging

from backend.core.diagram_rendering import DiagramRenderer, RenderBackend, RenderState
from backend.core.study_pipeline.diagram_grammar import DIAGRAM_GRAMMARS, DiagramGrammar

logger = logging.getLogger(__name__)


class DiagramService:
    """Diagram service orchestrator."""

    def __init__(self, backend: RenderBackend) -> None:
        """
        Initialize diagram service.

        Args:
            backend: Shared markup -> SVG backend
        """
        self.backend = backend

    def create_renderer(self) -> DiagramRenderer:
        """Create a renderer bound to the shared backend."""
        return DiagramRenderer(self.backend)

    async def render_markup(self, markup: str) -> RenderState:
        """Render markup; render failures come back as a failed state."""
        state = await self.create_renderer().render(markup)
        logger.info(f"{__name__}:render_markup - status={state.status.value}")
        return state

    def list_grammars(self) -> list[DiagramGrammar]:
        """Grammar table in category declaration order."""
        return list(DIAGRAM_GRAMMARS.values())
