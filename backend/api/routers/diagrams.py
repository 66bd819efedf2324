"""Diagram API endpoints.

Routes:
- POST /diagrams/render - Render Mermaid markup to SVG
- GET /diagrams/grammars - List the diagram grammar table

Dependencies: backend.application.services.diagram_service
System role: Diagram rendering HTTP API
"""

from fastapi import APIRouter, Depends

from backend.api.deps import get_diagram_service
from backend.application.services.diagram_service import DiagramService
from backend.core.diagram_rendering import RenderState
from backend.models.diagram import GrammarResponse, RenderRequest

router = APIRouter(prefix="/diagrams", tags=["diagrams"])


@router.post("/render", response_model=RenderState)
async def render_diagram(
    request: RenderRequest,
    diagram_service: DiagramService = Depends(get_diagram_service),
) -> RenderState:
    """Render markup. Syntax errors come back as a failed state with the raw markup."""
    return await diagram_service.render_markup(request.markup)


@router.get("/grammars", response_model=list[GrammarResponse])
async def list_grammars(
    diagram_service: DiagramService = Depends(get_diagram_service),
) -> list[GrammarResponse]:
    """List diagram categories with their dialect keyword and rules."""
    return [
        GrammarResponse(
            category=grammar.category,
            label=grammar.label,
            dialect=grammar.dialect,
            keyword=grammar.keyword,
            rules=list(grammar.rules),
        )
        for grammar in diagram_service.list_grammars()
    ]
