"""Diagram rendering: render state machine, Kroki backend and pan/zoom viewport."""

from backend.core.diagram_rendering.diagram_renderer import DiagramRenderer
from backend.core.diagram_rendering.kroki_backend import KrokiRenderBackend, RenderBackend
from backend.core.diagram_rendering.render_state import RenderState, RenderStatus
from backend.core.diagram_rendering.viewport import PanZoomViewport, ViewportTransform

__all__ = [
    "DiagramRenderer",
    "KrokiRenderBackend",
    "PanZoomViewport",
    "RenderBackend",
    "RenderState",
    "RenderStatus",
    "ViewportTransform",
]
