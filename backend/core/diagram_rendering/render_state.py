"""Render state for the diagram renderer.

Dependencies: pydantic
System role: Render state machine values (empty, rendering, rendered, failed)
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class RenderStatus(str, Enum):
    """Render state machine positions."""

    EMPTY = "empty"
    RENDERING = "rendering"
    RENDERED = "rendered"
    FAILED = "failed"


class RenderState(BaseModel):
    """Snapshot of the renderer for the current diagram markup.

    A failed state keeps the raw markup so callers can show it instead of a
    blank canvas.
    """

    model_config = ConfigDict(frozen=True)

    status: RenderStatus
    markup: str = ""
    svg: str | None = Field(default=None, description="Rendered SVG document")
    error_detail: str | None = Field(default=None, description="Renderer error text")
    attempt_id: int = Field(default=0, description="Render attempt that produced this state")

    @classmethod
    def empty(cls, attempt_id: int = 0) -> "RenderState":
        return cls(status=RenderStatus.EMPTY, attempt_id=attempt_id)

    @classmethod
    def rendering(cls, markup: str, attempt_id: int) -> "RenderState":
        return cls(status=RenderStatus.RENDERING, markup=markup, attempt_id=attempt_id)

    @classmethod
    def rendered(cls, markup: str, svg: str, attempt_id: int) -> "RenderState":
        return cls(
            status=RenderStatus.RENDERED, markup=markup, svg=svg, attempt_id=attempt_id
        )

    @classmethod
    def failed(cls, markup: str, error_detail: str, attempt_id: int) -> "RenderState":
        return cls(
            status=RenderStatus.FAILED,
            markup=markup,
            error_detail=error_detail,
            attempt_id=attempt_id,
        )
