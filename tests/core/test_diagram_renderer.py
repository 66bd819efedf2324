"""
Test suite for DiagramRenderer.

System role: Verification of the render state machine and stale-result discarding
"""

import asyncio

import pytest

from backend.core.diagram_rendering import DiagramRenderer, RenderStatus
from backend.core.diagram_rendering.viewport import PanZoomViewport
from backend.core.exceptions import RenderError

MARKUP_A = "mindmap\n  root((A))"
MARKUP_B = "mindmap\n  root((B))"


async def _start(renderer: DiagramRenderer, markup: str) -> asyncio.Task:
    task = asyncio.create_task(renderer.render(markup))
    await asyncio.sleep(0)
    return task


class TestRenderRace:
    """Test suite for overlapping render attempts."""

    @pytest.mark.asyncio
    async def test_newer_result_wins_when_older_finishes_last(self, controlled_backend) -> None:
        """Test a slow render of old markup never overwrites the newer diagram."""
        # Arrange
        renderer = DiagramRenderer(controlled_backend)
        task_a = await _start(renderer, MARKUP_A)
        task_b = await _start(renderer, MARKUP_B)

        # Act
        controlled_backend.release(MARKUP_B, "<svg>B</svg>")
        await task_b
        controlled_backend.release(MARKUP_A, "<svg>A</svg>")
        await task_a

        # Assert
        assert renderer.state.status == RenderStatus.RENDERED
        assert renderer.state.markup == MARKUP_B
        assert renderer.state.svg == "<svg>B</svg>"

    @pytest.mark.asyncio
    async def test_newer_result_wins_when_older_finishes_first(self, controlled_backend) -> None:
        """Test an older result arriving first is discarded, not shown briefly."""
        # Arrange
        renderer = DiagramRenderer(controlled_backend)
        task_a = await _start(renderer, MARKUP_A)
        task_b = await _start(renderer, MARKUP_B)

        # Act
        controlled_backend.release(MARKUP_A, "<svg>A</svg>")
        state_after_a = await task_a

        # Assert
        assert state_after_a.status == RenderStatus.RENDERING
        assert state_after_a.markup == MARKUP_B

        controlled_backend.release(MARKUP_B, "<svg>B</svg>")
        await task_b
        assert renderer.state.svg == "<svg>B</svg>"
        assert renderer.state.attempt_id == renderer.latest_attempt

    @pytest.mark.asyncio
    async def test_stale_failure_is_discarded(self, controlled_backend) -> None:
        """Test an older failure cannot replace a newer success."""
        renderer = DiagramRenderer(controlled_backend)
        task_a = await _start(renderer, MARKUP_A)
        task_b = await _start(renderer, MARKUP_B)

        controlled_backend.release(MARKUP_B, "<svg>B</svg>")
        await task_b
        controlled_backend.release(MARKUP_A, RenderError("Parse error"))
        await task_a

        assert renderer.state.status == RenderStatus.RENDERED
        assert renderer.state.error_detail is None


class TestRenderStates:
    """Test suite for single-attempt transitions."""

    @pytest.mark.asyncio
    async def test_starts_empty(self, static_backend) -> None:
        """Test a fresh renderer holds no diagram."""
        renderer = DiagramRenderer(static_backend)

        assert renderer.state.status == RenderStatus.EMPTY

    @pytest.mark.asyncio
    async def test_rendering_then_rendered(self, controlled_backend) -> None:
        """Test markup passes through rendering before rendered."""
        renderer = DiagramRenderer(controlled_backend)
        task = await _start(renderer, MARKUP_A)

        assert renderer.state.status == RenderStatus.RENDERING

        controlled_backend.release(MARKUP_A, "<svg>A</svg>")
        state = await task
        assert state.status == RenderStatus.RENDERED

    @pytest.mark.asyncio
    async def test_failure_keeps_markup_and_detail(self, static_backend) -> None:
        """Test failed state carries the raw markup and the renderer's error."""
        renderer = DiagramRenderer(static_backend)

        state = await renderer.render("graph TD\n  bad -->")

        assert state.status == RenderStatus.FAILED
        assert state.markup == "graph TD\n  bad -->"
        assert state.error_detail == "Parse error on line 2"

    @pytest.mark.asyncio
    async def test_unexpected_backend_error_becomes_failed(self, controlled_backend) -> None:
        """Test non-render exceptions still settle the state machine."""
        renderer = DiagramRenderer(controlled_backend)
        task = await _start(renderer, MARKUP_A)

        controlled_backend.release(MARKUP_A, RuntimeError("boom"))
        state = await task

        assert state.status == RenderStatus.FAILED
        assert "boom" in state.error_detail

    @pytest.mark.asyncio
    async def test_failed_can_render_again(self, static_backend) -> None:
        """Test new markup re-enters rendering after a failure."""
        renderer = DiagramRenderer(static_backend)
        await renderer.render("flowchart TD\n  bad")

        state = await renderer.render(MARKUP_A)

        assert state.status == RenderStatus.RENDERED

    @pytest.mark.asyncio
    async def test_identical_markup_is_not_rerendered(self, static_backend) -> None:
        """Test unchanged markup keeps the existing SVG without a backend call."""
        renderer = DiagramRenderer(static_backend)
        first = await renderer.render(MARKUP_A)

        second = await renderer.render(MARKUP_A)

        assert static_backend.calls == [MARKUP_A]
        assert second.svg == first.svg
        assert second.attempt_id > first.attempt_id

    @pytest.mark.asyncio
    @pytest.mark.parametrize("markup", ["", "   \n"])
    async def test_blank_markup_is_empty(self, static_backend, markup: str) -> None:
        """Test blank markup clears the diagram."""
        renderer = DiagramRenderer(static_backend)
        await renderer.render(MARKUP_A)

        state = await renderer.render(markup)

        assert state.status == RenderStatus.EMPTY
        assert static_backend.calls == [MARKUP_A]

    @pytest.mark.asyncio
    async def test_successful_render_resets_viewport(self, static_backend) -> None:
        """Test a new diagram starts at the default scale, centered."""
        viewport = PanZoomViewport(container_width=800, container_height=600)
        renderer = DiagramRenderer(static_backend, viewport=viewport)
        viewport.zoom_to(3.0)

        await renderer.render(MARKUP_A)

        assert viewport.scale == 1.0
        assert viewport.transform.offset_x == 300
