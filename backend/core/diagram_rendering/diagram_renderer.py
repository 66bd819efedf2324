"""Diagram renderer with stale-result discarding.

Converts diagram markup into SVG through a render backend and tracks the
result as a RenderState. Every submission gets a new attempt id; a result is
applied only if its attempt is still the latest one issued, so a slow render
of old markup can never overwrite the state of newer markup.

Dependencies: itertools, backend.core.diagram_rendering
System role: Render state machine owner for the current diagram
"""

import itertools
import logging

from backend.core.diagram_rendering.kroki_backend import RenderBackend
from backend.core.diagram_rendering.render_state import RenderState, RenderStatus
from backend.core.diagram_rendering.viewport import PanZoomViewport, svg_dimensions
from backend.core.exceptions import RenderError

logger = logging.getLogger(__name__)


class DiagramRenderer:
    """Owns the RenderState for the current diagram markup.

    State machine: empty -> rendering -> rendered | failed. Any new markup
    re-enters rendering, including from failed.
    """

    def __init__(
        self,
        backend: RenderBackend,
        viewport: PanZoomViewport | None = None,
    ) -> None:
        """
        Initialize renderer.

        Args:
            backend: Markup -> SVG backend
            viewport: Pan/zoom viewport reset on every successful render
        """
        self._backend = backend
        self.viewport = viewport or PanZoomViewport()
        self._attempts = itertools.count(1)
        self._latest_attempt = 0
        self._state = RenderState.empty()

    @property
    def state(self) -> RenderState:
        return self._state

    @property
    def latest_attempt(self) -> int:
        return self._latest_attempt

    def _issue_attempt(self) -> int:
        self._latest_attempt = next(self._attempts)
        return self._latest_attempt

    async def render(self, markup: str) -> RenderState:
        """
        Render markup and update the state if this is still the latest attempt.

        Args:
            markup: Diagram markup; blank markup yields the empty state

        Returns:
            RenderState: The renderer's state after this attempt settles, which
                belongs to a newer attempt if this one was superseded
        """
        attempt_id = self._issue_attempt()

        if not markup or not markup.strip():
            self._state = RenderState.empty(attempt_id)
            return self._state

        current = self._state
        if current.status == RenderStatus.RENDERED and current.markup == markup:
            logger.debug(f"{__name__}:render - Markup unchanged, skipping attempt={attempt_id}")
            self._state = current.model_copy(update={"attempt_id": attempt_id})
            return self._state

        self._state = RenderState.rendering(markup, attempt_id)
        logger.info(f"{__name__}:render - START attempt={attempt_id}, markup_len={len(markup)}")

        try:
            svg = await self._backend.render_svg(markup)
            result = RenderState.rendered(markup, svg, attempt_id)
        except RenderError as e:
            result = RenderState.failed(markup, e.message, attempt_id)
        except Exception as e:
            logger.exception(f"{__name__}:render - Unexpected backend failure attempt={attempt_id}")
            result = RenderState.failed(markup, f"{type(e).__name__}: {e}", attempt_id)

        if attempt_id != self._latest_attempt:
            logger.debug(
                f"{__name__}:render - Discarding stale attempt={attempt_id}, "
                f"latest={self._latest_attempt}"
            )
            return self._state

        self._state = result
        if result.status == RenderStatus.RENDERED:
            dimensions = svg_dimensions(result.svg or "")
            if dimensions:
                self.viewport.fit_content(*dimensions)
            else:
                self.viewport.reset()
        logger.info(f"{__name__}:render - END attempt={attempt_id}, status={result.status.value}")
        return self._state
