"""Kroki render backend.

Renders Mermaid markup to SVG by posting it to a Kroki server
(docker run -d -p 8000:8000 yuzutech/kroki).

Dependencies: httpx, backend.core.exceptions
System role: Markup -> SVG conversion for the diagram renderer
"""

import json
import logging
from typing import Protocol

import httpx

from backend.core.exceptions import RenderError

logger = logging.getLogger(__name__)

THEME_VARIABLES = {
    "primaryColor": "#e0e7ff",
    "primaryTextColor": "#1e1b4b",
    "primaryBorderColor": "#4338ca",
    "lineColor": "#64748b",
    "secondaryColor": "#f3e8ff",
    "tertiaryColor": "#fff",
}


class RenderBackend(Protocol):
    """Anything that can turn diagram markup into an SVG document."""

    async def render_svg(self, markup: str) -> str:
        ...


def apply_theme(markup: str, theme: str) -> str:
    """Prefix an init directive unless the markup already carries one."""
    if markup.lstrip().startswith("%%{"):
        return markup
    directive = json.dumps({"theme": theme, "themeVariables": THEME_VARIABLES})
    return f"%%{{init: {directive}}}%%\n{markup}"


class KrokiRenderBackend:
    """Renders Mermaid markup through Kroki's POST /mermaid/svg endpoint."""

    def __init__(
        self,
        base_url: str,
        timeout_seconds: float = 30.0,
        theme: str = "base",
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        """
        Initialize Kroki backend.

        Args:
            base_url: Kroki server URL
            timeout_seconds: Per-request timeout
            theme: Mermaid theme applied through an init directive
            http_client: Optional preconfigured client (tests inject a mock transport)
        """
        self.base_url = base_url.rstrip("/")
        self.theme = theme
        self._client = http_client or httpx.AsyncClient(timeout=timeout_seconds)

    async def render_svg(self, markup: str) -> str:
        """
        Render markup to SVG.

        Args:
            markup: Mermaid diagram markup

        Returns:
            str: SVG document

        Raises:
            RenderError: If Kroki rejects the markup or cannot be reached
        """
        try:
            response = await self._client.post(
                f"{self.base_url}/mermaid/svg",
                content=apply_theme(markup, self.theme).encode("utf-8"),
                headers={"Content-Type": "text/plain"},
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            detail = e.response.text.strip() or f"Renderer returned {e.response.status_code}"
            logger.warning(
                f"{__name__}:render_svg - Kroki error {e.response.status_code}: {detail[:200]}"
            )
            raise RenderError(detail, status_code=e.response.status_code) from e
        except httpx.HTTPError as e:
            logger.error(f"{__name__}:render_svg - Kroki unreachable: {type(e).__name__}: {e}")
            raise RenderError(f"Diagram renderer unavailable: {e}") from e

        logger.debug(f"{__name__}:render_svg - Rendered {len(response.content)} bytes")
        return response.text

    async def aclose(self) -> None:
        await self._client.aclose()
