"""
Test suite for the Kroki render backend.

System role: Verification of markup -> SVG HTTP calls
"""

import httpx
import pytest

from backend.core.diagram_rendering.kroki_backend import KrokiRenderBackend, apply_theme
from backend.core.exceptions import RenderError


def _backend(handler) -> KrokiRenderBackend:
    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return KrokiRenderBackend("http://kroki.test/", http_client=client)


class TestKrokiRenderBackend:
    """Test suite for KrokiRenderBackend.render_svg."""

    @pytest.mark.asyncio
    async def test_posts_themed_markup(self, sample_svg: str) -> None:
        """Test markup is posted as plain text to the mermaid svg endpoint."""
        # Arrange
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, text=sample_svg)

        backend = _backend(handler)

        # Act
        svg = await backend.render_svg("mindmap\n  root((A))")

        # Assert
        assert svg == sample_svg
        assert str(seen[0].url) == "http://kroki.test/mermaid/svg"
        body = seen[0].content.decode("utf-8")
        assert body.startswith("%%{init:")
        assert body.endswith("mindmap\n  root((A))")
        await backend.aclose()

    @pytest.mark.asyncio
    async def test_rejected_markup_raises_with_detail(self) -> None:
        """Test a 400 from Kroki surfaces its error text and status."""
        backend = _backend(lambda request: httpx.Response(400, text="Parse error on line 3"))

        with pytest.raises(RenderError) as exc_info:
            await backend.render_svg("flowchart TD\n  A -->")

        assert exc_info.value.message == "Parse error on line 3"
        assert exc_info.value.details["status_code"] == 400

    @pytest.mark.asyncio
    async def test_unreachable_renderer_raises(self) -> None:
        """Test transport failures become render errors."""

        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        backend = _backend(handler)

        with pytest.raises(RenderError, match="unavailable"):
            await backend.render_svg("mindmap\n  root")


class TestApplyTheme:
    """Test suite for apply_theme."""

    def test_prefixes_init_directive(self) -> None:
        """Test the theme and its variables are injected."""
        themed = apply_theme("timeline\n  2020 : A", "base")

        assert themed.startswith('%%{init: {"theme": "base"')
        assert "primaryColor" in themed

    def test_existing_directive_untouched(self) -> None:
        """Test markup with its own init directive is passed through."""
        markup = "%%{init: {'theme': 'dark'}}%%\nmindmap\n  root"

        assert apply_theme(markup, "base") == markup
