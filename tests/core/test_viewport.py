"""
Test suite for the pan/zoom viewport.

System role: Verification of bounded viewport transforms
"""

import pytest

from backend.core.diagram_rendering.viewport import (
    DEFAULT_SCALE,
    MAX_SCALE,
    MIN_SCALE,
    PanZoomViewport,
    svg_dimensions,
)


@pytest.fixture
def viewport() -> PanZoomViewport:
    """Provide an 800x600 viewport."""
    return PanZoomViewport(container_width=800, container_height=600)


class TestZoomBounds:
    """Test suite for scale clamping."""

    def test_zoom_in_never_exceeds_max(self, viewport: PanZoomViewport) -> None:
        """Test repeated zoom-in stops at the maximum scale."""
        for _ in range(20):
            viewport.zoom_in()

        assert viewport.scale == MAX_SCALE

    def test_zoom_out_never_goes_below_min(self, viewport: PanZoomViewport) -> None:
        """Test repeated zoom-out stops at the minimum scale."""
        for _ in range(20):
            viewport.zoom_out()

        assert viewport.scale == MIN_SCALE

    @pytest.mark.parametrize("requested", [-3.0, 0.0, 0.1, 2.5, 10.0, 1000.0])
    def test_zoom_to_clamps(self, viewport: PanZoomViewport, requested: float) -> None:
        """Test any requested scale lands inside [0.5, 4.0]."""
        transform = viewport.zoom_to(requested)

        assert MIN_SCALE <= transform.scale <= MAX_SCALE

    def test_wheel_steps_by_a_tenth(self, viewport: PanZoomViewport) -> None:
        """Test one wheel notch towards the user zooms in by 0.1."""
        viewport.wheel(-1)

        assert viewport.scale == pytest.approx(1.1)

    def test_invalid_default_rejected(self) -> None:
        """Test a default outside the bounds is refused."""
        with pytest.raises(ValueError):
            PanZoomViewport(default_scale=5.0)


class TestPanAndReset:
    """Test suite for panning, focal zoom and reset."""

    def test_reset_restores_default_scale(self, viewport: PanZoomViewport) -> None:
        """Test reset-to-fit returns to the documented default."""
        viewport.zoom_in()
        viewport.pan(40, -25)

        transform = viewport.reset()

        assert transform.scale == DEFAULT_SCALE

    def test_fit_content_centers(self, viewport: PanZoomViewport) -> None:
        """Test content is centered in the container at default scale."""
        transform = viewport.fit_content(200, 100)

        assert transform.offset_x == 300
        assert transform.offset_y == 250

    def test_pan_moves_offsets_only(self, viewport: PanZoomViewport) -> None:
        """Test panning translates without zooming."""
        before = viewport.transform

        after = viewport.pan(10, 20)

        assert after.scale == before.scale
        assert after.offset_x == before.offset_x + 10
        assert after.offset_y == before.offset_y + 20

    def test_zoom_keeps_focal_point_fixed(self, viewport: PanZoomViewport) -> None:
        """Test the content point under the focal point stays put."""
        viewport.fit_content(200, 100)
        before = viewport.transform
        focal_x, focal_y = 350.0, 280.0
        content_x = (focal_x - before.offset_x) / before.scale
        content_y = (focal_y - before.offset_y) / before.scale

        after = viewport.zoom_to(2.0, focal_x, focal_y)

        assert after.offset_x + content_x * after.scale == pytest.approx(focal_x)
        assert after.offset_y + content_y * after.scale == pytest.approx(focal_y)


class TestSvgDimensions:
    """Test suite for svg_dimensions."""

    def test_reads_viewbox(self, sample_svg: str) -> None:
        """Test width and height come from the viewBox."""
        assert svg_dimensions(sample_svg) == (200.0, 100.0)

    def test_missing_viewbox(self) -> None:
        """Test SVGs without a viewBox have no intrinsic size."""
        assert svg_dimensions("<svg></svg>") is None
