"""Pan/zoom viewport for rendered diagrams.

Holds the transform applied to the rendered SVG. Scale is clamped to
[MIN_SCALE, MAX_SCALE]; nothing here touches the render state.

Dependencies: dataclasses, re
System role: Interactive viewport transform for the diagram renderer
"""

import re
from dataclasses import dataclass

MIN_SCALE = 0.5
MAX_SCALE = 4.0
DEFAULT_SCALE = 1.0
ZOOM_STEP = 0.5
WHEEL_STEP = 0.1

_VIEWBOX = re.compile(
    r'viewBox\s*=\s*["\']\s*[-\d.eE]+[\s,]+[-\d.eE]+[\s,]+([\d.eE]+)[\s,]+([\d.eE]+)\s*["\']'
)


def svg_dimensions(svg: str) -> tuple[float, float] | None:
    """Intrinsic (width, height) of an SVG from its viewBox, if declared."""
    match = _VIEWBOX.search(svg)
    if not match:
        return None
    try:
        return float(match.group(1)), float(match.group(2))
    except ValueError:
        return None


@dataclass(frozen=True)
class ViewportTransform:
    """Scale and translation applied to the diagram."""

    scale: float = DEFAULT_SCALE
    offset_x: float = 0.0
    offset_y: float = 0.0


class PanZoomViewport:
    """Bounded pan/zoom transform centered on the rendered content."""

    def __init__(
        self,
        container_width: float = 0.0,
        container_height: float = 0.0,
        min_scale: float = MIN_SCALE,
        max_scale: float = MAX_SCALE,
        default_scale: float = DEFAULT_SCALE,
    ) -> None:
        if not min_scale <= default_scale <= max_scale:
            raise ValueError("default_scale must lie within [min_scale, max_scale]")
        self.min_scale = min_scale
        self.max_scale = max_scale
        self.default_scale = default_scale
        self.container_width = container_width
        self.container_height = container_height
        self._content_width = 0.0
        self._content_height = 0.0
        self._transform = self._centered(default_scale)

    @property
    def transform(self) -> ViewportTransform:
        return self._transform

    @property
    def scale(self) -> float:
        return self._transform.scale

    def _clamp(self, scale: float) -> float:
        return max(self.min_scale, min(self.max_scale, scale))

    def _centered(self, scale: float) -> ViewportTransform:
        return ViewportTransform(
            scale=scale,
            offset_x=(self.container_width - self._content_width * scale) / 2,
            offset_y=(self.container_height - self._content_height * scale) / 2,
        )

    def resize(self, container_width: float, container_height: float) -> ViewportTransform:
        """Update the container size and re-center."""
        self.container_width = container_width
        self.container_height = container_height
        self._transform = self._centered(self._transform.scale)
        return self._transform

    def fit_content(self, content_width: float, content_height: float) -> ViewportTransform:
        """Adopt new content dimensions and reset to the default, centered view."""
        self._content_width = content_width
        self._content_height = content_height
        return self.reset()

    def reset(self) -> ViewportTransform:
        """Return to the default scale, centered on the content."""
        self._transform = self._centered(self.default_scale)
        return self._transform

    def zoom_to(
        self,
        scale: float,
        focal_x: float | None = None,
        focal_y: float | None = None,
    ) -> ViewportTransform:
        """Zoom to a scale, keeping the focal point (default: container center) fixed."""
        current = self._transform
        new_scale = self._clamp(scale)
        focal_x = self.container_width / 2 if focal_x is None else focal_x
        focal_y = self.container_height / 2 if focal_y is None else focal_y
        ratio = new_scale / current.scale
        self._transform = ViewportTransform(
            scale=new_scale,
            offset_x=focal_x - (focal_x - current.offset_x) * ratio,
            offset_y=focal_y - (focal_y - current.offset_y) * ratio,
        )
        return self._transform

    def zoom_in(self, step: float = ZOOM_STEP) -> ViewportTransform:
        return self.zoom_to(self._transform.scale + step)

    def zoom_out(self, step: float = ZOOM_STEP) -> ViewportTransform:
        return self.zoom_to(self._transform.scale - step)

    def wheel(
        self,
        delta: float,
        focal_x: float | None = None,
        focal_y: float | None = None,
    ) -> ViewportTransform:
        """Zoom by one wheel notch per unit; negative delta zooms in."""
        return self.zoom_to(self._transform.scale - delta * WHEEL_STEP, focal_x, focal_y)

    def pan(self, dx: float, dy: float) -> ViewportTransform:
        current = self._transform
        self._transform = ViewportTransform(
            scale=current.scale,
            offset_x=current.offset_x + dx,
            offset_y=current.offset_y + dy,
        )
        return self._transform
