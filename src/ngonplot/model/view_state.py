from __future__ import annotations

from dataclasses import dataclass

from ngonplot._constants import ZOOM_RANGE, ZOOM_STEP


@dataclass
class ZoomState:
    """Display magnification of the viewer.

    Each zoom step multiplies or divides the factor by
    :data:`~ngonplot._constants.ZOOM_STEP`, and the result is clamped to
    :data:`~ngonplot._constants.ZOOM_RANGE`.

    Attributes:
        zoom: Magnification factor (``1.0`` shows the whole canvas).
    """

    zoom: float = 1.0

    def __post_init__(self) -> None:
        if self.zoom <= 0:
            raise ValueError(f"zoom must be positive, got {self.zoom}")
        self.zoom = _clamp_zoom(self.zoom)

    def zoom_in(self) -> float:
        """Magnify by one step and return the new factor."""
        self.zoom = _clamp_zoom(self.zoom * ZOOM_STEP)
        return self.zoom

    def zoom_out(self) -> float:
        """Shrink by one step and return the new factor."""
        self.zoom = _clamp_zoom(self.zoom / ZOOM_STEP)
        return self.zoom

    def visible_limits(
        self, side: int,
    ) -> tuple[tuple[float, float], tuple[float, float]]:
        """Axes limits showing a square canvas of *side* pixels.

        The view stays centred on the canvas centre and spans
        ``side / zoom`` pixels.  The y limits are returned top-down to
        match image row order.

        Returns:
            ``((x_min, x_max), (y_bottom, y_top))`` in pixel units.
        """
        half = side / (2.0 * self.zoom)
        c = side / 2.0
        return (c - half, c + half), (c + half, c - half)


def _clamp_zoom(value: float) -> float:
    lo, hi = ZOOM_RANGE
    return max(lo, min(hi, value))
