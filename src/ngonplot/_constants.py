"""Shared constants used across the model and rendering layers."""

CANVAS_MIN_SIDE: int = 1000
"""Smallest side length (pixels) of a rendered canvas."""

CANVAS_MARGIN: int = 200
"""Pixels added to the diameter before applying :data:`CANVAS_MIN_SIDE`."""

DEFAULT_FONT_FAMILY: str = "DejaVu Sans"
"""Font family used for vertex labels when no font file is given."""

# Viewer slider ranges.  These are UI policy only; the geometry and
# raster layers accept any values.
SIDE_COUNT_RANGE: tuple[int, int] = (3, 20)
DIAMETER_RANGE: tuple[float, float] = (100.0, 5000.0)
OFFSET_RANGE: tuple[float, float] = (0.0, 45.0)

ZOOM_RANGE: tuple[float, float] = (0.1, 10.0)
ZOOM_STEP: float = 1.1
