"""ngonplot: regular polygons inscribed in a circle, rendered to RGBA rasters.

Each vertex is marked and annotated with its coordinates and angle.
Rasters are plain numpy buffers, ready for display or saving, and an
interactive matplotlib viewer offers sliders and click-to-zoom.

Example usage::

    from ngonplot import PolygonSpec, render

    canvas = render(PolygonSpec(side_count=8, diameter=700, offset_deg=22.5))
    canvas.pixels  # (1000, 1000, 4) uint8
"""

from ngonplot.config import Settings, load_settings
from ngonplot.geometry import generate_polygon_vertices
from ngonplot.model import (
    Colour,
    PolygonSpec,
    RenderStyle,
    Vertex,
    ZoomState,
    to_rgba8,
)
from ngonplot.rendering import (
    Canvas,
    FontLoadError,
    LabelFont,
    PositionedGlyph,
    canvas_side,
    render,
    render_interactive,
    render_polygon,
)

__all__ = [
    "Canvas",
    "Colour",
    "FontLoadError",
    "LabelFont",
    "PolygonSpec",
    "PositionedGlyph",
    "RenderStyle",
    "Settings",
    "Vertex",
    "ZoomState",
    "canvas_side",
    "generate_polygon_vertices",
    "load_settings",
    "render",
    "render_interactive",
    "render_polygon",
    "to_rgba8",
]
