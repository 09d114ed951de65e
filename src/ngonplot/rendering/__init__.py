"""Rendering: raster compositing and the interactive viewer."""

from ngonplot.rendering.canvas import Canvas, canvas_side
from ngonplot.rendering.compositor import render, render_polygon
from ngonplot.rendering.interactive import render_interactive
from ngonplot.rendering.text import FontLoadError, LabelFont, PositionedGlyph

__all__ = [
    "Canvas",
    "FontLoadError",
    "LabelFont",
    "PositionedGlyph",
    "canvas_side",
    "render",
    "render_interactive",
    "render_polygon",
]
