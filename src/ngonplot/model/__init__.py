"""Core data model for ngonplot: dataclasses and colour handling.

Everything is re-exported here so that ``from ngonplot.model import
RenderStyle`` works.
"""

from ngonplot.model.colour import RGBA8, Colour, to_rgba8
from ngonplot.model.polygon_spec import PolygonSpec, Vertex
from ngonplot.model.render_style import RenderStyle
from ngonplot.model.view_state import ZoomState

__all__ = [
    "Colour",
    "PolygonSpec",
    "RGBA8",
    "RenderStyle",
    "Vertex",
    "ZoomState",
    "to_rgba8",
]
