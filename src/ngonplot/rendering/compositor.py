"""Raster compositor: :func:`render` and :func:`render_polygon` entry points."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import fields, replace
from typing import Any

from ngonplot.geometry import vertices_for
from ngonplot.model import PolygonSpec, RenderStyle, Vertex, to_rgba8
from ngonplot.rendering.canvas import Canvas, canvas_side, round_half_away, to_screen
from ngonplot.rendering.shapes import draw_hollow_circle, draw_line_segment, fill_circle
from ngonplot.rendering.text import GlyphSource, LabelFont, draw_text

logger = logging.getLogger(__name__)

_STYLE_FIELDS = frozenset(f.name for f in fields(RenderStyle))
_DEFAULT_RENDER_STYLE = RenderStyle()

_default_font: LabelFont | None = None


def _resolve_style(
    style: RenderStyle | None,
    **kwargs: Any,
) -> RenderStyle:
    """Build a :class:`RenderStyle` from an optional base plus overrides.

    Any kwarg whose name matches a ``RenderStyle`` field replaces that
    field's value.  Passing ``None`` is treated as "not provided" and
    preserves the base value.

    Raises:
        TypeError: If a kwarg name does not match any ``RenderStyle`` field.
    """
    unknown = kwargs.keys() - _STYLE_FIELDS
    if unknown:
        raise TypeError(
            f"Unknown style keyword argument(s): {', '.join(sorted(unknown))}"
        )

    s = style if style is not None else replace(_DEFAULT_RENDER_STYLE)
    overrides = {k: v for k, v in kwargs.items() if v is not None}
    if overrides:
        s = replace(s, **overrides)
    return s


def default_font() -> LabelFont:
    """Return the shared default :class:`LabelFont`, loading it on first use.

    Raises:
        FontLoadError: If the default font family cannot be loaded.
    """
    global _default_font
    if _default_font is None:
        _default_font = LabelFont()
    return _default_font


def render_polygon(
    vertices: Sequence[Vertex],
    spec: PolygonSpec,
    style: RenderStyle,
    font: GlyphSource,
) -> Canvas:
    """Rasterize a polygon and its annotations onto a fresh canvas.

    Layers are drawn in order, each over the previous ones:

    1. opaque background fill;
    2. the circumscribed circle outline;
    3. the closed polygon (one edge per vertex, including the edge
       from the last vertex back to the first);
    4. a filled marker on every vertex;
    5. a ``"(x, y) / angle°"`` label beside every marker, blended
       with glyph coverage as alpha.

    The geometric origin maps to the canvas centre and the y axis is
    flipped for display.  Anything that falls outside the canvas is
    clipped pixel by pixel.

    Args:
        vertices: Polygon vertices in drawing order, normally from
            :func:`~ngonplot.geometry.generate_polygon_vertices`.
        spec: The polygon parameters; *diameter* sets the canvas size
            and circle radius.
        style: Colours, marker radius and label settings.
        font: Glyph source used for the labels.

    Returns:
        A square :class:`Canvas` owned by the caller.
    """
    side = canvas_side(spec.diameter)
    logger.debug(
        "Rendering %d vertices, diameter %s, on a %dx%d canvas",
        len(vertices), spec.diameter, side, side,
    )
    canvas = Canvas.filled(side, side, to_rgba8(style.background_colour))
    centre = canvas.centre

    draw_hollow_circle(
        canvas,
        (int(centre[0]), int(centre[1])),
        round_half_away(spec.diameter / 2.0),
        to_rgba8(style.circle_colour),
    )

    points = [to_screen(v.x, v.y, centre) for v in vertices]
    edge_rgba = to_rgba8(style.edge_colour)
    n = len(points)
    for i in range(n):
        draw_line_segment(canvas, points[i], points[(i + 1) % n], edge_rgba)

    marker_rgba = to_rgba8(style.marker_colour)
    for point in points:
        fill_circle(canvas, point, style.marker_radius, marker_rgba)

    label_rgba = to_rgba8(style.label_colour)
    dx, dy = style.label_offset
    for vertex, (px, py) in zip(vertices, points):
        draw_text(
            canvas, vertex.label(), px + dx, py + dy,
            style.label_scale, font, label_rgba,
        )

    return canvas


def render(
    spec: PolygonSpec | None = None,
    *,
    style: RenderStyle | None = None,
    font: GlyphSource | None = None,
    **style_kwargs: object,
) -> Canvas:
    """Generate the vertices of *spec* and render them.

    Example usage::

        from ngonplot import PolygonSpec, render

        canvas = render(PolygonSpec(side_count=4, diameter=700, offset_deg=22.5))
        canvas.pixels.shape  # (1000, 1000, 4)

        # Override individual style fields:
        canvas = render(PolygonSpec(), marker_radius=5, edge_colour="navy")

    Args:
        spec: Polygon parameters.  ``None`` uses the default
            :class:`PolygonSpec`.
        style: A :class:`RenderStyle`.  ``None`` uses defaults.
        font: Glyph source for labels.  ``None`` uses the shared
            default :class:`~ngonplot.rendering.text.LabelFont`.
        **style_kwargs: Any :class:`RenderStyle` field name as a
            keyword argument.  Unknown names raise :class:`TypeError`.

    Returns:
        The finished :class:`Canvas`.

    Raises:
        FontLoadError: If *font* is ``None`` and the default font
            cannot be loaded.  No canvas is allocated in that case.
    """
    resolved = _resolve_style(style, **style_kwargs)
    if spec is None:
        spec = PolygonSpec()
    if font is None:
        font = default_font()
    return render_polygon(vertices_for(spec), spec, resolved, font)
