"""Interactive matplotlib viewer with parameter sliders and click zoom."""

from __future__ import annotations

import logging
from typing import Any

import matplotlib.pyplot as plt
from matplotlib.backend_bases import MouseButton
from matplotlib.widgets import Button, Slider

from ngonplot._constants import DIAMETER_RANGE, OFFSET_RANGE, SIDE_COUNT_RANGE
from ngonplot.geometry import vertices_for
from ngonplot.model import PolygonSpec, RenderStyle, ZoomState
from ngonplot.rendering.compositor import _resolve_style, default_font, render_polygon
from ngonplot.rendering.text import GlyphSource

logger = logging.getLogger(__name__)

_TITLE = "Regular polygon plot (click on the image to zoom)"


def clamp_spec(spec: PolygonSpec) -> PolygonSpec:
    """Limit *spec* to the ranges offered by the viewer sliders."""
    lo_n, hi_n = SIDE_COUNT_RANGE
    lo_d, hi_d = DIAMETER_RANGE
    lo_o, hi_o = OFFSET_RANGE
    return PolygonSpec(
        side_count=max(lo_n, min(hi_n, int(spec.side_count))),
        diameter=max(lo_d, min(hi_d, float(spec.diameter))),
        offset_deg=max(lo_o, min(hi_o, float(spec.offset_deg))),
    )


def _status_text(zoom: float) -> str:
    return (
        f"Current Zoom: {zoom:.2f}x "
        "(Left-click=ZoomIn, Right-click=ZoomOut)"
    )


def _apply_click(zoom: ZoomState, button: Any) -> bool:
    """Apply a mouse click to *zoom*.

    Left clicks zoom in and right clicks zoom out.  Returns ``True``
    if the button was recognised, ``False`` otherwise.
    """
    if button == MouseButton.LEFT:
        zoom.zoom_in()
    elif button == MouseButton.RIGHT:
        zoom.zoom_out()
    else:
        return False
    return True


def render_interactive(
    spec: PolygonSpec | None = None,
    *,
    style: RenderStyle | None = None,
    font: GlyphSource | None = None,
    figsize: tuple[float, float] = (8.0, 9.0),
    **style_kwargs: object,
) -> PolygonSpec:
    """Open a window for exploring regular polygons.

    Sliders set the side count, diameter and rotation offset; the
    **Generate** button re-renders the raster.  On the image:

    - **Left-click** zooms in by one step.
    - **Right-click** zooms out by one step.

    The image is displayed with nearest-neighbour sampling and the
    zoom stays centred on the polygon.  When the window is closed the
    last generated :class:`PolygonSpec` is returned::

        spec = render_interactive()
        render(spec)

    Args:
        spec: Initial slider values.  Values outside the slider
            ranges are clamped.  ``None`` uses the default
            :class:`PolygonSpec`.
        style: A :class:`RenderStyle`.  ``None`` uses defaults.
        font: Glyph source for labels.  ``None`` uses the shared
            default font.
        figsize: Figure size in inches ``(width, height)``.
        **style_kwargs: Any :class:`RenderStyle` field name as a
            keyword argument.  Unknown names raise :class:`TypeError`.

    Returns:
        The parameters of the last rendered polygon.

    Raises:
        FontLoadError: If *font* is ``None`` and the default font
            cannot be loaded.
    """
    resolved = _resolve_style(style, **style_kwargs)
    spec = clamp_spec(spec if spec is not None else PolygonSpec())
    if font is None:
        font = default_font()

    zoom = ZoomState()

    fig = plt.figure(figsize=figsize)
    fig.suptitle(_TITLE)
    ax = fig.add_axes((0.05, 0.24, 0.9, 0.68))
    ax.set_axis_off()

    slider_sides = Slider(
        fig.add_axes((0.25, 0.16, 0.55, 0.03)), "n_sides (>=3)",
        SIDE_COUNT_RANGE[0], SIDE_COUNT_RANGE[1],
        valinit=spec.side_count, valstep=1,
    )
    slider_diameter = Slider(
        fig.add_axes((0.25, 0.12, 0.55, 0.03)), "Diameter",
        DIAMETER_RANGE[0], DIAMETER_RANGE[1], valinit=spec.diameter,
    )
    slider_offset = Slider(
        fig.add_axes((0.25, 0.08, 0.55, 0.03)), "Offset (deg)",
        OFFSET_RANGE[0], OFFSET_RANGE[1], valinit=spec.offset_deg,
    )
    button = Button(fig.add_axes((0.42, 0.015, 0.16, 0.05)), "Generate")

    state: dict = {"spec": spec, "image": None, "side": 0}

    def _apply_zoom() -> None:
        if state["side"]:
            xlim, ylim = zoom.visible_limits(state["side"])
            ax.set_xlim(*xlim)
            ax.set_ylim(*ylim)
        ax.set_title(_status_text(zoom.zoom), fontsize=9)
        fig.canvas.draw_idle()

    def _generate(_event: object = None) -> None:
        current = PolygonSpec(
            side_count=int(slider_sides.val),
            diameter=float(slider_diameter.val),
            offset_deg=float(slider_offset.val),
        )
        canvas = render_polygon(vertices_for(current), current, resolved, font)
        extent = (0, canvas.width, canvas.height, 0)
        if state["image"] is None:
            state["image"] = ax.imshow(
                canvas.pixels, interpolation="nearest", extent=extent,
            )
        else:
            state["image"].set_data(canvas.pixels)
            state["image"].set_extent(extent)
        state["spec"] = current
        state["side"] = canvas.width
        logger.info(
            "Generated %d-gon, diameter %.1f, offset %.1f deg (%dx%d)",
            current.side_count, current.diameter, current.offset_deg,
            canvas.width, canvas.height,
        )
        _apply_zoom()

    def on_press(event):
        if event.inaxes != ax or state["image"] is None:
            return
        if _apply_click(zoom, event.button):
            _apply_zoom()

    button.on_clicked(_generate)
    fig.canvas.mpl_connect("button_press_event", on_press)

    _generate()
    plt.show()

    return state["spec"]
