"""Primitive rasterizers: circle outlines, line segments and discs.

Every primitive writes opaque pixels and drops each pixel that falls
outside the canvas on its own, so shapes that straddle the border are
drawn partially.
"""

from __future__ import annotations

import math

import numpy as np

from ngonplot.model import RGBA8
from ngonplot.rendering.canvas import Canvas


def _plot(
    canvas: Canvas, xs: np.ndarray, ys: np.ndarray, colour: RGBA8,
) -> None:
    """Set the pixels at ``(xs[i], ys[i])`` that lie inside the canvas."""
    xs = np.asarray(xs, dtype=np.int64)
    ys = np.asarray(ys, dtype=np.int64)
    keep = (xs >= 0) & (xs < canvas.width) & (ys >= 0) & (ys < canvas.height)
    canvas.pixels[ys[keep], xs[keep]] = colour


def _midpoint_octant(radius: int) -> tuple[np.ndarray, np.ndarray]:
    """Offsets ``(x, y)`` of one octant of a midpoint circle, ``x <= y``."""
    xs: list[int] = []
    ys: list[int] = []
    x, y = 0, radius
    p = 1 - radius
    while x <= y:
        xs.append(x)
        ys.append(y)
        x += 1
        if p < 0:
            p += 2 * x + 1
        else:
            y -= 1
            p += 2 * (x - y) + 1
    return np.array(xs, dtype=np.int64), np.array(ys, dtype=np.int64)


def draw_hollow_circle(
    canvas: Canvas,
    centre: tuple[int, int],
    radius: int,
    colour: RGBA8,
) -> None:
    """Draw a one-pixel circle outline with the midpoint algorithm.

    A negative radius draws nothing; a zero radius draws the centre
    pixel.
    """
    if radius < 0:
        return
    x0, y0 = centre
    ox, oy = _midpoint_octant(radius)
    # Mirror the octant into all eight.
    xs = np.concatenate([ox, oy, -oy, -ox, -ox, -oy, oy, ox])
    ys = np.concatenate([oy, ox, ox, oy, -oy, -ox, -ox, -oy])
    _plot(canvas, x0 + xs, y0 + ys, colour)


def _bresenham(
    start: tuple[float, float], end: tuple[float, float],
) -> tuple[list[int], list[int]]:
    """Integer points of a line between two float endpoints, inclusive."""
    x0, y0 = start
    x1, y1 = end
    steep = abs(y1 - y0) > abs(x1 - x0)
    if steep:
        x0, y0 = y0, x0
        x1, y1 = y1, x1
    if x0 > x1:
        x0, x1 = x1, x0
        y0, y1 = y1, y0

    dx = x1 - x0
    dy = abs(y1 - y0)
    y_step = 1 if y0 < y1 else -1
    error = dx / 2.0
    y = int(y0)

    xs: list[int] = []
    ys: list[int] = []
    for x in range(int(x0), int(x1) + 1):
        if steep:
            xs.append(y)
            ys.append(x)
        else:
            xs.append(x)
            ys.append(y)
        error -= dy
        if error < 0.0:
            y += y_step
            error += dx
    return xs, ys


def draw_line_segment(
    canvas: Canvas,
    start: tuple[float, float],
    end: tuple[float, float],
    colour: RGBA8,
) -> None:
    """Draw a one-pixel straight line from *start* to *end*."""
    xs, ys = _bresenham(start, end)
    _plot(canvas, np.array(xs), np.array(ys), colour)


def fill_circle(
    canvas: Canvas,
    centre: tuple[int, int],
    radius: int,
    colour: RGBA8,
) -> None:
    """Fill every pixel within *radius* of *centre* (``dx² + dy² <= r²``)."""
    if radius < 0:
        return
    r = int(math.floor(radius))
    d = np.arange(-r, r + 1)
    dx, dy = np.meshgrid(d, d)
    inside = dx * dx + dy * dy <= r * r
    x0, y0 = centre
    _plot(canvas, x0 + dx[inside], y0 + dy[inside], colour)
