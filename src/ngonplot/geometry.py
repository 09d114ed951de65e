"""Vertex generation for regular polygons inscribed in a circle."""

from __future__ import annotations

import numpy as np

from ngonplot.model import PolygonSpec, Vertex


def _normalise_degrees(deg: np.ndarray) -> np.ndarray:
    """Wrap angles in degrees into ``[0, 360)``."""
    deg = np.fmod(deg, 360.0)
    deg = np.where(deg < 0.0, deg + 360.0, deg)
    # A tiny negative remainder plus 360 can round to exactly 360.
    deg = np.where(deg >= 360.0, 0.0, deg)
    # Adding 0.0 turns -0.0 into 0.0.
    return deg + 0.0


def generate_polygon_vertices(
    side_count: int,
    diameter: float,
    offset_deg: float = 0.0,
) -> list[Vertex]:
    """Compute the vertices of a regular polygon.

    Vertex *i* lies at angle ``360 * i / side_count + offset_deg`` on a
    circle of radius ``diameter / 2`` centred at the origin, so vertex
    *i* connects to vertex ``(i + 1) % side_count``.  The function is
    total: a side count below 3 yields that many points (none for
    ``side_count <= 0``) and a zero diameter yields coincident points
    at the origin.

    Args:
        side_count: Number of vertices to produce.
        diameter: Diameter of the circumscribed circle.
        offset_deg: Rotation applied to every vertex, in degrees.

    Returns:
        The vertices in drawing order, with angles in ``[0, 360)``.
    """
    n = max(int(side_count), 0)
    if n == 0:
        return []
    radius = diameter / 2.0
    theta = 2.0 * np.pi * np.arange(n) / n + np.radians(offset_deg)
    xs = radius * np.cos(theta)
    ys = radius * np.sin(theta)
    angles = _normalise_degrees(np.degrees(theta))
    return [
        Vertex(x=float(x), y=float(y), angle_deg=float(a))
        for x, y, a in zip(xs, ys, angles)
    ]


def vertices_for(spec: PolygonSpec) -> list[Vertex]:
    """Shorthand for :func:`generate_polygon_vertices` on a spec."""
    return generate_polygon_vertices(
        spec.side_count, spec.diameter, spec.offset_deg,
    )
