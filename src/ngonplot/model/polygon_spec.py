from __future__ import annotations

from dataclasses import dataclass

from ngonplot.model._util import _check_keys


@dataclass(frozen=True)
class PolygonSpec:
    """Parameters of a regular polygon inscribed in a circle.

    No range checks are applied here: a side count below 3 or a zero
    diameter simply produce degenerate output.  Limiting the inputs to
    sensible values is left to the caller (see
    :func:`ngonplot.rendering.interactive.clamp_spec`).

    Attributes:
        side_count: Number of vertices (and edges).
        diameter: Diameter of the circumscribed circle, in pixels.
        offset_deg: Rotation applied to every vertex, in degrees
            counter-clockwise from the positive x axis.
    """

    side_count: int = 8
    diameter: float = 700.0
    offset_deg: float = 22.5

    @property
    def radius(self) -> float:
        """Radius of the circumscribed circle."""
        return self.diameter / 2.0

    @classmethod
    def from_dict(cls, d: dict) -> PolygonSpec:
        """Deserialise from a dictionary.

        Missing fields use their defaults.

        Raises:
            ValueError: If *d* contains unknown keys.
        """
        _check_keys(cls, d)
        kwargs: dict = {}
        if "side_count" in d:
            kwargs["side_count"] = int(d["side_count"])
        if "diameter" in d:
            kwargs["diameter"] = float(d["diameter"])
        if "offset_deg" in d:
            kwargs["offset_deg"] = float(d["offset_deg"])
        return cls(**kwargs)


@dataclass(frozen=True)
class Vertex:
    """A polygon vertex in geometry coordinates (y up, origin at centre).

    Attributes:
        x: Horizontal position.
        y: Vertical position.
        angle_deg: Angular position in degrees, in ``[0, 360)``.
    """

    x: float
    y: float
    angle_deg: float

    def label(self) -> str:
        """Annotation text, e.g. ``"(350, 0) / 0.0°"``."""
        return f"({self.x:.0f}, {self.y:.0f}) / {self.angle_deg:.1f}°"
