from __future__ import annotations

from dataclasses import dataclass

from ngonplot.model._util import _check_keys
from ngonplot.model.colour import Colour, to_rgba8

_COLOUR_FIELDS = (
    "background_colour",
    "circle_colour",
    "edge_colour",
    "marker_colour",
    "label_colour",
)


@dataclass
class RenderStyle:
    """Visual style settings for rendering a polygon raster.

    Groups all appearance parameters that control how the polygon is
    drawn, independent of the polygon itself.  A default
    ``RenderStyle()`` gives the standard look: light grey background,
    blue circumscribed circle, black edges and labels, red vertex
    markers::

        style = RenderStyle(marker_colour="green", label_scale=24)
        canvas = render(PolygonSpec(side_count=6), style=style)

    Attributes:
        background_colour: Opaque fill for the whole canvas.
        circle_colour: Colour of the circumscribed circle outline.
        edge_colour: Colour of the polygon edges.
        marker_colour: Fill colour of the vertex markers.
        marker_radius: Radius of the vertex markers in pixels.
            ``0`` draws a single pixel.
        label_colour: Colour of the vertex annotation text.
        label_scale: Pixel height of the label font (em size).
        label_offset: ``(dx, dy)`` pixel offset of each label's
            top-left corner from its marker centre, in screen
            coordinates (positive *dy* is downwards).

    Raises:
        ValueError: If *marker_radius* is negative, *label_scale* is
            not positive, or any colour cannot be interpreted.
    """

    background_colour: Colour = (220, 220, 220, 255)
    circle_colour: Colour = (0, 0, 255, 255)
    edge_colour: Colour = (0, 0, 0, 255)
    marker_colour: Colour = (255, 0, 0, 255)
    marker_radius: int = 3
    label_colour: Colour = (0, 0, 0, 255)
    label_scale: float = 18.0
    label_offset: tuple[int, int] = (6, -12)

    def __post_init__(self) -> None:
        if self.marker_radius < 0:
            raise ValueError(
                f"marker_radius must be non-negative, got {self.marker_radius}"
            )
        if self.label_scale <= 0:
            raise ValueError(
                f"label_scale must be positive, got {self.label_scale}"
            )
        if len(self.label_offset) != 2:
            raise ValueError(
                f"label_offset must have 2 elements, got {len(self.label_offset)}"
            )
        for name in _COLOUR_FIELDS:
            # Raises ValueError for colours that cannot be parsed.
            to_rgba8(getattr(self, name))

    @classmethod
    def from_dict(cls, d: dict) -> RenderStyle:
        """Deserialise from a dictionary.

        Missing fields use their defaults.  Colour and offset lists
        are converted to tuples for type consistency.

        Raises:
            ValueError: If *d* contains unknown keys or invalid values.
        """
        _check_keys(cls, d)
        kwargs: dict = {}
        for key, val in d.items():
            if isinstance(val, list):
                val = tuple(val)
            kwargs[key] = val
        return cls(**kwargs)
