"""Pixel buffer type, canvas sizing and geometry-to-screen mapping."""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np

from ngonplot._constants import CANVAS_MARGIN, CANVAS_MIN_SIDE
from ngonplot.model import RGBA8


@dataclass
class Canvas:
    """An RGBA raster.

    Attributes:
        width: Width in pixels.
        height: Height in pixels.
        pixels: Row-major ``(height, width, 4)`` uint8 array.
    """

    width: int
    height: int
    pixels: np.ndarray

    def __post_init__(self) -> None:
        if self.pixels.shape != (self.height, self.width, 4):
            raise ValueError(
                f"pixels must have shape ({self.height}, {self.width}, 4), "
                f"got {self.pixels.shape}"
            )
        if self.pixels.dtype != np.uint8:
            raise ValueError(f"pixels must be uint8, got {self.pixels.dtype}")

    @classmethod
    def filled(cls, width: int, height: int, colour: RGBA8) -> Canvas:
        """Allocate a canvas with every pixel set to *colour*."""
        pixels = np.empty((height, width, 4), dtype=np.uint8)
        pixels[...] = colour
        return cls(width=width, height=height, pixels=pixels)

    @property
    def centre(self) -> tuple[float, float]:
        """Pixel position of the geometric origin."""
        return self.width / 2.0, self.height / 2.0


def canvas_side(diameter: float) -> int:
    """Side length of the square canvas for a polygon of *diameter*.

    The diameter (truncated to whole pixels, negative treated as zero)
    plus :data:`CANVAS_MARGIN`, but never less than
    :data:`CANVAS_MIN_SIDE`.
    """
    return max(CANVAS_MIN_SIDE, max(int(diameter), 0) + CANVAS_MARGIN)


def round_half_away(value: float) -> int:
    """Round to the nearest int, with ties away from zero."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def to_screen(
    x: float, y: float, centre: tuple[float, float],
) -> tuple[int, int]:
    """Map geometry coordinates (y up) to pixel coordinates (y down)."""
    cx, cy = centre
    return round_half_away(cx + x), round_half_away(cy - y)
