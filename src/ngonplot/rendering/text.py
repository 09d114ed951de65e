"""Glyph layout through matplotlib's FreeType wrapper, and text compositing."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol, Sequence

import numpy as np
from matplotlib import font_manager, ft2font

from ngonplot._constants import DEFAULT_FONT_FAMILY
from ngonplot.model import RGBA8
from ngonplot.rendering.canvas import Canvas

logger = logging.getLogger(__name__)


class FontLoadError(RuntimeError):
    """The label font could not be found or parsed."""


@dataclass(frozen=True)
class PositionedGlyph:
    """A rasterized glyph placed relative to the text origin.

    The text origin is the top of the ascent line at the start of the
    string; *left* and *top* are pixel offsets (y down) of the
    coverage bitmap's first column and row from that origin.

    Attributes:
        left: Horizontal offset of the bitmap in pixels.
        top: Vertical offset of the bitmap in pixels.
        coverage: ``(h, w)`` float array of glyph coverage in
            ``[0, 1]``.
    """

    left: int
    top: int
    coverage: np.ndarray


class GlyphSource(Protocol):
    """Anything that can lay out a string as positioned glyphs."""

    def layout(self, text: str, scale: float) -> Sequence[PositionedGlyph]:
        ...


class LabelFont:
    """A TrueType font used to rasterize vertex labels.

    *scale* follows the pixel-height convention: the distance from the
    font's ascender to its descender is *scale* pixels.  Glyphs are
    placed along a single baseline using each glyph's linear advance,
    without kerning.

    Args:
        path: Font file to load.  ``None`` asks matplotlib's font
            manager for *family*.
        family: Font family to look up when *path* is ``None``.

    Raises:
        FontLoadError: If the font file is missing or not a font.
    """

    def __init__(
        self,
        path: str | Path | None = None,
        *,
        family: str = DEFAULT_FONT_FAMILY,
    ) -> None:
        if path is None:
            try:
                path = font_manager.findfont(
                    font_manager.FontProperties(family=family),
                    fallback_to_default=False,
                )
            except ValueError as exc:
                raise FontLoadError(
                    f"no font found for family {family!r}"
                ) from exc
        self.path = Path(path)
        try:
            self._font = ft2font.FT2Font(str(self.path))
        except (OSError, RuntimeError, ValueError) as exc:
            raise FontLoadError(f"cannot load font {str(self.path)!r}: {exc}") from exc
        self._cache: dict[tuple[str, float], tuple[float, PositionedGlyph | None]] = {}
        logger.debug("Loaded label font %s", self.path)

    def _line_metrics(self, scale: float) -> tuple[float, float]:
        """Return ``(em_size, ascent)`` in pixels for a pixel-height *scale*."""
        font = self._font
        height_units = font.ascender - font.descender
        if height_units <= 0:
            height_units = font.units_per_EM
        em = scale * font.units_per_EM / height_units
        ascent = scale * font.ascender / height_units
        return em, ascent

    def _glyph(
        self, char: str, scale: float, em: float, ascent: float,
    ) -> tuple[float, PositionedGlyph | None]:
        """Advance width and bitmap of *char* positioned at pen x = 0."""
        key = (char, scale)
        if key in self._cache:
            return self._cache[key]

        font = self._font
        font.set_size(em, 72)
        if font.get_char_index(ord(char)) == 0:
            logger.warning(
                "Character %r (U+%04X) not found in font '%s'",
                char, ord(char), self.path,
            )
        advance = font.load_char(ord(char)).linearHoriAdvance / 65536

        glyph: PositionedGlyph | None = None
        if not char.isspace():
            font.set_text(char, 0.0)
            font.draw_glyphs_to_bitmap(antialiased=True)
            image = np.asarray(font.get_image(), dtype=float) / 255.0
            if image.size and image.any():
                descent = font.get_descent() / 64.0
                x_off = font.get_bitmap_offset()[0] / 64.0
                baseline = int(round(ascent))
                glyph = PositionedGlyph(
                    left=int(round(x_off)),
                    top=baseline + int(round(descent)) - image.shape[0] + 1,
                    coverage=image,
                )

        self._cache[key] = (advance, glyph)
        return advance, glyph

    def layout(self, text: str, scale: float) -> list[PositionedGlyph]:
        """Lay out *text* as a list of positioned glyphs.

        Whitespace advances the pen but produces no glyph.
        """
        em, ascent = self._line_metrics(scale)
        glyphs: list[PositionedGlyph] = []
        pen = 0.0
        for char in text:
            advance, glyph = self._glyph(char, scale, em, ascent)
            if glyph is not None:
                glyphs.append(PositionedGlyph(
                    left=glyph.left + int(round(pen)),
                    top=glyph.top,
                    coverage=glyph.coverage,
                ))
            pen += advance
        return glyphs


def composite_coverage(
    canvas: Canvas,
    coverage: np.ndarray,
    x: int,
    y: int,
    colour: RGBA8,
) -> None:
    """Blend *colour* onto *canvas* using *coverage* as per-pixel alpha.

    The bitmap's top-left pixel lands at ``(x, y)``.  Each channel
    becomes ``(src * a + dst * (255 - a)) // 255`` with
    ``a = round(coverage * 255)``, and the destination alpha is set to
    255.  Bitmap pixels outside the canvas are dropped individually.
    """
    h, w = coverage.shape
    x0, y0 = max(x, 0), max(y, 0)
    x1, y1 = min(x + w, canvas.width), min(y + h, canvas.height)
    if x0 >= x1 or y0 >= y1:
        return

    cov = coverage[y0 - y:y1 - y, x0 - x:x1 - x]
    alpha = np.rint(np.clip(cov, 0.0, 1.0) * 255).astype(np.int32)[..., None]
    region = canvas.pixels[y0:y1, x0:x1]
    src = np.asarray(colour[:3], dtype=np.int32)
    dst = region[..., :3].astype(np.int32)
    region[..., :3] = (src * alpha + dst * (255 - alpha)) // 255
    region[..., 3] = 255


def draw_text(
    canvas: Canvas,
    text: str,
    x: int,
    y: int,
    scale: float,
    font: GlyphSource,
    colour: RGBA8,
) -> None:
    """Draw *text* with its origin (top of the ascent line) at ``(x, y)``."""
    for glyph in font.layout(text, scale):
        composite_coverage(canvas, glyph.coverage, x + glyph.left, y + glyph.top, colour)
