"""Shared test fixtures for ngonplot."""

import matplotlib

matplotlib.use("Agg")

import numpy as np
import pytest

from ngonplot.rendering.text import LabelFont, PositionedGlyph


class BoxFont:
    """Deterministic glyph source: every non-space character is a solid box."""

    advance = 8
    width = 6
    height = 12

    def layout(self, text, scale):
        glyphs = []
        for i, char in enumerate(text):
            if char.isspace():
                continue
            glyphs.append(PositionedGlyph(
                left=i * self.advance,
                top=0,
                coverage=np.ones((self.height, self.width)),
            ))
        return glyphs


@pytest.fixture
def box_font():
    """A glyph source that needs no font file."""
    return BoxFont()


@pytest.fixture(scope="session")
def label_font():
    """The default label font (DejaVu Sans, bundled with matplotlib)."""
    return LabelFont()
