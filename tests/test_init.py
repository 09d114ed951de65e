"""Tests for ngonplot public API."""

import ngonplot


class TestPublicAPI:
    def test_all_names_importable(self):
        for name in ngonplot.__all__:
            assert hasattr(ngonplot, name), f"{name} not importable from ngonplot"

    def test_end_to_end_default_render(self):
        canvas = ngonplot.render(ngonplot.PolygonSpec(side_count=6, diameter=500))
        assert canvas.pixels.shape == (1000, 1000, 4)
        assert canvas.pixels.dtype.name == "uint8"
