"""Tests for the interactive viewer: slider clamping, click zoom and a headless session."""

import matplotlib.pyplot as plt
import pytest
from matplotlib.backend_bases import MouseButton

from ngonplot.model import PolygonSpec, ZoomState
from ngonplot.rendering.interactive import (
    _apply_click,
    _status_text,
    clamp_spec,
    render_interactive,
)


class TestClampSpec:
    def test_within_range_unchanged(self):
        spec = PolygonSpec(side_count=8, diameter=700.0, offset_deg=22.5)
        assert clamp_spec(spec) == spec

    def test_low_values_raised(self):
        spec = clamp_spec(PolygonSpec(side_count=1, diameter=10.0, offset_deg=-5.0))
        assert spec == PolygonSpec(side_count=3, diameter=100.0, offset_deg=0.0)

    def test_high_values_lowered(self):
        spec = clamp_spec(PolygonSpec(side_count=50, diameter=9000.0, offset_deg=90.0))
        assert spec == PolygonSpec(side_count=20, diameter=5000.0, offset_deg=45.0)


class TestApplyClick:
    def test_left_click_zooms_in(self):
        zoom = ZoomState()
        assert _apply_click(zoom, MouseButton.LEFT) is True
        assert zoom.zoom == pytest.approx(1.1)

    def test_right_click_zooms_out(self):
        zoom = ZoomState()
        assert _apply_click(zoom, MouseButton.RIGHT) is True
        assert zoom.zoom == pytest.approx(1 / 1.1)

    def test_plain_int_buttons(self):
        zoom = ZoomState()
        _apply_click(zoom, 1)
        _apply_click(zoom, 1)
        _apply_click(zoom, 3)
        assert zoom.zoom == pytest.approx(1.1)

    def test_middle_click_ignored(self):
        zoom = ZoomState()
        assert _apply_click(zoom, MouseButton.MIDDLE) is False
        assert zoom.zoom == 1.0


class TestStatusText:
    def test_format(self):
        assert _status_text(1.0) == (
            "Current Zoom: 1.00x (Left-click=ZoomIn, Right-click=ZoomOut)"
        )

    def test_two_decimals(self):
        assert _status_text(1.21).startswith("Current Zoom: 1.21x")


class TestRenderInteractive:
    @pytest.fixture(autouse=True)
    def _no_window(self, monkeypatch):
        monkeypatch.setattr(plt, "show", lambda *args, **kwargs: None)
        yield
        plt.close("all")

    def test_returns_generated_spec(self, box_font):
        spec = PolygonSpec(side_count=5, diameter=400.0, offset_deg=10.0)
        result = render_interactive(spec, font=box_font)
        assert result.side_count == 5
        assert result.diameter == pytest.approx(400.0)
        assert result.offset_deg == pytest.approx(10.0)

    def test_initial_spec_clamped(self, box_font):
        result = render_interactive(
            PolygonSpec(side_count=50, diameter=10.0, offset_deg=22.5),
            font=box_font,
        )
        assert result.side_count == 20
        assert result.diameter == pytest.approx(100.0)

    def test_image_displayed(self, box_font):
        render_interactive(PolygonSpec(side_count=3, diameter=300.0), font=box_font)
        fig = plt.gcf()
        images = [im for ax in fig.axes for im in ax.images]
        assert len(images) == 1
        assert images[0].get_array().shape == (1000, 1000, 4)

    def test_unknown_style_kwarg_raises(self, box_font):
        with pytest.raises(TypeError, match="Unknown style keyword"):
            render_interactive(font=box_font, not_a_field=1)
