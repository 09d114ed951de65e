"""Tests for settings file loading."""

import json

import pytest

from ngonplot.config import Settings, load_settings
from ngonplot.model import PolygonSpec, RenderStyle


def _write(tmp_path, data):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps(data))
    return path


class TestLoadSettings:
    def test_both_sections(self, tmp_path):
        path = _write(tmp_path, {
            "polygon": {"side_count": 6, "diameter": 900},
            "render_style": {"marker_colour": [0, 128, 0], "label_scale": 24},
        })
        settings = load_settings(path)
        assert settings.polygon == PolygonSpec(side_count=6, diameter=900.0)
        assert settings.render_style == RenderStyle(
            marker_colour=(0, 128, 0), label_scale=24,
        )

    def test_sections_optional(self, tmp_path):
        settings = load_settings(_write(tmp_path, {"polygon": {"side_count": 3}}))
        assert settings.polygon == PolygonSpec(side_count=3)
        assert settings.render_style is None

    def test_empty_object(self, tmp_path):
        assert load_settings(_write(tmp_path, {})) == Settings()

    def test_accepts_str_path(self, tmp_path):
        path = _write(tmp_path, {"render_style": {}})
        assert load_settings(str(path)).render_style == RenderStyle()

    def test_unknown_top_level_key_raises(self, tmp_path):
        with pytest.raises(ValueError, match="unknown top-level keys"):
            load_settings(_write(tmp_path, {"zoom": 2.0}))

    def test_unknown_field_raises(self, tmp_path):
        with pytest.raises(ValueError, match="unknown RenderStyle keys"):
            load_settings(_write(tmp_path, {"render_style": {"bg": "red"}}))

    def test_invalid_colour_raises(self, tmp_path):
        with pytest.raises(ValueError, match="Unrecognised colour"):
            load_settings(_write(tmp_path, {"render_style": {"edge_colour": "nope"}}))

    def test_non_object_raises(self, tmp_path):
        with pytest.raises(ValueError, match="JSON object"):
            load_settings(_write(tmp_path, [1, 2, 3]))

    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_settings(tmp_path / "missing.json")
