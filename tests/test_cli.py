"""Tests for the command-line entry point."""

import json

import matplotlib.pyplot as plt
import pytest
from matplotlib.image import imread

from ngonplot import cli
from ngonplot.model import PolygonSpec


class TestParseArgs:
    def test_defaults(self):
        args = cli.parse_args([])
        assert args.sides is None
        assert args.output is None
        assert args.verbose is False

    def test_resolve_defaults_match_spec_defaults(self):
        spec, _ = cli._resolve_inputs(cli.parse_args([]))
        assert spec == PolygonSpec()

    def test_command_line_overrides_config(self, tmp_path):
        config = tmp_path / "s.json"
        config.write_text(json.dumps({"polygon": {"side_count": 6, "diameter": 900}}))
        spec, _ = cli._resolve_inputs(
            cli.parse_args(["--config", str(config), "--sides", "9"])
        )
        assert spec == PolygonSpec(side_count=9, diameter=900.0)


class TestMain:
    def test_writes_png(self, tmp_path):
        out = tmp_path / "poly.png"
        assert cli.main(["--sides", "5", "--diameter", "300", "-o", str(out)]) == 0
        image = imread(out)
        assert image.shape == (1000, 1000, 4)

    def test_canvas_grows_with_diameter(self, tmp_path):
        out = tmp_path / "big.png"
        assert cli.main(["--diameter", "1100", "-o", str(out)]) == 0
        assert imread(out).shape[:2] == (1300, 1300)

    def test_config_file(self, tmp_path):
        config = tmp_path / "s.json"
        config.write_text(json.dumps({
            "polygon": {"diameter": 900},
            "render_style": {"background_colour": "white"},
        }))
        out = tmp_path / "cfg.png"
        assert cli.main(["--config", str(config), "-o", str(out)]) == 0
        image = imread(out)
        assert image.shape[:2] == (1100, 1100)
        assert image[0, 0, :3].tolist() == pytest.approx([1.0, 1.0, 1.0])

    def test_missing_font_exits_one(self, tmp_path):
        out = tmp_path / "never.png"
        code = cli.main(["--font", str(tmp_path / "missing.ttf"), "-o", str(out)])
        assert code == 1
        assert not out.exists()

    def test_bad_config_exits_two(self, tmp_path):
        config = tmp_path / "bad.json"
        config.write_text(json.dumps({"nonsense": 1}))
        assert cli.main(["--config", str(config), "-o", str(tmp_path / "x.png")]) == 2

    def test_viewer_when_no_output(self, monkeypatch):
        monkeypatch.setattr(plt, "show", lambda *args, **kwargs: None)
        try:
            assert cli.main(["--sides", "4"]) == 0
        finally:
            plt.close("all")
