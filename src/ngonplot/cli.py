"""Command-line entry point: render to PNG or open the viewer."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from matplotlib.image import imsave

from ngonplot.config import load_settings
from ngonplot.model import PolygonSpec, RenderStyle
from ngonplot.rendering.compositor import render
from ngonplot.rendering.interactive import render_interactive
from ngonplot.rendering.text import FontLoadError, LabelFont

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        prog="ngonplot",
        description="Plot a regular polygon inscribed in a circle, with labelled vertices.",
    )
    p.add_argument("--sides", type=int, default=None, help="number of sides (default: 8)")
    p.add_argument("--diameter", type=float, default=None, help="circumscribed diameter in pixels (default: 700)")
    p.add_argument("--offset", type=float, default=None, help="rotation offset in degrees (default: 22.5)")
    p.add_argument("--config", type=Path, default=None, help="JSON settings file with 'polygon' and/or 'render_style' sections")
    p.add_argument("--font", type=Path, default=None, help="TrueType font for vertex labels (default: DejaVu Sans)")
    p.add_argument("--output", "-o", type=Path, default=None, help="write the raster to this PNG file instead of opening the viewer")
    p.add_argument("--verbose", "-v", action="store_true", help="enable debug logging")
    return p.parse_args(argv)


def _resolve_inputs(args: argparse.Namespace) -> tuple[PolygonSpec, RenderStyle]:
    """Merge the settings file (if any) with command-line overrides."""
    spec = PolygonSpec()
    style = RenderStyle()
    if args.config is not None:
        settings = load_settings(args.config)
        if settings.polygon is not None:
            spec = settings.polygon
        if settings.render_style is not None:
            style = settings.render_style
    spec = PolygonSpec(
        side_count=args.sides if args.sides is not None else spec.side_count,
        diameter=args.diameter if args.diameter is not None else spec.diameter,
        offset_deg=args.offset if args.offset is not None else spec.offset_deg,
    )
    return spec, style


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        spec, style = _resolve_inputs(args)
    except (OSError, ValueError) as exc:
        logger.error("Invalid settings: %s", exc)
        return 2

    try:
        font = LabelFont(args.font) if args.font is not None else LabelFont()
    except FontLoadError as exc:
        logger.error("%s", exc)
        return 1

    if args.output is not None:
        canvas = render(spec, style=style, font=font)
        imsave(args.output, canvas.pixels)
        logger.info("Wrote %dx%d image to %s", canvas.width, canvas.height, args.output)
        return 0

    final = render_interactive(spec, style=style, font=font)
    logger.info(
        "Last polygon: %d sides, diameter %.1f, offset %.1f deg",
        final.side_count, final.diameter, final.offset_deg,
    )
    return 0
