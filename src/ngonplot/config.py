"""Settings files: polygon parameters and render style from JSON."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path

from ngonplot.model import PolygonSpec, RenderStyle

logger = logging.getLogger(__name__)

_VALID_SECTIONS = frozenset({"polygon", "render_style"})


@dataclass
class Settings:
    """Settings loaded from a file.

    Both sections are optional.  A file that only contains
    ``"render_style"`` gives ``polygon=None``.

    Attributes:
        polygon: Polygon parameters.
        render_style: Colours, marker and label settings.
    """

    polygon: PolygonSpec | None = None
    render_style: RenderStyle | None = None


def load_settings(path: str | Path) -> Settings:
    """Load settings from a JSON file.

    Example file::

        {
          "polygon": {"side_count": 6, "diameter": 900},
          "render_style": {"marker_colour": "green", "label_scale": 24}
        }

    Args:
        path: Source file path.

    Returns:
        A :class:`Settings` with the parsed sections.

    Raises:
        ValueError: If the file contains unknown top-level keys, or a
            section contains unknown fields or invalid values.
    """
    data = json.loads(Path(path).read_text())
    if not isinstance(data, dict):
        raise ValueError(
            f"settings file must contain a JSON object, got {type(data).__name__}"
        )

    unknown = set(data) - _VALID_SECTIONS
    if unknown:
        raise ValueError(
            f"unknown top-level keys in settings file: {sorted(unknown)}"
        )

    polygon = None
    if "polygon" in data:
        polygon = PolygonSpec.from_dict(data["polygon"])

    render_style = None
    if "render_style" in data:
        render_style = RenderStyle.from_dict(data["render_style"])

    logger.debug("Loaded settings from %s: sections %s", path, sorted(data))
    return Settings(polygon=polygon, render_style=render_style)
