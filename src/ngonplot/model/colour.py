from __future__ import annotations

#: A colour specification accepted throughout ngonplot.
#:
#: Can be any of:
#:
#: - A CSS colour name or hex string (e.g. ``"red"``, ``"#ff0000"``,
#:   ``"#ff000080"``).
#: - A single float for grey (``0.0`` = black, ``1.0`` = white).
#: - A tuple or list of three or four floats in ``[0, 1]``
#:   (e.g. ``(1.0, 0.0, 0.0)``).
#: - A tuple or list of three or four ints in ``[0, 255]``
#:   (e.g. ``(255, 0, 0, 255)``).
#:
#: Sequences made up entirely of ints are read as 8-bit channels; any
#: float in the sequence makes it a normalised colour.  Missing alpha
#: is fully opaque.  See :func:`to_rgba8` for conversion.
Colour = (
    str
    | float
    | tuple[float, float, float]
    | tuple[float, float, float, float]
    | tuple[int, int, int]
    | tuple[int, int, int, int]
    | list[float]
    | list[int]
)

RGBA8 = tuple[int, int, int, int]


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _from_bytes(channels: list[int]) -> RGBA8:
    for name, val in zip("rgba", channels):
        if not 0 <= val <= 255:
            raise ValueError(
                f"8-bit component {name} must be in [0, 255], got {val}"
            )
    if len(channels) == 3:
        channels = channels + [255]
    r, g, b, a = channels
    return (r, g, b, a)


def _from_unit(channels: list[float]) -> RGBA8:
    for name, val in zip("rgba", channels):
        if not 0.0 <= val <= 1.0:
            raise ValueError(
                f"RGB component {name} must be in [0, 1], got {val}"
            )
    if len(channels) == 3:
        channels = channels + [1.0]
    r, g, b, a = (int(round(c * 255)) for c in channels)
    return (r, g, b, a)


def to_rgba8(colour: Colour) -> RGBA8:
    """Convert a colour specification to an 8-bit ``(r, g, b, a)`` tuple.

    Accepts CSS colour names (e.g. ``"red"``), hex strings
    (e.g. ``"#FF0000"``), grey floats (e.g. ``0.7``), normalised
    RGB/RGBA float sequences, or 8-bit RGB/RGBA int sequences.

    Args:
        colour: The colour to convert.

    Returns:
        A tuple of four ints in [0, 255].

    Raises:
        ValueError: If the colour cannot be interpreted.
    """
    if isinstance(colour, (int, float)) and not isinstance(colour, bool):
        f = float(colour)
        if not 0.0 <= f <= 1.0:
            raise ValueError(f"Grey value must be in [0, 1], got {f}")
        return _from_unit([f, f, f])

    if isinstance(colour, (tuple, list)):
        if len(colour) not in (3, 4):
            raise ValueError(
                f"Colour sequence must have 3 or 4 elements, got {len(colour)}"
            )
        if all(_is_int(c) for c in colour):
            return _from_bytes([int(c) for c in colour])
        return _from_unit([float(c) for c in colour])

    if isinstance(colour, str):
        from matplotlib.colors import to_rgba

        try:
            return _from_unit(list(to_rgba(colour)))
        except ValueError:
            raise ValueError(f"Unrecognised colour name: {colour!r}")

    raise ValueError(f"Cannot interpret colour: {colour!r}")
