"""Demo script: render a few regular polygons to PNG files."""

from pathlib import Path

from matplotlib.image import imsave

from ngonplot import PolygonSpec, render

OUTPUT = Path(__file__).resolve().parent


def main():
    specs = {
        "octagon": PolygonSpec(side_count=8, diameter=700, offset_deg=22.5),
        "triangle": PolygonSpec(side_count=3, diameter=600, offset_deg=30.0),
        "large_hexagon": PolygonSpec(side_count=6, diameter=1500, offset_deg=0.0),
    }
    for name, spec in specs.items():
        canvas = render(spec, marker_radius=4, edge_colour="navy")
        path = OUTPUT / f"{name}.png"
        imsave(path, canvas.pixels)
        print(f"Rendered {spec.side_count}-gon ({canvas.width}x{canvas.height}) to {path}")


if __name__ == "__main__":
    main()
