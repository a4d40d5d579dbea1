"""Command line: render a height map to an image file."""

from __future__ import annotations

import argparse
from pathlib import Path

from fdfview.canvas import Canvas, LineTool, MouseButton, draw_map
from fdfview.heightmap import InvalidMapError, load_map

USAGE = "Usage: fdfview input_file"


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="fdfview", description="Render a height map.")
    parser.add_argument("inputs", nargs="*", metavar="input_file")
    parser.add_argument("-o", "--output", help="image file to write (default: input with .png)")
    parser.add_argument(
        "--line", nargs=4, type=int, action="append", default=[],
        metavar=("X1", "Y1", "X2", "Y2"),
        help="draw a line as a left click at X1 Y1 then a right click at X2 Y2",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Load the map, draw it and save the picture; return the exit status."""
    args = _parser().parse_args(argv)
    if len(args.inputs) != 1:
        print(USAGE)
        return 0
    source = Path(args.inputs[0])
    try:
        points = load_map(source)
    except InvalidMapError:
        print("Invalid File")
        return 1
    except OSError:
        print("error")
        return 1
    print("Valid File")

    canvas = Canvas(title=source.name)
    draw_map(canvas, points)
    tool = LineTool(canvas)
    for x1, y1, x2, y2 in args.line:
        tool.click(MouseButton.LEFT, x1, y1)
        tool.click(MouseButton.RIGHT, x2, y2)

    output = Path(args.output) if args.output else source.with_suffix(".png")
    try:
        canvas.to_image().save(output)
    except (OSError, ValueError):
        print("error")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())