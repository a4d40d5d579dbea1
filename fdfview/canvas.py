"""Drawing of height maps and free lines onto an in-memory window."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Sequence

from PIL import Image

from fdfview.heightmap import Point

WINDOW_SIZE = 800
CELL_SIZE = 20
MARGIN = 100

POSITIVE_COLOR = 0xFFFF00
NEGATIVE_COLOR = 0x00CC2C
FLAT_COLOR = 0xFF0000
LINE_COLOR = 0xFFFF00


class MouseButton(IntEnum):
    """Mouse buttons the line tool reacts to."""

    LEFT = 1
    RIGHT = 2


class Canvas:
    """A fixed-size window of 0xRRGGBB pixels, black at first.

    Pixels put outside the window are ignored.
    """

    def __init__(self, width: int = WINDOW_SIZE, height: int = WINDOW_SIZE,
                 title: str = "fdf") -> None:
        if width < 1 or height < 1:
            raise ValueError("canvas size must be positive")
        self.width = width
        self.height = height
        self.title = title
        self._image = Image.new("RGB", (width, height))

    def _inside(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def put_pixel(self, x: int, y: int, color: int) -> None:
        """Set the pixel at ``(x, y)``; the origin is the top-left corner."""
        x, y = int(x), int(y)
        if self._inside(x, y):
            rgb = ((color >> 16) & 0xFF, (color >> 8) & 0xFF, color & 0xFF)
            self._image.putpixel((x, y), rgb)

    def pixel(self, x: int, y: int) -> int:
        """Return the 0xRRGGBB value at ``(x, y)``."""
        if not self._inside(x, y):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} canvas")
        r, g, b = self._image.getpixel((x, y))
        return (r << 16) | (g << 8) | b

    def to_image(self) -> Image.Image:
        """Return a copy of the canvas as an RGB image."""
        return self._image.copy()


def height_color(num: int) -> int:
    """Colour of a segment: yellow above zero, green below, red at zero."""
    if num > 0:
        return POSITIVE_COLOR
    if num < 0:
        return NEGATIVE_COLOR
    return FLAT_COLOR


def _screen(coordinate: int) -> int:
    return coordinate * CELL_SIZE + MARGIN


def draw_map(canvas: Canvas, points: Sequence[Point]) -> None:
    """Draw the grid of ``points`` in reading order.

    Each point draws the horizontal segment from the previous point of its
    row and the vertical segment from the point above it, in the colour of
    its own height.
    """
    if not points:
        return
    x = _screen(points[0].x)
    y = _screen(points[0].y)
    for point, following in zip(points, [*points[1:], None]):
        row_start = y
        color = height_color(point.num)
        px, py = _screen(point.x), _screen(point.y)
        while x < px:
            canvas.put_pixel(x, py, color)
            x += 1
        while y < py:
            canvas.put_pixel(px, y, color)
            y += 1
        y = row_start
        x = px
        if following is not None and following.y > point.y:
            y = py


@dataclass
class LineTool:
    """Draws a straight line between a left click and a following right click."""

    canvas: Canvas
    color: int = LINE_COLOR
    start: tuple[int, int] = (0, 0)
    end: tuple[int, int] = field(default=(0, 0))

    def click(self, button: int, x: int, y: int) -> list[tuple[int, int]]:
        """Handle a mouse click and return the pixels it drew.

        A left click sets the start point. A right click sets the end point
        and draws one pixel per column right of the start up to the end;
        the slope uses the absolute vertical distance, so lines always run
        downwards. Nothing is drawn when the end is not right of the start.
        """
        if button == MouseButton.LEFT:
            self.start = (x, y)
            return []
        if button != MouseButton.RIGHT:
            return []
        self.end = (x, y)
        x1, y1 = self.start
        if x <= x1:
            return []
        slope = abs(y - y1) / abs(x - x1)
        drawn: list[tuple[int, int]] = []
        for column in range(x1 + 1, x + 1):
            row = int(slope * (column - x1) + y1 + 0.5)
            self.canvas.put_pixel(column, row, self.color)
            drawn.append((column, row))
        return drawn