"""Reading of XPM pixmaps, either as a list of row strings or as C-style source text."""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator

from fdfview.colors import color_by_name
from fdfview.cstring import atoi

TRANSPARENT = 0xFF000000
"""Pixel value stored for the colour ``None``."""

_NAME_BUFFER = 64
_WORD_SPLIT = re.compile(r"[ \t]+")
_HEX_PATTERN = re.compile(r"[ \t\n\v\f\r]*([+-]?)(0[xX](?=[0-9a-fA-F]))?([0-9a-fA-F]*)")


class XpmError(ValueError):
    """Raised when XPM data cannot be parsed."""


@dataclass(frozen=True)
class XpmImage:
    """A decoded pixmap: pixels are 32-bit values in row-major order."""

    width: int
    height: int
    pixels: tuple[int, ...]

    def pixel(self, x: int, y: int) -> int:
        """Return the pixel value at column ``x`` of row ``y``."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} image")
        return self.pixels[y * self.width + x]

    def rows(self) -> Iterator[tuple[int, ...]]:
        """Yield the image one row at a time, top to bottom."""
        for start in range(0, len(self.pixels), self.width):
            yield self.pixels[start:start + self.width]


def split_words(text: str) -> list[str]:
    """Split ``text`` on runs of spaces and tabs, dropping empty words."""
    return [word for word in _WORD_SPLIT.split(text) if word]


def find_unquoted(text: str, needle: str) -> int:
    """Return the first position of ``needle`` outside double quotes, or -1.

    Each double quote met while scanning toggles the quoted state before
    the position is tested.
    """
    if not needle:
        raise ValueError("needle must not be empty")
    quoted = False
    last = len(text) - len(needle)
    for pos in range(last + 1):
        if text[pos] == '"':
            quoted = not quoted
        if not quoted and text.startswith(needle, pos):
            return pos
    return -1


def _blank(text: str, start: int, count: int) -> str:
    end = min(len(text), start + count)
    return text[:start] + " " * (end - start) + text[end:]


def _span_after(text: str, needle: str, start: int) -> int:
    found = text.find(needle, start)
    return -1 if found == -1 else found - start


def strip_comments(text: str) -> str:
    """Replace ``/* */`` and ``//`` comments outside quotes with spaces.

    The result has the same length as ``text``. A ``//`` comment is blanked
    up to and including its newline.
    """
    while (begin := find_unquoted(text, "/*")) != -1:
        end = _span_after(text, "*/", begin + 2)
        text = _blank(text, begin, end + 4)
    while (begin := find_unquoted(text, "//")) != -1:
        end = _span_after(text, "\n", begin + 2)
        text = _blank(text, begin, end + 3)
    return text


def _parse_hex(text: str) -> int:
    match = _HEX_PATTERN.match(text)
    digits = match.group(3)
    value = int(digits, 16) if digits else 0
    if match.group(1) == "-":
        value = -value
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value & 0x80000000 else value


def text_to_rgb(name: str, suffix: str | None = None) -> int:
    """Turn an XPM colour specification into a colour value.

    ``#RRGGBB`` is read as hexadecimal. Otherwise ``name`` (joined with
    ``suffix`` by a space when given) is looked up in the colour table;
    unknown names give 0 and ``None`` gives -1.
    """
    if name.startswith("#"):
        return _parse_hex(name[1:])
    if suffix is not None:
        name = f"{name} {suffix}"[:_NAME_BUFFER - 1]
    found = color_by_name(name)
    return 0 if found is None else found


def _next_line(lines: Iterator[str], what: str) -> str:
    try:
        return next(lines)
    except StopIteration:
        raise XpmError(f"missing {what}") from None


def _parse_header(line: str) -> tuple[int, int, int, int]:
    words = split_words(line)
    if len(words) < 4:
        raise XpmError("header needs width, height, colour count and chars per pixel")
    values = tuple(atoi(word) for word in words[:4])
    if any(value <= 0 for value in values):
        raise XpmError(f"invalid header values: {line!r}")
    return values  # type: ignore[return-value]


def _parse_color(line: str, cpp: int) -> tuple[str, int]:
    if len(line) < cpp:
        raise XpmError(f"colour line shorter than its key: {line!r}")
    words = split_words(line[cpp:])
    try:
        index = words.index("c") + 1
    except ValueError:
        raise XpmError(f"colour line has no 'c' entry: {line!r}") from None
    if index >= len(words):
        raise XpmError(f"colour line has no value after 'c': {line!r}")
    suffix = words[index + 1] if index + 1 < len(words) else None
    return line[:cpp], text_to_rgb(words[index], suffix)


def parse_xpm_lines(lines: Iterable[str]) -> XpmImage:
    """Decode an XPM image given as its sequence of row strings.

    The first string is the header, then one string per colour, then one
    per pixel row. With one or two characters per pixel a colour key
    defined twice takes its last definition, with more its first. Keys
    without a definition give 0; the colour ``None`` gives ``TRANSPARENT``.
    """
    source = iter(lines)
    width, height, ncolors, cpp = _parse_header(_next_line(source, "header"))

    palette: dict[str, int] = {}
    last_wins = cpp <= 2
    for _ in range(ncolors):
        key, rgb = _parse_color(_next_line(source, "colour line"), cpp)
        if last_wins:
            palette[key] = rgb
        else:
            palette.setdefault(key, rgb)

    pixels: list[int] = []
    for _ in range(height):
        row = _next_line(source, "pixel row")
        if len(row) < width * cpp:
            raise XpmError(f"pixel row too short: {row!r}")
        for x in range(width):
            col = palette.get(row[x * cpp:(x + 1) * cpp], 0)
            if col == -1:
                col = TRANSPARENT
            pixels.append(col & 0xFFFFFFFF)
    return XpmImage(width, height, tuple(pixels))


def _quoted_strings(text: str) -> Iterator[str]:
    pos = 0
    while True:
        start = text.find('"', pos)
        if start == -1:
            return
        end = text.find('"', start + 1)
        if end == -1:
            return
        yield text[start + 1:end]
        pos = end + 1


def parse_xpm_text(text: str) -> XpmImage:
    """Decode an XPM image from its source text, ignoring comments."""
    return parse_xpm_lines(_quoted_strings(strip_comments(text)))


def load_xpm(path: str | Path) -> XpmImage:
    """Read and decode the XPM file at ``path``."""
    data = Path(path).read_bytes()
    return parse_xpm_text(data.decode("latin-1"))