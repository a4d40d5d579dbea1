"""Reading of height maps: rows of whitespace-separated integers."""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Sequence

from fdfview.cstring import atoi
from fdfview.lines import read_lines

_COLUMN_START = frozenset("0123456789 -+")
_COLUMN_SPAN = re.compile(r"[^ ]* *")
_LEADING_NUMBER = re.compile(r"[0-9+-]* *")


class InvalidMapError(ValueError):
    """Raised when the rows of a map do not all hold the same number of columns."""


@dataclass(frozen=True)
class Point:
    """One map sample: its height ``num`` at grid column ``x`` and row ``y``."""

    num: int
    x: int
    y: int


def count_columns(line: str) -> int:
    """Count the columns of one map row.

    A column starts at a digit, a sign or a space and runs to the next
    space, followed by any spaces. Counting stops at the first column
    that starts with another character.
    """
    count = 0
    pos = 0
    while pos < len(line) and line[pos] in _COLUMN_START:
        pos = _COLUMN_SPAN.match(line, pos).end()
        count += 1
    return count


def validate(lines: Iterable[str]) -> int:
    """Return the common column count of ``lines``.

    Rows with no columns are skipped until the first row that has some;
    after that every row must have the same count. Raises
    InvalidMapError otherwise, or when no row has any column.
    """
    width = 0
    for number, line in enumerate(lines, start=1):
        columns = count_columns(line)
        if width == 0:
            width = columns
        if columns != width:
            raise InvalidMapError(
                f"row {number} has {columns} columns, expected {width}"
            )
    if width == 0:
        raise InvalidMapError("map has no columns")
    return width


def strip_number(text: str) -> str:
    """Drop a leading run of digits and signs and the spaces after it."""
    return text[_LEADING_NUMBER.match(text).end():]


def build_points(lines: Iterable[str], width: int) -> list[Point]:
    """Read ``width`` numbers from each row, numbering rows from 1."""
    points: list[Point] = []
    for y, line in enumerate(lines, start=1):
        rest = line
        for x in range(width):
            points.append(Point(atoi(rest), x, y))
            rest = strip_number(rest)
    return points


def parse_map(lines: Iterable[str]) -> list[Point]:
    """Validate the rows of a map and return its points in reading order."""
    rows: Sequence[str] = list(lines)
    width = validate(rows)
    return build_points(rows, width)


def load_map(path: str | Path) -> list[Point]:
    """Read and parse the map file at ``path``."""
    with open(path, encoding="latin-1", newline="") as stream:
        return parse_map(read_lines(stream))