"""Small string and integer helpers with the exact semantics the map reader relies on."""

from __future__ import annotations

import math
import re

_ATOI_PATTERN = re.compile(r"[ \t\n\v\f\r]*([+-]?)([0-9]*)")
_WORD_SEPARATORS = re.compile(r"[ \n\t]+")
_TRIM_CHARS = " \n\t"


def atoi(text: str) -> int:
    """Parse a leading integer: optional blanks, an optional sign, then digits.

    Anything after the digits is ignored; text with no digits gives 0.
    """
    match = _ATOI_PATTERN.match(text)
    sign, digits = match.group(1), match.group(2)
    if not digits:
        return 0
    value = int(digits)
    return -value if sign == "-" else value


def itoa(n: int) -> str:
    """Return the decimal representation of ``n``."""
    return str(n)


def count_words(text: str) -> int:
    """Count words separated by spaces, newlines or tabs."""
    return sum(1 for word in _WORD_SEPARATORS.split(text) if word)


def _truncating_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b > 0) else -quotient


def power(nb: int, exp: int) -> int:
    """Raise ``nb`` to ``exp`` by squaring.

    Negative exponents use truncating integer division, so the result is
    0 unless ``nb`` is 1 or -1. A zero base with a negative odd step raises
    ZeroDivisionError.
    """
    if exp == 0:
        return 1
    half = abs(exp) // 2
    if exp < 0:
        half = -half
    res = power(nb, half)
    squared = res * res
    if exp % 2 == 0:
        return squared
    if exp > 0:
        return nb * squared
    return _truncating_div(squared, nb)


def exact_sqrt(nb: int) -> int:
    """Return the integer square root of a perfect square of at least 4, else 0."""
    if nb < 2:
        return 0
    root = math.isqrt(nb)
    return root if root * root == nb else 0


def split(text: str, sep: str) -> list[str]:
    """Split ``text`` on the single character ``sep``, dropping empty pieces."""
    if len(sep) != 1:
        raise ValueError("separator must be exactly one character")
    return [piece for piece in text.split(sep) if piece]


def trim(text: str) -> str:
    """Remove leading and trailing spaces, newlines and tabs."""
    return text.strip(_TRIM_CHARS)