"""Line-by-line reading of a stream in fixed-size chunks."""

from __future__ import annotations

from typing import AnyStr, IO, Iterator

BUFF_SIZE = 32


def _iter_lines(stream: IO[AnyStr], chunk_size: int) -> Iterator[AnyStr]:
    pending = stream.read(0)
    newline = b"\n" if isinstance(pending, bytes) else "\n"
    exhausted = False
    while True:
        while newline not in pending and not exhausted:
            chunk = stream.read(chunk_size)
            if chunk:
                pending += chunk
            else:
                exhausted = True
        if not pending:
            return
        line, _, pending = pending.partition(newline)
        yield line


def read_lines(stream: IO[AnyStr], chunk_size: int = BUFF_SIZE) -> Iterator[AnyStr]:
    """Yield the lines of ``stream`` without their newlines.

    The stream is read ``chunk_size`` units at a time and only as far as the
    next line needs. A final line without a newline is still yielded; a
    trailing newline does not produce an extra empty line. Works with text
    and binary streams alike.
    """
    if chunk_size < 1:
        raise ValueError("chunk_size must be at least 1")
    return _iter_lines(stream, chunk_size)