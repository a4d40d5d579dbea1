import io

import pytest

from fdfview.lines import BUFF_SIZE, read_lines

SAMPLES = [
    "ab\ncd",
    "ab\ncd\n",
    "a\n\nb\n\n",
    "\n",
    "\n\n\n",
    "single line without newline",
    "0 0 0 0\n0 10 10 0\n0 10 10 0\n0 0 0 0\n",
    "x" * 100 + "\n" + "y" * 70,
]


def _expected(text):
    parts = text.split("\n")
    if text.endswith("\n"):
        parts = parts[:-1]
    return parts


@pytest.mark.parametrize("text", SAMPLES)
@pytest.mark.parametrize("chunk_size", [1, 2, 3, 7, BUFF_SIZE, 1000])
def test_lines_match_split(text, chunk_size):
    assert list(read_lines(io.StringIO(text), chunk_size)) == _expected(text)


@pytest.mark.parametrize("text", SAMPLES)
def test_default_chunk_size(text):
    assert list(read_lines(io.StringIO(text))) == _expected(text)


def test_empty_stream_yields_nothing():
    assert list(read_lines(io.StringIO(""))) == []


def test_bytes_stream():
    data = b"12 3\n-4 +5\n"
    assert list(read_lines(io.BytesIO(data), 3)) == [b"12 3", b"-4 +5"]


def test_final_line_without_newline_is_kept():
    assert list(read_lines(io.StringIO("ab\ncd"))) == ["ab", "cd"]


@pytest.mark.parametrize("chunk_size", [0, -1])
def test_rejects_non_positive_chunk_size(chunk_size):
    with pytest.raises(ValueError):
        read_lines(io.StringIO("a\n"), chunk_size)


def test_reads_lazily():
    text = "first\n" + "rest of the data\n" * 50
    stream = io.StringIO(text)
    lines = read_lines(stream, 4)
    assert next(lines) == "first"
    assert stream.tell() < len(text)
    assert list(lines) == ["rest of the data"] * 50


def test_lines_never_contain_newline():
    text = "a\nbb\n\nccc\n" * 10
    result = list(read_lines(io.StringIO(text), 5))
    assert all("\n" not in line for line in result)
    assert "\n".join(result) + "\n" == text