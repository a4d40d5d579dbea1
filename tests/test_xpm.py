import pytest

from fdfview.colors import color_by_name
from fdfview.xpm import (
    TRANSPARENT,
    XpmError,
    XpmImage,
    find_unquoted,
    load_xpm,
    parse_xpm_lines,
    parse_xpm_text,
    split_words,
    strip_comments,
    text_to_rgb,
)

SAMPLE_LINES = ["2 2 2 1", "a c #FF0000", "b c None", "ab", "ba"]

SAMPLE_TEXT = """/* XPM */
static char *sample[] = {
/* columns rows colors chars-per-pixel */
"2 2 2 1",
"a c #FF0000", // red
"b c None",
"ab",
"ba"
};
"""


def test_split_words_spaces_and_tabs():
    assert split_words("  a\tb  c ") == ["a", "b", "c"]
    assert split_words(" \t ") == []


def test_find_unquoted_skips_quoted_text():
    text = '"/*" then /* here'
    pos = find_unquoted(text, "/*")
    assert text[pos:pos + 2] == "/*"
    assert pos > text.index('"', 1)


def test_find_unquoted_missing():
    assert find_unquoted('"//"', "//") == -1


def test_find_unquoted_empty_needle():
    with pytest.raises(ValueError):
        find_unquoted("abc", "")


def test_strip_comments_blanks_block_and_line_comments():
    text = 'x /* gone */ "keep /* me */" y // tail\nz'
    stripped = strip_comments(text)
    assert len(stripped) == len(text)
    assert "gone" not in stripped
    assert "tail" not in stripped
    assert '"keep /* me */"' in stripped
    assert stripped.rstrip().endswith("z")


def test_text_to_rgb_hex():
    assert text_to_rgb("#FF0000") == 0xFF0000


def test_text_to_rgb_joins_suffix():
    assert text_to_rgb("dark", "green") == color_by_name("dark green")


def test_text_to_rgb_name_and_unknown():
    assert text_to_rgb("none") == -1
    assert text_to_rgb("no-such-colour") == 0


def test_parse_lines_sample():
    image = parse_xpm_lines(SAMPLE_LINES)
    assert (image.width, image.height) == (2, 2)
    assert image.pixels == (0xFF0000, TRANSPARENT, TRANSPARENT, 0xFF0000)
    assert image.pixel(1, 0) == TRANSPARENT
    assert list(image.rows()) == [(0xFF0000, TRANSPARENT), (TRANSPARENT, 0xFF0000)]


def test_pixel_out_of_range():
    image = parse_xpm_lines(SAMPLE_LINES)
    with pytest.raises(IndexError):
        image.pixel(2, 0)


def test_duplicate_key_last_wins_for_short_keys():
    image = parse_xpm_lines(["1 1 2 1", "a c #000001", "a c #000002", "a"])
    assert image.pixels == (0x000002,)


def test_duplicate_key_first_wins_for_long_keys():
    image = parse_xpm_lines(["1 1 2 3", "abc c #000001", "abc c #000002", "abc"])
    assert image.pixels == (0x000001,)


def test_undefined_key_is_zero():
    image = parse_xpm_lines(["1 1 1 1", "a c #00FF00", "z"])
    assert image.pixels == (0,)


@pytest.mark.parametrize(
    "lines",
    [
        ["0 1 1 1", "a c red", "a"],
        ["1 1 1"],
        [],
        ["1 1 1 1", "a s mask"],
        ["1 1 1 1", "a c"],
        ["1 1 1 1", "a c red"],
        ["2 1 1 1", "a c red", "a"],
    ],
)
def test_invalid_data_raises(lines):
    with pytest.raises(XpmError):
        parse_xpm_lines(lines)


def test_parse_text_matches_lines():
    assert parse_xpm_text(SAMPLE_TEXT) == parse_xpm_lines(SAMPLE_LINES)


def test_parse_text_without_strings():
    with pytest.raises(XpmError):
        parse_xpm_text("/* nothing */")


def test_load_xpm_round_trip(tmp_path):
    path = tmp_path / "sample.xpm"
    path.write_text(SAMPLE_TEXT)
    image = load_xpm(path)
    assert isinstance(image, XpmImage)
    assert image == parse_xpm_lines(SAMPLE_LINES)


def test_load_xpm_missing_file(tmp_path):
    with pytest.raises(OSError):
        load_xpm(tmp_path / "absent.xpm")