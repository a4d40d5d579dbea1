import pytest

from fdfview.colors import color_by_name


@pytest.mark.parametrize(
    "name, expected",
    [
        ("snow", 0xFFFAFA),
        ("black", 0x0),
        ("white", 0xFFFFFF),
        ("red", 0xFF0000),
        ("navy", 0x80),
        ("gray50", 0x7F7F7F),
        ("lightgreen", 0x90EE90),
    ],
)
def test_known_colors(name, expected):
    assert color_by_name(name) == expected


def test_lookup_ignores_case():
    assert color_by_name("SNOW") == color_by_name("snow")
    assert color_by_name("Ghost White") == color_by_name("ghost white")


def test_duplicate_name_returns_first_entry():
    assert color_by_name("dark slate") == 0x2F4F4F
    assert color_by_name("light goldenrod") == 0xFAFAD2


def test_none_is_transparent_marker():
    assert color_by_name("none") == -1


def test_unknown_name_gives_none():
    assert color_by_name("no such colour") is None
    assert color_by_name("") is None


@pytest.mark.parametrize("level", [0, 1, 25, 63, 99, 100])
def test_gray_and_grey_spellings_agree(level):
    assert color_by_name(f"gray{level}") == color_by_name(f"grey{level}")


@pytest.mark.parametrize(
    "spaced, joined",
    [
        ("ghost white", "ghostwhite"),
        ("misty rose", "mistyrose"),
        ("dark orange", "darkorange"),
        ("medium purple", "mediumpurple"),
    ],
)
def test_spaced_and_joined_names_agree(spaced, joined):
    assert color_by_name(spaced) == color_by_name(joined)


def test_numbered_variant_one_matches_base_for_red_and_yellow():
    assert color_by_name("red1") == color_by_name("red")
    assert color_by_name("yellow1") == color_by_name("yellow")


def test_values_fit_in_24_bits():
    for name in ("snow", "thistle4", "gray100", "lightsalmon3", "deepskyblue4"):
        value = color_by_name(name)
        assert 0 <= value <= 0xFFFFFF