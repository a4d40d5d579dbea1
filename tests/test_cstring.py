import pytest

from fdfview.cstring import atoi, count_words, exact_sqrt, itoa, power, split, trim


@pytest.mark.parametrize(
    "text, expected",
    [
        ("42", 42),
        ("  \t-42abc", -42),
        ("+7", 7),
        ("\n\v\f\r 13 14", 13),
        ("-0", 0),
    ],
)
def test_atoi_parses_leading_integer(text, expected):
    assert atoi(text) == expected


@pytest.mark.parametrize("text", ["abc", "", "  ", "-", "+x12", "--5"])
def test_atoi_without_digits_is_zero(text):
    assert atoi(text) == 0


@pytest.mark.parametrize("n", [0, 1, -1, 9, 10, -10, 123456, -2147483648, 2147483647])
def test_itoa_atoi_round_trip(n):
    assert atoi(itoa(n)) == n
    assert int(itoa(n)) == n


def test_itoa_minimum_int():
    assert itoa(-2147483648) == "-2147483648"


@pytest.mark.parametrize(
    "words",
    [[], ["one"], ["hello", "world"], ["a", "bb", "ccc", "dddd"], ["x1", "-2", "+3"]],
)
@pytest.mark.parametrize("glue", [" ", "\t", "\n", " \t\n "])
def test_count_words_matches_joined_words(words, glue):
    text = glue + glue.join(words) + glue
    assert count_words(text) == len(words)


def test_count_words_ignores_other_whitespace_as_separator():
    assert count_words("a\rb") == count_words("ab")


@pytest.mark.parametrize("nb", [-3, -1, 0, 1, 2, 5, 10])
@pytest.mark.parametrize("exp", [0, 1, 2, 3, 7, 10])
def test_power_non_negative_exponent(nb, exp):
    assert power(nb, exp) == nb**exp


def test_power_negative_exponent_truncates():
    assert power(2, -1) == 0
    assert power(1, -5) == 1
    assert power(-1, -3) == -1


def test_power_zero_base_negative_exponent_raises():
    with pytest.raises(ZeroDivisionError):
        power(0, -1)


@pytest.mark.parametrize("n", range(2, 60))
def test_exact_sqrt_of_square(n):
    assert exact_sqrt(n * n) == n


@pytest.mark.parametrize("n", range(2, 60))
def test_exact_sqrt_of_non_square(n):
    assert exact_sqrt(n * n + 1) == 0


@pytest.mark.parametrize("nb", [-4, 0, 1, 2, 3])
def test_exact_sqrt_small_values(nb):
    assert exact_sqrt(nb) == 0


def test_split_drops_empty_pieces():
    assert split("**a*bb***c*", "*") == ["a", "bb", "c"]


@pytest.mark.parametrize("text", ["", "***", "*"])
def test_split_nothing_left(text):
    assert split(text, "*") == []


@pytest.mark.parametrize("pieces", [["a"], ["a", "b"], ["12", "-3", "+4", "x y"]])
def test_split_round_trip(pieces):
    assert split(",".join(pieces), ",") == pieces
    assert split(",," + ",,,".join(pieces) + ",", ",") == pieces


@pytest.mark.parametrize("sep", ["", "ab"])
def test_split_rejects_bad_separator(sep):
    with pytest.raises(ValueError):
        split("a,b", sep)


def test_trim_removes_blank_edges():
    assert trim("  \n\tab c \t\n") == "ab c"


def test_trim_only_blanks():
    assert trim(" \t\n ") == ""


def test_trim_keeps_other_whitespace():
    assert trim("\rx\r") == "\rx\r"


@pytest.mark.parametrize("text", ["a", "  a b  ", "\tline\n", ""])
def test_trim_is_idempotent(text):
    assert trim(trim(text)) == trim(text)