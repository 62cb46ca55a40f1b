import string

import pytest

from sigtalk.charclass import (
    is_alnum,
    is_alpha,
    is_ascii,
    is_digit,
    is_print,
    to_lower,
    to_upper,
)


@pytest.mark.parametrize("ch", list(string.ascii_letters))
def test_letters_are_alpha(ch):
    assert is_alpha(ch) is True
    assert is_alpha(ord(ch)) is True
    assert is_digit(ch) is False


@pytest.mark.parametrize("ch", list(string.digits))
def test_digits(ch):
    assert is_digit(ch) is True
    assert is_alpha(ch) is False
    assert is_alnum(ch) is True


def test_alnum_matches_union():
    for code in range(-5, 300):
        assert is_alnum(code) == (is_alpha(code) or is_digit(code))


def test_non_ascii_letters_are_not_alpha():
    assert is_alpha("é") is False
    assert is_alnum("_") is False


def test_ascii_bounds():
    assert is_ascii(0) is True
    assert is_ascii(127) is True
    assert is_ascii(128) is False
    assert is_ascii(-1) is False


def test_print_bounds():
    assert is_print(" ") is True
    assert is_print("~") is True
    assert is_print(31) is False
    assert is_print(127) is False


def test_case_conversion_matches_ascii_tables():
    for lower, upper in zip(string.ascii_lowercase, string.ascii_uppercase):
        assert to_upper(lower) == upper
        assert to_lower(upper) == lower
        assert to_upper(ord(lower)) == ord(upper)
        assert to_lower(ord(upper)) == ord(lower)


@pytest.mark.parametrize("ch", ["1", "@", "[", "`", "{", " ", "é"])
def test_case_conversion_leaves_others(ch):
    assert to_upper(ch) == ch
    assert to_lower(ch) == ch


def test_multi_char_string_rejected():
    with pytest.raises(ValueError):
        is_alpha("ab")