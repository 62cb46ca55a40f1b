import pytest

from sigtalk.numconv import INT_MAX, INT_MIN, atoi, itoa


@pytest.mark.parametrize(
    "text, expected",
    [
        ("42", 42),
        ("  \t\n\v\f\r42", 42),
        ("-42", -42),
        ("+42", 42),
        ("123abc456", 123),
        ("0", 0),
    ],
)
def test_atoi_basic(text, expected):
    assert atoi(text) == expected


@pytest.mark.parametrize("text", ["", "abc", "   ", "+-1", "--1", "- 1"])
def test_atoi_without_digits_is_zero(text):
    assert atoi(text) == 0


def test_atoi_limits():
    assert atoi("2147483647") == INT_MAX
    assert atoi("-2147483648") == INT_MIN


def test_atoi_wraps_like_int():
    assert atoi("2147483648") == INT_MIN


@pytest.mark.parametrize("n", [0, 1, -1, 7, -9, 10, 12345, -987654, INT_MAX, INT_MIN])
def test_round_trip(n):
    assert atoi(itoa(n)) == n


def test_itoa_values():
    assert itoa(0) == "0"
    assert itoa(-2147483648) == "-2147483648"
    assert itoa(INT_MAX) == "2147483647"


@pytest.mark.parametrize("n", [INT_MAX + 1, INT_MIN - 1])
def test_itoa_rejects_out_of_range(n):
    with pytest.raises(OverflowError):
        itoa(n)