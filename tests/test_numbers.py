import math

import pytest

from fractol.numbers import atodbl, atoi, atol, itoa


@pytest.mark.parametrize(
    "text, expected",
    [
        ("1.5", 1.5),
        ("  -0.25", -0.25),
        ("+0.5", 0.5),
        ("3", 3.0),
        ("\t\n7", 7.0),
        ("12.75xyz", 12.75),
        ("", 0.0),
    ],
)
def test_atodbl_values(text, expected):
    assert atodbl(text) == pytest.approx(expected)


def test_atodbl_leading_dot_is_zero():
    assert atodbl(".5") == 0.0


def test_atodbl_signed_dot_parses_fraction():
    assert atodbl("+.5") == pytest.approx(0.5)
    assert atodbl("-.5") == pytest.approx(-0.5)


def test_atodbl_negative_zero_keeps_sign():
    result = atodbl("-0")
    assert result == 0.0
    assert math.copysign(1.0, result) == -1.0


def test_atodbl_ignores_garbage_prefix():
    assert atodbl("abc") == 0.0


@pytest.mark.parametrize(
    "text, expected",
    [
        ("42", 42),
        ("  -17", -17),
        ("+8", 8),
        ("2147483647", 2147483647),
        ("-2147483648", -2147483648),
    ],
)
def test_atoi_valid(text, expected):
    assert atoi(text) == expected


@pytest.mark.parametrize("text", ["+-5", "--5", "12a", "\t5", "4 2"])
def test_atoi_invalid_gives_zero(text):
    assert atoi(text) == 0


@pytest.mark.parametrize("text", ["2147483648", "-2147483649", "99999999999"])
def test_atoi_overflow_raises(text):
    with pytest.raises(OverflowError):
        atoi(text)


@pytest.mark.parametrize("text, expected", [("123", 123), ("  9", 9), ("+77", 77)])
def test_atol_positive(text, expected):
    assert atol(text) == expected


@pytest.mark.parametrize("text", ["-5", "  -123", "", "-"])
def test_atol_negative_and_empty_give_zero(text):
    assert atol(text) == 0


def test_atol_stays_in_long_range():
    result = atol("9" * 40)
    assert -(2**63) <= result < 2**63


@pytest.mark.parametrize("n", [0, 7, -7, 12345, -2147483648, 2147483647])
def test_itoa_round_trips_with_atoi(n):
    assert atoi(itoa(n)) == n


def test_itoa_min_int():
    assert itoa(-2147483648) == "-2147483648"


def test_itoa_zero():
    assert itoa(0) == "0"


@pytest.mark.parametrize("n", [2**31, -(2**31) - 1])
def test_itoa_out_of_range(n):
    with pytest.raises(OverflowError):
        itoa(n)