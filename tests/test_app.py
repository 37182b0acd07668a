import pytest

from fractol.app import UsageError, check_decimal, is_valid_zero, main, parse_arguments


@pytest.mark.parametrize(
    "text, expected",
    [
        ("0", True),
        ("0.0", True),
        ("0.00", False),
        ("00", False),
        ("-0", False),
        ("", False),
        (None, False),
        ("1", False),
    ],
)
def test_is_valid_zero(text, expected):
    assert is_valid_zero(text) is expected


@pytest.mark.parametrize("text", ["1.5", "-2", "+0.25", ".5", "42", "7."])
def test_check_decimal_accepts(text):
    assert check_decimal(text) == text


@pytest.mark.parametrize("text", ["1.2.3", "1-2", "--1", "abc", "1e5", "+-1", " 1"])
def test_check_decimal_rejects(text):
    with pytest.raises(UsageError, match="Invalid number"):
        check_decimal(text)


def test_parse_mandelbrot():
    view = parse_arguments(["mandelbrot"])
    assert view.name == "mandelbrot"
    assert view.is_julia() is False
    assert view.iterations == 42
    assert view.zoom == 1.0
    assert view.escape_value == 4


def test_parse_julia():
    view = parse_arguments(["julia", "-0.8", "0.156"])
    assert view.is_julia()
    assert view.julia_x == pytest.approx(-0.8)
    assert view.julia_y == pytest.approx(0.156)
    assert view.shift_x == 0.0 and view.shift_y == 0.0


def test_parse_julia_explicit_zeros():
    view = parse_arguments(["julia", "0", "0.0"])
    assert (view.julia_x, view.julia_y) == (0.0, 0.0)


@pytest.mark.parametrize(
    "args",
    [["julia", "abc", "0"], ["julia", "0", "x"], ["julia", "-0", "1"], ["julia", "", "1"]],
)
def test_parse_julia_invalid_argument(args):
    with pytest.raises(UsageError, match="Invalid argument"):
        parse_arguments(args)


def test_parse_julia_malformed_number():
    with pytest.raises(UsageError, match="Invalid number"):
        parse_arguments(["julia", "1.2.3", "0.5"])


@pytest.mark.parametrize("value", ["3000000000", "-3000000000"])
def test_parse_julia_out_of_range(value):
    with pytest.raises(UsageError, match="out of range"):
        parse_arguments(["julia", value, "1"])


@pytest.mark.parametrize(
    "args",
    [[], ["julia"], ["julia", "1"], ["mandelbrot", "x"], ["Mandelbrot"], ["burning"]],
)
def test_parse_wrong_arguments(args):
    with pytest.raises(UsageError, match="Wrong arguments"):
        parse_arguments(args)


def test_main_wrong_arguments_prints_usage(capsys):
    assert main(["nope"]) == 1
    err = capsys.readouterr().err
    assert "Wrong arguments" in err
    assert "julia n1 n2" in err


def test_main_invalid_julia_argument(capsys):
    assert main(["julia", "x", "1"]) == 1
    assert "Error: Invalid argument." in capsys.readouterr().err


def test_main_out_of_range(capsys):
    assert main(["julia", "1", "99999999999"]) == 1
    assert "Error: Argument out of range." in capsys.readouterr().err