import pytest

from philosophers.parsing import (
    ArgumentError,
    Settings,
    UsageError,
    atoi,
    is_numeric,
    parse_args,
)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("42", 42),
        ("   42", 42),
        ("\t\n+42", 42),
        ("-42", -42),
        ("42abc", 42),
    ],
)
def test_atoi_parses_leading_number(text, expected):
    assert atoi(text) == expected


@pytest.mark.parametrize("text", ["", "abc", "-", "+-3", "  x1"])
def test_atoi_without_digits_is_zero(text):
    assert atoi(text) == 0


def test_atoi_wraps_to_32_bits():
    assert atoi(str(2**32 + 7)) == 7
    assert atoi(str(2**31)) == -(2**31)


@pytest.mark.parametrize(
    "args",
    [["1", "200", "100", "100"], ["0"], ["9999999999"], [""], []],
)
def test_is_numeric_accepts_digit_strings(args):
    assert is_numeric(args) is True


@pytest.mark.parametrize(
    "args",
    [["12a"], ["-5"], ["+5"], ["12345678901"], ["1", " 2"], ["٣"]],
)
def test_is_numeric_rejects_other_text(args):
    assert is_numeric(args) is False


def test_parse_args_four_values():
    settings = parse_args(["5", "800", "200", "200"])
    assert settings == Settings(5, 800, 200, 200, None)


def test_parse_args_with_meal_count():
    settings = parse_args(("4", "410", "200", "200", "7"))
    assert settings.num_philos == 4
    assert settings.time_to_die == 410
    assert settings.must_eat_count == 7


@pytest.mark.parametrize("count", [0, 1, 3, 6, 7])
def test_parse_args_wrong_count_is_usage_error(count):
    with pytest.raises(UsageError):
        parse_args(["1"] * count)


@pytest.mark.parametrize(
    "args",
    [
        ["0", "800", "200", "200"],
        ["5", "0", "200", "200"],
        ["5", "800", "0", "200"],
        ["5", "800", "200", "0"],
        ["5", "800", "200", "200", "0"],
        ["5", "-800", "200", "200"],
        ["5", "800", "2x0", "200"],
        ["5", "800", "200", "12345678901"],
        ["5", "800", "200", "2147483648"],
    ],
)
def test_parse_args_invalid_values(args):
    with pytest.raises(ArgumentError):
        parse_args(args)


def test_errors_carry_messages():
    with pytest.raises(UsageError, match="Usage: ./philo"):
        parse_args([])
    with pytest.raises(ArgumentError, match="Error: Invalid arguments"):
        parse_args(["a", "b", "c", "d"])