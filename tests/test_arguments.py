import pytest

from philosim.arguments import (
    MAX_PHILOSOPHERS,
    MIN_TIME,
    Parameters,
    atoi,
    check_arguments,
    is_valid_positive_int,
    parse_arguments,
)
from philosim.errors import ArgumentsError, Status


@pytest.mark.parametrize("text", ["0", "1", "60", "2147483647"])
def test_valid_positive_ints(text):
    assert is_valid_positive_int(text) is True


@pytest.mark.parametrize(
    "text", ["", None, "01", "00", "-1", "+1", " 5", "5 ", "1a", "2147483648"]
)
def test_invalid_positive_ints(text):
    assert is_valid_positive_int(text) is False


@pytest.mark.parametrize(
    "text, expected",
    [
        ("42", 42),
        ("  \t-42", -42),
        ("+7abc", 7),
        ("abc", 0),
        ("", 0),
        ("-", 0),
    ],
)
def test_atoi(text, expected):
    assert atoi(text) == expected


def test_atoi_round_trip_of_valid_numbers():
    for text in ["0", "1", "199", "800", "2147483647"]:
        assert is_valid_positive_int(text)
        assert str(atoi(text)) == text


def test_parse_four_arguments():
    params = parse_arguments(["5", "800", "200", "200"])
    assert params == Parameters(5, 800, 200, 200, None)
    assert params.eat_goal is None


def test_parse_five_arguments():
    params = parse_arguments(["4", "410", "200", "200", "7"])
    assert params.nb_philo == 4
    assert params.time_to_die == 410
    assert params.eat_goal == 7


def test_limits_are_accepted():
    params = parse_arguments(
        [str(MAX_PHILOSOPHERS), str(MIN_TIME), str(MIN_TIME), str(MIN_TIME), "1"]
    )
    assert params.nb_philo == MAX_PHILOSOPHERS
    assert params.time_to_sleep == MIN_TIME


@pytest.mark.parametrize(
    "args",
    [
        [],
        ["5", "800", "200"],
        ["5", "800", "200", "200", "7", "1"],
        ["0", "800", "200", "200"],
        [str(MAX_PHILOSOPHERS + 1), "800", "200", "200"],
        ["5", str(MIN_TIME - 1), "200", "200"],
        ["5", "800", str(MIN_TIME - 1), "200"],
        ["5", "800", "200", str(MIN_TIME - 1)],
        ["5", "800", "200", "200", "0"],
        ["5", "800", "200", "-200"],
        ["5", "800", "200", "2OO"],
        ["05", "800", "200", "200"],
        ["5", "800", "200", "200", "2147483648"],
    ],
)
def test_invalid_arguments_raise(args):
    with pytest.raises(ArgumentsError) as info:
        check_arguments(args)
    assert info.value.status is Status.ERROR_ARGUMENTS


def test_parse_rejects_what_check_rejects():
    with pytest.raises(ArgumentsError):
        parse_arguments(["1", "800", "200"])