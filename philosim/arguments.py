"""Validation and parsing of the simulation's command-line arguments."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from philosim.errors import ArgumentsError

MAX_PHILOSOPHERS = 200
MIN_TIME = 60
INT_MAX = 2**31 - 1

_WHITESPACE = " \t\n\v\f\r"
_DIGITS = "0123456789"


@dataclass(frozen=True)
class Parameters:
    """Settings of one simulation run; times are in milliseconds."""

    nb_philo: int
    time_to_die: int
    time_to_eat: int
    time_to_sleep: int
    eat_goal: int | None = None


def is_valid_positive_int(text: str | None) -> bool:
    """Tell whether ``text`` is a plain decimal number from 0 to INT_MAX."""
    if not text:
        return False
    if text[0] == "0" and len(text) > 1:
        return False
    if any(ch not in _DIGITS for ch in text):
        return False
    return int(text) <= INT_MAX


def atoi(text: str) -> int:
    """Read a leading signed decimal integer, ignoring what follows it."""
    stripped = text.lstrip(_WHITESPACE)
    sign = 1
    if stripped[:1] in ("-", "+"):
        sign = -1 if stripped[0] == "-" else 1
        stripped = stripped[1:]
    value = 0
    for ch in stripped:
        if ch not in _DIGITS:
            break
        value = value * 10 + int(ch)
    return sign * value


def check_arguments(args: Sequence[str]) -> None:
    """Raise ArgumentsError unless ``args`` form a valid set of settings.

    ``args`` excludes the program name: four or five values, namely the
    number of philosophers, time to die, time to eat, time to sleep and an
    optional number of meals each philosopher must eat.
    """
    if len(args) not in (4, 5):
        raise ArgumentsError()
    for position, text in enumerate(args):
        if not is_valid_positive_int(text):
            raise ArgumentsError()
        value = atoi(text)
        if position == 0 and not 1 <= value <= MAX_PHILOSOPHERS:
            raise ArgumentsError()
        if 1 <= position <= 3 and value < MIN_TIME:
            raise ArgumentsError()
        if position == 4 and value < 1:
            raise ArgumentsError()


def parse_arguments(args: Sequence[str]) -> Parameters:
    """Validate ``args`` and return them as Parameters."""
    check_arguments(args)
    values = [atoi(text) for text in args]
    eat_goal = values[4] if len(values) == 5 else None
    return Parameters(
        nb_philo=values[0],
        time_to_die=values[1],
        time_to_eat=values[2],
        time_to_sleep=values[3],
        eat_goal=eat_goal,
    )