"""Command-line argument parsing and validation for the simulation."""

from __future__ import annotations

from dataclasses import dataclass

USAGE = (
    "Usage: ./philo <number_of_philosophers> <time_to_die> "
    "<time_to_eat> <time_to_sleep>"
    "[number_of_times_each_philosopher_must_eat]"
)
INVALID = "Error: Invalid arguments"

_DIGITS = frozenset("0123456789")
_WHITESPACE = frozenset(" \t\n\v\f\r")
_MAX_LENGTH = 10
_INT_BITS = 32


class UsageError(ValueError):
    """Raised when the number of arguments is wrong."""

    def __init__(self, message: str = USAGE) -> None:
        super().__init__(message)


class ArgumentError(ValueError):
    """Raised when an argument is not a valid positive number."""

    def __init__(self, message: str = INVALID) -> None:
        super().__init__(message)


@dataclass(frozen=True)
class Settings:
    """Parameters of one simulation run; times are in milliseconds."""

    num_philos: int
    time_to_die: int
    time_to_eat: int
    time_to_sleep: int
    must_eat_count: int | None = None


def _wrap_int(value: int) -> int:
    """Reduce ``value`` to a signed 32-bit integer, wrapping on overflow."""
    half = 1 << (_INT_BITS - 1)
    return (value + half) % (1 << _INT_BITS) - half


def atoi(text: str) -> int:
    """Parse a leading integer the way C's ``atoi`` does, as a 32-bit int.

    Leading whitespace and one optional sign are accepted; parsing stops at
    the first non-digit. Text with no digits yields 0.
    """
    rest = text.lstrip("".join(_WHITESPACE))
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    result = 0
    for char in rest:
        if char not in _DIGITS:
            break
        result = result * 10 + int(char)
    return _wrap_int(result * sign)


def is_numeric(args: list[str] | tuple[str, ...]) -> bool:
    """Return True if every argument is only ASCII digits and at most 10 long."""
    return all(
        len(arg) <= _MAX_LENGTH and all(char in _DIGITS for char in arg)
        for arg in args
    )


def parse_args(args: list[str] | tuple[str, ...]) -> Settings:
    """Build :class:`Settings` from the arguments after the program name.

    Raises :class:`UsageError` when there are not four or five arguments and
    :class:`ArgumentError` when any value is not a positive number.
    """
    if len(args) not in (4, 5):
        raise UsageError()
    if not is_numeric(args):
        raise ArgumentError()
    num_philos, time_to_die, time_to_eat, time_to_sleep = (
        atoi(arg) for arg in args[:4]
    )
    must_eat = atoi(args[4]) if len(args) == 5 else -1
    if min(num_philos, time_to_die, time_to_eat, time_to_sleep) <= 0:
        raise ArgumentError()
    if must_eat != -1 and must_eat <= 0:
        raise ArgumentError()
    return Settings(
        num_philos=num_philos,
        time_to_die=time_to_die,
        time_to_eat=time_to_eat,
        time_to_sleep=time_to_sleep,
        must_eat_count=None if must_eat == -1 else must_eat,
    )