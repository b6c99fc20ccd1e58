"""Reading the list of integers given on the command line."""

import re
from collections.abc import Iterable, Sequence

__all__ = [
    "ArgumentError",
    "parse_number",
    "skip_number",
    "check_args",
    "parse_args",
    "has_duplicates",
]

INT_MIN = -2147483648
INT_MAX = 2147483647

_SPACES = " \t\n\v\f\r"
_DIGITS = "0123456789"
_ALLOWED = _SPACES + _DIGITS + "+-"

_NUMBER = re.compile(r"[ \t\n\v\f\r]*([+-]?)([0-9]*)")
_NUMBER_SPAN = re.compile(r"[ \t\n\v\f\r]*[+-]?[0-9]*[ \t\n\v\f\r]*")


class ArgumentError(ValueError):
    """The arguments do not describe a valid list of distinct integers."""


def parse_number(text: str) -> int:
    """Read an integer the way ``atoi`` does: leading blanks, a sign, digits.

    Anything after the digits is ignored; no digits at all gives 0.
    """
    match = _NUMBER.match(text)
    sign, digits = match.group(1), match.group(2)
    value = int(digits) if digits else 0
    return -value if sign == "-" else value


def skip_number(text: str) -> int:
    """Return how many characters one number and its surrounding blanks take."""
    return _NUMBER_SPAN.match(text).end()


def check_args(args: Sequence[str]) -> None:
    """Reject arguments holding anything but blanks, signs and digits.

    A sign may not end an argument, and the last argument must hold a digit.
    """
    if not args:
        raise ArgumentError("no arguments")
    for arg in args:
        for position, char in enumerate(arg):
            if char not in _ALLOWED:
                raise ArgumentError(f"invalid character {char!r} in {arg!r}")
            if char in "+-" and position == len(arg) - 1:
                raise ArgumentError(f"dangling sign in {arg!r}")
    if not any(char in _DIGITS for char in args[-1]):
        raise ArgumentError("no digits in the last argument")


def parse_args(args: Sequence[str]) -> list[int]:
    """Turn command-line arguments into the list of integers they hold.

    Each argument may hold several blank-separated numbers. Raises
    ArgumentError for malformed input, values outside the 32-bit range
    and repeated values.
    """
    check_args(args)
    values: list[int] = []
    for arg in args:
        position = 0
        while position < len(arg):
            values.append(parse_number(arg[position:]))
            position = _NUMBER_SPAN.match(arg, position).end()
            if (
                position < len(arg)
                and arg[position] in "+-"
                and arg[position - 1] not in _SPACES
            ):
                raise ArgumentError(f"misplaced sign in {arg!r}")
    if has_duplicates(values):
        raise ArgumentError("repeated or out-of-range value")
    return values


def has_duplicates(values: Iterable[int]) -> bool:
    """True if a value repeats or lies outside the 32-bit signed range."""
    seen: set[int] = set()
    for value in values:
        if value < INT_MIN or value > INT_MAX or value in seen:
            return True
        seen.add(value)
    return False