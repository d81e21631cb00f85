"""Turn command-line arguments into the list of integers to sort."""

from __future__ import annotations

import re
from collections.abc import Iterable

from .textutil import split

INT_MIN = -(1 << 31)
INT_MAX = (1 << 31) - 1

_LEADING_NUMBER = re.compile(r"[ \t\n\v\f\r]*([+-]?)([0-9]*)")
_NUMBER = re.compile(r"[+-]?[0-9]+")


class ParseError(ValueError):
    """An argument is not a list of distinct 32-bit integers."""


def atol(text: str) -> int:
    """Parse a leading decimal integer, skipping whitespace and one optional sign.

    Text with no digits yields 0.
    """
    match = _LEADING_NUMBER.match(text)
    sign, digits = match.group(1), match.group(2)
    if not digits:
        return 0
    value = int(digits)
    return -value if sign == "-" else value


def is_valid_number(text: str) -> bool:
    """True for an optional sign followed by one or more ASCII digits, nothing else."""
    if not text:
        return False
    return _NUMBER.fullmatch(text) is not None


def is_int_range(text: str) -> bool:
    """True when the number in ``text`` fits in a signed 32-bit integer."""
    return INT_MIN <= atol(text) <= INT_MAX


def parse_args(args: Iterable[str]) -> list[int]:
    """Split each argument on spaces and return all the numbers in order.

    Raises ParseError for an argument with no numbers, a word that is not an
    integer, a number outside the 32-bit range, or a repeated number.
    """
    values: list[int] = []
    seen: set[int] = set()
    for arg in args:
        words = split(arg, " ")
        if not words:
            raise ParseError(f"no numbers in argument {arg!r}")
        for word in words:
            if not is_valid_number(word) or not is_int_range(word):
                raise ParseError(f"not a 32-bit integer: {word!r}")
            value = atol(word)
            if value in seen:
                raise ParseError(f"duplicate number: {value}")
            seen.add(value)
            values.append(value)
    return values