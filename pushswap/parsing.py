"""Parsing and validation of the integers given on the command line."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import pairwise

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_DIGITS = frozenset("0123456789")


class PushSwapError(ValueError):
    """Raised for any invalid input; the command reports it as ``Error``."""


def parse_int(text: str) -> int:
    """Parse a signed decimal integer that must fit in 32 bits.

    Only an optional leading ``+`` or ``-`` followed by ASCII digits is
    accepted: no whitespace, no empty digit part, nothing after the digits.
    """
    sign = 1
    digits = text
    if digits[:1] in ("+", "-"):
        if digits[0] == "-":
            sign = -1
        digits = digits[1:]
    if not digits:
        raise PushSwapError(f"no digits in {text!r}")
    if not set(digits) <= _DIGITS:
        raise PushSwapError(f"not an integer: {text!r}")
    value = sign * int(digits)
    if not INT_MIN <= value <= INT_MAX:
        raise PushSwapError(f"out of range: {text!r}")
    return value


def has_duplicates(values: Iterable[int]) -> bool:
    """Return True if any value occurs more than once."""
    seen: set[int] = set()
    for value in values:
        if value in seen:
            return True
        seen.add(value)
    return False


def is_sorted(values: Iterable[int]) -> bool:
    """Return True if the values are in non-decreasing order."""
    return all(left <= right for left, right in pairwise(values))


def parse_args(args: Sequence[str]) -> list[int]:
    """Parse every argument as an integer and reject duplicates."""
    values = [parse_int(arg) for arg in args]
    if has_duplicates(values):
        raise PushSwapError("duplicate values")
    return values