"""Validation of the numbers given on the command line."""

from __future__ import annotations

from typing import Iterable

from .numbers import atoi, in_int_range, is_number


def check_input(text: str) -> bool:
    """True if text is acceptable as one stack value.

    The text must be an optional sign followed only by digits, and its
    value, read as a 32-bit int, must lie in the int range.
    """
    return is_number(text) and in_int_range(atoi(text))


def has_duplicates(args: Iterable[str]) -> bool:
    """True if two of the number strings denote the same int value.

    Values are compared after parsing, so "1", "+1" and "01" are equal.
    """
    seen = set()
    for text in args:
        value = atoi(text)
        if value in seen:
            return True
        seen.add(value)
    return False