"""Integer parsing, validation and formatting."""

from __future__ import annotations

from typing import Optional

INT_MAX = 2147483647
INT_MIN = -2147483648

_WHITESPACE = frozenset(" \t\n\v\f\r")
_DIGITS = frozenset("0123456789")


def _wrap_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 0x100000000 if value > INT_MAX else value


def atoi(text: str) -> int:
    """Parse a leading decimal integer the way a C int would hold it.

    Leading whitespace is skipped, one optional sign is read, then digits
    up to the first non-digit. Text without digits gives 0. Values beyond
    the 32-bit range wrap around in two's complement.
    """
    index = 0
    length = len(text)
    while index < length and text[index] in _WHITESPACE:
        index += 1
    sign = 1
    if index < length and text[index] in "+-":
        if text[index] == "-":
            sign = -1
        index += 1
    start = index
    while index < length and text[index] in _DIGITS:
        index += 1
    digits = text[start:index]
    value = int(digits) if digits else 0
    return _wrap_int32(value * sign)


def is_number(text: Optional[str]) -> bool:
    """True if text is an optional sign followed only by ASCII digits.

    Empty or missing text is not a number; a lone sign is accepted.
    """
    if not text:
        return False
    body = text[1:] if text[0] in "+-" else text
    return all(ch in _DIGITS for ch in body)


def in_int_range(number: int) -> bool:
    """True if number fits in a signed 32-bit int."""
    return INT_MIN <= number <= INT_MAX


def itoa(number: int) -> str:
    """Decimal representation of an integer, with a leading '-' if negative."""
    if isinstance(number, bool) or not isinstance(number, int):
        raise TypeError(f"expected an integer, got {number!r}")
    return str(number)