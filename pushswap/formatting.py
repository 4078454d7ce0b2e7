"""A small printf supporting %c %s %d %i %u %x %X %p and %%.

A conversion letter that is not recognised produces nothing and consumes
no argument. A lone ``%`` at the end of the format is written as is.
"""

from __future__ import annotations

import sys
from typing import Any, Iterator, Optional, TextIO

_INT_MAX = 2147483647
_UINT_MASK = 0xFFFFFFFF
_SIZE_MASK = 2**64 - 1


def _as_int32(value: int) -> int:
    value &= _UINT_MASK
    return value - 0x100000000 if value > _INT_MAX else value


def _require_int(value: Any, spec: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"%{spec} expects an integer, got {value!r}")
    return value


def format_hex(number: int, upper: bool = False) -> str:
    """Hexadecimal digits of number taken as a 32-bit unsigned int."""
    value = _require_int(number, "X" if upper else "x") & _UINT_MASK
    return f"{value:X}" if upper else f"{value:x}"


def format_pointer(address: Optional[int]) -> str:
    """An address as ``0x`` and lower-case hex, or ``(nil)`` for a null one."""
    if address is None:
        return "(nil)"
    value = _require_int(address, "p") & _SIZE_MASK
    if value == 0:
        return "(nil)"
    return f"0x{value:x}"


def _char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c expects a single character, got {value!r}")
        return value
    return chr(_require_int(value, "c") & 0xFF)


def _string(value: Any) -> str:
    if value is None:
        return "(null)"
    if not isinstance(value, str):
        raise TypeError(f"%s expects a string, got {value!r}")
    return value.split("\0", 1)[0]


def _convert(spec: str, values: Iterator[Any]) -> str:
    if spec == "%":
        return "%"
    if spec not in "csdiuxXp":
        return ""
    try:
        value = next(values)
    except StopIteration:
        raise TypeError("not enough arguments for format string") from None
    if spec == "c":
        return _char(value)
    if spec == "s":
        return _string(value)
    if spec in "di":
        return str(_as_int32(_require_int(value, spec)))
    if spec == "u":
        return str(_require_int(value, spec) & _UINT_MASK)
    if spec in "xX":
        return format_hex(value, spec == "X")
    return format_pointer(value)


def render(fmt: str, *args: Any) -> str:
    """The text that formatting args with fmt produces."""
    text = fmt.split("\0", 1)[0]
    values = iter(args)
    pieces = []
    chars = iter(text)
    for ch in chars:
        if ch != "%":
            pieces.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            pieces.append("%")
            break
        pieces.append(_convert(spec, values))
    return "".join(pieces)


def printf(fmt: str, *args: Any, stream: Optional[TextIO] = None) -> int:
    """Write the formatted text to stream (standard output by default).

    Returns the number of characters written.
    """
    output = render(fmt, *args)
    (sys.stdout if stream is None else stream).write(output)
    return len(output)