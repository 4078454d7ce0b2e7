"""Raw byte-buffer helpers.

Buffers are ``bytearray`` objects (or writable ``memoryview``s). Read-only
arguments may be any bytes-like object. Reads or writes past the end of a
buffer raise ``ValueError`` rather than touching memory that is not there.
"""

from __future__ import annotations

from typing import Optional, Union

SIZE_MAX = 2**64 - 1

BytesLike = Union[bytes, bytearray, memoryview]
WritableBuffer = Union[bytearray, memoryview]


def _check_count(n: int) -> None:
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an integer byte count, got {n!r}")
    if n < 0:
        raise ValueError("byte count must not be negative")


def _check_span(data: BytesLike, offset: int, n: int, what: str) -> None:
    if offset < 0 or offset + n > len(data):
        raise ValueError(
            f"{what} holds {len(data)} bytes; cannot access {n} bytes at offset {offset}"
        )


def bzero(buffer: WritableBuffer, n: int) -> None:
    """Set the first n bytes of buffer to zero."""
    _check_count(n)
    _check_span(buffer, 0, n, "buffer")
    buffer[:n] = bytes(n)


def calloc(count: int, size: int) -> bytearray:
    """A zero-filled buffer for count elements of size bytes each.

    Raises OverflowError when count * size does not fit in a size_t.
    """
    _check_count(count)
    _check_count(size)
    if count != 0 and size > SIZE_MAX // count:
        raise OverflowError("count * size overflows the address space")
    return bytearray(count * size)


def memset(buffer: WritableBuffer, value: int, n: int) -> WritableBuffer:
    """Fill the first n bytes of buffer with the low byte of value."""
    _check_count(n)
    _check_span(buffer, 0, n, "buffer")
    buffer[:n] = bytes([value & 0xFF]) * n
    return buffer


def memcpy(dest: Optional[WritableBuffer], src: Optional[BytesLike], n: int) -> Optional[WritableBuffer]:
    """Copy the first n bytes of src to the start of dest.

    When both are missing nothing happens and None is returned.
    """
    if dest is None and src is None:
        return None
    if dest is None or src is None:
        raise TypeError("dest and src are both required")
    _check_count(n)
    _check_span(src, 0, n, "src")
    _check_span(dest, 0, n, "dest")
    dest[:n] = bytes(src[:n])
    return dest


def memmove(buffer: WritableBuffer, dest: int, src: int, n: int) -> WritableBuffer:
    """Copy n bytes inside buffer from offset src to offset dest.

    The regions may overlap; the result is as if the source bytes were
    first copied aside.
    """
    _check_count(n)
    _check_span(buffer, src, n, "buffer")
    _check_span(buffer, dest, n, "buffer")
    buffer[dest:dest + n] = bytes(buffer[src:src + n])
    return buffer


def memchr(data: BytesLike, value: int, n: int) -> Optional[int]:
    """Index of the first byte equal to the low byte of value among the first n, or None."""
    _check_count(n)
    _check_span(data, 0, n, "data")
    index = bytes(data[:n]).find(value & 0xFF)
    return None if index < 0 else index


def memcmp(s1: BytesLike, s2: BytesLike, n: int) -> int:
    """Compare the first n bytes.

    Returns 0 when they match, otherwise the difference between the first
    pair of bytes that differ, each read as unsigned.
    """
    _check_count(n)
    _check_span(s1, 0, n, "s1")
    _check_span(s2, 0, n, "s2")
    for a, b in zip(bytes(s1[:n]), bytes(s2[:n])):
        if a != b:
            return a - b
    return 0