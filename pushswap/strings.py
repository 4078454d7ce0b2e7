"""String helpers with NUL-terminated buffer semantics.

Plain Python strings are treated as ending at their first NUL character,
if they hold one. Functions that write into a destination take a buffer:
a mutable list of one-character strings in which ``"\\0"`` marks the end
of the content. Searches return an index into the text, or ``None`` when
nothing is found.
"""

from __future__ import annotations

from typing import Callable, List, MutableSequence, Optional, Union

NUL = "\0"

CharLike = Union[str, int]
Buffer = MutableSequence[str]


def _char(c: CharLike) -> str:
    """Reduce a character or integer code to one character, as a C char would."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected a character or an integer code, got {c!r}")
    return chr(c & 0xFF)


def _content(text: str) -> str:
    """The part of text before its first NUL."""
    end = text.find(NUL)
    return text if end < 0 else text[:end]


def _buffer_length(buffer: Buffer) -> int:
    for index, ch in enumerate(buffer):
        if ch == NUL:
            return index
    return len(buffer)


def _write(buffer: Buffer, offset: int, chars: str) -> None:
    """Write chars followed by a terminator into buffer at offset."""
    buffer[offset:offset + len(chars) + 1] = list(chars) + [NUL]


def strlen(text: str) -> int:
    """Number of characters before the first NUL."""
    return len(_content(text))


def strlcpy(dst: Buffer, src: str, size: int) -> int:
    """Copy at most size - 1 characters of src into dst and terminate it.

    Nothing is written when size is 0. Returns the length of src, so a
    result of size or more means the copy was truncated.
    """
    source = _content(src)
    if size <= 0:
        return len(source)
    _write(dst, 0, source[: size - 1])
    return len(source)


def strlcat(dst: Buffer, src: str, size: int) -> int:
    """Append src to the content of dst so the whole fits in size characters.

    Returns the length the joined text would have had: the length of src
    when size is 0, size plus the length of src when dst already fills
    size, and otherwise the length of dst plus the length of src.
    """
    source = _content(src)
    dst_len = _buffer_length(dst)
    if size <= 0:
        return len(source)
    if size <= dst_len:
        return size + len(source)
    room = size - 1 - dst_len
    _write(dst, dst_len, source[:room])
    return dst_len + len(source)


def strchr(text: str, c: CharLike) -> Optional[int]:
    """Index of the first occurrence of c, or None.

    Searching for NUL finds the terminator, at the end of the content.
    """
    content = _content(text)
    ch = _char(c)
    if ch == NUL:
        return len(content)
    index = content.find(ch)
    return None if index < 0 else index


def strrchr(text: str, c: CharLike) -> Optional[int]:
    """Index of the last occurrence of c, or None.

    Searching for NUL finds the terminator, at the end of the content.
    """
    content = _content(text)
    ch = _char(c)
    if ch == NUL:
        return len(content)
    index = content.rfind(ch)
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most n characters.

    Returns 0 when they match, otherwise the difference between the codes
    of the first characters that differ, the end of a string counting as 0.
    """
    a_text = _content(s1)
    b_text = _content(s2)
    for index in range(max(n, 0)):
        a = ord(a_text[index]) if index < len(a_text) else 0
        b = ord(b_text[index]) if index < len(b_text) else 0
        if a != b or a == 0:
            return a - b
    return 0


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Index of the first needle that lies wholly within the first length characters.

    An empty needle is found at index 0.
    """
    hay = _content(haystack)
    target = _content(needle)
    if not target:
        return 0
    for index in range(min(max(length, 0), len(hay))):
        if index + len(target) > length:
            break
        if hay.startswith(target, index):
            return index
    return None


def strdup(text: str) -> str:
    """A copy of the content of text."""
    return _content(text)


def substr(text: str, start: int, length: int) -> str:
    """At most length characters of text beginning at start.

    A start at or past the end gives an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    content = _content(text)
    if start >= len(content):
        return ""
    return content[start:start + length]


def strjoin(s1: str, s2: str) -> str:
    """The content of s1 followed by the content of s2."""
    if s1 is None or s2 is None:
        raise TypeError("both strings are required")
    return _content(s1) + _content(s2)


def strtrim(text: str, charset: str) -> str:
    """Text with every leading and trailing character found in charset removed."""
    if text is None or charset is None:
        raise TypeError("text and charset are required")
    return _content(text).strip(_content(charset))


def split(text: str, sep: CharLike) -> List[str]:
    """The non-empty pieces of text between occurrences of sep."""
    if text is None:
        raise TypeError("text is required")
    ch = _char(sep)
    content = _content(text)
    if ch == NUL:
        return [content] if content else []
    return [word for word in content.split(ch) if word]


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """A new string made of func(index, char) for each character of text."""
    if text is None or func is None:
        raise TypeError("text and func are required")
    return "".join(func(index, ch) for index, ch in enumerate(_content(text)))


def striteri(buffer: Buffer, func: Callable[[int, str], Optional[str]]) -> None:
    """Call func(index, char) for each character before the terminator.

    A character returned by func replaces the one in the buffer; None
    leaves it as it was.
    """
    if buffer is None or func is None:
        raise TypeError("buffer and func are required")
    for index in range(_buffer_length(buffer)):
        replacement = func(index, buffer[index])
        if replacement is not None:
            buffer[index] = _char(replacement)