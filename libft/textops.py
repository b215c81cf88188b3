"""Building new strings from existing ones: copies, slices, joins, trims and splits.

Strings are read up to their first ``"\\0"``, the way a terminated C string
would be. Every function returns a new value and leaves its arguments alone,
except :func:`striteri`, which rewrites a mutable buffer in place.
"""

from __future__ import annotations

from itertools import groupby
from typing import Callable, List, MutableSequence, Optional, Union

BufferItem = Union[int, str]


def _cstr(s: str) -> str:
    """Return ``s`` cut at its first NUL character."""
    end = s.find("\0")
    return s if end < 0 else s[:end]


def _is_terminator(item: BufferItem) -> bool:
    return item == "\0" or item == 0


def strdup(s: str) -> str:
    """Return a copy of ``s``."""
    return _cstr(s)


def substr(s: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``s`` starting at index ``start``.

    A ``start`` past the end of ``s`` gives the empty string.
    """
    if start < 0:
        raise ValueError(f"start must not be negative, got {start}")
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    text = _cstr(s)
    if start > len(text):
        return ""
    return text[start:start + length]


def strjoin(s1: str, s2: str) -> str:
    """Return the concatenation of ``s1`` and ``s2``."""
    return _cstr(s1) + _cstr(s2)


def strtrim(s: str, charset: Optional[str]) -> str:
    """Return ``s`` with the characters in ``charset`` removed from both ends.

    A ``charset`` of None or the empty string removes nothing.
    """
    text = _cstr(s)
    if charset is None:
        return text
    chars = _cstr(charset)
    if not chars:
        return text
    return text.strip(chars)


def split(s: str, delimiters: str) -> List[str]:
    """Split ``s`` at every run of characters found in ``delimiters``.

    Empty pieces are dropped, so leading, trailing and repeated delimiters
    produce no empty strings.
    """
    text = _cstr(s)
    delims = frozenset(_cstr(delimiters))
    return [
        "".join(chars)
        for is_delimiter, chars in groupby(text, key=delims.__contains__)
        if not is_delimiter
    ]


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """Return the string made of ``f(index, char)`` for every character of ``s``."""
    return "".join(f(index, ch) for index, ch in enumerate(_cstr(s)))


def striteri(
    buf: MutableSequence[BufferItem],
    f: Callable[[int, BufferItem], Optional[BufferItem]],
) -> None:
    """Call ``f(index, item)`` for each item of ``buf`` up to a terminator.

    ``buf`` is a mutable sequence such as a list of characters or a
    ``bytearray``; a ``"\\0"`` or ``0`` item ends it. Where ``f`` returns
    something other than None, that value replaces the item in place.
    """
    for index, item in enumerate(buf):
        if _is_terminator(item):
            break
        replacement = f(index, item)
        if replacement is not None:
            buf[index] = replacement