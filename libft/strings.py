"""Operations on NUL-terminated character strings.

Strings are ordinary ``str`` values and are read up to their first
``"\\0"``, the way a terminated C string would be. Functions that search
return an index into the string, or ``None`` where nothing is found.
Functions that fill a bounded destination return the new contents together
with the length of the string they tried to create.
"""

from __future__ import annotations

from itertools import takewhile
from typing import Optional, Tuple, Union

from libft.chars import is_digit

CharLike = Union[int, str]

_WHITESPACE = "\t\n\r\f\v "


def _cstr(s: str) -> str:
    """Return ``s`` cut at its first NUL character."""
    end = s.find("\0")
    return s if end < 0 else s[:end]


def _char(c: CharLike) -> str:
    """Return ``c`` as a one-character string, taking an int as an unsigned byte."""
    if isinstance(c, str):
        if len(c) != 1:
            raise TypeError(f"expected a single character, got {len(c)} characters")
        return c
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")
    return chr(c & 0xFF)


def _check_size(n: int, name: str) -> None:
    if n < 0:
        raise ValueError(f"{name} must not be negative, got {n}")


def atoi(s: str) -> int:
    """Convert the leading part of ``s`` to an integer.

    Leading whitespace is skipped, one optional sign is read, then decimal
    digits are read up to the first other character. Without digits the
    result is 0.
    """
    text = _cstr(s).lstrip(_WHITESPACE)
    sign = 1
    if text[:1] in ("+", "-"):
        if text[0] == "-":
            sign = -1
        text = text[1:]
    digits = "".join(takewhile(is_digit, text))
    return sign * int(digits) if digits else 0


def itoa(n: int) -> str:
    """Return the decimal representation of ``n``."""
    if n < 0:
        return "-" + itoa(-n)
    return f"{n:d}"


def strlen(s: str) -> int:
    """Return the number of characters before the first NUL."""
    return len(_cstr(s))


def strchr(s: str, c: CharLike) -> Optional[int]:
    """Return the index of the first ``c`` in ``s``, or None.

    Searching for NUL finds the terminator, at index ``strlen(s)``.
    """
    text = _cstr(s)
    ch = _char(c)
    if ch == "\0":
        return len(text)
    index = text.find(ch)
    return None if index < 0 else index


def strrchr(s: str, c: CharLike) -> Optional[int]:
    """Return the index of the last ``c`` in ``s``, or None.

    Searching for NUL finds the terminator, at index ``strlen(s)``.
    """
    text = _cstr(s)
    ch = _char(c)
    if ch == "\0":
        return len(text)
    index = text.rfind(ch)
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters; return -1, 0 or 1."""
    _check_size(n, "n")
    a = _cstr(s1)[:n]
    b = _cstr(s2)[:n]
    for x, y in zip(a, b):
        if x != y:
            return 1 if ord(x) > ord(y) else -1
    if len(a) == len(b):
        return 0
    return 1 if len(a) > len(b) else -1


def strnstr(haystack: str, needle: str, n: int) -> Optional[int]:
    """Return the index of ``needle`` lying wholly within the first ``n`` characters.

    An empty needle is found at index 0.
    """
    _check_size(n, "n")
    hay = _cstr(haystack)
    sought = _cstr(needle)
    if not sought:
        return 0
    index = hay.find(sought, 0, n)
    return None if index < 0 else index


def strlcpy(src: str, dstsize: int) -> Tuple[str, int]:
    """Copy ``src`` into a destination of ``dstsize`` characters, terminator included.

    Returns the copied string and the length of ``src``. A ``dstsize`` of 0
    copies nothing.
    """
    _check_size(dstsize, "dstsize")
    text = _cstr(src)
    if dstsize == 0:
        return "", len(text)
    return text[:dstsize - 1], len(text)


def strlcat(dst: str, src: str, dstsize: int) -> Tuple[str, int]:
    """Append ``src`` to ``dst`` within a destination of ``dstsize`` characters.

    Returns the new destination and the length of the string it tried to
    create. Where ``dst`` is already longer than ``dstsize``, or ``dstsize``
    is 0, nothing is appended and ``len(src) + dstsize`` is returned.
    """
    _check_size(dstsize, "dstsize")
    head = _cstr(dst)
    tail = _cstr(src)
    if len(head) > dstsize or dstsize == 0:
        return head, len(tail) + dstsize
    room = max(0, dstsize - 1 - len(head))
    return head + tail[:room], len(head) + len(tail)