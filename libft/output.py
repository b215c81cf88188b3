"""Writing characters, strings and numbers straight to a file descriptor."""

from __future__ import annotations

import os
from typing import Optional, Union

from libft.strings import itoa

CharLike = Union[int, str]


def _write_all(fd: int, data: bytes) -> None:
    view = memoryview(data)
    while view:
        written = os.write(fd, view)
        view = view[written:]


def _encode_char(c: CharLike) -> bytes:
    if isinstance(c, str):
        if len(c) != 1:
            raise TypeError(f"expected a single character, got {len(c)} characters")
        return c.encode("utf-8")
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")
    return bytes((c & 0xFF,))


def putchar_fd(c: CharLike, fd: int) -> None:
    """Write the character ``c`` to ``fd``; an int is written as one byte."""
    _write_all(fd, _encode_char(c))


def putstr_fd(s: Optional[str], fd: int) -> None:
    """Write ``s`` up to its first NUL to ``fd``; None writes nothing."""
    if s is None:
        return
    end = s.find("\0")
    text = s if end < 0 else s[:end]
    _write_all(fd, text.encode("utf-8"))


def putendl_fd(s: Optional[str], fd: int) -> None:
    """Write ``s`` followed by a newline to ``fd``."""
    putstr_fd(s, fd)
    putchar_fd("\n", fd)


def putnbr_fd(n: int, fd: int) -> None:
    """Write the decimal representation of ``n`` to ``fd``."""
    _write_all(fd, itoa(n).encode("ascii"))