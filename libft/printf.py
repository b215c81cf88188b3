"""A small formatter for the conversions ``%d %i %c %x %X %u %s %p %%``.

Each ``format_*`` function renders one value. :func:`sprintf` returns the
whole formatted text. :func:`printf` writes it to standard output and
returns the number of characters it wrote.

Any other character after ``%`` produces a single ``%``; that character is
dropped and no argument is used. Numbers are taken the way a C variadic call
would receive them: ``%d``/``%i`` as a signed 32-bit int, ``%u``/``%x``/``%X``
as an unsigned 32-bit int, and ``%p`` as an unsigned 64-bit address.
"""

from __future__ import annotations

import operator
import os
import sys
from typing import Any, Callable, Dict, Iterable, Optional, Union

CharLike = Union[int, str]

_UINT32 = 1 << 32
_UINT64_MASK = (1 << 64) - 1


def _cstr(s: str) -> str:
    """Return ``s`` cut at its first NUL character."""
    end = s.find("\0")
    return s if end < 0 else s[:end]


def _as_int32(n: Any) -> int:
    value = operator.index(n) % _UINT32
    return value - _UINT32 if value >= _UINT32 // 2 else value


def _as_uint32(n: Any) -> int:
    return operator.index(n) % _UINT32


def format_char(c: CharLike) -> str:
    """Render one character; an int is taken as an unsigned byte."""
    if isinstance(c, str):
        if len(c) != 1:
            raise TypeError(f"expected a single character, got {len(c)} characters")
        return c
    return chr(operator.index(c) & 0xFF)


def format_decimal(n: int) -> str:
    """Render ``n`` as a signed 32-bit decimal number."""
    return str(_as_int32(n))


def format_unsigned(n: int) -> str:
    """Render ``n`` as an unsigned 32-bit decimal number."""
    return str(_as_uint32(n))


def format_hex_lower(n: int) -> str:
    """Render ``n`` as an unsigned 32-bit number in lower-case hexadecimal."""
    return f"{_as_uint32(n):x}"


def format_hex_upper(n: int) -> str:
    """Render ``n`` as an unsigned 32-bit number in upper-case hexadecimal."""
    return f"{_as_uint32(n):X}"


def format_pointer(n: Optional[int]) -> str:
    """Render an address as ``0x`` followed by lower-case hexadecimal; None is ``0x0``."""
    address = 0 if n is None else operator.index(n) & _UINT64_MASK
    return f"0x{address:x}"


def format_str(s: Optional[str]) -> str:
    """Render ``s`` up to its first NUL; None renders as ``(null)``."""
    if s is None:
        return "(null)"
    if not isinstance(s, str):
        raise TypeError(f"expected a str or None, got {type(s).__name__}")
    return _cstr(s)


_CONVERSIONS: Dict[str, Callable[[Any], str]] = {
    "d": format_decimal,
    "i": format_decimal,
    "c": format_char,
    "x": format_hex_lower,
    "X": format_hex_upper,
    "u": format_unsigned,
    "s": format_str,
    "p": format_pointer,
}


def _render(fmt: str, args: Iterable[Any]) -> str:
    values = iter(args)
    chars = iter(_cstr(fmt))
    pieces = []
    for ch in chars:
        if ch != "%":
            pieces.append(ch)
            continue
        spec = next(chars, None)
        convert = _CONVERSIONS.get(spec) if spec is not None else None
        if convert is None:
            pieces.append("%")
            continue
        try:
            value = next(values)
        except StopIteration:
            raise TypeError("not enough arguments for format string") from None
        pieces.append(convert(value))
    return "".join(pieces)


def sprintf(fmt: str, *args: Any) -> str:
    """Return ``fmt`` with its conversions replaced by the rendered ``args``."""
    return _render(fmt, args)


def printf(fmt: str, *args: Any) -> int:
    """Write the formatted text to standard output; return its length in characters."""
    text = _render(fmt, args)
    sys.stdout.flush()
    view = memoryview(text.encode("utf-8"))
    while view:
        written = os.write(1, view)
        view = view[written:]
    return len(text)