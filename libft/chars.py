"""Classification and case conversion of single ASCII characters.

Every function takes either an integer character code or a string of
length one. The case conversions return a value of the same kind as
they were given.
"""

from __future__ import annotations

from typing import Union

CharLike = Union[int, str]

_UPPER_TO_LOWER = ord("a") - ord("A")


def _code(c: CharLike) -> int:
    """Return the integer code of ``c``."""
    if isinstance(c, str):
        if len(c) != 1:
            raise TypeError(f"expected a single character, got {len(c)} characters")
        return ord(c)
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")
    return c


def _like(original: CharLike, code: int) -> CharLike:
    """Return ``code`` in the same form as ``original``."""
    return chr(code) if isinstance(original, str) else code


def is_alpha(c: CharLike) -> bool:
    """True for the ASCII letters A-Z and a-z."""
    code = _code(c)
    return ord("a") <= code <= ord("z") or ord("A") <= code <= ord("Z")


def is_digit(c: CharLike) -> bool:
    """True for the decimal digits 0-9."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: CharLike) -> bool:
    """True where either :func:`is_alpha` or :func:`is_digit` is true."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: CharLike) -> bool:
    """True for codes 0 through 0o177 inclusive."""
    return 0 <= _code(c) <= 0o177


def is_print(c: CharLike) -> bool:
    """True for printing characters, space included (32 through 126)."""
    return 32 <= _code(c) <= 126


def to_upper(c: CharLike) -> CharLike:
    """Return the upper-case letter for an ASCII lower-case letter, else ``c``."""
    code = _code(c)
    if ord("a") <= code <= ord("z"):
        return _like(c, code - _UPPER_TO_LOWER)
    return c


def to_lower(c: CharLike) -> CharLike:
    """Return the lower-case letter for an ASCII upper-case letter, else ``c``."""
    code = _code(c)
    if ord("A") <= code <= ord("Z"):
        return _like(c, code + _UPPER_TO_LOWER)
    return c