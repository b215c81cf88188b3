"""Byte-buffer operations over mutable buffers such as ``bytearray``.

Operations that write do so in place. Lengths and offsets are checked
against the buffers involved: a negative length raises ``ValueError``
and a span that runs past the end of a buffer raises ``IndexError``.
"""

from __future__ import annotations

from typing import Optional, Union

ReadBuffer = Union[bytes, bytearray, memoryview]
WriteBuffer = Union[bytearray, memoryview]


def _check_span(buf: ReadBuffer, start: int, n: int, name: str) -> None:
    if n < 0:
        raise ValueError(f"length must not be negative, got {n}")
    if start < 0 or start + n > len(buf):
        raise IndexError(
            f"{name}: span [{start}, {start + n}) is outside a buffer of length {len(buf)}"
        )


def bzero(buf: WriteBuffer, n: int) -> None:
    """Write ``n`` zero bytes at the start of ``buf``."""
    _check_span(buf, 0, n, "buf")
    buf[:n] = bytes(n)


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer for ``count`` objects of ``size`` bytes each."""
    if count < 0 or size < 0:
        raise ValueError(f"count and size must not be negative, got {count} and {size}")
    return bytearray(count * size)


def memset(buf: WriteBuffer, value: int, n: int) -> WriteBuffer:
    """Fill the first ``n`` bytes of ``buf`` with ``value`` taken as an unsigned byte."""
    _check_span(buf, 0, n, "buf")
    buf[:n] = bytes((value & 0xFF,)) * n
    return buf


def memcpy(dst: WriteBuffer, src: ReadBuffer, n: int) -> WriteBuffer:
    """Copy the first ``n`` bytes of ``src`` to the start of ``dst``."""
    _check_span(dst, 0, n, "dst")
    _check_span(src, 0, n, "src")
    dst[:n] = bytes(src[:n])
    return dst


def memmove(buf: WriteBuffer, dst: int, src: int, n: int) -> WriteBuffer:
    """Copy ``n`` bytes inside ``buf`` from offset ``src`` to offset ``dst``.

    The two regions may overlap; the copy is non-destructive.
    """
    _check_span(buf, dst, n, "dst")
    _check_span(buf, src, n, "src")
    if dst != src:
        buf[dst:dst + n] = bytes(buf[src:src + n])
    return buf


def memchr(buf: ReadBuffer, value: int, n: int) -> Optional[int]:
    """Return the index of the first byte equal to ``value`` within ``n`` bytes, or None."""
    _check_span(buf, 0, n, "buf")
    index = bytes(buf[:n]).find(value & 0xFF)
    return None if index < 0 else index


def memcmp(a: ReadBuffer, b: ReadBuffer, n: int) -> int:
    """Compare ``n`` bytes; return the difference of the first unequal pair, else 0."""
    _check_span(a, 0, n, "a")
    _check_span(b, 0, n, "b")
    for x, y in zip(bytes(a[:n]), bytes(b[:n])):
        if x != y:
            return x - y
    return 0