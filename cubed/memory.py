"""Byte-buffer operations on mutable byte sequences."""

from __future__ import annotations

from collections.abc import Sequence


def _check_length(buffer: Sequence[int], n: int, end: int = 0) -> None:
    if n < 0:
        raise ValueError("length must not be negative")
    if end + n > len(buffer):
        raise IndexError("range exceeds buffer size")


def bzero(buffer: bytearray | None, n: int) -> None:
    """Set the first ``n`` bytes of ``buffer`` to zero."""
    if buffer is None:
        return
    _check_length(buffer, n)
    buffer[:n] = bytes(n)


def memset(buffer: bytearray | None, value: int, n: int) -> bytearray | None:
    """Fill the first ``n`` bytes of ``buffer`` with ``value`` and return it."""
    if buffer is None:
        return None
    _check_length(buffer, n)
    buffer[:n] = bytes([value & 0xFF]) * n
    return buffer


def memcpy(dest: bytearray | None, src: Sequence[int] | None,
           n: int) -> bytearray | None:
    """Copy the first ``n`` bytes of ``src`` into ``dest`` and return ``dest``."""
    if dest is None or src is None:
        return None
    _check_length(dest, n)
    _check_length(src, n)
    dest[:n] = bytes(src[:n])
    return dest


def memmove(buffer: bytearray | None, dest: int, src: int,
            n: int) -> bytearray | None:
    """Move ``n`` bytes inside ``buffer`` from offset ``src`` to offset ``dest``.

    The regions may overlap; the result is as if the source were copied first.
    """
    if buffer is None:
        return None
    if dest < 0 or src < 0:
        raise ValueError("offsets must not be negative")
    _check_length(buffer, n, src)
    _check_length(buffer, n, dest)
    buffer[dest:dest + n] = bytes(buffer[src:src + n])
    return buffer


def memchr(data: Sequence[int] | None, c: int, n: int) -> int | None:
    """Return the index of the first byte equal to ``c`` among the first ``n``."""
    if data is None:
        return None
    _check_length(data, n)
    target = c & 0xFF
    return next((i for i, byte in enumerate(data[:n]) if byte == target), None)


def memcmp(a: Sequence[int] | None, b: Sequence[int] | None, n: int) -> int:
    """Compare the first ``n`` bytes; return the difference at the first mismatch."""
    if a is None or b is None or n == 0:
        return 0
    _check_length(a, n)
    _check_length(b, n)
    for x, y in zip(a[:n], b[:n]):
        if x != y:
            return x - y
    return 0