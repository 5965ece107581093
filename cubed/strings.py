"""String searching, comparison, copying and mapping helpers."""

from __future__ import annotations

from collections.abc import Callable, Iterable, MutableSequence
from itertools import takewhile


def strlen(s: str | None) -> int:
    """Return the length of ``s``; a missing string has length zero."""
    return 0 if s is None else len(s)


def strchr(s: str | None, c: str) -> int | None:
    """Return the index of the first ``c`` in ``s``, or None.

    Searching for the NUL character yields the position just past the end.
    """
    if s is None:
        return None
    if c == "\0":
        return len(s)
    index = s.find(c)
    return None if index < 0 else index


def strrchr(s: str | None, c: str) -> int | None:
    """Return the index of the last ``c`` in ``s``, or None.

    Searching for the NUL character yields the position just past the end.
    """
    if s is None:
        return None
    if c == "\0":
        return len(s)
    index = s.rfind(c)
    return None if index < 0 else index


def strncmp(s1: str | None, s2: str | None, n: int) -> int:
    """Compare at most ``n`` characters of two strings.

    Returns the code difference at the first mismatch, a string's end
    counting as code zero, and 0 when the compared parts are equal or
    either string is missing.
    """
    if s1 is None or s2 is None or n <= 0:
        return 0
    for i in range(n):
        a = ord(s1[i]) if i < len(s1) else 0
        b = ord(s2[i]) if i < len(s2) else 0
        if a != b or a == 0:
            return a - b
    return 0


def strnstr(big: str | None, little: str, length: int) -> int | None:
    """Return the index of ``little`` lying wholly in the first ``length``
    characters of ``big``, or None.

    An empty ``little`` is found at index 0.
    """
    if big is None:
        return None
    if not little:
        return 0
    index = big.find(little, 0, max(0, min(length, len(big))))
    return None if index < 0 else index


def strdup(s: str | None) -> str | None:
    """Return a copy of ``s``, or None when ``s`` is missing."""
    return None if s is None else str(s)


def strjoin(s1: str | None, s2: str | None) -> str | None:
    """Concatenate two strings; None if either is missing."""
    if s1 is None or s2 is None:
        return None
    return s1 + s2


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` slots, one kept for the terminator.

    Returns the copied text and the full length of ``src``.
    """
    if size <= 0:
        return "", len(src)
    return src[: size - 1], len(src)


def strlcat(dst: str | None, src: str, size: int) -> tuple[str | None, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` slots.

    Returns the resulting text and the length the full concatenation would
    have. When ``dst`` already fills the buffer it is left unchanged and the
    length reported is ``size + len(src)``.
    """
    if dst is None:
        return None, size + len(src)
    used = min(len(dst), max(size, 0))
    if size > 0 and used < size:
        room = size - used - 1
        return dst + src[:room], len(dst) + len(src)
    return dst, size + len(src)


def strmapi(s: str | None, f: Callable[[int, str], str] | None) -> str | None:
    """Build a new string from ``f(index, char)`` for each character of ``s``."""
    if s is None or f is None:
        return None
    return "".join(f(i, ch) for i, ch in enumerate(s))


def striteri(s: MutableSequence[str] | None,
             f: Callable[[int, str], str | None] | None) -> None:
    """Call ``f(index, char)`` on each element of ``s`` in place.

    A value returned by ``f`` replaces the element; None leaves it as is.
    """
    if s is None or f is None:
        return
    for i, ch in enumerate(list(s)):
        result = f(i, ch)
        if result is not None:
            s[i] = result


def tab_size(tab: Iterable[object] | None) -> int:
    """Count the entries of ``tab`` that come before the first None."""
    if tab is None:
        return 0
    return sum(1 for _ in takewhile(lambda item: item is not None, tab))