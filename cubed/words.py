"""Splitting, trimming and slicing of strings."""

from __future__ import annotations


def split(s: str, sep: str) -> list[str]:
    """Split ``s`` on the character ``sep``, dropping empty words."""
    return [word for word in s.split(sep) if word]


def strtrim(s: str, chars: str) -> str:
    """Remove every leading and trailing character that occurs in ``chars``."""
    return s.strip(chars)


def substr(s: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``s`` from ``start``.

    A start beyond the end yields an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start > len(s):
        return ""
    return s[start:start + length]