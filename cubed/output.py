"""Writing characters, strings and numbers to a text stream."""

from __future__ import annotations

import sys
from typing import TextIO


def _target(stream: TextIO | None) -> TextIO:
    return sys.stdout if stream is None else stream


def put_char(c: str, stream: TextIO | None = None) -> None:
    """Write the single character ``c``."""
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    _target(stream).write(c)


def put_str(s: str | None, stream: TextIO | None = None) -> None:
    """Write ``s``; a missing string writes nothing."""
    if s is None:
        return
    _target(stream).write(s)


def put_endl(s: str | None, stream: TextIO | None = None) -> None:
    """Write ``s`` followed by a newline."""
    out = _target(stream)
    if s is not None:
        out.write(s)
    out.write("\n")


def put_nbr(n: int, stream: TextIO | None = None) -> None:
    """Write the decimal form of the integer ``n``."""
    _target(stream).write(str(int(n)))