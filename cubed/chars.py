"""Character classification, case mapping and integer/text conversion."""

from __future__ import annotations

_WHITESPACE = " \t\n\v\f\r"


def _code(c: int | str) -> int:
    """Return the integer code of a one-character string or pass an int through."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    return c


def _wrap(value: int, bits: int) -> int:
    """Wrap ``value`` into a signed two's-complement integer of ``bits`` bits."""
    mask = (1 << bits) - 1
    value &= mask
    if value >> (bits - 1):
        value -= 1 << bits
    return value


def _parse_int(text: str) -> int:
    """Parse leading whitespace, an optional sign and a run of digits."""
    stripped = text.lstrip(_WHITESPACE)
    negative = False
    if stripped[:1] in ("+", "-"):
        negative = stripped[0] == "-"
        stripped = stripped[1:]
    digits = []
    for ch in stripped:
        if not "0" <= ch <= "9":
            break
        digits.append(ch)
    value = int("".join(digits)) if digits else 0
    return -value if negative else value


def atoi(text: str) -> int:
    """Convert the leading integer in ``text``, wrapped to a 32-bit int."""
    return _wrap(_parse_int(text), 32)


def atoi_long(text: str) -> int:
    """Convert the leading integer in ``text``, wrapped to a 64-bit int."""
    return _wrap(_parse_int(text), 64)


def atoi_long_long(text: str) -> int:
    """Convert the leading integer in ``text``, wrapped to a 64-bit int."""
    return _wrap(_parse_int(text), 64)


def itoa(n: int) -> str:
    """Return the decimal representation of ``n``."""
    return str(int(n))


def is_alpha(c: int | str) -> bool:
    """True for ASCII letters."""
    code = _code(c)
    return 65 <= code <= 90 or 97 <= code <= 122


def is_digit(c: int | str) -> bool:
    """True for ASCII decimal digits."""
    return 48 <= _code(c) <= 57


def is_alnum(c: int | str) -> bool:
    """True for ASCII letters and digits."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: int | str) -> bool:
    """True for codes 0 through 127."""
    return 0 <= _code(c) <= 127


def is_print(c: int | str) -> bool:
    """True for printable ASCII, space through tilde."""
    return 32 <= _code(c) <= 126


def in_charset(c: str, charset: str | None) -> bool:
    """True if the character ``c`` occurs in ``charset``.

    The NUL character never matches, and a missing charset matches nothing.
    """
    if not charset or len(c) != 1 or c == "\0":
        return False
    return c in charset


def to_lower(c: int | str) -> int | str:
    """Map an ASCII upper-case letter to lower case; other values are unchanged."""
    code = _code(c)
    if 65 <= code <= 90:
        code += 32
    return chr(code) if isinstance(c, str) else code


def to_upper(c: int | str) -> int | str:
    """Map an ASCII lower-case letter to upper case; other values are unchanged."""
    code = _code(c)
    if 97 <= code <= 122:
        code -= 32
    return chr(code) if isinstance(c, str) else code