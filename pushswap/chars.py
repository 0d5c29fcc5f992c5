"""ASCII character classification and case conversion.

Each function accepts a character code or a one-character string.
Case conversion returns the same kind it was given.
"""

from __future__ import annotations

from typing import TypeVar

_Char = TypeVar("_Char", int, str)


def _code(c: int | str) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    return c


def _same_kind(original: _Char, code: int) -> _Char:
    if isinstance(original, str):
        return chr(code)
    return code


def is_alpha(c: int | str) -> bool:
    """ASCII letter."""
    code = _code(c)
    return 65 <= code <= 90 or 97 <= code <= 122


def is_digit(c: int | str) -> bool:
    """ASCII decimal digit."""
    return 48 <= _code(c) <= 57


def is_alnum(c: int | str) -> bool:
    """ASCII letter or digit."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: int | str) -> bool:
    """Code in the range 0 to 127."""
    return 0 <= _code(c) <= 127


def is_print(c: int | str) -> bool:
    """Printable ASCII, space included."""
    return 32 <= _code(c) <= 126


def to_lower(c: _Char) -> _Char:
    """Lower-case an ASCII upper-case letter; anything else is returned unchanged."""
    code = _code(c)
    if 65 <= code <= 90:
        return _same_kind(c, code + 32)
    return c


def to_upper(c: _Char) -> _Char:
    """Upper-case an ASCII lower-case letter; anything else is returned unchanged."""
    code = _code(c)
    if 97 <= code <= 122:
        return _same_kind(c, code - 32)
    return c