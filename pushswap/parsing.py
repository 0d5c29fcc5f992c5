"""Reading the numbers given on the command line."""

from __future__ import annotations

from collections.abc import Iterable

INT_MAX = 2**31 - 1
INT_MIN = -(2**31)
LONG_MAX = 2**63 - 1

_WHITESPACE = " \t\n\v\f\r"


class ParseError(ValueError):
    """The arguments do not form a list of integers."""


def is_valid_number(text: str) -> bool:
    """Return True if ``text`` is an optionally signed decimal that fits a 32-bit int."""
    if not text:
        return False
    sign = 1
    digits = text
    if digits[0] in "+-":
        if digits[0] == "-":
            sign = -1
        digits = digits[1:]
    if not digits:
        return False
    limit = INT_MAX if sign == 1 else INT_MAX + 1
    value = 0
    for ch in digits:
        if not "0" <= ch <= "9":
            return False
        value = value * 10 + (ord(ch) - ord("0"))
        if value > limit:
            return False
    return True


def split_words(text: str, separator: str) -> list[str]:
    """Split on a single separator character, dropping empty words."""
    return [word for word in text.split(separator) if word]


def _to_int32(value: int) -> int:
    return (value - INT_MIN) % 2**32 + INT_MIN


def atoi(text: str) -> int:
    """Convert the leading integer of ``text`` the way C's ``atoi`` does.

    Leading whitespace and one sign are allowed; conversion stops at the
    first non-digit. A magnitude beyond the range of a 64-bit long gives -1;
    otherwise the result is truncated to 32 bits.
    """
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    result = 0
    for ch in rest:
        if not "0" <= ch <= "9":
            break
        digit = ord(ch) - ord("0")
        if result > LONG_MAX // 10 or (
            result == LONG_MAX // 10 and digit > LONG_MAX % 10
        ):
            return -1
        result = result * 10 + digit
    return _to_int32(result * sign)


def parse_arguments(args: Iterable[str]) -> list[int]:
    """Turn command-line arguments, each holding space-separated numbers, into ints.

    Raises ``ParseError`` on any malformed or out-of-range number, and when
    no number is given at all.
    """
    numbers: list[int] = []
    for arg in args:
        for word in split_words(arg, " "):
            if not is_valid_number(word):
                raise ParseError(f"not a valid integer: {word!r}")
            numbers.append(atoi(word))
    if not numbers:
        raise ParseError("no numbers given")
    return numbers


def has_duplicates(values: Iterable[int]) -> bool:
    """Return True if any value occurs more than once."""
    seen: set[int] = set()
    for value in values:
        if value in seen:
            return True
        seen.add(value)
    return False