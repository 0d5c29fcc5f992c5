"""Decimal text of 32-bit integers."""

from __future__ import annotations

_INT_MIN = -(2**31)
_WORD = 2**32


def itoa(number: int) -> str:
    """Decimal text of ``number`` taken as a signed 32-bit int."""
    return str((number - _INT_MIN) % _WORD + _INT_MIN)


def uitoa(number: int) -> str:
    """Decimal text of ``number`` taken as an unsigned 32-bit int."""
    return str(number % _WORD)