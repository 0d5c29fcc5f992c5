"""Searching and comparing strings with C string semantics.

A string ends at its first NUL character, if it holds one.
"""

from __future__ import annotations

_NUL = "\0"


def _cstr(text: str) -> str:
    return text.split(_NUL, 1)[0]


def has_char(text: str | None, target: str) -> bool:
    """Return True if ``target`` occurs in ``text``; ``None`` holds nothing."""
    if text is None or target == _NUL:
        return False
    return target in _cstr(text)


def find_char(text: str, c: str) -> int | None:
    """Index of the first ``c``; the NUL character is found at the end."""
    body = _cstr(text)
    if c == _NUL:
        return len(body)
    index = body.find(c)
    return None if index < 0 else index


def rfind_char(text: str, c: str) -> int | None:
    """Index of the last ``c``; the NUL character is found at the end."""
    body = _cstr(text)
    if c == _NUL:
        return len(body)
    index = body.rfind(c)
    return None if index < 0 else index


def find_substring(text: str, target: str, limit: int) -> int | None:
    """Index of the first ``target`` lying wholly within the first ``limit`` characters."""
    needle = _cstr(target)
    if not needle:
        return 0
    body = _cstr(text)
    for pos in range(len(body)):
        if limit - pos < len(needle):
            break
        if body.startswith(needle, pos):
            return pos
    return None


def compare(first: str, second: str, n: int) -> int:
    """Compare at most ``n`` characters; return the difference of the first unequal pair."""
    left, right = _cstr(first), _cstr(second)
    for i in range(n):
        ca = ord(left[i]) if i < len(left) else 0
        cb = ord(right[i]) if i < len(right) else 0
        if ca != cb or ca == 0 or i == n - 1:
            return ca - cb
    return 0