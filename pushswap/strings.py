"""Building new strings from existing ones: joining, copying, trimming and slicing."""

from __future__ import annotations

from collections.abc import Callable, MutableSequence


def join(first: str, second: str) -> str:
    """Return ``first`` followed by ``second``."""
    return f"{first}{second}"


def join_buffer(buffer: str | None, chunk: str) -> str:
    """Append ``chunk`` to an accumulating buffer; ``None`` is an empty buffer."""
    return join("" if buffer is None else buffer, chunk)


def iter_indexed(
    chars: MutableSequence[str],
    func: Callable[[int, str], str | None],
) -> None:
    """Call ``func(index, char)`` for every element of ``chars``, in order.

    When ``func`` returns a value other than ``None`` it replaces the element
    in place, so the function can edit the sequence it is walking.
    """
    for index, char in enumerate(chars):
        replacement = func(index, char)
        if replacement is not None:
            chars[index] = replacement


def map_indexed(text: str, func: Callable[[int, str], str]) -> str:
    """Return a new string made of ``func(index, char)`` for every character."""
    return "".join(func(index, char) for index, char in enumerate(text))


def bounded_copy(source: str, size: int) -> tuple[str, int]:
    """Copy ``source`` into a buffer of ``size`` characters, terminator included.

    Returns the text that fits and the length of ``source``; a length not
    less than ``size`` means the copy was truncated.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    if size == 0:
        return "", len(source)
    return source[: size - 1], len(source)


def bounded_concat(dest: str, source: str, size: int) -> tuple[str, int]:
    """Append ``source`` to ``dest`` within a buffer of ``size`` characters.

    Returns the resulting text and the length the full concatenation would
    have had. When ``dest`` already fills the buffer it is left as it is and
    the length reported is ``size`` plus the length of ``source``.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    dest_len = len(dest)
    if size <= dest_len:
        return dest, len(source) + size
    room = size - dest_len - 1
    return dest + source[:room], dest_len + len(source)


def trim(text: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``text``."""
    if not charset:
        return text
    return text.strip(charset)


def substring(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` starting at ``start``.

    A start at or past the end gives an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(text):
        return ""
    return text[start : start + length]