"""A small printf supporting the ``csdiupxX%`` conversions with flags, width and precision."""

from __future__ import annotations

import sys
from collections.abc import Iterator

from pushswap.chars import is_digit
from pushswap.conversions import format_value
from pushswap.formatspec import SPECIFIERS, parse_spec

_FLAGS = "-+ #0"


class PrintfError(ValueError):
    """The format string cannot be rendered with the arguments given."""


def validate_format(text: str) -> bool:
    """Return True if ``text`` starts with a well-formed directive.

    A directive is ``%``, any flags, an optional width, an optional ``.``
    and precision, then a conversion character. Reaching the end of the
    text where the conversion character belongs also counts as well formed.
    """
    if not text.startswith("%"):
        return False
    index = 1
    length = len(text)
    while index < length and text[index] in _FLAGS:
        index += 1
    while index < length and is_digit(text[index]):
        index += 1
    if index < length and text[index] == ".":
        index += 1
        while index < length and is_digit(text[index]):
            index += 1
    return index >= length or text[index] in SPECIFIERS


def _render(fmt: str, args: tuple[object, ...]) -> Iterator[str]:
    values = iter(args)
    index = 0
    length = len(fmt)
    while index < length:
        if fmt[index] != "%":
            end = fmt.find("%", index)
            if end < 0:
                end = length
            yield fmt[index:end]
            index = end
            continue
        if not validate_format(fmt[index:]):
            yield "%"
            index += 1
            continue
        index += 1
        if index >= length:
            raise PrintfError("format ends with a lone '%'")
        rest = fmt[index:]
        spec = parse_spec(rest)
        value: object = None
        if spec.specifier not in ("", "%"):
            try:
                value = next(values)
            except StopIteration:
                raise PrintfError(
                    f"no argument left for directive %{rest[:1]}"
                ) from None
        yield format_value(spec, value)
        stop = next(
            (pos for pos, ch in enumerate(rest) if ch in SPECIFIERS), None
        )
        index = length if stop is None else index + stop + 1


def sprintf(fmt: str, *args: object) -> str:
    """Return ``fmt`` with its directives replaced by the rendered arguments.

    Raises ``PrintfError`` when the format ends with a lone ``%`` or when
    an argument is missing.
    """
    return "".join(_render(fmt, args))


def printf(fmt: str, *args: object) -> int:
    """Write the rendered format to standard output and return its length.

    Text rendered before an error has already been written when
    ``PrintfError`` is raised.
    """
    total = 0
    out = sys.stdout
    for piece in _render(fmt, args):
        out.write(piece)
        total += len(piece)
    return total