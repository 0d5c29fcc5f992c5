"""Writing characters, strings and numbers to a text stream."""

from __future__ import annotations

import sys
from typing import TextIO


def _target(stream: TextIO | None) -> TextIO:
    return sys.stdout if stream is None else stream


def put_char(c: str, stream: TextIO | None = None) -> None:
    """Write one character."""
    _target(stream).write(c[:1])


def put_str(text: str | None, stream: TextIO | None = None) -> None:
    """Write a string; ``None`` writes nothing."""
    if text is None:
        return
    _target(stream).write(text)


def put_endl(text: str | None, stream: TextIO | None = None) -> None:
    """Write a string followed by a newline; ``None`` writes nothing."""
    if text is None:
        return
    out = _target(stream)
    out.write(text)
    out.write("\n")


def put_number(number: int, stream: TextIO | None = None) -> None:
    """Write an integer in decimal."""
    _target(stream).write(str(number))