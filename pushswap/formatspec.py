"""Parsing the flags, width, precision and conversion of a printf directive."""

from __future__ import annotations

from dataclasses import dataclass

from pushswap.chars import is_digit
from pushswap.parsing import atoi

SPECIFIERS = "csdiupxX%"


@dataclass(frozen=True)
class FormatSpec:
    """One conversion directive, as written after the ``%`` sign."""

    sharp: bool = False
    space: bool = False
    plus: bool = False
    width: int = 0
    prec_negative: bool = False
    precision: int = 0
    dot: bool = False
    zero: bool = False
    minus: bool = False
    specifier: str = ""


def _at_stop(text: str, index: int) -> bool:
    return index >= len(text) or text[index] in SPECIFIERS


def parse_spec(text: str) -> FormatSpec:
    """Parse the directive that follows a ``%`` sign, up to its conversion character.

    The conversion character is the first of ``csdiupxX%``; when the text
    ends before one is found the specifier is the empty string.
    """
    sharp = space = plus = minus = zero = False
    width = 0
    width_set = False
    index = 0
    while not _at_stop(text, index) and text[index] != ".":
        ch = text[index]
        previous = text[index - 1] if index > 0 else "%"
        if ch == "-":
            minus = True
        elif ch == "+":
            plus = True
        elif ch == " ":
            space = True
        elif ch == "#":
            sharp = True
        if ch == "0" and not is_digit(previous):
            zero = True
        elif "1" <= ch <= "9" and not width_set:
            width = atoi(text[index:])
            width_set = True
        index += 1

    dot = False
    precision = 0
    if index < len(text) and text[index] == ".":
        dot = True
        precision_set = False
        while not _at_stop(text, index):
            if not precision_set and is_digit(text[index]):
                precision = atoi(text[index:])
                precision_set = True
            index += 1

    if width < 0:
        minus = True
        width = -width

    specifier = text[index] if index < len(text) else ""
    return FormatSpec(
        sharp=sharp,
        space=space,
        plus=plus,
        width=width,
        prec_negative=precision < 0,
        precision=precision,
        dot=dot,
        zero=zero,
        minus=minus,
        specifier=specifier,
    )