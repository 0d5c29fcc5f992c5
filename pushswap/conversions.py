"""Rendering single values under a parsed printf directive."""

from __future__ import annotations

from pushswap.formatspec import FormatSpec
from pushswap.numbers import itoa, uitoa

_INT_MIN = -(2**31)
_INT_MIN_TEXT = "-2147483648"
_UINT_MASK = 2**32 - 1
_SIZE_MASK = 2**64 - 1


def _int32(value: int) -> int:
    return (value - _INT_MIN) % 2**32 + _INT_MIN


def hex_length(number: int) -> int:
    """Number of hexadecimal digits of a non-negative number; zero has one."""
    if number < 0:
        raise ValueError("number must not be negative")
    return max(1, (number.bit_length() + 3) // 4)


def _as_char(value: int | str) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"expected a single character, got {value!r}")
        return value
    return chr(value & 0xFF)


def format_char(spec: FormatSpec, value: int | str | None = None) -> str:
    """Render a ``%c`` directive; any other specifier renders a ``%`` sign."""
    char = _as_char(value) if spec.specifier == "c" else "%"
    pad = spec.width - 1
    lead = ""
    if not spec.minus and spec.zero:
        lead = "0" * pad
    elif not spec.minus and spec.width > 1:
        lead = " " * pad
    tail = " " * pad if spec.minus and pad > 0 else ""
    return f"{lead}{char}{tail}"


def format_str(spec: FormatSpec, value: str | None) -> str:
    """Render a ``%s`` directive; ``None`` renders as ``(null)`` or nothing."""
    if value is None:
        text = "(null)"
        length = 0 if spec.dot and spec.precision < 6 else 6
        precision = length
    else:
        text = value
        length = len(text)
        precision = spec.precision
    if not spec.dot or precision > length or precision < 0:
        precision = length
    pad = spec.width - precision
    lead = ""
    if (
        not spec.minus
        and spec.width > precision
        and spec.zero
        and (not spec.dot or spec.prec_negative)
    ):
        lead = "0" * pad
    elif not spec.minus and pad > 0:
        lead = " " * pad
    tail = " " * pad if spec.minus and pad > 0 else ""
    return f"{lead}{text[:precision]}{tail}"


def _pad_number(
    spec: FormatSpec,
    digits: str,
    length: int,
    precision: int,
    is_neg: bool,
    plus: bool,
) -> str:
    width = spec.width
    if spec.space and not is_neg and not plus and width:
        width -= 1
    sign = "+" if plus else "-"
    zero_pad = spec.zero and (not spec.dot or spec.prec_negative)
    fill = width - precision - int(is_neg) - int(plus)
    parts: list[str] = []

    if is_neg or plus:
        parts.append(sign * int(zero_pad))
    elif spec.space:
        parts.append(" " * int(spec.zero and not spec.dot))

    if not spec.minus and width > precision:
        parts.append(("0" if zero_pad else " ") * fill)

    if digits != _INT_MIN_TEXT:
        late_sign = not spec.zero or (spec.dot and not spec.prec_negative)
        if is_neg or plus:
            parts.append(sign * int(late_sign))
        elif spec.space:
            parts.append(" " * int(not spec.zero or spec.dot))

    parts.append("0" * (precision - length))
    parts.append(digits[:length])
    if spec.minus and width > precision:
        parts.append(" " * fill)
    return "".join(parts)


def format_int(spec: FormatSpec, value: int) -> str:
    """Render a ``%d``, ``%i`` or ``%u`` directive of a 32-bit value."""
    number = _int32(value)
    unsigned = spec.specifier == "u"
    is_neg = number < 0 and number != _INT_MIN and not unsigned
    plus = spec.plus and not is_neg
    if number < 0 and not unsigned:
        number = _int32(-number)
    digits = uitoa(number) if number < 0 and unsigned else itoa(number)
    length = len(digits)
    if digits[0] == "0" and spec.precision == 0 and spec.dot:
        length = 0
    precision = spec.precision
    if precision < length or not spec.dot:
        precision = length
    return _pad_number(spec, digits, length, precision, is_neg, plus)


def format_hex(spec: FormatSpec, value: int) -> str:
    """Render a ``%x`` or ``%X`` directive of an unsigned 32-bit value."""
    number = value & _UINT_MASK
    prefix = "0x" if spec.specifier == "x" else "0X"
    length = hex_length(number)
    if not number and not spec.precision and spec.dot:
        length = 0
    precision = spec.precision
    if precision < 0 or precision < length or not spec.dot:
        precision = length
    width = spec.width
    parts: list[str] = []
    if spec.sharp and spec.zero and number:
        parts.append(prefix)
    if spec.sharp and number:
        width -= 2
    if not spec.minus and width > precision:
        zero_pad = (not spec.dot or spec.prec_negative) and spec.zero
        parts.append(("0" if zero_pad else " ") * (width - precision))
    if spec.sharp and not spec.zero and number:
        parts.append(prefix)
    parts.append("0" * (precision - length))
    if length:
        parts.append(format(number, "X" if spec.specifier == "X" else "x"))
    if spec.minus and width > precision:
        parts.append(" " * (width - precision))
    return "".join(parts)


def format_pointer(spec: FormatSpec, value: int | None) -> str:
    """Render a ``%p`` directive; a null address renders as ``(nil)``."""
    number = 0 if value is None else value & _SIZE_MASK
    if number == 0:
        pad = " " * (spec.width - 5) if spec.width > 5 else ""
        if spec.minus:
            return f"(nil){pad}"
        return f"{pad}(nil)"
    length = hex_length(number)
    precision = spec.precision
    if precision < length or not spec.dot:
        precision = length
    width = spec.width - 2
    lead = ""
    if not spec.minus and width > precision and not spec.zero:
        lead = " " * (width - precision)
    tail = " " * (width - precision) if spec.minus and width > precision else ""
    return f"{lead}0x{'0' * (precision - length)}{format(number, 'x')}{tail}"


def format_value(spec: FormatSpec, value: object = None) -> str:
    """Render ``value`` according to the specifier of ``spec``.

    ``%%`` renders a plain percent sign; an unknown specifier renders nothing.
    """
    specifier = spec.specifier
    if specifier == "c":
        return format_char(spec, value)
    if specifier == "s":
        return format_str(spec, value)
    if specifier in ("d", "i", "u"):
        return format_int(spec, value)
    if specifier in ("x", "X"):
        return format_hex(spec, value)
    if specifier == "p":
        return format_pointer(spec, value)
    if specifier == "%":
        return "%"
    return ""