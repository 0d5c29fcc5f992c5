import pytest

from pushswap.conversions import (
    format_char,
    format_hex,
    format_int,
    format_pointer,
    format_str,
    format_value,
    hex_length,
)
from pushswap.formatspec import parse_spec


def fmt(spec_text, value=None):
    return format_value(parse_spec(spec_text), value)


@pytest.mark.parametrize(
    "spec_text, value",
    [
        ("d", 42),
        ("d", -42),
        ("d", 0),
        ("i", 123),
        ("5d", 42),
        ("-5d", 42),
        ("05d", -42),
        ("-05d", 42),
        ("+d", 5),
        ("+5d", 42),
        ("+05d", 42),
        (" d", 5),
        (" 5d", 42),
        (".3d", 7),
        (".3d", -7),
        ("8.3d", -7),
        ("12d", -2147483648),
        ("u", 7),
        ("x", 255),
        ("X", 255),
        ("#x", 255),
        ("#X", 255),
        ("#08x", 255),
        ("8.4x", 255),
        ("5x", 255),
        ("-5x", 255),
        ("05X", 255),
        ("s", "hello"),
        ("10s", "hello"),
        ("-10s", "hello"),
        (".2s", "hello"),
        ("10.2s", "hello"),
        ("c", "A"),
        ("3c", "A"),
        ("-3c", "A"),
    ],
)
def test_matches_standard_printf(spec_text, value):
    assert fmt(spec_text, value) == ("%" + spec_text) % value


def test_int_min_is_printed_whole():
    assert fmt("d", -2147483648) == "-2147483648"


def test_int_wraps_to_32_bits():
    assert fmt("d", 2**32 + 5) == fmt("d", 5)


def test_unsigned_shows_negative_as_wrapped():
    assert fmt("u", -1) == "%u" % (2**32 - 1)


def test_hex_shows_negative_as_wrapped():
    assert fmt("x", -1) == "%x" % (2**32 - 1)


def test_zero_with_zero_precision_prints_no_digits():
    assert fmt(".0d", 0) == ""


def test_sharp_has_no_prefix_for_zero():
    assert fmt("#x", 0) == "0"


def test_null_string_is_shown():
    assert format_str(parse_spec("s"), None) == "(null)"


def test_null_string_with_short_precision_is_empty():
    assert format_str(parse_spec(".3s"), None) == ""


def test_null_pointer_is_nil():
    assert format_pointer(parse_spec("p"), 0) == "(nil)"
    assert format_pointer(parse_spec("p"), None) == "(nil)"


def test_null_pointer_padding_keeps_nil_at_edge():
    right = format_pointer(parse_spec("9p"), None)
    left = format_pointer(parse_spec("-9p"), None)
    assert len(right) == 9 and right.endswith("(nil)")
    assert len(left) == 9 and left.startswith("(nil)")


def test_pointer_has_hex_prefix():
    assert format_pointer(parse_spec("p"), 255) == "0x" + format(255, "x")


def test_pointer_width_includes_prefix():
    out = format_pointer(parse_spec("10p"), 255)
    assert len(out) == 10
    assert out.strip() == "0xff"


def test_pointer_left_aligned():
    out = format_pointer(parse_spec("-10p"), 4096)
    assert len(out) == 10
    assert out.startswith("0x1000")


@pytest.mark.parametrize("number", [0, 1, 15, 16, 255, 256, 2**32 - 1, 2**64 - 1])
def test_hex_length_counts_digits(number):
    assert hex_length(number) == len(format(number, "x"))


def test_hex_length_rejects_negative():
    with pytest.raises(ValueError):
        hex_length(-1)


def test_char_from_code():
    assert format_char(parse_spec("c"), 66) == "B"


def test_char_rejects_long_string():
    with pytest.raises(ValueError):
        format_char(parse_spec("c"), "AB")


def test_percent_directive():
    assert fmt("%") == "%"


def test_unknown_specifier_renders_nothing():
    assert fmt("5", 42) == ""


@pytest.mark.parametrize(
    "spec_text, value, function",
    [
        ("7d", 12, format_int),
        ("-7x", 300, format_hex),
        ("4s", "ab", format_str),
        ("4c", "z", format_char),
        ("14p", 77, format_pointer),
    ],
)
def test_dispatch_agrees_with_specific_functions(spec_text, value, function):
    spec = parse_spec(spec_text)
    assert format_value(spec, value) == function(spec, value)


@pytest.mark.parametrize("width", [1, 3, 8, 15])
@pytest.mark.parametrize("value", [0, 9, -9, 123456, -2147483647])
def test_left_aligned_int_fills_width(width, value):
    out = fmt(f"-{width}d", value)
    assert len(out) == max(width, len(str(value)))
    assert out.rstrip() == str(value)
    assert int(out) == value


@pytest.mark.parametrize("precision", [0, 2, 5, 9])
def test_string_precision_truncates(precision):
    out = fmt(f".{precision}s", "abcdefg")
    assert out == "abcdefg"[:precision]