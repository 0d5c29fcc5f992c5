import pytest

from pushswap.numbers import uitoa
from pushswap.printf import PrintfError, printf, sprintf, validate_format


def test_plain_text_unchanged():
    assert sprintf("hello") == "hello"


@pytest.mark.parametrize(
    "fmt, value",
    [
        ("%d", 42),
        ("%i", -17),
        ("%5d", 42),
        ("%-5d|", 42),
        ("%05d", 42),
        ("%05d", -42),
        ("%.3d", 7),
        ("%+d", 5),
        ("% d", 5),
        ("%x", 255),
        ("%X", 255),
        ("%#x", 255),
        ("%8x", 48879),
        ("%s", "word"),
        ("%.2s", "hello"),
        ("%10s", "right"),
        ("%-10s|", "left"),
        ("%c", 65),
        ("%3c", 66),
    ],
)
def test_matches_standard_formatting(fmt, value):
    assert sprintf(fmt, value) == fmt % value


def test_percent_sign():
    assert sprintf("100%%") == "100%"


def test_percent_ignores_width():
    assert sprintf("%5%") == "%"


def test_unsigned_wraps_negative():
    assert sprintf("%u", -1) == uitoa(-1)


def test_null_string():
    assert sprintf("%s", None) == "(null)"


def test_null_pointer():
    assert sprintf("%p", 0) == "(nil)"


def test_pointer_hex():
    assert sprintf("%p", 255) == hex(255)


def test_several_arguments_in_order():
    assert sprintf("%d and %s", 3, "x") == "%d and %s" % (3, "x")


def test_invalid_directive_is_literal_and_consumes_nothing():
    assert sprintf("%5-d %d", 9) == "%5-d " + sprintf("%d", 9)


def test_directive_without_conversion_at_end():
    assert sprintf("a%5") == "a"


def test_lone_percent_at_end_raises():
    with pytest.raises(PrintfError):
        sprintf("abc%")


def test_missing_argument_raises():
    with pytest.raises(PrintfError):
        sprintf("%d %d", 1)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("%d", True),
        ("%-5.3d", True),
        ("%", True),
        ("%5-d", False),
        ("x", False),
        ("%y", False),
    ],
)
def test_validate_format(text, expected):
    assert validate_format(text) is expected


def test_printf_writes_and_counts(capsys):
    count = printf("%d-%s", 7, "ab")
    out = capsys.readouterr().out
    assert out == sprintf("%d-%s", 7, "ab")
    assert count == len(out)


def test_printf_writes_text_before_error(capsys):
    with pytest.raises(PrintfError):
        printf("abc%")
    assert capsys.readouterr().out == "abc"