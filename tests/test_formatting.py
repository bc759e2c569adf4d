import io

import pytest

from miniprintf.formatting import (
    format_hex,
    format_pointer,
    format_unsigned,
    itoa,
    printf,
    sformat,
)


@pytest.mark.parametrize("n", [0, 1, -1, 42, -42, 123456789, 2147483647, -2147483648])
def test_itoa_round_trip(n):
    assert int(itoa(n)) == n


def test_itoa_matches_source_extremes():
    assert itoa(-2147483648) == "-2147483648"
    assert itoa(123456789) == "123456789"


def test_itoa_wraps_to_32_bits():
    assert itoa(2**31) == "-2147483648"


def test_itoa_rejects_non_int():
    with pytest.raises(TypeError):
        itoa("12")


@pytest.mark.parametrize("n", [0, 9, 10, 123456789, 2**32 - 1])
def test_format_unsigned_round_trip(n):
    assert int(format_unsigned(n)) == n


def test_format_unsigned_negative_wraps():
    assert int(format_unsigned(-1)) == 2**32 - 1


@pytest.mark.parametrize("n", [0, 15, 16, 255, 123456789, 246913578, 2**32 - 1])
def test_format_hex_round_trip(n):
    assert int(format_hex(n), 16) == n
    assert int(format_hex(n, upper=True), 16) == n


@pytest.mark.parametrize("n", [0, 171, 123456789, 2**32 - 1])
def test_format_hex_case(n):
    assert format_hex(n, upper=True) == format_hex(n).upper()
    assert format_hex(n) == format_hex(n).lower()


def test_format_hex_zero():
    assert format_hex(0) == "0"


def test_format_pointer_null():
    assert format_pointer(0) == "0x0"
    assert format_pointer(None) == "0x0"


@pytest.mark.parametrize("n", [1, 255, 0x7FFDEADBEEF0, 2**64 - 1])
def test_format_pointer_round_trip(n):
    text = format_pointer(n)
    assert text.startswith("0x")
    assert int(text[2:], 16) == n
    assert text == text.lower()


def test_format_pointer_object_uses_identity():
    obj = object()
    assert int(format_pointer(obj)[2:], 16) == id(obj)


def test_sformat_string():
    assert sformat("Your function: %s\n", "This is a test") == (
        "Your function: This is a test\n"
    )


def test_sformat_null_string():
    assert sformat("NULL %s NULL", None) == "NULL (null) NULL"


def test_sformat_decimal_and_integer():
    assert sformat("%d|%i", 123456789, -5) == itoa(123456789) + "|" + itoa(-5)


def test_sformat_unsigned_and_hex():
    a = 123456789
    assert sformat("%u %x %X", a, a, a * 2) == " ".join(
        [format_unsigned(a), format_hex(a), format_hex(a * 2, upper=True)]
    )


def test_sformat_pointer():
    assert sformat("%p", 0) == "0x0"


def test_sformat_char_accepts_int_and_str():
    assert sformat("[%c%c]", "z", ord("q")) == "[zq]"


def test_sformat_percent_literal():
    assert sformat("100%%") == "100%"


def test_sformat_unknown_conversion_consumes_nothing():
    assert sformat("a%qb%s", "end") == "abend"


def test_sformat_trailing_percent_is_dropped():
    assert sformat("ab%") == "ab"


def test_sformat_missing_argument():
    with pytest.raises(TypeError):
        sformat("%d and %d", 1)


def test_sformat_string_requires_str():
    with pytest.raises(TypeError):
        sformat("%s", 12)


def test_sformat_char_rejects_long_string():
    with pytest.raises(TypeError):
        sformat("%c", "ab")


def test_printf_writes_and_counts():
    buf = io.StringIO()
    count = printf("Your function: %d\n", 123456789, file=buf)
    assert buf.getvalue() == "Your function: 123456789\n"
    assert count == len(buf.getvalue())


def test_printf_defaults_to_stdout(capsys):
    count = printf("NULL %s NULL\n", None)
    out = capsys.readouterr().out
    assert out == "NULL (null) NULL\n"
    assert count == len(out)


def test_printf_empty_format():
    buf = io.StringIO()
    assert printf("", file=buf) == len(buf.getvalue())
    assert buf.getvalue() == ""