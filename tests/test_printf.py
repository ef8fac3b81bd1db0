import io

import pytest

from sigtalk.printf import (
    format_char,
    format_hex,
    format_integer,
    format_pointer,
    format_string,
    format_unsigned,
    printf,
    sprintf,
)


def test_format_string_none():
    assert format_string(None) == "(null)"


def test_format_string_passthrough():
    assert format_string("hola mundo") == "hola mundo"


@pytest.mark.parametrize("address", [None, 0, 1 << 64])
def test_format_pointer_null(address):
    assert format_pointer(address) == "(nil)"


@pytest.mark.parametrize("address", [1, 255, 0xDEADBEEF, (1 << 64) - 1])
def test_format_pointer_round_trip(address):
    text = format_pointer(address)
    assert text.startswith("0x")
    assert text == text.lower()
    assert int(text, 16) == address


@pytest.mark.parametrize("n", [0, 7, 42, -42, 2**31 - 1, -(2**31)])
def test_format_integer_round_trip(n):
    assert int(format_integer(n)) == n


def test_format_integer_wraps_to_32_bits():
    assert int(format_integer(2**31)) == -(2**31)


@pytest.mark.parametrize("n", [0, 9, 10, 4294967295])
def test_format_unsigned_round_trip(n):
    assert int(format_unsigned(n)) == n


def test_format_unsigned_wraps_negative():
    assert int(format_unsigned(-1)) == 2**32 - 1


@pytest.mark.parametrize("n", [0, 15, 16, 42, 2**32 - 1])
def test_format_hex_round_trip(n):
    lower = format_hex(n, False)
    upper = format_hex(n, True)
    assert int(lower, 16) == n
    assert upper == lower.upper()
    assert lower == lower.lower()


def test_format_char_from_int_and_str():
    assert format_char(ord("A")) == "A"
    assert format_char("z") == "z"
    assert format_char(256 + ord("B")) == "B"


def test_format_char_rejects_long_string():
    with pytest.raises(ValueError):
        format_char("ab")


def test_sprintf_mixed_conversions():
    result = sprintf("%s=%d (%c)", "x", -3, "y")
    assert result == "x=-3 (y)"


def test_sprintf_percent_literal():
    assert sprintf("100%%") == "100%"


def test_sprintf_unknown_conversion_prints_nothing():
    assert sprintf("a%qb") == "ab"


def test_sprintf_trailing_percent_is_dropped():
    assert sprintf("end%") == "end"


def test_sprintf_hex_matches_helpers():
    assert sprintf("%x/%X", 3054, 3054) == f"{format_hex(3054)}/{format_hex(3054, True)}"


def test_sprintf_missing_argument():
    with pytest.raises(TypeError):
        sprintf("%d")


def test_printf_writes_and_counts():
    stream = io.StringIO()
    count = printf("Server PID: %d\n", 1234, stream=stream)
    assert stream.getvalue() == sprintf("Server PID: %d\n", 1234)
    assert count == len(stream.getvalue())