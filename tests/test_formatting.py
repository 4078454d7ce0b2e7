import io

import pytest

from pushswap.formatting import format_hex, format_pointer, printf, render
from pushswap.numbers import INT_MAX, INT_MIN


@pytest.mark.parametrize("number", [0, 1, 15, 16, 255, 4096, 0xDEADBEEF])
def test_format_hex_round_trip(number):
    assert int(format_hex(number, False), 16) == number


@pytest.mark.parametrize("number", [10, 171, 0xCAFE, 0xFFFFFFFF])
def test_format_hex_upper_matches_lower(number):
    assert format_hex(number, True) == format_hex(number, False).upper()


def test_format_hex_pinned_value():
    assert format_hex(0xFF, False) == "ff"


def test_format_hex_truncates_to_32_bits():
    assert format_hex(-1, False) == format_hex(0xFFFFFFFF, False)


def test_format_hex_rejects_non_integer():
    with pytest.raises(TypeError):
        format_hex("ff", False)


def test_format_pointer_null():
    assert format_pointer(None) == "(nil)"
    assert format_pointer(0) == "(nil)"


@pytest.mark.parametrize("address", [1, 0x1000, 0x7FFF0000ABCD])
def test_format_pointer_round_trip(address):
    text = format_pointer(address)
    assert text.startswith("0x")
    assert int(text[2:], 16) == address


def test_render_plain_text():
    assert render("no conversions here") == "no conversions here"


def test_render_percent():
    assert render("%%") == "%"


def test_render_string_and_null():
    assert render("%s", "word") == "word"
    assert render("%s", None) == "(null)"


def test_render_char_from_string_and_code():
    assert render("%c", "q") == "q"
    assert render("%c", 97) == chr(97)


@pytest.mark.parametrize("number", [0, 5, -5, 123456, INT_MAX, INT_MIN])
def test_render_decimal_round_trip(number):
    assert int(render("%d", number)) == number
    assert render("%i", number) == render("%d", number)


def test_render_decimal_wraps():
    assert render("%d", INT_MAX + 1) == str(INT_MIN)


def test_render_unsigned_wraps_negative():
    assert int(render("%u", -1)) == 2**32 - 1


def test_render_hex_and_pointer_match_helpers():
    assert render("%x|%X", 3054, 3054) == format_hex(3054, False) + "|" + format_hex(3054, True)
    assert render("%p", 0x1234) == format_pointer(0x1234)


def test_render_node_line():
    assert render("value: %d, rank: %d\n", 42, 3) == "value: 42, rank: 3\n"


def test_render_unknown_specifier_is_dropped_without_consuming():
    assert render("a%qb%d", 9) == "ab9"


def test_render_trailing_percent_is_literal():
    assert render("50%") == "50%"


def test_render_missing_argument_raises():
    with pytest.raises(TypeError):
        render("%d %d", 1)


def test_render_stops_at_nul():
    assert render("kept\0dropped %d") == "kept"


def test_printf_returns_length_written():
    stream = io.StringIO()
    count = printf("%s=%d%c", "n", -17, "!", stream=stream)
    assert stream.getvalue() == render("%s=%d%c", "n", -17, "!")
    assert count == len(stream.getvalue())


def test_printf_default_stdout(capsys):
    count = printf("pa\n")
    assert capsys.readouterr().out == "pa\n"
    assert count == len("pa\n")