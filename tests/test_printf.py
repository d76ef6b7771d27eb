import io

import pytest

from ftfmt.printf import printf, render


def test_plain_text_passes_through():
    assert render("hello world") == "hello world"


def test_empty_format():
    assert render("") == ""


def test_decimal_matches_argument():
    assert render("%d", 42) == "42"
    assert render("%i", -17) == "-17"


def test_text_around_conversion():
    assert render("a=%d;", 7) == "a=7;"


def test_percent_literal():
    assert render("%%") == "%"


def test_null_string():
    assert render("%s", None) == "(null)"


def test_null_pointer():
    assert render("%p", 0) == "(nil)"


def test_pointer_prefix_round_trip():
    result = render("%p", 0xDEAD)
    assert result.startswith("0x")
    assert int(result, 16) == 0xDEAD


def test_hex_round_trip():
    assert int(render("%x", 255), 16) == 255


def test_hex_upper_is_upper_of_lower():
    assert render("%X", 48879) == render("%x", 48879).upper()


def test_hash_adds_prefix():
    result = render("%#x", 255)
    assert result.startswith("0x")
    assert int(result, 16) == 255


def test_unsigned_wraps_negative():
    assert int(render("%u", -1)) == 2**32 - 1


def test_width_right_aligns():
    result = render("%8d", 42)
    assert len(result) == 8
    assert result.endswith("42")
    assert result.strip() == "42"


def test_minus_left_aligns():
    result = render("%-8d", 42)
    assert len(result) == 8
    assert result.startswith("42")
    assert result.strip() == "42"


def test_zero_pad_negative():
    result = render("%05d", -42)
    assert len(result) == 5
    assert result.startswith("-")
    assert int(result) == -42


def test_string_precision():
    assert render("%.3s", "abcdef") == "abc"


def test_nul_char_counts_and_pads():
    assert render("%c", 0) == "\0"
    padded = render("%3c", 0)
    assert len(padded) == 3
    assert padded.endswith("\0")


def test_unknown_conversion_is_consumed():
    assert render("a%kb") == "ab"


def test_trailing_percent_is_dropped():
    assert render("abc%") == "abc"


def test_missing_argument_raises():
    with pytest.raises(TypeError):
        render("%d %d", 1)


def test_none_format_raises():
    with pytest.raises(TypeError):
        render(None)


def test_printf_writes_and_counts():
    stream = io.StringIO()
    count = printf("%s-%d", "x", 5, stream=stream)
    assert stream.getvalue() == render("%s-%d", "x", 5)
    assert count == len(stream.getvalue())


def test_printf_counts_nul_char():
    stream = io.StringIO()
    count = printf("%c", 0, stream=stream)
    assert count == 1
    assert stream.getvalue() == "\0"