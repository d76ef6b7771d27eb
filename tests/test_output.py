import io

import pytest

from ftfmt.output import put_char, put_endl, put_nbr, put_nchr, put_nstr, put_str


def test_put_char_writes_one():
    out = io.StringIO()
    assert put_char("q", out) == 1
    assert out.getvalue() == "q"


def test_put_char_nul():
    out = io.StringIO()
    put_char("\0", out)
    assert out.getvalue() == "\0"


def test_put_char_rejects_long():
    with pytest.raises(ValueError):
        put_char("ab", io.StringIO())


def test_put_str_and_count():
    out = io.StringIO()
    assert put_str("hello", out) == len("hello")
    assert out.getvalue() == "hello"


def test_put_str_defaults_to_stdout(capsys):
    put_str("abc")
    assert capsys.readouterr().out == "abc"


def test_put_endl():
    out = io.StringIO()
    assert put_endl("hi", out) == len("hi\n")
    assert out.getvalue() == "hi\n"


@pytest.mark.parametrize("n", [0, 7, -7, 2147483647, -2147483648])
def test_put_nbr_matches_decimal(n):
    out = io.StringIO()
    put_nbr(n, out)
    assert out.getvalue() == str(n)


def test_put_nbr_int_min_literal():
    out = io.StringIO()
    put_nbr(-2147483648, out)
    assert out.getvalue() == "-2147483648"


def test_put_nbr_out_of_range():
    with pytest.raises(OverflowError):
        put_nbr(2**31, io.StringIO())


def test_put_nchr_repeats():
    out = io.StringIO()
    assert put_nchr("x", 3, out) == 3
    assert out.getvalue() == "x" * 3


def test_put_nchr_zero_writes_nothing():
    out = io.StringIO()
    assert put_nchr(" ", 0, out) == 0
    assert out.getvalue() == ""


def test_put_nchr_negative():
    with pytest.raises(ValueError):
        put_nchr("x", -1, io.StringIO())


def test_put_nstr_truncates():
    out = io.StringIO()
    assert put_nstr("hello", 3, out) == 3
    assert out.getvalue() == "hello"[:3]


def test_put_nstr_longer_limit_writes_all():
    out = io.StringIO()
    assert put_nstr("hey", 10, out) == len("hey")
    assert out.getvalue() == "hey"