import io

import pytest

from miniprintf.output import put_char, put_endl, put_nbr, put_str


def test_put_char_string():
    buf = io.StringIO()
    put_char("x", buf)
    assert buf.getvalue() == "x"


def test_put_char_int_round_trip():
    buf = io.StringIO()
    put_char(ord("Q"), buf)
    assert buf.getvalue() == "Q"


def test_put_char_rejects_multiple():
    with pytest.raises(ValueError):
        put_char("ab", io.StringIO())


def test_put_char_rejects_other_types():
    with pytest.raises(TypeError):
        put_char(1.5, io.StringIO())


def test_put_str():
    buf = io.StringIO()
    put_str("This is a test", buf)
    put_str("", buf)
    assert buf.getvalue() == "This is a test"


def test_put_endl():
    buf = io.StringIO()
    put_endl("line", buf)
    put_endl("", buf)
    assert buf.getvalue() == "line\n\n"


@pytest.mark.parametrize("n", [0, 7, -7, 10, 123456789, 2147483647, -2147483648])
def test_put_nbr_round_trip(n):
    buf = io.StringIO()
    put_nbr(n, buf)
    assert int(buf.getvalue()) == n


def test_put_nbr_int_min():
    buf = io.StringIO()
    put_nbr(-2147483648, buf)
    assert buf.getvalue() == "-2147483648"


def test_default_stream_is_stdout(capsys):
    put_str("ab", None)
    put_char("c")
    put_nbr(-12)
    put_endl("")
    assert capsys.readouterr().out == "abc-12\n"