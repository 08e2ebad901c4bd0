import io

import pytest

from pipex.printf import format_string, printf


def test_plain_text_passes_through():
    assert format_string("just some text") == "just some text"


def test_percent_literal():
    assert format_string("100%%") == "100%"


def test_string_conversion():
    assert format_string("<%s>", "isso e uma string") == "<isso e uma string>"


def test_null_string():
    assert format_string("%s", None) == "(null)"


def test_null_pointer():
    assert format_string("%p", None) == "(nil)"
    assert format_string("%p", 0) == "(nil)"


def test_pointer_is_hex_prefixed():
    out = format_string("%p", 4096)
    assert out.startswith("0x")
    assert int(out[2:], 16) == 4096


def test_char_from_int_and_str():
    assert format_string("%c%c%c", ord("A"), "a", "3") == "Aa3"


@pytest.mark.parametrize("n", [0, 42, -42, 2147483647, -2147483648])
def test_decimal_round_trip(n):
    assert int(format_string("%d", n)) == n
    assert format_string("%i", n) == format_string("%d", n)


def test_int_min_text():
    assert format_string("%d", -2147483648) == "-2147483648"


@pytest.mark.parametrize("n", [0, 1, 255, 4096, 123456789])
def test_hex_round_trip(n):
    lower = format_string("%x", n)
    assert int(lower, 16) == n
    assert format_string("%X", n) == lower.upper()


def test_unsigned_wraps_negative():
    assert int(format_string("%u", -1)) == 4294967295
    assert int(format_string("%x", -1), 16) == 4294967295


@pytest.mark.parametrize("n", [0, 7, 4000000000])
def test_unsigned_round_trip(n):
    assert int(format_string("%u", n)) == n


def test_unknown_conversion_prints_nothing():
    assert format_string("a%qb") == "ab"


def test_trailing_percent_ignored():
    assert format_string("end%") == "end"


def test_mixed_conversions_in_order():
    assert format_string("%s=%d", "x", 5) == "x=" + format_string("%d", 5)


def test_missing_argument_raises():
    with pytest.raises(TypeError):
        format_string("%d")


def test_wrong_type_raises():
    with pytest.raises(TypeError):
        format_string("%d", "five")


def test_none_format_raises():
    with pytest.raises(TypeError):
        format_string(None)


def test_printf_writes_and_counts():
    buf = io.StringIO()
    count = printf("%s-%d\n", "abc", -42, stream=buf)
    assert buf.getvalue() == format_string("%s-%d\n", "abc", -42)
    assert count == len(buf.getvalue())


def test_printf_default_stdout(capsys):
    count = printf("%%%s", "hi")
    assert capsys.readouterr().out == "%hi"
    assert count == 3