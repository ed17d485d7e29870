import io

import pytest

from countprint.printf import FormatError, format_string, printf


def _capture(fmt, *args):
    out = io.StringIO()
    count = printf(fmt, *args, stream=out)
    return count, out.getvalue()


def test_string_conversions():
    count, text = _capture(
        "test %s, %s, another test %s, after", "string here", "str\0teere", None
    )
    assert text == "test string here, str, another test (null), after"
    assert count == len(text)


def test_int_conversions_wrap_like_c_int():
    text = format_string(
        "test %d, Max %d, Min %d, after", 123, 2147483648, -2147483649
    )
    assert text == "test 123, Max -2147483648, Min 2147483647, after"
    assert format_string(
        "test %i, Max %i, Min %i, after", 123, 2147483648, -2147483649
    ) == text


def test_int_round_trip():
    text = format_string("%d|%i", 2147483647, -2147483648)
    first, second = text.split("|")
    assert int(first) == 2147483647
    assert int(second) == -2147483648


def test_unsigned_conversion():
    text = format_string("%u %u %u", 123, -1, 4294967296)
    assert [int(part) for part in text.split()] == [123, 4294967295, 0]


def test_hex_conversions():
    lower = format_string("%x %x %x", 873, 42949, 9999)
    upper = format_string("%X %X %X", 873, 42949, 9999)
    assert [int(p, 16) for p in lower.split()] == [873, 42949, 9999]
    assert lower == lower.lower()
    assert upper == upper.upper()
    assert upper.lower() == lower


def test_pointer_conversion():
    text = format_string("test %p, null %p, after int", 0x5000, None)
    head, rest = text.split(", null ")
    address = head[len("test "):]
    assert address.startswith("0x")
    assert int(address, 16) == 0x5000
    assert rest == "(nil), after int"


def test_char_conversion():
    text = format_string("test %c, %c, another test %c, after", "a", "b", "1")
    assert text == "test a, b, another test 1, after"


def test_char_integer_values():
    text = format_string("%c%c%c", "?", 2, 200)
    assert text == "?" + chr(2) + chr(200)


def test_percent_escapes():
    count, text = _capture("test %%, %%, another test %%, after")
    assert text == "test %, %, another test %, after"
    assert count == len(text)


def test_double_percent_then_letter():
    text = format_string("%%%%c")
    assert text.count("%") == 2
    assert text.endswith("c")
    assert len(text) == 3


def test_invalid_specifier_raises_after_partial_output():
    out = io.StringIO()
    with pytest.raises(FormatError):
        printf("test %, %%, another test %%, after", 12, stream=out)
    assert out.getvalue() == "test "


def test_trailing_percent_raises():
    with pytest.raises(FormatError):
        format_string("abc%")


def test_none_format_raises():
    with pytest.raises(FormatError):
        printf(None)


def test_missing_argument_raises():
    with pytest.raises(FormatError):
        format_string("%d and %d", 1)


def test_format_error_is_value_error():
    with pytest.raises(ValueError):
        format_string("%q", 1)


def test_format_stops_at_nul():
    assert format_string("ab\0%d", 5) == "ab"


def test_plain_text_count():
    count, text = _capture("no conversions here")
    assert text == "no conversions here"
    assert count == len("no conversions here")


def test_default_stream_is_stdout(capsys):
    count = printf("value %d", 42)
    written = capsys.readouterr().out
    assert written == format_string("value %d", 42)
    assert count == len(written)