import io

import pytest

from ftkit.printf import FormatError, printf, sprintf


def test_plain_text_passes_through():
    assert sprintf("hello world") == "hello world"


def test_percent_escape():
    assert sprintf("100%%") == "100%"


def test_none_format_gives_empty():
    assert sprintf(None) == ""


def test_null_string():
    assert sprintf("%s", None) == "(null)"


def test_string_argument():
    assert sprintf("[%s]", "abc") == "[abc]"


@pytest.mark.parametrize("address", [None, 0])
def test_nil_pointer(address):
    assert sprintf("%p", address) == "(nil)"


def test_pointer_is_hex_address():
    result = sprintf("%p", 255)
    assert result.startswith("0x")
    assert int(result[2:], 16) == 255
    assert result[2:] == result[2:].lower()


@pytest.mark.parametrize("n", [0, 7, -7, 12345, -98765, 2**31 - 1])
def test_signed_decimal(n):
    assert sprintf("%d", n) == str(n)
    assert sprintf("%i", n) == str(n)


def test_int_min():
    assert sprintf("%d", -(2**31)) == "-2147483648"


def test_signed_wraps_to_32_bits():
    assert sprintf("%d", 2**31) == "-2147483648"


def test_unsigned_wraps():
    assert int(sprintf("%u", -1)) == 2**32 - 1
    assert sprintf("%u", 0) == "0"


@pytest.mark.parametrize("n", [0, 1, 15, 255, 4096, 0xDEADBEEF])
def test_hex(n):
    assert sprintf("%x", n) == format(n, "x")
    assert sprintf("%X", n) == format(n, "X")


def test_hex_negative_is_unsigned():
    assert int(sprintf("%x", -1), 16) == 0xFFFFFFFF


@pytest.mark.parametrize("value", ["A", 65])
def test_char(value):
    assert sprintf("%c", value) == "A"


def test_mixed_conversions():
    assert sprintf("%s=%d%c", "x", 5, "!") == "x=5!"


def test_unknown_conversion():
    with pytest.raises(FormatError):
        sprintf("%q", 1)


def test_trailing_percent():
    with pytest.raises(FormatError):
        sprintf("abc%")


def test_missing_argument():
    with pytest.raises(FormatError):
        sprintf("%d %d", 1)


def test_wrong_type_for_decimal():
    with pytest.raises(TypeError):
        sprintf("%d", "12")


def test_printf_writes_and_counts():
    out = io.StringIO()
    count = printf("%s-%d", "ab", 42, stream=out)
    assert out.getvalue() == sprintf("%s-%d", "ab", 42)
    assert count == len(out.getvalue())


def test_printf_none_format():
    out = io.StringIO()
    assert printf(None, stream=out) == 0
    assert out.getvalue() == ""