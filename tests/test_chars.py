import string

import pytest

from ftkit.chars import (
    is_alnum,
    is_alpha,
    is_ascii,
    is_digit,
    is_print,
    to_lower,
    to_upper,
)

ASCII = [chr(code) for code in range(128)]


@pytest.mark.parametrize("ch", ASCII)
def test_is_alpha_matches_ascii_letters(ch):
    assert is_alpha(ch) == (ch in string.ascii_letters)
    assert is_alpha(ord(ch)) == (ch in string.ascii_letters)


@pytest.mark.parametrize("ch", ASCII)
def test_is_digit_matches_ascii_digits(ch):
    assert is_digit(ch) == (ch in string.digits)


@pytest.mark.parametrize("ch", ASCII)
def test_is_alnum_is_alpha_or_digit(ch):
    assert is_alnum(ch) == (is_alpha(ch) or is_digit(ch))


def test_non_ascii_letters_are_not_alpha():
    assert is_alpha("é") is False
    assert is_digit("٣") is False
    assert is_alnum("ß") is False


def test_is_ascii_bounds():
    assert is_ascii(0) is True
    assert is_ascii(127) is True
    assert is_ascii(128) is False
    assert is_ascii(-1) is False
    assert is_ascii("é") is False


def test_is_print_bounds():
    assert is_print(31) is False
    assert is_print(32) is True
    assert is_print(126) is True
    assert is_print(127) is False
    assert is_print(" ") is True
    assert is_print("\n") is False


@pytest.mark.parametrize("ch", ASCII)
def test_case_conversion_matches_ascii_rules(ch):
    expected_upper = ch.upper() if ch in string.ascii_lowercase else ch
    expected_lower = ch.lower() if ch in string.ascii_uppercase else ch
    assert to_upper(ch) == expected_upper
    assert to_lower(ch) == expected_lower


def test_case_conversion_keeps_int_type():
    assert to_upper(ord("q")) == ord("Q")
    assert to_lower(ord("Q")) == ord("q")
    assert to_upper(-1) == -1
    assert to_lower(200) == 200


def test_case_conversion_leaves_non_ascii_alone():
    assert to_upper("é") == "é"
    assert to_lower("É") == "É"


@pytest.mark.parametrize("ch", string.ascii_letters)
def test_case_round_trip(ch):
    assert to_lower(to_upper(ch)) == ch.lower()
    assert to_upper(to_lower(ch)) == ch.upper()


@pytest.mark.parametrize("bad", ["", "ab"])
def test_multi_character_string_rejected(bad):
    with pytest.raises(ValueError):
        is_alpha(bad)


def test_wrong_type_rejected():
    with pytest.raises(TypeError):
        to_upper(1.5)