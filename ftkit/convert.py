"""Conversions between decimal text and integers with C integer widths."""

from __future__ import annotations

__all__ = ["atoi", "atol", "itoa"]

_WHITESPACE = frozenset(" \t\n\v\f\r")
_DIGITS = "0123456789"


def _parse_leading_integer(text: str) -> int:
    """Parse optional whitespace, an optional sign and ASCII digits.

    Parsing stops at the first character that does not fit; text with no
    digits gives zero.
    """
    i = 0
    length = len(text)
    while i < length and text[i] in _WHITESPACE:
        i += 1
    sign = 1
    if i < length and text[i] in "+-":
        if text[i] == "-":
            sign = -1
        i += 1
    result = 0
    while i < length and text[i] in _DIGITS:
        result = result * 10 + _DIGITS.index(text[i])
        i += 1
    return sign * result


def _wrap(value: int, bits: int) -> int:
    """Reduce ``value`` to a two's-complement integer of ``bits`` bits."""
    modulus = 1 << bits
    value %= modulus
    if value >= modulus >> 1:
        value -= modulus
    return value


def atoi(text: str) -> int:
    """Convert the leading integer in ``text`` to a 32-bit signed int.

    Values outside the range wrap around, as the fixed-width arithmetic does.
    """
    return _wrap(_parse_leading_integer(text), 32)


def atol(text: str) -> int:
    """Convert the leading integer in ``text`` to a 64-bit signed long.

    Values outside the range wrap around, as the fixed-width arithmetic does.
    """
    return _wrap(_parse_leading_integer(text), 64)


def itoa(n: int) -> str:
    """Return the decimal representation of ``n``, with '-' if negative."""
    if not isinstance(n, int) or isinstance(n, bool):
        raise TypeError(f"expected an int, got {type(n).__name__}")
    if n == 0:
        return "0"
    magnitude = -n if n < 0 else n
    digits = []
    while magnitude > 0:
        magnitude, remainder = divmod(magnitude, 10)
        digits.append(_DIGITS[remainder])
    if n < 0:
        digits.append("-")
    return "".join(reversed(digits))