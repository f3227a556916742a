"""A small printf-style formatter supporting ``%c %s %p %d %i %u %x %X %%``.

No flags, widths or precisions are understood: each ``%`` is followed
directly by its conversion character. Integer conversions use C widths:
``%d`` and ``%i`` take a 32-bit signed int, ``%u``, ``%x`` and ``%X`` a
32-bit unsigned int, and ``%p`` a 64-bit address.
"""

from __future__ import annotations

import sys
from collections.abc import Iterator
from typing import Any, TextIO

__all__ = ["FormatError", "sprintf", "printf"]

HEX_LOWER = "0123456789abcdef"
HEX_UPPER = "0123456789ABCDEF"

_UINT32_MASK = 0xFFFFFFFF
_UINT64_MASK = 0xFFFFFFFFFFFFFFFF


class FormatError(ValueError):
    """Raised for an unknown conversion or a missing argument."""


def _int_arg(value: Any, spec: str) -> int:
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"%{spec} expects an int, got {type(value).__name__}")
    return value


def _to_int32(value: int) -> int:
    value &= _UINT32_MASK
    return value - (1 << 32) if value >= 1 << 31 else value


def _to_base(n: int, digits: str) -> str:
    base = len(digits)
    out = []
    while True:
        n, remainder = divmod(n, base)
        out.append(digits[remainder])
        if n == 0:
            break
    return "".join(reversed(out))


def _format_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise TypeError(f"%c expects a single character, got {value!r}")
        return value
    return chr(_int_arg(value, "c") % 256)


def _format_str(value: Any) -> str:
    if value is None:
        return "(null)"
    if not isinstance(value, str):
        raise TypeError(f"%s expects a str, got {type(value).__name__}")
    head, _, _ = value.partition("\0")
    return head


def _format_pointer(value: Any) -> str:
    if value is None:
        address = 0
    elif isinstance(value, int) and not isinstance(value, bool):
        address = value & _UINT64_MASK
    else:
        address = id(value) & _UINT64_MASK
    if address == 0:
        return "(nil)"
    return "0x" + _to_base(address, HEX_LOWER)


def _convert(spec: str, args: Iterator[Any]) -> str:
    if spec == "%":
        return "%"
    if spec not in "cspdiuxX" or spec == "":
        shown = "end of format" if spec == "" else repr(spec)
        raise FormatError(f"unknown conversion: {shown}")
    try:
        value = next(args)
    except StopIteration:
        raise FormatError(f"missing argument for %{spec}") from None
    if spec == "c":
        return _format_char(value)
    if spec == "s":
        return _format_str(value)
    if spec == "p":
        return _format_pointer(value)
    number = _int_arg(value, spec)
    if spec in "di":
        return str(_to_int32(number))
    unsigned = number & _UINT32_MASK
    if spec == "u":
        return str(unsigned)
    return _to_base(unsigned, HEX_LOWER if spec == "x" else HEX_UPPER)


def sprintf(fmt: str | None, *args: Any) -> str:
    """Return ``fmt`` with each conversion replaced by the next argument.

    A format of None gives an empty string.
    """
    if fmt is None:
        return ""
    if not isinstance(fmt, str):
        raise TypeError(f"format must be a str, got {type(fmt).__name__}")
    values = iter(args)
    chars = iter(fmt)
    pieces = []
    for char in chars:
        if char == "%":
            pieces.append(_convert(next(chars, ""), values))
        else:
            pieces.append(char)
    return "".join(pieces)


def printf(fmt: str | None, *args: Any, stream: TextIO | None = None) -> int:
    """Write the formatted text to ``stream`` (standard output by default).

    Returns the number of characters written.
    """
    text = sprintf(fmt, *args)
    if text:
        (sys.stdout if stream is None else stream).write(text)
    return len(text)