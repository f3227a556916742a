"""Writing characters, strings and integers to a text stream."""

from __future__ import annotations

import sys
from typing import TextIO

from ftkit.convert import itoa

__all__ = ["put_char", "put_str", "put_endl", "put_nbr"]


def _stream(stream: TextIO | None) -> TextIO:
    return sys.stdout if stream is None else stream


def put_char(c: str | int, stream: TextIO | None = None) -> None:
    """Write one character to ``stream`` (standard output by default).

    An int is taken as a C char code.
    """
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        char = c
    elif isinstance(c, int) and not isinstance(c, bool):
        char = chr(c % 256)
    else:
        raise TypeError(f"expected a character or an int, got {type(c).__name__}")
    _stream(stream).write(char)


def put_str(s: str | None, stream: TextIO | None = None) -> None:
    """Write ``s`` to ``stream``; None writes nothing."""
    if s is None:
        return
    if not isinstance(s, str):
        raise TypeError(f"expected a str, got {type(s).__name__}")
    _stream(stream).write(s)


def put_endl(s: str | None, stream: TextIO | None = None) -> None:
    """Write ``s`` followed by a newline; None writes nothing."""
    if s is None:
        return
    put_str(s, stream)
    put_char("\n", stream)


def put_nbr(n: int, stream: TextIO | None = None) -> None:
    """Write the decimal form of ``n``, with '-' if negative."""
    put_str(itoa(n), stream)