"""Building new strings from existing ones: splitting, slicing, joining,
trimming and mapping.

Input strings are read up to their first ``"\\0"`` character, if they
hold one, as C strings are. Every function returns a new string or list
and leaves its input untouched. The exception is :func:`striteri`, which
edits a mutable buffer in place.
"""

from __future__ import annotations

from collections.abc import Callable, MutableSequence

__all__ = [
    "split",
    "strdup",
    "substr",
    "strjoin",
    "strtrim",
    "strmapi",
    "striteri",
]

_NUL = "\0"


def _text(s: str, name: str = "s") -> str:
    """Return ``s`` up to, not including, its first NUL character."""
    if not isinstance(s, str):
        raise TypeError(f"{name} must be a str, got {type(s).__name__}")
    head, _, _ = s.partition(_NUL)
    return head


def _separator(sep: str | int) -> str:
    """Return ``sep`` as a one-character string."""
    if isinstance(sep, str):
        if len(sep) != 1:
            raise ValueError(f"separator must be a single character, got {sep!r}")
        return sep
    if isinstance(sep, int) and not isinstance(sep, bool):
        return chr(sep % 256)
    raise TypeError(f"separator must be a character or an int, got {type(sep).__name__}")


def _non_negative(value: int, name: str) -> int:
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")
    return value


def split(s: str, sep: str | int) -> list[str]:
    """Split ``s`` into the non-empty words separated by ``sep``.

    Runs of separators, and separators at either end, produce no empty
    words. A string that is empty or holds only separators gives an
    empty list.
    """
    text = _text(s)
    delimiter = _separator(sep)
    return [word for word in text.split(delimiter) if word]


def strdup(s: str) -> str:
    """Return a copy of ``s`` up to its terminator."""
    return _text(s)


def substr(s: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``s`` starting at ``start``.

    A ``start`` beyond the end of the string gives an empty string.
    """
    text = _text(s)
    first = _non_negative(start, "start")
    count = _non_negative(length, "length")
    if first > len(text):
        return ""
    return text[first : first + count]


def strjoin(s1: str, s2: str) -> str:
    """Return ``s1`` followed by ``s2``."""
    return _text(s1, "s1") + _text(s2, "s2")


def strtrim(s: str, charset: str) -> str:
    """Remove every character found in ``charset`` from both ends of ``s``."""
    text = _text(s)
    trim = _text(charset, "charset")
    if not trim:
        return text
    return text.strip(trim)


def strmapi(s: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` for each character of ``s``.

    ``func`` must return a single character each time.
    """
    if not callable(func):
        raise TypeError("func must be callable")
    text = _text(s)
    mapped = []
    for index, char in enumerate(text):
        result = func(index, char)
        if not isinstance(result, str) or len(result) != 1:
            raise ValueError(
                f"func must return a single character, got {result!r} at index {index}"
            )
        mapped.append(result)
    return "".join(mapped)


def striteri(
    buffer: MutableSequence,
    func: Callable[[int, object], object],
) -> None:
    """Apply ``func(index, char)`` to each element of ``buffer`` in place.

    The buffer is walked until its end or the first NUL element (``"\\0"``
    or ``0``). Whatever ``func`` returns replaces the element, except
    ``None``, which leaves it as it was.
    """
    if not callable(func):
        raise TypeError("func must be callable")
    for index, element in enumerate(buffer):
        if element == _NUL or (isinstance(element, int) and element == 0):
            break
        replacement = func(index, element)
        if replacement is not None:
            buffer[index] = replacement