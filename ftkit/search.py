"""Search, comparison and bounded copying of NUL-terminated text.

A string is read up to its first ``"\\0"`` character, if it holds one, as
a C string is. Positions are returned as indices into the string, and
``None`` stands for "not found". The terminator itself can be searched
for, and is found just past the last character.
"""

from __future__ import annotations

__all__ = [
    "strlen",
    "strchr",
    "strrchr",
    "strnstr",
    "strncmp",
    "strlcpy",
    "strlcat",
]

_NUL = "\0"


def _terminated(s: str) -> str:
    """Return ``s`` up to, not including, its first NUL character."""
    if not isinstance(s, str):
        raise TypeError(f"expected a str, got {type(s).__name__}")
    head, _, _ = s.partition(_NUL)
    return head


def _char(c: str | int) -> str:
    """Return ``c`` as a one-character string, an int taken as a C char."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, int) and not isinstance(c, bool):
        return chr(c % 256)
    raise TypeError(f"expected a character or an int, got {type(c).__name__}")


def _size(value: int, name: str) -> int:
    """Check that ``value`` is a usable non-negative size."""
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")
    return value


def strlen(s: str) -> int:
    """Return the number of characters before the terminator."""
    return len(_terminated(s))


def strchr(s: str, c: str | int) -> int | None:
    """Return the index of the first ``c`` in ``s``, or None.

    Searching for the NUL character gives the index of the terminator.
    """
    text = _terminated(s)
    target = _char(c)
    if target == _NUL:
        return len(text)
    index = text.find(target)
    return None if index < 0 else index


def strrchr(s: str, c: str | int) -> int | None:
    """Return the index of the last ``c`` in ``s``, or None.

    Searching for the NUL character gives the index of the terminator.
    """
    text = _terminated(s)
    target = _char(c)
    if target == _NUL:
        return len(text)
    index = text.rfind(target)
    return None if index < 0 else index


def strnstr(big: str, little: str, length: int) -> int | None:
    """Return the index of ``little`` within the first ``length`` characters of ``big``.

    An empty ``little`` is found at index 0. A match must lie wholly
    inside the searched span; otherwise the result is None.
    """
    needle = _terminated(little)
    haystack = _terminated(big)
    limit = _size(length, "length")
    if not needle:
        return 0
    index = haystack[:limit].find(needle)
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters of two strings.

    Returns the difference of the character codes at the first mismatch,
    the terminator counting as code 0, or 0 if no difference is found.
    """
    first = _terminated(s1)
    second = _terminated(s2)
    count = _size(n, "n")
    for i in range(count):
        a = ord(first[i]) if i < len(first) else 0
        b = ord(second[i]) if i < len(second) else 0
        if a != b or a == 0:
            return a - b
    return 0


def strlcpy(dst: str, src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters.

    Returns the resulting buffer text and the length of ``src``; a length
    of at least ``size`` means the copy was truncated. With a size of 0
    the buffer ``dst`` is left as it was.
    """
    source = _terminated(src)
    limit = _size(size, "size")
    if limit == 0:
        return dst, len(source)
    return source[: limit - 1], len(source)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` characters.

    Returns the resulting buffer text and the length the full result would
    have had. When the buffer holds no terminator within ``size``
    characters, nothing is appended and the length reported is
    ``len(src) + size``.
    """
    current = _terminated(dst)
    source = _terminated(src)
    limit = _size(size, "size")
    dst_len = min(len(current), limit)
    if limit <= dst_len:
        return dst, len(source) + limit
    room = limit - 1 - dst_len
    return current + source[:room], dst_len + len(source)