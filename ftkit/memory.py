"""Byte-buffer primitives: filling, copying, searching, comparing and
(re)allocating.

Buffers are bytes-like objects; those written to must be mutable, such
as :class:`bytearray`. Byte values are reduced to an unsigned char
(``value & 0xFF``), as the C functions do. Counts larger than a buffer
raise :class:`ValueError` where C would have undefined behaviour.
"""

from __future__ import annotations

from collections.abc import MutableSequence

__all__ = [
    "memset",
    "bzero",
    "memcpy",
    "memmove",
    "memchr",
    "memcmp",
    "calloc",
    "realloc",
    "free_array",
]

SIZE_MAX = (1 << 64) - 1


def _count(value: int, name: str) -> int:
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")
    return value


def _check_span(buf, n: int, name: str) -> None:
    if n > len(buf):
        raise ValueError(f"{name} holds {len(buf)} bytes, fewer than the {n} requested")


def _byte(value: int) -> int:
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"byte value must be an int, got {type(value).__name__}")
    return value & 0xFF


def memset(buf: bytearray, value: int, n: int) -> bytearray:
    """Set the first ``n`` bytes of ``buf`` to ``value`` and return ``buf``."""
    count = _count(n, "n")
    _check_span(buf, count, "buf")
    buf[:count] = bytes([_byte(value)]) * count
    return buf


def bzero(buf: bytearray, n: int) -> None:
    """Set the first ``n`` bytes of ``buf`` to zero."""
    memset(buf, 0, n)


def memcpy(dest: bytearray | None, src, n: int) -> bytearray | None:
    """Copy ``n`` bytes from ``src`` to the start of ``dest`` and return ``dest``.

    When both buffers are None nothing is done and None is returned.
    """
    if dest is None and src is None:
        return dest
    if dest is None or src is None:
        raise TypeError("dest and src must both be buffers")
    count = _count(n, "n")
    _check_span(src, count, "src")
    _check_span(dest, count, "dest")
    dest[:count] = bytes(memoryview(src)[:count])
    return dest


def memmove(buf: bytearray, dest: int, src: int, n: int) -> bytearray:
    """Copy ``n`` bytes inside ``buf`` from offset ``src`` to offset ``dest``.

    The two regions may overlap; the result is as if the source bytes were
    first copied aside. Returns ``buf``.
    """
    start_dest = _count(dest, "dest")
    start_src = _count(src, "src")
    count = _count(n, "n")
    if start_dest == start_src or count == 0:
        return buf
    if max(start_dest, start_src) + count > len(buf):
        raise ValueError("region extends past the end of the buffer")
    buf[start_dest : start_dest + count] = bytes(buf[start_src : start_src + count])
    return buf


def memchr(buf, value: int, n: int) -> int | None:
    """Return the index of the first byte equal to ``value`` among the first ``n``, or None."""
    count = _count(n, "n")
    _check_span(buf, count, "buf")
    index = bytes(memoryview(buf)[:count]).find(_byte(value))
    return None if index < 0 else index


def memcmp(a, b, n: int) -> int:
    """Compare the first ``n`` bytes of two buffers.

    Returns the difference of the first differing bytes, or 0 when the
    spans are equal.
    """
    count = _count(n, "n")
    _check_span(a, count, "a")
    _check_span(b, count, "b")
    left = bytes(memoryview(a)[:count])
    right = bytes(memoryview(b)[:count])
    for x, y in zip(left, right):
        if x != y:
            return x - y
    return 0


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``count * size`` bytes.

    Raises OverflowError when the total would not fit in a 64-bit size.
    """
    items = _count(count, "count")
    width = _count(size, "size")
    if items != 0 and width > SIZE_MAX // items:
        raise OverflowError(f"{items} * {width} bytes exceeds the maximum size")
    return bytearray(items * width)


def realloc(buf: bytearray | None, new_size: int) -> bytearray | None:
    """Return a buffer of ``new_size`` bytes holding the start of ``buf``.

    With no buffer, a fresh zero-filled one is returned. A new size of 0
    releases the buffer and returns None. Bytes beyond the old contents
    are zero.
    """
    size = _count(new_size, "new_size")
    if buf is None:
        return bytearray(size)
    if size == 0:
        return None
    resized = bytearray(size)
    keep = min(len(buf), size)
    resized[:keep] = bytes(memoryview(buf)[:keep])
    return resized


def free_array(items: MutableSequence | None) -> None:
    """Release every element of ``items``, leaving it empty. None is ignored."""
    if items is None:
        return
    items.clear()