"""A doubly linked stack of integers with input validation helpers."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import TextIO

from ftkit.chars import is_digit

__all__ = [
    "StackNode",
    "Stack",
    "is_error_syntax",
    "is_error_duplicate",
    "abort_with_error",
]


@dataclass(eq=False)
class StackNode:
    """One element of a :class:`Stack`, with the bookkeeping a sorter needs."""

    value: int
    index: int = 0
    push_cost: int = 0
    above_median: bool = False
    cheapest: bool = False
    target_node: StackNode | None = None
    next: StackNode | None = None
    prev: StackNode | None = None


class Stack:
    """A doubly linked list of integer values, top first."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self.head: StackNode | None = None
        self.tail: StackNode | None = None
        for value in values:
            self.append(value)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def _nodes(self) -> Iterator[StackNode]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def append(self, value: int) -> StackNode:
        """Add ``value`` at the bottom of the stack and return its node."""
        node = StackNode(value, prev=self.tail)
        if self.tail is None:
            self.head = node
        else:
            self.tail.next = node
        self.tail = node
        return node

    def contains(self, value: int) -> bool:
        """Return True if some node holds ``value``."""
        return any(node.value == value for node in self._nodes())

    def clear(self) -> None:
        """Remove every node, zeroing and unlinking each."""
        node = self.head
        while node is not None:
            following = node.next
            node.value = 0
            node.next = None
            node.prev = None
            node.target_node = None
            node = following
        self.head = None
        self.tail = None

    def __iter__(self) -> Iterator[int]:
        for node in self._nodes():
            yield node.value

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())


def is_error_syntax(text: str) -> bool:
    """Return True unless ``text`` is an optional sign followed by ASCII digits."""
    if not isinstance(text, str):
        raise TypeError(f"expected a str, got {type(text).__name__}")
    if not text:
        return True
    first, rest = text[0], text[1:]
    if first in "+-":
        if not rest or not is_digit(rest[0]):
            return True
    elif not is_digit(first):
        return True
    return not all(is_digit(char) for char in rest)


def is_error_duplicate(stack: Stack | None, value: int) -> bool:
    """Return True if ``stack`` already holds ``value``."""
    if stack is None:
        return False
    return stack.contains(value)


def abort_with_error(stack: Stack | None, stream: TextIO | None = None) -> None:
    """Empty ``stack``, write ``Error`` and exit with status 1."""
    if stack is not None:
        stack.clear()
    out = sys.stdout if stream is None else stream
    out.write("Error\n")
    out.flush()
    raise SystemExit(1)