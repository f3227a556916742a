"""A singly linked list whose nodes each hold one arbitrary value."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any

__all__ = ["Node", "LinkedList"]


@dataclass(eq=False)
class Node:
    """One link of a :class:`LinkedList`."""

    content: Any
    next: Node | None = None


class LinkedList:
    """A singly linked list of arbitrary values."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self.head: Node | None = None
        for item in items:
            self.add_back(item)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def add_front(self, content: Any) -> Node:
        """Insert ``content`` as the new head and return its node."""
        node = Node(content, self.head)
        self.head = node
        return node

    def add_back(self, content: Any) -> Node:
        """Append ``content`` after the current tail and return its node."""
        node = Node(content)
        tail = self.last()
        if tail is None:
            self.head = node
        else:
            tail.next = node
        return node

    def last(self) -> Node | None:
        """Return the tail node, or None when the list is empty."""
        tail = None
        for tail in self._nodes():
            pass
        return tail

    def for_each(self, func: Callable[[Any], Any]) -> None:
        """Call ``func`` on the content of every node, head first."""
        if not callable(func):
            raise TypeError("func must be callable")
        for node in self._nodes():
            func(node.content)

    def map(self, func: Callable[[Any], Any]) -> LinkedList:
        """Return a new list holding ``func(content)`` for every node.

        The list itself is left unchanged.
        """
        if not callable(func):
            raise TypeError("func must be callable")
        return type(self)(func(content) for content in self)

    def clear(self, release: Callable[[Any], Any] | None = None) -> None:
        """Remove every node, passing each content to ``release`` first."""
        if release is not None and not callable(release):
            raise TypeError("release must be callable")
        node = self.head
        while node is not None:
            following = node.next
            if release is not None:
                release(node.content)
            node.next = None
            self.head = following
            node = following
        self.head = None

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[Any]:
        for node in self._nodes():
            yield node.content