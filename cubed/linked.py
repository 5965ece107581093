"""A singly linked list of arbitrary contents."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class Node:
    """One link of a list: its content and the next node."""

    content: Any = None
    next: Optional["Node"] = None


class LinkedList:
    """A singly linked list that keeps a head and a tail node."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self.head: Node | None = None
        self._tail: Node | None = None
        self._size = 0
        for item in items:
            self.append(item)

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def __iter__(self) -> Iterator[Any]:
        return (node.content for node in self._nodes())

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def append(self, content: Any) -> Node:
        """Add ``content`` at the end and return its node."""
        node = Node(content)
        if self._tail is None:
            self.head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1
        return node

    def appendleft(self, content: Any) -> Node:
        """Add ``content`` at the front and return its node."""
        node = Node(content, self.head)
        self.head = node
        if self._tail is None:
            self._tail = node
        self._size += 1
        return node

    def last(self) -> Node | None:
        """Return the last node, or None when the list is empty."""
        return self._tail

    def each(self, f: Callable[[Any], Any] | None) -> None:
        """Call ``f`` on every content in order."""
        if f is None:
            return
        for content in self:
            f(content)

    def map(self, f: Callable[[Any], Any]) -> "LinkedList":
        """Return a new list holding ``f(content)`` for every content."""
        return LinkedList(f(content) for content in self)

    def clear(self, delete: Callable[[Any], Any] | None = None) -> None:
        """Remove every node, passing each content to ``delete`` first."""
        while self.head is not None:
            self.popleft(delete)

    def popleft(self, delete: Callable[[Any], Any] | None = None) -> Any:
        """Remove the first node and return its content.

        ``delete``, when given, is called on the content before it is
        returned. Raises IndexError on an empty list.
        """
        node = self.head
        if node is None:
            raise IndexError("pop from an empty list")
        self.head = node.next
        if self.head is None:
            self._tail = None
        node.next = None
        self._size -= 1
        if delete is not None:
            delete(node.content)
        return node.content