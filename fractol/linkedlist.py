"""A singly linked list of arbitrary contents."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass
class Node:
    """One list cell: its content, the next cell, and a caller-assigned index."""

    content: Any
    next: Node | None = None
    index: int = 0


class LinkedList:
    """Singly linked list with front and back insertion."""

    def __init__(self) -> None:
        self.head: Node | None = None

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def push_front(self, content: Any) -> Node:
        """Insert ``content`` at the front and return its node."""
        node = Node(content, self.head)
        self.head = node
        return node

    def push_back(self, content: Any) -> Node:
        """Append ``content`` at the back and return its node."""
        node = Node(content)
        tail = self.last()
        if tail is None:
            self.head = node
        else:
            tail.next = node
        return node

    def last(self) -> Node | None:
        """Return the last node, or ``None`` for an empty list."""
        tail = None
        for tail in self._nodes():
            pass
        return tail

    def clear(self, delete: Callable[[Any], object] | None = None) -> None:
        """Empty the list, handing each content to ``delete`` in order if given."""
        node = self.head
        while node is not None:
            following = node.next
            if delete is not None:
                delete(node.content)
            node.next = None
            node = following
        self.head = None

    def for_each(self, func: Callable[[Any], object]) -> None:
        """Call ``func`` on every content, front to back."""
        for content in self:
            func(content)

    def map(self, func: Callable[[Any], Any]) -> LinkedList:
        """Return a new list holding ``func(content)`` for every content."""
        result = LinkedList()
        for content in self:
            result.push_back(func(content))
        return result

    def position(self, index: int) -> int:
        """Return the position of the first node whose ``index`` matches.

        When no node matches, the length of the list is returned.
        """
        count = 0
        for count, node in enumerate(self._nodes()):
            if node.index == index:
                return count
        return len(self)

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[Any]:
        for node in self._nodes():
            yield node.content