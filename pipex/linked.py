"""A doubly linked list of small integer records."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass
class Content:
    """Payload stored in a list node."""

    nb: int = 0
    index: int = 0
    order: int = 0


@dataclass(eq=False)
class Node:
    """One link of a :class:`LinkedList`."""

    content: Any
    prev: Node | None = None
    next: Node | None = None

    def __repr__(self) -> str:
        return f"Node({self.content!r})"


class LinkedList:
    """Doubly linked list whose nodes carry arbitrary contents."""

    def __init__(self, items: Iterable[Any] | None = None) -> None:
        self.head: Node | None = None
        if items is not None:
            for item in items:
                self.push_back(item)

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def push_front(self, content: Any) -> Node:
        """Insert ``content`` before the current head and return its node."""
        node = Node(content)
        if self.head is not None:
            node.next = self.head
            self.head.prev = node
        self.head = node
        return node

    def push_back(self, content: Any) -> Node:
        """Append ``content`` after the last node and return its node."""
        node = Node(content)
        tail = self.last()
        if tail is None:
            self.head = node
        else:
            tail.next = node
            node.prev = tail
        return node

    def last(self) -> Node | None:
        """Return the last node, or ``None`` for an empty list."""
        tail = None
        for tail in self._nodes():
            pass
        return tail

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[Any]:
        for node in self._nodes():
            yield node.content

    def clear(self, delete: Callable[[Any], Any] | None = None) -> None:
        """Empty the list, handing each content to ``delete`` in order."""
        node = self.head
        while node is not None:
            following = node.next
            if delete is not None:
                delete(node.content)
            node.prev = node.next = None
            node = following
            self.head = following

    def for_each(self, func: Callable[[Any], Any]) -> None:
        """Call ``func`` on every content from head to tail."""
        for content in self:
            func(content)

    def map(self, func: Callable[[Any], Any]) -> LinkedList:
        """Return a new list holding ``func`` applied to every content."""
        return LinkedList(func(content) for content in self)