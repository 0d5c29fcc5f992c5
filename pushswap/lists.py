"""A singly linked list of arbitrary contents."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass
class Node:
    """One link of a ``LinkedList``."""

    content: Any
    next: Node | None = None


class LinkedList:
    """A singly linked list, iterated from its head."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self.head: Node | None = None
        for item in items:
            self.add_back(item)

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def add_front(self, content: Any) -> Node:
        """Insert ``content`` at the head and return its node."""
        node = Node(content, self.head)
        self.head = node
        return node

    def add_back(self, content: Any) -> Node:
        """Append ``content`` at the end and return its node."""
        node = Node(content)
        tail = self.last()
        if tail is None:
            self.head = node
        else:
            tail.next = node
        return node

    def last(self) -> Node | None:
        """The final node, or ``None`` for an empty list."""
        tail = None
        for tail in self._nodes():
            pass
        return tail

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[Any]:
        for node in self._nodes():
            yield node.content

    def for_each(self, func: Callable[[Any], Any]) -> None:
        """Call ``func`` on every content, head first."""
        for content in self:
            func(content)

    def map(
        self,
        func: Callable[[Any], Any],
        delete: Callable[[Any], Any] | None = None,
    ) -> LinkedList:
        """Return a new list of ``func(content)`` for every content.

        When ``func`` returns ``None`` the contents already produced are
        passed to ``delete`` and ``ValueError`` is raised.
        """
        result = LinkedList()
        for content in self:
            mapped = func(content)
            if mapped is None:
                result.clear(delete)
                raise ValueError(f"mapping produced no value for {content!r}")
            result.add_back(mapped)
        return result

    def clear(self, delete: Callable[[Any], Any] | None = None) -> None:
        """Remove every node, passing each content to ``delete`` when given."""
        if delete is not None:
            for content in self:
                delete(content)
        self.head = None