"""A singly linked list of arbitrary values."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(eq=False)
class Node:
    """One list cell: a value and the cell after it."""

    value: Any
    next: Optional["Node"] = None


class LinkedList:
    """Singly linked list with front and back insertion."""

    def __init__(self, items: Iterable[Any] | None = None) -> None:
        self.head: Node | None = None
        for item in items or ():
            self.push_back(item)

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def push_front(self, value: Any) -> Node:
        """Insert ``value`` at the front and return its node."""
        self.head = Node(value, self.head)
        return self.head

    def push_back(self, value: Any) -> Node:
        """Append ``value`` at the end and return its node."""
        node = Node(value)
        tail = self.last()
        if tail is None:
            self.head = node
        else:
            tail.next = node
        return node

    def last(self) -> Node | None:
        """Return the last node, or None when the list is empty."""
        tail = None
        for tail in self._nodes():
            pass
        return tail

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[Any]:
        for node in self._nodes():
            yield node.value

    def clear(self, delete: Callable[[Any], None] | None = None) -> None:
        """Empty the list, passing each value to ``delete`` from last to first."""
        if delete is not None:
            for value in reversed(list(self)):
                delete(value)
        self.head = None

    def for_each(self, func: Callable[[Any], None]) -> None:
        """Call ``func`` on every value in order."""
        for value in self:
            func(value)

    def map(
        self,
        func: Callable[[Any], Any],
        delete: Callable[[Any], None] | None = None,
    ) -> "LinkedList":
        """Return a new list of ``func(value)`` for every value.

        If ``func`` raises, the values already produced are passed to
        ``delete`` and the error propagates.
        """
        result = LinkedList()
        try:
            for value in self:
                result.push_back(func(value))
        except BaseException:
            result.clear(delete)
            raise
        return result