"""A singly linked list of arbitrary contents."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional

Deleter = Callable[[Any], Any]


@dataclass(eq=False)
class Node:
    """One link of a list: a content and the node that follows it."""

    content: Any
    next: Optional[Node] = None


class LinkedList:
    """Singly linked list with constant-time insertion at both ends."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self.head: Optional[Node] = None
        self._tail: Optional[Node] = None
        self._size = 0
        for item in items:
            self.add_back(item)

    def add_front(self, content: Any) -> Node:
        """Insert content at the front and return its new node."""
        node = Node(content, self.head)
        self.head = node
        if self._tail is None:
            self._tail = node
        self._size += 1
        return node

    def add_back(self, content: Any) -> Node:
        """Append content at the back and return its new node."""
        node = Node(content)
        if self._tail is None:
            self.head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1
        return node

    def last(self) -> Optional[Node]:
        """Return the last node, or None for an empty list."""
        return self._tail

    def pop_front(self, delete: Optional[Deleter] = None) -> Any:
        """Remove the first node and return its content.

        When delete is given it is called on the content before it is returned.
        An empty list raises IndexError.
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

    def clear(self, delete: Optional[Deleter] = None) -> None:
        """Remove every node, front to back, calling delete on each content if given."""
        while self.head is not None:
            self.pop_front(delete)

    def for_each(self, f: Callable[[Any], Any]) -> None:
        """Call f on every content, front to back."""
        for content in self:
            f(content)

    def map(self, f: Callable[[Any], Any], delete: Optional[Deleter] = None) -> LinkedList:
        """Return a new list holding f(content) for every content.

        If f raises, the contents already produced are passed to delete,
        front to back, and the exception propagates.
        """
        result = LinkedList()
        try:
            for content in self:
                result.add_back(f(content))
        except BaseException:
            result.clear(delete)
            raise
        return result

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        node = self.head
        while node is not None:
            yield node.content
            node = node.next

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"