"""A singly linked list of arbitrary contents."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Optional

__all__ = ["Node", "LinkedList"]

Deleter = Optional[Callable[[Any], object]]


@dataclass(eq=False)
class Node:
    """One element of a LinkedList: its content and the node after it."""

    content: Any
    next: Optional["Node"] = None


class LinkedList:
    """A singly linked list.

    Iterating yields the contents from front to back. Operations that drop
    contents accept an optional *delete* callback that is handed each
    dropped content, for releasing whatever it holds.
    """

    def __init__(self, items: Optional[Iterable[Any]] = None) -> None:
        self.head: Optional[Node] = None
        self._tail: Optional[Node] = None
        self._size = 0
        for item in items or ():
            self.push_back(item)

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
        return f"{type(self).__name__}({list(self)!r})"

    def push_front(self, content: Any) -> Node:
        """Insert *content* at the front and return its node."""
        node = Node(content, self.head)
        self.head = node
        if self._tail is None:
            self._tail = node
        self._size += 1
        return node

    def push_back(self, content: Any) -> Node:
        """Append *content* at the back and return its node."""
        node = Node(content)
        if self._tail is None:
            self.head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1
        return node

    def last(self) -> Optional[Node]:
        """Return the last node, or None when the list is empty."""
        return self._tail

    def pop_front(self, delete: Deleter = None) -> Any:
        """Remove the first node and return its content.

        If *delete* is given it is called with the content first.
        Raises IndexError on an empty list.
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

    def clear(self, delete: Deleter = None) -> None:
        """Remove every node, front to back, passing each content to *delete*."""
        while self.head is not None:
            self.pop_front(delete)

    def for_each(self, f: Callable[[Any], object]) -> None:
        """Call *f* on each content, front to back."""
        for content in self:
            f(content)

    def map(self, f: Callable[[Any], Any], delete: Deleter = None) -> "LinkedList":
        """Return a new list of ``f(content)`` for each content.

        If *f* raises, the contents already produced are passed to *delete*
        and the exception propagates.
        """
        result = LinkedList()
        try:
            for content in self:
                result.push_back(f(content))
        except BaseException:
            result.clear(delete)
            raise
        return result