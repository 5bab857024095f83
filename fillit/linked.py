"""A singly linked list of arbitrary values."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Iterable, Iterator, Optional


@dataclass(eq=False)
class Node:
    """One link of a :class:`LinkedList`."""

    content: Any
    next: Optional["Node"] = field(default=None, repr=False)


class LinkedList:
    """A singly linked list that keeps its head and tail."""

    def __init__(self, items: Optional[Iterable[Any]] = None) -> None:
        self.head: Optional[Node] = None
        self._tail: Optional[Node] = None
        self._size = 0
        for item in items or ():
            self.push_back(item)

    def push_front(self, content: Any) -> Node:
        """Insert ``content`` at the start of the list and return its node."""
        node = Node(content, self.head)
        self.head = node
        if self._tail is None:
            self._tail = node
        self._size += 1
        return node

    def push_back(self, content: Any) -> Node:
        """Append ``content`` to the end of the list and return its node."""
        node = Node(content)
        if self._tail is None:
            self.head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1
        return node

    def __len__(self) -> int:
        return self._size

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            following = node.next
            yield node
            node = following

    def __iter__(self) -> Iterator[Any]:
        return (node.content for node in self._nodes())

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def last(self) -> Optional[Node]:
        """The final node, or None for an empty list."""
        return self._tail

    def at(self, index: int) -> Optional[Node]:
        """The node at position ``index``, or None if the list is shorter."""
        if index < 0:
            raise ValueError(f"negative index {index}")
        for position, node in enumerate(self._nodes()):
            if position == index:
                return node
        return None

    def clear(self, on_delete: Optional[Callable[[Any], None]] = None) -> None:
        """Remove every node, passing each content to ``on_delete`` in order."""
        for node in self._nodes():
            if on_delete is not None:
                on_delete(node.content)
            node.next = None
        self.head = None
        self._tail = None
        self._size = 0

    def for_each(self, func: Callable[[Any], None]) -> None:
        """Call ``func`` on each content from head to tail."""
        for content in self:
            func(content)

    def map(self, func: Callable[[Any], Any]) -> "LinkedList":
        """A new list holding ``func`` applied to each content."""
        return LinkedList(func(content) for content in self)


def foreach(values: Iterable[Any], func: Callable[[Any], None]) -> None:
    """Call ``func`` on each of ``values`` in order."""
    for value in values:
        func(value)