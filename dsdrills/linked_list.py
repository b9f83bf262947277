"""A singly linked list of integers."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, TextIO


@dataclass(eq=False)
class Node:
    """One node of a linked list: a value and a link to the next node."""

    data: int
    next: Optional["Node"] = None


class LinkedList:
    """A singly linked list whose first node is available as ``head``."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self.head: Optional[Node] = None
        for value in values:
            self.insert(value)

    def _nodes(self) -> Iterator[Node]:
        current = self.head
        while current is not None:
            yield current
            current = current.next

    def insert(self, value: int) -> None:
        """Append ``value`` at the end of the list."""
        new_node = Node(value)
        if self.head is None:
            self.head = new_node
            return
        tail = self.head
        while tail.next is not None:
            tail = tail.next
        tail.next = new_node

    def search(self, value: int) -> bool:
        """Return whether ``value`` is stored in the list."""
        return any(node.data == value for node in self._nodes())

    def __contains__(self, value: object) -> bool:
        return any(node.data == value for node in self._nodes())

    def remove(self, value: int) -> None:
        """Unlink the first node holding ``value``; do nothing if there is none."""
        if self.head is None:
            return
        if self.head.data == value:
            self.head = self.head.next
            return
        previous = self.head
        while previous.next is not None and previous.next.data != value:
            previous = previous.next
        if previous.next is not None:
            previous.next = previous.next.next

    def __iter__(self) -> Iterator[int]:
        return (node.data for node in self._nodes())

    def __str__(self) -> str:
        return " -> ".join(str(value) for value in self)

    def print(self, file: Optional[TextIO] = None) -> None:
        """Write the list as ``a -> b -> c`` followed by a newline."""
        print(str(self), file=file if file is not None else sys.stdout)