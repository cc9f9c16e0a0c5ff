"""Doubly-linked list with O(1) insertion and removal at both ends."""

import sys
from collections.abc import Iterable, Iterator
from typing import Generic, TextIO

from pointerlists.types import DEFAULT_DELIMITER, T


class DoubleNode(Generic[T]):
    """A node in the doubly-linked list."""

    __slots__ = ("value", "next", "previous")

    def __init__(self, value: T) -> None:
        self.value = value
        self.next: DoubleNode[T] | None = None
        # Back-reference used for traversal only
        self.previous: DoubleNode[T] | None = None

    def __repr__(self) -> str:
        return f"DoubleNode({self.value!r})"


class DoubleLinkedList(Generic[T]):
    """
    Doubly-linked list tracking both its head and tail.

    Invariants:
        head is None <=> tail is None <=> the list is empty
        head.previous is None and tail.next is None
        for adjacent nodes a -> b, b.previous is a
    """

    def __init__(self, value: T | None = None, *, delimiter: str = DEFAULT_DELIMITER) -> None:
        """
        Initialize the list.

        Args:
            value: Optional initial value. If given, the list starts with a
                single node that is both head and tail.
            delimiter: Separator placed between values by print_list() and str().
        """
        self.head: DoubleNode[T] | None = None
        self.tail: DoubleNode[T] | None = None
        self.delimiter = delimiter
        self._size = 0
        if value is not None:
            self.insert_to_tail(value)

    @classmethod
    def from_values(
        cls, values: Iterable[T], *, delimiter: str = DEFAULT_DELIMITER
    ) -> "DoubleLinkedList[T]":
        """Create a list holding values head-to-tail in iteration order."""
        lst = cls(delimiter=delimiter)
        for value in values:
            lst.insert_to_tail(value)
        return lst

    def insert_to_head(self, value: T) -> None:
        """Prepend value. O(1)."""
        node = DoubleNode(value)
        self._size += 1
        if self.head is None:
            # Empty list: the new node is both ends
            self.head = node
            self.tail = node
            return
        node.next = self.head
        self.head.previous = node
        self.head = node

    def insert_to_tail(self, value: T) -> None:
        """Append value. O(1)."""
        node = DoubleNode(value)
        self._size += 1
        if self.tail is None:
            self.head = node
            self.tail = node
            return
        node.previous = self.tail
        self.tail.next = node
        self.tail = node

    def remove_from_head(self) -> T | None:
        """Remove and return the head value, or None if the list is empty. O(1)."""
        removed = self.head
        if removed is None:
            return None
        self.head = removed.next
        if self.head is not None:
            self.head.previous = None
        else:
            self.tail = None
        removed.next = None
        self._size -= 1
        return removed.value

    def remove_from_tail(self) -> T | None:
        """Remove and return the tail value, or None if the list is empty. O(1)."""
        removed = self.tail
        if removed is None:
            return None
        self.tail = removed.previous
        if self.tail is not None:
            self.tail.next = None
        else:
            self.head = None
        removed.previous = None
        self._size -= 1
        return removed.value

    def print_list(self, file: TextIO | None = None) -> None:
        """Write the values head-to-tail to file (stdout by default)."""
        print(f"List {self}", file=file if file is not None else sys.stdout)

    def to_list(self) -> list[T]:
        """Return the values head-to-tail as a Python list."""
        return list(self)

    def __iter__(self) -> Iterator[T]:
        node = self.head
        while node is not None:
            yield node.value
            node = node.next

    def __reversed__(self) -> Iterator[T]:
        node = self.tail
        while node is not None:
            yield node.value
            node = node.previous

    def __len__(self) -> int:
        """Return the number of nodes in the list."""
        return self._size

    def __bool__(self) -> bool:
        """Return True if the list is non-empty."""
        return self._size > 0

    def __contains__(self, value: object) -> bool:
        return any(item == value for item in self)

    def __str__(self) -> str:
        return self.delimiter.join(str(value) for value in self)

    def __repr__(self) -> str:
        return f"DoubleLinkedList({self})"
