"""Singly-linked list with the classic pointer algorithms (reverse, middle, cycle check)."""

import logging
import sys
from collections.abc import Iterable, Iterator
from typing import Generic, TextIO

from pointerlists.errors import CycleDetectedError
from pointerlists.types import DEFAULT_DELIMITER, T

logger = logging.getLogger(__name__)


class Node(Generic[T]):
    """A node in the singly-linked list."""

    __slots__ = ("value", "next")

    def __init__(self, value: T) -> None:
        self.value = value
        self.next: Node[T] | None = None

    def __repr__(self) -> str:
        return f"Node({self.value!r})"


class LinkedList(Generic[T]):
    """
    Singly-linked list addressed through its head node.

    New values are prepended, so the most recently inserted value is always
    at the head. Operations that walk the whole chain assume it is acyclic
    unless they say otherwise; use has_cycle() first when a chain may have
    been wired into a loop through insert_node().
    """

    def __init__(self, value: T | None = None, *, delimiter: str = DEFAULT_DELIMITER) -> None:
        """
        Initialize the list.

        Args:
            value: Optional initial value. If given, the list starts with a
                single node holding it; otherwise the list starts empty.
            delimiter: Separator placed between values by print_list() and str().
        """
        self.head: Node[T] | None = Node(value) if value is not None else None
        self.delimiter = delimiter

    @classmethod
    def from_node(
        cls, node: Node[T] | None, *, delimiter: str = DEFAULT_DELIMITER
    ) -> "LinkedList[T]":
        """Create a list that adopts an existing chain starting at node."""
        lst = cls(delimiter=delimiter)
        lst.head = node
        return lst

    @classmethod
    def from_values(
        cls, values: Iterable[T], *, delimiter: str = DEFAULT_DELIMITER
    ) -> "LinkedList[T]":
        """Create a list whose chain holds values in iteration order."""
        lst = cls(delimiter=delimiter)
        tail: Node[T] | None = None
        for value in values:
            node = Node(value)
            if tail is None:
                lst.head = node
            else:
                tail.next = node
            tail = node
        return lst

    def insert(self, value: T) -> None:
        """Prepend a new node holding value. O(1)."""
        self.insert_node(Node(value))

    def insert_node(self, node: Node[T]) -> None:
        """
        Prepend an already constructed node. O(1).

        The node's next link is overwritten to point at the current head.
        Inserting a node that is already reachable further down the chain
        therefore closes a cycle.
        """
        node.next = self.head
        self.head = node

    def remove(self) -> T | None:
        """Remove the head node and return its value, or None if the list is empty. O(1)."""
        removed = self.head
        if removed is None:
            return None
        self.head = removed.next
        return removed.value

    def search(self, value: T) -> bool:
        """
        Return True if any node holds a value equal to value. O(n).

        The chain must be acyclic unless value is known to occur before the
        start of the cycle; otherwise the scan never ends.
        """
        node = self.head
        while node is not None:
            if node.value == value:
                return True
            node = node.next
        return False

    def reverse_list(self) -> None:
        """Reverse the chain in place. O(n) time, O(1) extra space."""
        reversed_head: Node[T] | None = None
        node = self.head
        while node is not None:
            next_node = node.next
            node.next = reversed_head
            reversed_head = node
            node = next_node
        self.head = reversed_head
        logger.debug("Reversed list, new head: %r", reversed_head)

    def find_middle_node(self) -> Node[T] | None:
        """
        Return the middle node, or None if the list is empty.

        The fast pointer starts one node ahead of the slow one, so for an
        even number of nodes the second of the two middles is returned.

        Raises:
            CycleDetectedError: If the chain contains a cycle
        """
        if self.head is None:
            return None
        if self.has_cycle():
            raise CycleDetectedError("Cannot find the middle of a cyclic list")
        slow = self.head
        fast = self.head.next
        while fast is not None and slow.next is not None:
            slow = slow.next
            fast = fast.next.next if fast.next is not None else None
        return slow

    def has_cycle(self) -> bool:
        """Return True if following next links ever revisits a node (Floyd's algorithm)."""
        slow = self.head
        fast = self.head
        while slow is not None and fast is not None and fast.next is not None:
            slow = slow.next
            fast = fast.next.next
            if slow is fast:
                return True
        return False

    def print_list(self, file: TextIO | None = None) -> None:
        """
        Write the values in chain order to file (stdout by default).

        A cyclic chain is never traversed: a diagnostic line is written instead.
        """
        out = file if file is not None else sys.stdout
        if self.has_cycle():
            logger.warning("Print aborted: cycle detected")
            print("Print aborted: Cycle detected", file=out)
            return
        print(f"List {self._render()}", file=out)

    def to_list(self) -> list[T]:
        """Return the values in chain order as a Python list."""
        return list(self)

    def _render(self) -> str:
        return self.delimiter.join(str(value) for value in self._values())

    def _values(self) -> Iterator[T]:
        node = self.head
        while node is not None:
            yield node.value
            node = node.next

    def __iter__(self) -> Iterator[T]:
        """Iterate over values head-to-tail.

        Raises:
            CycleDetectedError: If the chain contains a cycle
        """
        if self.has_cycle():
            raise CycleDetectedError("Cannot iterate over a cyclic list")
        return self._values()

    def __len__(self) -> int:
        """Return the number of nodes in the chain. O(n)."""
        count = 0
        for _ in self:
            count += 1
        return count

    def __bool__(self) -> bool:
        """Return True if the list is non-empty."""
        return self.head is not None

    def __contains__(self, value: T) -> bool:
        return self.search(value)

    def __str__(self) -> str:
        if self.has_cycle():
            return "<cycle>"
        return self._render()

    def __repr__(self) -> str:
        return f"LinkedList({self})"
