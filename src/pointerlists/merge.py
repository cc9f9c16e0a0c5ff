"""Merging of two sorted singly-linked lists."""

import logging

from pointerlists.errors import NotSortedError
from pointerlists.linkedlist import LinkedList, Node
from pointerlists.types import T

logger = logging.getLogger(__name__)


def merge_two_chains(first: Node[T] | None, second: Node[T] | None) -> Node[T] | None:
    """
    Splice two ascending chains into one ascending chain and return its head.

    Nodes are relinked, not copied. On equal values the node from first comes
    before the node from second. Once either side runs out, the rest of the
    other side is adopted as-is.
    """
    if first is None:
        return second
    if second is None:
        return first

    # Both sides are non-empty, so the smaller head starts the merged chain
    if second.value < first.value:
        head, second = second, second.next
    else:
        head, first = first, first.next

    tail = head
    while first is not None and second is not None:
        if second.value < first.value:
            node, second = second, second.next
        else:
            node, first = first, first.next
        tail.next = node
        tail = node

    tail.next = first if first is not None else second
    return head


def merge_two_lists(
    first: LinkedList[T],
    second: LinkedList[T],
    *,
    check_sorted: bool = False,
) -> LinkedList[T]:
    """
    Merge two ascending lists into a new list.

    The result adopts the nodes of both inputs, so the inputs should not be
    used afterwards. If one input is empty the result shares the other's
    chain unchanged.

    Args:
        first: Ascending list whose values win ties
        second: Ascending list
        check_sorted: Verify both inputs are non-decreasing before merging

    Returns:
        A list holding every value of both inputs in non-decreasing order

    Raises:
        NotSortedError: If check_sorted is set and an input is out of order
        CycleDetectedError: If check_sorted is set and an input is cyclic
    """
    if check_sorted:
        _ensure_sorted(first, "first")
        _ensure_sorted(second, "second")

    merged = merge_two_chains(first.head, second.head)
    logger.debug("Merged two lists, new head: %r", merged)
    return LinkedList.from_node(merged, delimiter=first.delimiter)


def _ensure_sorted(lst: LinkedList[T], name: str) -> None:
    previous: T | None = None
    for value in lst:
        if previous is not None and value < previous:
            raise NotSortedError(f"{name} list is not sorted: {value!r} follows {previous!r}")
        previous = value
