"""Basic usage example for pointerlists."""

import logging

from pointerlists import DoubleLinkedList, LinkedList, Node, merge_two_lists


def singly_linked_demo() -> None:
    """Demonstrate the singly-linked list algorithms."""
    print("=== Singly-Linked List ===\n")

    lst = LinkedList(1)
    lst.insert(2)
    lst.insert(3)
    lst.insert(4)
    lst.print_list()

    middle = lst.find_middle_node()
    print(f"Middle value: {middle.value if middle is not None else None}")
    print(f"Contains 2: {lst.search(2)}")

    lst.reverse_list()
    lst.print_list()

    print(f"Removed: {lst.remove()}")
    lst.print_list()

    # Wire a cycle by re-inserting a node that is already in the chain
    cycle_node = Node(5)
    cyclic = LinkedList.from_node(cycle_node)
    cyclic.insert(2)
    cyclic.insert(3)
    cyclic.insert_node(cycle_node)
    print(f"Has cycle: {cyclic.has_cycle()}")
    cyclic.print_list()
    print()


def doubly_linked_demo() -> None:
    """Demonstrate insertion and removal at both ends."""
    print("=== Doubly-Linked List ===\n")

    lst = DoubleLinkedList(1)
    lst.insert_to_tail(2)
    lst.insert_to_tail(3)
    lst.insert_to_head(0)
    lst.print_list()

    print(f"Removed from head: {lst.remove_from_head()}")
    print(f"Removed from tail: {lst.remove_from_tail()}")
    lst.print_list()
    print()


def merge_demo() -> None:
    """Demonstrate merging two sorted lists."""
    print("=== Merge Two Sorted Lists ===\n")

    merged = merge_two_lists(LinkedList.from_values([1, 3, 5]), LinkedList.from_values([2, 4, 6]))
    merged.print_list()


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    singly_linked_demo()
    doubly_linked_demo()
    merge_demo()
