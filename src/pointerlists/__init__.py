"""pointerlists - Singly- and doubly-linked lists with classic pointer algorithms."""

from pointerlists.doublylinkedlist import DoubleLinkedList, DoubleNode
from pointerlists.errors import CycleDetectedError, NotSortedError, PointerListsError
from pointerlists.linkedlist import LinkedList, Node
from pointerlists.merge import merge_two_chains, merge_two_lists
from pointerlists.types import Comparable

__version__ = "0.0.1"

__all__ = [
    "LinkedList",
    "Node",
    "DoubleLinkedList",
    "DoubleNode",
    "merge_two_lists",
    "merge_two_chains",
    "PointerListsError",
    "CycleDetectedError",
    "NotSortedError",
    "Comparable",
]
