"""Exception classes for pointerlists."""


class PointerListsError(Exception):
    """Base exception for all pointerlists errors."""


class CycleDetectedError(PointerListsError):
    """Raised when a full traversal is requested on a chain that loops back on itself."""


class NotSortedError(PointerListsError):
    """Raised when a merge input checked for order is not non-decreasing."""
