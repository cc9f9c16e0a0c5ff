"""Type definitions for pointerlists."""

from typing import Any, Protocol, TypeVar


class Comparable(Protocol):
    """Anything supporting ``==`` and ``<``, which search and merge rely on."""

    def __eq__(self, other: Any) -> bool: ...

    def __lt__(self, other: Any) -> bool: ...


# Element type stored in list nodes
T = TypeVar("T", bound=Comparable)

# Separator placed between values when a list is rendered
DEFAULT_DELIMITER = " -> "
