"""A binary min-heap stored in a list, indexed from zero."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, Generic, Optional, TypeVar

T = TypeVar("T")


class PriorityQueue(Generic[T]):
    """A min-priority queue kept as an implicit binary tree in ``items``.

    The children of position ``i`` are at ``2*i + 1`` and ``2*i + 2``.
    ``items`` is public so that an arbitrary array can be loaded and then
    restored to heap order with ``bubble_down``.
    """

    def __init__(self, items: Optional[Iterable[T]] = None) -> None:
        self.items: list[T] = list(items) if items is not None else []

    def __len__(self) -> int:
        return len(self.items)

    def is_empty(self) -> bool:
        return not self.items

    def swap(self, first: int, second: int) -> None:
        """Exchange the elements at two positions."""
        self.items[first], self.items[second] = self.items[second], self.items[first]

    def parent(self, index: int) -> Optional[int]:
        """Return the parent's position, or ``None`` for the root or a position past the end."""
        if index == 0 or index >= len(self.items):
            return None
        return (index - 1) // 2

    def young_child(self, index: int) -> int:
        """Position of the left child."""
        return index * 2 + 1

    def old_child(self, index: int) -> int:
        """Position of the right child."""
        return index * 2 + 2

    def _smallest_of_family(self, index: int) -> int:
        smallest = index
        first_child = self.young_child(index)
        for child in (first_child, first_child + 1):
            if child < len(self.items) and self.items[smallest] > self.items[child]:
                smallest = child
        return smallest

    def bubble_down(self, index: int) -> None:
        """Sift the element at ``index`` down, recursively, until heap order holds."""
        smallest = self._smallest_of_family(index)
        if smallest != index:
            self.swap(index, smallest)
            self.bubble_down(smallest)

    def bubble_down_iterative(self, index: int) -> None:
        """Sift the element at ``index`` down with a loop instead of recursion."""
        while index < len(self.items):
            smallest = self._smallest_of_family(index)
            if smallest == index:
                break
            self.swap(index, smallest)
            index = smallest

    def levels(self) -> list[list[T]]:
        """Return the elements grouped by tree level: 1, 2, 4, ... per level."""
        result: list[list[T]] = []
        start, width = 0, 1
        while start < len(self.items):
            result.append(self.items[start:start + width])
            start += width
            width *= 2
        return result

    def format(self) -> str:
        """Render the heap level by level under a ``Pyramid:`` heading."""
        lines = ["Pyramid:"]
        lines.extend(" ".join(str(item) for item in level) for level in self.levels())
        return "\n".join(lines)

    def extract_min(self) -> T:
        """Remove and return the smallest element.

        Raises ``IndexError`` when the queue is empty.
        """
        if not self.items:
            raise IndexError("priority queue is empty")
        smallest = self.items[0]
        last = self.items.pop()
        if self.items:
            self.items[0] = last
            self.bubble_down_iterative(0)
        return smallest

    def __repr__(self) -> str:
        return f"PriorityQueue({self.items!r})"


__all__: list[Any] = ["PriorityQueue"]