"""A singly linked list node and a bounded FIFO queue."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any, Generic, Optional, TypeVar

T = TypeVar("T")

QUEUE_SIZE = 1000


@dataclass
class ListNode:
    """One node of a singly linked list."""

    item: Any
    next: Optional["ListNode"] = None


def demonstrate_linked_list() -> ListNode:
    """Build a two-node list, print its contents and return its head."""
    first = ListNode(100)
    second = ListNode(200)
    first.next = second

    print("Linked list demonstration:")
    print(f"Node 1: {first.item}")
    print(f"Node 2: {first.next.item}")
    return first


class QueueOverflowError(Exception):
    """Raised when an item is added to a full queue."""


class BoundedQueue(Generic[T]):
    """A first-in first-out queue holding at most ``capacity`` items."""

    def __init__(self, capacity: int = QUEUE_SIZE) -> None:
        if capacity < 1:
            raise ValueError("capacity must be positive")
        self.capacity = capacity
        self._items: deque[T] = deque()

    def enqueue(self, item: T) -> None:
        """Append ``item`` at the back of the queue."""
        if len(self._items) >= self.capacity:
            raise QueueOverflowError(f"queue overflow enqueue x={item}")
        self._items.append(item)

    def dequeue(self) -> T:
        """Remove and return the item at the front."""
        if not self._items:
            raise IndexError("dequeue from empty queue")
        return self._items.popleft()

    def head(self) -> T:
        """Return the item at the front without removing it."""
        if not self._items:
            raise IndexError("head of empty queue")
        return self._items[0]

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def format(self) -> str:
        """Return the items front to back, separated by spaces."""
        return " ".join(str(item) for item in self._items)