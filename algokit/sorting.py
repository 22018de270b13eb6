"""In-place insertion sort, randomised quicksort and queue-based merge sort."""

from __future__ import annotations

import operator
import random
from collections.abc import Callable, MutableSequence
from typing import Any

from algokit.structures import BoundedQueue


def insertion_sort(items: MutableSequence[Any]) -> None:
    """Sort ``items`` in place by swapping each element leftwards."""
    for i in range(1, len(items)):
        j = i
        while j > 0 and items[j] < items[j - 1]:
            items[j], items[j - 1] = items[j - 1], items[j]
            j -= 1


def _partition(
    items: MutableSequence[Any],
    low: int,
    high: int,
    less: Callable[[Any, Any], bool],
    rng: Any,
) -> int:
    pivot_index = rng.randrange(low, high + 1)
    items[pivot_index], items[high] = items[high], items[pivot_index]
    pivot = items[high]
    boundary = low
    for j in range(low, high):
        if less(items[j], pivot):
            items[boundary], items[j] = items[j], items[boundary]
            boundary += 1
    items[boundary], items[high] = items[high], items[boundary]
    return boundary


def quicksort(
    items: MutableSequence[Any],
    less: Callable[[Any, Any], bool] = operator.lt,
    rng: Any = None,
) -> None:
    """Sort ``items`` in place with a random pivot and comparison ``less``.

    ``rng`` supplies ``randrange``; the ``random`` module is used by default.
    """
    if rng is None:
        rng = random
    pending = [(0, len(items) - 1)]
    while pending:
        low, high = pending.pop()
        if low >= high:
            continue
        pivot = _partition(items, low, high, less, rng)
        pending.append((low, pivot - 1))
        pending.append((pivot + 1, high))


def merge(items: MutableSequence[Any], low: int, middle: int, high: int) -> None:
    """Merge the sorted runs ``items[low:middle+1]`` and ``items[middle+1:high+1]``.

    Each run is buffered in a bounded queue, so a run longer than the queue's
    capacity raises ``QueueOverflowError``.
    """
    left: BoundedQueue[Any] = BoundedQueue()
    right: BoundedQueue[Any] = BoundedQueue()
    for item in items[low:middle + 1]:
        left.enqueue(item)
    for item in items[middle + 1:high + 1]:
        right.enqueue(item)

    merged = []
    while left and right:
        source = left if left.head() <= right.head() else right
        merged.append(source.dequeue())
    merged.extend(left)
    merged.extend(right)
    items[low:high + 1] = merged


def merge_sort(items: MutableSequence[Any], low: int = 0, high: int | None = None) -> None:
    """Sort ``items[low:high+1]`` in place by merge sort."""
    if high is None:
        high = len(items) - 1
    if low < high:
        middle = (low + high) // 2
        merge_sort(items, low, middle)
        merge_sort(items, middle + 1, high)
        merge(items, low, middle, high)