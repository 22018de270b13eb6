"""Split a sequence into a contiguous slice and everything around it."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any


def partition_vectors(
    items: Sequence[Any], low: int, high: int
) -> tuple[list[Any], list[Any]]:
    """Return ``items[low..high]`` and the remaining elements in order.

    Raises ``IndexError`` unless ``0 <= low <= high < len(items)``.
    """
    if low < 0 or low > high or high >= len(items):
        raise IndexError("invalid bounds")
    inside = list(items[low:high + 1])
    outside = list(items[:low]) + list(items[high + 1:])
    return inside, outside