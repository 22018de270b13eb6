"""Substring search and binary search over sorted sequences."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from typing import Any


def find_match(pattern: str, text: str) -> int:
    """Return the first position of ``pattern`` in ``text``, or -1 if absent.

    Every start position is tried in turn and the pattern is compared
    character by character.
    """
    plen = len(pattern)
    for start in range(len(text) - plen + 1):
        if all(t == p for t, p in zip(text[start:start + plen], pattern)):
            return start
    return -1


def binary_search(
    data: Sequence[Any],
    key: Any,
    low: int = 0,
    high: int | None = None,
) -> int:
    """Return the index of ``key`` in the sorted slice ``data[low:high + 1]``.

    Raises ``IndexError`` when the bounds are inverted, which is also how a
    missing key is reported once the search range becomes empty.
    """
    if high is None:
        high = len(data) - 1
    while True:
        if low > high:
            raise IndexError("invalid bounds")
        middle = (low + high) // 2
        value = data[middle]
        if value == key:
            return middle
        if value < key:
            low = middle + 1
        elif value > key:
            high = middle - 1
        else:
            raise IndexError("key is not comparable with the data")


def main(argv: list[str] | None = None) -> int:
    """Ask for a text and a pattern and report where the pattern occurs."""
    parser = argparse.ArgumentParser(description="Find a pattern in a text.")
    parser.parse_args(argv)

    text = input("Введите текст: ")
    pattern = input("Введите образец для поиска: ")

    position = find_match(pattern, text)
    if position == -1:
        print("Образец не найден в тексте")
    else:
        print(f"Образец найден на позиции: {position}")
        print(f"Найденная подстрока: {text[position:position + len(pattern)]}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())