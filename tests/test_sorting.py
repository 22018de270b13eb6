import random
from dataclasses import dataclass

import pytest

from algokit.sorting import insertion_sort, merge, merge_sort, quicksort
from algokit.structures import QueueOverflowError


@dataclass
class Student:
    name: str
    age: int


CASES = [
    [7, 3, 5, 2, 9, 1, 4],
    [38, 27, 43, 3, 9, 82, 10],
    [42, 7, 19, 73, 5],
    [],
    [1],
    [2, 2, 1, 1],
    list(range(20, 0, -1)),
]


@pytest.mark.parametrize("data", CASES)
def test_insertion_sort(data):
    items = list(data)
    insertion_sort(items)
    assert items == sorted(data)


@pytest.mark.parametrize("data", CASES)
def test_quicksort_default_less(data):
    items = list(data)
    quicksort(items, rng=random.Random(1))
    assert items == sorted(data)


@pytest.mark.parametrize("data", CASES)
def test_merge_sort(data):
    items = list(data)
    merge_sort(items, 0, len(items) - 1)
    assert items == sorted(data)


def test_insertion_sort_strings():
    items = ["z", "gaf", "gaf", "aaaaaaa", "bbbb"]
    insertion_sort(items)
    assert items == sorted(["z", "gaf", "gaf", "aaaaaaa", "bbbb"])


def test_quicksort_students_by_age():
    students = [
        Student("Иван", 22),
        Student("Мария", 19),
        Student("Петр", 25),
        Student("Анна", 20),
    ]
    quicksort(students, lambda a, b: a.age < b.age)
    assert [s.name for s in students] == ["Мария", "Анна", "Иван", "Петр"]


def test_quicksort_descending_comparator():
    items = [42, 7, 19, 73, 5]
    quicksort(items, lambda a, b: a > b, random.Random(3))
    assert items == sorted([42, 7, 19, 73, 5], reverse=True)


def test_quicksort_large_random_is_permutation():
    rng = random.Random(7)
    data = [rng.randint(-100, 100) for _ in range(500)]
    items = list(data)
    quicksort(items, rng=rng)
    assert items == sorted(data)


def test_merge_two_sorted_runs():
    items = [1, 4, 9, 2, 3, 10]
    merge(items, 0, 2, 5)
    assert items == sorted([1, 4, 9, 2, 3, 10])


def test_merge_sort_subrange_only():
    items = [9, 8, 3, 1, 2, 0]
    merge_sort(items, 1, 4)
    assert items[0] == 9
    assert items[5] == 0
    assert items[1:5] == sorted([8, 3, 1, 2])


def test_merge_sort_default_bounds():
    items = [5, 1, 4]
    merge_sort(items)
    assert items == [1, 4, 5]


def test_merge_sort_overflowing_buffers():
    items = list(range(2002, 0, -1))
    with pytest.raises(QueueOverflowError):
        merge_sort(items)