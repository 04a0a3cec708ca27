"""A bounded max-heap priority queue and an in-place heap sort."""

from __future__ import annotations

from collections.abc import MutableSequence

DEFAULT_CAPACITY = 1000


class MaxHeap:
    """Priority queue of integers that always yields the largest value first."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError(f"capacity must be at least 1, got {capacity}")
        self._capacity = capacity
        self._items: list[int] = []

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"MaxHeap({self._items!r}, capacity={self._capacity})"

    def is_empty(self) -> bool:
        return not self._items

    def insert(self, value: int) -> None:
        """Add ``value`` to the heap."""
        if len(self._items) == self._capacity:
            raise IndexError("Cannot add more items.")
        self._items.append(value)
        self._sift_up(len(self._items) - 1)

    def peek(self) -> int:
        """Return the largest value without removing it."""
        if not self._items:
            raise IndexError("heap is empty")
        return self._items[0]

    def extract_max(self) -> int:
        """Remove and return the largest value."""
        if not self._items:
            raise IndexError("heap is empty")
        return self.remove_at(0)

    def remove_at(self, index: int) -> int:
        """Remove the value stored at array position ``index`` and return it."""
        if not 0 <= index < len(self._items):
            raise IndexError(f"index {index} out of range")
        removed = self._items[index]
        last = self._items.pop()
        if index < len(self._items):
            self._items[index] = last
            self._sift_down(index)
            self._sift_up(index)
        return removed

    def elements(self) -> list[int]:
        """Return the heap's values in array order."""
        return list(self._items)

    def _sift_up(self, index: int) -> None:
        items = self._items
        while index > 0:
            parent = (index - 1) // 2
            if items[parent] >= items[index]:
                break
            items[parent], items[index] = items[index], items[parent]
            index = parent

    def _sift_down(self, index: int) -> None:
        percolate_down(self._items, len(self._items), index)


def percolate_down(numbers: MutableSequence[int], count: int, index: int) -> None:
    """Restore the max-heap property below ``index`` within ``numbers[:count]``."""
    i = index
    while 2 * i + 1 < count:
        left, right = 2 * i + 1, 2 * i + 2
        if right < count and not numbers[left] > numbers[right]:
            larger = right
        else:
            larger = left
        if numbers[larger] <= numbers[i]:
            break
        numbers[i], numbers[larger] = numbers[larger], numbers[i]
        i = larger


def heapify(numbers: MutableSequence[int]) -> None:
    """Rearrange ``numbers`` in place into a max-heap."""
    count = len(numbers)
    for index in range(count // 2 - 1, -1, -1):
        percolate_down(numbers, count, index)


def heap_sort(numbers: MutableSequence[int]) -> None:
    """Sort ``numbers`` in place in ascending order."""
    heapify(numbers)
    for end in range(len(numbers) - 1, 0, -1):
        numbers[0], numbers[end] = numbers[end], numbers[0]
        percolate_down(numbers, end, 0)