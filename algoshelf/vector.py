"""A growable array of integers that manages its own capacity."""

from __future__ import annotations

import sys
from collections.abc import Iterator, Sequence

MIN_CAPACITY = 16
GROWTH_FACTOR = 2
SHRINK_FACTOR = 4


def determine_capacity(capacity: int) -> int:
    """Return the power-of-growth capacity needed to hold ``capacity`` items."""
    if capacity < 1:
        raise ValueError(f"capacity must be at least 1, got {capacity}")
    true_capacity = MIN_CAPACITY
    while capacity > true_capacity // GROWTH_FACTOR:
        true_capacity *= GROWTH_FACTOR
    return true_capacity


class DynamicArray:
    """Vector of integers that grows and shrinks by fixed factors."""

    def __init__(self, capacity: int = MIN_CAPACITY) -> None:
        self._capacity = determine_capacity(capacity)
        self._items: list[int] = []

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        return iter(self._items)

    def __getitem__(self, index: int) -> int:
        self._check_index(index)
        return self._items[index]

    def __repr__(self) -> str:
        return f"DynamicArray({self._items!r}, capacity={self._capacity})"

    @property
    def capacity(self) -> int:
        """The number of items the array can hold before growing."""
        return self._capacity

    def is_empty(self) -> bool:
        return not self._items

    def push(self, item: int) -> None:
        """Append ``item`` at the end."""
        self._resize_for_size(len(self._items) + 1)
        self._items.append(item)

    def insert(self, index: int, value: int) -> None:
        """Insert ``value`` before the existing item at ``index``."""
        self._check_index(index)
        self._resize_for_size(len(self._items) + 1)
        self._items.insert(index, value)

    def prepend(self, value: int) -> None:
        """Insert ``value`` at the front; the array must not be empty."""
        self.insert(0, value)

    def pop(self) -> int:
        """Remove and return the last item."""
        if not self._items:
            raise IndexError("pop from empty array")
        self._resize_for_size(len(self._items) - 1)
        return self._items.pop()

    def delete(self, index: int) -> None:
        """Remove the item at ``index``, shifting later items left."""
        self._check_index(index)
        self._resize_for_size(len(self._items) - 1)
        del self._items[index]

    def remove(self, value: int) -> None:
        """Remove every occurrence of ``value``."""
        while (index := self.find(value)) != -1:
            self.delete(index)

    def find(self, value: int) -> int:
        """Return the index of the first ``value``, or -1 if absent."""
        try:
            return self._items.index(value)
        except ValueError:
            return -1

    def describe(self) -> str:
        """Return a multi-line summary of size, capacity and items."""
        lines = [
            f"Size: {len(self._items)}",
            f"Capacity: {self._capacity}",
            "Items:",
        ]
        lines.extend(f"{i}: {item}" for i, item in enumerate(self._items))
        lines.append("---------")
        return "\n".join(lines) + "\n"

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._items):
            raise IndexError(f"index {index} out of range")

    def _resize_for_size(self, candidate_size: int) -> None:
        size = len(self._items)
        if size < candidate_size:
            if size == self._capacity:
                self._upsize()
        elif size > candidate_size:
            if size < self._capacity // SHRINK_FACTOR:
                self._downsize()

    def _upsize(self) -> None:
        self._capacity = determine_capacity(self._capacity)

    def _downsize(self) -> None:
        self._capacity = max(self._capacity // GROWTH_FACTOR, MIN_CAPACITY)


def _run_example(capacity: int) -> None:
    array = DynamicArray(capacity)
    for number in range(1, capacity + 1):
        array.push(number)

    insert_value = 999
    print(f" - Inserting {insert_value} at index {capacity - 1}.")
    array.insert(capacity - 1, insert_value)

    print(f" - Prepending {12}.")
    array.prepend(12)

    print(f" - Popping an item: {array.pop()}")
    print(array.describe(), end="")

    index_to_remove = len(array) - 3
    print(f" - Deleting from index {index_to_remove}")
    array.delete(index_to_remove)

    array.push(12)
    array.push(12)
    print(array.describe(), end="")

    print(" - Deleting 12s")
    array.remove(12)
    print(array.describe(), end="")


def main(argv: Sequence[str] | None = None) -> int:
    """Run the interactive vector example; the count may be given as an argument."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        if args:
            capacity = int(args[0])
        else:
            capacity = int(input("Enter many numbers would you like to store: "))
    except (ValueError, EOFError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    print(f"You'll be storing {capacity} numbers.")
    try:
        _run_example(capacity)
    except (ValueError, IndexError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())