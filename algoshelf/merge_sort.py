"""Top-down merge sort over a slice of a list."""

from __future__ import annotations

from collections.abc import MutableSequence


def merge(numbers: MutableSequence[int], low: int, mid: int, high: int) -> None:
    """Merge the sorted runs ``numbers[low..mid]`` and ``numbers[mid+1..high]`` in place."""
    merged: list[int] = []
    i, j = low, mid + 1
    while i <= mid and j <= high:
        if numbers[i] <= numbers[j]:
            merged.append(numbers[i])
            i += 1
        else:
            merged.append(numbers[j])
            j += 1
    merged.extend(numbers[i : mid + 1])
    merged.extend(numbers[j : high + 1])
    numbers[low : high + 1] = merged


def merge_sort(
    numbers: MutableSequence[int], low: int = 0, high: int | None = None
) -> None:
    """Sort ``numbers[low..high]`` in place; ``high`` defaults to the last index."""
    if high is None:
        high = len(numbers) - 1
    if low < high:
        mid = (low + high) // 2
        merge_sort(numbers, low, mid)
        merge_sort(numbers, mid + 1, high)
        merge(numbers, low, mid, high)