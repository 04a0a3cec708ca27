"""Randomised-pivot quicksort with Hoare-style partitioning."""

from __future__ import annotations

import random
from collections.abc import MutableSequence


def quick_sort(
    numbers: MutableSequence[int],
    left: int = 0,
    right: int | None = None,
    rng: random.Random | None = None,
) -> None:
    """Sort ``numbers[left..right]`` in place; ``right`` defaults to the last index."""
    if right is None:
        right = len(numbers) - 1
    if right <= left:
        return
    chooser = rng if rng is not None else random

    pivot = numbers[left + chooser.randrange(right - left)]
    i, j = left, right
    while i <= j:
        while numbers[i] < pivot:
            i += 1
        while numbers[j] > pivot:
            j -= 1
        if i <= j:
            numbers[i], numbers[j] = numbers[j], numbers[i]
            i += 1
            j -= 1

    if left < j:
        quick_sort(numbers, left, j, rng)
    if right > i:
        quick_sort(numbers, i, right, rng)