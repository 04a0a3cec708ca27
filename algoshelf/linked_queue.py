"""A first-in, first-out queue built on linked nodes."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass


@dataclass(slots=True)
class _Node:
    value: int
    next: _Node | None = None


class LinkedQueue:
    """Unbounded FIFO queue of integers."""

    def __init__(self) -> None:
        self._head: _Node | None = None
        self._tail: _Node | None = None

    def __iter__(self) -> Iterator[int]:
        """Yield values from least to most recently added."""
        current = self._head
        while current is not None:
            yield current.value
            current = current.next

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __repr__(self) -> str:
        return f"LinkedQueue({list(self)!r})"

    def is_empty(self) -> bool:
        return self._head is None

    def enqueue(self, value: int) -> None:
        """Add ``value`` at the back of the queue."""
        node = _Node(value)
        if self._tail is not None:
            self._tail.next = node
        self._tail = node
        if self._head is None:
            self._head = node

    def dequeue(self) -> int:
        """Remove and return the least recently added value."""
        if self._head is None:
            raise IndexError("Unable to dequeue. Queue is empty.")
        node = self._head
        if self._tail is node:
            self._tail = None
        self._head = node.next
        return node.value

    def describe(self) -> str:
        """Return the queue contents, oldest first."""
        return "Queue contents: " + "".join(f"{value} < " for value in self)