"""A bounded first-in, first-out queue stored in a circular buffer."""

from __future__ import annotations

from collections.abc import Iterator

DEFAULT_CAPACITY = 5


class RingQueue:
    """FIFO queue holding at most ``capacity`` integers.

    One slot of the buffer is always left unused so that a full queue can be
    told apart from an empty one.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError(f"capacity must be at least 1, got {capacity}")
        self._positions = capacity + 1
        self._slots = [0] * self._positions
        self._insert = 0
        self._pop = 0

    def __len__(self) -> int:
        return (self._insert - self._pop) % self._positions

    def __iter__(self) -> Iterator[int]:
        """Yield values from oldest to newest."""
        index = self._pop
        while index != self._insert:
            yield self._slots[index]
            index = (index + 1) % self._positions

    def __repr__(self) -> str:
        return f"RingQueue({list(self)!r}, capacity={self._positions - 1})"

    def is_empty(self) -> bool:
        return self._insert == self._pop

    def is_full(self) -> bool:
        return self._pop == (self._insert + 1) % self._positions

    def enqueue(self, value: int) -> None:
        """Add ``value`` at the back of the queue."""
        if self.is_full():
            raise IndexError("Cannot enqueue another item")
        self._slots[self._insert] = value
        self._insert = (self._insert + 1) % self._positions

    def dequeue(self) -> int:
        """Remove and return the oldest value."""
        if self.is_empty():
            raise IndexError("Queue is empty. Cannot dequeue.")
        value = self._slots[self._pop]
        self._slots[self._pop] = 0
        self._pop = (self._pop + 1) % self._positions
        return value

    def describe(self) -> str:
        """Return the queue contents, oldest first."""
        return "Queue contents (old to new): " + "".join(f"{v}, " for v in self)