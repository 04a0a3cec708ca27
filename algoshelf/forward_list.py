"""A singly linked list of integers that tracks both ends."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass


@dataclass(slots=True)
class _Node:
    value: int
    next: _Node | None = None


class ForwardList:
    """Singly linked list with constant-time access to front and back."""

    def __init__(self) -> None:
        self._head: _Node | None = None
        self._tail: _Node | None = None

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[int]:
        return (node.value for node in self._nodes())

    def __repr__(self) -> str:
        return f"ForwardList({list(self)!r})"

    def _nodes(self) -> Iterator[_Node]:
        current = self._head
        while current is not None:
            yield current
            current = current.next

    def _node_at(self, index: int) -> _Node | None:
        for position, node in enumerate(self._nodes()):
            if position == index:
                return node
        return None

    def is_empty(self) -> bool:
        return self._head is None

    def front(self) -> int:
        """Return the first value."""
        if self._head is None:
            raise IndexError("Cannot get front of empty list")
        return self._head.value

    def back(self) -> int:
        """Return the last value."""
        if self._tail is None:
            raise IndexError("Cannot get back of empty list")
        return self._tail.value

    def push_front(self, value: int) -> None:
        """Add ``value`` at the front."""
        self._head = _Node(value, self._head)
        if self._tail is None:
            self._tail = self._head

    def pop_front(self) -> int:
        """Remove the first item and return its value."""
        if self._head is None:
            raise IndexError("Cannot pop front of empty list")
        node = self._head
        self._head = node.next
        if self._tail is node:
            self._tail = self._head
        return node.value

    def push_back(self, value: int) -> None:
        """Add ``value`` at the end."""
        node = _Node(value)
        if self._tail is None:
            self._head = self._tail = node
        else:
            self._tail.next = node
            self._tail = node

    def pop_back(self) -> int:
        """Remove the last item and return its value."""
        if self._tail is None:
            raise IndexError("Cannot pop back of empty list")
        value = self._tail.value
        if self._head is self._tail:
            self._head = self._tail = None
            return value
        previous = self._head
        while previous.next is not self._tail:
            previous = previous.next
        previous.next = None
        self._tail = previous
        return value

    def insert(self, index: int, value: int) -> None:
        """Insert ``value`` so it takes the place of the item at ``index``.

        Index 0 is always accepted; any other index must name an existing item.
        """
        if index == 0:
            self.push_front(value)
            return
        if index < 0:
            raise IndexError("Index out of bounds")
        previous = self._node_at(index - 1)
        if previous is None:
            raise IndexError("Index out of bounds")
        if previous.next is None:
            raise IndexError("Cannot insert - index beyond size")
        previous.next = _Node(value, previous.next)

    def value_at(self, index: int) -> int:
        """Return the value of the item at ``index``."""
        node = self._node_at(index) if index >= 0 else None
        if node is None:
            raise IndexError("Index out of bounds")
        return node.value

    def erase(self, index: int) -> None:
        """Remove the item at ``index``."""
        if self._head is None:
            raise IndexError("Cannot erase: empty list")
        if index < 0:
            raise IndexError("Index out of bounds")
        if index == 0:
            self.pop_front()
            return
        previous = self._node_at(index - 1)
        if previous is None or previous.next is None:
            raise IndexError("Index out of bounds")
        target = previous.next
        previous.next = target.next
        if self._tail is target:
            self._tail = previous

    def value_n_from_end(self, n: int) -> int:
        """Return the value ``n`` places from the end; the last item is n=1."""
        if n < 1:
            raise IndexError("n must be at least 1")
        leading = self._head
        for _ in range(n):
            if leading is None:
                raise IndexError("List not long enough to find nth item from end.")
            leading = leading.next
        match = self._head
        while leading is not None:
            leading = leading.next
            match = match.next
        return match.value

    def reverse(self) -> None:
        """Reverse the order of the items in place."""
        previous: _Node | None = None
        current = self._head
        self._tail = self._head
        while current is not None:
            following = current.next
            current.next = previous
            previous = current
            current = following
        self._head = previous

    def remove(self, value: int) -> None:
        """Remove the first item equal to ``value``, if any."""
        previous: _Node | None = None
        for node in self._nodes():
            if node.value == value:
                if previous is None:
                    self._head = node.next
                else:
                    previous.next = node.next
                if self._tail is node:
                    self._tail = previous
                return
            previous = node

    def describe(self) -> str:
        """Return a summary of the ends and the path through the list."""
        head = self._head.value if self._head else None
        tail = self._tail.value if self._tail else None
        path = "".join(f"{value} -> " for value in self)
        return f"head: {head}\ntail: {tail}\npath: {path}\n"