"""A singly linked list of integers reached through its head only."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass


@dataclass(slots=True)
class _Node:
    value: int
    next: _Node | None = None


class SinglyLinkedList:
    """Singly linked list where every operation walks from the head."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._head: _Node | None = None
        for value in values:
            self.push_back(value)

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[int]:
        return (node.value for node in self._nodes())

    def __repr__(self) -> str:
        return f"SinglyLinkedList({list(self)!r})"

    def _nodes(self) -> Iterator[_Node]:
        current = self._head
        while current is not None:
            yield current
            current = current.next

    def _node_at(self, index: int) -> _Node | None:
        if index < 0:
            return None
        for position, node in enumerate(self._nodes()):
            if position == index:
                return node
        return None

    def _last(self) -> _Node:
        if self._head is None:
            raise IndexError("list is empty")
        current = self._head
        while current.next is not None:
            current = current.next
        return current

    def is_empty(self) -> bool:
        return self._head is None

    def value_at(self, n: int) -> int:
        """Return the value at index ``n``, counting from 0."""
        node = self._node_at(n)
        if node is None:
            raise IndexError("Given index does not exist in list.")
        return node.value

    def push_front(self, value: int) -> None:
        """Add ``value`` at the front."""
        self._head = _Node(value, self._head)

    def pop_front(self) -> int:
        """Remove the first item and return its value."""
        if self._head is None:
            raise IndexError("Unable to pop_front an empty list.")
        node = self._head
        self._head = node.next
        return node.value

    def push_back(self, value: int) -> None:
        """Add ``value`` at the end."""
        node = _Node(value)
        if self._head is None:
            self._head = node
        else:
            self._last().next = node

    def pop_back(self) -> int:
        """Remove the last item and return its value."""
        if self._head is None:
            raise IndexError("Unable to pop_back from empty list.")
        previous: _Node | None = None
        current = self._head
        while current.next is not None:
            previous = current
            current = current.next
        if previous is None:
            self._head = None
        else:
            previous.next = None
        return current.value

    def front(self) -> int:
        """Return the first value."""
        if self._head is None:
            raise IndexError("Unable to get front of empty list.")
        return self._head.value

    def back(self) -> int:
        """Return the last value."""
        if self._head is None:
            raise IndexError("Unable to get back of empty list.")
        return self._last().value

    def insert(self, index: int, value: int) -> None:
        """Insert ``value`` at ``index``; an index equal to the length appends."""
        if index < 0:
            raise IndexError("Given index out of bounds.")
        if index == 0:
            self.push_front(value)
            return
        previous = self._node_at(index - 1)
        if previous is None:
            raise IndexError("Given index out of bounds.")
        previous.next = _Node(value, previous.next)

    def erase(self, index: int) -> None:
        """Remove the item at ``index``."""
        if self._head is None:
            raise IndexError("Unable to erase from empty list.")
        if index < 0:
            raise IndexError("Index out of bounds.")
        if index == 0:
            self._head = self._head.next
            return
        previous = self._node_at(index - 1)
        if previous is None or previous.next is None:
            raise IndexError("Index out of bounds.")
        previous.next = previous.next.next

    def value_n_from_end(self, n: int) -> int:
        """Return the value ``n`` places from the end; the last item is n=1."""
        if n < 1 or self._head is None:
            raise IndexError("Cannot get nth item from end.")
        leading: _Node | None = self._head
        for _ in range(n):
            if leading is None:
                raise IndexError("List is too short to get nth item from end.")
            leading = leading.next
        match = self._head
        while leading is not None:
            leading = leading.next
            match = match.next
        return match.value

    def reverse(self) -> None:
        """Reverse the list in place."""
        previous: _Node | None = None
        current = self._head
        while current is not None:
            following = current.next
            current.next = previous
            previous = current
            current = following
        self._head = previous

    def remove_value(self, value: int) -> None:
        """Remove the first item equal to ``value``, if there is one."""
        previous: _Node | None = None
        for node in self._nodes():
            if node.value == value:
                if previous is None:
                    self._head = node.next
                else:
                    previous.next = node.next
                return
            previous = node

    def describe(self) -> str:
        """Return the values as a chain of arrows."""
        return "".join(f"{value} -> " for value in self)