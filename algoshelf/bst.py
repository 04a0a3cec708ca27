"""An unbalanced binary search tree of distinct integers."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass


@dataclass(slots=True)
class Node:
    """A tree node holding one value and its two subtrees."""

    value: int
    left: Node | None = None
    right: Node | None = None


def is_binary_search_tree(node: Node | None) -> bool:
    """Return True if every subtree under ``node`` keeps strict ordering."""
    pending: list[tuple[Node | None, int | None, int | None]] = [(node, None, None)]
    while pending:
        current, low, high = pending.pop()
        if current is None:
            continue
        if low is not None and current.value <= low:
            return False
        if high is not None and current.value >= high:
            return False
        pending.append((current.left, low, current.value))
        pending.append((current.right, current.value, high))
    return True


def _height(node: Node | None) -> int:
    if node is None:
        return 0
    return 1 + max(_height(node.left), _height(node.right))


def _min_value(node: Node) -> int:
    while node.left is not None:
        node = node.left
    return node.value


def _max_value(node: Node) -> int:
    while node.right is not None:
        node = node.right
    return node.value


def _delete(node: Node | None, value: int) -> Node | None:
    if node is None:
        return None
    if value < node.value:
        node.left = _delete(node.left, value)
    elif value > node.value:
        node.right = _delete(node.right, value)
    elif node.left is None:
        return node.right
    elif node.right is None:
        return node.left
    else:
        right_min = _min_value(node.right)
        node.value = right_min
        node.right = _delete(node.right, right_min)
    return node


class BinarySearchTree:
    """Binary search tree that ignores duplicate insertions."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._root: Node | None = None
        for value in values:
            self.insert(value)

    def __repr__(self) -> str:
        return f"BinarySearchTree({list(self)!r})"

    def insert(self, value: int) -> None:
        """Add ``value`` unless it is already present."""
        if self._root is None:
            self._root = Node(value)
            return
        current = self._root
        while True:
            if value < current.value:
                if current.left is None:
                    current.left = Node(value)
                    return
                current = current.left
            elif value > current.value:
                if current.right is None:
                    current.right = Node(value)
                    return
                current = current.right
            else:
                return

    def __contains__(self, value: object) -> bool:
        current = self._root
        while current is not None:
            if value < current.value:  # type: ignore[operator]
                current = current.left
            elif value > current.value:  # type: ignore[operator]
                current = current.right
            else:
                return True
        return False

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __iter__(self) -> Iterator[int]:
        """Yield the values in ascending order."""
        stack: list[Node] = []
        current = self._root
        while stack or current is not None:
            while current is not None:
                stack.append(current)
                current = current.left
            current = stack.pop()
            yield current.value
            current = current.right

    def height(self) -> int:
        """Return the height in nodes; an empty tree has height 0."""
        return _height(self._root)

    def minimum(self) -> int:
        """Return the smallest value, or 0 if the tree is empty."""
        return 0 if self._root is None else _min_value(self._root)

    def maximum(self) -> int:
        """Return the largest value, or 0 if the tree is empty."""
        return 0 if self._root is None else _max_value(self._root)

    def delete(self, value: int) -> None:
        """Remove ``value`` if it is present."""
        self._root = _delete(self._root, value)

    def successor(self, value: int) -> int:
        """Return the next larger value after ``value``, or -1 if there is none.

        An empty tree gives -1; a non-empty tree must contain ``value``.
        """
        if self._root is None:
            return -1
        target: Node | None = self._root
        while target is not None and target.value != value:
            target = target.left if value < target.value else target.right
        if target is None:
            raise ValueError(f"{value} is not in the tree")
        if target.right is not None:
            return _min_value(target.right)
        successor: Node | None = None
        ancestor: Node | None = self._root
        while ancestor is not None:
            if value < ancestor.value:
                successor = ancestor
                ancestor = ancestor.left
            else:
                ancestor = ancestor.right
        return -1 if successor is None else successor.value

    def is_valid(self) -> bool:
        """Return True if the tree satisfies the search-tree ordering."""
        return is_binary_search_tree(self._root)