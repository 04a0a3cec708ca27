"""A top-down splay tree of distinct integers."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass


@dataclass(slots=True)
class SplayNode:
    """A splay-tree node holding one value and its two subtrees."""

    value: int
    left: SplayNode | None = None
    right: SplayNode | None = None


def splay(node: SplayNode, value: int) -> SplayNode:
    """Splay the node nearest ``value`` to the top and return the new root."""
    header = SplayNode(0)
    left_max = right_min = header
    x = node
    while True:
        if value < x.value:
            if x.left is None:
                break
            if value < x.left.value:
                y = x.left
                x.left = y.right
                y.right = x
                x = y
                if x.left is None:
                    break
            right_min.left = x
            right_min = x
            x = x.left
        elif value > x.value:
            if x.right is None:
                break
            if value > x.right.value:
                y = x.right
                x.right = y.left
                y.left = x
                x = y
                if x.right is None:
                    break
            left_max.right = x
            left_max = x
            x = x.right
        else:
            break
    left_max.right = x.left
    right_min.left = x.right
    x.left = header.right
    x.right = header.left
    return x


class SplayTree:
    """Self-adjusting search tree that ignores duplicate insertions."""

    def __init__(self) -> None:
        self._root: SplayNode | None = None

    def __repr__(self) -> str:
        return f"SplayTree({list(self)!r})"

    def insert(self, value: int) -> None:
        """Add ``value`` and make it the root."""
        if self._root is None:
            self._root = SplayNode(value)
            return
        root = splay(self._root, value)
        if value < root.value:
            self._root = SplayNode(value, root.left, root)
            root.left = None
        elif value > root.value:
            self._root = SplayNode(value, root, root.right)
            root.right = None
        else:
            self._root = root

    def delete(self, value: int) -> None:
        """Remove ``value`` if present; the tree is splayed either way."""
        if self._root is None:
            return
        root = splay(self._root, value)
        if value != root.value:
            self._root = root
            return
        if root.left is None:
            self._root = root.right
        else:
            new_root = splay(root.left, value)
            new_root.right = root.right
            self._root = new_root

    def __iter__(self) -> Iterator[int]:
        """Yield the values in ascending order."""
        stack: list[SplayNode] = []
        current = self._root
        while stack or current is not None:
            while current is not None:
                stack.append(current)
                current = current.left
            current = stack.pop()
            yield current.value
            current = current.right

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def describe(self) -> str:
        """Return the values in order, or a marker for an empty tree."""
        if self._root is None:
            return "-- empty --"
        return "".join(f"{value} < " for value in self)