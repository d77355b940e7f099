"""Ordered set stored in an unbalanced binary search tree."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any


class _Node:
    __slots__ = ("elem", "left", "right")

    def __init__(self, elem: Any) -> None:
        self.elem = elem
        self.left: _Node | None = None
        self.right: _Node | None = None


class SearchSet:
    """Set of mutually comparable elements, iterated in ascending order."""

    def __init__(self, iterable: Iterable[Any] | None = None) -> None:
        self._root: _Node | None = None
        self._size = 0
        if iterable is not None:
            for elem in iterable:
                self.insert(elem)

    def _find(self, elem: Any) -> _Node | None:
        node = self._root
        while node is not None:
            if elem < node.elem:
                node = node.left
            elif node.elem < elem:
                node = node.right
            else:
                return node
        return None

    def insert(self, elem: Any) -> bool:
        """Add ``elem``; return False if it was already present."""
        if self._root is None:
            self._root = _Node(elem)
            self._size += 1
            return True
        node = self._root
        while True:
            if elem < node.elem:
                if node.left is None:
                    node.left = _Node(elem)
                    break
                node = node.left
            elif node.elem < elem:
                if node.right is None:
                    node.right = _Node(elem)
                    break
                node = node.right
            else:
                return False
        self._size += 1
        return True

    def erase(self, elem: Any) -> bool:
        """Remove ``elem``; return False if it was not present."""
        parent: _Node | None = None
        node = self._root
        while node is not None:
            if elem < node.elem:
                parent, node = node, node.left
            elif node.elem < elem:
                parent, node = node, node.right
            else:
                break
        if node is None:
            return False
        if node.left is None or node.right is None:
            replacement = node.right if node.left is None else node.left
        else:
            # Lift the smallest element of the right subtree into the gap.
            successor_parent: _Node | None = None
            successor = node.right
            while successor.left is not None:
                successor_parent = successor
                successor = successor.left
            if successor_parent is not None:
                successor_parent.left = successor.right
                successor.right = node.right
            successor.left = node.left
            replacement = successor
        if parent is None:
            self._root = replacement
        elif parent.left is node:
            parent.left = replacement
        else:
            parent.right = replacement
        self._size -= 1
        return True

    def count(self, elem: Any) -> int:
        """1 if ``elem`` is in the set, else 0."""
        found = self._find(elem)
        return 0 if found is None else 1

    def __contains__(self, elem: Any) -> bool:
        return self._find(elem) is not None

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._root is not None

    def __iter__(self) -> Iterator[Any]:
        ancestors: list[_Node] = []
        node = self._root
        while node is not None or ancestors:
            while node is not None:
                ancestors.append(node)
                node = node.left
            node = ancestors.pop()
            yield node.elem
            node = node.right

    def __repr__(self) -> str:
        return f"SearchSet({list(self)!r})"

    def lower_bound(self, value: Any) -> Any:
        """The smallest element not less than ``value``, or None if there is none."""
        best = None
        node = self._root
        while node is not None:
            if node.elem < value:
                node = node.right
            else:
                best = node.elem
                node = node.left
        return best