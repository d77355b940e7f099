"""Circular doubly linked list with a sentinel node."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any


class _Node:
    __slots__ = ("elem", "prev", "next")

    def __init__(self, elem: Any = None) -> None:
        self.elem = elem
        self.prev: _Node = self
        self.next: _Node = self


class DoubleLinkedList:
    """Doubly linked list whose operations relink nodes in place."""

    def __init__(self, iterable: Iterable[Any] | None = None) -> None:
        self._sentinel = _Node()
        if iterable is not None:
            for elem in iterable:
                self.push_back(elem)

    def _insert_between(self, elem: Any, before: _Node, after: _Node) -> _Node:
        node = _Node(elem)
        node.prev = before
        node.next = after
        before.next = node
        after.prev = node
        return node

    @staticmethod
    def _unlink(node: _Node) -> None:
        node.prev.next = node.next
        node.next.prev = node.prev

    def _nodes(self) -> list[_Node]:
        nodes = []
        node = self._sentinel.next
        while node is not self._sentinel:
            nodes.append(node)
            node = node.next
        return nodes

    def _relink(self, nodes: Iterable[_Node]) -> None:
        previous = self._sentinel
        for node in nodes:
            previous.next = node
            node.prev = previous
            previous = node
        previous.next = self._sentinel
        self._sentinel.prev = previous

    def push_front(self, elem: Any) -> None:
        """Insert ``elem`` at the start."""
        self._insert_between(elem, self._sentinel, self._sentinel.next)

    def push_back(self, elem: Any) -> None:
        """Append ``elem`` at the end."""
        self._insert_between(elem, self._sentinel.prev, self._sentinel)

    def front(self) -> Any:
        """The first element."""
        if not self:
            raise IndexError("la lista vacia no tiene primero")
        return self._sentinel.next.elem

    def back(self) -> Any:
        """The last element."""
        if not self:
            raise IndexError("la lista vacia no tiene ultimo")
        return self._sentinel.prev.elem

    def pop_front(self) -> Any:
        """Remove and return the first element."""
        if not self:
            raise IndexError("eliminando el primero de una lista vacia")
        node = self._sentinel.next
        self._unlink(node)
        return node.elem

    def pop_back(self) -> Any:
        """Remove and return the last element."""
        if not self:
            raise IndexError("eliminando el ultimo de una lista vacia")
        node = self._sentinel.prev
        self._unlink(node)
        return node.elem

    def __iter__(self) -> Iterator[Any]:
        node = self._sentinel.next
        while node is not self._sentinel:
            yield node.elem
            node = node.next

    def __bool__(self) -> bool:
        return self._sentinel.next is not self._sentinel

    def __repr__(self) -> str:
        return f"DoubleLinkedList({list(self)!r})"

    def swap_pairs(self) -> None:
        """Swap each pair of adjacent nodes; an odd last node stays in place."""
        sentinel = self._sentinel
        first = sentinel.next
        while first is not sentinel and first.next is not sentinel:
            second = first.next
            before, after = first.prev, second.next
            before.next = second
            second.prev = before
            second.next = first
            first.prev = second
            first.next = after
            after.prev = first
            first = after

    def intersect(self, other: DoubleLinkedList) -> None:
        """Keep only the elements also found in ``other``; both must be sorted."""
        mine = self._sentinel.next
        theirs = other._sentinel.next
        while mine is not self._sentinel and theirs is not other._sentinel:
            if mine.elem > theirs.elem:
                theirs = theirs.next
            elif mine.elem < theirs.elem:
                following = mine.next
                self._unlink(mine)
                mine = following
            else:
                mine = mine.next
                theirs = theirs.next
        while mine is not self._sentinel:
            following = mine.next
            self._unlink(mine)
            mine = following

    def partition(self, pivot: Any) -> None:
        """Move the elements greater than ``pivot`` to the end, keeping order."""
        kept: list[_Node] = []
        larger: list[_Node] = []
        for node in self._nodes():
            (larger if node.elem > pivot else kept).append(node)
        self._relink(kept + larger)

    def fold(self) -> None:
        """Interleave the list with its own reverse: first, last, second, ..."""
        nodes = self._nodes()
        order: list[_Node] = []
        low, high = 0, len(nodes) - 1
        while low < high:
            order.append(nodes[low])
            order.append(nodes[high])
            low += 1
            high -= 1
        if low == high:
            order.append(nodes[low])
        self._relink(order)

    def remove_decreasing(self) -> None:
        """Remove every element smaller than some element before it."""
        node = self._sentinel.next
        largest = node
        while node is not self._sentinel:
            following = node.next
            if node.elem < largest.elem:
                self._unlink(node)
            else:
                largest = node
            node = following