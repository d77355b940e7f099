"""Singly linked list with first and last pointers."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from typing import Any


class _Node:
    __slots__ = ("elem", "next")

    def __init__(self, elem: Any, next_node: _Node | None = None) -> None:
        self.elem = elem
        self.next = next_node


class LinkedList:
    """Singly linked list with in-place node manipulations."""

    def __init__(self, iterable: Iterable[Any] | None = None) -> None:
        self._head: _Node | None = None
        self._tail: _Node | None = None
        if iterable is not None:
            for elem in iterable:
                self.push_back(elem)

    def _append_node(self, node: _Node) -> None:
        node.next = None
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node

    def push_back(self, elem: Any) -> None:
        """Append ``elem`` at the end."""
        self._append_node(_Node(elem))

    def push_front(self, elem: Any) -> None:
        """Insert ``elem`` at the start."""
        self._head = _Node(elem, self._head)
        if self._tail is None:
            self._tail = self._head

    def pop_front(self) -> Any:
        """Remove and return the first element."""
        if self._head is None:
            raise IndexError("eliminando de una lista enlazada vacia")
        node = self._head
        self._head = node.next
        if self._head is None:
            self._tail = None
        return node.elem

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.elem
            node = node.next

    def __bool__(self) -> bool:
        return self._head is not None

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def duplicate(self) -> None:
        """Place a copy of every node right after it."""
        node = self._head
        while node is not None:
            copy = _Node(node.elem, node.next)
            node.next = copy
            if copy.next is None:
                self._tail = copy
            node = copy.next

    def matching(self, predicate: Callable[[Any], bool]) -> Iterator[Any]:
        """Yield, in order, the elements for which ``predicate`` holds."""
        for elem in self:
            if predicate(elem):
                yield elem

    def remove_odd_positions(self) -> None:
        """Remove the elements at positions 1, 3, 5, ... (counting from 0)."""
        node = self._head
        while node is not None and node.next is not None:
            node.next = node.next.next
            if node.next is None:
                self._tail = node
            node = node.next

    def reverse(self) -> None:
        """Reverse the list in place by relinking its nodes."""
        previous: _Node | None = None
        node = self._head
        self._tail = node
        while node is not None:
            following = node.next
            node.next = previous
            previous = node
            node = following
        self._head = previous

    def merge(self, other: LinkedList) -> None:
        """Merge the sorted ``other`` into this sorted list, leaving ``other`` empty.

        On ties, elements of ``other`` come before equal elements of this list.
        """
        if other is self:
            raise ValueError("cannot merge a list with itself")
        dummy = _Node(None)
        last = dummy
        mine, theirs = self._head, other._head
        while mine is not None and theirs is not None:
            if theirs.elem <= mine.elem:
                last.next = theirs
                theirs = theirs.next
            else:
                last.next = mine
                mine = mine.next
            last = last.next
        if mine is not None:
            last.next = mine
            new_tail = self._tail
        elif theirs is not None:
            last.next = theirs
            new_tail = other._tail
        else:
            last.next = None
            new_tail = last if last is not dummy else None
        self._head = dummy.next
        self._tail = new_tail
        other._head = other._tail = None

    def split_negatives(self) -> LinkedList:
        """Drop zeros, move negatives to a new list and return it.

        The relative order of both the kept and the moved elements is preserved.
        """
        negatives = LinkedList()
        node = self._head
        self._head = self._tail = None
        while node is not None:
            following = node.next
            if node.elem > 0:
                self._append_node(node)
            elif node.elem < 0:
                negatives._append_node(node)
            node = following
        return negatives

    def bubble_sort(self) -> None:
        """Sort ascending with bubble sort."""
        boundary: _Node | None = None
        while self._head is not None and self._head.next is not boundary:
            node = self._head
            while node.next is not boundary:
                following = node.next
                if node.elem > following.elem:
                    node.elem, following.elem = following.elem, node.elem
                node = following
            boundary = node