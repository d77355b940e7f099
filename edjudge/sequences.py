"""Double-ended queue and a list with forward and reverse cursors."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any


class _Node:
    __slots__ = ("elem", "prev", "next")

    def __init__(self, elem: Any = None) -> None:
        self.elem = elem
        self.prev: _Node = self
        self.next: _Node = self


class Deque:
    """Double-ended queue on a circular doubly linked list with a sentinel."""

    def __init__(self, iterable: Iterable[Any] | None = None) -> None:
        self._sentinel = _Node()
        self._size = 0
        if iterable is not None:
            for elem in iterable:
                self.push_back(elem)

    def _insert_between(self, elem: Any, before: _Node, after: _Node) -> _Node:
        node = _Node(elem)
        node.prev = before
        node.next = after
        before.next = node
        after.prev = node
        self._size += 1
        return node

    def _remove(self, node: _Node) -> Any:
        node.prev.next = node.next
        node.next.prev = node.prev
        self._size -= 1
        return node.elem

    def _forward(self) -> Iterator[Any]:
        node = self._sentinel.next
        while node is not self._sentinel:
            yield node.elem
            node = node.next

    def push_front(self, elem: Any) -> None:
        """Insert ``elem`` at the front."""
        self._insert_between(elem, self._sentinel, self._sentinel.next)

    def push_back(self, elem: Any) -> None:
        """Append ``elem`` at the back."""
        self._insert_between(elem, self._sentinel.prev, self._sentinel)

    def front(self) -> Any:
        """The first element."""
        if not self:
            raise IndexError("la dcola vacia no tiene primero")
        return self._sentinel.next.elem

    def back(self) -> Any:
        """The last element."""
        if not self:
            raise IndexError("la dcola vacia no tiene ultimo")
        return self._sentinel.prev.elem

    def pop_front(self) -> Any:
        """Remove and return the first element."""
        if not self:
            raise IndexError("eliminando el primero de una dcola vacia")
        return self._remove(self._sentinel.next)

    def pop_back(self) -> Any:
        """Remove and return the last element."""
        if not self:
            raise IndexError("eliminando el ultimo de una dcola vacia")
        return self._remove(self._sentinel.prev)

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._size > 0

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._forward())!r})"


class Cursor:
    """Position inside a LinkedSequence, moving forwards or in reverse."""

    __slots__ = ("_node", "_sentinel", "_reverse")

    def __init__(self, node: _Node, sentinel: _Node, reverse: bool = False) -> None:
        self._node = node
        self._sentinel = sentinel
        self._reverse = reverse

    def value(self) -> Any:
        """The element under the cursor."""
        if self._node is self._sentinel:
            raise IndexError("fuera de la lista")
        return self._node.elem

    def advance(self) -> Cursor:
        """Move one step in the cursor's direction and return the cursor."""
        if self._node is self._sentinel:
            raise IndexError("fuera de la lista")
        self._node = self._node.prev if self._reverse else self._node.next
        return self

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Cursor):
            return NotImplemented
        return (
            self._node is other._node
            and self._sentinel is other._sentinel
            and self._reverse == other._reverse
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        where = "end" if self._node is self._sentinel else repr(self._node.elem)
        direction = "reverse" if self._reverse else "forward"
        return f"Cursor({where}, {direction})"


class LinkedSequence(Deque):
    """List with positional access, cursors, insertion and removal."""

    def at(self, index: int) -> Any:
        """The element at position ``index``, counting from 0."""
        if not 0 <= index < len(self):
            raise IndexError("posicion fuera de la lista")
        node = self._sentinel.next
        for _ in range(index):
            node = node.next
        return node.elem

    def __iter__(self) -> Iterator[Any]:
        return self._forward()

    def __reversed__(self) -> Iterator[Any]:
        node = self._sentinel.prev
        while node is not self._sentinel:
            yield node.elem
            node = node.prev

    def begin(self) -> Cursor:
        """Cursor at the first element."""
        return Cursor(self._sentinel.next, self._sentinel)

    def end(self) -> Cursor:
        """Cursor past the last element."""
        return Cursor(self._sentinel, self._sentinel)

    def rbegin(self) -> Cursor:
        """Reverse cursor at the last element."""
        return Cursor(self._sentinel.prev, self._sentinel, reverse=True)

    def rend(self) -> Cursor:
        """Reverse cursor before the first element."""
        return Cursor(self._sentinel, self._sentinel, reverse=True)

    def _check(self, cursor: Cursor) -> None:
        if cursor._sentinel is not self._sentinel:
            raise ValueError("cursor belongs to another sequence")

    def insert(self, cursor: Cursor, elem: Any) -> Cursor:
        """Insert ``elem`` just before the cursor's node in list order.

        Returns a cursor, in the same direction, at the new element.
        """
        self._check(cursor)
        node = self._insert_between(elem, cursor._node.prev, cursor._node)
        return Cursor(node, self._sentinel, cursor._reverse)

    def erase(self, cursor: Cursor) -> Cursor:
        """Remove the element under the cursor; return a cursor to the next one."""
        self._check(cursor)
        node = cursor._node
        if node is self._sentinel:
            raise IndexError("fuera de la lista")
        following = node.prev if cursor._reverse else node.next
        self._remove(node)
        return Cursor(following, self._sentinel, cursor._reverse)