"""Stacks, including one that reports its minimum in constant time."""

from __future__ import annotations

from typing import Any


class Stack:
    """Last-in first-out stack."""

    def __init__(self) -> None:
        self._items: list[Any] = []

    def push(self, elem: Any) -> None:
        """Put ``elem`` on top."""
        self._items.append(elem)

    def top(self) -> Any:
        """The element on top."""
        if not self._items:
            raise IndexError("la pila vacia no tiene cima")
        return self._items[-1]

    def pop(self) -> Any:
        """Remove and return the element on top."""
        if not self._items:
            raise IndexError("desapilando de la pila vacia")
        return self._items.pop()

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)


class MinStack:
    """Stack that also tracks the minimum of its elements."""

    EMPTY_MESSAGE = "ERROR: Pila vacia"

    def __init__(self) -> None:
        self._items: list[Any] = []
        self._minimums: list[Any] = []

    def push(self, elem: Any) -> None:
        """Put ``elem`` on top."""
        smallest = elem
        if self._minimums and elem >= self._minimums[-1]:
            smallest = self._minimums[-1]
        self._items.append(elem)
        self._minimums.append(smallest)

    def top(self) -> Any:
        """The element on top."""
        if not self._items:
            raise IndexError(self.EMPTY_MESSAGE)
        return self._items[-1]

    def pop(self) -> Any:
        """Remove and return the element on top."""
        if not self._items:
            raise IndexError(self.EMPTY_MESSAGE)
        self._minimums.pop()
        return self._items.pop()

    def minimum(self) -> Any:
        """The smallest element in the stack."""
        if not self._items:
            raise IndexError(self.EMPTY_MESSAGE)
        return self._minimums[-1]

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)