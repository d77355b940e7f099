"""Immutable binary trees whose subtrees share nodes."""

from __future__ import annotations

from collections import deque
from collections.abc import Callable, Iterable, Iterator
from typing import Any

_MISSING: Any = object()


class _Node:
    __slots__ = ("elem", "left", "right")

    def __init__(self, left: _Node | None, elem: Any, right: _Node | None) -> None:
        self.elem = elem
        self.left = left
        self.right = right


def _link(tree: BinTree | None) -> _Node | None:
    if tree is None:
        return None
    if not isinstance(tree, BinTree):
        raise TypeError(f"expected a BinTree, got {type(tree).__name__}")
    return tree._root


class BinTree:
    """Binary tree: empty, or a root element with a left and a right subtree.

    ``BinTree()`` is the empty tree; ``BinTree(left, elem, right)`` builds a
    tree whose children are the given trees (``None`` stands for empty).
    """

    __slots__ = ("_root",)

    def __init__(
        self,
        left: BinTree | None = None,
        elem: Any = _MISSING,
        right: BinTree | None = None,
    ) -> None:
        if elem is _MISSING:
            if left is not None or right is not None:
                raise TypeError("a tree with children needs a root element")
            self._root: _Node | None = None
        else:
            self._root = _Node(_link(left), elem, _link(right))

    @classmethod
    def _wrap(cls, node: _Node | None) -> BinTree:
        tree = cls.__new__(cls)
        tree._root = node
        return tree

    @classmethod
    def leaf(cls, elem: Any) -> BinTree:
        """A tree holding only ``elem``."""
        return cls._wrap(_Node(None, elem, None))

    def __bool__(self) -> bool:
        return self._root is not None

    def _node(self, message: str) -> _Node:
        if self._root is None:
            raise IndexError(message)
        return self._root

    def root(self) -> Any:
        """The element at the root."""
        return self._node("El arbol vacio no tiene raiz.").elem

    def left(self) -> BinTree:
        """The left subtree."""
        return self._wrap(self._node("El arbol vacio no tiene hijo izquierdo.").left)

    def right(self) -> BinTree:
        """The right subtree."""
        return self._wrap(self._node("El arbol vacio no tiene hijo derecho.").right)

    def preorder(self) -> list[Any]:
        """Elements in preorder: root, left, right."""
        result = []
        pending = [self._root] if self._root is not None else []
        while pending:
            node = pending.pop()
            result.append(node.elem)
            if node.right is not None:
                pending.append(node.right)
            if node.left is not None:
                pending.append(node.left)
        return result

    def inorder(self) -> list[Any]:
        """Elements in inorder: left, root, right."""
        return list(self)

    def postorder(self) -> list[Any]:
        """Elements in postorder: left, right, root."""
        result = []
        pending = [self._root] if self._root is not None else []
        while pending:
            node = pending.pop()
            result.append(node.elem)
            if node.left is not None:
                pending.append(node.left)
            if node.right is not None:
                pending.append(node.right)
        result.reverse()
        return result

    def levelorder(self) -> list[Any]:
        """Elements level by level, each level from left to right."""
        result = []
        pending = deque([self._root] if self._root is not None else [])
        while pending:
            node = pending.popleft()
            result.append(node.elem)
            if node.left is not None:
                pending.append(node.left)
            if node.right is not None:
                pending.append(node.right)
        return result

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
        if self._root is None:
            return "BinTree()"
        return f"BinTree({self.left()!r}, {self.root()!r}, {self.right()!r})"


def read_tree(
    tokens: Iterable[Any],
    empty: Any,
    convert: Callable[[Any], Any] | None = None,
) -> BinTree:
    """Read a tree written in preorder, with ``empty`` marking empty subtrees.

    Only the tokens that make up the tree are consumed from ``tokens``.
    Raises EOFError if the tokens run out before the tree is complete.
    """
    stream = iter(tokens)
    to_value = convert if convert is not None else (lambda token: token)
    # Each frame: [element, left subtree, left subtree already read]
    frames: list[list[Any]] = []
    while True:
        try:
            value = to_value(next(stream))
        except StopIteration:
            raise EOFError("tree not complete") from None
        if value != empty:
            frames.append([value, None, False])
            continue
        tree = BinTree()
        while True:
            if not frames:
                return tree
            frame = frames[-1]
            if not frame[2]:
                frame[1] = tree
                frame[2] = True
                break
            frames.pop()
            tree = BinTree(frame[1], frame[0], tree)