"""Queries on binary trees: reconstruction, level searches and profiles."""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence
from itertools import pairwise
from typing import Any

from edjudge.bintree import BinTree


def rebuild(preorder: Sequence[Any], inorder: Sequence[Any]) -> BinTree:
    """The tree whose preorder and inorder traversals are the given ones."""
    pre = list(preorder)
    ino = list(inorder)
    if len(pre) != len(ino):
        raise ValueError("traversals have different lengths")

    def build(pre_start: int, in_start: int, length: int) -> BinTree:
        if length == 0:
            return BinTree()
        root = pre[pre_start]
        try:
            pos = ino.index(root, in_start, in_start + length)
        except ValueError:
            raise ValueError("traversals do not describe a tree") from None
        left_length = pos - in_start
        left = build(pre_start + 1, in_start, left_length)
        right = build(pre_start + 1 + left_length, pos + 1, length - left_length - 1)
        return BinTree(left, root, right)

    return build(0, 0, len(pre))


def first_repeated_level(tree: BinTree, value: Any) -> int | None:
    """First level (root is 1) where ``value`` appears at least twice, or None."""
    if not tree:
        return None
    pending: deque[tuple[int, BinTree]] = deque([(1, tree)])
    level, seen = 1, 0
    while pending:
        depth, node = pending.popleft()
        if depth != level:
            level, seen = depth, 0
        if node.root() == value:
            seen += 1
            if seen > 1:
                return level
        for child in (node.left(), node.right()):
            if child:
                pending.append((depth + 1, child))
    return None


def is_prime(n: int) -> bool:
    """Whether ``n`` is a prime number."""
    if n < 2:
        return False
    divisor = 2
    while divisor * divisor <= n:
        if n % divisor == 0:
            return False
        divisor += 1
    return True


def nearest_multiple_of_seven(tree: BinTree) -> tuple[int, int] | None:
    """The multiple of 7 closest to the root, reached without crossing primes.

    Returns (value, level) with the root at level 1, or None if none is reachable.
    """
    if not tree:
        return None
    pending: deque[tuple[int, BinTree]] = deque([(1, tree)])
    while pending:
        depth, node = pending.popleft()
        value = node.root()
        if is_prime(value):
            continue
        if value % 7 == 0:
            return value, depth
        for child in (node.left(), node.right()):
            if child:
                pending.append((depth + 1, child))
    return None


def right_profile(tree: BinTree) -> list[Any]:
    """The rightmost element of every level, from the root down."""
    profile: list[Any] = []
    if not tree:
        return profile
    pending: deque[tuple[int, BinTree]] = deque([(1, tree)])
    level = 0
    while pending:
        depth, node = pending.popleft()
        if depth != level:
            level = depth
            profile.append(node.root())
        for child in (node.right(), node.left()):
            if child:
                pending.append((depth + 1, child))
    return profile


def is_search_tree(tree: BinTree) -> bool:
    """Whether every element is greater than those on its left and less than those on its right."""
    return all(a < b for a, b in pairwise(tree.inorder()))