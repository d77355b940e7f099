"""Measures and properties of binary trees."""

from __future__ import annotations

from typing import Any

from edjudge.bintree import BinTree


def height(tree: BinTree) -> int:
    """Number of levels of the tree."""
    if not tree:
        return 0
    return 1 + max(height(tree.left()), height(tree.right()))


def leaf_count(tree: BinTree) -> int:
    """Number of leaves."""
    if not tree:
        return 0
    below = leaf_count(tree.left()) + leaf_count(tree.right())
    return below if below else 1


def node_count(tree: BinTree) -> int:
    """Number of nodes."""
    if not tree:
        return 0
    return 1 + node_count(tree.left()) + node_count(tree.right())


def node_sum(tree: BinTree) -> int:
    """Sum of all the elements."""
    if not tree:
        return 0
    return tree.root() + node_sum(tree.left()) + node_sum(tree.right())


def minimum(tree: BinTree) -> Any:
    """Smallest element; the tree must not be empty."""
    smallest = tree.root()
    for elem in tree.preorder():
        if elem < smallest:
            smallest = elem
    return smallest


def frontier(tree: BinTree) -> list[Any]:
    """The leaves, from left to right."""
    if not tree:
        return []
    left, right = tree.left(), tree.right()
    if not left and not right:
        return [tree.root()]
    return frontier(left) + frontier(right)


def _accumulated(tree: BinTree) -> tuple[int, int]:
    if not tree:
        return 0, 0
    left_total, left_count = _accumulated(tree.left())
    right_total, right_count = _accumulated(tree.right())
    below = left_total + right_total
    count = left_count + right_count + (1 if below == tree.root() else 0)
    return below + tree.root(), count


def accumulated_count(tree: BinTree) -> int:
    """Number of nodes whose element equals the sum of their descendants."""
    return _accumulated(tree)[1]


def _diameter(tree: BinTree) -> tuple[int, int]:
    if not tree:
        return 0, 0
    left_diam, left_height = _diameter(tree.left())
    right_diam, right_height = _diameter(tree.right())
    through_root = 1 + left_height + right_height
    return (
        max(through_root, left_diam, right_diam),
        1 + max(left_height, right_height),
    )


def diameter(tree: BinTree) -> int:
    """Number of nodes on the longest path between two nodes."""
    return _diameter(tree)[0]


def rescue(tree: BinTree) -> tuple[int, int]:
    """Teams needed to rescue the trapped hikers, and the most hikers on one path.

    A team enters at each lowest node with hikers that has no hikers below it.
    """
    if not tree:
        return 0, 0
    root = tree.root()
    left_teams, left_most = rescue(tree.left())
    right_teams, right_most = rescue(tree.right())
    teams = left_teams + right_teams
    if teams == 0 and root != 0:
        teams = 1
    return teams, max(left_most, right_most) + root


def _even_path(tree: BinTree) -> tuple[int, int]:
    if not tree:
        return 0, 0
    left_best, left_down = _even_path(tree.left())
    right_best, right_down = _even_path(tree.right())
    best = max(left_best, right_best)
    if tree.root() % 2 == 0:
        best = max(best, left_down + right_down + 1)
        return best, max(left_down, right_down) + 1
    return best, 0


def even_path_length(tree: BinTree) -> int:
    """Number of nodes on the longest path made only of even elements."""
    return _even_path(tree)[0]


def _flows(tree: BinTree) -> tuple[int, int]:
    if not tree:
        return 0, 0
    left, right = tree.left(), tree.right()
    if not left and not right:
        return 0, 1
    left_count, left_flow = _flows(left)
    right_count, right_flow = _flows(right)
    flow = max(left_flow + right_flow - tree.root(), 0)
    count = left_count + right_count + (1 if flow >= 3 else 0)
    return count, flow


def navigable_count(tree: BinTree) -> int:
    """Number of navigable stretches: inner nodes, not the root, with flow of 3 or more.

    Every leaf is a spring of flow 1; every other node subtracts its element.
    """
    count, flow = _flows(tree)
    if flow >= 3:
        count -= 1
    return count