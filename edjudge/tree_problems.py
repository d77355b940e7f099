"""Exercises solved with binary trees."""

from __future__ import annotations

from collections.abc import Callable

from edjudge.bintree import read_tree
from edjudge.list_problems import _joined, _Scanner, _trailing
from edjudge.tree_algorithms import height, leaf_count, minimum, node_count
from edjudge.tree_queries import first_repeated_level, rebuild, right_profile

NOT_FOUND = "NO EXISTE"


def _characteristics(scanner: _Scanner) -> list[str]:
    out = []
    for _ in range(scanner.count()):
        tree = read_tree(scanner.chars(), ".")
        out.append(f"{node_count(tree)} {leaf_count(tree)} {height(tree)}")
    return out


def _minimum(scanner: _Scanner) -> list[str]:
    out = []
    while not scanner.at_end():
        if scanner.char() == "N":
            tree = read_tree(scanner.words(), -1, int)
        else:
            tree = read_tree(scanner.words(), "#")
        out.append(str(minimum(tree)))
    return out


def _line_ints(line: str) -> list[int]:
    return [int(token) for token in line.split()]


def _rebuild(scanner: _Scanner) -> list[str]:
    out = []
    while (preorder := scanner.rest_of_line()) is not None:
        inorder = scanner.rest_of_line()
        if inorder is None:
            break
        tree = rebuild(_line_ints(preorder), _line_ints(inorder))
        out.append(_trailing(tree.postorder()))
    return out


def _repeated_level(scanner: _Scanner) -> list[str]:
    out = []
    for _ in range(scanner.count()):
        if scanner.char() == "N":
            value = scanner.int()
            tree = read_tree(scanner.words(), -1, int)
        else:
            value = scanner.char()
            tree = read_tree(scanner.chars(), ".")
        level = first_repeated_level(tree, value)
        out.append(NOT_FOUND if level is None else str(level))
    return out


def _right_profile(scanner: _Scanner) -> list[str]:
    return [
        _joined(right_profile(read_tree(scanner.words(), -1, int)))
        for _ in range(scanner.count())
    ]


_HANDLERS: dict[int, Callable[[_Scanner], list[str]]] = {
    29: _characteristics,
    31: _minimum,
    38: _rebuild,
    39: _repeated_level,
    41: _right_profile,
}


def solve(number: int, text: str) -> str:
    """Run exercise ``number`` on the input ``text`` and return its output."""
    try:
        handler = _HANDLERS[number]
    except KeyError:
        raise ValueError(f"unknown exercise: {number}") from None
    return "".join(f"{line}\n" for line in handler(_Scanner(text)))