"""Exercises solved with stacks, queues, deques and lists."""

from __future__ import annotations

import re
from collections import deque
from collections.abc import Callable, Iterable, Sequence
from itertools import groupby
from typing import Any

from edjudge.sequences import LinkedSequence
from edjudge.stack_min import MinStack

NONE_FOUND = "NO HAY"
CASE_END = "---"
_CLOSERS = {")": "(", "]": "[", "}": "{"}
_OPENERS = frozenset(_CLOSERS.values())
_VOWELS = frozenset("aeiouAEIOU")
_SPECIAL_KEYS = frozenset("-*+3")


def is_balanced(text: str) -> bool:
    """Whether the brackets ``()[]{}`` in ``text`` are balanced."""
    pending: list[str] = []
    for char in text:
        if char in _OPENERS:
            pending.append(char)
        elif char in _CLOSERS:
            if not pending or pending.pop() != _CLOSERS[char]:
                return False
    return not pending


def nearest_taller(heights: Iterable[int]) -> list[int | None]:
    """For each height, the nearest earlier height strictly greater, or None."""
    pending: list[int] = []
    result: list[int | None] = []
    for height in heights:
        while pending and pending[-1] <= height:
            pending.pop()
        result.append(pending[-1] if pending else None)
        pending.append(height)
    return result


def previous_worse(records: Iterable[tuple[str, int]]) -> list[str | None]:
    """For each (name, value), the name of the nearest earlier larger value, or None."""
    pending: list[tuple[str, int]] = []
    result: list[str | None] = []
    for name, value in records:
        while pending and pending[-1][1] <= value:
            pending.pop()
        result.append(pending[-1][0] if pending else None)
        pending.append((name, value))
    return result


def run_min_stack(operations: Iterable[Sequence[Any]]) -> list[str]:
    """Run operations on a MinStack and return the lines they produce.

    ``("A", x)`` pushes, ``("D",)`` pops, ``("C",)`` reports the top and
    ``("M",)`` the minimum; operating on an empty stack reports the error.
    """
    stack = MinStack()
    output: list[str] = []
    for op, *args in operations:
        try:
            if op == "A":
                stack.push(args[0])
            elif op == "D":
                stack.pop()
            elif op == "C":
                output.append(str(stack.top()))
            elif op == "M":
                output.append(str(stack.minimum()))
        except IndexError as exc:
            output.append(str(exc))
    return output


def lucky_student(students: int, skip: int) -> int | None:
    """Students 1..n in a circle: pass ``skip``, drop the next; return the survivor."""
    if skip < 0:
        raise ValueError("skip must not be negative")
    circle = deque(range(1, students + 1))
    while len(circle) > 1:
        circle.rotate(-(skip % len(circle)))
        circle.popleft()
    return circle[0] if circle else None


def reorder_queue(values: Iterable[int]) -> list[int]:
    """Negatives first, in reverse order, then the rest in their original order."""
    negatives: list[int] = []
    others: list[int] = []
    for value in values:
        (negatives if value < 0 else others).append(value)
    return negatives[::-1] + others


def duplicate_values(values: Iterable[Any]) -> list[Any]:
    """Every value repeated twice in place."""
    return [value for value in values for _ in range(2)]


def _is_vowel(char: str) -> bool:
    return char in _VOWELS


def decode(text: str) -> str:
    """Undo the encoding: interleave from both ends, then reverse consonant runs."""
    reordered = text[0::2] + text[1::2][::-1]
    parts = []
    for vowel, run in groupby(reordered, key=_is_vowel):
        chars = "".join(run)
        parts.append(chars if vowel else chars[::-1])
    return "".join(parts)


def reverse_listing(values: Iterable[Any]) -> list[Any]:
    """The values from last to first, walked with a reverse cursor."""
    sequence = LinkedSequence(values)
    result = []
    cursor, stop = sequence.rbegin(), sequence.rend()
    while cursor != stop:
        result.append(cursor.value())
        cursor.advance()
    return result


def sliding_maximum(values: Sequence[int], window: int) -> list[int]:
    """The maximum of each window of ``window`` consecutive values."""
    if not 1 <= window <= len(values):
        raise ValueError("window must be between 1 and the number of values")
    candidates: deque[tuple[int, int]] = deque()
    result = []
    for index, value in enumerate(values):
        while candidates and value > candidates[-1][0]:
            candidates.pop()
        candidates.append((value, index))
        if index - candidates[0][1] >= window:
            candidates.popleft()
        if index >= window - 1:
            result.append(candidates[0][0])
    return result


def broken_keyboard(text: str) -> str:
    """Apply keystrokes where ``-`` is Home, ``+`` End, ``*`` Right and ``3`` Delete."""
    typed = LinkedSequence()
    cursor = typed.begin()
    for key in text:
        if key not in _SPECIAL_KEYS:
            typed.insert(cursor, key)
        elif key == "3":
            if cursor != typed.end():
                cursor = typed.erase(cursor)
        elif key == "-":
            cursor = typed.begin()
        elif key == "+":
            cursor = typed.end()
        elif cursor != typed.end():
            cursor.advance()
    return "".join(typed)


class _Scanner:
    """Whitespace-separated reading of words, integers and single characters."""

    _WORD = re.compile(r"\S+")

    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0

    def at_end(self) -> bool:
        while self._pos < len(self._text) and self._text[self._pos].isspace():
            self._pos += 1
        return self._pos >= len(self._text)

    def char(self) -> str:
        if self.at_end():
            raise EOFError("input exhausted")
        char = self._text[self._pos]
        self._pos += 1
        return char

    def word(self) -> str:
        if self.at_end():
            raise EOFError("input exhausted")
        match = self._WORD.match(self._text, self._pos)
        self._pos = match.end()
        return match.group()

    def int(self) -> int:
        return int(self.word())


def _lines(text: str) -> list[str]:
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines


def _ints_until(scanner: _Scanner, terminator: int) -> list[int]:
    values = []
    while not scanner.at_end():
        value = scanner.int()
        if value == terminator:
            break
        values.append(value)
    return values


def _with_trailing_spaces(values: Iterable[Any]) -> str:
    return "".join(f"{value} " for value in values)


def _balanced(text: str) -> list[str]:
    return ["SI" if is_balanced(line) else "NO" for line in _lines(text)]


def _zelda(text: str) -> list[str]:
    scanner = _Scanner(text)
    out: list[str] = []
    while not scanner.at_end():
        first = scanner.int()
        if first == -1:
            break
        heights = [first, *_ints_until(scanner, -1)]
        out.extend(NONE_FOUND if h is None else str(h) for h in nearest_taller(heights))
        out.append(CASE_END)
    return out


def _accidents(text: str) -> list[str]:
    scanner = _Scanner(text)
    out: list[str] = []
    while not scanner.at_end():
        cases = scanner.int()
        records = [(scanner.word(), scanner.int()) for _ in range(cases)]
        out.extend(NONE_FOUND if n is None else n for n in previous_worse(records))
        out.append(CASE_END)
    return out


def _min_stack(text: str) -> list[str]:
    scanner = _Scanner(text)
    out: list[str] = []
    try:
        while True:
            count = scanner.int()
            if count == 0:
                break
            read_value = scanner.int if scanner.char() == "I" else scanner.char
            operations: list[tuple[Any, ...]] = []
            for _ in range(count):
                op = scanner.char()
                operations.append((op, read_value()) if op == "A" else (op,))
            out.extend(run_min_stack(operations))
            out.append(CASE_END)
    except EOFError:
        pass
    return out


def _lucky(text: str) -> list[str]:
    scanner = _Scanner(text)
    out: list[str] = []
    while not scanner.at_end():
        students, skip = scanner.int(), scanner.int()
        if students == 0 and skip == 0:
            break
        survivor = lucky_student(students, skip)
        if survivor is not None:
            out.append(str(survivor))
    return out


def _reorder(text: str) -> list[str]:
    scanner = _Scanner(text)
    out: list[str] = []
    while not scanner.at_end():
        size = scanner.int()
        if size == 0:
            break
        values = [scanner.int() for _ in range(size)]
        out.append(" ".join(map(str, reorder_queue(values))))
    return out


def _duplicate(text: str) -> list[str]:
    scanner = _Scanner(text)
    out: list[str] = []
    while not scanner.at_end():
        out.append(_with_trailing_spaces(duplicate_values(_ints_until(scanner, 0))))
    return out


def _decode(text: str) -> list[str]:
    return [decode(line) for line in _lines(text)]


def _reverse(text: str) -> list[str]:
    scanner = _Scanner(text)
    cases = scanner.int() if not scanner.at_end() else 0
    return [
        _with_trailing_spaces(reverse_listing(_ints_until(scanner, 0)))
        for _ in range(cases)
    ]


def _sliding(text: str) -> list[str]:
    scanner = _Scanner(text)
    out: list[str] = []
    while not scanner.at_end():
        size, window = scanner.int(), scanner.int()
        values = [scanner.int() for _ in range(size)]
        out.append(" ".join(map(str, sliding_maximum(values, window))))
    return out


def _keyboard(text: str) -> list[str]:
    return [broken_keyboard(line) for line in _lines(text)]


_HANDLERS: dict[int, Callable[[str], list[str]]] = {
    16: _balanced,
    17: _zelda,
    18: _accidents,
    19: _min_stack,
    21: _lucky,
    22: _reorder,
    23: _duplicate,
    24: _decode,
    25: _reverse,
    27: _sliding,
    28: _keyboard,
}


def solve(number: int, text: str) -> str:
    """Run exercise ``number`` on the input ``text`` and return its output."""
    try:
        handler = _HANDLERS[number]
    except KeyError:
        raise ValueError(f"unknown exercise: {number}") from None
    return "".join(f"{line}\n" for line in handler(text))