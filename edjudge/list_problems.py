"""Exercises solved with linked lists, clocks and polynomials."""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable, Iterator
from typing import Any

from edjudge.clock import Clock
from edjudge.double_linked_list import DoubleLinkedList
from edjudge.linked_list import LinkedList
from edjudge.polynomial import read_polynomial

EQUAL = "IGUALES"


class _Scanner:
    """Reads integers, words, single characters and whole lines from a text."""

    _WORD = re.compile(r"\S+")
    _INT = re.compile(r"[+-]?\d+")

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
        if self.at_end():
            raise EOFError("input exhausted")
        match = self._INT.match(self._text, self._pos)
        if match is None:
            raise ValueError(f"expected an integer at position {self._pos}")
        self._pos = match.end()
        return int(match.group())

    def count(self) -> int:
        """A case count, or 0 when the input is empty."""
        return 0 if self.at_end() else self.int()

    def words(self) -> Iterator[str]:
        while not self.at_end():
            yield self.word()

    def chars(self) -> Iterator[str]:
        while not self.at_end():
            yield self.char()

    def ints_until(self, terminator: int) -> list[int]:
        values = []
        while not self.at_end():
            value = self.int()
            if value == terminator:
                break
            values.append(value)
        return values

    def rest_of_line(self) -> str | None:
        """The text up to the next newline, or None at the end of the input."""
        if self._pos >= len(self._text):
            return None
        end = self._text.find("\n", self._pos)
        if end == -1:
            line, self._pos = self._text[self._pos:], len(self._text)
        else:
            line, self._pos = self._text[self._pos:end], end + 1
        return line


def _joined(values: Iterable[Any]) -> str:
    return " ".join(map(str, values))


def _trailing(values: Iterable[Any]) -> str:
    return "".join(f"{value} " for value in values)


def _read_clock(scanner: _Scanner) -> Clock:
    hours = scanner.int()
    scanner.char()
    minutes = scanner.int()
    scanner.char()
    seconds = scanner.int()
    return Clock.from_hms(hours, minutes, seconds)


def _sized_cases(scanner: _Scanner, stop: int) -> Iterator[list[int]]:
    while not scanner.at_end():
        size = scanner.int()
        if size == stop:
            return
        yield [scanner.int() for _ in range(size)]


def _before_after(scanner: _Scanner) -> list[str]:
    out = []
    for _ in range(scanner.count()):
        first, second = _read_clock(scanner), _read_clock(scanner)
        if first == second:
            out.append(EQUAL)
        else:
            low, high = sorted((first, second))
            out.append(f"{low} {high}")
    return out


def _finish_time(scanner: _Scanner) -> list[str]:
    out = []
    for _ in range(scanner.count()):
        start, duration = _read_clock(scanner), _read_clock(scanner)
        try:
            out.append(str(start + duration))
        except OverflowError as exc:
            out.append(str(exc))
    return out


def _polynomials(scanner: _Scanner) -> list[str]:
    out = []
    while not scanner.at_end():
        try:
            poly = read_polynomial(scanner.words())
        except EOFError:
            break
        count = scanner.int()
        out.append(_trailing(poly.evaluate(scanner.int()) for _ in range(count)))
    return out


def _duplicate(scanner: _Scanner) -> list[str]:
    out = []
    while not scanner.at_end():
        values = LinkedList(scanner.ints_until(0))
        values.duplicate()
        out.append(_trailing(values))
    return out


def _starting_with(scanner: _Scanner) -> list[str]:
    out = []
    while not scanner.at_end():
        initial = scanner.char()
        scanner.rest_of_line()
        line = scanner.rest_of_line() or ""
        words = LinkedList(line.split())
        out.append(_joined(words.matching(lambda word: word.startswith(initial))))
    return out


def _every_other(scanner: _Scanner) -> list[str]:
    out = []
    while not scanner.at_end():
        size = scanner.int()
        if size == 0:
            break
        clocks = LinkedList(_read_clock(scanner) for _ in range(size))
        clocks.remove_odd_positions()
        out.append(_trailing(clocks))
    return out


def _reverse(scanner: _Scanner) -> list[str]:
    out = []
    while not scanner.at_end():
        values = LinkedList(scanner.ints_until(0))
        values.reverse()
        out.append(_trailing(values))
    return out


def _merge(scanner: _Scanner) -> list[str]:
    out = []
    for _ in range(scanner.count()):
        first = LinkedList(scanner.ints_until(0))
        second = LinkedList(scanner.ints_until(0))
        first.merge(second)
        out.append(_joined(first))
    return out


def _split(scanner: _Scanner) -> list[str]:
    out = []
    for values in _sized_cases(scanner, -1):
        kept = LinkedList(values)
        negatives = kept.split_negatives()
        out.append(_joined(kept))
        out.append(_joined(negatives))
    return out


def _swap(scanner: _Scanner) -> list[str]:
    out = []
    for values in _sized_cases(scanner, 0):
        items = DoubleLinkedList(values)
        items.swap_pairs()
        out.append(_joined(items))
    return out


def _intersection(scanner: _Scanner) -> list[str]:
    out = []
    for _ in range(scanner.count()):
        first = DoubleLinkedList(scanner.ints_until(0))
        second = DoubleLinkedList(scanner.ints_until(0))
        first.intersect(second)
        out.append(_joined(first))
    return out


def _partition(scanner: _Scanner) -> list[str]:
    out = []
    while not scanner.at_end():
        size = scanner.int()
        pivot = scanner.int()
        items = DoubleLinkedList(scanner.int() for _ in range(size))
        items.partition(pivot)
        out.append(_joined(items))
    return out


def _fold(scanner: _Scanner) -> list[str]:
    out = []
    for _ in range(scanner.count()):
        size = scanner.int()
        items = DoubleLinkedList(scanner.int() for _ in range(size))
        items.fold()
        out.append(_joined(items))
    return out


def _decreasing(scanner: _Scanner) -> list[str]:
    out = []
    for values in _sized_cases(scanner, 0):
        items = DoubleLinkedList(values)
        items.remove_decreasing()
        out.append(_joined(items))
    return out


def _bubble(scanner: _Scanner) -> list[str]:
    out = []
    for values in _sized_cases(scanner, 0):
        items = LinkedList(values)
        items.bubble_sort()
        if items:
            out.append(_joined(items))
    return out


_HANDLERS: dict[int, Callable[[_Scanner], list[str]]] = {
    1: _before_after,
    2: _finish_time,
    3: _polynomials,
    4: _duplicate,
    5: _starting_with,
    6: _every_other,
    7: _reverse,
    8: _merge,
    9: _split,
    10: _swap,
    11: _intersection,
    12: _partition,
    13: _fold,
    14: _decreasing,
    15: _bubble,
}


def solve(number: int, text: str) -> str:
    """Run exercise ``number`` on the input ``text`` and return its output."""
    try:
        handler = _HANDLERS[number]
    except KeyError:
        raise ValueError(f"unknown exercise: {number}") from None
    return "".join(f"{line}\n" for line in handler(_Scanner(text)))