"""Exercises solved with ordered sets."""

from __future__ import annotations

from collections import deque
from collections.abc import Callable, Iterable, Iterator
from typing import Any

from edjudge.search_set import SearchSet

NONE_FOUND = "NO HAY"
CASE_END = "---"


def lower_bounds(values: Iterable[Any], queries: Iterable[Any]) -> list[Any]:
    """For each query, the smallest value not less than it, or None."""
    elements = SearchSet(values)
    return [elements.lower_bound(query) for query in queries]


def card_game(players: int, cards: Iterable[Any]) -> list[list[Any]]:
    """Deal cards in turn; a card a player already holds is discarded as a pair.

    Returns each player's remaining cards in ascending order.
    """
    if players < 1:
        raise ValueError("there must be at least one player")
    hands = [SearchSet() for _ in range(players)]
    for index, card in enumerate(cards):
        hand = hands[index % players]
        if not hand.erase(card):
            hand.insert(card)
    return [list(hand) for hand in hands]


def largest_k(values: Iterable[Any], k: int, sentinel: Any = None) -> list[Any]:
    """The ``k`` largest distinct values, ascending.

    The first ``k`` distinct values are always taken; after that, reading
    stops at ``sentinel`` (or when the values run out).
    """
    if k < 1:
        raise ValueError("k must be at least 1")
    chosen = SearchSet()
    stream = iter(values)
    for value in stream:
        chosen.insert(value)
        if len(chosen) >= k:
            break
    for value in stream:
        if sentinel is not None and value == sentinel:
            break
        smallest = next(iter(chosen))
        if smallest < value and chosen.insert(value):
            chosen.erase(smallest)
    return list(chosen)


class _Tokens:
    def __init__(self, text: str) -> None:
        self._pending = deque(text.split())

    def __bool__(self) -> bool:
        return bool(self._pending)

    def word(self) -> str:
        if not self._pending:
            raise EOFError("input exhausted")
        return self._pending.popleft()

    def int(self) -> int:
        return int(self.word())

    def char(self) -> str:
        word = self.word()
        if len(word) > 1:
            self._pending.appendleft(word[1:])
        return word[0]

    def stream(self, convert: Callable[[str], Any]) -> Iterator[Any]:
        while self._pending:
            yield convert(self._pending.popleft())


def _lower_bound(text: str) -> list[str]:
    tokens = _Tokens(text)
    out: list[str] = []
    while tokens:
        size = tokens.int()
        if size == 0:
            break
        values = [tokens.int() for _ in range(size)]
        queries = [tokens.int() for _ in range(tokens.int())]
        out.extend(
            NONE_FOUND if found is None else str(found)
            for found in lower_bounds(values, queries)
        )
        out.append(CASE_END)
    return out


def _card_game(text: str) -> list[str]:
    tokens = _Tokens(text)
    out: list[str] = []
    while tokens:
        players, count = tokens.int(), tokens.int()
        cards = [tokens.int() for _ in range(count)]
        for number, hand in enumerate(card_game(players, cards), start=1):
            out.append(f"J{number}: {{{', '.join(map(str, hand))}}}")
        out.append(CASE_END)
    return out


def _largest(text: str) -> list[str]:
    tokens = _Tokens(text)
    out: list[str] = []
    while tokens:
        kind = tokens.char()
        k = tokens.int()
        if kind == "N":
            result = largest_k(tokens.stream(int), k, -1)
        else:
            result = largest_k(tokens.stream(str), k, "FIN")
        out.append(" ".join(map(str, result)))
    return out


_HANDLERS: dict[int, Callable[[str], list[str]]] = {
    43: _lower_bound,
    44: _card_game,
    46: _largest,
}


def solve(number: int, text: str) -> str:
    """Run exercise ``number`` on the input ``text`` and return its output."""
    try:
        handler = _HANDLERS[number]
    except KeyError:
        raise ValueError(f"unknown exercise: {number}") from None
    return "".join(f"{line}\n" for line in handler(text))