"""Sparse polynomials with integer coefficients."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Iterable


class Polynomial:
    """Polynomial stored as (exponent, coefficient) pairs sorted by exponent."""

    def __init__(self) -> None:
        self._exponents: list[int] = []
        self._coefficients: list[int] = []

    def add_term(self, exponent: int, coefficient: int) -> None:
        """Add ``coefficient * x**exponent``, merging with an equal exponent."""
        if coefficient == 0:
            return
        pos = bisect_left(self._exponents, exponent)
        if pos < len(self._exponents) and self._exponents[pos] == exponent:
            merged = self._coefficients[pos] + coefficient
            if merged == 0:
                del self._exponents[pos]
                del self._coefficients[pos]
            else:
                self._coefficients[pos] = merged
        else:
            self._exponents.insert(pos, exponent)
            self._coefficients.insert(pos, coefficient)

    def terms(self) -> list[tuple[int, int]]:
        """The non-zero terms as (exponent, coefficient), by rising exponent."""
        return list(zip(self._exponents, self._coefficients))

    def evaluate(self, x: int) -> int:
        """Value of the polynomial at ``x``."""
        return sum(
            coefficient * x ** max(exponent, 0)
            for exponent, coefficient in self.terms()
        )


def read_polynomial(tokens: Iterable[str | int]) -> Polynomial:
    """Read ``coefficient exponent`` pairs until the pair ``0 0``.

    Raises EOFError if the tokens run out before the terminating pair.
    """
    stream = iter(tokens)
    poly = Polynomial()
    while True:
        try:
            coefficient = int(next(stream))
            exponent = int(next(stream))
        except StopIteration:
            raise EOFError("polynomial not terminated") from None
        if coefficient == 0 and exponent == 0:
            return poly
        poly.add_term(exponent, coefficient)