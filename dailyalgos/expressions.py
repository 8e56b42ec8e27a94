"""All results of an arithmetic expression under every parenthesisation."""

from __future__ import annotations

import operator
from collections.abc import Callable

__all__ = ["diff_ways_to_compute"]

_OPERATORS: dict[str, Callable[[int, int], int]] = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
}


def diff_ways_to_compute(expression: str) -> list[int]:
    """Return the value of ``expression`` for every way of bracketing it.

    Results are ordered by splitting operator from left to right, then by the
    left result, then by the right result. Raises ``ValueError`` when an
    operand is not an integer.
    """
    cache: dict[str, tuple[int, ...]] = {}

    def evaluate(text: str) -> tuple[int, ...]:
        if text in cache:
            return cache[text]
        results: list[int] = []
        for index, char in enumerate(text):
            apply = _OPERATORS.get(char)
            if apply is None:
                continue
            left = evaluate(text[:index])
            right = evaluate(text[index + 1:])
            results.extend(apply(l, r) for l in left for r in right)
        value = tuple(results) if results else (int(text),)
        cache[text] = value
        return value

    return list(evaluate(expression))