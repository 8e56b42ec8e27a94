"""Recognition of additive numbers."""

from __future__ import annotations

__all__ = ["is_additive_number"]

_DIGITS = frozenset("0123456789")


def _continues(first: str, second: str, rest: str) -> bool:
    """Check that ``rest`` is exactly the additive continuation of two terms."""
    while rest:
        total = str(int(first) + int(second))
        if not rest.startswith(total):
            return False
        rest = rest[len(total):]
        first, second = second, total
    return True


def is_additive_number(num: str) -> bool:
    """Report whether the digits of ``num`` split into an additive sequence.

    An additive sequence has at least three terms, each after the first two
    being the sum of the two before it; no term other than ``0`` itself may
    start with a zero.
    """
    if any(ch not in _DIGITS for ch in num):
        raise ValueError(f"not a string of decimal digits: {num!r}")

    length = len(num)
    for i in range(1, length // 2 + 1):
        if num[0] == "0" and i > 1:
            break
        first = num[:i]
        for j in range(1, min(length - 2 * i, (length - i) // 2) + 1):
            if num[i] == "0" and j > 1:
                break
            if _continues(first, num[i:i + j], num[i + j:]):
                return True
    return False