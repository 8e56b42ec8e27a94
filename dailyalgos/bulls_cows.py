"""Hints for the Bulls and Cows guessing game."""

from __future__ import annotations

from collections import Counter

__all__ = ["get_hint"]

_DIGITS = frozenset("0123456789")


def get_hint(secret: str, guess: str) -> str:
    """Return the hint ``"xAyB"`` for ``guess`` against ``secret``.

    ``x`` counts digits right in value and position (bulls); ``y`` counts the
    remaining digits right in value only (cows).
    """
    if len(secret) != len(guess):
        raise ValueError("secret and guess must have the same length")
    for text in (secret, guess):
        if any(ch not in _DIGITS for ch in text):
            raise ValueError(f"only decimal digits are allowed: {text!r}")

    bulls = 0
    unmatched_secret: Counter[str] = Counter()
    unmatched_guess: Counter[str] = Counter()
    for expected, offered in zip(secret, guess):
        if expected == offered:
            bulls += 1
        else:
            unmatched_secret[expected] += 1
            unmatched_guess[offered] += 1

    cows = sum((unmatched_secret & unmatched_guess).values())
    return f"{bulls}A{cows}B"