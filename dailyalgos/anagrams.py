"""Anagram checks over arbitrary characters and over lowercase letters."""

from __future__ import annotations

from collections import Counter
from string import ascii_lowercase

__all__ = ["are_anagrams", "is_anagram"]

_LOWERCASE = frozenset(ascii_lowercase)


def are_anagrams(s1: str, s2: str) -> bool:
    """Report whether ``s1`` and ``s2`` hold the same characters equally often."""
    if len(s1) != len(s2):
        return False
    return Counter(s1) == Counter(s2)


def is_anagram(s: str, t: str) -> bool:
    """Anagram check restricted to lowercase ASCII letters.

    Strings of different lengths are never anagrams; equal-length strings with
    any other character raise ``ValueError``.
    """
    if len(s) != len(t):
        return False
    for text in (s, t):
        if any(ch not in _LOWERCASE for ch in text):
            raise ValueError(f"only lowercase letters a-z are allowed: {text!r}")
    return Counter(s) == Counter(t)