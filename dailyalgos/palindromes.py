"""Palindrome partitioning and the longest palindrome buildable from letters."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterator
from string import ascii_letters

__all__ = ["palindrome_partitions", "longest_palindrome"]


def _partitions(s: str, start: int) -> Iterator[list[str]]:
    if start == len(s):
        yield []
        return
    for end in range(start + 1, len(s) + 1):
        piece = s[start:end]
        if piece == piece[::-1]:
            for rest in _partitions(s, end):
                yield [piece, *rest]


def palindrome_partitions(s: str) -> list[list[str]]:
    """Return every way to cut ``s`` into palindromic pieces.

    Partitions come in order of shortest first piece first; the empty string
    has exactly one, empty, partition.
    """
    return list(_partitions(s, 0))


def longest_palindrome(s: str) -> int:
    """Length of the longest palindrome that the ASCII letters of ``s`` can form.

    Letters are case sensitive; every other character is ignored.
    """
    counts = Counter(ch for ch in s if ch in ascii_letters)
    paired = sum(count - count % 2 for count in counts.values())
    has_odd = any(count % 2 for count in counts.values())
    return paired + (1 if has_odd else 0)