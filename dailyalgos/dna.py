"""Repeated fixed-length sequences in a DNA string."""

from __future__ import annotations

__all__ = ["find_repeated_dna_sequences"]

_WINDOW = 10


def find_repeated_dna_sequences(s: str) -> list[str]:
    """Return every 10-letter substring that occurs more than once in ``s``.

    Each sequence is reported once, in the order in which it was first seen
    repeated. Strings shorter than ten letters have none.
    """
    seen: set[str] = set()
    repeated: dict[str, None] = {}
    for start in range(len(s) - _WINDOW + 1):
        sequence = s[start:start + _WINDOW]
        if sequence in seen:
            repeated.setdefault(sequence)
        else:
            seen.add(sequence)
    return list(repeated)