"""Classic algorithm exercises on integers, strings and matrices."""

__version__ = "0.1.0"

__all__ = [
    "additive",
    "anagrams",
    "bulls_cows",
    "digits",
    "dna",
    "expressions",
    "integers",
    "matrix",
    "palindromes",
]