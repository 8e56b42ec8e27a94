# dailyalgos

Small, self-contained implementations of classic algorithm exercises on
integers, strings and matrices. There are no runtime dependencies.

## Installation

```
pip install .
```

With the test dependencies:

```
pip install ".[test]"
```

## Modules

| Module | Functions |
| --- | --- |
| `dailyalgos.integers` | `fib`, `climb_stairs`, `gcd`, `single_number`, `maximum_gap` |
| `dailyalgos.matrix` | `search_matrix` |
| `dailyalgos.dna` | `find_repeated_dna_sequences` |
| `dailyalgos.additive` | `is_additive_number` |
| `dailyalgos.expressions` | `diff_ways_to_compute` |
| `dailyalgos.palindromes` | `palindrome_partitions`, `longest_palindrome` |
| `dailyalgos.anagrams` | `are_anagrams`, `is_anagram` |
| `dailyalgos.digits` | `remove_k_digits` |
| `dailyalgos.bulls_cows` | `get_hint` |

### Integers

- `fib(n)` – the n-th Fibonacci number; any `n <= 1` is returned unchanged.
- `climb_stairs(n)` – ways to climb `n` steps taking one or two at a time
  (`1` for `n <= 1`).
- `gcd(a, b)` – Euclid's algorithm with remainders that take the sign of the
  dividend.
- `single_number(nums)` – the value that appears once where every other value
  appears three times.
- `maximum_gap(nums)` – the largest difference between successive values in
  sorted order, computed with buckets in linear time; `0` for fewer than two
  values.

### Strings and matrices

- `search_matrix(matrix, target)` – searches a matrix whose rows and columns
  are sorted ascending, walking from the top-right corner. Raises `ValueError`
  for a matrix with no rows.
- `find_repeated_dna_sequences(s)` – every 10-letter substring occurring more
  than once, each listed once, in the order it was first seen repeated.
- `is_additive_number(num)` – whether the digits split into an additive
  sequence of at least three terms with no leading zeros. Raises `ValueError`
  for anything other than decimal digits.
- `diff_ways_to_compute(expression)` – every result of an expression with
  `+`, `-` and `*` under all bracketings. Raises `ValueError` when an operand
  is not an integer.
- `palindrome_partitions(s)` – every way to cut `s` into palindromic pieces.
- `longest_palindrome(s)` – length of the longest palindrome that the ASCII
  letters of `s` can form; case sensitive, other characters ignored.
- `are_anagrams(s1, s2)` – anagram check over any characters.
- `is_anagram(s, t)` – anagram check over lowercase ASCII letters; strings of
  equal length containing any other character raise `ValueError`.
- `remove_k_digits(num, k)` – the smallest number left after removing `k`
  digits, without leading zeros, `"0"` if nothing remains.
- `get_hint(secret, guess)` – the Bulls and Cows hint `"xAyB"`. Raises
  `ValueError` when the lengths differ or a character is not a digit.

## Examples

```python
from dailyalgos.integers import fib, climb_stairs, gcd, single_number, maximum_gap
from dailyalgos.matrix import search_matrix
from dailyalgos.dna import find_repeated_dna_sequences
from dailyalgos.additive import is_additive_number
from dailyalgos.expressions import diff_ways_to_compute
from dailyalgos.bulls_cows import get_hint
from dailyalgos.digits import remove_k_digits
from dailyalgos.anagrams import is_anagram
from dailyalgos.palindromes import palindrome_partitions, longest_palindrome

fib(10)                                   # 55
climb_stairs(5)                           # 8
gcd(48, 18)                               # 6
single_number([0, 1, 0, 1, 0, 1, 99])     # 99
maximum_gap([3, 6, 9, 1])                 # 3

matrix = [
    [1, 4, 7, 11, 15],
    [2, 5, 8, 12, 19],
    [3, 6, 9, 16, 22],
]
search_matrix(matrix, 9)                  # True

find_repeated_dna_sequences("AAAAACCCCCAAAAACCCCCCAAAAAGGGTTT")
# ["AAAAACCCCC", "CCCCCAAAAA"]
is_additive_number("112358")              # True
diff_ways_to_compute("2-1-1")             # [2, 0]
get_hint("1807", "7810")                  # "1A3B"
remove_k_digits("1432219", 3)             # "1219"
is_anagram("anagram", "nagaram")          # True
palindrome_partitions("aab")              # [["a", "a", "b"], ["aa", "b"]]
longest_palindrome("abccccdd")            # 7
```

## What it does not do

The package is a library of functions only. It has no command-line program
and does not read input interactively; call the functions from Python.

## Running the tests

```
pytest
```