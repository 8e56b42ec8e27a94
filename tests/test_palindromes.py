from collections import Counter

from hypothesis import given
from hypothesis import strategies as st

from dailyalgos.palindromes import longest_palindrome, palindrome_partitions

small_text = st.text(alphabet="abc", max_size=8)
letters = st.text(alphabet="abcXYZ", max_size=30)


def test_partitions_example():
    assert palindrome_partitions("aab") == [["a", "a", "b"], ["aa", "b"]]


def test_empty_string_has_one_empty_partition():
    assert palindrome_partitions("") == [[]]


@given(small_text)
def test_partitions_rebuild_string_from_palindromes(s):
    for parts in palindrome_partitions(s):
        assert "".join(parts) == s
        assert all(part and part == part[::-1] for part in parts)


@given(small_text.filter(bool))
def test_single_characters_come_first(s):
    assert palindrome_partitions(s)[0] == list(s)


@given(small_text)
def test_partitions_are_distinct(s):
    result = palindrome_partitions(s)
    assert len({tuple(parts) for parts in result}) == len(result)


def test_longest_palindrome_example():
    assert longest_palindrome("abccccdd") == 7


def test_letters_are_case_sensitive():
    assert longest_palindrome("Aa") == 1


def test_non_letters_are_ignored():
    assert longest_palindrome("a1!b 2b") == longest_palindrome("abb")


@given(letters)
def test_palindrome_input_uses_every_letter(s):
    assert longest_palindrome(s + s[::-1]) == 2 * len(s)


@given(letters)
def test_bounded_by_letter_count(s):
    result = longest_palindrome(s)
    assert result <= len(s)
    odd_letters = sum(count % 2 for count in Counter(s).values())
    assert result == len(s) - max(odd_letters - 1, 0)