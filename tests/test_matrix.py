import pytest
from hypothesis import given
from hypothesis import strategies as st

from dailyalgos.matrix import search_matrix

MATRIX = [
    [1, 4, 7, 11, 15],
    [2, 5, 8, 12, 19],
    [3, 6, 9, 16, 22],
    [10, 13, 14, 17, 24],
    [18, 21, 23, 26, 30],
]


def test_source_example_target_missing():
    assert search_matrix(MATRIX, 60) is False


@pytest.mark.parametrize("target", [value for row in MATRIX for value in row])
def test_every_element_is_found(target):
    assert search_matrix(MATRIX, target) is True


@pytest.mark.parametrize("target", [0, 20, 25, 31, -7])
def test_absent_values_not_found(target):
    assert search_matrix(MATRIX, target) is False


def test_empty_rows_find_nothing():
    assert search_matrix([[]], 1) is False


def test_no_rows_is_an_error():
    with pytest.raises(ValueError):
        search_matrix([], 1)


@st.composite
def sorted_matrices(draw):
    rows = draw(st.integers(min_value=1, max_value=6))
    cols = draw(st.integers(min_value=1, max_value=6))
    row_steps = draw(st.lists(st.integers(0, 5), min_size=rows, max_size=rows))
    col_steps = draw(st.lists(st.integers(0, 5), min_size=cols, max_size=cols))
    row_base = [sum(row_steps[: i + 1]) for i in range(rows)]
    col_base = [sum(col_steps[: j + 1]) for j in range(cols)]
    return [[r + c for c in col_base] for r in row_base]


@given(sorted_matrices(), st.integers(min_value=-5, max_value=80))
def test_agrees_with_membership(matrix, target):
    present = any(target in row for row in matrix)
    assert search_matrix(matrix, target) is present