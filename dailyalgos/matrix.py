"""Search in a matrix whose rows and columns are both sorted ascending."""

from __future__ import annotations

from collections.abc import Sequence

__all__ = ["search_matrix"]


def search_matrix(matrix: Sequence[Sequence[int]], target: int) -> bool:
    """Report whether ``target`` is in ``matrix``, walking from the top-right corner.

    Each step moves left when the current value is too large and down when it
    is too small, so at most rows + columns cells are visited.
    """
    if not matrix:
        raise ValueError("matrix must have at least one row")

    row = 0
    col = len(matrix[0]) - 1
    while row < len(matrix) and col >= 0:
        value = matrix[row][col]
        if value == target:
            return True
        if value > target:
            col -= 1
        else:
            row += 1
    return False