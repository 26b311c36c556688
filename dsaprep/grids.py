"""Algorithms over two-dimensional grids of integers and characters."""

from __future__ import annotations

from collections.abc import Sequence


def pascals_triangle(n: int) -> list[list[int]]:
    """Return the first ``n`` rows of Pascal's triangle."""
    if n < 0:
        raise ValueError(f"row count must not be negative: {n}")
    rows: list[list[int]] = []
    for _ in range(n):
        if not rows:
            rows.append([1])
            continue
        above = [0, *rows[-1], 0]
        rows.append([a + b for a, b in zip(above, above[1:])])
    return rows


def rotate_matrix(matrix: list[list[int]]) -> list[list[int]]:
    """Rotate a square matrix 90 degrees clockwise in place and return it."""
    size = len(matrix)
    if any(len(row) != size for row in matrix):
        raise ValueError("matrix must be square")
    for i in range(size):
        for j in range(i + 1, size):
            matrix[i][j], matrix[j][i] = matrix[j][i], matrix[i][j]
    for row in matrix:
        row.reverse()
    return matrix


def rotate_image(matrix: list[list[int]]) -> list[list[int]]:
    """Rotate an n x n image 90 degrees clockwise in place and return it."""
    return rotate_matrix(matrix)


def set_matrix_zero(matrix: Sequence[Sequence[int]]) -> list[list[int]]:
    """Return a copy where each zero clears its whole row and column.

    Cells are scanned row by row; a zero lying in a row or column that an
    earlier zero has already cleared does not clear anything further.
    """
    cleared_rows: set[int] = set()
    cleared_cols: set[int] = set()
    for i, row in enumerate(matrix):
        for j, value in enumerate(row):
            if value == 0 and i not in cleared_rows and j not in cleared_cols:
                cleared_rows.add(i)
                cleared_cols.add(j)
    return [
        [
            0 if i in cleared_rows or j in cleared_cols else value
            for j, value in enumerate(row)
        ]
        for i, row in enumerate(matrix)
    ]


def boolean_matrix(matrix: list[list[int]]) -> list[list[int]]:
    """Set every row and column holding a 1 entirely to 1, in place."""
    rows = {i for i, row in enumerate(matrix) if 1 in row}
    cols = {j for row in matrix for j, value in enumerate(row) if value == 1}
    for i, row in enumerate(matrix):
        for j in range(len(row)):
            if i in rows or j in cols:
                row[j] = 1
    return matrix


def matrix_search(matrix: Sequence[Sequence[int]], target: int) -> bool:
    """Return True if ``target`` occurs in a matrix whose rows are sorted."""
    return any(
        row[0] <= target <= row[-1] and target in row for row in matrix if row
    )


def max_rectangle(matrix: Sequence[Sequence[int]]) -> int:
    """Return the area of the largest all-1 rectangle in a binary matrix."""
    if not matrix or not matrix[0]:
        return 0
    width = len(matrix[0])
    heights = [0] * width
    best = 0
    for row in matrix:
        heights = [h + 1 if cell == 1 else 0 for h, cell in zip(heights, row)]
        stack: list[int] = []
        for k, current in enumerate([*heights, 0]):
            while stack and current < heights[stack[-1]]:
                height = heights[stack.pop()]
                span = k - stack[-1] - 1 if stack else k
                best = max(best, height * span)
            stack.append(k)
    return best


def row_with_max_ones(matrix: Sequence[Sequence[int]]) -> int:
    """Return the index of the row with most 1s in a row-sorted binary matrix.

    Ties go to the earliest row; -1 if no row holds a 1.
    """
    best_count = 0
    best_row = -1
    for i, row in enumerate(matrix):
        first_one = next((j for j, value in enumerate(row) if value == 1), None)
        count = 0 if first_one is None else len(row) - first_one
        if count > best_count:
            best_count, best_row = count, i
    return best_row


def spiral_traversal(matrix: Sequence[Sequence[int]]) -> list[int]:
    """Return the matrix elements in clockwise spiral order."""
    if not matrix or not matrix[0]:
        return []
    result: list[int] = []
    top, bottom = 0, len(matrix) - 1
    left, right = 0, len(matrix[0]) - 1
    while top <= bottom and left <= right:
        result.extend(matrix[top][left : right + 1])
        top += 1
        result.extend(matrix[i][right] for i in range(top, bottom + 1))
        right -= 1
        if top <= bottom:
            result.extend(matrix[bottom][j] for j in range(right, left - 1, -1))
            bottom -= 1
        if left <= right:
            result.extend(matrix[i][left] for i in range(bottom, top - 1, -1))
            left += 1
    return result


def word_search(board: Sequence[Sequence[str]], word: str) -> bool:
    """Return True if ``word`` can be traced through adjacent cells.

    Moves are horizontal or vertical and no cell is used twice.
    """
    rows = len(board)
    cols = len(board[0]) if rows else 0
    visited: set[tuple[int, int]] = set()

    def trace(i: int, j: int, index: int) -> bool:
        if index == len(word):
            return True
        if not (0 <= i < rows and 0 <= j < cols):
            return False
        if (i, j) in visited or board[i][j] != word[index]:
            return False
        visited.add((i, j))
        found = any(
            trace(i + di, j + dj, index + 1)
            for di, dj in ((1, 0), (-1, 0), (0, 1), (0, -1))
        )
        visited.discard((i, j))
        return found

    return any(trace(i, j, 0) for i in range(rows) for j in range(cols))