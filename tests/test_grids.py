import copy

import pytest

from dsaprep.grids import (
    boolean_matrix,
    matrix_search,
    max_rectangle,
    pascals_triangle,
    rotate_image,
    rotate_matrix,
    row_with_max_ones,
    set_matrix_zero,
    spiral_traversal,
    word_search,
)


@pytest.mark.parametrize(
    ("n", "expected"),
    [
        (0, []),
        (1, [[1]]),
        (3, [[1], [1, 1], [1, 2, 1]]),
        (5, [[1], [1, 1], [1, 2, 1], [1, 3, 3, 1], [1, 4, 6, 4, 1]]),
    ],
)
def test_pascals_triangle(n, expected):
    assert pascals_triangle(n) == expected


def test_pascals_triangle_row_sums_are_powers_of_two():
    rows = pascals_triangle(10)
    assert [sum(row) for row in rows] == [2**i for i in range(10)]


def test_pascals_triangle_negative():
    with pytest.raises(ValueError):
        pascals_triangle(-1)


ROTATIONS = [
    ([[1, 2], [3, 4]], [[3, 1], [4, 2]]),
    ([[1, 2, 3], [4, 5, 6], [7, 8, 9]], [[7, 4, 1], [8, 5, 2], [9, 6, 3]]),
    ([[5]], [[5]]),
]


@pytest.mark.parametrize(("matrix", "expected"), copy.deepcopy(ROTATIONS))
def test_rotate_matrix(matrix, expected):
    result = rotate_matrix(matrix)
    assert result == expected
    assert result is matrix


@pytest.mark.parametrize(("matrix", "expected"), copy.deepcopy(ROTATIONS))
def test_rotate_image(matrix, expected):
    assert rotate_image(matrix) == expected


def test_rotate_four_times_is_identity():
    original = [[1, 2, 3], [4, 5, 6], [7, 8, 9]]
    matrix = copy.deepcopy(original)
    for _ in range(4):
        rotate_matrix(matrix)
    assert matrix == original


def test_rotate_non_square():
    with pytest.raises(ValueError):
        rotate_matrix([[1, 2, 3], [4, 5, 6]])


@pytest.mark.parametrize(
    ("matrix", "expected"),
    [
        ([[1, 2], [3, 4]], [[1, 2], [3, 4]]),
        ([[1, 0, 3], [4, 5, 6]], [[0, 0, 0], [4, 0, 6]]),
        ([[0, 2, 3], [4, 5, 0], [7, 8, 9]], [[0, 0, 0], [0, 0, 0], [0, 8, 0]]),
        ([[0, 0], [0, 0]], [[0, 0], [0, 0]]),
        ([[0, 0], [1, 1]], [[0, 0], [0, 1]]),
    ],
)
def test_set_matrix_zero(matrix, expected):
    assert set_matrix_zero(matrix) == expected


def test_set_matrix_zero_leaves_input_untouched():
    matrix = [[1, 0], [3, 4]]
    set_matrix_zero(matrix)
    assert matrix == [[1, 0], [3, 4]]


@pytest.mark.parametrize(
    ("matrix", "expected"),
    [
        ([[1, 0], [0, 0]], [[1, 1], [1, 0]]),
        ([[0, 0], [0, 0]], [[0, 0], [0, 0]]),
        ([[1, 1], [1, 1]], [[1, 1], [1, 1]]),
    ],
)
def test_boolean_matrix(matrix, expected):
    assert boolean_matrix(matrix) == expected


@pytest.mark.parametrize(
    ("matrix", "target", "expected"),
    [
        ([[1, 3, 5, 7], [10, 11, 16, 20], [23, 30, 34, 60]], 3, True),
        ([[1, 2], [3, 4]], 5, False),
        ([[1]], 1, True),
        ([[1, 3, 5, 7], [10, 11, 16, 20], [23, 30, 34, 60]], 12, False),
    ],
)
def test_matrix_search(matrix, target, expected):
    assert matrix_search(matrix, target) is expected


@pytest.mark.parametrize(
    ("matrix", "expected"),
    [
        ([[0, 1, 1, 0], [1, 1, 1, 1], [1, 1, 1, 1], [1, 1, 0, 0]], 8),
        ([[0, 0], [0, 0]], 0),
        ([[1, 1], [1, 1]], 4),
        ([], 0),
    ],
)
def test_max_rectangle(matrix, expected):
    assert max_rectangle(matrix) == expected


@pytest.mark.parametrize(
    ("matrix", "expected"),
    [
        ([[0, 1, 1, 1], [0, 0, 1, 1], [1, 1, 1, 1], [0, 0, 0, 0]], 2),
        ([[0, 0], [0, 0]], -1),
        ([[1, 1], [1, 1]], 0),
    ],
)
def test_row_with_max_ones(matrix, expected):
    assert row_with_max_ones(matrix) == expected


@pytest.mark.parametrize(
    ("matrix", "expected"),
    [
        ([[1, 2, 3], [4, 5, 6], [7, 8, 9]], [1, 2, 3, 6, 9, 8, 7, 4, 5]),
        ([[1, 2, 3, 4]], [1, 2, 3, 4]),
        ([[1], [2], [3], [4]], [1, 2, 3, 4]),
        ([], []),
        ([[1, 2, 3], [4, 5, 6]], [1, 2, 3, 6, 5, 4]),
    ],
)
def test_spiral_traversal(matrix, expected):
    assert spiral_traversal(matrix) == expected


@pytest.mark.parametrize(
    ("board", "word", "expected"),
    [
        (["ABCE", "SFCS", "ADEE"], "ABCCED", True),
        (["AB", "CD"], "ABCD", False),
        (["A"], "A", True),
        (["ABCE", "SFCS", "ADEE"], "SEE", True),
        (["ABCE", "SFCS", "ADEE"], "ABCB", False),
    ],
)
def test_word_search(board, word, expected):
    assert word_search(board, word) is expected


def test_word_search_with_character_lists():
    board = [["A", "B", "C", "E"], ["S", "F", "C", "S"], ["A", "D", "E", "E"]]
    assert word_search(board, "ABCCED") is True