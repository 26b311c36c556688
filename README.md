# dsaprep

Classic array, subarray and matrix algorithms, each a small standalone
function that takes plain Python lists (or other sequences) and returns
plain Python values. There are no third-party dependencies.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `dsaprep.arrays`

Single-pass queries and simple transformations over integer lists.

- `linear_search(arr, target)`: index of the first occurrence, or `-1`.
- `is_sorted(arr)`: `True` if non-decreasing (empty and one-element lists count as sorted).
- `find_duplicate_number(arr)`: first value seen twice, or `0` if all are distinct.
- `find_missing_number(arr)`: the number missing from distinct values in `0..len(arr)`.
- `kadane(arr)`: maximum sum of a non-empty contiguous run; `0` for an empty list.
- `largest_element(arr)`: the largest value; `0` for an empty list.
- `max_profit(prices)`: best profit from one buy followed by one sale; never negative.
- `maximum_consecutive_ones(arr)`: longest run of 1s. A run that begins at the
  very last position is not counted.
- `second_largest_element(arr)`: second largest distinct value, or `0` if there is none.
- `segregate_01(arr)`: new list of the same length with the 1s at the end and
  every other position set to `0`.
- `move_zero_end(arr)`: non-zero values in their original order, then the zeros.
- `remove_duplicates(arr)`: a sorted list with repeated neighbours collapsed.
- `find_repeating_and_missing(arr)`: `(repeated, missing)` for values meant to be `1..len(arr)`.

### `dsaprep.reorder`

Rotations, permutations, in-place sorting and merging.

- `reverse_range(arr, start, end)`: reverses `arr[start..end]` (inclusive) in place.
- `rotate_left(arr, k)` / `rotate_right(arr, k)`: return a rotated copy; `k` may
  exceed the length. A negative `k` raises `ValueError`.
- `next_permutation(arr)`: rearranges `arr` in place into the next lexicographic
  permutation; the last permutation wraps to ascending order. Returns `None`.
- `sort_colors(arr)`: sorts a list of 0s, 1s and 2s in place in one pass;
  any other value raises `ValueError`. Returns `None`.
- `merge_sorted_arrays(first, second)`: one sorted list; ties take from `first` first.
- `merge_intervals(intervals)`: merges overlapping `[start, end]` pairs. The
  intervals must already be ordered by start; they are not sorted for you.

### `dsaprep.grids`

Two-dimensional problems.

- `pascals_triangle(n)`: first `n` rows; a negative `n` raises `ValueError`.
- `rotate_matrix(matrix)` / `rotate_image(matrix)`: rotate a square matrix 90°
  clockwise in place and return it; a non-square matrix raises `ValueError`.
- `set_matrix_zero(matrix)`: a copy where each zero clears its row and column.
  A zero lying in a row or column already cleared by an earlier zero (scanning
  row by row) does not clear anything further.
- `boolean_matrix(matrix)`: sets every row and column that holds a 1 entirely
  to 1, in place, and returns the matrix.
- `matrix_search(matrix, target)`: `True` if `target` occurs in a matrix whose rows are sorted.
- `max_rectangle(matrix)`: area of the largest all-1 rectangle in a binary matrix.
- `row_with_max_ones(matrix)`: index of the row with most 1s in a row-sorted
  binary matrix; ties go to the earliest row; `-1` if no row has a 1.
- `spiral_traversal(matrix)`: elements in clockwise spiral order.
- `word_search(board, word)`: `True` if `word` can be traced through
  horizontally or vertically adjacent cells without reusing a cell. The board
  is a grid of one-character strings.

### `dsaprep.subarrays`

Prefix sums, prefix XOR and sliding windows over contiguous runs.

- `count_special_triplets(arr)`: number of triplets `i < j <= k` where
  `arr[i:j]` and `arr[j:k+1]` have equal XOR.
- `count_subarrays_with_xor(arr, x)`: number of runs whose XOR is `x`.
- `largest_subarray_zero_sum(arr)`: length of the longest run summing to zero.
- `longest_subarray_sum_k(arr, k)`: length of the longest run summing to `k`
  (values may be negative).
- `longest_subarray_sum_k_positives(arr, k)`: the same, by sliding window, for positive values.
- `longest_substring_without_repeat(s)`: length of the longest substring with no repeated character.
- `count_subarrays_with_sum(arr, target)`: number of runs summing to `target`.
- `subarray_with_product(arr, p)`: `(start, end)` of a run with product `p`, or
  `(-1, -1)`. For `p == 0` the first zero is reported; otherwise a sliding
  window is used, which assumes positive values.
- `trapping_rain_water(heights)`: units of water held between the bars.

### `dsaprep.search_and_count`

Searching, voting and counting.

- `four_sum(arr, target)`: every distinct quadruplet summing to `target`, each
  in ascending order. The input is not modified.
- `inversion_count(arr)`: number of pairs `i < j` with `arr[i] > arr[j]`.
- `longest_consecutive_sequence(arr)`: length of the longest run of consecutive integers present.
- `majority_element(arr)`: Boyer–Moore vote winner — the majority value when
  one exists; `0` for an empty list.
- `majority_elements_third(arr)`: every value occurring more than `len(arr) // 3` times.
- `search_rotated(arr, target)`: index of `target` in a rotated ascending list, or `-1`.
- `single_number(arr)`: the value appearing once when every other appears twice.
- `two_sum(arr, target)`: indices of two values summing to `target`, or `(-1, -1)`.

## Example

```python
from dsaprep.arrays import kadane
from dsaprep.reorder import rotate_left, merge_intervals, next_permutation
from dsaprep.grids import spiral_traversal
from dsaprep.search_and_count import two_sum

kadane([-2, 1, -3, 4, -1, 2, 1, -5, 4])          # 6
rotate_left([1, 2, 3, 4], 1)                     # [2, 3, 4, 1]
merge_intervals([[1, 3], [2, 6], [8, 10]])       # [[1, 6], [8, 10]]
spiral_traversal([[1, 2, 3], [4, 5, 6], [7, 8, 9]])
# [1, 2, 3, 6, 9, 8, 7, 4, 5]
two_sum([2, 7, 11, 15], 9)                       # (0, 1)

perm = [1, 2, 3]
next_permutation(perm)                           # perm is now [1, 3, 2]
```

Functions that look for a position return `-1` (or `(-1, -1)`) when there is
none. Several functions return `0` rather than raising for empty or
degenerate input, as noted above.

## What it does not do

This is a library only: it has no command-line program, and it reads and
writes no files.