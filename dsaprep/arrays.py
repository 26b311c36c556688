"""Single-pass queries and simple transformations over integer lists."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import groupby, pairwise


def linear_search(arr: Sequence[int], target: int) -> int:
    """Return the index of the first occurrence of ``target``, or -1."""
    return next((i for i, value in enumerate(arr) if value == target), -1)


def is_sorted(arr: Sequence[int]) -> bool:
    """Return True if ``arr`` is in non-decreasing order."""
    return all(a <= b for a, b in pairwise(arr))


def find_duplicate_number(arr: Sequence[int]) -> int:
    """Return the first value seen twice, or 0 if every value is distinct."""
    seen: set[int] = set()
    for value in arr:
        if value in seen:
            return value
        seen.add(value)
    return 0


def find_missing_number(arr: Sequence[int]) -> int:
    """Return the number missing from distinct values drawn from ``0..len(arr)``."""
    n = len(arr)
    if n < 2:
        return n
    return n * (n + 1) // 2 - sum(arr)


def kadane(arr: Sequence[int]) -> int:
    """Return the maximum sum of a non-empty contiguous run, or 0 for no input."""
    if not arr:
        return 0
    current = best = arr[0]
    for value in arr[1:]:
        current = max(current + value, value)
        best = max(best, current)
    return best


def largest_element(arr: Sequence[int]) -> int:
    """Return the largest value, or 0 for an empty sequence."""
    return max(arr, default=0)


def max_profit(prices: Sequence[int]) -> int:
    """Return the best profit from buying once and selling later."""
    if len(prices) < 2:
        return 0
    lowest = prices[0]
    best = 0
    for price in prices[1:]:
        best = max(best, price - lowest)
        lowest = min(lowest, price)
    return best


def maximum_consecutive_ones(arr: Sequence[int]) -> int:
    """Return the longest run of 1s.

    A run that begins at the very last position is not counted.
    """
    best = 0
    position = 0
    last = len(arr) - 1
    for key, group in groupby(arr):
        length = sum(1 for _ in group)
        if key == 1 and position < last:
            best = max(best, length)
        position += length
    return best


def second_largest_element(arr: Sequence[int]) -> int:
    """Return the second largest distinct value, or 0 if there is none."""
    if len(arr) < 2:
        return 0
    largest: int | None = None
    second: int | None = None
    for value in arr:
        if largest is None or value > largest:
            second, largest = largest, value
        elif value != largest and (second is None or value > second):
            second = value
    return 0 if second is None else second


def segregate_01(arr: Sequence[int]) -> list[int]:
    """Return a list of the same length with every 1 moved to the end.

    Positions not taken by a 1 are filled with 0.
    """
    ones = sum(1 for value in arr if value == 1)
    return [0] * (len(arr) - ones) + [1] * ones


def move_zero_end(arr: Sequence[int]) -> list[int]:
    """Return the non-zero values in order, followed by the zeros."""
    non_zero = [value for value in arr if value != 0]
    return non_zero + [0] * (len(arr) - len(non_zero))


def remove_duplicates(arr: Sequence[int]) -> list[int]:
    """Return a sorted sequence with repeated neighbours collapsed."""
    return [key for key, _ in groupby(arr)]


def find_repeating_and_missing(arr: Sequence[int]) -> tuple[int, int]:
    """Return ``(repeated, missing)`` for values meant to be ``1..len(arr)``."""
    expected = len(arr) * (len(arr) + 1) // 2
    repeated = 0
    seen: set[int] = set()
    for value in arr:
        if value in seen:
            repeated = value
        else:
            seen.add(value)
    return repeated, expected - sum(seen)