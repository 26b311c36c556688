"""Rotations, permutations, in-place sorting and merging of integer lists."""

from __future__ import annotations

import heapq
from collections.abc import Iterable, MutableSequence, Sequence


def reverse_range(arr: MutableSequence[int], start: int, end: int) -> None:
    """Reverse ``arr[start..end]`` (both ends inclusive) in place."""
    if start < end:
        arr[start : end + 1] = arr[start : end + 1][::-1]


def _checked_shift(arr: Sequence[int], k: int) -> int:
    if k < 0:
        raise ValueError(f"rotation amount must not be negative: {k}")
    return k % len(arr)


def rotate_left(arr: Sequence[int], k: int) -> list[int]:
    """Return a copy of ``arr`` rotated left by ``k`` places."""
    if not arr:
        return []
    k = _checked_shift(arr, k)
    return [*arr[k:], *arr[:k]]


def rotate_right(arr: Sequence[int], k: int) -> list[int]:
    """Return a copy of ``arr`` rotated right by ``k`` places."""
    if not arr:
        return []
    split = len(arr) - _checked_shift(arr, k)
    return [*arr[split:], *arr[:split]]


def next_permutation(arr: MutableSequence[int]) -> None:
    """Rearrange ``arr`` in place into its next lexicographic permutation.

    The last permutation wraps round to the first (ascending order).
    """
    n = len(arr)
    pivot = n - 2
    while pivot >= 0 and arr[pivot] >= arr[pivot + 1]:
        pivot -= 1
    if pivot >= 0:
        successor = n - 1
        while arr[successor] <= arr[pivot]:
            successor -= 1
        arr[pivot], arr[successor] = arr[successor], arr[pivot]
    reverse_range(arr, pivot + 1, n - 1)


def sort_colors(arr: MutableSequence[int]) -> None:
    """Sort a list of 0s, 1s and 2s in place in a single pass."""
    low, mid, high = 0, 0, len(arr) - 1
    while mid <= high:
        value = arr[mid]
        if value == 0:
            arr[low], arr[mid] = arr[mid], arr[low]
            low += 1
            mid += 1
        elif value == 1:
            mid += 1
        elif value == 2:
            arr[mid], arr[high] = arr[high], arr[mid]
            high -= 1
        else:
            raise ValueError(f"expected only 0, 1 or 2, got {value}")


def merge_sorted_arrays(first: Iterable[int], second: Iterable[int]) -> list[int]:
    """Merge two sorted sequences into one sorted list; ties favour ``first``."""
    return list(heapq.merge(first, second))


def merge_intervals(intervals: Iterable[Sequence[int]]) -> list[list[int]]:
    """Merge overlapping ``[start, end]`` intervals given in order of start."""
    merged: list[list[int]] = []
    for start, end in intervals:
        if not merged or merged[-1][1] < start:
            merged.append([start, end])
        else:
            merged[-1][1] = max(merged[-1][1], end)
    return merged