"""Searching, voting and counting problems over integer lists."""

from __future__ import annotations

from collections.abc import Sequence
from functools import reduce
from operator import xor


def four_sum(arr: Sequence[int], target: int) -> list[list[int]]:
    """Return every distinct quadruplet of values summing to ``target``.

    Each quadruplet is in ascending order, and the quadruplets come in
    ascending order of their first two values.
    """
    values = sorted(arr)
    n = len(values)
    result: list[list[int]] = []

    for i in range(n - 3):
        if i > 0 and values[i] == values[i - 1]:
            continue
        for j in range(i + 1, n - 2):
            if j > i + 1 and values[j] == values[j - 1]:
                continue
            left, right = j + 1, n - 1
            while left < right:
                total = values[i] + values[j] + values[left] + values[right]
                if total == target:
                    result.append([values[i], values[j], values[left], values[right]])
                    left += 1
                    right -= 1
                    while left < right and values[left] == values[left - 1]:
                        left += 1
                    while left < right and values[right] == values[right + 1]:
                        right -= 1
                elif total < target:
                    left += 1
                else:
                    right -= 1
    return result


def _sort_and_count(values: list[int]) -> tuple[list[int], int]:
    if len(values) < 2:
        return values, 0
    mid = (len(values) + 1) // 2
    left, left_count = _sort_and_count(values[:mid])
    right, right_count = _sort_and_count(values[mid:])

    merged: list[int] = []
    count = left_count + right_count
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            count += len(left) - i
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged, count


def inversion_count(arr: Sequence[int]) -> int:
    """Return the number of pairs ``i < j`` with ``arr[i] > arr[j]``."""
    _, count = _sort_and_count(list(arr))
    return count


def longest_consecutive_sequence(arr: Sequence[int]) -> int:
    """Return the length of the longest run of consecutive integers present."""
    present = set(arr)
    best = 0
    for value in present:
        if value - 1 in present:
            continue
        length = 1
        while value + length in present:
            length += 1
        best = max(best, length)
    return best


def majority_element(arr: Sequence[int]) -> int:
    """Return the candidate of a majority vote; the majority value if one exists.

    An empty sequence yields 0.
    """
    count = 0
    candidate = 0
    for value in arr:
        if count == 0:
            candidate = value
        count += 1 if value == candidate else -1
    return candidate


def majority_elements_third(arr: Sequence[int]) -> list[int]:
    """Return every value occurring more than ``len(arr) // 3`` times."""
    n = len(arr)
    if n == 0:
        return []

    first = second = 0
    first_count = second_count = 0
    for value in arr:
        if first_count > 0 and value == first:
            first_count += 1
        elif second_count > 0 and value == second:
            second_count += 1
        elif first_count == 0:
            first, first_count = value, 1
        elif second_count == 0:
            second, second_count = value, 1
        else:
            first_count -= 1
            second_count -= 1

    first_count = sum(1 for value in arr if value == first)
    second_count = sum(1 for value in arr if value == second and value != first)

    result: list[int] = []
    if first_count > n // 3:
        result.append(first)
    if second != first and second_count > n // 3:
        result.append(second)
    return result


def search_rotated(arr: Sequence[int], target: int) -> int:
    """Return the index of ``target`` in a rotated ascending list, or -1."""
    low, high = 0, len(arr) - 1
    while low <= high:
        mid = low + (high - low) // 2
        if arr[mid] == target:
            return mid
        if arr[low] <= arr[mid]:
            if arr[low] <= target < arr[mid]:
                high = mid - 1
            else:
                low = mid + 1
        elif arr[mid] < target <= arr[high]:
            low = mid + 1
        else:
            high = mid - 1
    return -1


def single_number(arr: Sequence[int]) -> int:
    """Return the value that appears once when every other appears twice."""
    return reduce(xor, arr, 0)


def two_sum(arr: Sequence[int], target: int) -> tuple[int, int]:
    """Return indices of two values summing to ``target``, or ``(-1, -1)``."""
    index_of: dict[int, int] = {}
    for i, value in enumerate(arr):
        partner = index_of.get(target - value)
        if partner is not None:
            return partner, i
        index_of[value] = i
    return -1, -1