"""Questions about contiguous runs of a list: sums, XORs, products and windows."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence
from itertools import accumulate
from operator import xor


def count_special_triplets(arr: Sequence[int]) -> int:
    """Count triplets ``i < j <= k`` where ``arr[i:j]`` and ``arr[j:k+1]`` XOR equal.

    Two halves XOR to the same value exactly when the whole run ``arr[i..k]``
    XORs to zero, and such a run offers ``k - i`` choices of ``j``.
    """
    counts: Counter[int] = Counter()
    index_sums: Counter[int] = Counter()
    total = 0
    for position, prefix in enumerate(accumulate(arr, xor, initial=0)):
        total += counts[prefix] * (position - 1) - index_sums[prefix]
        counts[prefix] += 1
        index_sums[prefix] += position
    return total


def count_subarrays_with_xor(arr: Sequence[int], x: int) -> int:
    """Return how many contiguous runs of ``arr`` XOR to ``x``."""
    seen: Counter[int] = Counter({0: 1})
    count = 0
    prefix = 0
    for value in arr:
        prefix ^= value
        count += seen[prefix ^ x]
        seen[prefix] += 1
    return count


def largest_subarray_zero_sum(arr: Sequence[int]) -> int:
    """Return the length of the longest contiguous run summing to zero."""
    first_seen: dict[int, int] = {}
    best = 0
    for i, total in enumerate(accumulate(arr)):
        if total == 0:
            best = i + 1
        if total in first_seen:
            best = max(best, i - first_seen[total])
        else:
            first_seen[total] = i
    return best


def longest_subarray_sum_k(arr: Sequence[int], k: int) -> int:
    """Return the length of the longest run summing to ``k``; values may be negative."""
    first_seen: dict[int, int] = {}
    best = 0
    for i, total in enumerate(accumulate(arr)):
        if total == k:
            best = i + 1
        start = first_seen.get(total - k)
        if start is not None:
            best = max(best, i - start)
        first_seen.setdefault(total, i)
    return best


def longest_subarray_sum_k_positives(arr: Sequence[int], k: int) -> int:
    """Return the length of the longest run summing to ``k`` for positive values."""
    left = 0
    total = 0
    best = 0
    for right, value in enumerate(arr):
        total += value
        while total > k and left <= right:
            total -= arr[left]
            left += 1
        if total == k:
            best = max(best, right - left + 1)
    return best


def longest_substring_without_repeat(s: str) -> int:
    """Return the length of the longest substring with no repeated character."""
    last_seen: dict[str, int] = {}
    left = 0
    best = 0
    for right, char in enumerate(s):
        previous = last_seen.get(char)
        if previous is not None and previous >= left:
            left = previous + 1
        last_seen[char] = right
        best = max(best, right - left + 1)
    return best


def count_subarrays_with_sum(arr: Sequence[int], target: int) -> int:
    """Return how many contiguous runs of ``arr`` sum to ``target``."""
    seen: Counter[int] = Counter({0: 1})
    count = 0
    for total in accumulate(arr):
        count += seen[total - target]
        seen[total] += 1
    return count


def subarray_with_product(arr: Sequence[int], p: int) -> tuple[int, int]:
    """Return ``(start, end)`` of a run whose product is ``p``, or ``(-1, -1)``.

    A product of zero is answered by the first zero in ``arr``; otherwise a
    sliding window is used, which assumes positive values.
    """
    if p == 0:
        zero = next((i for i, value in enumerate(arr) if value == 0), -1)
        return zero, zero

    product = 1
    left = 0
    for right, value in enumerate(arr):
        product *= value
        while left <= right and product > p:
            product //= arr[left]
            left += 1
        if product == p:
            return left, right
    return -1, -1


def trapping_rain_water(heights: Sequence[int]) -> int:
    """Return the units of water held between bars of the given heights."""
    left, right = 0, len(heights) - 1
    left_max = right_max = 0
    water = 0
    while left < right:
        if heights[left] < heights[right]:
            if heights[left] >= left_max:
                left_max = heights[left]
            else:
                water += left_max - heights[left]
            left += 1
        else:
            if heights[right] >= right_max:
                right_max = heights[right]
            else:
                water += right_max - heights[right]
            right -= 1
    return water