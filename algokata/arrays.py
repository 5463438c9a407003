"""Array puzzles: water containers, medians, duplicates and target sums."""

from __future__ import annotations

import heapq
from collections import defaultdict
from collections.abc import Sequence
from itertools import combinations, groupby, permutations


def max_area(height: Sequence[int]) -> int:
    """Return the most water two of the given walls can hold between them.

    Two pointers start at the ends and the shorter wall moves inward.
    """
    left, right = 0, len(height) - 1
    best = 0
    while left < right:
        best = max(best, min(height[left], height[right]) * (right - left))
        if height[left] < height[right]:
            left += 1
        else:
            right -= 1
    return best


def max_area_converging(height: Sequence[int]) -> int:
    """Return the same maximum as :func:`max_area`, walking until the pointers meet."""
    left, right = 0, len(height) - 1
    best = 0
    while left <= right:
        best = max(best, min(height[left], height[right]) * (right - left))
        if height[left] < height[right]:
            left += 1
        else:
            right -= 1
    return best


def find_median_sorted_arrays(nums1: Sequence[int], nums2: Sequence[int]) -> float:
    """Return the median of the union of two sorted sequences."""
    merged = list(heapq.merge(nums1, nums2))
    if not merged:
        raise ValueError("cannot take the median of two empty sequences")
    middle = len(merged) // 2
    if len(merged) % 2 == 1:
        return float(merged[middle])
    return (merged[middle] + merged[middle - 1]) / 2


def remove_duplicates(nums: list[int]) -> int:
    """Drop adjacent repeats from ``nums`` in place and return its new length."""
    nums[:] = [value for value, _ in groupby(nums)]
    return len(nums)


def three_sum(nums: Sequence[int]) -> list[list[int]]:
    """Return index triples whose values add up to zero.

    Every unordered pair of positions ``a < b`` is grouped by its sum. Then,
    for each position ``c`` in turn, every still unused pair whose sum is
    ``-nums[c]`` and which does not contain ``c`` is completed to
    ``[a, b, c]``. Each pair is used at most once.
    """
    pairs_by_sum: defaultdict[int, list[list[int]]] = defaultdict(list)
    for a, b in combinations(range(len(nums)), 2):
        pairs_by_sum[nums[a] + nums[b]].append([a, b])

    triples = []
    for index, value in enumerate(nums):
        for pair in pairs_by_sum.get(-value, ()):
            if len(pair) == 2 and index not in pair:
                pair.append(index)
                triples.append(pair)
    return triples


def two_sum(nums: Sequence[int], target: int) -> list[int]:
    """Return the first two distinct positions whose values add up to ``target``.

    Every ordered pair is tried; ``[0, 0]`` is returned when none fits.
    """
    for (first, x), (second, y) in permutations(enumerate(nums), 2):
        if x + y == target:
            return [first, second]
    return [0, 0]


def two_sum_hash_map(nums: Sequence[int], target: int) -> list[int]:
    """Return ``[earlier, later]`` positions adding up to ``target`` in one pass.

    ``[0, 0]`` is returned when no pair fits.
    """
    seen: dict[int, int] = {}
    for index, value in enumerate(nums):
        partner = seen.get(target - value)
        if partner is not None:
            return [partner, index]
        seen[value] = index
    return [0, 0]