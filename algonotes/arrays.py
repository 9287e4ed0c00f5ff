"""Classic array problems: two pointers, stacks, hashing and in-place rearrangement."""

from __future__ import annotations

import heapq
from collections import Counter
from collections.abc import Sequence
from itertools import accumulate


def max_area(height: Sequence[int]) -> int:
    """Return the most water a pair of lines can hold."""
    left, right = 0, len(height) - 1
    best = 0
    while left < right:
        best = max(best, min(height[left], height[right]) * (right - left))
        if height[left] < height[right]:
            left += 1
        else:
            right -= 1
    return best


def largest_rectangle_area(heights: Sequence[int]) -> int:
    """Return the area of the largest rectangle in a histogram."""
    stack = [-1]
    best = 0
    for i, h in enumerate(heights):
        while stack[-1] != -1 and h <= heights[stack[-1]]:
            top = stack.pop()
            best = max(best, heights[top] * (i - stack[-1] - 1))
        stack.append(i)

    n = len(heights)
    while stack[-1] != -1:
        top = stack.pop()
        best = max(best, heights[top] * (n - stack[-1] - 1))
    return best


def longest_common_prefix(strings: Sequence[str]) -> str:
    """Return the longest prefix shared by every string.

    Only the lexicographically smallest and largest strings need comparing.
    """
    if not strings:
        raise ValueError("longest_common_prefix() needs at least one string")
    first, last = min(strings), max(strings)
    prefix = []
    for a, b in zip(first, last):
        if a != b:
            break
        prefix.append(a)
    return "".join(prefix)


def rotate_image(matrix: list[list[int]]) -> None:
    """Rotate a square matrix 90 degrees clockwise, in place."""
    matrix[:] = [list(row) for row in zip(*reversed(matrix))]


def find_duplicate(nums: Sequence[int]) -> int:
    """Return the first value seen a second time."""
    seen: set[int] = set()
    for num in nums:
        if num in seen:
            return num
        seen.add(num)
    raise ValueError("sequence holds no duplicate")


def find_peak_element(nums: Sequence[int]) -> int:
    """Return the index of an element not smaller than its neighbours."""
    if not nums:
        raise ValueError("find_peak_element() needs a non-empty sequence")
    lo, hi = 0, len(nums) - 1
    while lo < hi:
        mid = (lo + hi) // 2
        if nums[mid] < nums[mid + 1]:
            lo = mid + 1
        else:
            hi = mid
    return lo


def longest_consecutive(nums: Sequence[int]) -> int:
    """Return the length of the longest run of consecutive integers."""
    values = set(nums)
    best = 0
    for start in values:
        if start - 1 in values:
            continue
        end = start
        while end + 1 in values:
            end += 1
        best = max(best, end - start + 1)
    return best


def length_of_longest_substring(s: str) -> int:
    """Return the length of the longest substring without repeated characters."""
    window: set[str] = set()
    left = 0
    best = 0
    for right, ch in enumerate(s):
        while ch in window:
            window.discard(s[left])
            left += 1
        window.add(ch)
        best = max(best, right - left + 1)
    return best


def merge_sorted(nums1: list[int], m: int, nums2: Sequence[int], n: int) -> None:
    """Merge the first ``n`` items of ``nums2`` into ``nums1``, in place.

    ``nums1`` holds ``m`` sorted values followed by room for ``n`` more.
    """
    nums1[: m + n] = heapq.merge(nums1[:m], nums2[:n])


def next_permutation(nums: list[int]) -> None:
    """Rearrange ``nums`` into the next lexicographic permutation, in place.

    The last permutation wraps round to the first.
    """
    if len(nums) < 2:
        return
    i = len(nums) - 1
    while i > 0 and nums[i - 1] >= nums[i]:
        i -= 1
    if i == 0:
        nums.reverse()
        return
    j = len(nums) - 1
    while nums[j] <= nums[i - 1]:
        j -= 1
    nums[i - 1], nums[j] = nums[j], nums[i - 1]
    nums[i:] = reversed(nums[i:])


def subarray_sum(nums: Sequence[int], k: int) -> int:
    """Count the contiguous subarrays whose sum is ``k``."""
    seen = Counter({0: 1})
    count = 0
    for total in accumulate(nums):
        count += seen[total - k]
        seen[total] += 1
    return count


def two_sum(nums: Sequence[int], target: int) -> tuple[int, int] | None:
    """Return indices of two values adding up to ``target``, or None."""
    positions: dict[int, int] = {}
    for i, num in enumerate(nums):
        other = positions.get(target - num)
        if other is not None:
            return other, i
        positions[num] = i
    return None