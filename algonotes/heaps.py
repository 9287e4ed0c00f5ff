"""Heap-based problems: running median, k-th smallest and frequency ranking."""

from __future__ import annotations

import heapq
from collections import Counter
from collections.abc import Iterable, Sequence


class MedianFinder:
    """Keeps the median of a growing stream of numbers."""

    def __init__(self) -> None:
        self._lower: list[int] = []  # max-heap of the smaller half, negated
        self._upper: list[int] = []  # min-heap of the larger half

    def add_num(self, num: int) -> None:
        """Add ``num`` to the stream."""
        if not self._lower or num <= -self._lower[0]:
            heapq.heappush(self._lower, -num)
        else:
            heapq.heappush(self._upper, num)

        if len(self._lower) > len(self._upper) + 1:
            heapq.heappush(self._upper, -heapq.heappop(self._lower))
        elif len(self._upper) > len(self._lower):
            heapq.heappush(self._lower, -heapq.heappop(self._upper))

    def find_median(self) -> float:
        """Return the median of every number added so far."""
        if not self._lower:
            raise ValueError("no numbers have been added")
        if len(self._lower) > len(self._upper):
            return float(-self._lower[0])
        return (-self._lower[0] + self._upper[0]) / 2.0

    def __len__(self) -> int:
        return len(self._lower) + len(self._upper)


def kth_smallest(matrix: Sequence[Sequence[int]], k: int) -> int:
    """Return the ``k``-th smallest value of a square matrix whose rows and
    columns are sorted, counting from 1."""
    n = len(matrix)
    if not 1 <= k <= n * n:
        raise ValueError(f"k must be between 1 and {n * n}, got {k}")
    heap = [(row[0], i, 0) for i, row in enumerate(matrix)]
    heapq.heapify(heap)
    for _ in range(k - 1):
        _, row, col = heapq.heappop(heap)
        if col + 1 < n:
            heapq.heappush(heap, (matrix[row][col + 1], row, col + 1))
    return heap[0][0]


def frequency_sort(s: str) -> str:
    """Rearrange ``s`` so the most frequent characters come first.

    Characters equally frequent come in descending character order.
    """
    ranked = sorted(Counter(s).items(), key=lambda item: (item[1], item[0]), reverse=True)
    return "".join(ch * count for ch, count in ranked)


def top_k_frequent(nums: Iterable[int], k: int) -> list[int]:
    """Return the ``k`` most frequent values, most frequent first."""
    if k <= 0:
        return []
    return [value for value, _ in Counter(nums).most_common(k)]