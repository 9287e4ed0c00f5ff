"""Dynamic-programming problems: counting, optimisation and string alignment."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Iterable, Sequence


def coin_change_ways(amount: int, coins: Sequence[int]) -> int:
    """Count the combinations of ``coins`` (each usable any number of times)
    that add up to ``amount``.

    Order does not matter: 1+2 and 2+1 count once. A negative amount has
    no combinations; an amount of zero has exactly one, the empty one.
    """
    if any(coin <= 0 for coin in coins):
        raise ValueError("coin values must be positive")
    if amount < 0:
        return 0
    ways = [1] + [0] * amount
    for coin in coins:
        for total in range(coin, amount + 1):
            ways[total] += ways[total - coin]
    return ways[amount]


def edit_distance(s1: str, s2: str) -> int:
    """Return the fewest insertions, deletions and replacements turning
    ``s1`` into ``s2``."""
    previous = list(range(len(s2) + 1))
    for i, a in enumerate(s1, start=1):
        current = [i]
        for j, b in enumerate(s2, start=1):
            if a == b:
                current.append(previous[j - 1])
            else:
                current.append(1 + min(current[j - 1], previous[j], previous[j - 1]))
        previous = current
    return previous[-1]


def house_robber(nums: Sequence[int]) -> int:
    """Return the largest sum of values with no two adjacent ones taken."""
    from_next, from_after_next = 0, 0
    for value in reversed(nums):
        from_next, from_after_next = (
            max(value + from_after_next, from_next),
            from_next,
        )
    return from_next


def job_scheduling(
    start_time: Sequence[int], end_time: Sequence[int], profit: Sequence[int]
) -> int:
    """Return the largest total profit of jobs whose time spans do not overlap.

    A job may start at the moment another one ends.
    """
    if not len(start_time) == len(end_time) == len(profit):
        raise ValueError("start_time, end_time and profit must have the same length")
    jobs = sorted(zip(start_time, end_time, profit), key=lambda job: job[0])
    starts = [start for start, _, _ in jobs]
    n = len(jobs)
    best = [0] * (n + 1)
    for i in range(n - 1, -1, -1):
        _, end, gain = jobs[i]
        following = bisect_left(starts, end, lo=i + 1)
        best[i] = max(gain + best[following], best[i + 1])
    return best[0]


def knapsack(capacity: int, values: Sequence[int], weights: Sequence[int]) -> int:
    """Return the largest total value of items, each taken at most once,
    whose weights fit in ``capacity``."""
    if len(values) != len(weights):
        raise ValueError("values and weights must have the same length")
    if capacity < 0:
        raise ValueError("capacity must not be negative")
    following = [0] * (capacity + 1)
    for value, weight in zip(reversed(values), reversed(weights)):
        current = [0] * (capacity + 1)
        for room in range(1, capacity + 1):
            skip = following[room]
            take = value + following[room - weight] if 0 <= weight <= room else 0
            current[room] = max(take, skip)
        following = current
    return following[capacity]


def longest_common_subsequence(text1: str, text2: str) -> int:
    """Return the length of the longest subsequence shared by both strings."""
    previous = [0] * (len(text2) + 1)
    for a in text1:
        current = [0]
        for j, b in enumerate(text2, start=1):
            if a == b:
                current.append(previous[j - 1] + 1)
            else:
                current.append(max(current[j - 1], previous[j]))
        previous = current
    return previous[-1]


def longest_increasing_subsequence(nums: Iterable[int]) -> int:
    """Return the length of the longest strictly increasing subsequence."""
    tails: list[int] = []
    for num in nums:
        pos = bisect_left(tails, num)
        if pos == len(tails):
            tails.append(num)
        else:
            tails[pos] = num
    return len(tails)


def min_cost_climbing_stairs(cost: Sequence[int]) -> int:
    """Return the cheapest way past the top of the stairs.

    Each step taken costs its value; one may climb one or two steps at a
    time and start on either of the first two.
    """
    from_here, from_next = 0, 0
    for step in reversed(cost):
        from_here, from_next = step + min(from_here, from_next), from_here
    return min(from_here, from_next)


def min_path_sum(grid: Sequence[Sequence[int]]) -> int:
    """Return the smallest sum along a path from the top-left to the
    bottom-right cell, moving only right or down."""
    if not grid or not grid[0]:
        raise ValueError("min_path_sum() needs a non-empty grid")
    best: list[int] = []
    for row in grid:
        if len(row) != len(grid[0]):
            raise ValueError("grid rows must all have the same length")
        if not best:
            running = 0
            for cell in row:
                running += cell
                best.append(running)
            continue
        best[0] += row[0]
        for j in range(1, len(row)):
            best[j] = row[j] + min(best[j], best[j - 1])
    return best[-1]


def word_break(s: str, word_dict: Iterable[str]) -> bool:
    """Tell whether ``s`` splits into a sequence of dictionary words."""
    words = set(word_dict)
    lengths = {len(word) for word in words if word}
    n = len(s)
    breakable = [False] * n + [True]
    for start in range(n - 1, -1, -1):
        breakable[start] = any(
            start + size <= n
            and breakable[start + size]
            and s[start : start + size] in words
            for size in lengths
        )
    return breakable[0]