"""Backtracking problems: partitions, permutations, subsets and maze paths."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

_MOVES = (("D", 1, 0), ("R", 0, 1), ("U", -1, 0), ("L", 0, -1))


def palindrome_partitions(s: str) -> list[list[str]]:
    """Return every way to cut ``s`` into palindromic pieces."""
    result: list[list[str]] = []
    pieces: list[str] = []

    def extend(start: int) -> None:
        if start == len(s):
            result.append(pieces.copy())
            return
        for end in range(start + 1, len(s) + 1):
            piece = s[start:end]
            if piece == piece[::-1]:
                pieces.append(piece)
                extend(end)
                pieces.pop()

    extend(0)
    return result


def permutations(nums: Iterable[int]) -> list[list[int]]:
    """Return every ordering of ``nums``, generated by swapping in place."""
    items = list(nums)
    result: list[list[int]] = []

    def place(idx: int) -> None:
        if idx == len(items):
            result.append(items.copy())
            return
        for i in range(idx, len(items)):
            items[i], items[idx] = items[idx], items[i]
            place(idx + 1)
            items[i], items[idx] = items[idx], items[i]

    place(0)
    return result


def rat_maze_paths(maze: Sequence[Sequence[int]]) -> list[str]:
    """Return every path from the top-left to the bottom-right cell of a
    square maze, written as moves D, R, U and L.

    Cells holding 0 are walls; no cell is visited twice on one path.
    """
    n = len(maze)
    if n == 0 or any(len(row) != n for row in maze):
        raise ValueError("rat_maze_paths() needs a non-empty square maze")
    result: list[str] = []
    if maze[0][0] == 0:
        return result
    visited: set[tuple[int, int]] = set()
    moves: list[str] = []

    def walk(i: int, j: int) -> None:
        if not (0 <= i < n and 0 <= j < n) or maze[i][j] == 0 or (i, j) in visited:
            return
        if i == n - 1 and j == n - 1:
            result.append("".join(moves))
            return
        visited.add((i, j))
        for letter, di, dj in _MOVES:
            moves.append(letter)
            walk(i + di, j + dj)
            moves.pop()
        visited.discard((i, j))

    walk(0, 0)
    return result


def subsets(nums: Sequence[int]) -> list[list[int]]:
    """Return every subset of ``nums``, those taking each item listed first."""
    result: list[list[int]] = []
    chosen: list[int] = []

    def decide(idx: int) -> None:
        if idx >= len(nums):
            result.append(chosen.copy())
            return
        chosen.append(nums[idx])
        decide(idx + 1)
        chosen.pop()
        decide(idx + 1)

    decide(0)
    return result


def subsets_with_dup(nums: Iterable[int]) -> list[list[int]]:
    """Return every distinct subset of ``nums``, each in sorted order."""
    items = sorted(nums)
    result: list[list[int]] = []
    chosen: list[int] = []

    def extend(idx: int) -> None:
        result.append(chosen.copy())
        for i in range(idx, len(items)):
            if i > idx and items[i] == items[i - 1]:
                continue
            chosen.append(items[i])
            extend(i + 1)
            chosen.pop()

    extend(0)
    return result


def word_break_sentences(s: str, word_dict: Iterable[str]) -> list[str]:
    """Return every way to write ``s`` as dictionary words joined by spaces."""
    words = set(word_dict)
    result: list[str] = []
    chosen: list[str] = []

    def extend(start: int) -> None:
        if start >= len(s):
            result.append(" ".join(chosen))
            return
        for end in range(start + 1, len(s) + 1):
            word = s[start:end]
            if word in words:
                chosen.append(word)
                extend(end)
                chosen.pop()

    extend(0)
    return result