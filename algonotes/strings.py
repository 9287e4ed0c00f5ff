"""String puzzles: matching, parsing, run-length sequences and anagrams."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable
from itertools import groupby

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1

_ROMAN_VALUES = {
    "I": 1,
    "V": 5,
    "X": 10,
    "L": 50,
    "C": 100,
    "D": 500,
    "M": 1000,
}

_DIGITS = frozenset("0123456789")


def repeated_string_match(a: str, b: str) -> int:
    """Return how many copies of ``a`` must be joined for ``b`` to appear in them.

    Returns -1 when no number of copies contains ``b``.
    """
    if not a:
        raise ValueError("repeated_string_match() needs a non-empty string to repeat")
    count = -(-len(b) // len(a))
    repeated = a * count
    if b in repeated:
        return count
    if b in repeated + a:
        return count + 1
    return -1


def string_to_int(s: str) -> int:
    """Parse a leading signed decimal integer, clamped to the 32-bit range.

    Leading spaces are skipped; parsing stops at the first non-digit.
    Returns 0 when no digits follow.
    """
    text = s.lstrip(" ")
    sign = 1
    if text[:1] in ("-", "+"):
        if text[0] == "-":
            sign = -1
        text = text[1:]

    digits = []
    for ch in text:
        if ch not in _DIGITS:
            break
        digits.append(ch)
    if not digits:
        return 0

    value = sign * int("".join(digits))
    return max(INT32_MIN, min(INT32_MAX, value))


def count_and_say(n: int) -> str:
    """Return the ``n``-th term of the count-and-say sequence, counting from 1."""
    if n < 1:
        raise ValueError("count_and_say() needs n >= 1")
    term = "1"
    for _ in range(n - 1):
        term = "".join(f"{len(list(run))}{digit}" for digit, run in groupby(term))
    return term


def find_index(haystack: str, needle: str) -> int:
    """Return the index of the first occurrence of ``needle``, or -1."""
    return haystack.find(needle)


def group_anagrams(strs: Iterable[str]) -> list[list[str]]:
    """Group strings made of the same letters, in order of first appearance."""
    groups: dict[frozenset[tuple[str, int]], list[str]] = {}
    for s in strs:
        groups.setdefault(frozenset(Counter(s).items()), []).append(s)
    return list(groups.values())


def reverse_words(s: str) -> str:
    """Reverse the order of space-separated words, collapsing extra spaces."""
    words = [word for word in s.split(" ") if word]
    return " ".join(reversed(words))


def roman_to_int(s: str) -> int:
    """Convert a Roman numeral to an integer."""
    try:
        values = [_ROMAN_VALUES[ch] for ch in s]
    except KeyError as exc:
        raise ValueError(f"not a Roman numeral digit: {exc.args[0]!r}") from None
    total = 0
    for current, following in zip(values, values[1:] + [0]):
        total += -current if current < following else current
    return total


def is_anagram(s: str, t: str) -> bool:
    """Tell whether ``t`` is a rearrangement of ``s``."""
    return len(s) == len(t) and Counter(s) == Counter(t)


def max_non_overlapping_substrings(s: str) -> list[str]:
    """Return the most non-overlapping substrings that each hold every
    occurrence of the characters they contain.

    Among equally many, the substrings chosen are those ending earliest.
    """
    first: dict[str, int] = {}
    last: dict[str, int] = {}
    for i, ch in enumerate(s):
        first.setdefault(ch, i)
        last[ch] = i

    intervals: list[tuple[int, int]] = []
    for start, ch in enumerate(s):
        if first[ch] != start:
            continue
        end = last[ch]
        j = start
        valid = True
        while j <= end:
            c = s[j]
            if first[c] < start:
                valid = False
                break
            end = max(end, last[c])
            j += 1
        if valid:
            intervals.append((start, end))

    intervals.sort(key=lambda span: span[1])

    result = []
    prev_end = -1
    for start, end in intervals:
        if start > prev_end:
            result.append(s[start : end + 1])
            prev_end = end
    return result