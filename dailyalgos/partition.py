"""Splitting and covering strings: dictionary cover, palindromes, unique pieces."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable
from functools import lru_cache
from itertools import chain, groupby

_LETTERS = "abc"


def min_extra_char(s: str, dictionary: Iterable[str]) -> int:
    """Return the fewest characters left over when ``s`` is cut into dictionary words."""
    words = set(dictionary)
    n = len(s)
    best = [0] * (n + 1)
    for start in range(n - 1, -1, -1):
        covered = (best[end] for end in range(start + 1, n + 1) if s[start:end] in words)
        best[start] = min(chain([best[start + 1] + 1], covered))
    return best[0]


def shortest_palindrome(s: str) -> str:
    """Return the shortest palindrome made by adding characters in front of ``s``."""
    if not s:
        return s
    combined: list[str | None] = [*s, None, *reversed(s)]
    border = [0] * len(combined)
    for index in range(1, len(combined)):
        length = border[index - 1]
        while length and combined[index] != combined[length]:
            length = border[length - 1]
        if combined[index] == combined[length]:
            length += 1
        border[index] = length
    prefix = border[-1]
    return s[prefix:][::-1] + s


def max_unique_split(s: str) -> int:
    """Return the most pieces ``s`` can be cut into with no piece repeated."""
    used: set[str] = set()

    def search(start: int) -> int:
        if start == len(s):
            return len(used)
        best = 0
        for end in range(start + 1, len(s) + 1):
            piece = s[start:end]
            if piece not in used:
                used.add(piece)
                best = max(best, search(end))
                used.remove(piece)
        return best

    return search(0)


def take_characters(s: str, k: int) -> int:
    """Return the fewest characters taken from both ends to get ``k`` of each of a, b, c.

    Returns -1 when the string does not hold ``k`` of each.
    """
    if any(char not in _LETTERS for char in s):
        raise ValueError(f"only the letters a, b and c are allowed: {s!r}")
    total = Counter(s)
    if any(total[char] < k for char in _LETTERS):
        return -1
    window: Counter[str] = Counter()
    left = 0
    widest = 0
    for right, char in enumerate(s):
        window[char] += 1
        while any(total[c] - window[c] < k for c in _LETTERS):
            window[s[left]] -= 1
            left += 1
        widest = max(widest, right - left + 1)
    return len(s) - widest


def strange_printer(s: str) -> int:
    """Return the fewest turns of a printer that paints one-letter runs over ranges."""
    text = "".join(char for char, _ in groupby(s))

    @lru_cache(maxsize=None)
    def turns(start: int, end: int) -> int:
        if start > end:
            return 0
        best = 1 + turns(start + 1, end)
        for middle in range(start + 1, end + 1):
            if text[middle] == text[start]:
                best = min(best, turns(start, middle - 1) + turns(middle + 1, end))
        return best

    return turns(0, len(text) - 1)