"""Array puzzles: reshaping, pair counting, sliding windows, prefix xors and ranks."""

from __future__ import annotations

import operator
from bisect import bisect_left
from collections.abc import Iterable, Sequence
from itertools import accumulate, combinations, groupby


def construct_2d_array(original: Sequence[int], m: int, n: int) -> list[list[int]]:
    """Lay ``original`` row by row into an m x n matrix; [] when the sizes disagree."""
    if m * n != len(original):
        return []
    return [list(original[row * n : (row + 1) * n]) for row in range(m)]


def count_pairs(nums: Sequence[int], target: int) -> int:
    """Count the pairs of positions whose values sum to less than ``target``."""
    return sum(1 for a, b in combinations(nums, 2) if a + b < target)


def count_fair_pairs(nums: Iterable[int], lower: int, upper: int) -> int:
    """Count the pairs of positions whose values sum to between lower and upper inclusive."""
    ordered = sorted(nums)
    total = 0
    for index, value in enumerate(ordered):
        low = bisect_left(ordered, lower - value, lo=index + 1)
        high = bisect_left(ordered, upper - value + 1, lo=index + 1)
        total += high - low
    return total


def _prefixes(number: int) -> Iterable[str]:
    digits = str(number)
    return (digits[:length] for length in range(1, len(digits) + 1))


def longest_common_prefix(arr1: Iterable[int], arr2: Iterable[int]) -> int:
    """Return the length of the longest digit prefix shared by a number of each array."""
    known = {prefix for number in arr1 for prefix in _prefixes(number)}
    return max(
        (len(prefix) for number in arr2 for prefix in _prefixes(number) if prefix in known),
        default=0,
    )


def results_array(nums: Sequence[int], k: int) -> list[int]:
    """Return the power of each window of size ``k``.

    A window's power is its last element when it is a run of consecutive ascending
    integers, and -1 otherwise.
    """
    if not 1 <= k <= len(nums):
        raise ValueError("k must lie between 1 and the length of nums")
    powers: list[int] = []
    run = 0
    previous: int | None = None
    for index, value in enumerate(nums):
        run = run + 1 if previous is not None and value == previous + 1 else 1
        previous = value
        if index >= k - 1:
            powers.append(value if run >= k else -1)
    return powers


def longest_subarray(nums: Sequence[int]) -> int:
    """Return the length of the longest run whose bitwise AND is the largest possible."""
    if not nums:
        raise ValueError("nums must not be empty")
    top = max(nums)
    return max(sum(1 for _ in run) for value, run in groupby(nums) if value == top)


def get_maximum_xor(nums: Sequence[int], maximum_bit: int) -> list[int]:
    """For each prefix, longest first, return the k below 2**maximum_bit maximising its xor."""
    mask = (1 << maximum_bit) - 1
    prefixes = list(accumulate(nums, operator.xor))
    return [~prefix & mask for prefix in reversed(prefixes)]


def array_rank_transform(arr: Sequence[int]) -> list[int]:
    """Replace each value by its rank among the distinct values, starting at 1."""
    ranks = {value: rank for rank, value in enumerate(sorted(set(arr)), start=1)}
    return [ranks[value] for value in arr]


def is_array_special(
    nums: Sequence[int], queries: Iterable[Sequence[int]]
) -> list[bool]:
    """Tell for each [from, to] query whether adjacent values there alternate in parity."""
    breaks = [0]
    breaks.extend(
        accumulate(int(a % 2 == b % 2) for a, b in zip(nums, nums[1:]))
    )
    return [breaks[left] == breaks[right] for left, right in queries]


def xor_queries(arr: Sequence[int], queries: Iterable[Sequence[int]]) -> list[int]:
    """Return the xor of ``arr[left..right]`` for each [left, right] query."""
    prefix = [0, *accumulate(arr, operator.xor)]
    return [prefix[right + 1] ^ prefix[left] for left, right in queries]