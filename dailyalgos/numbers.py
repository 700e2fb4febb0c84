"""Integer puzzles: lexicographic ordering, bit tricks, palindromes, robot walks."""

from __future__ import annotations

from collections.abc import Sequence
from functools import cmp_to_key

_HEADINGS = ((0, 1), (1, 0), (0, -1), (-1, 0))


def _count_steps(n: int, first: int, last: int) -> int:
    steps = 0
    while first <= n:
        steps += min(n + 1, last) - first
        first *= 10
        last *= 10
    return steps


def find_kth_number(n: int, k: int) -> int:
    """Return the k-th smallest of 1..n in lexicographic order."""
    if not 1 <= k <= n:
        raise ValueError("k must lie between 1 and n")
    current = 1
    k -= 1
    while k > 0:
        steps = _count_steps(n, current, current + 1)
        if steps <= k:
            current += 1
            k -= steps
        else:
            current *= 10
            k -= 1
    return current


def lexical_order(n: int) -> list[int]:
    """Return 1..n sorted as strings."""
    result: list[int] = []
    current = 1
    for _ in range(n):
        result.append(current)
        if current * 10 <= n:
            current *= 10
        else:
            while current % 10 == 9 or current >= n:
                current //= 10
            current += 1
    return result


def min_end(n: int, x: int) -> int:
    """Return the smallest last element of n strictly increasing numbers whose AND is x."""
    if n < 1:
        raise ValueError("n must be at least 1")
    result = x
    for _ in range(n - 1):
        result = (result + 1) | x
    return result


def min_bit_flips(start: int, goal: int) -> int:
    """Return how many bits of a 32-bit word must flip to turn start into goal."""
    return ((start ^ goal) & 0xFFFFFFFF).bit_count()


def find_complement(num: int) -> int:
    """Flip every bit of ``num`` below its highest set bit."""
    mask = (1 << num.bit_length()) - 1
    return ~num & mask


def _mirror(left: int, even: bool) -> int:
    digits = str(left)
    return int(digits + (digits if even else digits[:-1])[::-1])


def nearest_palindromic(n: str) -> str:
    """Return the palindrome closest to ``n`` other than itself, the smaller on a tie."""
    if not (n.isascii() and n.isdigit()) or n[0] == "0":
        raise ValueError(f"not a positive integer: {n!r}")
    length = len(n)
    even = length % 2 == 0
    first_half = int(n[: (length + 1) // 2])
    value = int(n)
    candidates = {
        _mirror(first_half, even),
        _mirror(first_half + 1, even),
        _mirror(first_half - 1, even),
        10 ** (length - 1) - 1,
        10**length + 1,
    }
    candidates.discard(value)
    best = min(candidates, key=lambda candidate: (abs(candidate - value), candidate))
    return str(best)


def robot_sim(commands: Sequence[int], obstacles: Sequence[Sequence[int]]) -> int:
    """Walk a robot from the origin facing north; return its largest squared distance.

    Command -1 turns right, -2 turns left, a positive number moves that many steps,
    stopping in front of an obstacle.
    """
    blocked = {tuple(obstacle) for obstacle in obstacles}
    x = y = 0
    heading = 0
    best = 0
    for command in commands:
        if command == -1:
            heading = (heading + 1) % 4
        elif command == -2:
            heading = (heading + 3) % 4
        else:
            dx, dy = _HEADINGS[heading]
            for _ in range(command):
                if (x + dx, y + dy) in blocked:
                    break
                x += dx
                y += dy
            best = max(best, x * x + y * y)
    return best


def _concat_order(a: str, b: str) -> int:
    if a + b > b + a:
        return -1
    if a + b < b + a:
        return 1
    return 0


def largest_number(nums: Sequence[int]) -> str:
    """Arrange the numbers so their concatenation is as large as possible."""
    if not nums:
        raise ValueError("nums must not be empty")
    parts = sorted((str(num) for num in nums), key=cmp_to_key(_concat_order))
    if parts[0] == "0":
        return "0"
    return "".join(parts)