"""Searching and simulation puzzles: ball spacing, price queries, robots, subsets, clocks."""

from __future__ import annotations

from bisect import bisect_right
from collections import Counter
from collections.abc import Iterable, Sequence
from itertools import accumulate

_MINUTES_PER_DAY = 24 * 60


def _fits(ordered: Sequence[int], gap: int, m: int) -> bool:
    placed = 1
    last = ordered[0]
    for position in ordered:
        if placed >= m:
            break
        if position - last >= gap:
            last = position
            placed += 1
    return placed >= m


def max_distance(position: Iterable[int], m: int) -> int:
    """Return the largest minimum gap achievable when placing ``m`` balls at positions.

    Returns 0 when there are fewer positions than balls.
    """
    if m < 2:
        raise ValueError("m must be at least 2")
    ordered = sorted(position)
    if len(ordered) < m:
        return 0
    low, high = 1, (ordered[-1] - ordered[0]) // (m - 1)
    best = 0
    while low <= high:
        middle = (low + high) // 2
        if _fits(ordered, middle, m):
            best = middle
            low = middle + 1
        else:
            high = middle - 1
    return best


def maximum_beauty(
    items: Iterable[Sequence[int]], queries: Iterable[int]
) -> list[int]:
    """For each price, return the best beauty of an item costing at most that; 0 if none."""
    ordered = sorted((price, beauty) for price, beauty in items)
    prices = [price for price, _ in ordered]
    best = list(accumulate((beauty for _, beauty in ordered), max))
    answers: list[int] = []
    for query in queries:
        count = bisect_right(prices, query)
        answers.append(best[count - 1] if count else 0)
    return answers


def survived_robots_healths(
    positions: Sequence[int], healths: Sequence[int], directions: str
) -> list[int]:
    """Run robots along a line and return survivors' healths in input order.

    In a collision the weaker robot is removed and the stronger loses one health;
    equal robots are both removed.
    """
    if len(positions) != len(healths) or len(positions) != len(directions):
        raise ValueError("positions, healths and directions must have the same length")
    if any(direction not in "LR" for direction in directions):
        raise ValueError(f"directions may hold only L and R: {directions!r}")
    health = list(healths)
    moving_right: list[int] = []
    for robot in sorted(range(len(positions)), key=positions.__getitem__):
        if directions[robot] == "R":
            moving_right.append(robot)
            continue
        while moving_right and health[robot] > 0:
            other = moving_right[-1]
            if health[other] < health[robot]:
                health[other] = 0
                moving_right.pop()
                health[robot] -= 1
            elif health[other] > health[robot]:
                health[other] -= 1
                health[robot] = 0
            else:
                health[other] = 0
                health[robot] = 0
                moving_right.pop()
    return [value for value in health if value > 0]


def beautiful_subsets(nums: Sequence[int], k: int) -> int:
    """Count the non-empty subsets (by position) holding no two values that differ by ``k``."""
    chosen: Counter[int] = Counter()

    def search(start: int) -> int:
        total = 0
        for index, value in enumerate(nums[start:], start=start):
            if chosen[value - k] or chosen[value + k]:
                continue
            chosen[value] += 1
            total += 1 + search(index + 1)
            chosen[value] -= 1
        return total

    return search(0)


def _minutes(time_point: str) -> int:
    hours, _, minutes = time_point.partition(":")
    if not (hours.isdigit() and minutes.isdigit()):
        raise ValueError(f"not a HH:MM time: {time_point!r}")
    return int(hours) * 60 + int(minutes)


def find_min_difference(time_points: Iterable[str]) -> int:
    """Return the smallest gap in minutes between any two "HH:MM" times on a 24-hour clock."""
    minutes = sorted(_minutes(point) for point in time_points)
    if not minutes:
        raise ValueError("time_points must not be empty")
    wrap = _MINUTES_PER_DAY - minutes[-1] + minutes[0]
    return min((b - a for a, b in zip(minutes, minutes[1:])), default=wrap) if len(
        minutes
    ) > 1 and min(b - a for a, b in zip(minutes, minutes[1:])) < wrap else wrap