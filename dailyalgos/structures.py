"""Small container designs: key counters, bounded deques and stacks, calendars."""

from __future__ import annotations

from collections import deque
from typing import Optional


class _Bucket:
    __slots__ = ("count", "keys", "prev", "next")

    def __init__(self, count: int) -> None:
        self.count = count
        self.keys: set[str] = set()
        self.prev: Optional[_Bucket] = None
        self.next: Optional[_Bucket] = None


class AllOne:
    """Counts keys, giving constant-time access to a key of minimum and maximum count."""

    def __init__(self) -> None:
        self._head = _Bucket(0)
        self._tail = _Bucket(0)
        self._head.next = self._tail
        self._tail.prev = self._head
        self._where: dict[str, _Bucket] = {}

    def _insert_after(self, bucket: _Bucket, count: int) -> _Bucket:
        new = _Bucket(count)
        new.prev = bucket
        new.next = bucket.next
        bucket.next.prev = new
        bucket.next = new
        return new

    @staticmethod
    def _unlink(bucket: _Bucket) -> None:
        bucket.prev.next = bucket.next
        bucket.next.prev = bucket.prev

    def inc(self, key: str) -> None:
        """Add ``key`` with count 1, or raise its count by one."""
        current = self._where.get(key, self._head)
        count = current.count + 1
        target = current.next
        if target is self._tail or target.count != count:
            target = self._insert_after(current, count)
        target.keys.add(key)
        self._where[key] = target
        if current is not self._head:
            current.keys.discard(key)
            if not current.keys:
                self._unlink(current)

    def dec(self, key: str) -> None:
        """Lower the count of ``key`` by one, dropping it at zero; unknown keys are ignored."""
        current = self._where.get(key)
        if current is None:
            return
        current.keys.discard(key)
        if current.count == 1:
            del self._where[key]
        else:
            count = current.count - 1
            target = current.prev
            if target is self._head or target.count != count:
                target = self._insert_after(current.prev, count)
            target.keys.add(key)
            self._where[key] = target
        if not current.keys:
            self._unlink(current)

    def get_max_key(self) -> str:
        """Return a key with the largest count, or "" when empty."""
        if self._tail.prev is self._head:
            return ""
        return next(iter(self._tail.prev.keys))

    def get_min_key(self) -> str:
        """Return a key with the smallest count, or "" when empty."""
        if self._head.next is self._tail:
            return ""
        return next(iter(self._head.next.keys))


class CircularDeque:
    """A double-ended queue holding at most ``k`` items."""

    def __init__(self, k: int) -> None:
        self._capacity = k
        self._items: deque[int] = deque()

    def __len__(self) -> int:
        return len(self._items)

    def insert_front(self, value: int) -> bool:
        if self.is_full():
            return False
        self._items.appendleft(value)
        return True

    def insert_last(self, value: int) -> bool:
        if self.is_full():
            return False
        self._items.append(value)
        return True

    def delete_front(self) -> bool:
        if not self._items:
            return False
        self._items.popleft()
        return True

    def delete_last(self) -> bool:
        if not self._items:
            return False
        self._items.pop()
        return True

    def get_front(self) -> int:
        """Return the front item, or -1 when empty."""
        return self._items[0] if self._items else -1

    def get_rear(self) -> int:
        """Return the rear item, or -1 when empty."""
        return self._items[-1] if self._items else -1

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) == self._capacity


class CustomStack:
    """A bounded stack that can add a value to its bottom ``k`` items."""

    def __init__(self, max_size: int) -> None:
        self._max_size = max_size
        self._items: list[int] = []

    def push(self, x: int) -> None:
        """Push ``x`` unless the stack is full."""
        if len(self._items) < self._max_size:
            self._items.append(x)

    def pop(self) -> int:
        """Pop the top item, or return -1 when empty."""
        return self._items.pop() if self._items else -1

    def increment(self, k: int, val: int) -> None:
        """Add ``val`` to each of the bottom ``k`` items."""
        self._items[:k] = [item + val for item in self._items[:k]]


def _overlaps(a: tuple[int, int], b: tuple[int, int]) -> bool:
    return max(a[0], b[0]) < min(a[1], b[1])


class MyCalendar:
    """Books half-open intervals, refusing any that overlap an existing booking."""

    def __init__(self) -> None:
        self.bookings: list[tuple[int, int]] = []

    def book(self, start: int, end: int) -> bool:
        interval = (start, end)
        if any(_overlaps(existing, interval) for existing in self.bookings):
            return False
        self.bookings.append(interval)
        return True


class MyCalendarTwo:
    """Books half-open intervals, refusing any that would cause a triple booking."""

    def __init__(self) -> None:
        self.bookings: list[tuple[int, int]] = []
        self.overlap_bookings: list[tuple[int, int]] = []

    def book(self, start: int, end: int) -> bool:
        interval = (start, end)
        if any(_overlaps(existing, interval) for existing in self.overlap_bookings):
            return False
        self.overlap_bookings.extend(
            (max(existing[0], start), min(existing[1], end))
            for existing in self.bookings
            if _overlaps(existing, interval)
        )
        self.bookings.append(interval)
        return True