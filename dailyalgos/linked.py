"""Singly linked lists and binary trees, with algorithms that work on them."""

from __future__ import annotations

import heapq
import math
from collections import deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Optional


@dataclass(eq=False, repr=False)
class ListNode:
    """A node of a singly linked list."""

    val: int = 0
    next: Optional["ListNode"] = None

    def __iter__(self) -> Iterator[int]:
        node: Optional[ListNode] = self
        while node is not None:
            yield node.val
            node = node.next

    def __repr__(self) -> str:
        return f"ListNode({list(self)!r})"


@dataclass(eq=False, repr=False)
class TreeNode:
    """A node of a binary tree."""

    val: int = 0
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None

    def __repr__(self) -> str:
        return f"TreeNode({self.val!r})"


def _nodes(head: Optional[ListNode]) -> Iterator[ListNode]:
    while head is not None:
        yield head
        head = head.next


def build_list(values: Iterable[int]) -> Optional[ListNode]:
    """Build a linked list holding ``values`` in order; None when empty."""
    dummy = ListNode()
    tail = dummy
    for value in values:
        tail.next = ListNode(value)
        tail = tail.next
    return dummy.next


def list_values(head: Optional[ListNode]) -> list[int]:
    """Return the values of a linked list as a Python list."""
    return [node.val for node in _nodes(head)]


def build_tree(values: Iterable[Optional[int]]) -> Optional[TreeNode]:
    """Build a binary tree from level-order values, None marking a missing child."""
    items = iter(values)
    first = next(items, None)
    if first is None:
        return None
    root = TreeNode(first)
    pending = deque([root])
    while pending:
        node = pending.popleft()
        for side in ("left", "right"):
            try:
                value = next(items)
            except StopIteration:
                return root
            if value is not None:
                child = TreeNode(value)
                setattr(node, side, child)
                pending.append(child)
    return root


def modified_list(nums: Iterable[int], head: Optional[ListNode]) -> Optional[ListNode]:
    """Unlink every node whose value occurs in ``nums``; return the new head."""
    removed = set(nums)
    dummy = ListNode(0, head)
    prev = dummy
    while prev.next is not None:
        if prev.next.val in removed:
            prev.next = prev.next.next
        else:
            prev = prev.next
    return dummy.next


def insert_greatest_common_divisors(head: Optional[ListNode]) -> Optional[ListNode]:
    """Insert the gcd of each adjacent pair between them, in place."""
    node = head
    while node is not None and node.next is not None:
        following = node.next
        node.next = ListNode(math.gcd(node.val, following.val), following)
        node = following
    return head


def kth_largest_level_sum(root: Optional[TreeNode], k: int) -> int:
    """Return the k-th largest per-level sum of the tree, or -1 if it has fewer levels."""
    if k < 1:
        raise ValueError("k must be at least 1")
    level_sums: list[int] = []
    level = [root] if root is not None else []
    while level:
        level_sums.append(sum(node.val for node in level))
        level = [child for node in level for child in (node.left, node.right) if child is not None]
    if len(level_sums) < k:
        return -1
    return heapq.nlargest(k, level_sums)[-1]


def _matches_downward(head: Optional[ListNode], node: Optional[TreeNode]) -> bool:
    if head is None:
        return True
    if node is None or node.val != head.val:
        return False
    return _matches_downward(head.next, node.left) or _matches_downward(head.next, node.right)


def is_sub_path(head: Optional[ListNode], root: Optional[TreeNode]) -> bool:
    """Tell whether the list's values appear along some downward path of the tree."""
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        if _matches_downward(head, node):
            return True
        stack.extend(child for child in (node.right, node.left) if child is not None)
    return False


def _spiral_cells(m: int, n: int) -> Iterator[tuple[int, int]]:
    top, bottom, left, right = 0, m - 1, 0, n - 1
    while top <= bottom and left <= right:
        for col in range(left, right + 1):
            yield top, col
        for row in range(top + 1, bottom + 1):
            yield row, right
        if top < bottom:
            for col in range(right - 1, left - 1, -1):
                yield bottom, col
        if left < right:
            for row in range(bottom - 1, top, -1):
                yield row, left
        top, bottom, left, right = top + 1, bottom - 1, left + 1, right - 1


def spiral_matrix(m: int, n: int, head: Optional[ListNode]) -> list[list[int]]:
    """Lay the list's values clockwise into an m x n matrix; unfilled cells are -1."""
    matrix = [[-1] * n for _ in range(m)]
    for (row, col), node in zip(_spiral_cells(m, n), _nodes(head)):
        matrix[row][col] = node.val
    return matrix


def split_list_to_parts(head: Optional[ListNode], k: int) -> list[Optional[ListNode]]:
    """Cut the list into k consecutive parts whose sizes differ by at most one.

    Earlier parts are the larger ones; parts that get no nodes are None.
    """
    if k < 1:
        raise ValueError("k must be at least 1")
    length = sum(1 for _ in _nodes(head))
    size, extra = divmod(length, k)
    parts: list[Optional[ListNode]] = []
    node = head
    for index in range(k):
        part_length = size + (1 if index < extra else 0)
        if part_length == 0:
            parts.append(None)
            continue
        parts.append(node)
        for _ in range(part_length - 1):
            node = node.next
        rest = node.next
        node.next = None
        node = rest
    return parts