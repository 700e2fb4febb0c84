"""Graph and grid algorithms: reachability, islands, shortest paths and connectivity."""

from __future__ import annotations

import heapq
from collections import deque
from collections.abc import Sequence

# Weight given to node pairs with no edge, and to edges that must not matter.
_INF = 10**9
# Starting distance of every node before it is reached.
_UNREACHED = 2**31 - 1


def get_ancestors(n: int, edges: Sequence[Sequence[int]]) -> list[list[int]]:
    """Return, for each node of a DAG, the sorted list of nodes that can reach it."""
    children: list[list[int]] = [[] for _ in range(n)]
    for parent, child in edges:
        children[parent].append(child)

    ancestors: list[list[int]] = [[] for _ in range(n)]
    for origin in range(n):
        seen = {origin}
        stack = [origin]
        while stack:
            node = stack.pop()
            for child in children[node]:
                if child not in seen:
                    seen.add(child)
                    ancestors[child].append(origin)
                    stack.append(child)
    # Origins are visited in ascending order, so every list is already sorted.
    return ancestors


def _island_within(
    grid1: Sequence[Sequence[int]],
    grid2: Sequence[Sequence[int]],
    start: tuple[int, int],
    seen: set[tuple[int, int]],
) -> bool:
    rows, cols = len(grid2), len(grid2[0])
    inside = True
    queue = deque([start])
    while queue:
        row, col = queue.popleft()
        if not grid1[row][col]:
            inside = False
        for dr, dc in ((0, 1), (1, 0), (0, -1), (-1, 0)):
            nr, nc = row + dr, col + dc
            if 0 <= nr < rows and 0 <= nc < cols and grid2[nr][nc] and (nr, nc) not in seen:
                seen.add((nr, nc))
                queue.append((nr, nc))
    return inside


def count_sub_islands(
    grid1: Sequence[Sequence[int]], grid2: Sequence[Sequence[int]]
) -> int:
    """Count the islands of ``grid2`` whose every land cell is also land in ``grid1``."""
    seen: set[tuple[int, int]] = set()
    count = 0
    for row, cells in enumerate(grid2):
        for col, cell in enumerate(cells):
            if cell and (row, col) not in seen:
                seen.add((row, col))
                if _island_within(grid1, grid2, (row, col), seen):
                    count += 1
    return count


def _shortest_distance(
    n: int, edges: Sequence[Sequence[int]], source: int, destination: int
) -> int:
    weights = [[_INF] * n for _ in range(n)]
    for u, v, weight in edges:
        if weight < 0:
            continue
        weights[u][v] = weight
        weights[v][u] = weight

    distance = [_UNREACHED] * n
    distance[source] = 0
    unvisited = set(range(n))
    while unvisited:
        nearest = min((node for node in range(n) if node in unvisited), key=distance.__getitem__)
        unvisited.remove(nearest)
        base = distance[nearest]
        distance = [min(d, base + w) for d, w in zip(distance, weights[nearest])]
    return distance[destination]


def modified_graph_edges(
    n: int,
    edges: Sequence[Sequence[int]],
    source: int,
    destination: int,
    target: int,
) -> list[list[int]]:
    """Give every edge of weight -1 a positive weight so the shortest path equals ``target``.

    Returns the edges with their new weights, or an empty list when it cannot be done.
    The input is left untouched.
    """
    result = [list(edge) for edge in edges]
    distance = _shortest_distance(n, result, source, destination)
    if distance < target:
        return []

    matched = distance == target
    for edge in result:
        if edge[2] > 0:
            continue
        if matched:
            edge[2] = _INF
            continue
        edge[2] = 1
        new_distance = _shortest_distance(n, result, source, destination)
        if new_distance <= target:
            matched = True
            edge[2] += target - new_distance
    return result if matched else []


def max_probability(
    n: int,
    edges: Sequence[Sequence[int]],
    succ_prob: Sequence[float],
    start_node: int,
    end_node: int,
) -> float:
    """Return the highest product of edge probabilities along a path from start to end."""
    graph: list[list[tuple[int, float]]] = [[] for _ in range(n)]
    for (u, v), prob in zip(edges, succ_prob, strict=True):
        graph[u].append((v, prob))
        graph[v].append((u, prob))

    best = [0.0] * n
    best[start_node] = 1.0
    heap = [(-1.0, start_node)]
    while heap:
        negative, node = heapq.heappop(heap)
        prob = -negative
        if prob < best[node]:
            continue
        for neighbour, edge_prob in graph[node]:
            candidate = prob * edge_prob
            if candidate > best[neighbour]:
                best[neighbour] = candidate
                heapq.heappush(heap, (-candidate, neighbour))
    return best[end_node]


class UnionFind:
    """Disjoint sets over the nodes 1..n (index 0 exists but is not counted)."""

    def __init__(self, n: int) -> None:
        self.parent = list(range(n + 1))
        self.size = [1] * (n + 1)
        self.components = n

    def find(self, x: int) -> int:
        """Return the representative of the set holding ``x``."""
        root = x
        while self.parent[root] != root:
            root = self.parent[root]
        while self.parent[x] != root:
            self.parent[x], x = root, self.parent[x]
        return root

    def unite(self, x: int, y: int) -> bool:
        """Merge the sets of ``x`` and ``y``; return False if they were already one."""
        root_x, root_y = self.find(x), self.find(y)
        if root_x == root_y:
            return False
        if self.size[root_x] < self.size[root_y]:
            root_x, root_y = root_y, root_x
        self.parent[root_y] = root_x
        self.size[root_x] += self.size[root_y]
        self.components -= 1
        return True

    def is_connected(self) -> bool:
        """Tell whether all counted nodes are in a single set."""
        return self.components == 1


def max_num_edges_to_remove(n: int, edges: Sequence[Sequence[int]]) -> int:
    """Return how many edges can go while both travellers still reach every node.

    Edge type 1 serves Alice, type 2 Bob, type 3 both. Returns -1 when the full
    graph already fails to connect one of them.
    """
    alice, bob = UnionFind(n), UnionFind(n)
    required = 0
    for kind, u, v in edges:
        if kind == 3:
            joined_alice = alice.unite(u, v)
            joined_bob = bob.unite(u, v)
            if joined_alice or joined_bob:
                required += 1

    for kind, u, v in edges:
        if kind == 1 and alice.unite(u, v):
            required += 1
        elif kind == 2 and bob.unite(u, v):
            required += 1

    if alice.is_connected() and bob.is_connected():
        return len(edges) - required
    return -1