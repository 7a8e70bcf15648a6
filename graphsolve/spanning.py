"""Minimum spanning trees and incremental connectivity."""

from __future__ import annotations

import heapq
from collections.abc import Iterable

from graphsolve.errors import ImpossibleError


class DisjointSet:
    """Union-find over nodes ``1..n`` with union by size and path compression.

    ``components`` counts the current sets and ``largest`` is the size of
    the biggest set seen so far.
    """

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("number of nodes must not be negative")
        self._n = n
        self._parent = list(range(n + 1))
        self._size = [1] * (n + 1)
        self.components = n
        self.largest = min(n, 1)

    def find(self, node: int) -> int:
        """Return the representative of the set holding ``node``."""
        if not 1 <= node <= self._n:
            raise ValueError(f"node {node} out of range 1..{self._n}")
        root = node
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[node] != root:
            self._parent[node], node = root, self._parent[node]
        return root

    def union(self, u: int, v: int) -> bool:
        """Merge the sets of ``u`` and ``v``; return False if already joined."""
        root_u, root_v = self.find(u), self.find(v)
        if root_u == root_v:
            return False
        self.components -= 1
        if self._size[root_u] > self._size[root_v]:
            root_u, root_v = root_v, root_u
        self._parent[root_u] = root_v
        self._size[root_v] += self._size[root_u]
        self.largest = max(self.largest, self._size[root_v])
        return True


def minimum_spanning_cost(n: int, edges: Iterable[tuple[int, int, int]]) -> int:
    """Total weight of a minimum spanning tree over nodes ``1..n``.

    Raises ImpossibleError when the graph is not connected.
    """
    if n < 1:
        raise ValueError("graph needs at least one node")
    adjacency: list[list[tuple[int, int]]] = [[] for _ in range(n + 1)]
    for u, v, w in edges:
        adjacency[u].append((v, w))
        adjacency[v].append((u, w))

    visited = [False] * (n + 1)
    heap = [(0, 1)]
    total = 0
    while heap:
        weight, node = heapq.heappop(heap)
        if visited[node]:
            continue
        visited[node] = True
        total += weight
        for neighbour, w in adjacency[node]:
            if not visited[neighbour]:
                heapq.heappush(heap, (w, neighbour))

    if not all(visited[1:]):
        raise ImpossibleError()
    return total


def road_construction(
    n: int, roads: Iterable[tuple[int, int]]
) -> list[tuple[int, int]]:
    """After each road, report (number of components, largest component size)."""
    components = DisjointSet(n)
    report = []
    for u, v in roads:
        components.union(u, v)
        report.append((components.components, components.largest))
    return report