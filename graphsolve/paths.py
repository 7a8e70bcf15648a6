"""Shortest paths: grid escape, single-source and all-pairs distances."""

from __future__ import annotations

import heapq
import math
from collections import deque
from collections.abc import Iterable, Sequence

from graphsolve.errors import ImpossibleError

_STEPS = ((1, 0, "D"), (-1, 0, "U"), (0, 1, "R"), (0, -1, "L"))


def monster_escape(grid: Sequence[str]) -> str:
    """Route for ``A`` to reach the border before any ``M`` can reach its path.

    ``grid`` holds rows of ``.`` (floor), ``#`` (wall), ``A`` (start) and
    ``M`` (monsters).  The result is a string of ``U``/``D``/``L``/``R``
    moves; it is empty when ``A`` already stands on the border.  Raises
    ImpossibleError when no safe route exists.
    """
    if not grid:
        raise ValueError("grid must have at least one row")
    height, width = len(grid), len(grid[0])
    if any(len(row) != width for row in grid):
        raise ValueError("grid rows must all have the same length")

    start: tuple[int, int] | None = None
    monster_time = [[math.inf] * width for _ in range(height)]
    queue: deque[tuple[int, int, int]] = deque()
    for i, row in enumerate(grid):
        for j, cell in enumerate(row):
            if cell == "M":
                monster_time[i][j] = 0
                queue.append((0, i, j))
            elif cell == "A":
                start = (i, j)
    if start is None:
        raise ValueError("grid has no starting cell 'A'")

    def open_floor(i: int, j: int) -> bool:
        return 0 <= i < height and 0 <= j < width and grid[i][j] == "."

    while queue:
        time, i, j = queue.popleft()
        if monster_time[i][j] < time:
            continue
        for di, dj, _ in _STEPS:
            ni, nj = i + di, j + dj
            if open_floor(ni, nj) and monster_time[ni][nj] > time + 1:
                monster_time[ni][nj] = time + 1
                queue.append((time + 1, ni, nj))

    came_from: dict[tuple[int, int], tuple[tuple[int, int], str]] = {}
    seen = [[False] * width for _ in range(height)]
    walk: deque[tuple[int, tuple[int, int]]] = deque([(0, start)])
    while walk:
        time, (i, j) = walk.popleft()
        if i in (0, height - 1) or j in (0, width - 1):
            moves = []
            cell = (i, j)
            while cell in came_from:
                cell, move = came_from[cell]
                moves.append(move)
            return "".join(reversed(moves))
        for di, dj, move in _STEPS:
            ni, nj = i + di, j + dj
            if (
                open_floor(ni, nj)
                and monster_time[ni][nj] > time + 1
                and not seen[ni][nj]
            ):
                seen[ni][nj] = True
                came_from[(ni, nj)] = ((i, j), move)
                walk.append((time + 1, (ni, nj)))
    raise ImpossibleError()


def _check_node(n: int, node: int) -> None:
    if not 1 <= node <= n:
        raise ValueError(f"node {node} out of range 1..{n}")


def shortest_routes(
    n: int, edges: Iterable[tuple[int, int, int]]
) -> list[int | None]:
    """Distances from node 1 to every node over directed weighted edges.

    Entry ``k`` is the distance to node ``k + 1``, or None if unreachable.
    """
    if n < 1:
        raise ValueError("graph needs at least one node")
    adjacency: list[list[tuple[int, int]]] = [[] for _ in range(n + 1)]
    for u, v, w in edges:
        _check_node(n, u)
        _check_node(n, v)
        adjacency[u].append((v, w))

    distance: list[float] = [math.inf] * (n + 1)
    distance[1] = 0
    heap = [(0, 1)]
    while heap:
        d, node = heapq.heappop(heap)
        if distance[node] < d:
            continue
        for neighbour, w in adjacency[node]:
            if d + w < distance[neighbour]:
                distance[neighbour] = d + w
                heapq.heappush(heap, (d + w, neighbour))
    return [None if d == math.inf else int(d) for d in distance[1:]]


def all_pairs_shortest(
    n: int, edges: Iterable[tuple[int, int, int]]
) -> list[list[int | None]]:
    """Matrix of shortest distances over undirected weighted edges.

    ``result[u - 1][v - 1]`` is the distance between ``u`` and ``v``, or
    None if they are not connected.
    """
    if n < 1:
        raise ValueError("graph needs at least one node")
    dist: list[list[float]] = [[math.inf] * n for _ in range(n)]
    for u, v, w in edges:
        _check_node(n, u)
        _check_node(n, v)
        a, b = u - 1, v - 1
        dist[a][b] = min(dist[a][b], w)
        dist[b][a] = min(dist[b][a], w)
    for i in range(n):
        dist[i][i] = 0

    for k in range(n):
        through = dist[k]
        for row in dist:
            via = row[k]
            if via == math.inf:
                continue
            for j, d in enumerate(through):
                if via + d < row[j]:
                    row[j] = via + d
    return [[None if d == math.inf else int(d) for d in row] for row in dist]


def shortest_route_queries(
    n: int,
    edges: Iterable[tuple[int, int, int]],
    queries: Iterable[tuple[int, int]],
) -> list[int]:
    """Answer distance queries; ``-1`` marks a pair with no route."""
    table = all_pairs_shortest(n, edges)
    answers = []
    for u, v in queries:
        _check_node(n, u)
        _check_node(n, v)
        d = table[u - 1][v - 1]
        answers.append(-1 if d is None else d)
    return answers