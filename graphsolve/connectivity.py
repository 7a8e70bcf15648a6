"""Connectivity problems on undirected graphs with nodes ``1..n``."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable

from graphsolve.errors import ImpossibleError


def _undirected(n: int, edges: Iterable[tuple[int, int]]) -> list[list[int]]:
    if n < 1:
        raise ValueError("graph needs at least one node")
    adjacency: list[list[int]] = [[] for _ in range(n + 1)]
    for u, v in edges:
        if not (1 <= u <= n and 1 <= v <= n):
            raise ValueError(f"edge ({u}, {v}) leaves node range 1..{n}")
        adjacency[u].append(v)
        adjacency[v].append(u)
    return adjacency


def new_roads(n: int, edges: Iterable[tuple[int, int]]) -> list[tuple[int, int]]:
    """Fewest new roads that connect every city, joining consecutive components."""
    adjacency = _undirected(n, edges)
    visited = [False] * (n + 1)
    representatives = []
    for node in range(1, n + 1):
        if visited[node]:
            continue
        representatives.append(node)
        visited[node] = True
        stack = [node]
        while stack:
            current = stack.pop()
            for neighbour in adjacency[current]:
                if not visited[neighbour]:
                    visited[neighbour] = True
                    stack.append(neighbour)
    return list(zip(representatives, representatives[1:]))


def message_route(n: int, edges: Iterable[tuple[int, int]]) -> list[int]:
    """Shortest route from node 1 to node n, as the list of nodes visited."""
    adjacency = _undirected(n, edges)
    came_from: list[int | None] = [None] * (n + 1)
    visited = [False] * (n + 1)
    visited[1] = True
    queue = deque([1])
    while queue:
        node = queue.popleft()
        if node == n:
            break
        for neighbour in adjacency[node]:
            if not visited[neighbour]:
                visited[neighbour] = True
                came_from[neighbour] = node
                queue.append(neighbour)

    if not visited[n]:
        raise ImpossibleError()
    path = []
    step: int | None = n
    while step is not None:
        path.append(step)
        step = came_from[step]
    path.reverse()
    return path


def building_teams(n: int, edges: Iterable[tuple[int, int]]) -> list[int]:
    """Assign each pupil team 1 or 2 so that no friends share a team."""
    adjacency = _undirected(n, edges)
    team = [0] * (n + 1)
    for first in range(1, n + 1):
        if team[first]:
            continue
        team[first] = 1
        queue = deque([first])
        while queue:
            node = queue.popleft()
            other = 3 - team[node]
            for neighbour in adjacency[node]:
                if team[neighbour] == 0:
                    team[neighbour] = other
                    queue.append(neighbour)
                elif team[neighbour] != other:
                    raise ImpossibleError()
    return team[1:]


def _cycle_node(n: int, adjacency: list[list[int]]) -> int | None:
    """Find a node lying on some cycle, using a breadth-first search."""
    visited = [False] * (n + 1)
    found: int | None = None
    for root in range(1, n + 1):
        if found is not None or visited[root]:
            continue
        visited[root] = True
        queue: deque[tuple[int, int]] = deque([(root, -1)])
        while queue:
            node, parent = queue.popleft()
            for neighbour in adjacency[node]:
                if not visited[neighbour]:
                    visited[neighbour] = True
                    queue.append((neighbour, node))
                elif neighbour != parent:
                    found = neighbour
                    break
    return found


def round_trip(n: int, edges: Iterable[tuple[int, int]]) -> list[int]:
    """A round trip that starts and ends at the same city without reusing a road.

    The returned list begins and ends with the same node.
    """
    adjacency = _undirected(n, edges)
    start = _cycle_node(n, adjacency)
    if start is None:
        raise ImpossibleError()

    visited = [False] * (n + 1)
    for first in adjacency[start]:
        visited[first] = True
        if first == start:
            return [start, start]
        path = [first]
        stack = [(first, start, iter(adjacency[first]))]
        while stack:
            node, previous, neighbours = stack[-1]
            for neighbour in neighbours:
                if not visited[neighbour] and neighbour != previous:
                    visited[neighbour] = True
                    path.append(neighbour)
                    if neighbour == start:
                        return [start, *path]
                    stack.append((neighbour, node, iter(adjacency[neighbour])))
                    break
            else:
                stack.pop()
                path.pop()
    raise ImpossibleError()