"""Eulerian circuits and paths: mail routes, De Bruijn sequences, teleporters."""

from __future__ import annotations

from collections.abc import Iterable

from graphsolve.errors import ImpossibleError


def _check_edge(n: int, u: int, v: int) -> None:
    if not (1 <= u <= n and 1 <= v <= n):
        raise ValueError(f"edge ({u}, {v}) leaves node range 1..{n}")


def mail_delivery(n: int, edges: Iterable[tuple[int, int]]) -> list[int]:
    """Route that starts and ends at node 1 and uses every street exactly once.

    Streets are undirected.  The result lists the nodes visited, beginning
    and ending with 1.  Raises ImpossibleError when no such route exists.
    """
    if n < 1:
        raise ValueError("graph needs at least one node")
    adjacency: list[list[tuple[int, int]]] = [[] for _ in range(n + 1)]
    degree = [0] * (n + 1)
    edge_count = 0
    for edge_id, (u, v) in enumerate(edges):
        _check_edge(n, u, v)
        adjacency[u].append((v, edge_id))
        adjacency[v].append((u, edge_id))
        degree[u] += 1
        degree[v] += 1
        edge_count += 1

    if any(d % 2 for d in degree[1:]):
        raise ImpossibleError()

    used = [False] * edge_count
    stack = [1]
    circuit: list[int] = []
    while stack:
        node = stack[-1]
        pending = adjacency[node]
        while pending and used[pending[-1][1]]:
            pending.pop()
        if pending:
            neighbour, edge_id = pending.pop()
            used[edge_id] = True
            stack.append(neighbour)
        else:
            circuit.append(stack.pop())

    if len(circuit) != edge_count + 1:
        raise ImpossibleError()
    circuit.reverse()
    return circuit


def de_bruijn(n: int) -> str:
    """Shortest bit string that contains every bit string of length ``n``."""
    if n < 1:
        raise ValueError("length must be at least 1")
    used: set[str] = set()
    digits: list[str] = []
    # Each frame: [node, index of next digit to try, digit that led here].
    stack: list[list] = [["0" * (n - 1), 0, None]]
    while stack:
        frame = stack[-1]
        node, index, _ = frame
        if index < 2:
            frame[1] += 1
            digit = "01"[index]
            edge = node + digit
            if edge not in used:
                used.add(edge)
                stack.append([edge[1:], 0, digit])
        else:
            stack.pop()
            if frame[2] is not None:
                digits.append(frame[2])
    return "".join(digits) + "0" * (n - 1)


def teleporters_path(n: int, edges: Iterable[tuple[int, int]]) -> list[int]:
    """Route from node 1 to node n that uses every directed teleporter once.

    Raises ImpossibleError when no such route exists.
    """
    if n < 1:
        raise ValueError("graph needs at least one node")
    successors: list[list[int]] = [[] for _ in range(n + 1)]
    indegree = [0] * (n + 1)
    outdegree = [0] * (n + 1)
    edge_count = 0
    for u, v in edges:
        _check_edge(n, u, v)
        successors[u].append(v)
        outdegree[u] += 1
        indegree[v] += 1
        edge_count += 1

    source: int | None = None
    sink: int | None = None
    for node in range(1, n + 1):
        balance = outdegree[node] - indegree[node]
        if abs(balance) > 1:
            raise ImpossibleError()
        if balance == 1:
            if source is not None:
                raise ImpossibleError()
            source = node
        elif balance == -1:
            if sink is not None:
                raise ImpossibleError()
            sink = node
    if source != 1 or sink != n:
        raise ImpossibleError()

    stack = [1]
    route: list[int] = []
    while stack:
        node = stack[-1]
        if successors[node]:
            stack.append(successors[node].pop())
        else:
            route.append(stack.pop())

    if len(route) != edge_count + 1:
        raise ImpossibleError()
    route.reverse()
    return route