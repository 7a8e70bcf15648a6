"""Strongly connected components and the problems built on them."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Sequence

from graphsolve.errors import ImpossibleError


def _directed(
    n: int, edges: Iterable[tuple[int, int]]
) -> tuple[list[list[int]], list[list[int]], list[tuple[int, int]]]:
    """Forward and reverse adjacency lists over nodes ``1..n``."""
    forward: list[list[int]] = [[] for _ in range(n + 1)]
    backward: list[list[int]] = [[] for _ in range(n + 1)]
    edge_list = []
    for u, v in edges:
        if not (1 <= u <= n and 1 <= v <= n):
            raise ValueError(f"edge ({u}, {v}) leaves node range 1..{n}")
        forward[u].append(v)
        backward[v].append(u)
        edge_list.append((u, v))
    return forward, backward, edge_list


def _kosaraju(
    size: int, forward: list[list[int]], backward: list[list[int]]
) -> tuple[int, list[int]]:
    """Label nodes ``1..size`` by component, numbered in topological order.

    Returns the number of components and a list indexed by node (index 0
    unused) holding labels ``1..count``.
    """
    visited = [False] * (size + 1)
    finished: list[int] = []
    for root in range(1, size + 1):
        if visited[root]:
            continue
        visited[root] = True
        stack = [(root, iter(forward[root]))]
        while stack:
            node, neighbours = stack[-1]
            for neighbour in neighbours:
                if not visited[neighbour]:
                    visited[neighbour] = True
                    stack.append((neighbour, iter(forward[neighbour])))
                    break
            else:
                stack.pop()
                finished.append(node)

    labels = [0] * (size + 1)
    count = 0
    for leader in reversed(finished):
        if labels[leader]:
            continue
        count += 1
        labels[leader] = count
        pending = [leader]
        while pending:
            node = pending.pop()
            for neighbour in backward[node]:
                if not labels[neighbour]:
                    labels[neighbour] = count
                    pending.append(neighbour)
    return count, labels


def flight_routes_check(
    n: int, edges: Iterable[tuple[int, int]]
) -> tuple[int, int] | None:
    """Check that every city can reach every other over directed flights.

    Returns None when that holds, otherwise a pair ``(a, b)`` such that
    there is no route from ``a`` to ``b``.
    """
    if n < 1:
        raise ValueError("graph needs at least one node")
    forward, backward, _ = _directed(n, edges)

    reached = [False] * (n + 1)
    reached[1] = True
    queue = deque([1])
    while queue:
        node = queue.popleft()
        for neighbour in forward[node]:
            if not reached[neighbour]:
                reached[neighbour] = True
                queue.append(neighbour)
    unreached = next((node for node in range(2, n + 1) if not reached[node]), None)
    if unreached is not None:
        return (1, unreached)

    _, labels = _kosaraju(n, forward, backward)
    visited = [False] * (n + 1)
    visited[1] = True
    stack = [(1, iter(forward[1]))]
    while stack:
        node, neighbours = stack[-1]
        for neighbour in neighbours:
            if labels[neighbour] != labels[node]:
                return (neighbour, node)
            if not visited[neighbour]:
                visited[neighbour] = True
                stack.append((neighbour, iter(forward[neighbour])))
                break
        else:
            stack.pop()
    return None


def kingdoms(n: int, edges: Iterable[tuple[int, int]]) -> tuple[int, list[int]]:
    """Split planets into kingdoms (strongly connected components).

    Returns the number of kingdoms and, for planets ``1..n`` in order, the
    kingdom number ``1..count`` of each.
    """
    if n < 0:
        raise ValueError("number of nodes must not be negative")
    forward, backward, _ = _directed(n, edges)
    count, labels = _kosaraju(n, forward, backward)
    return count, labels[1:]


def giant_pizza(m: int, wishes: Iterable[tuple[int, int]]) -> list[bool]:
    """Choose toppings ``1..m`` so that each wish is at least half granted.

    A wish is a pair of signed topping numbers: ``+k`` asks for topping
    ``k``, ``-k`` asks for it to be left out.  Returns, for each topping in
    order, True if it goes on the pizza.  Raises ImpossibleError when no
    choice satisfies every wish.
    """
    if m < 0:
        raise ValueError("number of toppings must not be negative")

    def vertex(literal: int) -> int:
        if literal == 0 or abs(literal) > m:
            raise ValueError(f"topping {literal} out of range 1..{m}")
        return m + literal if literal > 0 else m + 1 + literal

    size = 2 * m
    forward: list[list[int]] = [[] for _ in range(size + 1)]
    backward: list[list[int]] = [[] for _ in range(size + 1)]
    for first, second in wishes:
        a, b = vertex(first), vertex(second)
        not_a, not_b = vertex(-first), vertex(-second)
        forward[not_a].append(b)
        forward[not_b].append(a)
        backward[a].append(not_b)
        backward[b].append(not_a)

    _, labels = _kosaraju(size, forward, backward)
    choice = []
    for topping in range(1, m + 1):
        yes, no = labels[vertex(topping)], labels[vertex(-topping)]
        if yes == no:
            raise ImpossibleError()
        choice.append(yes > no)
    return choice


def coin_collector(coins: Sequence[int], edges: Iterable[tuple[int, int]]) -> int:
    """Most coins collectable on a directed walk; ``coins[k]`` lies in room ``k + 1``."""
    n = len(coins)
    forward, backward, edge_list = _directed(n, edges)
    count, labels = _kosaraju(n, forward, backward)

    component_coins = [0] * (count + 1)
    for room, amount in enumerate(coins, start=1):
        component_coins[labels[room]] += amount

    successors: list[list[int]] = [[] for _ in range(count + 1)]
    indegree = [0] * (count + 1)
    seen: set[tuple[int, int]] = set()
    for u, v in edge_list:
        pair = (labels[u], labels[v])
        if pair[0] != pair[1] and pair not in seen:
            seen.add(pair)
            successors[pair[0]].append(pair[1])
            indegree[pair[1]] += 1

    best = component_coins[:]
    queue = deque(c for c in range(1, count + 1) if indegree[c] == 0)
    while queue:
        component = queue.popleft()
        for nxt in successors[component]:
            best[nxt] = max(best[nxt], best[component] + component_coins[nxt])
            indegree[nxt] -= 1
            if indegree[nxt] == 0:
                queue.append(nxt)
    return max(best[1:], default=0)