"""Maximum flow (Edmonds-Karp) and the problems reduced to it."""

from __future__ import annotations

import math
from collections import deque
from collections.abc import Callable, Iterable


class _FlowNetwork:
    """Residual network over nodes ``0..size-1`` with neighbour order kept."""

    def __init__(self, size: int) -> None:
        self._neighbours: list[dict[int, None]] = [{} for _ in range(size)]
        self.capacity: list[dict[int, int]] = [{} for _ in range(size)]
        self.flow: list[dict[int, int]] = [{} for _ in range(size)]

    def connect(self, u: int, v: int) -> None:
        self._neighbours[u][v] = None
        self._neighbours[v][u] = None

    def neighbours(self, node: int) -> Iterable[int]:
        return self._neighbours[node].keys()

    def residual(self, u: int, v: int) -> int:
        return self.capacity[u].get(v, 0) - self.flow[u].get(v, 0)

    def positive_flow(self, u: int, v: int) -> int:
        return self.flow[u].get(v, 0)

    def search(
        self, source: int, sink: int, available: Callable[[int, int], int]
    ) -> tuple[float, dict[int, int]] | None:
        """Breadth-first search for a path whose edges all have units left.

        Returns the bottleneck and the parent of each reached node.
        """
        if source == sink:
            return None
        parent = {source: source}
        queue: deque[tuple[int, float]] = deque([(source, math.inf)])
        while queue:
            node, bottleneck = queue.popleft()
            for neighbour in self.neighbours(node):
                if neighbour in parent:
                    continue
                units = available(node, neighbour)
                if units <= 0:
                    continue
                parent[neighbour] = node
                reach = min(bottleneck, units)
                if neighbour == sink:
                    return reach, parent
                queue.append((neighbour, reach))
        return None

    def augment(self, parent: dict[int, int], source: int, sink: int, amount: int) -> None:
        node = sink
        while node != source:
            before = parent[node]
            self.flow[before][node] = self.flow[before].get(node, 0) + amount
            self.flow[node][before] = self.flow[node].get(before, 0) - amount
            node = before

    def maximise(self, source: int, sink: int) -> int:
        total = 0
        while (found := self.search(source, sink, self.residual)) is not None:
            amount, parent = found
            amount = int(amount)
            self.augment(parent, source, sink, amount)
            total += amount
        return total


def _check_nodes(n: int, *nodes: int) -> None:
    for node in nodes:
        if not 1 <= node <= n:
            raise ValueError(f"node {node} out of range 1..{n}")


def _require_nodes(n: int) -> None:
    if n < 1:
        raise ValueError("graph needs at least one node")


def max_flow(n: int, edges: Iterable[tuple[int, int, int]]) -> int:
    """Largest flow from node 1 to node n over directed edges ``(u, v, capacity)``.

    Parallel edges add their capacities.
    """
    _require_nodes(n)
    network = _FlowNetwork(n + 1)
    for u, v, w in edges:
        _check_nodes(n, u, v)
        if w < 0:
            raise ValueError("capacity must not be negative")
        network.capacity[u][v] = network.capacity[u].get(v, 0) + w
        network.connect(u, v)
    return network.maximise(1, n)


def police_chase(n: int, edges: Iterable[tuple[int, int]]) -> list[tuple[int, int]]:
    """Fewest undirected streets to close so that node 1 cannot reach node n.

    Each returned pair lists the endpoint on node 1's side first.
    """
    _require_nodes(n)
    network = _FlowNetwork(n + 1)
    for u, v in edges:
        _check_nodes(n, u, v)
        network.capacity[u][v] = 1
        network.capacity[v][u] = 1
        network.connect(u, v)
    network.maximise(1, n)

    side = [0] * (n + 1)
    side[1] = 1
    pending = [1]
    while pending:
        node = pending.pop()
        for neighbour in network.neighbours(node):
            if not side[neighbour] and network.residual(node, neighbour) != 0:
                side[neighbour] = 1
                pending.append(neighbour)

    cut: list[tuple[int, int]] = []
    side[1] = 2
    stack = [(1, iter(network.neighbours(1)))]
    while stack:
        node, neighbours = stack[-1]
        for neighbour in neighbours:
            if side[neighbour] == 2:
                continue
            if side[neighbour] == 0:
                cut.append((node, neighbour))
            else:
                side[neighbour] = 2
                stack.append((neighbour, iter(network.neighbours(neighbour))))
                break
        else:
            stack.pop()
    return cut


def school_dance(n: int, m: int, pairs: Iterable[tuple[int, int]]) -> list[tuple[int, int]]:
    """Largest set of dance pairs (boy ``1..n``, girl ``1..m``) from the willing pairs.

    The result is ordered by boy, then girl.
    """
    if n < 0 or m < 0:
        raise ValueError("group sizes must not be negative")
    sink = n + m + 1
    network = _FlowNetwork(n + m + 2)
    for boy, girl in pairs:
        if not (1 <= boy <= n and 1 <= girl <= m):
            raise ValueError(f"pair ({boy}, {girl}) out of range")
        network.capacity[boy][girl + n] = 1
        network.connect(boy, girl + n)
    for boy in range(1, n + 1):
        network.capacity[0][boy] = 1
        network.connect(0, boy)
    for girl in range(n + 1, n + m + 1):
        network.capacity[girl][sink] = 1
        network.connect(girl, sink)
    network.maximise(0, sink)

    return [
        (boy, girl - n)
        for boy in range(1, n + 1)
        for girl in range(n + 1, n + m + 1)
        if network.positive_flow(boy, girl) == 1
    ]


def distinct_routes(n: int, edges: Iterable[tuple[int, int]]) -> list[list[int]]:
    """Most routes from node 1 to node n over directed edges, no edge used twice.

    Each route is the list of nodes it visits, from 1 to n.
    """
    _require_nodes(n)
    network = _FlowNetwork(n + 1)
    for u, v in edges:
        _check_nodes(n, u, v)
        network.capacity[u][v] = network.capacity[u].get(v, 0) + 1
        network.connect(u, v)
    network.maximise(1, n)

    routes: list[list[int]] = []
    while (found := network.search(1, n, network.positive_flow)) is not None:
        _, parent = found
        route = [n]
        node = n
        while node != 1:
            before = parent[node]
            network.flow[before][node] -= 1
            route.append(before)
            node = before
        route.reverse()
        routes.append(route)
    return routes