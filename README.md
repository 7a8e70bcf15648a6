# graphsolve

A small, dependency-free library of classic graph algorithms. Each problem
is a function that takes plain Python data (a node count, a list of edge
tuples, a list of grid rows) and returns plain Python results.

Nodes are numbered from 1. When a problem has no solution the functions
raise `graphsolve.errors.ImpossibleError` (its message is `"IMPOSSIBLE"`).
Malformed input, such as an edge naming a node outside `1..n` or a node
count below 1, raises `ValueError`.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## What is included

### Spanning trees and union–find — `graphsolve.spanning`

- `DisjointSet(n)` — union by size with path compression over nodes
  `1..n`. `find(node)` returns a set's representative; `union(u, v)`
  merges two sets and returns `False` if they were already one. The
  attributes `components` and `largest` hold the current number of sets
  and the largest set size reached.
- `minimum_spanning_cost(n, edges)` — total weight of a minimum spanning
  tree of an undirected graph given as `(u, v, weight)` edges (Prim's
  algorithm). Raises `ImpossibleError` if the graph is not connected.
- `road_construction(n, roads)` — after each road `(u, v)` is added, a
  pair `(number of components, size of largest component)`.

### Connectivity — `graphsolve.connectivity`

All of these take undirected `(u, v)` edges.

- `new_roads(n, edges)` — the roads to add so that every city is
  reachable: one road between the first nodes of consecutive components.
- `message_route(n, edges)` — a shortest route from node 1 to node `n`,
  as the list of nodes visited.
- `building_teams(n, edges)` — team 1 or 2 for each node so that no edge
  joins two nodes of the same team (a two-colouring).
- `round_trip(n, edges)` — a cycle, as a list of nodes that begins and
  ends with the same node.

### Shortest paths — `graphsolve.paths`

- `monster_escape(grid)` — `grid` is a list of equal-length strings made
  of `.` (floor), `#` (wall), `A` (start) and `M` (monsters). Returns a
  string of `U`/`D`/`L`/`R` moves that takes `A` to the border without a
  monster reaching any square first; empty if `A` is already on the
  border.
- `shortest_routes(n, edges)` — Dijkstra from node 1 over directed
  `(u, v, weight)` edges; entry `k` is the distance to node `k + 1`, or
  `None` if it cannot be reached.
- `all_pairs_shortest(n, edges)` — Floyd–Warshall over undirected
  weighted edges; an `n × n` matrix with `None` for unconnected pairs.
- `shortest_route_queries(n, edges, queries)` — distances for each
  `(u, v)` query, `-1` where there is no route.

### Tours — `graphsolve.tours`

- `hamiltonian_flights(n, edges)` — number of routes from 1 to `n` over
  directed edges that visit every node exactly once, modulo 10^9 + 7.
- `knights_tour(column, row)` — a full knight's tour of an 8×8 board from
  the given 1-based square, found with Warnsdorff's heuristic and
  backtracking. Returns the board as 8 rows of move numbers 1..64.

### Strongly connected components — `graphsolve.scc`

- `flight_routes_check(n, edges)` — `None` if every node can reach every
  other over directed edges, otherwise a pair `(a, b)` with no route from
  `a` to `b`.
- `kingdoms(n, edges)` — the number of strongly connected components and
  the component label (1-based) of every node.
- `giant_pizza(m, wishes)` — 2-SAT over toppings `1..m`. A wish is a pair
  of signed topping numbers (`+k` wants topping `k`, `-k` does not). Returns
  one boolean per topping; raises `ImpossibleError` if no choice grants at
  least half of every wish.
- `coin_collector(coins, edges)` — the most coins collectable on a
  directed walk, where `coins[k]` lies in room `k + 1`, computed over the
  condensation of the graph.

### Euler tours — `graphsolve.euler`

- `mail_delivery(n, edges)` — a route over undirected streets that starts
  and ends at node 1 and uses every street exactly once.
- `de_bruijn(n)` — a shortest bit string containing every bit string of
  length `n`.
- `teleporters_path(n, edges)` — a route from 1 to `n` that uses every
  directed edge exactly once.

### Maximum flow — `graphsolve.flow` (Edmonds–Karp)

- `max_flow(n, edges)` — maximum flow from node 1 to node `n` over
  directed `(u, v, capacity)` edges; parallel edges add up.
- `police_chase(n, edges)` — a smallest set of undirected streets whose
  removal separates node 1 from node `n`; each pair lists the endpoint on
  node 1's side first.
- `school_dance(n, m, pairs)` — a maximum matching between boys `1..n`
  and girls `1..m`, ordered by boy, then girl.
- `distinct_routes(n, edges)` — the largest set of routes from 1 to `n`
  over directed edges with no edge used twice, each as a list of nodes.

## Example

```python
from graphsolve.errors import ImpossibleError
from graphsolve.spanning import minimum_spanning_cost

edges = [(1, 2, 3), (2, 3, 5), (2, 4, 2), (3, 4, 8), (5, 1, 7), (5, 4, 4)]
print(minimum_spanning_cost(5, edges))  # 14

try:
    minimum_spanning_cost(3, [(1, 2, 1)])
except ImpossibleError:
    print("the cities cannot all be connected")
```

## What it does not do

graphsolve is a library only. It has no command-line program and does not
read problem input from text or files: build the edge lists yourself and
call the functions.