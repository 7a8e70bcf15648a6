import pytest

from graphsolve.errors import ImpossibleError
from graphsolve.paths import (
    all_pairs_shortest,
    monster_escape,
    shortest_route_queries,
    shortest_routes,
)

SAMPLE_GRID = [
    "########",
    "#M..A..#",
    "#.#.M#.#",
    "#M#..#..",
    "#.######",
]

MOVE = {"U": (-1, 0), "D": (1, 0), "L": (0, -1), "R": (0, 1)}


def _walk(grid, moves):
    i, j = next(
        (r, c) for r, row in enumerate(grid) for c, ch in enumerate(row) if ch == "A"
    )
    cells = []
    for move in moves:
        di, dj = MOVE[move]
        i, j = i + di, j + dj
        cells.append((i, j))
    return cells


def test_monster_sample_route():
    assert monster_escape(SAMPLE_GRID) == "RRDDR"


def test_monster_route_stays_on_floor_and_ends_on_border():
    moves = monster_escape(SAMPLE_GRID)
    cells = _walk(SAMPLE_GRID, moves)
    assert all(SAMPLE_GRID[i][j] == "." for i, j in cells)
    i, j = cells[-1]
    assert i in (0, len(SAMPLE_GRID) - 1) or j in (0, len(SAMPLE_GRID[0]) - 1)


def test_monster_start_on_border_needs_no_moves():
    assert monster_escape(["#A#", "#.#"]) == ""


def test_monster_walled_in_is_impossible():
    with pytest.raises(ImpossibleError):
        monster_escape(["###", "#A#", "###"])


def test_monster_blocks_only_exit():
    with pytest.raises(ImpossibleError):
        monster_escape(["#####", "#A.M#", "#####"])


def test_monster_missing_start():
    with pytest.raises(ValueError):
        monster_escape(["...", "..."])


def test_monster_ragged_grid():
    with pytest.raises(ValueError):
        monster_escape(["A..", ".."])


SAMPLE_EDGES = [(1, 2, 6), (1, 3, 2), (3, 2, 3), (1, 3, 4)]


def test_shortest_routes_sample():
    assert shortest_routes(3, SAMPLE_EDGES) == [0, 5, 2]


def test_shortest_routes_respects_edges():
    dist = shortest_routes(3, SAMPLE_EDGES)
    for u, v, w in SAMPLE_EDGES:
        assert dist[v - 1] <= dist[u - 1] + w


def test_shortest_routes_unreachable_and_directed():
    dist = shortest_routes(3, [(2, 1, 5)])
    assert dist[0] == 0
    assert dist[1] is None
    assert dist[2] is None


def test_shortest_routes_bad_node():
    with pytest.raises(ValueError):
        shortest_routes(2, [(1, 3, 1)])


UNDIRECTED = [(1, 2, 5), (1, 3, 9), (2, 3, 3)]


def test_queries_sample():
    queries = [(1, 2), (2, 1), (3, 1), (1, 4), (3, 2)]
    assert shortest_route_queries(4, UNDIRECTED, queries) == [5, 5, 8, -1, 3]


def test_all_pairs_symmetric_with_zero_diagonal():
    table = all_pairs_shortest(4, UNDIRECTED)
    for i in range(4):
        assert table[i][i] == 0
        for j in range(4):
            assert table[i][j] == table[j][i]
    assert table[0][3] is None


def test_all_pairs_keeps_cheapest_parallel_edge():
    table = all_pairs_shortest(2, [(1, 2, 7), (2, 1, 4)])
    assert table[0][1] == 4


def test_all_pairs_agrees_with_single_source():
    table = all_pairs_shortest(4, UNDIRECTED)
    directed = [(u, v, w) for u, v, w in UNDIRECTED] + [
        (v, u, w) for u, v, w in UNDIRECTED
    ]
    assert table[0] == shortest_routes(4, directed)


def test_queries_bad_node():
    with pytest.raises(ValueError):
        shortest_route_queries(3, UNDIRECTED, [(1, 5)])