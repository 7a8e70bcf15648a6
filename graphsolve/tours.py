"""Tours that visit every node: Hamiltonian paths and the knight's tour."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable

from graphsolve.errors import ImpossibleError

MOD = 1_000_000_007

_KNIGHT = ((2, 1), (1, 2), (-1, 2), (-2, 1), (-2, -1), (-1, -2), (1, -2), (2, -1))
_SIZE = 8


def hamiltonian_flights(n: int, edges: Iterable[tuple[int, int]]) -> int:
    """Number of routes from 1 to n visiting every node exactly once, mod 1e9+7.

    Edges are directed; parallel edges count as distinct routes.
    """
    if n < 1:
        raise ValueError("graph needs at least one node")
    successors: list[Counter[int]] = [Counter() for _ in range(n)]
    for u, v in edges:
        if not (1 <= u <= n and 1 <= v <= n):
            raise ValueError(f"edge ({u}, {v}) leaves node range 1..{n}")
        successors[u - 1][v - 1] += 1

    full = (1 << n) - 1
    last = n - 1
    ways = [[0] * n for _ in range(1 << n)]
    ways[1][0] = 1
    for mask in range(1, full + 1, 2):
        row = ways[mask]
        for node, count in enumerate(row):
            if not count or node == last:
                continue
            for target, multiplicity in successors[node].items():
                bit = 1 << target
                if mask & bit:
                    continue
                nxt = ways[mask | bit]
                nxt[target] = (nxt[target] + count * multiplicity) % MOD
    return ways[full][last]


def knights_tour(column: int, row: int) -> list[list[int]]:
    """Knight's tour of an 8x8 board starting at (column, row), both 1-based.

    Returns the board as rows; each cell holds the move number 1..64.
    """
    if not (1 <= column <= _SIZE and 1 <= row <= _SIZE):
        raise ValueError("start square must lie on the 8x8 board")
    board = [[0] * _SIZE for _ in range(_SIZE)]

    def free(i: int, j: int) -> bool:
        return 0 <= i < _SIZE and 0 <= j < _SIZE and board[i][j] == 0

    def onward(i: int, j: int) -> int:
        return sum(free(i + di, j + dj) for di, dj in _KNIGHT)

    def place(i: int, j: int, step: int) -> bool:
        board[i][j] = step
        if step == _SIZE * _SIZE:
            return True
        candidates = sorted(
            (onward(i + di, j + dj), i + di, j + dj)
            for di, dj in _KNIGHT
            if free(i + di, j + dj)
        )
        for _, ni, nj in candidates:
            if place(ni, nj, step + 1):
                return True
        board[i][j] = 0
        return False

    if not place(row - 1, column - 1, 1):
        raise ImpossibleError()
    return board