import pytest

from graphsolve.tours import MOD, hamiltonian_flights, knights_tour


def test_hamiltonian_sample():
    edges = [(1, 2), (1, 2), (2, 3), (3, 4), (1, 3), (1, 4)]
    assert hamiltonian_flights(4, edges) == 2


def test_hamiltonian_single_node():
    assert hamiltonian_flights(1, []) == 1


def test_hamiltonian_no_route_into_last_node():
    forward = [(1, 2), (2, 3), (3, 4)]
    assert hamiltonian_flights(4, [(v, u) for u, v in forward]) == 0


def test_hamiltonian_parallel_edges_multiply():
    chain = [(k, k + 1) for k in range(1, 6)]
    single = hamiltonian_flights(6, chain)
    doubled = hamiltonian_flights(6, chain + chain)
    assert doubled == single * 2 ** len(chain) % MOD


def test_hamiltonian_cannot_pass_through_last_node():
    base = [(1, 2), (2, 3)]
    assert hamiltonian_flights(3, base + [(1, 3), (3, 2)]) == hamiltonian_flights(
        3, base
    )


def test_hamiltonian_bad_edge():
    with pytest.raises(ValueError):
        hamiltonian_flights(3, [(1, 4)])


def _positions(board):
    return {value: (i, j) for i, row in enumerate(board) for j, value in enumerate(row)}


@pytest.mark.parametrize("column,row", [(1, 1), (2, 1), (8, 8), (4, 5), (8, 1)])
def test_knights_tour_is_valid(column, row):
    board = knights_tour(column, row)
    assert board[row - 1][column - 1] == 1
    assert sorted(v for r in board for v in r) == list(range(1, 65))
    where = _positions(board)
    for step in range(1, 64):
        (a, b), (c, d) = where[step], where[step + 1]
        assert {abs(a - c), abs(b - d)} == {1, 2}


@pytest.mark.parametrize("column,row", [(0, 1), (1, 9), (9, 9)])
def test_knights_tour_off_board(column, row):
    with pytest.raises(ValueError):
        knights_tour(column, row)