from collections import Counter

import pytest

from graphsolve.errors import ImpossibleError
from graphsolve.euler import de_bruijn, mail_delivery, teleporters_path


def _undirected_multiset(pairs):
    return Counter(tuple(sorted(p)) for p in pairs)


def _steps(route):
    return list(zip(route, route[1:]))


MAIL_EDGES = [(1, 2), (1, 3), (2, 3), (2, 4), (2, 6), (3, 5), (3, 6), (4, 5)]


def test_mail_delivery_uses_every_street_once():
    route = mail_delivery(6, MAIL_EDGES)
    assert route[0] == 1
    assert route[-1] == 1
    assert len(route) == len(MAIL_EDGES) + 1
    assert _undirected_multiset(_steps(route)) == _undirected_multiset(MAIL_EDGES)


def test_mail_delivery_no_streets():
    assert mail_delivery(3, []) == [1]


def test_mail_delivery_odd_degree_is_impossible():
    with pytest.raises(ImpossibleError):
        mail_delivery(3, [(1, 2), (2, 3)])


def test_mail_delivery_disconnected_is_impossible():
    edges = [(1, 2), (2, 3), (3, 1), (4, 5), (5, 6), (6, 4)]
    with pytest.raises(ImpossibleError):
        mail_delivery(6, edges)


def test_mail_delivery_rejects_bad_node():
    with pytest.raises(ValueError):
        mail_delivery(2, [(1, 3)])


@pytest.mark.parametrize("n", [1, 2, 3, 4, 5, 8])
def test_de_bruijn_contains_every_word_once(n):
    sequence = de_bruijn(n)
    assert len(sequence) == 2**n + n - 1
    assert set(sequence) <= {"0", "1"}
    words = [sequence[i : i + n] for i in range(len(sequence) - n + 1)]
    assert len(set(words)) == 2**n
    assert len(words) == 2**n


def test_de_bruijn_one():
    assert sorted(de_bruijn(1)) == ["0", "1"]


def test_de_bruijn_rejects_zero():
    with pytest.raises(ValueError):
        de_bruijn(0)


TELEPORTER_EDGES = [(1, 2), (1, 3), (2, 4), (2, 5), (3, 1), (4, 2)]


def test_teleporters_path_uses_every_teleporter_once():
    route = teleporters_path(5, TELEPORTER_EDGES)
    assert route[0] == 1
    assert route[-1] == 5
    assert Counter(_steps(route)) == Counter(TELEPORTER_EDGES)


def test_teleporters_simple_chain():
    assert teleporters_path(3, [(1, 2), (2, 3)]) == [1, 2, 3]


def test_teleporters_balanced_graph_is_impossible():
    with pytest.raises(ImpossibleError):
        teleporters_path(2, [(1, 2), (2, 1)])


def test_teleporters_wrong_endpoints_is_impossible():
    with pytest.raises(ImpossibleError):
        teleporters_path(3, [(2, 1), (1, 3)])


def test_teleporters_unreached_edges_is_impossible():
    with pytest.raises(ImpossibleError):
        teleporters_path(4, [(1, 4), (2, 3), (3, 2)])


def test_teleporters_imbalance_too_large_is_impossible():
    with pytest.raises(ImpossibleError):
        teleporters_path(3, [(1, 3), (1, 3), (2, 3)])
    with pytest.raises(ImpossibleError):
        teleporters_path(3, [(1, 2), (1, 3), (1, 3)])