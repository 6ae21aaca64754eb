"""Tests for the exact isomorphism oracles."""
import networkx as nx
import pytest

from isofamilies.external.nauty import nauty_available
from isofamilies.utils.canonical import canonical_graph_bruteforce
from isofamilies.utils.isomorphism import (
    ORACLES,
    bruteforce_is_isomorphic,
    get_oracle,
    nauty_is_isomorphic,
    vf2_is_isomorphic,
)


def _graph(edges, n):
    G = nx.Graph()
    G.add_nodes_from(range(n))
    G.add_edges_from(edges)
    return G


def _two_triangles():
    return _graph([(0, 1), (1, 2), (0, 2), (3, 4), (4, 5), (3, 5)], 6)


def _oracles():
    names = ["vf2", "bruteforce"]
    if nauty_available():
        names.append("nauty")
    return names


@pytest.mark.parametrize("name", _oracles())
def test_oracle_relabeled_path(name):
    oracle = get_oracle(name)
    assert oracle(_graph([(0, 1), (1, 2)], 3), _graph([(2, 0), (0, 1)], 3))


@pytest.mark.parametrize("name", _oracles())
def test_oracle_regular_pair(name):
    assert not get_oracle(name)(nx.cycle_graph(6), _two_triangles())


@pytest.mark.parametrize("name", _oracles())
def test_oracle_isolated_nodes_count(name):
    oracle = get_oracle(name)
    assert not oracle(_graph([(0, 1)], 2), _graph([(0, 1)], 3))
    assert oracle(_graph([(0, 1)], 3), _graph([(1, 2)], 3))


@pytest.mark.parametrize("name", _oracles())
def test_oracle_reflexive_and_symmetric(name):
    oracle = get_oracle(name)
    A, B = nx.path_graph(4), nx.star_graph(3)
    assert oracle(A, A)
    assert oracle(A, B) is False
    assert oracle(B, A) is False


def test_get_oracle():
    assert get_oracle("vf2") is vf2_is_isomorphic
    assert get_oracle("bruteforce") is bruteforce_is_isomorphic
    assert get_oracle("nauty") is nauty_is_isomorphic
    assert set(ORACLES) == {"vf2", "nauty", "bruteforce"}


def test_get_oracle_unknown():
    with pytest.raises(ValueError):
        get_oracle("exact")


def test_get_oracle_default(monkeypatch):
    monkeypatch.delenv("ISOFAMILIES_ORACLE", raising=False)
    assert get_oracle() is vf2_is_isomorphic


def test_get_oracle_env_read_at_call_time(monkeypatch):
    monkeypatch.setenv("ISOFAMILIES_ORACLE", "bruteforce")
    assert get_oracle() is bruteforce_is_isomorphic
    # an explicit name wins over the environment
    assert get_oracle("vf2") is vf2_is_isomorphic
    monkeypatch.setenv("ISOFAMILIES_ORACLE", "exact")
    with pytest.raises(ValueError):
        get_oracle()


@pytest.mark.skipif(nauty_available(), reason="nauty is installed")
def test_nauty_oracle_without_nauty():
    with pytest.raises(RuntimeError):
        nauty_is_isomorphic(nx.path_graph(3), nx.path_graph(3))


# --- canonical form ---

def test_canonical_bruteforce_triangle():
    c1 = canonical_graph_bruteforce([(0, 1), (1, 2), (0, 2)])
    c2 = canonical_graph_bruteforce([(3, 4), (4, 5), (3, 5)])
    assert c1 == c2


def test_canonical_bruteforce_different():
    c_p3 = canonical_graph_bruteforce([(0, 1), (1, 2)])
    c_k3 = canonical_graph_bruteforce([(0, 1), (1, 2), (0, 2)])
    assert c_p3 != c_k3


def test_canonical_bruteforce_too_large():
    edges = [(i, i + 1) for i in range(11)]
    with pytest.raises(ValueError):
        canonical_graph_bruteforce(edges)
