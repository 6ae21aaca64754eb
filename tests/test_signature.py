"""Tests for k-WL signatures."""
import random

import networkx as nx
import pytest

from isofamilies.wl.signature import (
    atomic_type,
    k_tuple_colors,
    k_wl,
    wl1_graph_hash,
)


def _graph(edges, n):
    G = nx.Graph()
    G.add_nodes_from(range(n))
    G.add_edges_from(edges)
    return G


def _relabelings(G, count, seed=0):
    rng = random.Random(seed)
    nodes = list(G.nodes())
    out = []
    for _ in range(count):
        perm = nodes[:]
        rng.shuffle(perm)
        out.append(nx.relabel_nodes(G, dict(zip(nodes, perm))))
    return out


def _two_triangles():
    return _graph([(0, 1), (1, 2), (0, 2), (3, 4), (4, 5), (3, 5)], 6)


# --- soundness ---

def test_wl1_invariant_under_relabeling():
    G = nx.petersen_graph()
    sig = k_wl(G, 1)
    for H in _relabelings(G, 5):
        assert k_wl(H, 1) == sig


@pytest.mark.parametrize("k", [2, 3])
def test_kwl_invariant_under_relabeling(k):
    # paw graph plus an isolated vertex
    G = _graph([(0, 1), (1, 2), (0, 2), (2, 3)], 5)
    sig = k_wl(G, k)
    for H in _relabelings(G, 4, seed=k):
        assert k_wl(H, k) == sig


def test_fixed_iterations_invariant_under_relabeling():
    G = nx.path_graph(5)
    for H in _relabelings(G, 3):
        assert k_wl(H, 1, 2) == k_wl(G, 1, 2)
        assert k_wl(H, 2, 1) == k_wl(G, 2, 1)


# --- discrimination ---

def test_wl1_distinguishes_path_and_star():
    assert k_wl(nx.path_graph(4), 1) != k_wl(nx.star_graph(3), 1)


def test_wl1_cannot_split_regular_pair():
    # C6 and 2*K3 are both 2-regular on 6 nodes
    assert k_wl(nx.cycle_graph(6), 1) == k_wl(_two_triangles(), 1)


def test_k2_distinguishes_p3_and_triangle():
    assert k_wl(nx.path_graph(3), 2) != k_wl(nx.complete_graph(3), 2)


def test_k2_distinguishes_empty_and_triangle():
    assert k_wl(_graph([], 3), 2) != k_wl(nx.complete_graph(3), 2)


def test_different_node_counts_differ():
    assert k_wl(_graph([], 2), 1) != k_wl(_graph([], 3), 1)
    assert k_wl(_graph([], 2), 2) != k_wl(_graph([], 3), 2)


def test_signature_is_hex_string():
    sig = k_wl(nx.path_graph(3))
    assert isinstance(sig, str)
    assert len(sig) == 64


def test_empty_graph_signature():
    assert k_wl(nx.Graph(), 1) == wl1_graph_hash(nx.Graph(), 0)


# --- tuple refinement ---

def test_atomic_type():
    G = nx.path_graph(3)  # 0-1-2
    assert atomic_type(G, (0, 1)) == (1,)
    assert atomic_type(G, (0, 2)) == (0,)
    assert atomic_type(G, (1, 1)) == (0,)
    # pairs (0,1), (0,2), (1,2)
    assert atomic_type(G, (1, 0, 2)) == (1, 1, 0)


def test_k_tuple_colors_covers_all_tuples():
    G = nx.path_graph(4)
    colors, rounds = k_tuple_colors(G, 2)
    assert len(colors) == 16
    assert 1 <= rounds <= 4


def test_k_tuple_colors_iteration_bound():
    _colors, rounds = k_tuple_colors(nx.path_graph(6), 2, iterations=1)
    assert rounds == 1


def test_k_tuple_colors_fixed_point_stops_early():
    # K4: diagonal vs off-diagonal is stable after one round
    _colors, rounds = k_tuple_colors(nx.complete_graph(4), 2)
    assert rounds == 1


def test_diagonal_colors_star():
    G = nx.star_graph(3)  # center 0
    colors, _ = k_tuple_colors(G, 2)
    assert colors[(1, 1)] == colors[(2, 2)] == colors[(3, 3)]
    assert colors[(0, 0)] != colors[(1, 1)]


def test_diagonal_colors_vertex_transitive():
    G = nx.cycle_graph(5)
    colors, _ = k_tuple_colors(G, 2)
    assert len({colors[(v, v)] for v in G.nodes()}) == 1


# --- contract violations ---

@pytest.mark.parametrize("k", [0, -1, True, 1.5])
def test_invalid_k(k):
    with pytest.raises(ValueError):
        k_wl(nx.path_graph(3), k)


@pytest.mark.parametrize("iterations", [0, -1, -5, False, 2.0])
def test_invalid_iterations(iterations):
    with pytest.raises(ValueError):
        k_wl(nx.path_graph(3), 1, iterations)
    with pytest.raises(ValueError):
        k_tuple_colors(nx.path_graph(3), 2, iterations)
